"""Tests for data model classes."""
from studyiq.models import Entry, StudyFile, QuizConfig, Option, Question, QuizResult, Range


def test_entry_defaults():
    e = Entry(id=1, term="chat", meaning="cat", source_file=3)
    assert e.wrong_count == 0
    assert e.attempt_count == 0
    assert e.last_attempted is None
    assert e.category == ""


def test_entry_from_row_handles_nulls():
    row = {
        "id": 4, "term": "t", "meaning": "m", "source_file": 1, "category": None,
        "wrong_count": None, "attempt_count": None, "last_attempted": None,
    }
    e = Entry.from_row(row)
    assert e.category == ""
    assert e.wrong_count == 0
    assert e.attempt_count == 0


def test_study_file_defaults():
    f = StudyFile(id=1, name="vocab.txt")
    assert f.entry_count == 0
    assert f.sequence_pointer == 1


def test_range_is_value_object():
    assert Range(1, 10) == Range(1, 10)
    assert {Range(1, 2), Range(1, 2)} == {Range(1, 2)}


def test_quiz_config_defaults_and_dict():
    c = QuizConfig(file=2)
    assert c.mode == "sequential"
    assert c.difficulty == "medium"
    assert c.question_count == 10
    assert c.timer_minutes == 5
    assert c.to_dict()["file"] == 2
    assert set(c.to_dict()) == {
        "file", "mode", "difficulty", "question_count", "range_start",
        "range_end", "category", "timer_minutes",
    }


def test_question_correct_option():
    e = Entry(id=1, term="a", meaning="b", source_file=1)
    q = Question(id=1, prompt="a", direction="term_to_meaning", entry=e,
                 options=[Option("x", False), Option("b", True)])
    assert q.correct_option.text == "b"


def test_quiz_result_accuracy():
    c = QuizConfig(file=1)
    r = QuizResult(total=8, correct=1, wrong=7, used_range=Range(1, 8), config=c, total_entries=8)
    assert r.accuracy == 13  # 12.5 rounds half up
    assert r.wrong_entries == []


def test_quiz_result_accuracy_empty():
    c = QuizConfig(file=1)
    r = QuizResult(total=0, correct=0, wrong=0, used_range=Range(1, 1), config=c, total_entries=0)
    assert r.accuracy == 0
