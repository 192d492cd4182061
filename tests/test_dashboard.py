# tests/test_dashboard.py
from dataclasses import replace

from studyiq.db import init_db
from studyiq.entries import get_entries_by_file, update_entry
from studyiq.files import save_file_pointer
from studyiq.history import add_quiz_history
from studyiq.dashboard import (
    get_accuracy_label, get_accuracy_color, get_study_stats, get_file_progress,
)


def test_accuracy_label():
    assert get_accuracy_label(85) == "STRONG"
    assert get_accuracy_label(70) == "GOOD"
    assert get_accuracy_label(55) == "NEEDS WORK"
    assert get_accuracy_label(40) == "WEAK"


def test_accuracy_color():
    assert get_accuracy_color(90) == "green"
    assert get_accuracy_color(10) == "red"


def test_study_stats_empty(tmp_db):
    init_db(tmp_db)
    stats = get_study_stats(tmp_db)
    assert stats == {
        "total_files": 0, "total_entries": 0, "total_attempts": 0,
        "accuracy": 0, "weak_words": 0,
    }


def test_study_stats_with_data(vocab_file, tmp_db):
    add_quiz_history(tmp_db, total=10, correct=8, wrong=2, config={})
    add_quiz_history(tmp_db, total=10, correct=5, wrong=5, config={})
    entries = get_entries_by_file(tmp_db, vocab_file.id)
    update_entry(tmp_db, replace(entries[0], wrong_count=2, attempt_count=2))
    update_entry(tmp_db, replace(entries[1], wrong_count=1, attempt_count=2))
    stats = get_study_stats(tmp_db)
    assert stats["total_files"] == 1
    assert stats["total_entries"] == 25
    assert stats["total_attempts"] == 2
    assert stats["accuracy"] == 65
    assert stats["weak_words"] == 1


def test_file_progress(vocab_file, tmp_db):
    save_file_pointer(tmp_db, vocab_file.id, 11)
    entries = get_entries_by_file(tmp_db, vocab_file.id)
    update_entry(tmp_db, replace(entries[0], wrong_count=1, attempt_count=1))
    update_entry(tmp_db, replace(entries[1], attempt_count=1))
    progress = get_file_progress(tmp_db)
    assert len(progress) == 1
    p = progress[0]
    assert p["coverage"] == 40.0
    assert p["attempted"] == 2
    assert p["missed"] == 1


def test_file_progress_pointer_past_end(vocab_file, tmp_db):
    save_file_pointer(tmp_db, vocab_file.id, 26)
    assert get_file_progress(tmp_db)[0]["coverage"] == 100.0
