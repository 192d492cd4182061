# tests/test_review.py
from dataclasses import replace

from studyiq.entries import get_entries_by_file, update_entry
from studyiq.importer import import_pairs
from studyiq.review import get_weak_entries, count_mistakes_in_range


def _miss(tmp_db, entry, wrong, attempts):
    update_entry(tmp_db, replace(entry, wrong_count=wrong, attempt_count=attempts))


def test_get_weak_entries_empty(vocab_file, tmp_db):
    assert get_weak_entries(tmp_db) == []  # nothing answered yet


def test_get_weak_entries_sorted_worst_first(vocab_file, tmp_db):
    entries = get_entries_by_file(tmp_db, vocab_file.id)
    _miss(tmp_db, entries[0], 1, 4)
    _miss(tmp_db, entries[5], 3, 3)
    _miss(tmp_db, entries[9], 1, 1)
    weak = get_weak_entries(tmp_db)
    assert [w["entry_id"] for w in weak] == [entries[5].id, entries[9].id, entries[0].id]
    assert weak[0]["error_rate"] == 100.0
    assert weak[2]["error_rate"] == 25.0
    assert weak[0]["file_name"] == "vocab.txt"


def test_get_weak_entries_min_wrong(vocab_file, tmp_db):
    entries = get_entries_by_file(tmp_db, vocab_file.id)
    _miss(tmp_db, entries[0], 1, 1)
    _miss(tmp_db, entries[1], 2, 2)
    weak = get_weak_entries(tmp_db, min_wrong=2)
    assert [w["entry_id"] for w in weak] == [entries[1].id]


def test_get_weak_entries_by_file(vocab_file, tmp_db):
    other = import_pairs(tmp_db, "other.txt", [("x1", "y1"), ("x2", "y2")])
    _miss(tmp_db, get_entries_by_file(tmp_db, vocab_file.id)[0], 1, 1)
    _miss(tmp_db, get_entries_by_file(tmp_db, other.id)[0], 1, 1)
    weak = get_weak_entries(tmp_db, file_id=other.id)
    assert len(weak) == 1
    assert weak[0]["file_id"] == other.id


def test_get_weak_entries_limit(vocab_file, tmp_db):
    for entry in get_entries_by_file(tmp_db, vocab_file.id):
        _miss(tmp_db, entry, 1, 1)
    assert len(get_weak_entries(tmp_db, limit=5)) == 5


def test_count_mistakes_in_range(vocab_file, tmp_db):
    entries = get_entries_by_file(tmp_db, vocab_file.id)
    for i in (0, 4, 12):
        _miss(tmp_db, entries[i], 1, 1)
    assert count_mistakes_in_range(tmp_db, vocab_file.id, 1, 10) == 2
    assert count_mistakes_in_range(tmp_db, vocab_file.id, 11, 25) == 1
    assert count_mistakes_in_range(tmp_db, vocab_file.id, 6, 10) == 0
