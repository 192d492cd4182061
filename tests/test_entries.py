# tests/test_entries.py
from dataclasses import replace

from studyiq.db import init_db
from studyiq.entries import (
    add_entry, add_entries, get_entry, get_entries_by_file, get_all_entries, update_entry,
)
from studyiq.files import add_file, get_file_by_id
from studyiq.models import Entry


def test_add_entry_bumps_file_count(tmp_db):
    init_db(tmp_db)
    f = add_file(tmp_db, "notes.txt", "Bio")
    entry = add_entry(tmp_db, f.id, "mitosis", "cell division", "Bio")
    assert entry.id > 0
    assert entry.source_file == f.id
    assert entry.wrong_count == 0
    assert get_file_by_id(tmp_db, f.id).entry_count == 1


def test_add_entries_keeps_order(tmp_db):
    init_db(tmp_db)
    f = add_file(tmp_db, "notes.txt")
    add_entries(tmp_db, f.id, [("c", "3rd"), ("a", "1st"), ("b", "2nd")])
    entries = get_entries_by_file(tmp_db, f.id)
    assert [e.term for e in entries] == ["c", "a", "b"]
    assert get_file_by_id(tmp_db, f.id).entry_count == 3


def test_get_entries_by_file_isolates_files(tmp_db):
    init_db(tmp_db)
    f1 = add_file(tmp_db, "one.txt")
    f2 = add_file(tmp_db, "two.txt")
    add_entries(tmp_db, f1.id, [("a", "x"), ("b", "y")])
    add_entries(tmp_db, f2.id, [("c", "z")])
    assert [e.term for e in get_entries_by_file(tmp_db, f1.id)] == ["a", "b"]
    assert [e.term for e in get_entries_by_file(tmp_db, f2.id)] == ["c"]
    assert len(get_all_entries(tmp_db)) == 3


def test_get_entries_by_unknown_file(tmp_db):
    init_db(tmp_db)
    assert get_entries_by_file(tmp_db, 42) == []


def test_get_entry_missing(tmp_db):
    init_db(tmp_db)
    assert get_entry(tmp_db, 1) is None


def test_update_entry_overwrites(tmp_db):
    init_db(tmp_db)
    f = add_file(tmp_db, "notes.txt")
    entry = add_entry(tmp_db, f.id, "a", "b")
    update_entry(tmp_db, replace(entry, wrong_count=2, attempt_count=3, last_attempted="2024-01-01T00:00:00"))
    stored = get_entry(tmp_db, entry.id)
    assert stored.wrong_count == 2
    assert stored.attempt_count == 3
    assert stored.last_attempted == "2024-01-01T00:00:00"


def test_update_entry_is_idempotent(tmp_db):
    init_db(tmp_db)
    f = add_file(tmp_db, "notes.txt")
    entry = replace(add_entry(tmp_db, f.id, "a", "b"), attempt_count=1)
    update_entry(tmp_db, entry)
    update_entry(tmp_db, entry)
    assert get_entry(tmp_db, entry.id).attempt_count == 1
    assert len(get_entries_by_file(tmp_db, f.id)) == 1
    assert get_file_by_id(tmp_db, f.id).entry_count == 1


def test_update_entry_new_id_counts_on_file(tmp_db):
    init_db(tmp_db)
    f = add_file(tmp_db, "notes.txt")
    update_entry(tmp_db, Entry(id=42, term="new", meaning="fresh", source_file=f.id))
    assert get_entry(tmp_db, 42).term == "new"
    assert get_file_by_id(tmp_db, f.id).entry_count == 1
    update_entry(tmp_db, Entry(id=42, term="new", meaning="renamed", source_file=f.id))
    assert get_file_by_id(tmp_db, f.id).entry_count == 1
