import pytest

from studyiq.db import init_db
from studyiq.importer import import_pairs
from studyiq.models import Entry


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_studyiq.db")
    return db_path


@pytest.fixture
def make_entries():
    """Factory for in-memory entries with ids 1..n; ``wrong`` lists ids with a miss."""
    def _make(n, wrong=(), source_file=1):
        return [
            Entry(
                id=i,
                term=f"term{i}",
                meaning=f"meaning number {i}",
                source_file=source_file,
                wrong_count=1 if i in wrong else 0,
                attempt_count=1 if i in wrong else 0,
            )
            for i in range(1, n + 1)
        ]
    return _make


@pytest.fixture
def vocab_file(tmp_db):
    """An initialized database holding one file of 25 term/meaning pairs."""
    init_db(tmp_db)
    pairs = [(f"word{i}", f"definition of word {i}") for i in range(1, 26)]
    return import_pairs(tmp_db, "vocab.txt", pairs, category="English")
