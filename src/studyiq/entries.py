"""Entry store: term/meaning rows grouped by their source file."""
import logging

from studyiq.db import get_connection
from studyiq.models import Entry

logger = logging.getLogger(__name__)


def add_entry(db_path: str, file_id: int, term: str, meaning: str, category: str = "") -> Entry:
    conn = get_connection(db_path)
    cur = conn.execute(
        "INSERT INTO entries (source_file, term, meaning, category) VALUES (?, ?, ?, ?)",
        (file_id, term, meaning, category),
    )
    conn.execute("UPDATE files SET entry_count = entry_count + 1 WHERE id = ?", (file_id,))
    conn.commit()
    row = conn.execute("SELECT * FROM entries WHERE id = ?", (cur.lastrowid,)).fetchone()
    conn.close()
    return Entry.from_row(row)


def add_entries(db_path: str, file_id: int, pairs: list[tuple[str, str]], category: str = "") -> int:
    """Insert (term, meaning) pairs in order and bump the file's entry count."""
    conn = get_connection(db_path)
    conn.executemany(
        "INSERT INTO entries (source_file, term, meaning, category) VALUES (?, ?, ?, ?)",
        [(file_id, term, meaning, category) for term, meaning in pairs],
    )
    conn.execute(
        "UPDATE files SET entry_count = entry_count + ? WHERE id = ?", (len(pairs), file_id)
    )
    conn.commit()
    conn.close()
    logger.debug("Added %d entries to file %d", len(pairs), file_id)
    return len(pairs)


def get_entry(db_path: str, entry_id: int) -> Entry | None:
    conn = get_connection(db_path)
    row = conn.execute("SELECT * FROM entries WHERE id = ?", (entry_id,)).fetchone()
    conn.close()
    return Entry.from_row(row) if row else None


def get_entries_by_file(db_path: str, file_id: int) -> list[Entry]:
    """Entries of one file in insertion order; range positions index into this list."""
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT * FROM entries WHERE source_file = ? ORDER BY id", (file_id,)
    ).fetchall()
    conn.close()
    return [Entry.from_row(r) for r in rows]


def get_all_entries(db_path: str) -> list[Entry]:
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM entries ORDER BY id").fetchall()
    conn.close()
    return [Entry.from_row(r) for r in rows]


def update_entry(db_path: str, entry: Entry) -> Entry:
    """Upsert an entry keyed by id. Inserting a new id counts it on its file."""
    conn = get_connection(db_path)
    exists = conn.execute("SELECT 1 FROM entries WHERE id = ?", (entry.id,)).fetchone()
    conn.execute(
        """INSERT INTO entries
            (id, source_file, term, meaning, category, wrong_count, attempt_count, last_attempted)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET
            source_file=excluded.source_file, term=excluded.term, meaning=excluded.meaning,
            category=excluded.category, wrong_count=excluded.wrong_count,
            attempt_count=excluded.attempt_count, last_attempted=excluded.last_attempted""",
        (
            entry.id, entry.source_file, entry.term, entry.meaning, entry.category,
            entry.wrong_count, entry.attempt_count, entry.last_attempted,
        ),
    )
    if exists is None:
        conn.execute(
            "UPDATE files SET entry_count = entry_count + 1 WHERE id = ?", (entry.source_file,)
        )
    conn.commit()
    conn.close()
    logger.debug(
        "Saved entry %d (attempts=%d, wrong=%d)", entry.id, entry.attempt_count, entry.wrong_count
    )
    return entry
