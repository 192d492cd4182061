"""File and category store."""
import logging
from datetime import datetime

from studyiq.db import get_connection
from studyiq.models import StudyFile

logger = logging.getLogger(__name__)


def add_category(db_path: str, name: str) -> int:
    """Create a category if it does not exist yet and return its id."""
    conn = get_connection(db_path)
    conn.execute("INSERT OR IGNORE INTO categories (name) VALUES (?)", (name,))
    conn.commit()
    row = conn.execute("SELECT id FROM categories WHERE name = ?", (name,)).fetchone()
    conn.close()
    return row["id"]


def get_all_categories(db_path: str) -> list[str]:
    conn = get_connection(db_path)
    rows = conn.execute("SELECT name FROM categories ORDER BY name").fetchall()
    conn.close()
    return [r["name"] for r in rows]


def add_file(db_path: str, name: str, category: str = "") -> StudyFile:
    if category:
        add_category(db_path, category)
    conn = get_connection(db_path)
    cur = conn.execute(
        "INSERT INTO files (name, category, created_at) VALUES (?, ?, ?)",
        (name, category, datetime.now().isoformat()),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM files WHERE id = ?", (cur.lastrowid,)).fetchone()
    conn.close()
    return StudyFile.from_row(row)


def get_file_by_id(db_path: str, file_id: int) -> StudyFile | None:
    conn = get_connection(db_path)
    row = conn.execute("SELECT * FROM files WHERE id = ?", (file_id,)).fetchone()
    conn.close()
    return StudyFile.from_row(row) if row else None


def get_files_by_category(db_path: str, category: str) -> list[StudyFile]:
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT * FROM files WHERE category = ? ORDER BY id", (category,)
    ).fetchall()
    conn.close()
    return [StudyFile.from_row(r) for r in rows]


def get_all_files(db_path: str) -> list[StudyFile]:
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM files ORDER BY id").fetchall()
    conn.close()
    return [StudyFile.from_row(r) for r in rows]


def save_file_pointer(db_path: str, file_id: int, pointer: int) -> None:
    """Record where the next sequential session should resume. Unknown ids are ignored."""
    conn = get_connection(db_path)
    cur = conn.execute(
        "UPDATE files SET sequence_pointer = ? WHERE id = ?", (pointer, file_id)
    )
    conn.commit()
    conn.close()
    if cur.rowcount:
        logger.info("File %d will resume at position %d", file_id, pointer)


def delete_file_and_content(db_path: str, file_id: int) -> int:
    """Delete a file and all of its entries. Returns the number of entries removed."""
    conn = get_connection(db_path)
    removed = conn.execute("DELETE FROM entries WHERE source_file = ?", (file_id,)).rowcount
    conn.execute("DELETE FROM files WHERE id = ?", (file_id,))
    conn.commit()
    conn.close()
    logger.info("Deleted file %d with %d entries", file_id, removed)
    return removed
