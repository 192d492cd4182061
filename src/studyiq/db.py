"""Database initialization and connection management."""
import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = os.environ.get(
    "STUDYIQ_DB", str(Path.home() / ".studyiq" / "studyiq.db")
)

SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS files (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    category TEXT DEFAULT '',
    entry_count INTEGER DEFAULT 0,
    sequence_pointer INTEGER DEFAULT 1,
    created_at TEXT
);

CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    source_file INTEGER NOT NULL REFERENCES files(id) ON DELETE CASCADE,
    term TEXT NOT NULL,
    meaning TEXT NOT NULL,
    category TEXT DEFAULT '',
    wrong_count INTEGER DEFAULT 0,
    attempt_count INTEGER DEFAULT 0,
    last_attempted TEXT
);

CREATE INDEX IF NOT EXISTS idx_entries_source_file ON entries(source_file);
CREATE INDEX IF NOT EXISTS idx_entries_wrong_count ON entries(wrong_count);

CREATE TABLE IF NOT EXISTS quiz_history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    timestamp TEXT NOT NULL,
    total INTEGER NOT NULL,
    correct INTEGER NOT NULL,
    wrong INTEGER NOT NULL,
    accuracy INTEGER NOT NULL,
    config TEXT
);

CREATE TABLE IF NOT EXISTS user_settings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    key TEXT NOT NULL UNIQUE,
    value TEXT
);
"""

TABLES = ("entries", "files", "categories", "quiz_history")


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Return a SQLite connection with row factory and foreign keys enabled."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_db(db_path: str = DEFAULT_DB_PATH) -> None:
    """Initialize the database, creating all tables if they don't exist."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()
    logger.debug("Database ready at %s", db_path)


def clear_all_data(db_path: str = DEFAULT_DB_PATH) -> None:
    """Delete every entry, file, category and history row. Settings are kept."""
    conn = get_connection(db_path)
    for table in TABLES:
        conn.execute(f"DELETE FROM {table}")
    conn.commit()
    conn.close()
    logger.info("Cleared all study data in %s", db_path)
