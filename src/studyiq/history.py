"""Append-only quiz history."""
import json
import math
from datetime import datetime

from studyiq.db import get_connection


def calc_accuracy(correct: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(correct / total * 100 + 0.5)


def add_quiz_history(db_path: str, total: int, correct: int, wrong: int, config: dict,
                     timestamp: str | None = None) -> int:
    conn = get_connection(db_path)
    cur = conn.execute(
        """INSERT INTO quiz_history (timestamp, total, correct, wrong, accuracy, config)
        VALUES (?, ?, ?, ?, ?, ?)""",
        (
            timestamp or datetime.now().isoformat(),
            total, correct, wrong,
            calc_accuracy(correct, total),
            json.dumps(config),
        ),
    )
    conn.commit()
    conn.close()
    return cur.lastrowid


def get_all_quiz_history(db_path: str) -> list[dict]:
    """All history records, oldest first, with the config decoded."""
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM quiz_history ORDER BY id").fetchall()
    conn.close()
    return [
        {
            "id": r["id"],
            "timestamp": r["timestamp"],
            "total": r["total"],
            "correct": r["correct"],
            "wrong": r["wrong"],
            "accuracy": r["accuracy"],
            "config": json.loads(r["config"]) if r["config"] else {},
        }
        for r in rows
    ]
