"""Weak entry identification for mistake review."""
from studyiq.db import get_connection


def get_weak_entries(db_path: str, file_id: int | None = None, min_wrong: int = 1,
                     limit: int = 20) -> list[dict]:
    """Entries missed at least ``min_wrong`` times (sorted worst first)."""
    query = """SELECT e.id, e.term, e.meaning, e.source_file, f.name as file_name,
            e.wrong_count, e.attempt_count
        FROM entries e
        JOIN files f ON e.source_file = f.id
        WHERE e.wrong_count >= ?"""
    params: list = [min_wrong]
    if file_id is not None:
        query += " AND e.source_file = ?"
        params.append(file_id)
    query += " ORDER BY e.wrong_count DESC, CAST(e.wrong_count AS REAL) / MAX(e.attempt_count, 1) DESC, e.id LIMIT ?"
    params.append(limit)

    conn = get_connection(db_path)
    rows = conn.execute(query, params).fetchall()
    conn.close()
    return [
        {
            "entry_id": r["id"],
            "term": r["term"],
            "meaning": r["meaning"],
            "file_id": r["source_file"],
            "file_name": r["file_name"],
            "wrong_count": r["wrong_count"],
            "attempt_count": r["attempt_count"],
            "error_rate": round((r["wrong_count"] / max(r["attempt_count"], 1)) * 100, 1),
        }
        for r in rows
    ]


def count_mistakes_in_range(db_path: str, file_id: int, start: int, end: int) -> int:
    """How many entries at 1-based positions ``start..end`` of a file have been missed."""
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT wrong_count FROM entries WHERE source_file = ? ORDER BY id LIMIT ? OFFSET ?",
        (file_id, max(0, end - start + 1), max(0, start - 1)),
    ).fetchall()
    conn.close()
    return sum(1 for r in rows if r["wrong_count"] > 0)
