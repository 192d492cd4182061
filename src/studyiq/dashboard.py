"""Study dashboard statistics."""
from studyiq.db import get_connection
from studyiq.history import calc_accuracy

WEAK_WORD_THRESHOLD = 2


def get_accuracy_label(score: float) -> str:
    if score >= 80:
        return "STRONG"
    elif score >= 65:
        return "GOOD"
    elif score >= 50:
        return "NEEDS WORK"
    return "WEAK"


def get_accuracy_color(score: float) -> str:
    if score >= 80:
        return "green"
    elif score >= 65:
        return "yellow"
    elif score >= 50:
        return "dark_orange"
    return "red"


def get_study_stats(db_path: str) -> dict:
    conn = get_connection(db_path)
    files = conn.execute("SELECT COUNT(*) FROM files").fetchone()[0]
    entries = conn.execute("SELECT COUNT(*) FROM entries").fetchone()[0]
    row = conn.execute(
        "SELECT COUNT(*) as quizzes, SUM(correct) as c, SUM(total) as t FROM quiz_history"
    ).fetchone()
    weak = conn.execute(
        "SELECT COUNT(*) FROM entries WHERE wrong_count >= ?", (WEAK_WORD_THRESHOLD,)
    ).fetchone()[0]
    conn.close()
    return {
        "total_files": files,
        "total_entries": entries,
        "total_attempts": row["quizzes"],
        "accuracy": calc_accuracy(row["c"] or 0, row["t"] or 0),
        "weak_words": weak,
    }


def get_file_progress(db_path: str) -> list[dict]:
    """Per-file sequential progress and mistake counts."""
    conn = get_connection(db_path)
    rows = conn.execute(
        """SELECT f.id, f.name, f.category, f.entry_count, f.sequence_pointer,
            SUM(CASE WHEN e.wrong_count > 0 THEN 1 ELSE 0 END) as missed,
            SUM(CASE WHEN e.attempt_count > 0 THEN 1 ELSE 0 END) as attempted
        FROM files f
        LEFT JOIN entries e ON e.source_file = f.id
        GROUP BY f.id
        ORDER BY f.id"""
    ).fetchall()
    conn.close()
    results = []
    for r in rows:
        total = r["entry_count"] or 0
        covered = min(total, max(0, (r["sequence_pointer"] or 1) - 1))
        results.append({
            "file_id": r["id"],
            "name": r["name"],
            "category": r["category"],
            "entry_count": total,
            "sequence_pointer": r["sequence_pointer"],
            "coverage": round(covered / total * 100, 1) if total else 0.0,
            "missed": r["missed"] or 0,
            "attempted": r["attempted"] or 0,
        })
    return results
