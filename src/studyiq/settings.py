"""User settings and the quiz defaults derived from them."""
from dataclasses import dataclass

from studyiq.db import get_connection
from studyiq.models import DIFFICULTIES, MODES


def get_setting(db_path: str, key: str, default: str = None) -> str | None:
    conn = get_connection(db_path)
    row = conn.execute("SELECT value FROM user_settings WHERE key = ?", (key,)).fetchone()
    conn.close()
    return row["value"] if row else default


def set_setting(db_path: str, key: str, value: str) -> None:
    conn = get_connection(db_path)
    conn.execute(
        "INSERT INTO user_settings (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value=?",
        (key, value, value),
    )
    conn.commit()
    conn.close()


@dataclass
class QuizDefaults:
    question_count: int = 10
    difficulty: str = "medium"
    mode: str = "sequential"
    timer_minutes: int = 5


def _positive_int(value: str | None, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def load_quiz_defaults(db_path: str) -> QuizDefaults:
    """Read quiz defaults from user settings, ignoring invalid stored values."""
    base = QuizDefaults()
    difficulty = get_setting(db_path, "difficulty", base.difficulty)
    mode = get_setting(db_path, "mode", base.mode)
    return QuizDefaults(
        question_count=_positive_int(get_setting(db_path, "question_count"), base.question_count),
        difficulty=difficulty if difficulty in DIFFICULTIES else base.difficulty,
        mode=mode if mode in MODES else base.mode,
        timer_minutes=_positive_int(get_setting(db_path, "timer_minutes"), base.timer_minutes),
    )


def save_quiz_defaults(db_path: str, defaults: QuizDefaults) -> None:
    set_setting(db_path, "question_count", str(defaults.question_count))
    set_setting(db_path, "difficulty", defaults.difficulty)
    set_setting(db_path, "mode", defaults.mode)
    set_setting(db_path, "timer_minutes", str(defaults.timer_minutes))
