"""Quiz session assembly: range selection, mode filtering and question building."""
import logging
import random

from studyiq.models import Entry, QuizSession, Range
from studyiq.questions import build_question, question_direction_by_difficulty
from studyiq.ranges import clamp_range, shuffle

logger = logging.getLogger(__name__)


def make_quiz_session(
    entries: list[Entry],
    mode: str,
    difficulty: str,
    question_count: int,
    range_start: int,
    range_end: int,
    rng: random.Random | None = None,
) -> QuizSession:
    """Assemble the ordered question list for one quiz.

    Args:
        entries: All entries of one file, in their stored order.
        mode: "sequential", "random" or "mistakes".
        difficulty: "easy", "medium" or "hard"; picks question directions.
        question_count: Upper bound on the number of questions.
        range_start: 1-based first position to consult.
        range_end: 1-based last position to consult (inclusive).
        rng: Optional random source for shuffles.

    Returns:
        QuizSession whose ``used_range`` is the clamped range that was
        consulted, independent of filtering and truncation. Distractors are
        drawn from the whole range, not just the selected entries.
    """
    safe_start, safe_end = clamp_range(range_start, range_end, len(entries))
    range_pool = entries[safe_start - 1:safe_end]

    selection = range_pool
    if mode == "mistakes":
        selection = [e for e in selection if (e.wrong_count or 0) > 0]
    elif mode == "random":
        selection = shuffle(selection, rng)

    selection = selection[:max(1, question_count)]

    questions = [
        build_question(entry, range_pool, question_direction_by_difficulty(difficulty, index), rng=rng)
        for index, entry in enumerate(selection)
    ]
    logger.debug(
        "Assembled %d %s questions from range %d-%d (%d entries in pool)",
        len(questions), mode, safe_start, safe_end, len(range_pool),
    )
    return QuizSession(
        questions=questions,
        used_range=Range(safe_start, safe_end),
        source_count=len(selection),
    )
