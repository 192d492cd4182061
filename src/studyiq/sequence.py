"""Sequential study progression through a file's entries."""
from dataclasses import replace

from studyiq.files import get_file_by_id
from studyiq.models import QuizConfig, QuizResult, Range, StudyFile


def next_sequential_range(current_end: int, question_count: int, total: int) -> Range | None:
    """The window that follows ``current_end``, or None once the file is exhausted.

    Windows tile ``1..total`` without gaps or overlap and never wrap around.
    """
    next_start = current_end + 1
    if next_start > total:
        return None
    next_end = min(total, next_start + question_count - 1)
    return Range(next_start, next_end)


def suggest_range(study_file: StudyFile, question_count: int) -> Range:
    """Default setup range: from the file's pointer, at least ten positions wide."""
    start = study_file.sequence_pointer or 1
    end = max(start, start + max(question_count - 1, 9))
    return Range(start, end)


def plan_continue_sequence(db_path: str, result: QuizResult) -> tuple[QuizConfig, bool]:
    """Config for the next sequential window after ``result``.

    Returns ``(config, exhausted)``. When the file has no further window the
    config restarts at position 1 and ``exhausted`` is True.
    """
    config = result.config
    study_file = get_file_by_id(db_path, config.file)
    total = (study_file.entry_count if study_file else 0) or result.total_entries
    following = next_sequential_range(result.used_range.end, config.question_count, total)
    if following is None:
        restart = replace(config, range_start=1, range_end=max(1, config.question_count))
        return restart, True
    return replace(
        config, mode="sequential", range_start=following.start, range_end=following.end
    ), False
