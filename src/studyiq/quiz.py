"""Answer recording, quiz run state and result handling."""
import logging
import time
from dataclasses import replace
from datetime import datetime

from studyiq.entries import get_entry, update_entry
from studyiq.exceptions import EntryNotFoundError, InvalidOptionError
from studyiq.files import save_file_pointer
from studyiq.history import add_quiz_history
from studyiq.models import Entry, Question, QuizConfig, QuizResult, Range

logger = logging.getLogger(__name__)


def apply_answer(entry: Entry, is_correct: bool, now: datetime | None = None) -> Entry:
    """Return a copy of ``entry`` with one more attempt recorded.

    Attempts always go up by one; the wrong count only on a miss. Neither
    ever goes down.
    """
    return replace(
        entry,
        attempt_count=(entry.attempt_count or 0) + 1,
        wrong_count=(entry.wrong_count or 0) + (0 if is_correct else 1),
        last_attempted=(now or datetime.now()).isoformat(),
    )


def record_answer(db_path: str, question: Question, option_index: int) -> bool:
    """Score the picked option and persist the updated entry before returning."""
    if not 0 <= option_index < len(question.options):
        raise InvalidOptionError(
            f"Option {option_index} out of range for question {question.id}"
        )
    is_correct = question.options[option_index].is_correct
    # The stored counters may be newer than the question's snapshot.
    stored = get_entry(db_path, question.entry.id)
    if stored is None:
        raise EntryNotFoundError(question.entry.id)
    update_entry(db_path, apply_answer(stored, is_correct))
    return is_correct


class QuizRun:
    """Progress through one quiz: answers, score and the countdown timer."""

    def __init__(self, db_path: str, config: QuizConfig, questions: list[Question],
                 used_range: Range, total_entries: int, clock=time.monotonic):
        self.db_path = db_path
        self.config = config
        self.questions = questions
        self.used_range = used_range
        self.total_entries = total_entries
        self.correct = 0
        self.wrong_entries: list[Entry] = []
        self.current = 0
        self._clock = clock
        self._deadline = clock() + (config.timer_minutes or 5) * 60

    @property
    def time_left(self) -> int:
        return max(0, int(self._deadline - self._clock()))

    @property
    def expired(self) -> bool:
        return self.time_left <= 0

    @property
    def done(self) -> bool:
        return self.current >= len(self.questions) or self.expired

    @property
    def current_question(self) -> Question | None:
        if self.current >= len(self.questions):
            return None
        return self.questions[self.current]

    def answer(self, option_index: int) -> bool:
        question = self.current_question
        if question is None:
            raise InvalidOptionError("Quiz already finished")
        is_correct = record_answer(self.db_path, question, option_index)
        if is_correct:
            self.correct += 1
        else:
            self.wrong_entries.append(question.entry)
        self.current += 1
        return is_correct

    def finish(self) -> QuizResult:
        """Result of the run. Questions left unanswered when time ran out count as wrong."""
        total = len(self.questions)
        return QuizResult(
            total=total,
            correct=self.correct,
            wrong=total - self.correct,
            used_range=self.used_range,
            config=self.config,
            total_entries=self.total_entries,
            wrong_entries=list(self.wrong_entries),
        )


def complete_quiz(db_path: str, result: QuizResult) -> None:
    """Log the result to history and move the file's sequence pointer past a sequential run."""
    add_quiz_history(
        db_path,
        total=result.total,
        correct=result.correct,
        wrong=result.wrong,
        config=result.config.to_dict(),
    )
    logger.info(
        "Quiz finished: %d/%d correct (%d%%)", result.correct, result.total, result.accuracy
    )
    if result.config.mode == "sequential":
        save_file_pointer(db_path, result.config.file, result.used_range.end + 1)


def retest_wrong_config(result: QuizResult) -> QuizConfig:
    """Config that re-asks the missed entries of the same range."""
    return replace(
        result.config,
        mode="mistakes",
        range_start=result.used_range.start,
        range_end=result.used_range.end,
        question_count=max(1, len(result.wrong_entries)),
    )


def weak_focus_config(result: QuizResult) -> QuizConfig:
    return replace(
        result.config,
        mode="mistakes",
        range_start=result.used_range.start,
        range_end=result.used_range.end,
    )
