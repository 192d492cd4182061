"""Data classes for the quiz domain model."""
import math
from dataclasses import dataclass, field
from typing import Optional

TERM_TO_MEANING = "term_to_meaning"
MEANING_TO_TERM = "meaning_to_term"

MODES = ("sequential", "random", "mistakes")
DIFFICULTIES = ("easy", "medium", "hard")


@dataclass
class Entry:
    id: int
    term: str
    meaning: str
    source_file: int
    category: str = ""
    wrong_count: int = 0
    attempt_count: int = 0
    last_attempted: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "Entry":
        return cls(
            id=row["id"],
            term=row["term"],
            meaning=row["meaning"],
            source_file=row["source_file"],
            category=row["category"] or "",
            wrong_count=row["wrong_count"] or 0,
            attempt_count=row["attempt_count"] or 0,
            last_attempted=row["last_attempted"],
        )


@dataclass
class StudyFile:
    id: int
    name: str
    category: str = ""
    entry_count: int = 0
    sequence_pointer: int = 1

    @classmethod
    def from_row(cls, row) -> "StudyFile":
        return cls(
            id=row["id"],
            name=row["name"],
            category=row["category"] or "",
            entry_count=row["entry_count"] or 0,
            sequence_pointer=row["sequence_pointer"] or 1,
        )


@dataclass(frozen=True)
class Range:
    start: int
    end: int


@dataclass
class QuizConfig:
    file: int
    mode: str = "sequential"
    difficulty: str = "medium"
    question_count: int = 10
    range_start: int = 1
    range_end: int = 10
    category: str = ""
    timer_minutes: int = 5

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "mode": self.mode,
            "difficulty": self.difficulty,
            "question_count": self.question_count,
            "range_start": self.range_start,
            "range_end": self.range_end,
            "category": self.category,
            "timer_minutes": self.timer_minutes,
        }


@dataclass
class Option:
    text: str
    is_correct: bool


@dataclass
class Question:
    id: int
    prompt: str
    direction: str
    options: list[Option]
    entry: Entry

    @property
    def correct_option(self) -> Option:
        return next(o for o in self.options if o.is_correct)


@dataclass
class QuizSession:
    questions: list[Question]
    used_range: Range
    source_count: int


@dataclass
class QuizResult:
    total: int
    correct: int
    wrong: int
    used_range: Range
    config: QuizConfig
    total_entries: int
    wrong_entries: list[Entry] = field(default_factory=list)

    @property
    def accuracy(self) -> int:
        """Rounded percentage of correct answers, 0 for an empty quiz."""
        if self.total == 0:
            return 0
        return math.floor(self.correct / self.total * 100 + 0.5)
