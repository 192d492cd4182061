"""Multiple-choice question building from term/meaning entries."""
import random
import re

from studyiq.models import Entry, Option, Question, TERM_TO_MEANING, MEANING_TO_TERM
from studyiq.ranges import shuffle

DISTRACTOR_COUNT = 3

# Leading list markers: "1)", "[2]", "3. ", "(a)", "b)", "-", "•"
LEADING_MARKER = re.compile(
    r"^\s*(?:[(\[]?[A-Za-z]?\d+[)\]]|\d{1,2}\.(?=\s)|[(\[]?[A-Za-z][)\]]|[-–—•])\s*[-–—.:)]*\s*"
)
SURROUNDING_QUOTES = re.compile(r"^['\"“”]|['\"“”]$")
WHITESPACE = re.compile(r"\s+")
NOT_MEANINGFUL = re.compile(r"^[\d\W]+$")


def clean_option_text(text) -> str:
    """Strip list markers and quotes from option text and collapse whitespace."""
    cleaned = LEADING_MARKER.sub("", str(text if text is not None else ""), count=1)
    cleaned = SURROUNDING_QUOTES.sub("", cleaned)
    return WHITESPACE.sub(" ", cleaned).strip()


def is_meaningful_text(text) -> bool:
    if not text:
        return False
    stripped = str(text).strip()
    if len(stripped) < 2:
        return False
    return not NOT_MEANINGFUL.match(stripped)


def _side(entry: Entry, direction: str) -> str:
    """The answer side of an entry for the given direction."""
    return entry.meaning if direction == TERM_TO_MEANING else entry.term


def _prompt_side(entry: Entry, direction: str) -> str:
    return entry.term if direction == TERM_TO_MEANING else entry.meaning


def pick_distractors(
    pool: list[Entry],
    correct: Entry,
    direction: str = TERM_TO_MEANING,
    count: int = DISTRACTOR_COUNT,
    rng: random.Random | None = None,
) -> list[Entry]:
    """Sample up to ``count`` decoy entries from ``pool``.

    The target is excluded by id, not by position. Candidates whose answer
    text is not meaningful, or repeats the correct answer or an earlier
    candidate (case-insensitive), are skipped.
    """
    correct_key = clean_option_text(_side(correct, direction)).lower()
    seen = {correct_key}
    candidates = []
    for entry in pool:
        if entry.id == correct.id:
            continue
        text = clean_option_text(_side(entry, direction))
        if not is_meaningful_text(text):
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        candidates.append(entry)
    return shuffle(candidates, rng)[:count]


def build_question(
    entry: Entry,
    pool: list[Entry],
    direction: str = TERM_TO_MEANING,
    rng: random.Random | None = None,
) -> Question:
    """Build one question for ``entry`` with decoys drawn from ``pool``.

    The correct option is always present, so a pool holding only the target
    yields a single-option question.
    """
    distractors = pick_distractors(pool, entry, direction, rng=rng)

    raw_answer = _side(entry, direction)
    correct_text = clean_option_text(raw_answer) or str(raw_answer).strip()
    options = [Option(text=correct_text, is_correct=True)]
    options.extend(
        Option(text=clean_option_text(_side(d, direction)), is_correct=False)
        for d in distractors
    )

    raw_prompt = _prompt_side(entry, direction)
    prompt = clean_option_text(raw_prompt) or raw_prompt

    return Question(
        id=entry.id,
        prompt=prompt,
        direction=direction,
        options=shuffle(options, rng),
        entry=entry,
    )


def question_direction_by_difficulty(difficulty: str, index: int) -> str:
    """Direction for the ``index``-th (zero-based) selected question.

    easy never reverses, medium reverses one question in three, and hard
    alternates starting with a reversed question.
    """
    if difficulty == "easy":
        return TERM_TO_MEANING
    if difficulty == "medium":
        return MEANING_TO_TERM if index % 3 == 0 else TERM_TO_MEANING
    return MEANING_TO_TERM if index % 2 == 0 else TERM_TO_MEANING
