"""Shuffle and 1-based range helpers."""
import random
import re

from studyiq.models import Range

RANGE_PATTERN = re.compile(r"^(\d+)\s*[-:]\s*(\d+)$")


def shuffle(items, rng: random.Random | None = None) -> list:
    """Return a shuffled copy of ``items``; the input is left untouched."""
    copy = list(items)
    (rng or random).shuffle(copy)
    return copy


def clamp_range(start: int, end: int, maximum: int) -> tuple[int, int]:
    """Clamp a 1-based inclusive range to ``1..maximum``.

    The end never falls below the start, so an empty pool (``maximum == 0``)
    gives a degenerate ``(start, start)`` range that slices to nothing.
    """
    safe_start = max(1, start)
    safe_end = max(safe_start, min(end, maximum))
    return safe_start, safe_end


def parse_range(text: str | None, fallback_start: int = 1, fallback_end: int = 10) -> Range:
    """Parse free text like ``"1-50"`` or ``"11 : 20"`` into a Range.

    Anything else, including a zero start or a reversed range, yields the
    fallback pair.
    """
    fallback = Range(fallback_start, fallback_end)
    cleaned = (text or "").strip()
    match = RANGE_PATTERN.match(cleaned)
    if not match:
        return fallback
    start, end = int(match.group(1)), int(match.group(2))
    if start <= 0 or end < start:
        return fallback
    return Range(start, end)
