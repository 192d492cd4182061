"""Import term/meaning pairs from plain text, CSV and JSON files."""
import csv
import io
import json
import logging
import re
from pathlib import Path

from studyiq.entries import add_entries
from studyiq.exceptions import NoEntriesFoundError
from studyiq.files import add_file
from studyiq.models import StudyFile

logger = logging.getLogger(__name__)

# Separators in order of precedence: tab or spaced dash, then colon or equals,
# then a bare hyphen. "well-known - famous" keeps its hyphenated term and
# "https://example.com - homepage" keeps its URL.
SPACED_SEPARATOR = re.compile(r"^(.+?)\s*(?:\t|\s[-–—]\s)\s*(.+)$")
STRONG_SEPARATOR = re.compile(r"^(.+?)\s*[:=]\s*(.+)$")
WEAK_SEPARATOR = re.compile(r"^(.+?)\s*[-–—]\s*(.+)$")
LIST_MARKER = re.compile(r"^(?:[-*•]|\d{1,3}[.)])\s+")


def read_file_content(file_path: str) -> str:
    return Path(file_path).read_text(encoding="utf-8")


def parse_line(line: str) -> tuple[str, str] | None:
    line = LIST_MARKER.sub("", line.strip(), count=1)
    if not line:
        return None
    match = (
        SPACED_SEPARATOR.match(line)
        or STRONG_SEPARATOR.match(line)
        or WEAK_SEPARATOR.match(line)
    )
    if not match:
        return None
    term, meaning = match.group(1).strip(), match.group(2).strip()
    if not term or not meaning:
        return None
    return term, meaning


def parse_text(text: str) -> list[tuple[str, str]]:
    """Extract (term, meaning) pairs from ``term - meaning`` style lines."""
    pairs = []
    for line in text.splitlines():
        pair = parse_line(line)
        if pair:
            pairs.append(pair)
    return pairs


def parse_csv(text: str) -> list[tuple[str, str]]:
    pairs = []
    for row in csv.reader(io.StringIO(text)):
        if len(row) < 2:
            continue
        term, meaning = row[0].strip(), row[1].strip()
        if term and meaning:
            pairs.append((term, meaning))
    return pairs


def parse_json(text: str) -> list[tuple[str, str]]:
    """Accept a ``{term: meaning}`` object or a list of ``{"term", "meaning"}`` objects."""
    data = json.loads(text)
    if isinstance(data, dict):
        items = data.items()
    elif not isinstance(data, list):
        raise NoEntriesFoundError(f"Expected a JSON object or list, got {type(data).__name__}")
    else:
        items = [
            (item.get("term"), item.get("meaning"))
            for item in data
            if isinstance(item, dict)
        ]
    return [
        (str(term).strip(), str(meaning).strip())
        for term, meaning in items
        if term and meaning and str(term).strip() and str(meaning).strip()
    ]


def parse_file(file_path: str) -> list[tuple[str, str]]:
    suffix = Path(file_path).suffix.lower()
    content = read_file_content(file_path)
    if suffix == ".csv":
        return parse_csv(content)
    elif suffix == ".json":
        return parse_json(content)
    # .txt, .md and anything else: one pair per line
    return parse_text(content)


def import_pairs(db_path: str, name: str, pairs: list[tuple[str, str]], category: str = "") -> StudyFile:
    if not pairs:
        raise NoEntriesFoundError(f"No term/meaning pairs found in {name}")
    study_file = add_file(db_path, name, category)
    add_entries(db_path, study_file.id, pairs, category)
    study_file.entry_count = len(pairs)
    logger.info("Imported %d entries into %s (file %d)", len(pairs), name, study_file.id)
    return study_file


def import_file(db_path: str, file_path: str, category: str = "") -> StudyFile:
    """Import a file as a new study file. Raises NoEntriesFoundError if nothing parses."""
    return import_pairs(db_path, Path(file_path).name, parse_file(file_path), category)
