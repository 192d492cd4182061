"""Custom exceptions for StudyIQ."""


class StudyIQError(Exception):
    """Base exception for all StudyIQ errors.

    The quiz engine itself never raises; these cover the store and CLI
    boundary.
    """


class EntryNotFoundError(StudyIQError):
    """An answer was recorded for an entry id that is not in the store."""

    def __init__(self, entry_id: int):
        super().__init__(f"Entry {entry_id} not found")
        self.entry_id = entry_id


class StudyFileNotFoundError(StudyIQError):
    """A file id does not exist in the store."""

    def __init__(self, file_id: int):
        super().__init__(f"File {file_id} not found")
        self.file_id = file_id


class NoEntriesFoundError(StudyIQError):
    """An import produced no term/meaning pairs."""


class InvalidOptionError(StudyIQError):
    """An answer index does not point at one of the question's options."""
