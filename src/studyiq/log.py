"""Logging setup shared by the CLI and library modules."""
import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int | None = None, console: Console | None = None) -> logging.Logger:
    """Configure the ``studyiq`` logger with a rich handler.

    Args:
        level: Logging level name or number. Defaults to ``STUDYIQ_LOG_LEVEL``
            or WARNING.
        console: Console to write to, so log lines interleave with CLI output.

    Returns:
        The package logger.
    """
    if level is None:
        level = os.environ.get("STUDYIQ_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("studyiq")
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if not logger.handlers:
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
