# tests/test_log.py
import logging

from rich.logging import RichHandler

from studyiq.log import setup_logging


def test_setup_logging_installs_single_rich_handler():
    logger = setup_logging("DEBUG")
    setup_logging("DEBUG")
    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logging_env_level(monkeypatch):
    monkeypatch.setenv("STUDYIQ_LOG_LEVEL", "error")
    assert setup_logging().level == logging.ERROR


def test_setup_logging_unknown_level_falls_back():
    assert setup_logging("chatty").level == logging.WARNING
