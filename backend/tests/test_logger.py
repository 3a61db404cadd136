"""
Tests for logger setup.
"""
import logging

from app.config import settings
from app.utils.logger import resolve_level, setup_logger


def test_resolve_level_accepts_names_and_numbers():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_resolve_level_falls_back_to_info():
    assert resolve_level("verbose") == logging.INFO
    assert resolve_level("") == logging.INFO
    assert resolve_level(None) == logging.INFO


def test_setup_logger_uses_configured_level(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
    logger = setup_logger("test.configured")
    assert logger.level == logging.WARNING


def test_setup_logger_does_not_duplicate_handlers():
    first = setup_logger("test.handlers", level="DEBUG")
    second = setup_logger("test.handlers", level="ERROR")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.ERROR
