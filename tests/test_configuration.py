"""Mini README: Tests for environment driven settings.

Ensures the log level is read from ``EXPENSETRACKER_`` variables,
normalised, and rejected when unknown.
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from expensetracker.configuration import ExpenseTrackerSettings, get_settings


def test_defaults() -> None:
    settings = ExpenseTrackerSettings(_env_file=None)

    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO


def test_log_level_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPENSETRACKER_LOG_LEVEL", "debug")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG
    finally:
        get_settings.cache_clear()


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPENSETRACKER_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        ExpenseTrackerSettings(_env_file=None)
