"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables prefixed with
    ``EXPENSETRACKER_``. The settings are cached so validation happens once
    per process; call ``get_settings.cache_clear()`` after changing the
    environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker model."""

    environment: str = Field(
        "development",
        description="Free-form label naming the deployment environment.",
    )
    log_level: str = Field(
        "INFO",
        description="Name of the root logging level, e.g. DEBUG or WARNING.",
    )

    class Config:
        env_prefix = "EXPENSETRACKER_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Accept level names in any casing and reject unknown ones."""

        name = str(value).strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(f"Unsupported log level: {value}")
        return name

    @property
    def log_level_value(self) -> int:
        """Numeric logging level matching ``log_level``."""

        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
