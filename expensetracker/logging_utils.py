"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - one-shot setup of the root handler and level.

Usage:
    Modules import ``get_logger`` at import time and keep a module level
    ``LOGGER``. The root logger is configured exactly once, so reloading
    modules in development does not stack duplicate handlers. When no level
    is supplied the ``log_level`` setting decides verbosity; invalid settings
    fall back to INFO with a warning instead of breaking imports.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from .configuration import get_settings

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[int] = None) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    invalid_settings: Optional[ValidationError] = None
    if level is None:
        try:
            level = get_settings().log_level_value
        except ValidationError as error:
            invalid_settings = error
            level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True

    if invalid_settings is not None:
        logging.getLogger(__name__).warning(
            "Invalid logging settings, falling back to INFO: %s", invalid_settings
        )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
