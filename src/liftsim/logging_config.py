"""Logging configuration helpers for liftsim.

The library is silent by default (``NullHandler`` on the package logger).
Callers opt in:

    import liftsim

    liftsim.enable_console_logging(level="DEBUG")

    # or, driven by LIFTSIM_LOGGING=INFO
    liftsim.configure_from_env()
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal, Union

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "liftsim"
ENV_LEVEL = "LIFTSIM_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _get_level(level: Union[LogLevel, int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()


def enable_console_logging(
    level: Union[LogLevel, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> None:
    """Send liftsim log records to stderr, replacing earlier handlers."""
    logger = _get_logger()
    _clear_handlers(logger)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format, datefmt=date_format))
    logger.addHandler(handler)
    logger.setLevel(_get_level(level))


def disable_logging() -> None:
    logger = _get_logger()
    _clear_handlers(logger)
    logger.setLevel(logging.WARNING)


def configure_from_env() -> bool:
    """Enable console logging when ``LIFTSIM_LOGGING`` names a level.

    Returns True when logging was enabled.
    """
    level = os.environ.get(ENV_LEVEL)
    if not level:
        return False
    enable_console_logging(level=level.upper())
    return True
