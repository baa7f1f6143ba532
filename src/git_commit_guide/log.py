"""Logging setup for the command line tool."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "git_commit_guide"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

_handler: logging.Handler | None = None


def resolve_level(level: str | None) -> int:
    """Translate a level name such as ``"debug"`` into a logging level.

    Unknown names fall back to INFO.
    """
    value = logging.getLevelName((level or DEFAULT_LOG_LEVEL).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str | None = None) -> logging.Logger:
    """Send the package's log records to stderr through rich.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level name, usually taken from the LOG_LEVEL variable

    Returns:
        The package logger
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(resolve_level(level))
    return logger
