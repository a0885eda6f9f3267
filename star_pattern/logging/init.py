from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Diagnostics are printed as ``LABEL message`` with labels
DEBUG|INFO|WARN|ERROR|CRITICAL|SUMMARY. The handler writes to stderr: stdout
belongs to the prompt and the pattern and must stay byte-exact.
"""

__all__ = [
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "set_level",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "star_pattern"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prefixes each message with a short level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LabeledFormatter())
    return handler


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """Configure the ``star_pattern`` logger and return it.

    The first call attaches a single stderr handler and stops propagation to
    the root logger; later calls reuse that logger. ``level`` (name or number)
    is applied to the logger and its handler on every call; when omitted, a
    fresh logger starts at INFO and an existing one keeps its level.
    """
    global _logger

    if _logger is None:
        logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers.clear()
        logger.addHandler(_stderr_handler())
        logger.propagate = False
        _logger = logger
        if level is None:
            level = logging.INFO

    if level is not None:
        set_level(level)
    return _logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def set_level(level: int | str) -> None:
    """Set the level of the application logger and all of its handlers."""
    logger = get_logger()
    for h in logger.handlers:
        h.setLevel(level)
    logger.setLevel(level)


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
