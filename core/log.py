"""
Logging setup with labeled prefixes.

Log lines go to stderr as ``LABEL logger: message`` so they never interleave
with the Rich UI printed on stdout.
"""

import logging
import sys
from typing import Optional, Union

__all__ = [
    "ROOT_LOGGER_NAME",
    "setup_logging",
    "get_logger",
    "reset_logging",
]

ROOT_LOGGER_NAME = "prospect_intake"

_configured = False


class LabeledFormatter(logging.Formatter):
    """Prefix each message with a short level label (INFO|WARN|ERROR)."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        message = f"{level_label} {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Configure the application logger. Safe to call more than once: the handler
    is installed once and later calls only change the level.

    Args:
        level: Level name ("INFO") or number

    Returns:
        The application root logger
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(LabeledFormatter())
        logger.addHandler(handler)

        # Prevent propagation to root logger to avoid duplicate output
        logger.propagate = False
        _configured = True

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the application logger or a named child of it."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _configured
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _configured = False
