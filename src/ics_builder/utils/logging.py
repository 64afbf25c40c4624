"""Logging configuration for the iCalendar builder."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LOGGER_NAME = "ics_builder"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the ``ics_builder`` logger.

    Console output goes to stderr unless another stream is given, so a
    calendar printed to stdout is never mixed with log lines. The file
    handler, when configured, always records DEBUG.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        stream: Console stream (default: sys.stderr)

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(numeric_level, logging.DEBUG) if log_file else numeric_level)
    logger.handlers.clear()

    logger.addHandler(
        _handler(logging.StreamHandler(stream or sys.stderr), numeric_level, CONSOLE_FORMAT)
    )
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file), logging.DEBUG, FILE_FORMAT))

    return logger
