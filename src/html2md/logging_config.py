"""Logging setup for the html2md package and its command-line tool."""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "html2md"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _make_handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Set up logging configuration for html2md.

    Log records go to stderr so that stdout stays free for Markdown output.
    Calling this again without ``force`` keeps the existing handlers but
    moves them to the new level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging output
        format_string: Optional custom format string for log messages
        force: If True, replace existing handlers

    Returns:
        Configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        format_string = format_string or DEFAULT_FORMAT
        logger.addHandler(_make_handler(logging.StreamHandler(sys.stderr), numeric_level, format_string))
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            logger.addHandler(_make_handler(file_handler, numeric_level, format_string))
    else:
        for handler in logger.handlers:
            handler.setLevel(numeric_level)

    # Records are handled here only; the root logger would print them twice
    logger.propagate = False

    return logger
