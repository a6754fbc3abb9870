"""Shared logger for the calculator package."""
import logging
import sys
from typing import Union

LOGGER_NAME = "arithmetic_calculator"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _build_logger() -> logging.Logger:
    """
    Create the package logger with a single stderr handler.

    :return: Configured logger
    :rtype: logging.Logger
    """
    _logger = logging.getLogger(LOGGER_NAME)
    # Module may be reloaded, never stack handlers
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(logging.WARNING)
    return _logger


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the verbosity of the package logger.

    :param level: Logging level name ("INFO") or number (logging.INFO)
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)


logger = _build_logger()
