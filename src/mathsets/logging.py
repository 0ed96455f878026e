"""Logging setup for command line runs."""

from __future__ import annotations

import logging
import sys
from logging import Formatter, StreamHandler

FORMAT = "%(levelname)s\t%(filename)s:%(lineno)d %(message)s"
LOGGER_NAMES = ("mathsets", "__main__")


class LogColors:
    RESET = "\033[0m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BRIGHT_RED = "\033[91m"


class ColorFormatter(Formatter):
    """Formatter that colors the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: LogColors.CYAN,
        logging.INFO: LogColors.GREEN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.BRIGHT_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            record.levelname = color + levelname + LogColors.RESET
        try:
            return super().format(record)
        finally:
            # Other handlers see the same record.
            record.levelname = levelname


def setup_logging(level: int | str = logging.WARNING, format: str = FORMAT) -> None:
    """Attach one stderr handler to the package and script loggers."""
    handler = StreamHandler()
    formatter: Formatter
    if sys.stderr.isatty():
        formatter = ColorFormatter(format)
    else:
        formatter = Formatter(format)
    handler.setFormatter(formatter)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
