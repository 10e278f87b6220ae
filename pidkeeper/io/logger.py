"""Logging configuration for pidkeeper."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "pidkeeper"
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(process)d - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Route pidkeeper's log records to stderr and, optionally, a file.

    Safe to call more than once; handlers from a previous call are replaced.
    The file handler records the PID of every line, since several processes
    (the daemon and whoever stops it) may share one log.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to append logs to
    """
    numeric_level = logging.getLevelName(level.upper())
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stdout belongs to the lifecycle reporter
    console_handler = RichHandler(
        console=Console(stderr=True),
        level=numeric_level,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        show_time=False,
        show_path=False,
    )
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
