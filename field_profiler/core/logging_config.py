"""
Logging setup for the profiler.

Library modules create their loggers with ``get_logger(__name__)`` and never
configure handlers themselves; the CLI (or an embedding application) calls
``setup_logging`` once.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from field_profiler.core.constants import LOG_FORMAT, LOG_DATE_FORMAT

ROOT_LOGGER_NAME = "field_profiler"


def setup_logging(
    level: Union[str, int] = "WARNING",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name or number (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a file that receives the same records

    Returns:
        The configured package root logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the package hierarchy."""
    return logging.getLogger(name)
