"""
Logging setup for the ``biost`` logger namespace.

The package itself never installs handlers; applications call
:func:`setup_logging` once to route ``biost.*`` records to stdout and,
optionally, to a file.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "biost"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``biost`` logger and return it.

    Parameters
    ----------
    level : int
        Threshold for the logger and its handlers, e.g. ``logging.DEBUG``.
    log_file : str, optional
        Path of a file to write records to as well (overwritten, UTF-8).

    Notes
    -----
    Handlers from an earlier call are dropped first, so calling this more
    than once does not duplicate records.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)

    logger.debug("Logging initialized.")
    return logger
