"""Logging setup.

The interactive session owns the screen, so records only go somewhere when a
log file is requested; otherwise the package logger gets a ``NullHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "millerview"


def configure_logging(log_file: Path | None = None, level: str = "INFO") -> logging.Logger:
    """Attach a file handler to the package logger, or silence it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
