"""
Logging for Job Tracker AI.

A single stdout handler sits on the ``job_tracker_ai`` package logger; module
loggers are its children and propagate to it, so every pipeline stage shares
one format and one level (LOG_LEVEL).
"""

import logging
import sys
from typing import Optional

from job_tracker_ai.config import LOG_LEVEL

PACKAGE_LOGGER_NAME = "job_tracker_ai"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_HANDLER_NAME = "job_tracker_ai.stdout"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(h.get_name() == _HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)
        package_logger.setLevel(LOG_LEVEL)
    return package_logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Logger for a module; names outside the package are nested under it."""
    _configure_package_logger()
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
