"""Logging setup for the xirrcalc package."""

import logging
from typing import Optional

from .settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name, defaults to settings.log_level

    Returns:
        The ``xirrcalc`` logger
    """
    logger = logging.getLogger("xirrcalc")
    logger.setLevel((level or settings.log_level).upper())

    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
