"""Logger setup shared by the whole package."""

from __future__ import annotations

import logging

from src.config import LOG_LEVEL, LOGGER_NAME


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return the package logger.

    The first call attaches a stream handler; later calls reuse it, so
    importing modules can all call this at import time.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL.upper())

    return logger
