"""Logging configuration."""

import logging
from typing import Optional

LOGGER_PREFIX = "cai_inventory"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Get a logger for this package with a single stream handler attached."""
    logger = logging.getLogger(name or LOGGER_PREFIX)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
        # Handler is attached per logger; don't repeat records via the root
        logger.propagate = False

    return logger


def set_log_level(level: int):
    """Set the level of every logger created for this package."""
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(LOGGER_PREFIX):
            logger.setLevel(level)
