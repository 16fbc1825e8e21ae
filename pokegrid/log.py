from __future__ import annotations

import logging
import sys

from pokegrid import config


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the project's console handler attached once."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(config.LOG_LEVEL)
    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(config.LOG_LEVEL)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
