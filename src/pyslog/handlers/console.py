"""Console fallback logger used when syslog is unavailable."""

from __future__ import annotations

import logging
import sys
import threading

from ..core.levels import register_notice_level
from ..formatters.text import FallbackFormatter

__all__ = ["FALLBACK_LOGGER_NAME", "build_fallback_logger"]

FALLBACK_LOGGER_NAME = "pyslog"

_build_lock = threading.Lock()


def build_fallback_logger(name: str = FALLBACK_LOGGER_NAME) -> logging.Logger:
    """Return the fallback logger, attaching a stderr handler on first use.

    The logger accepts every level and does not propagate, so messages that
    miss syslog reach the console exactly once.
    """

    register_notice_level()
    logger = logging.getLogger(name)
    with _build_lock:
        if not logger.handlers:
            handler = logging.StreamHandler(stream=sys.stderr)
            handler.setFormatter(FallbackFormatter())
            logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
    return logger
