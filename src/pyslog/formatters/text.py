"""Plain text formatter used by the fallback logger."""

from __future__ import annotations

import logging

__all__ = ["FallbackFormatter"]

_DEFAULT_FMT = "%(asctime)s %(levelname)-8s %(message)s"


class FallbackFormatter(logging.Formatter):
    """Timestamped single-line formatter for messages that missed syslog."""

    def __init__(self, *, fmt: str | None = None, datefmt: str | None = "%Y/%m/%d %H:%M:%S") -> None:
        super().__init__(fmt or _DEFAULT_FMT, datefmt=datefmt)
