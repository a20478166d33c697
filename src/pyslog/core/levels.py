"""Syslog severities and their stdlib logging counterparts."""

from __future__ import annotations

import logging
from enum import IntEnum

NOTICE_LEVEL_NAME = "NOTICE"
NOTICE_LEVEL_NUM = 25


class Severity(IntEnum):
    """Fixed syslog severities, most severe first."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def priority_name(self) -> str:
        """Name understood by :class:`logging.handlers.SysLogHandler`."""

        return self.name.lower()

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]

    @classmethod
    def from_logging_level(cls, levelno: int) -> "Severity":
        """Map a stdlib logging level number onto the closest severity."""

        if levelno >= logging.CRITICAL:
            return cls.CRIT
        if levelno >= logging.ERROR:
            return cls.ERR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= NOTICE_LEVEL_NUM:
            return cls.NOTICE
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


_LOGGING_LEVELS = {
    Severity.EMERG: logging.CRITICAL,
    Severity.ALERT: logging.CRITICAL,
    Severity.CRIT: logging.CRITICAL,
    Severity.ERR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: NOTICE_LEVEL_NUM,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}


def register_notice_level() -> None:
    """Register the NOTICE level on the stdlib logging module.

    The level is installed only once even if called repeatedly.
    """

    if logging.getLevelName(NOTICE_LEVEL_NUM) != NOTICE_LEVEL_NAME:
        logging.addLevelName(NOTICE_LEVEL_NUM, NOTICE_LEVEL_NAME)
    if not hasattr(logging, NOTICE_LEVEL_NAME):
        setattr(logging, NOTICE_LEVEL_NAME, NOTICE_LEVEL_NUM)
