"""Syslog facility codes and name parsing."""

from __future__ import annotations

from enum import IntEnum
from logging.handlers import SysLogHandler

from .validation import ConfigurationError

__all__ = ["Facility", "FacilityError", "parse_facility"]

_FACILITY_PREFIX = "LOG_"


class FacilityError(ConfigurationError):
    """Raised when a facility name cannot be recognised."""


class Facility(IntEnum):
    """Standard syslog facilities as described by FreeBSD ``man syslog``."""

    KERN = SysLogHandler.LOG_KERN
    USER = SysLogHandler.LOG_USER
    MAIL = SysLogHandler.LOG_MAIL
    DAEMON = SysLogHandler.LOG_DAEMON
    AUTH = SysLogHandler.LOG_AUTH
    SYSLOG = SysLogHandler.LOG_SYSLOG
    LPR = SysLogHandler.LOG_LPR
    NEWS = SysLogHandler.LOG_NEWS
    UUCP = SysLogHandler.LOG_UUCP
    CRON = SysLogHandler.LOG_CRON
    AUTHPRIV = SysLogHandler.LOG_AUTHPRIV
    FTP = SysLogHandler.LOG_FTP
    LOCAL0 = SysLogHandler.LOG_LOCAL0
    LOCAL1 = SysLogHandler.LOG_LOCAL1
    LOCAL2 = SysLogHandler.LOG_LOCAL2
    LOCAL3 = SysLogHandler.LOG_LOCAL3
    LOCAL4 = SysLogHandler.LOG_LOCAL4
    LOCAL5 = SysLogHandler.LOG_LOCAL5
    LOCAL6 = SysLogHandler.LOG_LOCAL6
    LOCAL7 = SysLogHandler.LOG_LOCAL7


def parse_facility(facility: str) -> Facility:
    """Convert the textual name of a syslog facility into a :class:`Facility`.

    Parsing is case insensitive and the ``LOG_`` prefix is optional, so
    ``"LOG_LOCAL3"``, ``"local3"`` and ``"Local3"`` are all accepted.
    """

    name = facility.upper().removeprefix(_FACILITY_PREFIX)
    try:
        return Facility[name]
    except KeyError:
        raise FacilityError(f"cannot parse {facility!r} as syslog facility") from None
