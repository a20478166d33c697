"""Syslog manager owning the current writer and the fallback path."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from ..config.schema import SyslogConfig
from ..handlers.console import build_fallback_logger
from ..handlers.syslog import connect
from .facility import Facility
from .holder import ConnectionHolder
from .levels import Severity, register_notice_level
from .validation import validate_configuration

NO_CONNECTION_WARNING = "Log requests before pyslog.configure are sent to the fallback logger."
SEND_FAILURE_WARNING = "Error sending message to syslog: %s"


class Writer(Protocol):
    def send(self, severity: Severity, message: str) -> None: ...

    def close(self) -> None: ...


Connector = Callable[[str, str, Facility, str], Writer]


class SyslogManager:
    """Central coordinator for the syslog connection and its fallback."""

    def __init__(
        self,
        *,
        connector: Connector = connect,
        fallback: logging.Logger | None = None,
    ) -> None:
        self._holder: ConnectionHolder[Writer] = ConnectionHolder()
        self._connector = connector
        self._fallback = fallback
        self._no_connection_warned = False
        self._send_failure_warned = False

    # ------------------------------------------------------------------
    def configure(self, config: SyslogConfig) -> None:
        """Connect with ``config`` and install the result as current writer.

        Errors propagate and leave the current writer untouched.
        """

        validate_configuration(config)
        writer = self._connector(config.network, config.address, config.facility, config.tag)
        previous = self._holder.swap(writer)
        if previous is not None:
            previous.close()

    def shutdown(self) -> None:
        """Close the current writer and forget the warning state."""

        previous = self._holder.swap(None)
        if previous is not None:
            previous.close()
        self._no_connection_warned = False
        self._send_failure_warned = False

    def current_writer(self) -> Writer | None:
        return self._holder.current()

    # ------------------------------------------------------------------
    @property
    def fallback_logger(self) -> logging.Logger:
        if self._fallback is None:
            self._fallback = build_fallback_logger()
        return self._fallback

    def set_fallback_logger(self, logger: logging.Logger | None) -> None:
        if logger is not None:
            register_notice_level()
        self._fallback = logger

    # ------------------------------------------------------------------
    def emit(self, severity: Severity, message: str) -> None:
        """Send ``message`` to syslog, or to the fallback logger when that fails."""

        writer = self._holder.current()
        if writer is None:
            if not self._no_connection_warned:
                self._log_fallback(logging.WARNING, NO_CONNECTION_WARNING)
                self._no_connection_warned = True
            self._write_fallback(severity, message)
            return

        try:
            writer.send(severity, message)
        except Exception as exc:
            if not self._send_failure_warned:
                self._log_fallback(logging.WARNING, SEND_FAILURE_WARNING, exc)
                self._send_failure_warned = True
            self._write_fallback(severity, message)
            return
        self._send_failure_warned = False

    def _write_fallback(self, severity: Severity, message: str) -> None:
        self._log_fallback(severity.logging_level, "%s", message)

    def _log_fallback(self, level: int, msg: str, *args: object) -> None:
        # only handler levels apply; the logger level is not consulted
        logger = self.fallback_logger
        record = logger.makeRecord(logger.name, level, __file__, 0, msg, args, None)
        logger.handle(record)


GLOBAL_MANAGER = SyslogManager()
