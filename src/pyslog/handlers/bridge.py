"""Forward stdlib logging records into the syslog facade."""

from __future__ import annotations

import logging

from ..core.levels import Severity
from ..core.manager import GLOBAL_MANAGER, SyslogManager

__all__ = ["SyslogBridgeHandler"]


class SyslogBridgeHandler(logging.Handler):
    """Handler that routes records through :meth:`SyslogManager.emit`.

    Records produced by the manager's own fallback logger are skipped so a
    bridge attached to the root logger cannot feed messages back to itself.
    """

    def __init__(self, manager: SyslogManager | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.manager = manager or GLOBAL_MANAGER

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if record.name == self.manager.fallback_logger.name:
            return False
        return bool(super().filter(record))

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self.manager.emit(Severity.from_logging_level(record.levelno), message)
