"""pyslog public API."""

from .api import (
    alert,
    alertf,
    configure,
    crit,
    critf,
    current_writer,
    debug,
    debugf,
    emerg,
    emergf,
    emit,
    err,
    errf,
    info,
    infof,
    notice,
    noticef,
    set_fallback_logger,
    shutdown,
    warning,
    warningf,
)
from .config.schema import SyslogConfig
from .core.facility import Facility, FacilityError, parse_facility
from .core.levels import Severity
from .core.validation import ConfigurationError
from .handlers.bridge import SyslogBridgeHandler
from .handlers.syslog import SyslogConnectError
from .version import __version__

__all__ = [
    "configure",
    "shutdown",
    "current_writer",
    "set_fallback_logger",
    "emit",
    "emerg",
    "emergf",
    "alert",
    "alertf",
    "crit",
    "critf",
    "err",
    "errf",
    "warning",
    "warningf",
    "notice",
    "noticef",
    "info",
    "infof",
    "debug",
    "debugf",
    "parse_facility",
    "Facility",
    "FacilityError",
    "Severity",
    "SyslogConfig",
    "ConfigurationError",
    "SyslogConnectError",
    "SyslogBridgeHandler",
    "__version__",
]
