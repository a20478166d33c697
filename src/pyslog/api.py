"""Public API surface for pyslog."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Mapping, Tuple

from .config.loader import load_configuration
from .config.schema import SyslogConfig
from .core.levels import Severity
from .core.manager import GLOBAL_MANAGER, Writer


def configure(config: SyslogConfig | Mapping[str, Any] | None = None, **options: Any) -> None:
    """Configure or re-configure the process-wide syslog connection.

    ``config`` may be a ready :class:`SyslogConfig`, in which case ``options``
    replace individual fields. Otherwise ``config`` and ``options`` are
    layered over the configuration loaded from files and the environment.
    Raises :class:`~pyslog.core.validation.ConfigurationError` or
    :class:`~pyslog.handlers.syslog.SyslogConnectError` on failure, leaving
    any previous connection in place.
    """

    if isinstance(config, SyslogConfig):
        resolved = dataclasses.replace(config, **options) if options else config
    else:
        overrides = dict(config or {})
        overrides.update(options)
        resolved = load_configuration(overrides)
    GLOBAL_MANAGER.configure(resolved)


def shutdown() -> None:
    """Close the current connection; later messages use the fallback logger."""

    GLOBAL_MANAGER.shutdown()


def current_writer() -> Writer | None:
    return GLOBAL_MANAGER.current_writer()


def set_fallback_logger(logger: logging.Logger | None) -> None:
    """Replace the logger receiving messages that cannot go to syslog.

    Passing ``None`` restores the default console logger.
    """

    GLOBAL_MANAGER.set_fallback_logger(logger)


def emit(severity: Severity, message: str) -> None:
    GLOBAL_MANAGER.emit(severity, message)


def sprint(*args: object) -> str:
    """Join operands, adding a space between two adjacent non-strings."""

    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


def sprintf(fmt: str, *args: object) -> str:
    """Apply printf-style formatting, also without arguments (``%%`` becomes ``%``).

    A bad format string never raises. Without arguments it is returned as
    is; otherwise the format and its arguments are rendered side by side.
    """

    values: object = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        return f"{fmt} {args!r}" if args else fmt


def _emitters(severity: Severity) -> Tuple[Callable[..., None], Callable[..., None]]:
    label = severity.name

    def plain(*args: object) -> None:
        GLOBAL_MANAGER.emit(severity, sprint(*args))

    def formatted(fmt: str, *args: object) -> None:
        GLOBAL_MANAGER.emit(severity, sprintf(fmt, *args))

    plain.__name__ = plain.__qualname__ = label.lower()
    plain.__doc__ = f"Send a syslog message with severity LOG_{label}."
    formatted.__name__ = formatted.__qualname__ = f"{label.lower()}f"
    formatted.__doc__ = f"Send a printf-style formatted syslog message with severity LOG_{label}."
    return plain, formatted


emerg, emergf = _emitters(Severity.EMERG)
alert, alertf = _emitters(Severity.ALERT)
crit, critf = _emitters(Severity.CRIT)
err, errf = _emitters(Severity.ERR)
warning, warningf = _emitters(Severity.WARNING)
notice, noticef = _emitters(Severity.NOTICE)
info, infof = _emitters(Severity.INFO)
debug, debugf = _emitters(Severity.DEBUG)
