"""Syslog transport built on :class:`logging.handlers.SysLogHandler`."""

from __future__ import annotations

import logging
import os
import socket
import sys
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Callable, Dict, Tuple

from ..core.facility import Facility
from ..core.levels import Severity

__all__ = [
    "LOCAL_SOCKET_PATHS",
    "SyslogConnectError",
    "SyslogWriter",
    "connect",
]

LOCAL_SOCKET_PATHS: Tuple[str, ...] = ("/dev/log", "/var/run/syslog", "/var/run/log")
DEFAULT_PORT = 514


class SyslogConnectError(OSError):
    """Raised when a connection to the syslog service cannot be established."""


class _StrictSysLogHandler(SysLogHandler):
    """SysLogHandler that surfaces connection and send errors to the caller."""

    def createSocket(self) -> None:  # type: ignore[override]
        if isinstance(self.address, str):
            self.unixsocket = True
            self._connect_unixsocket(self.address)
        else:
            super().createSocket()

    def mapPriority(self, levelName: str) -> str:  # type: ignore[override]
        name = levelName.lower()
        if name in self.priority_names:
            return name
        return super().mapPriority(levelName)

    def handleError(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        raise


class _LineFormatter(logging.Formatter):
    """Terminate every message with exactly one newline."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        message = record.getMessage()
        return message if message.endswith("\n") else message + "\n"


class SyslogWriter:
    """One live connection to a syslog service."""

    def __init__(self, handler: SysLogHandler, *, network: str, address: str) -> None:
        self._handler = handler
        self.network = network
        self.address = address
        self.closed = False

    @property
    def facility(self) -> Facility:
        return Facility(self._handler.facility)

    def send(self, severity: Severity, message: str) -> None:
        """Deliver ``message`` at ``severity``; raises on failure."""

        if self.closed:
            raise OSError("syslog writer is closed")
        record = logging.makeLogRecord(
            {
                "name": "pyslog",
                "msg": message,
                "levelname": severity.name,
                "levelno": severity.logging_level,
            }
        )
        self._handler.handle(record)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._handler.close()

    def __repr__(self) -> str:
        target = self.address or "local"
        return f"SyslogWriter(network={self.network!r}, address={target!r})"


def _split_host_port(address: str) -> Tuple[str, int]:
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        port_str = rest.removeprefix(":")
    elif address.count(":") == 1:
        host, _, port_str = address.partition(":")
    else:
        host, port_str = address, ""
    try:
        port = int(port_str or DEFAULT_PORT)
    except ValueError:
        raise SyslogConnectError(f"invalid port in syslog address {address!r}") from None
    return host or "localhost", port


def _ident(tag: str) -> str:
    name = tag or Path(sys.argv[0] if sys.argv and sys.argv[0] else "python").name
    return f"{name}[{os.getpid()}]: "


def _build_handler(
    address: str | Tuple[str, int], facility: Facility, tag: str, socktype: int | None
) -> SysLogHandler:
    handler = _StrictSysLogHandler(address=address, facility=int(facility), socktype=socktype)
    handler.ident = _ident(tag)
    handler.append_nul = False
    handler.setFormatter(_LineFormatter())
    return handler


def _resolve(host: str, port: int, family: int, socktype: int) -> Tuple[str, int]:
    """Pin ``host`` to a numeric address of ``family``."""

    infos = socket.getaddrinfo(host, port, family, socktype)
    if not infos:
        raise OSError(f"no {socket.AddressFamily(family).name} address for {host!r}")
    sockaddr = infos[0][4]
    return str(sockaddr[0]), int(sockaddr[1])


def _dial_inet(
    socktype: int, family: int = socket.AF_UNSPEC
) -> Callable[[str, Facility, str], SysLogHandler]:
    def dial(address: str, facility: Facility, tag: str) -> SysLogHandler:
        host, port = _split_host_port(address)
        if family != socket.AF_UNSPEC:
            host, port = _resolve(host, port, family, socktype)
        return _build_handler((host, port), facility, tag, socktype)

    return dial


def _dial_unix(socktype: int) -> Callable[[str, Facility, str], SysLogHandler]:
    def dial(address: str, facility: Facility, tag: str) -> SysLogHandler:
        return _build_handler(address, facility, tag, socktype)

    return dial


NETWORK_DIALERS: Dict[str, Callable[[str, Facility, str], SysLogHandler]] = {
    "udp": _dial_inet(socket.SOCK_DGRAM),
    "udp4": _dial_inet(socket.SOCK_DGRAM, socket.AF_INET),
    "udp6": _dial_inet(socket.SOCK_DGRAM, socket.AF_INET6),
    "tcp": _dial_inet(socket.SOCK_STREAM),
    "tcp4": _dial_inet(socket.SOCK_STREAM, socket.AF_INET),
    "tcp6": _dial_inet(socket.SOCK_STREAM, socket.AF_INET6),
    "unix": _dial_unix(socket.SOCK_STREAM),
    "unixgram": _dial_unix(socket.SOCK_DGRAM),
}


def _dial_local(facility: Facility, tag: str) -> SysLogHandler:
    last_error: OSError | None = None
    for path in LOCAL_SOCKET_PATHS:
        try:
            # socktype None tries a datagram socket first, then a stream socket
            return _build_handler(path, facility, tag, None)
        except OSError as exc:
            last_error = exc
    raise SyslogConnectError(f"Unix syslog delivery error: {last_error}") from last_error


def connect(network: str, address: str, facility: Facility, tag: str) -> SyslogWriter:
    """Open a connection to a syslog service.

    An empty ``network`` selects the local syslog service and ignores
    ``address``.
    """

    if not network:
        return SyslogWriter(_dial_local(facility, tag), network="", address="")

    dialer = NETWORK_DIALERS.get(network)
    if dialer is None:
        raise SyslogConnectError(f"unknown syslog network {network!r}")
    try:
        handler = dialer(address, facility, tag)
    except SyslogConnectError:
        raise
    except OSError as exc:
        raise SyslogConnectError(
            f"cannot connect to syslog over {network} at {address}: {exc}"
        ) from exc
    return SyslogWriter(handler, network=network, address=address)
