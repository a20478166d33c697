"""Configuration schema definition for pyslog."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.facility import Facility, parse_facility
from ..core.validation import ConfigurationError

DEFAULT_CONFIG: Dict[str, Any] = {
    "network": "",
    "address": "",
    "facility": "user",
    "tag": "",
}


def default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration mapping."""

    return deepcopy(DEFAULT_CONFIG)


@dataclass(frozen=True, slots=True)
class SyslogConfig:
    """Parameters for one syslog connection.

    ``network`` selects the transport. The empty string requests the local
    syslog service over a unix socket, in which case ``address`` is ignored.
    Otherwise ``network`` is one of ``udp``, ``tcp`` (optionally suffixed with
    ``4`` or ``6``), ``unix`` or ``unixgram`` and ``address`` is either
    ``host:port`` or a socket path. ``tag`` defaults to the program name.
    """

    network: str = ""
    address: str = ""
    facility: Facility = Facility.USER
    tag: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.facility, Facility):
            object.__setattr__(self, "facility", coerce_facility(self.facility))


def coerce_facility(value: Any) -> Facility:
    """Accept a facility name, number or :class:`Facility` member."""

    if isinstance(value, Facility):
        return value
    if isinstance(value, str):
        if value.isdigit():
            return coerce_facility(int(value))
        return parse_facility(value)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Facility(value)
        except ValueError:
            raise ConfigurationError(f"Unknown syslog facility code {value}") from None
    raise ConfigurationError(f"Cannot interpret {value!r} as syslog facility")


def _to_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, DEFAULT_CONFIG[key])
    if value is None:
        return ""
    return str(value)


def build_config(data: Mapping[str, Any]) -> SyslogConfig:
    return SyslogConfig(
        network=_to_str(data, "network").lower(),
        address=_to_str(data, "address"),
        facility=coerce_facility(data.get("facility", DEFAULT_CONFIG["facility"])),
        tag=_to_str(data, "tag"),
    )
