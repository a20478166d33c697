"""Configuration validation helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import SyslogConfig


class ConfigurationError(ValueError):
    """Raised when configuration validation fails."""


SUPPORTED_NETWORKS = frozenset(
    {"", "udp", "udp4", "udp6", "tcp", "tcp4", "tcp6", "unix", "unixgram"}
)


def validate_configuration(config: SyslogConfig) -> None:
    """Ensure the connection parameters are consistent."""

    if config.network not in SUPPORTED_NETWORKS:
        supported = ", ".join(sorted(name for name in SUPPORTED_NETWORKS if name))
        raise ConfigurationError(
            f"Unknown syslog network {config.network!r}; expected one of: {supported}"
        )

    if config.network and not config.address:
        raise ConfigurationError(f"Network {config.network!r} requires an address")

    if not isinstance(config.tag, str):
        raise ConfigurationError(f"Tag must be a string, got {type(config.tag).__name__}")
    if "\n" in config.tag:
        raise ConfigurationError("Tag must not contain line breaks")
