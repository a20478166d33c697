"""Configuration loading pipeline."""

from __future__ import annotations

import importlib
import os
import tomllib
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, Mapping, cast

from platformdirs import user_config_dir

from .schema import SyslogConfig, build_config, default_config

try:  # pragma: no cover
    yaml_module = importlib.import_module("yaml")
except ModuleNotFoundError:  # pragma: no cover
    yaml_module = None

yaml: ModuleType | None = yaml_module


_ENV_PREFIX = "PYSLOG__"
_CONFIG_FILENAMES = ("pyslog.toml", "pyslog.yaml", "pyslog.yml")


def _load_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if yaml is None or not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        loader = getattr(yaml, "safe_load", None)
        if not callable(loader):
            return {}
        yaml_loader = cast(Callable[[Any], Any], loader)
        data = yaml_loader(fh)
    if isinstance(data, Mapping):
        return {str(key): value for key, value in data.items()}
    return {}


def _load_directory(directory: Path) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for filename in _CONFIG_FILENAMES:
        path = directory / filename
        payload = _load_toml(path) if filename.endswith(".toml") else _load_yaml(path)
        data.update(payload)
    return data


def _load_user_config() -> Dict[str, Any]:
    cfg_dir = Path(user_config_dir("pyslog"))
    if not cfg_dir.exists():
        return {}
    return _load_directory(cfg_dir)


def _load_local_config() -> Dict[str, Any]:
    return _load_directory(Path.cwd())


def _load_pyproject() -> Dict[str, Any]:
    path = Path("pyproject.toml")
    if not path.exists():
        return {}
    data = _load_toml(path)
    tool = data.get("tool", {})
    if not isinstance(tool, Mapping):
        return {}
    section = tool.get("pyslog", {})
    if isinstance(section, Mapping):
        return {str(key): value for key, value in section.items()}
    return {}


def _env_config() -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for env_key, raw_value in os.environ.items():
        if not env_key.startswith(_ENV_PREFIX):
            continue
        data[env_key[len(_ENV_PREFIX) :].lower()] = raw_value.strip()
    return data


def _merge_overrides(*mappings: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = default_config()
    for mapping in mappings:
        if mapping:
            result.update(mapping)
    return result


def load_configuration(overrides: Mapping[str, Any] | None = None) -> SyslogConfig:
    """Load configuration from supported sources in precedence order."""

    overrides = overrides or {}
    merged = _merge_overrides(
        _load_user_config(),
        _load_local_config(),
        _load_pyproject(),
        _env_config(),
        overrides,
    )
    return build_config(merged)
