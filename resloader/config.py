"""Configuration loading for resloader (.resloader.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".resloader.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class RootConfig:
    """A named loader root declared in .resloader.yml."""

    name: str
    path: Path


@dataclass
class NativeConfig:
    """Native library lookup overrides."""

    search_paths: Optional[List[str]] = None


@dataclass
class LoggingConfig:
    """Logging preferences for the CLI."""

    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class LoaderConfig:
    """Represents the settings defined in .resloader.yml."""

    root: Path
    roots: List[RootConfig] = field(default_factory=list)
    native: NativeConfig = field(default_factory=NativeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def find_root(self, name: str) -> Optional[RootConfig]:
        for entry in self.roots:
            if entry.name == name:
                return entry
        return None


def load_config(config_path: Path) -> LoaderConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    base = config_file.parent.resolve()

    if not config_file.exists():
        return LoaderConfig(root=base)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    roots: List[RootConfig] = []
    raw_roots = data.get("roots")
    if raw_roots is not None and not isinstance(raw_roots, list):
        raise ConfigError("'roots' must be a list of {name, path} mappings")
    for index, raw in enumerate(raw_roots or []):
        entry = _as_dict(raw)
        name = _as_str(entry.get("name"))
        path = _as_str(entry.get("path"))
        if not name or not path:
            raise ConfigError(f"roots[{index}] requires both 'name' and 'path'")
        roots.append(RootConfig(name=name, path=(base / path).resolve()))

    native_data = _as_dict(data.get("native"))
    native = NativeConfig()
    if "search_paths" in native_data:
        native.search_paths = _as_str_list(native_data.get("search_paths"))

    logging_data = _as_dict(data.get("logging"))
    log_file = _as_str(logging_data.get("log_file"))
    logging_config = LoggingConfig(
        verbose=_as_bool(logging_data.get("verbose")) or False,
        log_file=base / log_file if log_file else None,
    )

    return LoaderConfig(root=base, roots=roots, native=native, logging=logging_config)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "LoaderConfig",
    "LoggingConfig",
    "NativeConfig",
    "RootConfig",
    "load_config",
]
