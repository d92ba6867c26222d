from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from srcbundle.errors import ConfigError


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Load a YAML mapping. Empty files load as {}."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Could not read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass
class BundleConfig:
    encoding: str = "utf-8"
    quiet: bool = False

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "BundleConfig":
        section = raw.get("bundle")
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ConfigError("The bundle section must be a mapping")
        defaults = cls()
        return cls(
            encoding=str(section.get("encoding", defaults.encoding)),
            quiet=bool(section.get("quiet", defaults.quiet)),
        )

    @classmethod
    def from_files(cls, *paths: str | Path) -> "BundleConfig":
        """Merge the YAML files in order, later files winning, then read ``bundle:``."""
        merged: Dict[str, Any] = {}
        for path in paths:
            merged = deep_merge(merged, load_yaml(path))
        return cls.from_dict(merged)
