"""Configuration loading for the thinking server."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "default.yaml"

BUILTIN_DEFAULTS: dict[str, Any] = {
    "server": {"name": "shannon-thinking-server", "version": "0.1.0"},
    "stages": {"accept_legacy_abstraction": False},
    "render": {"enabled": True, "color": True},
    "logging": {"level": "WARNING"},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(
    override_path: Path | None = None,
    default_path: Path = DEFAULT_CONFIG_PATH,
) -> dict[str, Any]:
    """Merge built-in defaults, the shipped default file and an optional override."""
    merged = merge_dicts(BUILTIN_DEFAULTS, load_yaml(default_path))
    if override_path is not None:
        if not override_path.exists():
            raise ValueError(f"Config file not found: {override_path}")
        merged = merge_dicts(merged, load_yaml(override_path))
    return merged
