#!/usr/bin/env python3
"""Settings loader for namesmith's YAML configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = Path(os.environ.get("NAMESMITH_CONFIG_DIR", PACKAGE_ROOT / "configs"))
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=4)
def load_yaml_config(filename: str) -> dict:
    """Load a YAML file from the config directory."""
    path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Missing config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data or {}


def load_app_config() -> dict:
    return load_yaml_config(APP_CONFIG_PATH.name)


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def require_setting(path: str) -> Any:
    """Like get_setting, but a missing value is a configuration error."""
    value = get_setting(path)
    if value is None:
        raise ValueError(f"{path} must be set in app.yaml")
    return value


__all__ = [
    "load_yaml_config",
    "load_app_config",
    "get_setting",
    "require_setting",
    "CONFIG_DIR",
    "APP_CONFIG_PATH",
]
