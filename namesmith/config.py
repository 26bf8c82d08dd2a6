#!/usr/bin/env python3
"""
Configuration Management
========================
Loads API keys from a .env file and the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Application configuration"""
    anthropic_api_key: Optional[str] = None

    @property
    def has_anthropic(self) -> bool:
        return bool(self.anthropic_api_key)


def load_env(env_path: Path = None) -> dict:
    """Load KEY=value pairs from a .env file (defaults to the working directory)."""
    if env_path is None:
        env_path = Path.cwd() / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text().splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip().strip('"').strip("'")

    return env_vars


def get_config(env_path: Path = None) -> Config:
    """Get configuration from .env, falling back to the process environment."""
    env = load_env(env_path)

    return Config(
        anthropic_api_key=env.get('ANTHROPIC_API_KEY') or os.environ.get('ANTHROPIC_API_KEY'),
    )
