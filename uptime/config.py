"""
Runtime settings.

Read from an optional YAML file, e.g.

    db_path: docs/db.json
    fast_retry_seconds: 60
    user_agent: "Uptime Monitor/1.0"

then overridden by UPTIME_DB, UPTIME_FAST_RETRY and UPTIME_USER_AGENT.
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from typing import Optional

import yaml

from .engine import FAST_RETRY_SECONDS
from .probes import DEFAULT_USER_AGENT
from .store import DEFAULT_DB_PATH

DEFAULT_CONFIG_FILE = "uptime.yml"


class ConfigError(RuntimeError):
    pass


@dataclass
class Settings:
    db_path: str = DEFAULT_DB_PATH
    fast_retry_seconds: int = FAST_RETRY_SECONDS
    user_agent: str = DEFAULT_USER_AGENT


def _read_yaml(path: pathlib.Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return data


def _as_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def load_settings(config_path: Optional[str] = None) -> Settings:
    """An explicit config_path (or UPTIME_CONFIG) must exist; uptime.yml is optional."""
    explicit = config_path or os.getenv("UPTIME_CONFIG")
    path = pathlib.Path(explicit or DEFAULT_CONFIG_FILE)
    if explicit and not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    data = _read_yaml(path) if path.exists() else {}

    settings = Settings(
        db_path=str(data.get("db_path", DEFAULT_DB_PATH)),
        fast_retry_seconds=_as_int("fast_retry_seconds", data.get("fast_retry_seconds", FAST_RETRY_SECONDS)),
        user_agent=str(data.get("user_agent", DEFAULT_USER_AGENT)),
    )

    env = os.environ
    if env.get("UPTIME_DB"):
        settings.db_path = env["UPTIME_DB"]
    if env.get("UPTIME_FAST_RETRY"):
        settings.fast_retry_seconds = _as_int("UPTIME_FAST_RETRY", env["UPTIME_FAST_RETRY"])
    if env.get("UPTIME_USER_AGENT"):
        settings.user_agent = env["UPTIME_USER_AGENT"]
    return settings
