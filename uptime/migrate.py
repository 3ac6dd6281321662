"""
Legacy record migration.

A record without a `config` key is a legacy flat record, e.g.

    {"address": "example.com", "type": "host", "port": 443,
     "isUp": true, "lastCheck": 1700000000, "totalChecks": 12,
     "checks": {"total30d": 4, "lastReset30d": 1699000000, ...},
     "uptime": {"30d": 99.5, "365d": 99.9}}

Anything else is already in the nested {config, status, stats} shape and is
passed through untouched.

Fallbacks treat falsy stored values as missing. That means a legacy
`isUp: false` comes out as `True`, and a stored uptime of 0 comes out as
100.0. Existing documents were migrated that way, so it stays.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

DEFAULT_TIMEOUT = 5
DEFAULT_CHECK_INTERVAL = 300
DEFAULT_UPTIME = 100.0


def is_legacy(record: Dict[str, Any]) -> bool:
    return "config" not in record


def _mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def _window(checks: dict, uptime: dict, suffix: str, now: int) -> dict:
    return {
        "total": checks.get(f"total{suffix}") or 0,
        "successful": checks.get(f"successful{suffix}") or 0,
        "uptime": uptime.get(suffix) or DEFAULT_UPTIME,
        "lastReset": checks.get(f"lastReset{suffix}") or now,
    }


def migrate_service(old: Dict[str, Any], now: Optional[int] = None) -> Dict[str, Any]:
    """Map a legacy flat record onto the nested shape, defaulting missing fields."""
    if now is None:
        now = int(time.time())
    checks = _mapping(old.get("checks"))
    uptime = _mapping(old.get("uptime"))

    return {
        "config": {
            "address": old.get("address"),
            "type": old.get("type"),
            "port": old.get("port") or None,
            "timeout": old.get("timeout") or DEFAULT_TIMEOUT,
            "checkInterval": old.get("checkInterval") or DEFAULT_CHECK_INTERVAL,
        },
        "status": {
            "isUp": old.get("isUp") or True,
            "lastCheck": old.get("lastCheck") or 0,
            "lastResultDuration": old.get("lastResultDuration") or 0,
        },
        "stats": {
            "allTime": {
                "total": old.get("totalChecks") or checks.get("total") or 0,
                "successful": old.get("successfulChecks") or checks.get("successful") or 0,
            },
            "30d": _window(checks, uptime, "30d", now),
            "365d": _window(checks, uptime, "365d", now),
        },
    }


def ensure_current(record: Dict[str, Any], now: Optional[int] = None) -> Dict[str, Any]:
    if is_legacy(record):
        return migrate_service(record, now)
    return record
