"""
Rolling statistics windows.

Each window is the dict stored under service["stats"][name]. The same
procedures run for every window; only the retention differs.
"""

from __future__ import annotations

import math
from typing import Dict, Optional

DAY = 24 * 60 * 60

# Retention per window in seconds; None means the window never resets.
WINDOWS: Dict[str, Optional[int]] = {
    "allTime": None,
    "30d": 30 * DAY,
    "365d": 365 * DAY,
}

# Only these windows carry a stored uptime percentage.
UPTIME_WINDOWS = ("30d", "365d")


def uptime_percent(successful: int, total: int) -> float:
    """One-decimal percentage, rounding halves up; 100.0 when nothing was counted."""
    if total <= 0:
        return 100.0
    return math.floor(successful / total * 1000 + 0.5) / 10


def reset_if_expired(window: dict, now: int, retention: Optional[int]) -> bool:
    if retention is None:
        return False
    if window.get("lastReset", 0) < now - retention:
        window["total"] = 0
        window["successful"] = 0
        window["lastReset"] = now
        return True
    return False


def count_probe(window: dict, up: bool) -> None:
    window["total"] = window.get("total", 0) + 1
    if up:
        window["successful"] = window.get("successful", 0) + 1


def refresh_uptime(window: dict) -> None:
    window["uptime"] = uptime_percent(window.get("successful", 0), window.get("total", 0))


def record_probe(stats: dict, up: bool, now: int) -> None:
    """Reset expired windows, then count one probe in all of them and recompute uptime."""
    for name, retention in WINDOWS.items():
        window = stats.setdefault(name, {"total": 0, "successful": 0})
        reset_if_expired(window, now, retention)
        count_probe(window, up)
        if name in UPTIME_WINDOWS:
            refresh_uptime(window)
