"""
Check-and-update engine.

Walks the service list in order, probes the services that are due and
folds each result into status and the rolling stats windows. Services are
probed one at a time; a probe blocks for at most its own timeout.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List

from .log import log, warn
from .probes import DEFAULT_USER_AGENT, ProbeResult, check_host, check_url
from .stats import record_probe

FAST_RETRY_SECONDS = 60


def target_label(config: dict) -> str:
    port = config.get("port")
    return f"{config.get('address')}:{port}" if port else f"{config.get('address')}"


def is_due(service: Dict[str, Any], now: int, fast_retry_seconds: int = FAST_RETRY_SECONDS) -> bool:
    """Due once checkInterval has passed, or after fast_retry_seconds while down."""
    status = service["status"]
    elapsed = now - (status.get("lastCheck") or 0)
    if elapsed >= service["config"]["checkInterval"]:
        return True
    return not status["isUp"] and elapsed >= fast_retry_seconds


def probe(config: dict, user_agent: str = DEFAULT_USER_AGENT) -> ProbeResult:
    timeout_ms = config["timeout"] * 1000
    if config.get("type") == "url":
        return check_url(config["address"], timeout_ms, user_agent=user_agent)
    return check_host(config["address"], config.get("port"), timeout_ms)


def check_service(service: Dict[str, Any], clock: Callable[[], float] = time.time,
                  user_agent: str = DEFAULT_USER_AGENT) -> ProbeResult:
    """Probe one service and update its status and stats in place."""
    config = service["config"]
    label = target_label(config)
    log(f"Checking {label}...")

    result = probe(config, user_agent)
    now = int(clock())

    status = service["status"]
    status["lastResultDuration"] = result.duration
    status["lastCheck"] = now
    status["isUp"] = result.ok

    record_probe(service.setdefault("stats", {}), result.ok, now)

    log(f"{label} - {'UP' if result.ok else 'DOWN'} ({result.duration}ms)")
    if not result.ok:
        warn(f"SERVICE DOWN: {label}")
    return result


def run_checks(services: List[Dict[str, Any]], clock: Callable[[], float] = time.time,
               fast_retry_seconds: int = FAST_RETRY_SECONDS,
               user_agent: str = DEFAULT_USER_AGENT) -> int:
    """Check every due service; returns how many checks ran."""
    executed = 0
    for service in services:
        if not is_due(service, int(clock()), fast_retry_seconds):
            continue
        check_service(service, clock, user_agent)
        executed += 1
    return executed
