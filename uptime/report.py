"""
Status report: a Markdown snapshot of the service document.

Uses the same field mapping as the status page (service label, type,
365d/30d uptime, last duration, time since last check) so the view can be
read from a terminal or attached to a CI run. Never writes the document.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, List

from .engine import target_label
from .stats import uptime_percent

PORT_NAMES = {
    53: "DNS",
    80: "HTTP",
    443: "HTTPS",
    25: "SMTP",
    587: "SMTP",
    465: "SMTPS",
    993: "IMAPS",
    995: "POP3S",
    143: "IMAP",
    110: "POP3",
}


def service_label(service: Dict[str, Any]) -> str:
    return target_label(service["config"])


def service_type(service: Dict[str, Any]) -> str:
    config = service["config"]
    if config.get("type") == "url":
        return "HTTP"
    port = config.get("port")
    return PORT_NAMES.get(port, f"Port {port}")


def all_time_uptime(service: Dict[str, Any]) -> float:
    """All-time uptime is not stored, so derive it from the counters."""
    window = service.get("stats", {}).get("allTime", {})
    return uptime_percent(window.get("successful", 0), window.get("total", 0))


def since(last_check: int, now: int) -> str:
    if not last_check:
        return "never"
    diff = now - last_check
    if diff < 60:
        return "Just now"
    if diff < 3600:
        return f"{diff // 60}m ago"
    if diff < 86400:
        return f"{diff // 3600}h ago"
    return _dt.datetime.fromtimestamp(last_check, _dt.timezone.utc).strftime("%Y-%m-%d %H:%M")


def render_markdown(services: List[Dict[str, Any]], now: int) -> str:
    up = sum(1 for s in services if s["status"]["isUp"])
    down = len(services) - up
    generated = _dt.datetime.fromtimestamp(now, _dt.timezone.utc).replace(microsecond=0)

    lines: List[str] = []
    lines.append("# Service Status")
    lines.append("")
    lines.append(f"_Generated: **{generated.isoformat().replace('+00:00', 'Z')}**_")
    lines.append("")
    lines.append(f"- ✅ Up: **{up}**")
    lines.append(f"- ❌ Down: **{down}**")
    lines.append(f"- Total services: **{len(services)}**")
    lines.append("")

    if not services:
        lines.append("> No services configured.")
        lines.append("")
        return "\n".join(lines)

    lines.append("| Status | Service | Type | 365d | 30d | All time | Response | Last check |")
    lines.append("|---|---|---|---|---|---|---|---|")
    for s in services:
        status = s["status"]
        stats = s["stats"]
        lines.append(
            f"| {'UP' if status['isUp'] else 'DOWN'} "
            f"| `{service_label(s)}` "
            f"| {service_type(s)} "
            f"| {stats['365d']['uptime']:.1f}% "
            f"| {stats['30d']['uptime']:.1f}% "
            f"| {all_time_uptime(s):.1f}% "
            f"| {status['lastResultDuration']}ms "
            f"| {since(status['lastCheck'], now)} |"
        )
    lines.append("")
    return "\n".join(lines)
