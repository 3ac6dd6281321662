#!/usr/bin/env python3
"""
Uptime monitor CLI.

Usage from a scheduled job, for example:

  uptime check --db docs/db.json

checks every due service and rewrites docs/db.json if anything was probed.

  uptime report --output STATUS.md

writes a Markdown snapshot without touching the document.
"""

import argparse
import time
from pathlib import Path
from typing import Optional

from .config import ConfigError, Settings, load_settings
from .engine import run_checks
from .log import die, log
from .report import render_markdown
from .store import StoreError, load_services, save_services


def cmd_check(settings: Settings) -> int:
    log("Starting uptime checks...")
    services = load_services(settings.db_path)

    executed = run_checks(
        services,
        fast_retry_seconds=settings.fast_retry_seconds,
        user_agent=settings.user_agent,
    )

    if executed:
        save_services(settings.db_path, services)
        log("Database updated successfully")
        log(f"Uptime checks completed and data saved ({executed} checked)")
    else:
        log("No checks needed at this time")
    return 0


def cmd_report(settings: Settings, output: Optional[str]) -> int:
    services = load_services(settings.db_path)
    markdown = render_markdown(services, int(time.time()))
    if output:
        out = Path(output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(markdown, encoding="utf-8")
        log(f"Wrote status report to: {out}")
    else:
        print(markdown)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uptime",
        description="Probe services and keep rolling uptime stats in a JSON document",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--db", default=None, help="Path to the service document (default: docs/db.json)")
    common.add_argument("--config", default=None, help="YAML settings file (default: uptime.yml if present)")

    subparsers.add_parser("check", parents=[common], help="Probe due services and save the results.")
    p_report = subparsers.add_parser("report", parents=[common], help="Render a Markdown status snapshot.")
    p_report.add_argument("--output", default=None, help="Write the report here instead of stdout")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.db:
            settings.db_path = args.db

        if args.command == "check":
            return cmd_check(settings)
        return cmd_report(settings, args.output)
    except (ConfigError, StoreError) as e:
        die(str(e))
    except Exception as e:
        die(f"Error during uptime check: {e!r}")


if __name__ == "__main__":
    raise SystemExit(main())
