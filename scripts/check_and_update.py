#!/usr/bin/env python3
"""
Scheduled entry point: one check-and-update run against docs/db.json.

Intended for a periodic job (cron, CI schedule) that guarantees runs never
overlap. Extra arguments are passed through, e.g. --db or --config.
"""

import sys

from uptime.cli import main

if __name__ == "__main__":
    raise SystemExit(main(["check", *sys.argv[1:]]))
