"""Console log helpers shared by every command."""

import sys

PREFIX = "[UPTIME]"


def log(msg: str):
    print(f"{PREFIX} {msg}", flush=True)


def warn(msg: str):
    print(f"{PREFIX} WARN: {msg}", file=sys.stderr, flush=True)


def error(msg: str):
    print(f"{PREFIX} ERROR: {msg}", file=sys.stderr, flush=True)


def die(msg: str, code: int = 1):
    error(msg)
    sys.exit(code)
