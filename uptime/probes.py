"""
Reachability probes.

- check_host: raw TCP connect, closed as soon as it is established.
- check_url:  HTTP(S) HEAD request, 2xx/3xx counts as up.

Both always return a ProbeResult. Failures are logged and reported as
ConnectFail, never raised to the caller.
"""

import socket
import time
from dataclasses import dataclass
from typing import Optional

import requests

from .log import error

CONNECT_OK = "ConnectOK"
CONNECT_FAIL = "ConnectFail"

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_USER_AGENT = "Uptime Monitor/1.0"


@dataclass
class ProbeResult:
    duration: int
    result: str
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.result == CONNECT_OK


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def check_host(host: str, port: Optional[int], timeout_ms: int = DEFAULT_TIMEOUT_MS) -> ProbeResult:
    """Open a TCP connection to host:port and close it without sending anything."""
    start = time.monotonic()
    try:
        conn = socket.create_connection((host, port), timeout=timeout_ms / 1000)
    except socket.timeout:
        return ProbeResult(duration=timeout_ms, result=CONNECT_FAIL)
    except Exception as e:
        error(f"Host check failed for {host}:{port} - {e}")
        return ProbeResult(duration=_elapsed_ms(start), result=CONNECT_FAIL)
    duration = _elapsed_ms(start)
    conn.close()
    return ProbeResult(duration=duration, result=CONNECT_OK)


def check_url(url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS,
              user_agent: str = DEFAULT_USER_AGENT) -> ProbeResult:
    """HEAD the url; any status in [200, 400) is up."""
    start = time.monotonic()
    try:
        r = requests.head(url, headers={"User-Agent": user_agent}, timeout=timeout_ms / 1000)
    except requests.exceptions.Timeout:
        return ProbeResult(duration=timeout_ms, result=CONNECT_FAIL)
    except Exception as e:
        error(f"URL check failed for {url} - {e}")
        return ProbeResult(duration=_elapsed_ms(start), result=CONNECT_FAIL)
    duration = _elapsed_ms(start)
    result = CONNECT_OK if 200 <= r.status_code < 400 else CONNECT_FAIL
    return ProbeResult(duration=duration, result=result, status_code=r.status_code)
