"""Load and save the service document (a JSON array of service records)."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from .migrate import ensure_current

DEFAULT_DB_PATH = "docs/db.json"


class StoreError(RuntimeError):
    """The document is missing, unreadable, malformed, or could not be written."""


def load_services(path, now: Optional[int] = None) -> List[Dict[str, Any]]:
    p = Path(path)
    if not p.exists():
        raise StoreError(f"Database file not found: {p}")

    try:
        services = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise StoreError(f"Database corrupted: {e}") from e

    if not isinstance(services, list):
        raise StoreError("Invalid database structure: top level must be a list")
    for i, service in enumerate(services):
        if not isinstance(service, dict):
            raise StoreError(f"Invalid database structure: entry {i} is not an object")

    return [ensure_current(s, now) for s in services]


def save_services(path, services: List[Dict[str, Any]]) -> None:
    """Write the whole list back; the target is replaced in one step."""
    p = Path(path)
    payload = json.dumps(services, indent=2, ensure_ascii=False)
    tmp = None
    try:
        fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", dir=str(p.parent))
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        # mkstemp creates 0600; the page server needs to read the file
        os.chmod(tmp, p.stat().st_mode & 0o777 if p.exists() else 0o644)
        os.replace(tmp, p)
    except OSError as e:
        if tmp and os.path.exists(tmp):
            os.unlink(tmp)
        raise StoreError(f"Failed to save database: {e}") from e
