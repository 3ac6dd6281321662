import json

import pytest

NOW = 1_700_000_000


def make_service(type="host", address="example.com", port=80, check_interval=300,
                 last_check=NOW - 400, is_up=True, last_reset=NOW - 86400):
    return {
        "config": {
            "address": address,
            "type": type,
            "port": port,
            "timeout": 5,
            "checkInterval": check_interval,
        },
        "status": {"isUp": is_up, "lastCheck": last_check, "lastResultDuration": 0},
        "stats": {
            "allTime": {"total": 10, "successful": 9},
            "30d": {"total": 4, "successful": 3, "uptime": 75.0, "lastReset": last_reset},
            "365d": {"total": 8, "successful": 7, "uptime": 87.5, "lastReset": last_reset},
        },
    }


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def db_file(tmp_path):
    def write(services):
        path = tmp_path / "db.json"
        path.write_text(json.dumps(services, indent=2), encoding="utf-8")
        return path
    return write
