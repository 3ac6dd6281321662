from uptime.migrate import ensure_current, is_legacy, migrate_service

from conftest import NOW, make_service


def test_legacy_record_gets_defaults():
    out = migrate_service({"address": "example.com", "type": "host", "port": 22}, now=NOW)
    assert out == {
        "config": {"address": "example.com", "type": "host", "port": 22, "timeout": 5, "checkInterval": 300},
        "status": {"isUp": True, "lastCheck": 0, "lastResultDuration": 0},
        "stats": {
            "allTime": {"total": 0, "successful": 0},
            "30d": {"total": 0, "successful": 0, "uptime": 100.0, "lastReset": NOW},
            "365d": {"total": 0, "successful": 0, "uptime": 100.0, "lastReset": NOW},
        },
    }


def test_legacy_counters_are_carried_over():
    old = {
        "address": "https://example.com",
        "type": "url",
        "timeout": 10,
        "checkInterval": 120,
        "lastCheck": NOW - 50,
        "lastResultDuration": 42,
        "checks": {
            "total": 3, "successful": 2,
            "total30d": 5, "successful30d": 4, "lastReset30d": NOW - 100,
            "total365d": 9, "successful365d": 8, "lastReset365d": NOW - 200,
        },
        "uptime": {"30d": 80.0, "365d": 88.9},
    }
    out = migrate_service(old, now=NOW)
    assert out["config"]["port"] is None
    assert out["config"]["timeout"] == 10
    assert out["config"]["checkInterval"] == 120
    assert out["status"]["lastCheck"] == NOW - 50
    assert out["status"]["lastResultDuration"] == 42
    assert out["stats"]["allTime"] == {"total": 3, "successful": 2}
    assert out["stats"]["30d"] == {"total": 5, "successful": 4, "uptime": 80.0, "lastReset": NOW - 100}
    assert out["stats"]["365d"] == {"total": 9, "successful": 8, "uptime": 88.9, "lastReset": NOW - 200}


def test_flat_all_time_counters_win_over_nested():
    old = {"address": "a", "type": "host", "totalChecks": 7, "successfulChecks": 6,
           "checks": {"total": 1, "successful": 1}}
    assert migrate_service(old, now=NOW)["stats"]["allTime"] == {"total": 7, "successful": 6}


def test_legacy_is_up_false_migrates_to_true():
    # Falsy fallback: a stored False is treated as missing. Documents already
    # migrated this way, so the behaviour is pinned here.
    out = migrate_service({"address": "a", "type": "host", "isUp": False}, now=NOW)
    assert out["status"]["isUp"] is True


def test_current_record_passes_through_unchanged():
    current = make_service()
    assert not is_legacy(current)
    assert ensure_current(current, now=NOW) is current


def test_migration_is_idempotent():
    once = ensure_current({"address": "a", "type": "host", "port": 25}, now=NOW)
    assert ensure_current(once, now=NOW + 999) == once


def test_scalar_legacy_uptime_and_checks_fall_back_to_defaults():
    old = {"address": "a", "type": "host", "port": 1, "uptime": 99.5, "checks": 12}
    out = migrate_service(old, now=NOW)
    assert out["stats"]["allTime"] == {"total": 0, "successful": 0}
    assert out["stats"]["30d"] == {"total": 0, "successful": 0, "uptime": 100.0, "lastReset": NOW}
    assert out["stats"]["365d"] == {"total": 0, "successful": 0, "uptime": 100.0, "lastReset": NOW}
