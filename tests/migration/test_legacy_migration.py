from __future__ import annotations

import pytest

from kiddytime.migration.legacy import migrate_child, migrate_collection, migrate_time_entry, needs_migration


def test_migrate_legacy_entry():
    old = {"id": "x", "childId": "c1", "date": "2024-01-01", "arrivalTime": "08:00", "leavingTime": "17:00"}

    new = migrate_time_entry(old)

    assert new["segments"] == [{"id": "1", "arrivalTime": "08:00", "leavingTime": "17:00"}]
    assert new["isAbsent"] is False
    assert new["hasMeal"] is None
    assert new["hasSnack"] is None
    assert new["childId"] == "c1"
    assert new["date"] == "2024-01-01"
    assert "arrivalTime" not in new


def test_migrated_entry_is_returned_unchanged():
    entry = {"id": "c1-2024-01-01", "segments": [], "isAbsent": True}
    assert migrate_time_entry(entry) is entry


def test_empty_legacy_times_become_null():
    new = migrate_time_entry({"childId": "c1", "date": "2024-01-01", "arrivalTime": "", "notes": "n"})
    assert new["segments"][0]["arrivalTime"] is None
    assert new["segments"][0]["leavingTime"] is None
    assert new["notes"] == "n"


def test_migrate_child_backfills_defaults():
    new = migrate_child({"id": "c1", "name": "Emma", "defaultArrivalTime": "08:30", "defaultLeavingTime": "16:00"})

    assert new["hasMeal"] is True
    assert new["hasSnack"] is True
    assert new["expectedDays"] == [1, 2, 3, 4, 5]
    assert new["absentDays"] == []
    assert new["defaultSegments"] == [
        {"id": "1", "arrivalTime": "08:30", "leavingTime": "16:00", "days": [1, 2, 3, 4, 5]}
    ]


def test_migrate_child_keeps_existing_values():
    child = {"id": "c1", "name": "Léa", "hasMeal": False, "hasSnack": False, "expectedDays": [3]}
    new = migrate_child(child)
    assert new["hasMeal"] is False
    assert new["hasSnack"] is False
    assert new["defaultSegments"][0]["days"] == [3]


def test_needs_migration():
    assert needs_migration([{"arrivalTime": "08:00"}]) is True
    assert needs_migration([{"segments": []}]) is False
    assert needs_migration([{"name": "Emma"}]) is True
    assert needs_migration([{"name": "Emma", "hasMeal": True}]) is False
    assert needs_migration({"arrivalTime": "08:00"}) is False
    assert needs_migration([]) is False


def test_migrate_collection_rejects_unknown_kind():
    with pytest.raises(ValueError):
        migrate_collection("users", [])
