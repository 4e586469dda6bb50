"""Upgrade records written by earlier versions to the segmented schema.

Old entries carried a single `arrivalTime`/`leavingTime` pair; old children
had neither meal/snack policy nor weekday schedule. Migration only backfills
fields, it never drops data.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..core.constants import DEFAULT_ARRIVAL_TIME, DEFAULT_EXPECTED_DAYS, DEFAULT_LEAVING_TIME

log = logging.getLogger(__name__)


def migrate_time_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    if isinstance(entry.get("segments"), list):
        return entry

    migrated = {k: v for k, v in entry.items() if k not in ("arrivalTime", "leavingTime")}
    migrated.update(
        {
            "segments": [
                {
                    "id": "1",
                    "arrivalTime": entry.get("arrivalTime") or None,
                    "leavingTime": entry.get("leavingTime") or None,
                }
            ],
            "isAbsent": False,
            "absenceReason": "",
            "hasMeal": None,
            "hasSnack": None,
            "notes": entry.get("notes") or "",
        }
    )
    return migrated


def migrate_child(child: Dict[str, Any]) -> Dict[str, Any]:
    migrated = dict(child)
    if migrated.get("hasMeal") is None:
        migrated["hasMeal"] = True
    if migrated.get("hasSnack") is None:
        migrated["hasSnack"] = True
    if migrated.get("expectedDays") is None:
        migrated["expectedDays"] = list(DEFAULT_EXPECTED_DAYS)
    if migrated.get("absentDays") is None:
        migrated["absentDays"] = []
    if not migrated.get("defaultSegments"):
        migrated["defaultSegments"] = [
            {
                "id": "1",
                "arrivalTime": migrated.get("defaultArrivalTime") or DEFAULT_ARRIVAL_TIME,
                "leavingTime": migrated.get("defaultLeavingTime") or DEFAULT_LEAVING_TIME,
                "days": list(migrated["expectedDays"]),
            }
        ]
    return migrated


def is_legacy_entry(item: Dict[str, Any]) -> bool:
    return "arrivalTime" in item and not isinstance(item.get("segments"), list)


def is_legacy_child(item: Dict[str, Any]) -> bool:
    return bool(item.get("name")) and "hasMeal" not in item


def needs_migration(data: Any) -> bool:
    if not isinstance(data, list):
        return False
    return any(isinstance(item, dict) and (is_legacy_entry(item) or is_legacy_child(item)) for item in data)


def migrate_collection(kind: str, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Migrate every record of a "children" or "entries" collection."""
    if kind == "entries":
        out = [migrate_time_entry(item) for item in items]
    elif kind == "children":
        out = [migrate_child(item) for item in items]
    else:
        raise ValueError(f"Unknown collection kind: {kind!r}")
    log.info("Migrated %d %s records", len(out), kind)
    return out
