"""Fill the data folder with three demo children and one week of entries.

Existing children and entries are replaced; the admin account is kept.
"""

from __future__ import annotations

import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from kiddytime.children.model import Child, DefaultTimeBlock
from kiddytime.common.datetime_utils import format_iso_date, utc_now_iso
from kiddytime.config import get_settings_module
from kiddytime.core.enums import AbsenceReason
from kiddytime.entries.json_entry_repository import JsonEntryRepository
from kiddytime.entries.model import TimeEntry, TimeSegment
from kiddytime.storage.json_store import JsonStore

WEEKDAYS = [1, 2, 3, 4, 5]


def _child(child_id: str, name: str, arrival: str, leaving: str, *, has_meal: bool) -> Child:
    return Child(
        id=child_id,
        name=name,
        default_arrival_time=arrival,
        default_leaving_time=leaving,
        has_meal=has_meal,
        has_snack=True,
        expected_days=list(WEEKDAYS),
        default_segments=[DefaultTimeBlock(id="1", arrival_time=arrival, leaving_time=leaving, days=list(WEEKDAYS))],
        created_at=utc_now_iso(),
    )


def _default_entry(child: Child, day: date, notes: str = "") -> TimeEntry:
    blocks = child.default_segments_for(day)
    return TimeEntry(
        child_id=child.id,
        date=format_iso_date(day),
        segments=[TimeSegment(id=b.id, arrival_time=b.arrival_time, leaving_time=b.leaving_time) for b in blocks]
        or [TimeSegment(id="1")],
        has_meal=child.has_meal,
        has_snack=child.has_snack,
        notes=notes,
    )


def _absent(child: Child, day: date, reason: AbsenceReason) -> TimeEntry:
    return TimeEntry(child_id=child.id, date=format_iso_date(day), is_absent=True, absence_reason=reason.value)


def _week_entries(children: dict[str, Child], monday: date) -> list[TimeEntry]:
    emma, lucas, lea = children["Emma"], children["Lucas"], children["Léa"]
    days = [monday + timedelta(days=i) for i in range(5)]
    out: list[TimeEntry] = []

    # Monday: normal day for everyone
    out += [_default_entry(c, days[0], "Journée normale") for c in children.values()]

    # Tuesday: Emma comes twice around a medical appointment
    out.append(
        TimeEntry(
            child_id=emma.id,
            date=format_iso_date(days[1]),
            segments=[
                TimeSegment(id="1", arrival_time="08:00", leaving_time="10:00"),
                TimeSegment(id="2", arrival_time="14:00", leaving_time="17:00"),
            ],
            has_meal=False,
            has_snack=True,
            notes="Rendez-vous médical entre 10h et 14h",
        )
    )
    out += [_default_entry(c, days[1]) for c in (lucas, lea)]

    # Wednesday: Lucas is sick
    out.append(_absent(lucas, days[2], AbsenceReason.SICK))
    out += [_default_entry(c, days[2]) for c in (emma, lea)]

    # Thursday: Léa arrives late but eats at the nursery
    out.append(
        TimeEntry(
            child_id=lea.id,
            date=format_iso_date(days[3]),
            segments=[TimeSegment(id="1", arrival_time="10:30", leaving_time="17:30")],
            has_meal=True,
            has_snack=True,
            notes="Arrivée tardive",
        )
    )
    out += [_default_entry(c, days[3]) for c in (emma, lucas)]

    # Friday: Emma on holiday, Lucas half day
    out.append(_absent(emma, days[4], AbsenceReason.HOLIDAY))
    out.append(
        TimeEntry(
            child_id=lucas.id,
            date=format_iso_date(days[4]),
            segments=[TimeSegment(id="1", arrival_time="08:30", leaving_time="12:00")],
            has_meal=False,
            has_snack=False,
            notes="Demi-journée",
        )
    )
    out.append(_default_entry(lea, days[4]))
    return out


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = JsonStore(settings.DATA_DIR)
    store.initialize()

    children = [
        _child("child-1", "Emma", "08:00", "17:00", has_meal=True),
        _child("child-2", "Lucas", "08:30", "16:30", has_meal=True),
        _child("child-3", "Léa", "09:00", "17:30", has_meal=False),
    ]
    store.children.write_all([c.to_dict() for c in children])
    store.entries.write_all([])

    today = date.today()
    monday = today - timedelta(days=today.weekday())
    entries_repo = JsonEntryRepository(store.entries)
    entries = _week_entries({c.name: c for c in children}, monday)
    for entry in entries:
        entries_repo.upsert(entry.normalized())

    print(f"OK: Seeded {len(children)} children and {len(entries)} entries -> {store.data_dir}")


if __name__ == "__main__":
    main()
