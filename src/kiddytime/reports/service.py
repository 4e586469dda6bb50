from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence

from ..children.model import Child
from ..children.repository import ChildRepository
from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.enums import EntryStatus
from ..entries.derived import effective_meal, effective_snack, entry_duration, entry_status, segments_text
from ..entries.model import TimeEntry
from ..entries.repository import EntryRepository

ENTRY_HEADERS = [
    "Date",
    "Enfant",
    "Statut",
    "Segments horaires",
    "Durée totale",
    "Repas",
    "Goûter",
    "Raison absence",
    "Notes",
]

CHILD_HEADERS = [
    "Nom",
    "Heure d'arrivée par défaut",
    "Heure de départ par défaut",
    "Prend le repas",
    "Prend le goûter",
]


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: bytes


def _yes_no(value: bool) -> str:
    return "Oui" if value else "Non"


def to_csv_bytes(rows: Sequence[Sequence[str]]) -> bytes:
    """Every cell quoted, UTF-8 with BOM so spreadsheet tools keep the accents."""
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return out.getvalue().encode("utf-8-sig")


def build_entry_rows(children: Sequence[Child], entries: Sequence[TimeEntry]) -> List[List[str]]:
    """One row per (date, child) for every date that has at least one entry."""
    by_date: Dict[str, Dict[str, TimeEntry]] = {}
    for entry in entries:
        by_date.setdefault(entry.date, {})[entry.child_id] = entry

    rows: List[List[str]] = [list(ENTRY_HEADERS)]
    for day in sorted(by_date):
        label = parse_iso_date(day).strftime("%d/%m/%Y")
        for child in children:
            entry = by_date[day].get(child.id)
            if entry is None:
                rows.append(
                    [
                        label,
                        child.name,
                        EntryStatus.NOT_FILLED.value,
                        "-",
                        "-",
                        _yes_no(child.has_meal),
                        _yes_no(child.has_snack),
                        "-",
                        "-",
                    ]
                )
                continue

            rows.append(
                [
                    label,
                    child.name,
                    entry_status(entry).value,
                    segments_text(entry) or "-",
                    entry_duration(entry) or "-",
                    _yes_no(effective_meal(entry, child)),
                    _yes_no(effective_snack(entry, child)),
                    entry.absence_reason or "-",
                    entry.notes or "-",
                ]
            )
    return rows


def build_children_rows(children: Sequence[Child]) -> List[List[str]]:
    rows: List[List[str]] = [list(CHILD_HEADERS)]
    for child in children:
        rows.append(
            [
                child.name,
                child.default_arrival_time or "-",
                child.default_leaving_time or "-",
                _yes_no(child.has_meal),
                _yes_no(child.has_snack),
            ]
        )
    return rows


class ExportService:
    def __init__(self, children: ChildRepository, entries: EntryRepository):
        self._children = children
        self._entries = entries

    def export_entries(self, *, start: date, end: date) -> CsvExport:
        start_s, end_s = format_iso_date(start), format_iso_date(end)
        entries = self._entries.list_by_date_range(start_s, end_s)
        rows = build_entry_rows(self._children.list_all(), entries)
        return CsvExport(filename=f"presences_{start_s}_{end_s}.csv", content=to_csv_bytes(rows))

    def export_children(self, *, today: date) -> CsvExport:
        rows = build_children_rows(self._children.list_all())
        return CsvExport(filename=f"enfants_{format_iso_date(today)}.csv", content=to_csv_bytes(rows))
