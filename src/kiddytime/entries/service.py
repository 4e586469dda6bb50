from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..common.datetime_utils import utc_now_iso
from ..common.validators import optional_bool, optional_time, require_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..migration.legacy import is_legacy_entry, migrate_time_entry
from .model import TimeEntry, TimeSegment, blank_entry
from .repository import EntryRepository


def parse_segments(raw_segments: Any) -> List[TimeSegment]:
    if not isinstance(raw_segments, list):
        raise ValidationError("segments doit être une liste")
    segments: List[TimeSegment] = []
    for i, raw in enumerate(raw_segments, start=1):
        if not isinstance(raw, dict):
            raise ValidationError("segments contient un élément invalide")
        segments.append(
            TimeSegment(
                id=str(raw.get("id") or i),
                arrival_time=optional_time(raw.get("arrivalTime"), "Heure d'arrivée"),
                leaving_time=optional_time(raw.get("leavingTime"), "Heure de départ"),
            )
        )
    return segments


def _apply_fields(entry: TimeEntry, payload: Dict[str, Any]) -> TimeEntry:
    changes: Dict[str, Any] = {}
    if "segments" in payload:
        changes["segments"] = parse_segments(payload["segments"])
    if "isAbsent" in payload:
        is_absent = payload["isAbsent"]
        if not isinstance(is_absent, bool):
            raise ValidationError("isAbsent doit être vrai ou faux")
        changes["is_absent"] = is_absent
    if "absenceReason" in payload:
        reason = payload["absenceReason"]
        if reason is not None and not isinstance(reason, str):
            raise ValidationError("absenceReason doit être un texte")
        changes["absence_reason"] = (reason or "").strip()
    if "hasMeal" in payload:
        changes["has_meal"] = optional_bool(payload["hasMeal"], "hasMeal")
    if "hasSnack" in payload:
        changes["has_snack"] = optional_bool(payload["hasSnack"], "hasSnack")
    if "notes" in payload:
        changes["notes"] = payload["notes"] or ""
    return entry.with_updates(**changes)


class EntryService:
    """Use case: read and upsert daily attendance entries."""

    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def list_for_range(self, start_date: Optional[str], end_date: Optional[str]) -> Sequence[TimeEntry]:
        if not start_date or not end_date:
            raise ValidationError("startDate et endDate requis")
        return self._entries.list_by_date_range(start_date, end_date)

    def get_entry(self, child_id: str, date: str) -> TimeEntry:
        entry = self._entries.get_for_child_and_date(child_id, date)
        if not entry:
            raise NotFoundError("Entrée non trouvée")
        return entry

    def save_entry(self, payload: Dict[str, Any]) -> TimeEntry:
        """Create or fully replace the entry of (childId, date)."""
        child_id = payload.get("childId")
        date = payload.get("date")
        if not child_id or not date:
            raise ValidationError("childId et date requis")
        require_iso_date(date, "date")

        if is_legacy_entry(payload):
            payload = migrate_time_entry(payload)
        entry = _apply_fields(blank_entry(str(child_id), date), payload)
        return self._store(entry)

    def update_entry(self, child_id: str, date: str, payload: Dict[str, Any]) -> TimeEntry:
        """Merge the given fields onto the stored entry, or onto a blank one."""
        require_iso_date(date, "date")
        base = self._entries.get_for_child_and_date(child_id, date) or blank_entry(child_id, date)
        entry = _apply_fields(base, payload)
        return self._store(entry)

    def _store(self, entry: TimeEntry) -> TimeEntry:
        entry = entry.normalized().with_updates(updated_at=utc_now_iso())
        self._entries.upsert(entry)
        return entry
