from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence

from ..common.validators import optional_time

_SEGMENT_BOUNDS = ("arrival_time", "leaving_time")


@dataclass(frozen=True)
class TimeSegment:
    """One contiguous presence block within a day."""

    id: str
    arrival_time: Optional[str] = None
    leaving_time: Optional[str] = None

    @property
    def has_bound(self) -> bool:
        return bool(self.arrival_time or self.leaving_time)

    @property
    def is_complete(self) -> bool:
        return bool(self.arrival_time and self.leaving_time)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "TimeSegment":
        return cls(
            id=str(raw.get("id") or "1"),
            arrival_time=raw.get("arrivalTime") or None,
            leaving_time=raw.get("leavingTime") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "arrivalTime": self.arrival_time, "leavingTime": self.leaving_time}


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: attendance of one child on one date.

    (child_id, date) is the primary key. `id` is derived from it and only
    kept on the wire for clients that index their cache by it.

    has_meal / has_snack are tri-state: None means "derive from the segments,
    then fall back to the child's default".
    """

    child_id: str
    date: str
    segments: List[TimeSegment] = field(default_factory=lambda: [TimeSegment(id="1")])
    is_absent: bool = False
    absence_reason: str = ""
    has_meal: Optional[bool] = None
    has_snack: Optional[bool] = None
    notes: str = ""
    updated_at: Optional[str] = None

    @property
    def id(self) -> str:
        return entry_id(self.child_id, self.date)

    @property
    def key(self) -> tuple[str, str]:
        return self.child_id, self.date

    def normalized(self) -> "TimeEntry":
        """Apply the absence invariant: an absent day has no times and no meal/snack flags."""
        if self.is_absent:
            return replace(
                self,
                segments=[TimeSegment(id=s.id) for s in self.segments] or [TimeSegment(id="1")],
                has_meal=None,
                has_snack=None,
            )
        if self.absence_reason:
            return replace(self, absence_reason="")
        return self

    def with_updates(self, **changes: Any) -> "TimeEntry":
        return replace(self, **changes)

    # Card edits. Each returns the full entry to upsert.

    def with_segment_time(self, segment_id: str, bound: str, value: Optional[str]) -> "TimeEntry":
        """Set `arrival_time` or `leaving_time` of one segment; an empty value clears it."""
        if bound not in _SEGMENT_BOUNDS:
            raise ValueError(f"Unknown segment bound: {bound!r}")
        value = optional_time(value, "Heure d'arrivée" if bound == "arrival_time" else "Heure de départ")
        segments = [replace(s, **{bound: value}) if s.id == segment_id else s for s in self.segments]
        return replace(self, segments=segments)

    def with_added_segment(self) -> "TimeEntry":
        return replace(self, segments=[*self.segments, TimeSegment(id=_next_segment_id(self.segments))])

    def without_segment(self, segment_id: str) -> "TimeEntry":
        """Drop one segment. The last remaining segment is never removed."""
        if len(self.segments) <= 1:
            return self
        return replace(self, segments=[s for s in self.segments if s.id != segment_id])

    def with_absence(self, is_absent: bool, reason: Optional[str] = None) -> "TimeEntry":
        if not is_absent:
            return replace(self, is_absent=False, absence_reason="")
        return replace(self, is_absent=True, absence_reason=self.absence_reason if reason is None else reason)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "TimeEntry":
        segments = raw.get("segments")
        return cls(
            child_id=str(raw["childId"]),
            date=str(raw["date"]),
            segments=[TimeSegment.from_dict(s) for s in segments] if segments is not None else [TimeSegment(id="1")],
            is_absent=bool(raw.get("isAbsent", False)),
            absence_reason=raw.get("absenceReason") or "",
            has_meal=raw.get("hasMeal"),
            has_snack=raw.get("hasSnack"),
            notes=raw.get("notes") or "",
            updated_at=raw.get("updatedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "childId": self.child_id,
            "date": self.date,
            "segments": [s.to_dict() for s in self.segments],
            "isAbsent": self.is_absent,
            "absenceReason": self.absence_reason,
            "hasMeal": self.has_meal,
            "hasSnack": self.has_snack,
            "notes": self.notes,
        }
        if self.updated_at:
            out["updatedAt"] = self.updated_at
        return out


def entry_id(child_id: str, date: str) -> str:
    return f"{child_id}-{date}"


def blank_entry(child_id: str, date: str) -> TimeEntry:
    """The entry shown for a child/day nobody has touched yet (not persisted)."""
    return TimeEntry(child_id=child_id, date=date)


def _next_segment_id(segments: Sequence[TimeSegment]) -> str:
    numeric = [int(s.id) for s in segments if s.id.isdigit()]
    return str(max(numeric, default=0) + 1)
