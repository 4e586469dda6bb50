from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import js_weekday
from ..core.constants import DEFAULT_ARRIVAL_TIME, DEFAULT_EXPECTED_DAYS, DEFAULT_LEAVING_TIME


@dataclass(frozen=True)
class DefaultTimeBlock:
    """A default arrival/leaving pair applying to some weekdays (Sunday=0)."""

    id: str
    arrival_time: str
    leaving_time: str
    days: List[int] = field(default_factory=lambda: list(DEFAULT_EXPECTED_DAYS))

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "DefaultTimeBlock":
        return cls(
            id=str(raw.get("id") or "1"),
            arrival_time=raw.get("arrivalTime") or DEFAULT_ARRIVAL_TIME,
            leaving_time=raw.get("leavingTime") or DEFAULT_LEAVING_TIME,
            days=sorted(set(raw.get("days") or [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "arrivalTime": self.arrival_time,
            "leavingTime": self.leaving_time,
            "days": list(self.days),
        }


@dataclass(frozen=True)
class Child:
    """Domain entity: a child with its default schedule and meal/snack policy.

    `default_segments` is the canonical description of default times; the
    legacy `default_arrival_time`/`default_leaving_time` pair mirrors the first
    block so older clients keep working.
    """

    id: str
    name: str
    default_arrival_time: str
    default_leaving_time: str
    has_meal: bool = True
    has_snack: bool = True
    expected_days: List[int] = field(default_factory=lambda: list(DEFAULT_EXPECTED_DAYS))
    default_segments: List[DefaultTimeBlock] = field(default_factory=list)
    absent_days: List[str] = field(default_factory=list)
    photo_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def is_expected_on(self, day: date) -> bool:
        return js_weekday(day) in self.expected_days

    def default_segments_for(self, day: date) -> List[DefaultTimeBlock]:
        weekday = js_weekday(day)
        return [b for b in self.default_segments if weekday in b.days]

    def with_updates(self, **changes: Any) -> "Child":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Child":
        blocks = [DefaultTimeBlock.from_dict(b) for b in raw.get("defaultSegments") or []]
        expected = raw.get("expectedDays")
        return cls(
            id=str(raw["id"]),
            name=raw.get("name", ""),
            default_arrival_time=raw.get("defaultArrivalTime") or (blocks[0].arrival_time if blocks else DEFAULT_ARRIVAL_TIME),
            default_leaving_time=raw.get("defaultLeavingTime") or (blocks[0].leaving_time if blocks else DEFAULT_LEAVING_TIME),
            has_meal=_flag(raw.get("hasMeal")),
            has_snack=_flag(raw.get("hasSnack")),
            expected_days=sorted(set(expected)) if expected is not None else list(DEFAULT_EXPECTED_DAYS),
            default_segments=blocks,
            absent_days=list(raw.get("absentDays") or []),
            photo_url=raw.get("photoUrl"),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "defaultArrivalTime": self.default_arrival_time,
            "defaultLeavingTime": self.default_leaving_time,
            "hasMeal": self.has_meal,
            "hasSnack": self.has_snack,
            "expectedDays": list(self.expected_days),
            "defaultSegments": [b.to_dict() for b in self.default_segments],
            "absentDays": list(self.absent_days),
        }
        if self.photo_url:
            out["photoUrl"] = self.photo_url
        if self.created_at:
            out["createdAt"] = self.created_at
        if self.updated_at:
            out["updatedAt"] = self.updated_at
        return out


def _flag(value: Any) -> bool:
    # Missing or null policy means the child takes it.
    return True if value is None else bool(value)
