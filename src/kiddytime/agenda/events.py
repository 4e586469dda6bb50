from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..children.model import Child
from ..entries.derived import effective_meal, effective_snack
from ..entries.model import TimeEntry

PALETTE = ("#1976d2", "#9c27b0", "#2e7d32", "#ed6c02", "#d32f2f", "#0288d1")
ABSENT_BACKGROUND = "#ef5350"
ABSENT_BORDER = "#d32f2f"


@dataclass(frozen=True)
class CalendarEvent:
    """One item of the grid calendar (FullCalendar EventInput shape)."""

    id: str
    title: str
    start: str
    background_color: str
    border_color: str
    end: Optional[str] = None
    all_day: bool = False
    text_color: str = "#fff"
    extended_props: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "start": self.start,
            "backgroundColor": self.background_color,
            "borderColor": self.border_color,
            "textColor": self.text_color,
            "extendedProps": dict(self.extended_props),
        }
        if self.all_day:
            out["allDay"] = True
        if self.end:
            out["end"] = self.end
        return out


def build_events(children: Sequence[Child], entries: Sequence[TimeEntry]) -> List[CalendarEvent]:
    """All-day event per absence, one timed event per complete segment."""
    index_by_id = {c.id: i for i, c in enumerate(children)}
    events: List[CalendarEvent] = []

    for entry in entries:
        idx = index_by_id.get(entry.child_id)
        if idx is None:
            continue
        child = children[idx]

        if entry.is_absent:
            events.append(
                CalendarEvent(
                    id=entry.id,
                    title=f"{child.name} - Absent",
                    start=entry.date,
                    all_day=True,
                    background_color=ABSENT_BACKGROUND,
                    border_color=ABSENT_BORDER,
                    extended_props={
                        "childName": child.name,
                        "absent": True,
                        "absenceReason": entry.absence_reason,
                    },
                )
            )
            continue

        color = PALETTE[idx % len(PALETTE)]
        for n, seg in enumerate(entry.segments):
            if not seg.is_complete:
                continue
            events.append(
                CalendarEvent(
                    id=f"{entry.id}-segment-{n}",
                    title=child.name,
                    start=f"{entry.date}T{seg.arrival_time}:00",
                    end=f"{entry.date}T{seg.leaving_time}:00",
                    background_color=color,
                    border_color=color,
                    extended_props={
                        "childName": child.name,
                        "segment": n + 1,
                        "totalSegments": len(entry.segments),
                        "hasMeal": effective_meal(entry, child),
                        "hasSnack": effective_snack(entry, child),
                        "notes": entry.notes,
                    },
                )
            )
    return events
