"""Which children to show on a given day.

Children scheduled on the day's weekday are "expected". A child that is not
expected but has data for the day (a time or an absence) is shown too. The
rest stay hidden until the user asks to see everyone. On top of that, any
child can be hidden for one date; this is view state only and never touches
the stored entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Sequence, Set

from ..children.model import Child
from ..common.datetime_utils import format_iso_date
from ..entries.derived import has_data
from ..entries.model import TimeEntry


@dataclass(frozen=True)
class DayPresence:
    day: date
    expected: List[Child]
    unexpected: List[Child]
    remaining: List[Child]


def classify_day(children: Sequence[Child], entries: Sequence[TimeEntry], day: date) -> DayPresence:
    day_s = format_iso_date(day)
    with_data = {e.child_id for e in entries if e.date == day_s and has_data(e)}

    expected: List[Child] = []
    unexpected: List[Child] = []
    remaining: List[Child] = []
    for child in children:
        if child.is_expected_on(day):
            expected.append(child)
        elif child.id in with_data:
            unexpected.append(child)
        else:
            remaining.append(child)
    return DayPresence(day=day, expected=expected, unexpected=unexpected, remaining=remaining)


@dataclass
class DayVisibility:
    """Children hidden per date, keyed by ISO date."""

    hidden: Dict[str, Set[str]] = field(default_factory=dict)

    def hide(self, day: date, child_id: str) -> None:
        self.hidden.setdefault(format_iso_date(day), set()).add(child_id)

    def unhide(self, day: date, child_id: str) -> None:
        day_s = format_iso_date(day)
        ids = self.hidden.get(day_s)
        if not ids:
            return
        ids.discard(child_id)
        if not ids:
            del self.hidden[day_s]

    def is_hidden(self, day: date, child_id: str) -> bool:
        return child_id in self.hidden.get(format_iso_date(day), set())

    def hidden_for(self, day: date) -> Set[str]:
        return set(self.hidden.get(format_iso_date(day), set()))


def visible_children(
    children: Sequence[Child],
    entries: Sequence[TimeEntry],
    day: date,
    *,
    visibility: DayVisibility | None = None,
    show_all: bool = False,
) -> List[Child]:
    """Children to render for `day`, in the original list order."""
    presence = classify_day(children, entries, day)
    shown = {c.id for c in presence.expected} | {c.id for c in presence.unexpected}
    if show_all:
        shown |= {c.id for c in presence.remaining}
    hidden = visibility.hidden_for(day) if visibility else set()
    return [c for c in children if c.id in shown and c.id not in hidden]
