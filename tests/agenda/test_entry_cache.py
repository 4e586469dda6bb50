from __future__ import annotations

from kiddytime.agenda.cache import EntryCache
from kiddytime.entries.model import TimeEntry, TimeSegment


def test_get_or_blank():
    cache = EntryCache()
    blank = cache.get_or_blank("c1", "2024-03-04")
    assert blank.segments == [TimeSegment(id="1")]
    assert cache.all() == []


def test_reconcile_replaces_or_appends():
    cache = EntryCache([TimeEntry(child_id="c1", date="2024-03-04")])

    cache.reconcile(TimeEntry(child_id="c1", date="2024-03-04", notes="maj"))
    cache.reconcile(TimeEntry(child_id="c2", date="2024-03-04"))

    assert [e.id for e in cache.all()] == ["c1-2024-03-04", "c2-2024-03-04"]
    assert cache.get("c1", "2024-03-04").notes == "maj"


def test_load_replaces_window():
    cache = EntryCache([TimeEntry(child_id="c1", date="2024-03-04")])
    cache.load([TimeEntry(child_id="c1", date="2024-04-01")])
    assert cache.get("c1", "2024-03-04") is None
