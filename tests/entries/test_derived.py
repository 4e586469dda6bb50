from __future__ import annotations

from kiddytime.children.model import Child
from kiddytime.core.enums import EntryStatus
from kiddytime.entries.derived import (
    effective_meal,
    effective_snack,
    entry_duration,
    entry_status,
    has_data,
    segments_text,
)
from kiddytime.entries.model import TimeEntry, TimeSegment


def child(**kw):
    base = dict(id="c1", name="Emma", default_arrival_time="08:00", default_leaving_time="17:00")
    base.update(kw)
    return Child(**base)


def entry(*segments, **kw):
    return TimeEntry(child_id="c1", date="2024-03-04", segments=list(segments) or [TimeSegment(id="1")], **kw)


def test_status():
    assert entry_status(None) is EntryStatus.NOT_FILLED
    assert entry_status(entry()) is EntryStatus.NOT_FILLED
    assert entry_status(entry(is_absent=True)) is EntryStatus.ABSENT
    assert entry_status(entry(TimeSegment("1", "08:00", None))) is EntryStatus.PRESENT
    assert entry_status(entry(TimeSegment("1", "08:00", "12:00"))) is EntryStatus.LEFT
    assert (
        entry_status(entry(TimeSegment("1", "08:00", "12:00"), TimeSegment("2", "14:00", None)))
        is EntryStatus.PRESENT
    )


def test_has_data():
    assert has_data(None) is False
    assert has_data(entry()) is False
    assert has_data(entry(is_absent=True)) is True
    assert has_data(entry(TimeSegment("1", None, "12:00"))) is True


def test_explicit_flag_wins():
    e = entry(TimeSegment("1", "10:30", "12:00"), has_meal=False)
    assert effective_meal(e, child(has_meal=True)) is False


def test_auto_derivation_overrides_default():
    e = entry(TimeSegment("1", "10:30", "12:00"))
    assert effective_meal(e, child(has_meal=False)) is True


def test_default_used_when_nothing_else():
    e = entry(TimeSegment("1", "08:00", "10:00"))
    assert effective_meal(e, child(has_meal=False)) is False
    assert effective_snack(e, child(has_snack=True)) is True
    assert effective_meal(None, child(has_meal=True)) is True


def test_duration_and_text():
    e = entry(TimeSegment("1", "08:00", "12:00"), TimeSegment("2", "14:00", None))
    assert entry_duration(e) == "4h00"
    assert segments_text(e) == "08:00-12:00, 14:00-?"
    assert entry_duration(entry(is_absent=True)) is None
    assert segments_text(entry()) is None
