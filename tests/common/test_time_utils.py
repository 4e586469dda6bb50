from __future__ import annotations

import pytest

from kiddytime.common.time_utils import (
    format_duration,
    is_present_during,
    should_have_meal,
    should_have_snack,
    time_to_minutes,
    total_duration,
    total_duration_minutes,
)
from kiddytime.core.exceptions import ValidationError
from kiddytime.entries.model import TimeSegment


def seg(arrival, leaving, sid="1"):
    return TimeSegment(id=sid, arrival_time=arrival, leaving_time=leaving)


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("08:30") == 510
    assert time_to_minutes("23:59") == 1439
    assert time_to_minutes(None) is None
    assert time_to_minutes("") is None


def test_time_to_minutes_rejects_garbage():
    with pytest.raises(ValidationError):
        time_to_minutes("8h30")


def test_meal_not_counted_when_segment_ends_at_window_start():
    assert should_have_meal([seg("09:00", "11:00")]) is False


def test_meal_counted_on_partial_overlap():
    assert should_have_meal([seg("10:30", "12:00")]) is True


def test_meal_not_counted_when_segment_starts_at_window_end():
    assert should_have_meal([seg("13:00", "18:00")]) is False


def test_any_segment_is_enough():
    segments = [seg("08:00", "10:00", "1"), seg("16:00", "18:00", "2")]
    assert should_have_meal(segments) is False
    assert should_have_snack(segments) is True


def test_incomplete_segment_is_not_a_presence_signal():
    assert should_have_meal([seg("10:00", None)]) is False
    assert should_have_snack([seg(None, "16:00")]) is False


def test_is_present_during_custom_window():
    assert is_present_during([seg("07:00", "07:30")], 7 * 60, 8 * 60) is True
    assert is_present_during([], 0, 24 * 60) is False


def test_duration_sums_segments():
    segments = [seg("08:00", "10:00", "1"), seg("14:00", "17:00", "2")]
    assert total_duration_minutes(segments) == 300
    assert total_duration(segments) == "5h00"


def test_zero_and_negative_segments_contribute_nothing():
    assert total_duration([seg("08:00", "08:00")]) is None
    assert total_duration([seg("10:00", "09:00", "1"), seg("09:00", "09:45", "2")]) == "0h45"


def test_format_duration():
    assert format_duration(0) is None
    assert format_duration(61) == "1h01"
    assert format_duration(600) == "10h00"
