"""Interval arithmetic on "HH:mm" time strings.

Meal and snack participation is derived from whether any presence segment
overlaps a fixed window of the day. Overlap is strict: a segment ending
exactly when the window starts (or starting exactly when it ends) does not
count.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from ..core.constants import LUNCH_WINDOW, SNACK_WINDOW
from ..core.exceptions import ValidationError


class SegmentLike(Protocol):
    arrival_time: Optional[str]
    leaving_time: Optional[str]


def time_to_minutes(value: Optional[str]) -> Optional[int]:
    """Convert "HH:mm" into minutes since midnight; empty values give None."""
    if not value:
        return None
    try:
        hours_s, minutes_s = value.split(":")
        return int(hours_s) * 60 + int(minutes_s)
    except ValueError:
        raise ValidationError(f"Heure invalide: {value!r}") from None


def segment_bounds(segment: SegmentLike) -> Optional[tuple[int, int]]:
    arrival = time_to_minutes(segment.arrival_time)
    leaving = time_to_minutes(segment.leaving_time)
    if arrival is None or leaving is None:
        return None
    return arrival, leaving


def is_present_during(segments: Iterable[SegmentLike], start_minutes: int, end_minutes: int) -> bool:
    for seg in segments:
        bounds = segment_bounds(seg)
        if bounds is None:
            continue
        arrival, leaving = bounds
        if arrival < end_minutes and leaving > start_minutes:
            return True
    return False


def should_have_meal(segments: Iterable[SegmentLike]) -> bool:
    return is_present_during(segments, *LUNCH_WINDOW)


def should_have_snack(segments: Iterable[SegmentLike]) -> bool:
    return is_present_during(segments, *SNACK_WINDOW)


def total_duration_minutes(segments: Iterable[SegmentLike]) -> int:
    total = 0
    for seg in segments:
        bounds = segment_bounds(seg)
        if bounds is None:
            continue
        arrival, leaving = bounds
        if leaving > arrival:
            total += leaving - arrival
    return total


def format_duration(minutes: int) -> Optional[str]:
    """Format minutes as "5h00"; zero means there is no duration to show."""
    if minutes <= 0:
        return None
    return f"{minutes // 60}h{minutes % 60:02d}"


def total_duration(segments: Iterable[SegmentLike]) -> Optional[str]:
    return format_duration(total_duration_minutes(segments))
