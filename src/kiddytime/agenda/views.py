"""Date windows behind the day / week / month calendar modes."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import List, Tuple

from ..core.enums import ViewMode


def _add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    # Clamp to the last day of the target month (Jan 31 + 1 month -> Feb 28/29).
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def date_range(mode: ViewMode, current: date) -> Tuple[date, date]:
    """Inclusive (start, end) shown for `current`; weeks start on Monday."""
    mode = ViewMode(mode)
    if mode == ViewMode.DAY:
        return current, current
    if mode == ViewMode.WEEK:
        start = current - timedelta(days=current.weekday())
        return start, start + timedelta(days=6)
    last_day = calendar.monthrange(current.year, current.month)[1]
    return current.replace(day=1), current.replace(day=last_day)


def display_dates(mode: ViewMode, current: date) -> List[date]:
    start, end = date_range(mode, current)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def navigate(mode: ViewMode, current: date, step: int = 1) -> date:
    """Move `step` periods forward (negative = backward)."""
    mode = ViewMode(mode)
    if mode == ViewMode.DAY:
        return current + timedelta(days=step)
    if mode == ViewMode.WEEK:
        return current + timedelta(days=7 * step)
    return _add_months(current, step)
