from __future__ import annotations

from datetime import date

import pytest

from kiddytime.common.datetime_utils import js_weekday, utc_now_iso
from kiddytime.common.validators import optional_bool, optional_time, weekday_list
from kiddytime.core.exceptions import ValidationError


def test_optional_time():
    assert optional_time("", "x") is None
    assert optional_time("07:05", "x") == "07:05"
    for bad in ("7:05", "24:00", "12:60", 800):
        with pytest.raises(ValidationError):
            optional_time(bad, "x")


def test_optional_bool_is_tri_state():
    assert optional_bool(None, "hasMeal") is None
    assert optional_bool(False, "hasMeal") is False
    with pytest.raises(ValidationError):
        optional_bool(0, "hasMeal")


def test_weekday_list():
    assert weekday_list([5, 0, 5], "days") == [0, 5]
    with pytest.raises(ValidationError):
        weekday_list([True], "days")
    with pytest.raises(ValidationError):
        weekday_list([7], "days")


def test_js_weekday_and_timestamp():
    assert js_weekday(date(2024, 3, 3)) == 0
    assert js_weekday(date(2024, 3, 9)) == 6
    stamp = utc_now_iso()
    assert len(stamp) == 24
    assert stamp.endswith("Z")


def test_weekday_list_rejects_non_list():
    with pytest.raises(ValidationError):
        weekday_list(5, "expectedDays")
    with pytest.raises(ValidationError):
        weekday_list("12", "expectedDays")
