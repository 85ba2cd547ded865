from datetime import time

import pytest

from plant_attendance.core.constants import DEFAULT_WORKDAYS
from plant_attendance.core.enums import Weekday
from plant_attendance.shifts.parsing import parse_end_overrides, parse_time, parse_workdays, weekday_from_alias


def test_workdays_from_json_text():
    assert parse_workdays("[1,2,3,4,5,6]") == frozenset({1, 2, 3, 4, 5, 6})


def test_workdays_accept_names():
    assert parse_workdays(["lunes", "Mié", "friday"]) == frozenset({1, 3, 5})


@pytest.mark.parametrize("raw", ["not json", "{\"a\": 1}", "[1, 9]", None, ""])
def test_bad_workdays_fall_back_to_monday_friday(raw):
    assert parse_workdays(raw) == DEFAULT_WORKDAYS


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("3", Weekday.WEDNESDAY),
        (3, Weekday.WEDNESDAY),
        ("Wednesday", Weekday.WEDNESDAY),
        ("miércoles", Weekday.WEDNESDAY),
        ("MIE", Weekday.WEDNESDAY),
        ("sáb", Weekday.SATURDAY),
        ("domingo", Weekday.SUNDAY),
        ("0", Weekday.SUNDAY),
    ],
)
def test_weekday_aliases(alias, expected):
    assert weekday_from_alias(alias) is expected


def test_unknown_alias_is_none():
    assert weekday_from_alias("someday") is None
    assert weekday_from_alias(7) is None


def test_end_overrides_resolve_aliases_once():
    overrides = parse_end_overrides('{"viernes": "14:00", "5": "13:30", "Sat": null, "xyz": "10:00"}')

    # "viernes" and "5" are both Friday; the later key wins.
    assert overrides == {Weekday.FRIDAY: time(13, 30)}


def test_end_overrides_accept_nested_objects():
    overrides = parse_end_overrides({"lunes": {"start": "08:00", "end": "16:00"}})

    assert overrides == {Weekday.MONDAY: time(16, 0)}


def test_malformed_overrides_are_empty():
    assert parse_end_overrides("{broken") == {}
    assert parse_end_overrides("[1, 2]") == {}


def test_parse_time_formats():
    assert parse_time("06:00") == time(6, 0)
    assert parse_time("21:30:15") == time(21, 30, 15)
    assert parse_time(time(7, 0)) == time(7, 0)
