"""Day normalization, weekday numbering and clock helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

pytestmark = pytest.mark.unit

from habittracker.core.utils.dates import (
    WEEK_DAY_NAMES,
    Clock,
    parse_iso_day,
    start_of_day,
    week_day_index,
)


def test_start_of_day_truncates_time():
    assert start_of_day(datetime(2026, 10, 21, 23, 59, 59)) == datetime(2026, 10, 21)


def test_start_of_day_accepts_plain_date():
    assert start_of_day(date(2026, 10, 21)) == datetime(2026, 10, 21)


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2026, 10, 18), 0),  # Sunday
        (date(2026, 10, 19), 1),
        (date(2026, 10, 21), 3),
        (date(2026, 10, 24), 6),  # Saturday
        (datetime(2026, 10, 25, 8, 0), 0),
    ],
)
def test_week_day_index_counts_from_sunday(value, expected):
    assert week_day_index(value) == expected
    assert WEEK_DAY_NAMES[expected] == value.strftime("%a").lower()


def test_parse_iso_day_plain_date():
    assert parse_iso_day("2026-10-21") == date(2026, 10, 21)


def test_parse_iso_day_keeps_calendar_date_of_datetime():
    assert parse_iso_day("2026-10-21T23:30:00Z") == date(2026, 10, 21)
    assert parse_iso_day(" 2026-10-21T03:00:00.000 ") == date(2026, 10, 21)


@pytest.mark.parametrize("value", ["", "yesterday", "2026-13-01", "2026-10-21Tnope"])
def test_parse_iso_day_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_iso_day(value)


def test_clock_today_is_midnight():
    today = Clock().today()
    assert (today.hour, today.minute, today.second, today.microsecond) == (0, 0, 0, 0)


def test_clock_with_timezone_returns_naive_datetimes():
    now = Clock("UTC").now()
    assert now.tzinfo is None
