"""Tests for calendar rounding helpers."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from mathinterval import (
    drop_time,
    fill_time,
    first_day_of_month,
    last_day_of_month,
    monday,
    next_sunday,
    sunday,
)


def test_drop_and_fill_time():
    moment = datetime(2025, 3, 14, 15, 9, 26, 535897)

    assert drop_time(moment) == datetime(2025, 3, 14)
    assert fill_time(moment) == datetime(2025, 3, 14, 23, 59, 59, 999000)


def test_month_edges():
    moment = datetime(2024, 2, 10, 12, 30)

    assert first_day_of_month(moment) == datetime(2024, 2, 1)
    assert last_day_of_month(moment) == datetime(2024, 2, 29)
    assert last_day_of_month(datetime(2023, 2, 1)) == datetime(2023, 2, 28)
    assert last_day_of_month(datetime(2025, 12, 31, 23)) == datetime(2025, 12, 31)


def test_week_starts():
    # Jan 8, 2025 is a Wednesday
    wednesday = datetime(2025, 1, 8, 18, 45)

    assert sunday(wednesday) == datetime(2025, 1, 5)
    assert monday(wednesday) == datetime(2025, 1, 6)
    assert next_sunday(wednesday) == datetime(2025, 1, 12)


def test_week_starts_on_the_day_itself():
    """Test that a Sunday maps to itself, but next_sunday moves a week on."""
    sunday_noon = datetime(2025, 1, 5, 12)
    monday_noon = datetime(2025, 1, 6, 12)

    assert sunday(sunday_noon) == datetime(2025, 1, 5)
    assert monday(monday_noon) == datetime(2025, 1, 6)
    assert next_sunday(sunday_noon) == datetime(2025, 1, 12)
    assert next_sunday(datetime(2025, 1, 11, 23, 59)) == datetime(2025, 1, 12)


def test_monday_before_sunday():
    assert monday(datetime(2025, 1, 5, 9)) == datetime(2024, 12, 30)


def test_timezone_is_preserved():
    tokyo = ZoneInfo("Asia/Tokyo")
    moment = datetime(2025, 1, 8, 1, 30, tzinfo=tokyo)

    assert drop_time(moment) == datetime(2025, 1, 8, tzinfo=tokyo)
    assert drop_time(moment).tzinfo is tokyo
    assert first_day_of_month(moment).tzinfo is tokyo

    fixed = timezone(timedelta(hours=-5))
    filled = fill_time(datetime(2025, 1, 8, 6, tzinfo=fixed))
    assert filled.utcoffset() == timedelta(hours=-5)
    assert filled.hour == 23
