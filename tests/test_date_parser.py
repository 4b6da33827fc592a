"""Tests for date parser with relative dates."""

import pytest
from datetime import date, datetime, timedelta, UTC
from dateutil import tz
from worklog.utils.date_parser import parse_date, parse_datetime, resolve_timezone

# A Wednesday
TODAY = date(2024, 1, 17)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()
    assert parse_date("Today", today=TODAY) == TODAY


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday", today=TODAY) == TODAY - timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month' gives the first day of last month."""
    assert parse_date("last month", today=TODAY) == date(2023, 12, 1)


def test_parse_this_month():
    assert parse_date("this month", today=TODAY) == date(2024, 1, 1)


def test_parse_weeks():
    """Weeks start on Monday."""
    assert parse_date("this week", today=TODAY) == date(2024, 1, 15)
    assert parse_date("last week", today=TODAY) == date(2024, 1, 8)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("last monday", date(2024, 1, 15)),
        ("last tuesday", date(2024, 1, 16)),
        ("last wednesday", date(2024, 1, 10)),
        ("last sunday", date(2024, 1, 14)),
    ],
)
def test_parse_last_weekday(text, expected):
    assert parse_date(text, today=TODAY) == expected


def test_parse_invalid_date():
    """Test invalid dates raise ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_datetime_attaches_zone():
    value = parse_datetime("2024-01-15 09:30", tz.tzutc())

    assert value == datetime(2024, 1, 15, 9, 30, tzinfo=UTC)


def test_parse_datetime_keeps_explicit_zone():
    value = parse_datetime("2024-01-15T09:30:00+09:00", tz.tzutc())

    assert value == datetime(2024, 1, 15, 0, 30, tzinfo=UTC)


def test_parse_datetime_invalid():
    with pytest.raises(ValueError):
        parse_datetime("soon")


def test_resolve_timezone():
    tokyo = resolve_timezone("Asia/Tokyo")

    assert datetime(2024, 1, 1, tzinfo=tokyo).utcoffset() == timedelta(hours=9)
    assert resolve_timezone(None) is not None


def test_resolve_unknown_timezone():
    with pytest.raises(ValueError, match="Unknown time zone"):
        resolve_timezone("Not/AZone")
