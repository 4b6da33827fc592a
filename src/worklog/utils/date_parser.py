"""Date parsing utilities."""

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz as dateutil_tz
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last week", "this month", etc.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to the current date)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this" + time period
    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)
        elif period in WEEKDAYS:
            target_day = WEEKDAYS.index(period)
            days_ago = (today.weekday() - target_day) % 7
            if days_ago == 0:
                days_ago = 7
            return today - timedelta(days=days_ago)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse a date-time string, attaching ``tz`` when no zone is given.

    Raises:
        ValueError: If the string cannot be parsed
    """
    try:
        dt = date_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date-time '{value}': {e}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz or dateutil_tz.tzlocal())
    return dt


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """Resolve an IANA zone name, or the machine's local zone when empty.

    Raises:
        ValueError: If the zone name is unknown
    """
    if not name:
        return dateutil_tz.tzlocal()
    zone = dateutil_tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown time zone '{name}'")
    return zone
