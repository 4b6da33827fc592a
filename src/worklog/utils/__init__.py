"""Utility functions for worklog."""

from worklog.utils.date_parser import parse_date, parse_datetime, resolve_timezone
from worklog.utils.duration_parser import (
    parse_duration,
    format_duration_hms,
    format_duration_short,
)

__all__ = [
    "parse_date",
    "parse_datetime",
    "resolve_timezone",
    "parse_duration",
    "format_duration_hms",
    "format_duration_short",
]
