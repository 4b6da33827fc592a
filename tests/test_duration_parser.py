"""Tests for duration parsing and formatting."""

import pytest
from worklog.utils.duration_parser import (
    format_duration_hms,
    format_duration_short,
    parse_duration,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1:30", 5400),
        ("0:05", 300),
        ("1:30:15", 5415),
        ("1h30m", 5400),
        ("1h 30m", 5400),
        ("2h", 7200),
        ("90m", 5400),
        ("45s", 45),
        ("1H5M10S", 3910),
        ("45", 2700),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1:75", "1:2:3:4", "h", "1.5h", "-30"])
def test_parse_duration_invalid(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_format_duration_hms():
    assert format_duration_hms(0) == "0:00:00"
    assert format_duration_hms(3725) == "1:02:05"
    assert format_duration_hms(36000) == "10:00:00"


def test_format_duration_short():
    assert format_duration_short(0) == "0m"
    assert format_duration_short(300) == "5m"
    assert format_duration_short(3725) == "1h 2m"
    assert format_duration_short(7200) == "2h 0m"
