"""Duration parsing and formatting utilities."""

import re

_UNIT_PATTERN = re.compile(r"^(?:(\d+)h)?\s*(?:(\d+)m)?\s*(?:(\d+)s)?$")


def parse_duration(duration_str: str) -> int:
    """Parse a duration string into whole seconds.

    Handles various formats:
    - "1:30" (hours and minutes)
    - "1:30:15" (hours, minutes and seconds)
    - "1h30m", "90m", "45s", "2h"
    - "45" (bare number of minutes)

    Args:
        duration_str: Duration string

    Returns:
        Duration in seconds

    Raises:
        ValueError: If duration string cannot be parsed
    """
    if not duration_str or not duration_str.strip():
        raise ValueError("Empty duration string")

    value = duration_str.strip().lower().replace(" ", "")

    if ":" in value:
        parts = value.split(":")
        if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
            raise ValueError(f"Could not parse duration '{duration_str}'")
        hours, minutes = int(parts[0]), int(parts[1])
        seconds = int(parts[2]) if len(parts) == 3 else 0
        if minutes >= 60 or seconds >= 60:
            raise ValueError(f"Could not parse duration '{duration_str}': minutes and seconds must be below 60")
        return hours * 3600 + minutes * 60 + seconds

    if value.isdigit():
        return int(value) * 60

    match = _UNIT_PATTERN.match(value)
    if match is None or not any(match.groups()):
        raise ValueError(f"Could not parse duration '{duration_str}'")
    hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def format_duration_hms(seconds: int) -> str:
    """Format seconds as H:MM:SS (hours are not padded)."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def format_duration_short(seconds: int) -> str:
    """Format seconds as "2h 5m", or "5m" under an hour."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes = remainder // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
