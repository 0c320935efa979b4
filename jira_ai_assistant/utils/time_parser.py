"""Parsing of Jira time-tracking strings such as ``"1d 4h 30m"``."""

from __future__ import annotations

import re
from typing import Optional

# Working calendar: 5 days of 8 hours, not wall-clock time.
HOURS_PER_UNIT = {
    "w": 40.0,
    "d": 8.0,
    "h": 1.0,
    "m": 1 / 60,
    "s": 1 / 3600,
}

_UNIT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([wdhms])")


def parse_time_spent(time_spent: Optional[str]) -> float:
    """Convert a Jira duration string into decimal hours.

    A bare number is read as hours. Anything unparsable yields ``0``.

    Args:
        time_spent: Duration like ``"2w 3d 2h"`` or ``"45m"``

    Returns:
        Hours rounded to 2 decimal places
    """
    if not time_spent or not isinstance(time_spent, str):
        return 0.0

    text = time_spent.lower().strip()
    total_hours = 0.0
    for value, unit in _UNIT_PATTERN.findall(text):
        total_hours += float(value) * HOURS_PER_UNIT[unit]

    if total_hours == 0:
        match = re.match(r"^\d+(?:\.\d+)?", text)
        if match:
            total_hours = float(match.group(0))

    return round(total_hours, 2)


def format_hours(hours: float) -> str:
    """Format decimal hours back to a readable string, e.g. ``1.5 -> "1h 30m"``."""
    if hours == 0:
        return "0h"

    whole_hours = int(hours)
    minutes = round((hours - whole_hours) * 60)
    if minutes == 60:
        whole_hours += 1
        minutes = 0

    if minutes == 0:
        return f"{whole_hours}h"
    return f"{whole_hours}h {minutes}m"
