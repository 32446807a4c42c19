"""
Parsing of the calendar date and time strings clients submit.

Components need not be zero-padded: ``2024-3-1`` and ``9:05`` are read the
same as ``2024-03-01`` and ``09:05``. Seconds are optional and fractions of
a second are dropped.
"""

import re
from datetime import date, time

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{1,2})(?::(\d{1,2})(?:\.\d+)?)?$")


def parse_date(value) -> date:
    """
    Raises:
        ValueError: If ``value`` is not a ``Y-M-D`` string or a real calendar date
    """
    if isinstance(value, date):
        return value
    match = DATE_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid date: {value!r}, expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise ValueError(f"Invalid date: {value!r} is not a calendar date")


def parse_time(value) -> time:
    """
    Raises:
        ValueError: If ``value`` is not an ``H:M[:S]`` string within the 24-hour day
    """
    if isinstance(value, time):
        return value.replace(microsecond=0)
    match = TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid time: {value!r}, expected HH:MM")
    hour, minute, second = match.groups()
    try:
        return time(int(hour), int(minute), int(second or 0))
    except ValueError:
        raise ValueError(f"Invalid time: {value!r} is out of range")
