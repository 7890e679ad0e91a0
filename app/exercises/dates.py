"""Date helpers for exercise logs.

Stored exercise dates use a fixed descriptive format, e.g. "Mon Jan 15 2024".
Names are spelled out here rather than taken from strftime so the stored
value does not depend on the process locale.
"""

from __future__ import annotations

import re
from datetime import date

from dateutil import parser as date_parser

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def format_log_date(value: date) -> str:
    """Format a calendar date as stored in exercise logs ("Mon Jan 15 2024")."""
    return f"{WEEKDAY_NAMES[value.weekday()]} {MONTH_NAMES[value.month - 1]} {value.day:02d} {value.year:04d}"


def parse_log_date(value: str) -> date:
    """Parse a stored exercise date back into a calendar date.

    Raises:
        ValueError: If the value is not a date
    """
    parts = value.split()
    if len(parts) == 4 and parts[1] in MONTH_NAMES:
        _weekday, month, day, year = parts
        return date(int(year), MONTH_NAMES.index(month) + 1, int(day))
    return parse_query_date(value)


def parse_strict_iso_date(value: str) -> date:
    """Parse a YYYY-MM-DD string that must name a real calendar date.

    "2024-02-30" matches the pattern but does not round-trip, so it is rejected.

    Raises:
        ValueError: If the pattern does not match or the date does not exist
    """
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Date {value!r} is not in YYYY-MM-DD format")
    parsed = date.fromisoformat(value)
    if parsed.isoformat() != value:
        raise ValueError(f"Date {value!r} is not a valid calendar date")
    return parsed


def parse_query_date(value: str) -> date:
    """Leniently parse a date given as a query parameter.

    Accepts anything python-dateutil understands ("2024-01-10", "Jan 10 2024",
    "2024-01-10T08:30:00"). Only the calendar date is kept.

    Raises:
        ValueError: If the value cannot be parsed into a date
    """
    try:
        return date_parser.parse(value).date()
    except OverflowError as e:
        raise ValueError(f"Date {value!r} is out of range") from e
