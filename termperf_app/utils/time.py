"""
Calendar date utilities for price series alignment.

All bounds and price dates are plain ``datetime.date`` values. Inputs that
carry a time component (ISO timestamps, datetimes) are truncated to the
calendar date.
"""

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """
    Convert a date-like value into a calendar date.

    Args:
        value: date, datetime or ISO8601 string ("2021-01-20" or
            "2021-01-20T00:00:00Z")

    Returns:
        Calendar date

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError as e:
            raise ValueError(f"Invalid date string: {value!r}") from e

    raise ValueError(f"Unsupported date value: {value!r}")


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end precedes start)."""
    return (end - start).days


def format_date(value: date) -> str:
    """Format a calendar date as ISO8601 (YYYY-MM-DD)."""
    return value.isoformat()
