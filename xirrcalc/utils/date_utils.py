"""Date handling utilities."""

from datetime import date, datetime
from typing import Optional, Sequence, Tuple, Union

from dateutil import parser as date_parser

DateInput = Union[str, date, datetime, Tuple[int, int, int]]


def parse_date(date_input: DateInput, date_format: Optional[str] = None) -> date:
    """
    Parse a date from a string, a ``(year, month, day)`` tuple or a date object.

    Args:
        date_input: Date string, tuple, date or datetime
        date_format: Optional specific format string for string input

    Returns:
        Parsed date object
    """
    if isinstance(date_input, datetime):
        return date_input.date()

    if isinstance(date_input, date):
        return date_input

    if isinstance(date_input, (tuple, list)):
        year, month, day = date_input
        return date(int(year), int(month), int(day))

    if not isinstance(date_input, str):
        raise TypeError(f"Cannot parse date from {type(date_input).__name__}")

    if date_format:
        return datetime.strptime(date_input, date_format).date()

    # Use dateutil for flexible parsing
    return date_parser.parse(date_input).date()


def parse_dates(dates: Sequence[DateInput], date_format: Optional[str] = None) -> list[date]:
    """Parse every entry of a date sequence."""
    return [parse_date(d, date_format) for d in dates]


def day_count_actual_365(start_date: date, end_date: date) -> int:
    """Calculate actual day count (Actual/365 convention)."""
    return (end_date - start_date).days
