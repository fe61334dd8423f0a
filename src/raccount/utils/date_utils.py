"""Calendar helpers for expense windows and date parsing."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")


def first_day_of_month(month: int, year: Optional[int] = None) -> date:
    """Return the first day of a month.

    Args:
        month: Month number (1-12)
        year: Year, defaults to the current year

    Raises:
        ValueError: If month is out of range
    """
    _check_month(month)
    if year is None:
        year = date.today().year
    return date(year, month, 1)


def last_day_of_month(month: int, year: Optional[int] = None) -> date:
    """Return the last day of a month, leap years included.

    Args:
        month: Month number (1-12)
        year: Year, defaults to the current year

    Raises:
        ValueError: If month is out of range
    """
    start = first_day_of_month(month, year)
    return start + relativedelta(months=1) - timedelta(days=1)


def month_range(month: int, year: Optional[int] = None) -> tuple[date, date]:
    """Return (first_day, last_day) of a month."""
    return first_day_of_month(month, year), last_day_of_month(month, year)


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts "today", "yesterday" and anything dateutil understands
    ("1980-05-15", "May 15, 1980", ...).

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
