"""Utility functions for raccount."""

from raccount.utils.amount_parser import parse_amount
from raccount.utils.date_utils import (
    first_day_of_month,
    last_day_of_month,
    month_range,
    parse_date,
)

__all__ = ["parse_amount", "first_day_of_month", "last_day_of_month", "month_range", "parse_date"]
