"""Shared Gregorian date primitives."""

from .date import (
    DateLike,
    date_from_components,
    days_between,
    days_in_month,
    get_month_end,
    is_leap_year,
    start_of_day,
    to_date,
)

__all__ = [
    "DateLike",
    "date_from_components",
    "days_between",
    "days_in_month",
    "get_month_end",
    "is_leap_year",
    "start_of_day",
    "to_date",
]
