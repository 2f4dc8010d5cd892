"""
Date normalisation and day-granularity arithmetic.

Every calculator in the package reduces its inputs to a plain ``date`` in the
active calendar's time zone through :func:`to_date`, so comparisons and day
counts never see a time-of-day component.
"""

import calendar
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union

from pandas import Timestamp

from veckalib.errors import InvalidComponent

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike, tz: Optional[tzinfo] = None) -> date:
    """
    Normalise a date-like value to a calendar day.

    Accepts ``date``, ``datetime`` (naive or aware), ``pandas.Timestamp`` and
    strings in 'YYYY-MM-DD' or 'YYYYMMDD' format. Aware datetimes are first
    converted to ``tz`` when one is given; naive datetimes are taken to be
    wall-clock time in that zone already.
    """
    if isinstance(date_like, Timestamp):
        date_like = date_like.to_pydatetime()
    if isinstance(date_like, datetime):
        if tz is not None and date_like.tzinfo is not None:
            date_like = date_like.astimezone(tz)
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def start_of_day(date_like: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """Midnight of the given day, attached to ``tz`` when provided."""
    return datetime.combine(to_date(date_like, tz), time.min, tzinfo=tz)


def days_between(
    start: DateLike, end: DateLike, tz: Optional[tzinfo] = None
) -> int:
    """Whole days from ``start`` to ``end``, counted on start-of-day boundaries."""
    return (to_date(end, tz) - to_date(start, tz)).days


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, accounting for leap years."""
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, days_in_month(year, month))


def date_from_components(year: int, month: int, day: int) -> date:
    """Build a date, raising InvalidComponent instead of a bare ValueError."""
    _check_month(month)
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidComponent(
            f"{year:04d}-{month:02d}-{day:02d} is not a valid calendar date"
        ) from exc


def _check_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidComponent(f"Month must be an integer in 1..12, got {month!r}")
