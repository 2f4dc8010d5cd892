"""
Week and month navigation: stepping, jump-picker resolution and year ranges.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from veckalib.conventions.calendars import resolve_calendar
from veckalib.conventions.types import JumpMode
from veckalib.errors import InvalidComponent
from veckalib.utils.date import DateLike, date_from_components

from .coordinate import (
    MAX_ISO_YEAR,
    MIN_ISO_YEAR,
    CalendarArg,
    WeekCoordinate,
    coordinate_of_day,
    monday_of,
)
from .windows import month_window

logger = logging.getLogger(__name__)

DEFAULT_YEAR_SPAN = 20


def shift_week(coordinate: WeekCoordinate, weeks: int) -> WeekCoordinate:
    """The coordinate ``weeks`` weeks after (or before, if negative) ``coordinate``."""
    try:
        return coordinate_of_day(monday_of(coordinate) + timedelta(weeks=weeks))
    except (OverflowError, ValueError) as exc:
        raise InvalidComponent(f"Cannot shift {coordinate} by {weeks} weeks") from exc


def shift_month(year: int, month: int, months: int) -> Tuple[int, int]:
    """(year, month) ``months`` months away from the given month."""
    first = date_from_components(year, month, 1)
    try:
        moved = first + relativedelta(months=months)
    except (OverflowError, ValueError) as exc:
        raise InvalidComponent(f"Cannot shift {year}-{month:02d} by {months} months") from exc
    return moved.year, moved.month


def next_month(year: int, month: int) -> Tuple[int, int]:
    """Return (year, month) for one month later."""
    return shift_month(year, month, 1)


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """Return (year, month) for one month earlier."""
    return shift_month(year, month, -1)


def resolve_jump(mode: Union[JumpMode, str], year: int, value: int) -> date:
    """
    Date a jump picker navigates to.

    Args:
        mode: JumpMode.WEEK or JumpMode.MONTH (or their string values)
        year: ISO year for weeks, calendar year for months
        value: Week number or month number

    Returns:
        The Monday of the chosen week, or the first day of the chosen month.

    Raises:
        InvalidComponent: If the week does not exist in that year or the
            month is outside 1..12.
    """
    mode = JumpMode(mode)
    if mode is JumpMode.WEEK:
        target = monday_of(WeekCoordinate(year, value))
    else:
        target = month_window(year, value).start
    logger.debug("Jump %s %s/%s resolved to %s", mode.value, year, value, target)
    return target


def year_range(
    now: Optional[DateLike] = None,
    span: int = DEFAULT_YEAR_SPAN,
    calendar: CalendarArg = None,
) -> List[int]:
    """Years offered by a picker: ``span`` years either side of the current year."""
    if span < 0:
        raise ValueError("span must be non-negative")
    cal = resolve_calendar(calendar)
    current = cal.to_date(cal.now() if now is None else now).year
    first = max(MIN_ISO_YEAR, current - span)
    last = min(MAX_ISO_YEAR, current + span)
    return list(range(first, last + 1))
