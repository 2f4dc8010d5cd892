"""
Concrete date ranges for week and month coordinates.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Union

from veckalib.conventions.calendars import resolve_calendar
from veckalib.errors import InvalidComponent
from veckalib.utils.date import DateLike, date_from_components, get_month_end

from .coordinate import CalendarArg, WeekCoordinate, _check_year, coordinate_of_day, monday_of


@dataclass(frozen=True)
class DateWindow:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidComponent(f"Window end {self.end} precedes start {self.start}")

    @property
    def length(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end - self.start).days + 1

    def days(self) -> List[date]:
        return [self.start + timedelta(days=offset) for offset in range(self.length)]

    def contains(self, value: DateLike, calendar: CalendarArg = None) -> bool:
        """Whether the calendar day of ``value`` in ``calendar`` lies in the window."""
        if type(value) is not date:
            value = resolve_calendar(calendar).to_date(value)
        return self.start <= value <= self.end

    def __contains__(self, value) -> bool:
        return self.contains(value)


def week_window(coordinate: WeekCoordinate) -> DateWindow:
    """Monday through Sunday of an ISO week."""
    start = monday_of(coordinate)
    return DateWindow(start, start + timedelta(days=6))


def month_window(year: int, month: int) -> DateWindow:
    """First through last calendar day of a month."""
    _check_year(year)
    return DateWindow(date_from_components(year, month, 1), get_month_end(year, month))


def window_of(target: Union[WeekCoordinate, int], month: Union[int, None] = None) -> DateWindow:
    """
    Resolve a week or month coordinate to its date window.

    Call as ``window_of(coordinate)`` for a week or ``window_of(year, month)``
    for a month.
    """
    if isinstance(target, WeekCoordinate):
        if month is not None:
            raise TypeError("window_of(coordinate) takes no month argument")
        return week_window(target)
    if month is None:
        raise TypeError("window_of(year, month) requires a month")
    return month_window(target, month)


def weeks_of_month(year: int, month: int) -> List[WeekCoordinate]:
    """
    ISO weeks overlapping the given month, in order.

    These are the Monday-first rows of a month grid: the first row holds the
    1st of the month and the last row holds its final day.
    """
    window = month_window(year, month)
    first_monday = monday_of(coordinate_of_day(window.start))
    rows = (window.end - first_monday).days // 7 + 1
    return [coordinate_of_day(first_monday + timedelta(weeks=row)) for row in range(rows)]
