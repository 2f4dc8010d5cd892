"""
Week overview and calendar progress helpers.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from pandas import Timestamp

from veckalib.conventions.calendars import WeekCalendar, resolve_calendar
from veckalib.conventions.types import Weekday
from veckalib.utils.date import DateLike, days_in_month, is_leap_year, to_date

from .coordinate import CalendarArg, WeekCoordinate, coordinate_of_day
from .windows import DateWindow, week_window

MINUTES_PER_DAY = 24 * 60
MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY

# Fixed English abbreviations; labels must not depend on the process locale
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _short_date(day: date) -> str:
    return f"{_MONTH_ABBR[day.month - 1]} {day.day}"


def date_range_label(window: DateWindow) -> str:
    """Human readable range, e.g. 'Nov 24 - Nov 30, 2025'.

    Windows spanning two years carry both years:
    'Dec 29, 2025 - Jan 4, 2026'.
    """
    start, end = window.start, window.end
    if start.year == end.year:
        return f"{_short_date(start)} - {_short_date(end)}, {start.year}"
    return f"{_short_date(start)}, {start.year} - {_short_date(end)}, {end.year}"


@dataclass(frozen=True)
class WeekInfo:
    """Overview of one ISO week relative to a reference day.

    Attributes:
        coordinate: ISO week coordinate
        window: Monday..Sunday of the week
        is_current_week: Whether the reference day falls in this week
        days_remaining: Days left after the reference day when this is the
            current week, otherwise 0
    """

    coordinate: WeekCoordinate
    window: DateWindow
    is_current_week: bool
    days_remaining: int

    @property
    def week_number(self) -> int:
        return self.coordinate.iso_week

    @property
    def iso_year(self) -> int:
        return self.coordinate.iso_year

    @property
    def week_id(self) -> str:
        return self.coordinate.week_id

    @property
    def date_range(self) -> str:
        return date_range_label(self.window)

    @property
    def label(self) -> str:
        return f"Week {self.week_number}"

    @property
    def short_label(self) -> str:
        return f"W{self.week_number}"

    @property
    def full_description(self) -> str:
        return f"Week {self.week_number} of {self.iso_year}"

    def summary(self) -> str:
        """One-line description, e.g. 'Week 48, Nov 24 - Nov 30, 2025, current week, 3 days remaining'."""
        text = f"{self.label}, {self.date_range}"
        if self.is_current_week:
            text += ", current week"
            if self.days_remaining > 0:
                plural = "" if self.days_remaining == 1 else "s"
                text += f", {self.days_remaining} day{plural} remaining"
        return text


def week_info(
    value: Optional[DateLike] = None,
    now: Optional[DateLike] = None,
    calendar: CalendarArg = None,
) -> WeekInfo:
    """
    Build a :class:`WeekInfo` for the week containing ``value``.

    Args:
        value: Any day of the week of interest (defaults to ``now``)
        now: Reference "now" (defaults to the calendar's current time)
        calendar: Calendar or registered calendar name

    Returns:
        WeekInfo for the week.
    """
    cal = resolve_calendar(calendar)
    today = cal.to_date(cal.now() if now is None else now)
    day = today if value is None else cal.to_date(value)

    coordinate = coordinate_of_day(day)
    is_current = coordinate == coordinate_of_day(today)
    days_remaining = 6 - Weekday(today.isoweekday()).index if is_current else 0
    return WeekInfo(
        coordinate=coordinate,
        window=week_window(coordinate),
        is_current_week=is_current,
        days_remaining=days_remaining,
    )


def _local_datetime(value: DateLike, cal: WeekCalendar) -> datetime:
    if isinstance(value, Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, datetime):
        return value.astimezone(cal.tzinfo) if value.tzinfo is not None else value
    return cal.start_of_day(value)


def week_progress(now: Optional[DateLike] = None, calendar: CalendarArg = None) -> float:
    """Fraction of the ISO week elapsed at ``now``, in [0, 1), minute resolution."""
    cal = resolve_calendar(calendar)
    moment = _local_datetime(cal.now() if now is None else now, cal)
    elapsed = (
        Weekday(moment.isoweekday()).index * MINUTES_PER_DAY
        + moment.hour * 60
        + moment.minute
    )
    return elapsed / MINUTES_PER_WEEK


def month_progress(now: Optional[DateLike] = None, calendar: CalendarArg = None) -> float:
    """Day of month over days in month, in (0, 1]."""
    cal = resolve_calendar(calendar)
    day = cal.to_date(cal.now() if now is None else now)
    return day.day / days_in_month(day.year, day.month)


def year_progress(now: Optional[DateLike] = None, calendar: CalendarArg = None) -> float:
    """Day of year over days in year, in (0, 1]."""
    cal = resolve_calendar(calendar)
    day = cal.to_date(cal.now() if now is None else now)
    return day_of_year(day) / (366 if is_leap_year(day.year) else 365)


def day_of_year(value: DateLike) -> int:
    """Return the 1-based day-of-year for the given date."""
    return to_date(value).timetuple().tm_yday
