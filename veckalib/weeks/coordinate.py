"""
ISO 8601 week coordinates.

Weeks start on Monday and week 1 of an ISO year is the week containing that
year's January 4th, so the ISO year of a date differs from its Gregorian year
for the last days of December and the first days of January.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple, Union

from veckalib.conventions.calendars import WeekCalendar, resolve_calendar
from veckalib.conventions.types import Weekday
from veckalib.errors import InvalidComponent
from veckalib.utils.date import DateLike

MIN_ISO_YEAR = 1
MAX_ISO_YEAR = 9999

_WEEK_ID_PATTERN = re.compile(r"^(\d{4})-?W(\d{1,2})$")

CalendarArg = Union[WeekCalendar, str, None]


def _iso_parts(day: date) -> Tuple[int, int]:
    iso = day.isocalendar()
    return iso[0], iso[1]


def _check_int(value, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidComponent(f"{label} must be an integer, got {value!r}")


def _check_year(iso_year: int) -> None:
    _check_int(iso_year, "Year")
    if not MIN_ISO_YEAR <= iso_year <= MAX_ISO_YEAR:
        raise InvalidComponent(
            f"Year {iso_year} is out of range ({MIN_ISO_YEAR}..{MAX_ISO_YEAR})"
        )


def weeks_in_year(iso_year: int) -> int:
    """
    Number of ISO weeks in ``iso_year`` (52 or 53).

    Derived from the week coordinate of December 31st: when that day already
    belongs to week 1 of the following ISO year the year has 52 weeks,
    otherwise its week number is the count.
    """
    _check_year(iso_year)
    _, dec31_week = _iso_parts(date(iso_year, 12, 31))
    if dec31_week == 1:
        return 52
    return dec31_week


def validate_week(iso_year: int, iso_week: int) -> None:
    """Raise InvalidComponent unless ``iso_week`` exists in ``iso_year``."""
    _check_year(iso_year)
    _check_int(iso_week, "Week number")
    count = weeks_in_year(iso_year)
    if not 1 <= iso_week <= count:
        raise InvalidComponent(
            f"Week number {iso_week} is out of range for {iso_year} (1..{count})"
        )


def is_valid_week(iso_year: int, iso_week: int) -> bool:
    try:
        validate_week(iso_year, iso_week)
    except InvalidComponent:
        return False
    return True


@dataclass(frozen=True, order=True)
class WeekCoordinate:
    """An (ISO year, ISO week) pair, validated on construction.

    Attributes:
        iso_year: ISO week-numbering year
        iso_week: Week number, 1..weeks_in_year(iso_year)
    """

    iso_year: int
    iso_week: int

    def __post_init__(self):
        validate_week(self.iso_year, self.iso_week)

    @property
    def week_id(self) -> str:
        """ISO 8601 week identifier, e.g. '2025-W01'."""
        return f"{self.iso_year:04d}-W{self.iso_week:02d}"

    def __str__(self) -> str:
        return self.week_id

    def monday(self) -> date:
        return monday_of(self)

    def day(self, weekday: Weekday) -> date:
        """Date of the given weekday within this week."""
        return weekday_of(self, weekday)

    def dates(self) -> List[date]:
        """All seven dates of the week, Monday first."""
        start = monday_of(self)
        return [start + timedelta(days=offset) for offset in range(7)]


def week_coordinate(value: DateLike, calendar: CalendarArg = None) -> WeekCoordinate:
    """ISO week coordinate of a date in the given (or default) calendar."""
    if type(value) is date:
        return coordinate_of_day(value)
    return coordinate_of_day(resolve_calendar(calendar).to_date(value))


def coordinate_of_day(day: date) -> WeekCoordinate:
    """ISO week coordinate of a calendar day; no time zone involved."""
    iso_year, iso_week = _iso_parts(day)
    return WeekCoordinate(iso_year, iso_week)


def monday_of(coordinate: WeekCoordinate) -> date:
    """The Monday that begins the given ISO week."""
    return weekday_of(coordinate, Weekday.MONDAY)


def weekday_of(coordinate: WeekCoordinate, weekday: Weekday) -> date:
    if not isinstance(coordinate, WeekCoordinate):
        raise TypeError(f"Expected WeekCoordinate, got {type(coordinate)}")
    return date.fromisocalendar(coordinate.iso_year, coordinate.iso_week, int(weekday))


def weeks_of_year(iso_year: int) -> List[WeekCoordinate]:
    """Every valid week coordinate of ``iso_year``, in order."""
    return [WeekCoordinate(iso_year, week) for week in range(1, weeks_in_year(iso_year) + 1)]


def format_week_id(coordinate: WeekCoordinate) -> str:
    return coordinate.week_id


def parse_week_id(text: str) -> WeekCoordinate:
    """
    Parse an ISO week identifier.

    Accepts the extended ('2026-W07') and basic ('2026W07') forms,
    case-insensitively.

    Raises:
        InvalidComponent: If the text is malformed or the week does not exist
            in that year.
    """
    match = _WEEK_ID_PATTERN.match(text.strip().upper())
    if not match:
        raise InvalidComponent(
            f"Invalid week identifier {text!r}. Expected YYYY-Www (e.g. 2026-W07)."
        )
    return WeekCoordinate(int(match.group(1)), int(match.group(2)))


def current_week(calendar: CalendarArg = None, now: Optional[DateLike] = None) -> WeekCoordinate:
    """Week coordinate of ``now`` (defaults to the calendar's current time)."""
    cal = resolve_calendar(calendar)
    return week_coordinate(cal.now() if now is None else now, cal)
