"""ISO 8601 week calendar arithmetic and recurring date resolution.

Key modules:
- weeks: week coordinates, weeks-per-year oracle, week/month windows
- recurrence: recurring anchors, occurrence resolution, countdowns
- conventions: named calendars (time zones) and shared enums
- utils: date normalisation and day-granularity primitives
"""

from veckalib.conventions import WeekCalendar, get_calendar
from veckalib.errors import InvalidAnchor, InvalidComponent
from veckalib.recurrence import (
    RecurringAnchor,
    ResolvedOccurrence,
    make_anchor,
    resolve,
)
from veckalib.weeks import (
    DateWindow,
    WeekCoordinate,
    monday_of,
    week_coordinate,
    weeks_in_year,
    window_of,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "WeekCalendar",
    "get_calendar",
    "InvalidAnchor",
    "InvalidComponent",
    "RecurringAnchor",
    "ResolvedOccurrence",
    "make_anchor",
    "resolve",
    "DateWindow",
    "WeekCoordinate",
    "monday_of",
    "week_coordinate",
    "weeks_in_year",
    "window_of",
]
