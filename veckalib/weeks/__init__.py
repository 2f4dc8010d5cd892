"""ISO 8601 week calculator, week-count oracle and window resolver."""

from .coordinate import (
    MAX_ISO_YEAR,
    MIN_ISO_YEAR,
    WeekCoordinate,
    coordinate_of_day,
    current_week,
    format_week_id,
    is_valid_week,
    monday_of,
    parse_week_id,
    validate_week,
    week_coordinate,
    weekday_of,
    weeks_in_year,
    weeks_of_year,
)
from .info import (
    WeekInfo,
    date_range_label,
    day_of_year,
    month_progress,
    week_info,
    week_progress,
    year_progress,
)
from .navigation import (
    next_month,
    previous_month,
    resolve_jump,
    shift_month,
    shift_week,
    year_range,
)
from .table import DAY_ABBR, WEEK_COLUMNS, month_table, weeks_table
from .windows import DateWindow, month_window, week_window, weeks_of_month, window_of

__all__ = [
    "MAX_ISO_YEAR",
    "MIN_ISO_YEAR",
    "WeekCoordinate",
    "coordinate_of_day",
    "current_week",
    "format_week_id",
    "is_valid_week",
    "monday_of",
    "parse_week_id",
    "validate_week",
    "week_coordinate",
    "weekday_of",
    "weeks_in_year",
    "weeks_of_year",
    "WeekInfo",
    "date_range_label",
    "day_of_year",
    "month_progress",
    "week_info",
    "week_progress",
    "year_progress",
    "next_month",
    "previous_month",
    "resolve_jump",
    "shift_month",
    "shift_week",
    "year_range",
    "DAY_ABBR",
    "WEEK_COLUMNS",
    "month_table",
    "weeks_table",
    "DateWindow",
    "month_window",
    "week_window",
    "weeks_of_month",
    "window_of",
]
