"""Calendars and shared enums."""

from .calendars import (
    CALENDARS,
    ISO8601,
    UTC,
    WeekCalendar,
    calendar_for_timezone,
    default_calendar,
    get_calendar,
    register_calendar,
    resolve_calendar,
)
from .types import CountdownType, JumpMode, Weekday

__all__ = [
    "CALENDARS",
    "ISO8601",
    "UTC",
    "WeekCalendar",
    "calendar_for_timezone",
    "default_calendar",
    "get_calendar",
    "register_calendar",
    "resolve_calendar",
    "CountdownType",
    "JumpMode",
    "Weekday",
]
