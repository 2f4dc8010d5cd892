"""
Named ISO 8601 calendars.

A :class:`WeekCalendar` is the single environmental input of the calculators:
ISO week rules (Monday start, week 1 contains January 4th) evaluated in one
time zone. Calendars are immutable and passed explicitly; callers that pass
nothing get the default calendar resolved at call time.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date, datetime
from datetime import tzinfo as TzInfo
from typing import Dict, Optional, Union

from dateutil import tz

from veckalib.utils.date import DateLike, start_of_day, to_date

logger = logging.getLogger(__name__)

CALENDAR_ENV_VAR = "VECKALIB_CALENDAR"
TIMEZONE_ENV_VAR = "VECKALIB_TIMEZONE"
DEFAULT_CALENDAR_NAME = "ISO8601"


@dataclass(frozen=True)
class WeekCalendar:
    """ISO 8601 week calendar bound to a time zone."""

    name: str
    tzinfo: TzInfo = field(compare=False, repr=False)

    def to_date(self, value: DateLike) -> date:
        """Calendar day of ``value`` in this calendar's zone."""
        return to_date(value, self.tzinfo)

    def start_of_day(self, value: DateLike) -> datetime:
        return start_of_day(value, self.tzinfo)

    def now(self) -> datetime:
        return datetime.now(self.tzinfo)

    def today(self) -> date:
        return self.now().date()


ISO8601 = WeekCalendar(DEFAULT_CALENDAR_NAME, tz.tzlocal())
UTC = WeekCalendar("UTC", tz.UTC)

# Region defaults, all using ISO week numbering
_REGION_ZONES = {
    "SE": "Europe/Stockholm",
    "DE": "Europe/Berlin",
    "GB": "Europe/London",
    "US": "America/New_York",
    "JP": "Asia/Tokyo",
}

CALENDARS: Dict[str, WeekCalendar] = {
    ISO8601.name: ISO8601,
    UTC.name: UTC,
}


def calendar_for_timezone(zone_name: str, name: Optional[str] = None) -> WeekCalendar:
    """
    Build an ISO calendar for an IANA time zone name.

    Args:
        zone_name: Zone identifier such as "Europe/Stockholm"
        name: Calendar name (defaults to the zone name)

    Raises:
        ValueError: If the zone cannot be resolved.
    """
    zone = tz.gettz(zone_name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {zone_name!r}")
    return WeekCalendar(name or zone_name, zone)


for _region, _zone_name in _REGION_ZONES.items():
    CALENDARS[_region] = calendar_for_timezone(_zone_name, name=_region)


def get_calendar(name: str) -> WeekCalendar:
    """Get a calendar by name (case-insensitive)."""
    key = name.upper()
    try:
        return CALENDARS[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        ) from exc


def register_calendar(calendar: WeekCalendar) -> None:
    """Register a custom calendar under its name."""
    key = calendar.name.upper()
    if key in CALENDARS:
        raise ValueError(f"Calendar '{calendar.name}' already registered")
    CALENDARS[key] = calendar
    logger.debug("Registered calendar %s", key)


def default_calendar() -> WeekCalendar:
    """
    Resolve the default calendar from the environment.

    ``VECKALIB_TIMEZONE`` takes precedence and builds an ad-hoc calendar for
    that zone; otherwise ``VECKALIB_CALENDAR`` names a registered calendar.
    Falls back to the device-local ISO8601 calendar.
    """
    zone_name = os.environ.get(TIMEZONE_ENV_VAR)
    if zone_name:
        return calendar_for_timezone(zone_name)
    return get_calendar(os.environ.get(CALENDAR_ENV_VAR, DEFAULT_CALENDAR_NAME))


def resolve_calendar(calendar: Union[WeekCalendar, str, None] = None) -> WeekCalendar:
    """Accept a calendar, a registered calendar name, or None for the default."""
    if calendar is None:
        return default_calendar()
    if isinstance(calendar, WeekCalendar):
        return calendar
    if isinstance(calendar, str):
        return get_calendar(calendar)
    raise TypeError(f"Unsupported calendar type: {type(calendar)}")
