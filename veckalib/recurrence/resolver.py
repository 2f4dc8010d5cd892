"""
Resolve anchors to concrete occurrences relative to a reference "now".

Day offsets are counted between calendar days in the active calendar, never
between raw timestamps, so an occurrence falling today always has offset 0
whatever the hour of ``reference_now``.

February 29 anchors fall back to February 28 in years without a leap day.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Union

from veckalib.conventions.calendars import WeekCalendar, resolve_calendar
from veckalib.utils.date import DateLike, date_from_components, days_between, is_leap_year

from .anchor import RecurringAnchor

logger = logging.getLogger(__name__)

LEAP_DAY_FALLBACK = (2, 28)


@dataclass(frozen=True)
class ResolvedOccurrence:
    """A concrete occurrence and its distance from the reference day.

    Attributes:
        date: Occurrence day
        day_offset: Days from the reference day (positive = future,
            0 = today, negative = past)
    """

    date: date
    day_offset: int

    @property
    def is_today(self) -> bool:
        return self.day_offset == 0

    @property
    def is_past(self) -> bool:
        return self.day_offset < 0


def occurrence_in_year(anchor: RecurringAnchor, year: int) -> date:
    """The anchor's month/day in ``year``, applying the leap-day fallback."""
    if anchor.is_leap_day and not is_leap_year(year):
        logger.debug("No February 29 in %s; falling back to February 28", year)
        return date_from_components(year, *LEAP_DAY_FALLBACK)
    return date_from_components(year, anchor.month, anchor.day)


def resolve(
    anchor: RecurringAnchor,
    reference_now: DateLike,
    calendar: Union[WeekCalendar, str, None] = None,
) -> ResolvedOccurrence:
    """
    Resolve the next occurrence of an anchor.

    One-time anchors resolve to their full date, which may lie in the past.
    Annual anchors resolve to this year's occurrence unless it is strictly
    earlier than today, in which case next year's is used; their offset is
    therefore always in [0, 365].

    Args:
        anchor: Anchor to resolve
        reference_now: Reference "now"; only its calendar day matters
        calendar: Calendar whose time zone decides the day of ``reference_now``

    Returns:
        ResolvedOccurrence with the occurrence date and day offset.

    Raises:
        InvalidComponent: If the next occurrence falls after year 9999.
    """
    today = resolve_calendar(calendar).to_date(reference_now)

    if not anchor.recurs:
        target = anchor.full_date
    else:
        target = occurrence_in_year(anchor, today.year)
        if target < today:
            logger.debug("%s already passed on %s; rolling to %s", target, today, today.year + 1)
            target = occurrence_in_year(anchor, today.year + 1)

    return ResolvedOccurrence(date=target, day_offset=days_between(today, target))


def days_until(
    anchor: RecurringAnchor,
    reference_now: DateLike,
    calendar: Union[WeekCalendar, str, None] = None,
) -> int:
    """Day offset of the anchor's next occurrence."""
    return resolve(anchor, reference_now, calendar).day_offset
