"""
Recurring anchors: the month/day an event falls on.

An annual anchor freezes the month and day of its authoring date once, in the
calendar in effect at construction, and never derives them again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from veckalib.conventions.calendars import WeekCalendar, resolve_calendar
from veckalib.errors import InvalidAnchor
from veckalib.utils.date import DateLike, days_in_month, to_date

logger = logging.getLogger(__name__)

# Any leap year works; month/day validity is checked against the longest February
LEAP_REFERENCE_YEAR = 2000


def _validate_month_day(month: int, day: int) -> None:
    for label, value in (("month", month), ("day", day)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidAnchor(f"Anchor {label} must be an integer, got {value!r}")
    if not 1 <= month <= 12:
        raise InvalidAnchor(f"Anchor month must be in 1..12, got {month}")
    longest = days_in_month(LEAP_REFERENCE_YEAR, month)
    if not 1 <= day <= longest:
        raise InvalidAnchor(
            f"{month:02d}-{day:02d} never forms a valid date (month {month} has at most {longest} days)"
        )


@dataclass(frozen=True)
class RecurringAnchor:
    """When an event falls: a fixed date, or a month/day repeating every year.

    Attributes:
        month: Month of the occurrence, 1..12
        day: Day of the occurrence, valid for ``month`` in a leap year
        recurs: True for annual events, False for a one-time date
        full_date: Authoring date; authoritative when ``recurs`` is False
    """

    month: int
    day: int
    recurs: bool = True
    full_date: Optional[date] = None

    def __post_init__(self):
        _validate_month_day(self.month, self.day)
        if self.recurs:
            return
        if self.full_date is None:
            raise InvalidAnchor("A one-time anchor requires full_date")
        if (self.full_date.month, self.full_date.day) != (self.month, self.day):
            raise InvalidAnchor(
                f"One-time anchor {self.month:02d}-{self.day:02d} does not match full_date {self.full_date}"
            )

    @property
    def is_leap_day(self) -> bool:
        return self.month == 2 and self.day == 29

    def to_dict(self) -> Dict[str, Any]:
        """Payload for the caller's persistence layer."""
        return {
            "month": self.month,
            "day": self.day,
            "recurs": self.recurs,
            "full_date": self.full_date.isoformat() if self.full_date else None,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "RecurringAnchor":
        """
        Rebuild an anchor from :meth:`to_dict` output.

        Payloads written before month/day were stored are accepted: the
        month/day is derived once from ``full_date``.
        """
        recurs = payload.get("recurs", True)
        if not isinstance(recurs, bool):
            raise InvalidAnchor(f"Anchor payload 'recurs' must be a boolean, got {recurs!r}")
        raw_date = payload.get("full_date")
        full_date = to_date(raw_date) if raw_date else None
        month, day = payload.get("month"), payload.get("day")

        if month is None or day is None:
            if full_date is None:
                raise InvalidAnchor("Anchor payload has neither month/day nor full_date")
            if recurs:
                logger.warning(
                    "Anchor payload missing month/day; deriving from full_date %s", full_date
                )
            month, day = full_date.month, full_date.day
        return cls(month=int(month), day=int(day), recurs=recurs, full_date=full_date)


def make_anchor(
    full_date: DateLike,
    recurs: bool,
    calendar: WeekCalendar | str | None = None,
) -> RecurringAnchor:
    """
    Create an anchor from its authoring date.

    Args:
        full_date: Date the event was authored for
        recurs: Whether the event repeats every year on the same month/day
        calendar: Calendar whose time zone decides the day of ``full_date``

    Returns:
        RecurringAnchor with month/day frozen from ``full_date``.
    """
    day = resolve_calendar(calendar).to_date(full_date)
    return RecurringAnchor(month=day.month, day=day.day, recurs=recurs, full_date=day)


def anchor_from_components(month: int, day: int) -> RecurringAnchor:
    """Annual anchor for a month/day pair with no authoring date.

    Raises:
        InvalidAnchor: If the pair never forms a valid date.
    """
    return RecurringAnchor(month=month, day=day, recurs=True)
