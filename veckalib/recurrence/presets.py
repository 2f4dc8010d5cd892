"""
Named countdowns and the predefined annual events.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from veckalib.conventions.calendars import WeekCalendar, resolve_calendar
from veckalib.conventions.types import CountdownType
from veckalib.utils.date import DateLike

from .anchor import RecurringAnchor, anchor_from_components, make_anchor
from .resolver import ResolvedOccurrence, resolve

PRESET_DATES = {
    CountdownType.NEW_YEAR: (1, 1),
    CountdownType.CHRISTMAS_EVE: (12, 24),
    CountdownType.CHRISTMAS: (12, 25),
    CountdownType.SUMMER: (6, 21),
    CountdownType.VALENTINES: (2, 14),
    CountdownType.HALLOWEEN: (10, 31),
    CountdownType.MIDSUMMER: (6, 24),
}


def preset_anchor(kind: CountdownType | str) -> RecurringAnchor:
    """Annual anchor of a predefined countdown."""
    month, day = PRESET_DATES[CountdownType(kind)]
    return anchor_from_components(month, day)


def resolve_preset(
    kind: CountdownType | str,
    reference_now: DateLike,
    calendar: WeekCalendar | str | None = None,
) -> ResolvedOccurrence:
    return resolve(preset_anchor(kind), reference_now, calendar)


@dataclass(frozen=True)
class Countdown:
    """A titled anchor, e.g. a birthday or a trip departure."""

    name: str
    anchor: RecurringAnchor

    @classmethod
    def from_preset(cls, kind: CountdownType | str) -> "Countdown":
        kind = CountdownType(kind)
        return cls(name=kind.display_name, anchor=preset_anchor(kind))

    @classmethod
    def from_date(
        cls,
        name: str,
        full_date: DateLike,
        annual: bool = False,
        calendar: WeekCalendar | str | None = None,
    ) -> "Countdown":
        return cls(name=name, anchor=make_anchor(full_date, annual, calendar))

    def resolve(
        self, reference_now: DateLike, calendar: WeekCalendar | str | None = None
    ) -> ResolvedOccurrence:
        return resolve(self.anchor, reference_now, calendar)


def upcoming(
    countdowns: Iterable[Countdown],
    reference_now: DateLike,
    calendar: WeekCalendar | str | None = None,
) -> List[Tuple[Countdown, ResolvedOccurrence]]:
    """
    Resolve countdowns and order them for display.

    Today's and future occurrences come first, nearest first; one-time events
    already in the past follow, most recent first.
    """
    cal = resolve_calendar(calendar)
    resolved = [(countdown, countdown.resolve(reference_now, cal)) for countdown in countdowns]
    return sorted(
        resolved,
        key=lambda item: (item[1].is_past, abs(item[1].day_offset), item[0].name),
    )
