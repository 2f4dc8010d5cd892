"""
Basic enums shared across the week and recurrence calculators.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """ISO 8601 weekday numbers (Monday is 1)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def index(self) -> int:
        """Zero-based position within the week (Monday = 0)."""
        return self.value - 1


class JumpMode(Enum):
    """Navigation target granularity for the jump picker."""

    WEEK = "week"
    MONTH = "month"


class CountdownType(Enum):
    """Predefined annual countdowns."""

    NEW_YEAR = "new_year"
    CHRISTMAS_EVE = "christmas_eve"
    CHRISTMAS = "christmas"
    SUMMER = "summer"
    VALENTINES = "valentines"
    HALLOWEEN = "halloween"
    MIDSUMMER = "midsummer"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    CountdownType.NEW_YEAR: "New Year's Day",
    CountdownType.CHRISTMAS_EVE: "Christmas Eve",
    CountdownType.CHRISTMAS: "Christmas",
    CountdownType.SUMMER: "Summer",
    CountdownType.VALENTINES: "Valentine's Day",
    CountdownType.HALLOWEEN: "Halloween",
    CountdownType.MIDSUMMER: "Midsummer",
}
