"""Recurring date resolution and countdowns."""

from .anchor import LEAP_REFERENCE_YEAR, RecurringAnchor, anchor_from_components, make_anchor
from .presets import PRESET_DATES, Countdown, preset_anchor, resolve_preset, upcoming
from .resolver import (
    LEAP_DAY_FALLBACK,
    ResolvedOccurrence,
    days_until,
    occurrence_in_year,
    resolve,
)

__all__ = [
    "LEAP_REFERENCE_YEAR",
    "RecurringAnchor",
    "anchor_from_components",
    "make_anchor",
    "PRESET_DATES",
    "Countdown",
    "preset_anchor",
    "resolve_preset",
    "upcoming",
    "LEAP_DAY_FALLBACK",
    "ResolvedOccurrence",
    "days_until",
    "occurrence_in_year",
    "resolve",
]
