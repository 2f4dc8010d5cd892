"""Predefined countdowns and display ordering."""

from __future__ import annotations

from datetime import date

import pytest

from veckalib.conventions import CountdownType
from veckalib.recurrence import Countdown, preset_anchor, resolve_preset, upcoming


def test_every_preset_is_an_annual_anchor() -> None:
    for kind in CountdownType:
        anchor = preset_anchor(kind)
        assert anchor.recurs
        assert anchor.full_date is None


def test_preset_lookup_by_value() -> None:
    anchor = preset_anchor("christmas_eve")
    assert (anchor.month, anchor.day) == (12, 24)
    with pytest.raises(ValueError):
        preset_anchor("easter")


def test_christmas_and_new_year(utc) -> None:
    assert resolve_preset(CountdownType.CHRISTMAS, date(2025, 1, 10), utc).day_offset == 349
    new_year = resolve_preset(CountdownType.NEW_YEAR, date(2025, 12, 31), utc)
    assert new_year.date == date(2026, 1, 1)
    assert new_year.day_offset == 1


def test_countdown_constructors(utc) -> None:
    halloween = Countdown.from_preset(CountdownType.HALLOWEEN)
    assert halloween.name == "Halloween"
    assert halloween.resolve(date(2025, 10, 31), utc).is_today

    birthday = Countdown.from_date("Birthday", "1990-05-17", annual=True, calendar=utc)
    assert birthday.resolve(date(2025, 5, 18), utc).date == date(2026, 5, 17)

    trip = Countdown.from_date("Trip", date(2025, 9, 1), calendar=utc)
    assert not trip.anchor.recurs
    assert trip.resolve(date(2025, 9, 3), utc).day_offset == -2


def test_upcoming_orders_future_before_past(utc) -> None:
    countdowns = [
        Countdown.from_preset(CountdownType.NEW_YEAR),
        Countdown.from_date("Trip", date(2025, 12, 1), calendar=utc),
        Countdown.from_preset(CountdownType.CHRISTMAS),
        Countdown.from_date("Party", date(2025, 12, 20), calendar=utc),
        Countdown.from_preset(CountdownType.CHRISTMAS_EVE),
        Countdown.from_date("Dentist", date(2025, 11, 1), calendar=utc),
    ]
    ordered = upcoming(countdowns, date(2025, 12, 20), utc)
    assert [countdown.name for countdown, _ in ordered] == [
        "Party",
        "Christmas Eve",
        "Christmas",
        "New Year's Day",
        "Trip",
        "Dentist",
    ]
    assert [occurrence.day_offset for _, occurrence in ordered] == [0, 4, 5, 12, -19, -49]
