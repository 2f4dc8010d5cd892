"""ISO week coordinate and week-count oracle tests."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest

from veckalib.conventions.types import Weekday
from veckalib.errors import InvalidComponent
from veckalib.utils.date import is_leap_year
from veckalib.weeks import (
    WeekCoordinate,
    current_week,
    format_week_id,
    is_valid_week,
    monday_of,
    parse_week_id,
    week_coordinate,
    weeks_in_year,
    weeks_of_year,
)

FIFTY_THREE_WEEK_YEARS = [1998, 2004, 2009, 2015, 2020, 2026, 2032, 2037]


def _thursday_rule(year: int) -> int:
    jan1 = date(year, 1, 1).isoweekday()
    if jan1 == Weekday.THURSDAY or (is_leap_year(year) and jan1 == Weekday.WEDNESDAY):
        return 53
    return 52


def test_december_date_rolls_into_next_iso_year() -> None:
    assert week_coordinate(date(2024, 12, 30)) == WeekCoordinate(2025, 1)


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2021, 1, 3), (2020, 53)),
        (date(2022, 1, 1), (2021, 52)),
        (date(2026, 1, 1), (2026, 1)),
        (date(2027, 1, 3), (2026, 53)),
        (date(2019, 12, 30), (2020, 1)),
        (date(2025, 6, 15), (2025, 24)),
    ],
)
def test_year_boundary_coordinates(day: date, expected) -> None:
    coordinate = week_coordinate(day)
    assert (coordinate.iso_year, coordinate.iso_week) == expected


def test_weeks_in_known_years() -> None:
    assert weeks_in_year(2020) == 53
    assert weeks_in_year(2021) == 52
    for year in FIFTY_THREE_WEEK_YEARS:
        assert weeks_in_year(year) == 53


def test_week_count_matches_thursday_rule() -> None:
    for year in range(1583, 2500):
        assert weeks_in_year(year) == _thursday_rule(year), year


def test_week_count_consistent_with_december_31() -> None:
    for year in range(1900, 2201):
        count = weeks_in_year(year)
        assert count in (52, 53)
        dec31 = week_coordinate(date(year, 12, 31))
        if count == 52 and dec31.iso_week == 1:
            assert dec31.iso_year == year + 1
        else:
            assert dec31 == WeekCoordinate(year, count)


def test_round_trip_for_every_week() -> None:
    for year in range(1990, 2061):
        for coordinate in weeks_of_year(year):
            monday = monday_of(coordinate)
            assert monday.isoweekday() == Weekday.MONDAY
            assert week_coordinate(monday) == coordinate


def test_every_day_maps_back_into_its_week() -> None:
    day = date(2019, 12, 1)
    while day < date(2027, 2, 1):
        coordinate = week_coordinate(day)
        assert 0 <= (day - monday_of(coordinate)).days <= 6
        day += timedelta(days=1)


def test_weeks_of_year_enumeration() -> None:
    weeks = weeks_of_year(2026)
    assert len(weeks) == 53
    assert weeks[0] == WeekCoordinate(2026, 1)
    assert weeks[-1] == WeekCoordinate(2026, 53)
    assert weeks == sorted(weeks)


@pytest.mark.parametrize("iso_year,iso_week", [(2021, 53), (2020, 54), (2025, 0), (2025, -1)])
def test_invalid_week_numbers_are_rejected(iso_year: int, iso_week: int) -> None:
    assert not is_valid_week(iso_year, iso_week)
    with pytest.raises(InvalidComponent):
        WeekCoordinate(iso_year, iso_week)


@pytest.mark.parametrize("iso_year", [0, 10000, True])
def test_invalid_years_are_rejected(iso_year) -> None:
    with pytest.raises(InvalidComponent):
        weeks_in_year(iso_year)


def test_non_integer_week_is_rejected() -> None:
    with pytest.raises(InvalidComponent):
        WeekCoordinate(2025, "1")


def test_coordinate_is_frozen_and_ordered() -> None:
    coordinate = WeekCoordinate(2025, 10)
    with pytest.raises(FrozenInstanceError):
        coordinate.iso_week = 11
    assert WeekCoordinate(2024, 52) < WeekCoordinate(2025, 1) < WeekCoordinate(2025, 2)


def test_coordinate_dates_and_weekdays() -> None:
    coordinate = WeekCoordinate(2025, 1)
    dates = coordinate.dates()
    assert dates[0] == date(2024, 12, 30)
    assert dates[-1] == date(2025, 1, 5)
    assert coordinate.day(Weekday.THURSDAY) == date(2025, 1, 2)
    assert coordinate.monday() == monday_of(coordinate)


def test_monday_of_requires_a_coordinate() -> None:
    with pytest.raises(TypeError):
        monday_of((2025, 1))


def test_week_ids() -> None:
    assert str(WeekCoordinate(2026, 7)) == "2026-W07"
    assert format_week_id(WeekCoordinate(2025, 1)) == "2025-W01"
    assert parse_week_id("2026-W07") == WeekCoordinate(2026, 7)
    assert parse_week_id("2020w53") == WeekCoordinate(2020, 53)
    with pytest.raises(InvalidComponent):
        parse_week_id("2021-W53")
    with pytest.raises(InvalidComponent):
        parse_week_id("W07-2026")


def test_coordinate_uses_calendar_day(utc, stockholm) -> None:
    late_sunday_utc = datetime(2024, 12, 29, 23, 30, tzinfo=timezone.utc)
    assert week_coordinate(late_sunday_utc, utc) == WeekCoordinate(2024, 52)
    assert week_coordinate(late_sunday_utc, stockholm) == WeekCoordinate(2025, 1)
    assert week_coordinate("2024-12-29", "SE") == WeekCoordinate(2024, 52)


def test_current_week_uses_injected_now(utc) -> None:
    assert current_week(utc, now=datetime(2025, 1, 1, 9)) == WeekCoordinate(2025, 1)
    assert current_week(utc) == week_coordinate(utc.now(), utc)
