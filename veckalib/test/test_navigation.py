"""Navigation and jump-picker tests."""

from __future__ import annotations

from datetime import date

import pytest

from veckalib.conventions.types import JumpMode
from veckalib.errors import InvalidComponent
from veckalib.weeks import (
    WeekCoordinate,
    next_month,
    previous_month,
    resolve_jump,
    shift_month,
    shift_week,
    year_range,
)


def test_shift_week_crosses_iso_years() -> None:
    assert shift_week(WeekCoordinate(2020, 53), 1) == WeekCoordinate(2021, 1)
    assert shift_week(WeekCoordinate(2025, 1), -1) == WeekCoordinate(2024, 52)
    assert shift_week(WeekCoordinate(2025, 10), 0) == WeekCoordinate(2025, 10)
    assert shift_week(WeekCoordinate(2025, 1), 52) == WeekCoordinate(2026, 1)


def test_shift_week_out_of_range() -> None:
    with pytest.raises(InvalidComponent):
        shift_week(WeekCoordinate(1, 1), -1)


def test_month_stepping_wraps_years() -> None:
    assert next_month(2025, 12) == (2026, 1)
    assert previous_month(2025, 1) == (2024, 12)
    assert next_month(2025, 6) == (2025, 7)
    assert shift_month(2025, 11, 14) == (2027, 1)
    with pytest.raises(InvalidComponent):
        next_month(9999, 12)
    with pytest.raises(InvalidComponent):
        next_month(2025, 13)


def test_resolve_jump_week_and_month() -> None:
    assert resolve_jump(JumpMode.WEEK, 2025, 1) == date(2024, 12, 30)
    assert resolve_jump("week", 2020, 53) == date(2020, 12, 28)
    assert resolve_jump(JumpMode.MONTH, 2024, 2) == date(2024, 2, 1)
    assert resolve_jump("month", 2025, 12) == date(2025, 12, 1)


def test_resolve_jump_validates_against_week_count() -> None:
    with pytest.raises(InvalidComponent):
        resolve_jump(JumpMode.WEEK, 2021, 53)
    with pytest.raises(InvalidComponent):
        resolve_jump(JumpMode.MONTH, 2021, 13)
    with pytest.raises(ValueError):
        resolve_jump("day", 2021, 1)


def test_year_range(utc) -> None:
    years = year_range(date(2025, 6, 1), calendar=utc)
    assert years[0] == 2005
    assert years[-1] == 2045
    assert len(years) == 41
    assert year_range(date(5, 1, 1), span=20, calendar=utc)[0] == 1
    assert year_range(date(2025, 6, 1), span=0, calendar=utc) == [2025]
    with pytest.raises(ValueError):
        year_range(date(2025, 6, 1), span=-1, calendar=utc)
