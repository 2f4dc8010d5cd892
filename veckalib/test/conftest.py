"""Shared fixtures for veckalib tests."""

from __future__ import annotations

import pytest

from veckalib.conventions.calendars import (
    CALENDAR_ENV_VAR,
    TIMEZONE_ENV_VAR,
    WeekCalendar,
    get_calendar,
)


@pytest.fixture(autouse=True)
def _clean_calendar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CALENDAR_ENV_VAR, raising=False)
    monkeypatch.delenv(TIMEZONE_ENV_VAR, raising=False)


@pytest.fixture
def utc() -> WeekCalendar:
    return get_calendar("UTC")


@pytest.fixture
def stockholm() -> WeekCalendar:
    return get_calendar("SE")
