"""Tabular views of a year's weeks and a month grid."""

from __future__ import annotations

import pandas as pd

from .coordinate import weeks_of_year
from .windows import month_window, week_window, weeks_of_month

WEEK_COLUMNS = ["week_id", "iso_year", "iso_week", "start", "end"]
DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def weeks_table(iso_year: int) -> pd.DataFrame:
    """One row per ISO week of ``iso_year`` with its Monday..Sunday window."""
    rows = []
    for coordinate in weeks_of_year(iso_year):
        window = week_window(coordinate)
        rows.append(
            {
                "week_id": coordinate.week_id,
                "iso_year": coordinate.iso_year,
                "iso_week": coordinate.iso_week,
                "start": window.start,
                "end": window.end,
            }
        )
    return pd.DataFrame(rows, columns=WEEK_COLUMNS)


def month_table(year: int, month: int) -> pd.DataFrame:
    """Month grid: one row per overlapping ISO week, one column per weekday.

    Cells outside the month are left empty (None).
    """
    window = month_window(year, month)
    rows = []
    for coordinate in weeks_of_month(year, month):
        row = {"week_id": coordinate.week_id}
        for abbr, day in zip(DAY_ABBR, coordinate.dates()):
            row[abbr] = day if window.contains(day) else None
        rows.append(row)
    return pd.DataFrame(rows, columns=["week_id"] + DAY_ABBR)
