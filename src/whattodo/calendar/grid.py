# src/whattodo/calendar/grid.py

"""
Month grid used by the calendar view and the date filter.

The grid is always 6 full weeks (42 cells), Monday first, padded with days of
the neighbouring months. Building it is pure: same (year, month) -> same grid.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from .dates import to_iso

GRID_DAYS = 42
WEEKDAYS_DE: tuple[str, ...] = ("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So")


@dataclass(frozen=True, slots=True)
class CalendarCell:
    date: date
    iso: str
    in_month: bool


def build_grid(year: int, month: int) -> tuple[CalendarCell, ...]:
    """
    Build the 42-cell grid for `month` (1-12) of `year`.

    Cell 0 is the Monday on or before the 1st of the month.
    """
    first = date(year, month, 1)
    # date.weekday() is Monday=0..Sunday=6, i.e. already the distance back to Monday.
    shift = first.weekday()
    start = first - timedelta(days=shift)

    cells: list[CalendarCell] = []
    for i in range(GRID_DAYS):
        d = start + timedelta(days=i)
        cells.append(CalendarCell(date=d, iso=to_iso(d), in_month=d.month == month))
    return tuple(cells)


def grid_weeks(grid: tuple[CalendarCell, ...]) -> list[tuple[CalendarCell, ...]]:
    return [grid[i : i + 7] for i in range(0, len(grid), 7)]


def task_days(tasks: Iterable[Any]) -> frozenset[str]:
    """ISO dates that have at least one task (drives the "dot" marker)."""
    return frozenset(t.date for t in tasks if getattr(t, "date", None))
