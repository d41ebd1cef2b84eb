# src/whattodo/calendar/state.py

"""
Calendar state for one view session.

Two independent pieces of state:
- the anchor month (what the grid shows), moved by navigation / year+month selection
- the optional filter date, set by clicking a day and cleared explicitly

Derived values (grid, year options, month label) are recomputed on every access.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

from ..tasks.filters import filter_by_date
from ..tasks.task_models import Task
from .dates import MONTHS_DE, month_start
from .grid import CalendarCell, build_grid

Clock = Callable[[], date]


class CalendarState:
    def __init__(self, clock: Clock = date.today) -> None:
        self._clock = clock
        self.current_month: date = month_start(clock())
        self.selected_date: str | None = None

    # ---- anchor month ----

    @property
    def selected_year(self) -> int:
        return self.current_month.year

    @selected_year.setter
    def selected_year(self, year: int) -> None:
        self.set_year(year)

    @property
    def selected_month(self) -> int:
        """1-based month of the anchor."""
        return self.current_month.month

    @selected_month.setter
    def selected_month(self, month: int) -> None:
        self.set_month(month)

    def set_year(self, year: int) -> None:
        self.current_month = date(int(year), self.current_month.month, 1)

    def set_month(self, month: int) -> None:
        month = int(month)
        if not 1 <= month <= 12:
            raise ValueError(f"month must be 1..12, got {month}")
        self.current_month = date(self.current_month.year, month, 1)

    def prev_month(self) -> None:
        d = self.current_month
        if d.month == 1:
            self.current_month = date(d.year - 1, 12, 1)
        else:
            self.current_month = date(d.year, d.month - 1, 1)

    def next_month(self) -> None:
        d = self.current_month
        if d.month == 12:
            self.current_month = date(d.year + 1, 1, 1)
        else:
            self.current_month = date(d.year, d.month + 1, 1)

    # ---- filter date ----

    def select_day(self, iso: str) -> None:
        # Any date is accepted, including padding cells of adjacent months.
        self.selected_date = iso

    def clear_date_filter(self) -> None:
        self.selected_date = None

    # ---- derived ----

    @property
    def year_options(self) -> list[int]:
        # Read from the clock on every access; drifts across New Year in long sessions.
        y = self._clock().year
        return [y - 2 + i for i in range(5)]

    @property
    def calendar_days(self) -> tuple[CalendarCell, ...]:
        return build_grid(self.current_month.year, self.current_month.month)

    @property
    def month_label(self) -> str:
        return f"{MONTHS_DE[self.current_month.month - 1]} {self.current_month.year}"

    def filter_tasks(self, tasks: Iterable[Task]) -> list[Task]:
        return filter_by_date(tasks, self.selected_date)
