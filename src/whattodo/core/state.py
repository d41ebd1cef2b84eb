# src/whattodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..calendar.grid import task_days
from ..calendar.state import CalendarState
from ..tasks.filters import visible_tasks
from ..tasks.task_models import Task


@dataclass
class AppState:
    settings: Any
    calendar: CalendarState

    tasks: list[Task] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    # View filters (the date filter lives in `calendar`).
    search_query: str = ""
    category_filter: str = ""

    # Last user-facing error message, shown verbatim by the view.
    error: str | None = None

    def visible_tasks(self) -> list[Task]:
        return visible_tasks(
            self.tasks,
            selected_date=self.calendar.selected_date,
            query=self.search_query,
            category=self.category_filter,
        )

    def task_days(self) -> frozenset[str]:
        return task_days(self.tasks)

    def find_task(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None
