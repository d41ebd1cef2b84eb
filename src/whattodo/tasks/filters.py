# src/whattodo/tasks/filters.py

"""Pure filters over task lists. None of them mutate their input."""

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task


def filter_by_date(tasks: Iterable[Task], selected: str | None) -> list[Task]:
    if not selected:
        return list(tasks)
    return [t for t in tasks if t.date == selected]


def search_tasks(tasks: Iterable[Task], query: str | None) -> list[Task]:
    q = (query or "").strip().lower()
    if not q:
        return list(tasks)
    return [t for t in tasks if q in t.task_name.lower()]


def filter_by_category(tasks: Iterable[Task], category: str | None) -> list[Task]:
    if not category or not category.strip():
        return list(tasks)
    return [t for t in tasks if t.category == category]


def visible_tasks(
    tasks: Iterable[Task],
    *,
    selected_date: str | None = None,
    query: str | None = None,
    category: str | None = None,
) -> list[Task]:
    out = filter_by_date(tasks, selected_date)
    out = search_tasks(out, query)
    return filter_by_category(out, category)


def split_open_done(tasks: Iterable[Task]) -> tuple[list[Task], list[Task]]:
    open_: list[Task] = []
    done: list[Task] = []
    for t in tasks:
        (done if t.done else open_).append(t)
    return open_, done
