# src/whattodo/cli/render.py

from __future__ import annotations

from collections.abc import Iterable

from ..calendar.dates import format_badge_date
from ..calendar.grid import WEEKDAYS_DE, grid_weeks
from ..calendar.state import CalendarState
from ..errors import InvalidISODate
from ..tasks.filters import split_open_done
from ..tasks.task_models import Task


def format_task(task: Task) -> str:
    box = "[x]" if task.done else "[ ]"
    star = "! " if task.important else ""
    line = f"{box} #{task.id} {star}{task.task_name}"
    if task.category:
        line += f"  ({task.category})"
    if task.date:
        try:
            line += f"  {format_badge_date(task.date)}"
        except InvalidISODate:
            line += f"  {task.date}"
    return line


def render_task_list(tasks: Iterable[Task]) -> str:
    open_, done = split_open_done(tasks)
    if not open_ and not done:
        return "No tasks."
    lines = [f"Open ({len(open_)}):"]
    lines.extend(f"  {format_task(t)}" for t in open_)
    if done:
        lines.append(f"Done ({len(done)}):")
        lines.extend(f"  {format_task(t)}" for t in done)
    return "\n".join(lines)


def render_calendar(calendar: CalendarState, marked: frozenset[str] = frozenset()) -> str:
    """
    Month grid as text.

    `*` marks days with tasks, `<` marks the selected filter day,
    padding days from neighbouring months are shown as `.`.
    """
    lines = [calendar.month_label.center(7 * 4 - 1).rstrip(), " ".join(f"{d:>3}" for d in WEEKDAYS_DE)]
    for week in grid_weeks(calendar.calendar_days):
        cells: list[str] = []
        for cell in week:
            if not cell.in_month:
                cells.append("  .")
                continue
            mark = " "
            if cell.iso == calendar.selected_date:
                mark = "<"
            elif cell.iso in marked:
                mark = "*"
            cells.append(f"{cell.date.day:>2}{mark}")
        lines.append(" ".join(cells))
    if calendar.selected_date:
        try:
            badge = format_badge_date(calendar.selected_date)
        except InvalidISODate:
            badge = calendar.selected_date
        lines.append(f"Filter: {badge} (/clear to reset)")
    return "\n".join(lines)
