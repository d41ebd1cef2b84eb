# src/whattodo/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_COLOR = "#0d6efd"


@dataclass(slots=True)
class Task:
    id: int | None
    task_name: str
    done: bool
    important: bool
    category: str = ""
    color: str = DEFAULT_COLOR
    date: str | None = None


def _coerce_id(raw: Any) -> int | None:
    """
    Numeric id or None.

    None is the "invalid id" sentinel: the backend sent nothing usable.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        s = raw.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            f = float(s)
        except ValueError:
            return None
        return int(f) if f.is_integer() else None
    return None


def normalize_task(raw: Any) -> Task:
    """
    Map a backend record onto Task.

    The backend sometimes sends "name" and sometimes "taskName"; "taskName" wins
    when it is populated. Never raises.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    name = raw.get("taskName")
    if name is None or name == "":
        name = raw.get("name")
    if name is None:
        name = ""

    category = raw.get("category")
    color = raw.get("color")
    day = raw.get("date")

    return Task(
        id=_coerce_id(raw.get("id")),
        task_name=str(name),
        done=bool(raw.get("done")),
        important=bool(raw.get("important")),
        category="" if category is None else str(category),
        color=DEFAULT_COLOR if color is None else str(color),
        date=str(day) if day else None,
    )


@dataclass(slots=True)
class TaskDraft:
    """What the view collects before POSTing a new task."""

    name: str
    important: bool = False
    done: bool = False
    category: str = ""
    color: str = DEFAULT_COLOR
    date: str | None = None

    def to_payload(self) -> dict[str, Any]:
        # The backend accepts either key; send both.
        return {
            "name": self.name,
            "taskName": self.name,
            "important": self.important,
            "done": self.done,
            "category": self.category,
            "color": self.color,
            "date": self.date,
        }
