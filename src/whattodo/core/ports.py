# src/whattodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of the concrete httpx-backed services.
This keeps the backend swappable and makes testing easier.
"""

from typing import Protocol

from ..calendar.state import Clock
from ..tasks.task_models import Task, TaskDraft

__all__ = ["CategoryGateway", "Clock", "TaskGateway"]


class TaskGateway(Protocol):
    async def fetch_tasks(self) -> list[Task]: ...
    async def create_task(self, draft: TaskDraft) -> Task: ...
    async def delete_task(self, task_id: int) -> None: ...
    async def patch_done(self, task_id: int, done: bool) -> None: ...


class CategoryGateway(Protocol):
    async def fetch_categories(self) -> list[str]: ...
    async def create_category(self, name: str) -> None: ...
    async def delete_category(self, name: str) -> None: ...
