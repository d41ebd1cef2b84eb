# src/whattodo/api/task_service.py

from __future__ import annotations

import logging

from ..tasks.task_models import Task, TaskDraft, normalize_task
from .http import JsonHttpClient

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, http: JsonHttpClient) -> None:
        self._http = http

    async def fetch_tasks(self) -> list[Task]:
        raw = await self._http.get_json("/tasks")
        if not isinstance(raw, list):
            logger.warning("GET /tasks returned %s, expected a list", type(raw).__name__)
            return []
        return [normalize_task(r) for r in raw]

    async def create_task(self, draft: TaskDraft) -> Task:
        raw = await self._http.send_json("/tasks", "POST", draft.to_payload())
        return normalize_task(raw)

    async def delete_task(self, task_id: int) -> None:
        await self._http.send_json(f"/tasks/{task_id}", "DELETE")

    async def patch_done(self, task_id: int, done: bool) -> None:
        await self._http.send_json(f"/tasks/{task_id}", "PATCH", {"done": done})
