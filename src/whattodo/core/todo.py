# src/whattodo/core/todo.py

"""
TodoController: the actions the view can trigger.

Every remote failure ends up as a message in `state.error` instead of an
exception; the view shows it as-is. Successful actions clear the error.
Input validation (empty names) happens here, before any request is sent.
"""

from __future__ import annotations

import logging

from ..api.category_service import sort_unique_strings
from ..errors import ApiError
from ..tasks.task_models import DEFAULT_COLOR, Task, TaskDraft
from .ports import CategoryGateway, TaskGateway
from .state import AppState

logger = logging.getLogger(__name__)


class TodoController:
    def __init__(self, state: AppState, tasks: TaskGateway, categories: CategoryGateway) -> None:
        self.state = state
        self._tasks = tasks
        self._categories = categories

    def _fail(self, action: str, err: ApiError) -> bool:
        logger.info("%s failed: %s", action, err)
        self.state.error = str(err)
        return False

    def _ok(self) -> bool:
        self.state.error = None
        return True

    # ---- loading ----

    async def load(self) -> bool:
        """Fetch tasks and categories. Both are attempted; the first error wins."""
        ok = True
        try:
            self.state.tasks = await self._tasks.fetch_tasks()
        except ApiError as e:
            ok = self._fail("load tasks", e)
        try:
            self.state.categories = await self._categories.fetch_categories()
        except ApiError as e:
            if ok:
                ok = self._fail("load categories", e)
            else:
                logger.info("load categories failed: %s", e)
        if ok:
            self._ok()
            logger.info(
                "Loaded %d tasks, %d categories",
                len(self.state.tasks),
                len(self.state.categories),
            )
        return ok

    # ---- tasks ----

    async def add_task(
        self,
        name: str,
        *,
        important: bool = False,
        category: str = "",
        color: str | None = None,
        date: str | None = None,
    ) -> Task | None:
        name = name.strip()
        if not name:
            self.state.error = "Task name must not be empty."
            return None

        draft = TaskDraft(
            name=name,
            important=important,
            category=category.strip(),
            color=color or getattr(self.state.settings, "default_color", DEFAULT_COLOR),
            date=date or None,
        )
        try:
            created = await self._tasks.create_task(draft)
        except ApiError as e:
            self._fail("create task", e)
            return None

        self.state.tasks.append(created)
        logger.info("Created task id=%s name=%r", created.id, created.task_name)
        self._ok()
        return created

    async def remove_task(self, task_id: int) -> bool:
        try:
            await self._tasks.delete_task(task_id)
        except ApiError as e:
            return self._fail(f"delete task {task_id}", e)
        self.state.tasks = [t for t in self.state.tasks if t.id != task_id]
        logger.info("Deleted task id=%s", task_id)
        return self._ok()

    async def toggle_done(self, task_id: int) -> bool:
        task = self.state.find_task(task_id)
        if task is None:
            self.state.error = f"No task with id {task_id}."
            return False
        new_done = not task.done
        try:
            await self._tasks.patch_done(task_id, new_done)
        except ApiError as e:
            return self._fail(f"toggle task {task_id}", e)
        task.done = new_done
        logger.info("Task id=%s done=%s", task_id, new_done)
        return self._ok()

    # ---- categories ----

    async def add_category(self, name: str) -> bool:
        name = name.strip()
        if not name:
            self.state.error = "Category name must not be empty."
            return False
        try:
            await self._categories.create_category(name)
        except ApiError as e:
            return self._fail(f"create category {name!r}", e)
        try:
            self.state.categories = await self._categories.fetch_categories()
        except ApiError as e:
            # Created on the server; keep the local list usable without the refresh.
            logger.info("refresh categories after creating %r failed: %s", name, e)
            self.state.categories = sort_unique_strings([*self.state.categories, name])
        logger.info("Created category %r", name)
        return self._ok()

    async def remove_category(self, name: str) -> bool:
        try:
            await self._categories.delete_category(name)
        except ApiError as e:
            return self._fail(f"delete category {name!r}", e)
        self.state.categories = [c for c in self.state.categories if c != name]
        if self.state.category_filter == name:
            self.state.category_filter = ""
        logger.info("Deleted category %r", name)
        return self._ok()

    # ---- view filters ----

    def set_search(self, query: str) -> None:
        self.state.search_query = query.strip()

    def set_category_filter(self, category: str) -> None:
        self.state.category_filter = category.strip()
