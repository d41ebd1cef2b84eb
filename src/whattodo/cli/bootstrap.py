# src/whattodo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the httpx-backed JSON client and the remote services,
- wires them with AppState into a TodoController.
"""

from __future__ import annotations

import logging
from datetime import date

import httpx

from ..api.category_service import CategoryService
from ..api.http import JsonHttpClient, make_timeout
from ..api.task_service import TaskService
from ..calendar.state import CalendarState
from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..core.todo import TodoController

logger = logging.getLogger(__name__)


def create_http_client(settings, *, transport: httpx.AsyncBaseTransport | None = None) -> JsonHttpClient:
    timeout = make_timeout(settings.http_connect_timeout, settings.http_read_timeout)
    return JsonHttpClient(settings.api_base, timeout=timeout, transport=transport)


def create_controller(
    *,
    settings=None,
    http: JsonHttpClient | None = None,
    clock: Clock = date.today,
) -> TodoController:
    """
    Create a TodoController from the provided settings.

    Keeping settings/http/clock injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if http is None:
        http = create_http_client(settings)

    state = AppState(settings=settings, calendar=CalendarState(clock=clock))
    logger.debug("Controller wired against %s", http.base_url)
    return TodoController(state, TaskService(http), CategoryService(http))
