# tests/conftest.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from whattodo.calendar.state import CalendarState
from whattodo.core.state import AppState
from whattodo.core.todo import TodoController

from .fakes import FakeCategoryGateway, FakeClock, FakeTaskGateway


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the controller.

    A SimpleNamespace instead of the real config keeps tests independent of the environment.
    """
    return SimpleNamespace(
        app_name="whattodo-test",
        api_base="http://test",
        default_color="#0d6efd",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(date(2026, 1, 15))


@pytest.fixture()
def task_gw() -> FakeTaskGateway:
    return FakeTaskGateway()


@pytest.fixture()
def category_gw() -> FakeCategoryGateway:
    return FakeCategoryGateway()


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    return AppState(settings=settings, calendar=CalendarState(clock=clock))


@pytest.fixture()
def ctl(
    state: AppState, task_gw: FakeTaskGateway, category_gw: FakeCategoryGateway
) -> TodoController:
    return TodoController(state, task_gw, category_gw)
