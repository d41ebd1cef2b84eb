# tests/test_bootstrap.py

from __future__ import annotations

import json
from datetime import date
from types import SimpleNamespace

import httpx
import pytest

from whattodo.cli.bootstrap import create_controller, create_http_client

from .fakes import FakeClock


def _settings() -> SimpleNamespace:
    return SimpleNamespace(
        api_base="http://test",
        http_connect_timeout=1.0,
        http_read_timeout=1.0,
        default_color="#0d6efd",
    )


class FakeBackend:
    """
    Tiny in-memory backend behind httpx.MockTransport.

    Routes by method + path; anything unknown fails the test loudly.
    """

    def __init__(self) -> None:
        self.tasks: list[dict] = []
        self.categories: list[str] = []
        self.requests: list[tuple[str, str, object]] = []
        self.fail_tasks = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        body = json.loads(request.content) if request.content else None
        self.requests.append((method, path, body))

        if method == "GET" and path == "/tasks":
            if self.fail_tasks:
                return httpx.Response(500, text="fail")
            return httpx.Response(200, json=self.tasks)
        if method == "GET" and path == "/categories":
            return httpx.Response(200, json=self.categories)
        if method == "POST" and path == "/tasks":
            created = {"id": len(self.tasks) + 1, **body}
            self.tasks.append(created)
            return httpx.Response(201, json=created)
        if method == "DELETE" and path.startswith("/tasks/"):
            task_id = int(path.rsplit("/", 1)[1])
            self.tasks = [t for t in self.tasks if t["id"] != task_id]
            return httpx.Response(204)
        if method == "PATCH" and path.startswith("/tasks/"):
            return httpx.Response(200, json={})
        raise AssertionError(f"Unmocked request: {method} {path}")


@pytest.mark.asyncio
async def test_controller_against_http_backend() -> None:
    backend = FakeBackend()
    backend.tasks = [{"id": 10, "name": "first", "date": "2026-01-01"}]
    backend.categories = ["Uni", "", "Uni"]

    settings = _settings()
    async with create_http_client(settings, transport=httpx.MockTransport(backend)) as http:
        ctl = create_controller(settings=settings, http=http, clock=FakeClock(date(2026, 1, 5)))

        assert await ctl.load() is True
        assert [t.task_name for t in ctl.state.tasks] == ["first"]
        assert ctl.state.categories == ["Uni"]

        created = await ctl.add_task("Neu", date="2026-01-02")
        assert created is not None and created.id == 2
        assert backend.requests[-1][2]["taskName"] == "Neu"

        ctl.state.calendar.select_day("2026-01-01")
        assert [t.id for t in ctl.state.visible_tasks()] == [10]
        ctl.state.calendar.clear_date_filter()
        assert [t.id for t in ctl.state.visible_tasks()] == [10, 2]

        assert await ctl.toggle_done(10) is True
        assert backend.requests[-1] == ("PATCH", "/tasks/10", {"done": True})

        assert await ctl.remove_task(10) is True
        assert [t.id for t in ctl.state.tasks] == [2]


@pytest.mark.asyncio
async def test_load_error_message_is_shown_verbatim() -> None:
    backend = FakeBackend()
    backend.fail_tasks = True

    settings = _settings()
    async with create_http_client(settings, transport=httpx.MockTransport(backend)) as http:
        ctl = create_controller(settings=settings, http=http)
        assert await ctl.load() is False

    assert ctl.state.error == "HTTP 500 – fail"
