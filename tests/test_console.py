# tests/test_console.py

from __future__ import annotations

import asyncio
import builtins
import logging
import os
import signal
import subprocess
import sys
import textwrap
import threading
import time
from collections.abc import Iterator
from pathlib import Path

import pytest

from whattodo.cli.commands import registry
from whattodo.connectors.console_connector import run_console_loop
from whattodo.core.todo import TodoController
from whattodo.logging_setup import setup_logging

from .fakes import FakeTaskGateway

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture()
def loop() -> Iterator[asyncio.AbstractEventLoop]:
    lp = asyncio.new_event_loop()
    try:
        yield lp
    finally:
        lp.close()


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_console_runs_commands_until_exit(
    ctl: TodoController,
    task_gw: FakeTaskGateway,
    loop: asyncio.AbstractEventLoop,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _feed(monkeypatch, ["", "buy milk", "/list", "/exit", "/add never"])

    run_console_loop(ctl, loop)

    out = capsys.readouterr().out
    assert "Added #100 buy milk" in out
    assert "[ ] #100 buy milk" in out
    assert [c[1].name for c in task_gw.calls] == ["buy milk"]


def test_console_stops_on_eof_and_survives_crashing_command(
    ctl: TodoController,
    loop: asyncio.AbstractEventLoop,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def boom(ctl, args):
        raise RuntimeError("boom")

    registry.register("boom", boom, "test only")
    try:
        _feed(monkeypatch, ["/boom", "/help"])
        run_console_loop(ctl, loop)
    finally:
        registry._handlers.pop("boom", None)
        registry._help.pop("boom", None)

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert "Available commands:" in out


def test_console_ctrl_c_at_prompt_exits_loop(
    ctl: TodoController,
    loop: asyncio.AbstractEventLoop,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def interrupted(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupted)

    run_console_loop(ctl, loop)  # returns instead of propagating


_SIGINT_SCRIPT = textwrap.dedent(
    """
    import asyncio
    from types import SimpleNamespace

    from whattodo.calendar.state import CalendarState
    from whattodo.connectors.console_connector import run_console_loop
    from whattodo.core.state import AppState
    from whattodo.core.todo import TodoController
    from tests.fakes import FakeCategoryGateway, FakeTaskGateway

    loop = asyncio.new_event_loop()
    state = AppState(settings=SimpleNamespace(), calendar=CalendarState())
    run_console_loop(TodoController(state, FakeTaskGateway(), FakeCategoryGateway()), loop)
    loop.close()
    print("STOPPED", flush=True)
    """
)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signal delivery")
def test_sigint_while_waiting_for_input_stops_console() -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join([str(ROOT / "src"), str(ROOT), env.get("PYTHONPATH", "")])
    proc = subprocess.Popen(
        [sys.executable, "-c", _SIGINT_SCRIPT],
        cwd=str(ROOT),
        env=env,
        stdin=subprocess.PIPE,  # held open: input() blocks
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )

    chunks: list[bytes] = []

    def _pump() -> None:
        assert proc.stdout is not None
        while True:
            data = proc.stdout.read1(4096)
            if not data:
                break
            chunks.append(data)

    reader = threading.Thread(target=_pump, daemon=True)
    reader.start()

    try:
        deadline = time.monotonic() + 15.0
        while b"todo> " not in b"".join(chunks):
            assert time.monotonic() < deadline, f"prompt never shown; output={b''.join(chunks)!r}"
            assert proc.poll() is None, f"exited early; output={b''.join(chunks)!r}"
            time.sleep(0.05)

        proc.send_signal(signal.SIGINT)
        try:
            proc.wait(timeout=5.0)
        except subprocess.TimeoutExpired:
            pytest.fail(f"console still running after SIGINT; output={b''.join(chunks)!r}")
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
        reader.join(timeout=2.0)
        if proc.stdin is not None:
            proc.stdin.close()

    out = b"".join(chunks)
    assert proc.returncode == 0, out
    assert b"STOPPED" in out


def test_setup_logging_writes_log_file(tmp_path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("whattodo.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "whattodo.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)
