# src/whattodo/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.todo import TodoController

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(
    ctl: TodoController,
    loop: asyncio.AbstractEventLoop,
    *,
    prompt: str = "todo> ",
) -> None:
    """
    Blocking REPL.

    input() runs on the main thread so Ctrl-C arrives as KeyboardInterrupt here;
    async commands run on `loop`, the same loop the HTTP client lives on.
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    if ctl.state.error:
        _print_ts(f"Error: {ctl.state.error}")

    while True:
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Bare text is a shortcut for /add.
            user_input = f"/add {user_input}"

        try:
            response = loop.run_until_complete(command_registry.handle(ctl, user_input))
        except KeyboardInterrupt:
            logger.info("Command interrupted.")
            response = "Interrupted."
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
