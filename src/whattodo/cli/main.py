# src/whattodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, wires the controller, loads tasks and categories once,
then runs the console REPL until /exit, EOF or Ctrl-C.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from .bootstrap import create_controller, create_http_client

logger = logging.getLogger(__name__)


def _run(settings) -> None:
    # One loop for the whole session: the httpx client's connections are bound to it.
    loop = asyncio.new_event_loop()
    http = create_http_client(settings)
    try:
        ctl = create_controller(settings=settings, http=http)
        loop.run_until_complete(ctl.load())
        if settings.console_enabled:
            run_console_loop(ctl, loop)
        else:
            logger.info("Console disabled; loaded %d tasks.", len(ctl.state.tasks))
    finally:
        loop.run_until_complete(http.aclose())
        loop.close()


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s against %s...", settings.app_name, settings.api_base)

    try:
        _run(settings)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
