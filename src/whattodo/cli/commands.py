# src/whattodo/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from ..calendar.dates import from_iso, to_iso
from ..core.todo import TodoController
from ..errors import InvalidISODate
from .render import render_calendar, render_task_list

CommandHandler = Callable[[TodoController, list[str]], str | Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, ctl: TodoController, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        result = handler(ctl, args)
        if inspect.isawaitable(result):
            result = await result
        return result

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _canonical_iso(raw: str) -> str | None:
    try:
        return to_iso(from_iso(raw))
    except InvalidISODate:
        return None


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def _with_error(ctl: TodoController, ok_text: str) -> str:
    return f"Error: {ctl.state.error}" if ctl.state.error else ok_text


def cmd_help(ctl: TodoController, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(ctl: TodoController, args: list[str]) -> str:
    st = ctl.state
    cal = st.calendar
    return (
        "Status:\n"
        f"  API: {getattr(st.settings, 'api_base', '?')}\n"
        f"  Tasks: {len(st.tasks)} (visible {len(st.visible_tasks())})\n"
        f"  Categories: {len(st.categories)}\n"
        f"  Month: {cal.month_label}\n"
        f"  Date filter: {cal.selected_date or 'off'}\n"
        f"  Search: {st.search_query or 'off'}\n"
        f"  Category filter: {st.category_filter or 'off'}\n"
        f"  Last error: {st.error or '-'}"
    )


def cmd_list(ctl: TodoController, args: list[str]) -> str:
    return render_task_list(ctl.state.visible_tasks())


async def cmd_reload(ctl: TodoController, args: list[str]) -> str:
    await ctl.load()
    return _with_error(ctl, render_task_list(ctl.state.visible_tasks()))


async def cmd_add(ctl: TodoController, args: list[str]) -> str:
    """
    /add buy milk ! #home @2026-01-10 color=#198754
    """
    usage = "Usage: /add <name> [!] [#category] [@YYYY-MM-DD] [color=#hex]"
    name_parts: list[str] = []
    important = False
    category = ""
    color: str | None = None
    day: str | None = None

    for a in args:
        if a == "!":
            important = True
        elif a.startswith("#") and len(a) > 1:
            category = a[1:]
        elif a.startswith("@") and len(a) > 1:
            day = _canonical_iso(a[1:])
            if day is None:
                return f"Invalid date: {a[1:]}. {usage}"
        elif a.startswith("color=") and len(a) > len("color="):
            color = a[len("color=") :]
        else:
            name_parts.append(a)

    if not name_parts:
        return usage

    task = await ctl.add_task(
        " ".join(name_parts), important=important, category=category, color=color, date=day
    )
    if task is None:
        return f"Error: {ctl.state.error}"
    return f"Added #{task.id} {task.task_name}"


async def cmd_done(ctl: TodoController, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    if not await ctl.toggle_done(task_id):
        return f"Error: {ctl.state.error}"
    task = ctl.state.find_task(task_id)
    return f"#{task_id} is now {'done' if task and task.done else 'open'}."


async def cmd_rm(ctl: TodoController, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if not await ctl.remove_task(task_id):
        return f"Error: {ctl.state.error}"
    return f"Deleted #{task_id}."


def cmd_cats(ctl: TodoController, args: list[str]) -> str:
    cats = ctl.state.categories
    if not cats:
        return "No categories."
    current = ctl.state.category_filter
    return "Categories:\n" + "\n".join(f"  {'>' if c == current else ' '} {c}" for c in cats)


async def cmd_cat(ctl: TodoController, args: list[str]) -> str:
    """
    /cat add <name>    -> create category
    /cat rm <name>     -> delete category
    /cat use <name>    -> filter list by category (/cat use off to reset)
    """
    usage = "Usage: /cat add <name> | /cat rm <name> | /cat use <name>|off"
    if len(args) < 2:
        return usage

    sub = args[0].lower()
    name = " ".join(args[1:])

    if sub == "add":
        if not await ctl.add_category(name):
            return f"Error: {ctl.state.error}"
        return f"Category {name!r} created."

    if sub in ("rm", "del"):
        if not await ctl.remove_category(name):
            return f"Error: {ctl.state.error}"
        return f"Category {name!r} deleted."

    if sub == "use":
        if name.lower() == "off":
            ctl.set_category_filter("")
            return "Category filter off."
        ctl.set_category_filter(name)
        return f"Category filter: {name}"

    return usage


def cmd_search(ctl: TodoController, args: list[str]) -> str:
    ctl.set_search(" ".join(args))
    return render_task_list(ctl.state.visible_tasks())


def cmd_cal(ctl: TodoController, args: list[str]) -> str:
    return render_calendar(ctl.state.calendar, ctl.state.task_days())


def cmd_prev(ctl: TodoController, args: list[str]) -> str:
    ctl.state.calendar.prev_month()
    return cmd_cal(ctl, args)


def cmd_next(ctl: TodoController, args: list[str]) -> str:
    ctl.state.calendar.next_month()
    return cmd_cal(ctl, args)


def cmd_year(ctl: TodoController, args: list[str]) -> str:
    cal = ctl.state.calendar
    options = ", ".join(str(y) for y in cal.year_options)
    if not args:
        return f"Year: {cal.selected_year}. Options: {options}"
    try:
        year = int(args[0])
    except ValueError:
        return f"Usage: /year <yyyy> (options: {options})"
    if year not in cal.year_options:
        return f"Year must be one of: {options}"
    cal.set_year(year)
    return cmd_cal(ctl, args)


def cmd_month(ctl: TodoController, args: list[str]) -> str:
    try:
        ctl.state.calendar.set_month(int(args[0]))
    except (IndexError, ValueError):
        return "Usage: /month <1-12>"
    return cmd_cal(ctl, args)


def cmd_day(ctl: TodoController, args: list[str]) -> str:
    iso = _canonical_iso(args[0]) if args else None
    if iso is None:
        return "Usage: /day <YYYY-MM-DD>"
    ctl.state.calendar.select_day(iso)
    return render_task_list(ctl.state.visible_tasks())


def cmd_clear(ctl: TodoController, args: list[str]) -> str:
    ctl.state.calendar.clear_date_filter()
    return render_task_list(ctl.state.visible_tasks())


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show API, counts and active filters.")
registry.register("list", cmd_list, help_text="Show the (filtered) task list.", aliases=["ls"])
registry.register("reload", cmd_reload, help_text="Fetch tasks and categories again.")
registry.register(
    "add", cmd_add, help_text="Create a task: /add <name> [!] [#category] [@YYYY-MM-DD] [color=#hex]."
)
registry.register("done", cmd_done, help_text="Toggle done: /done <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("cats", cmd_cats, help_text="List categories.")
registry.register("cat", cmd_cat, help_text="Categories: /cat add|rm|use <name>.")
registry.register("search", cmd_search, help_text="Filter by name: /search <text> (empty to reset).")
registry.register("cal", cmd_cal, help_text="Show the calendar month.")
registry.register("prev", cmd_prev, help_text="Previous month.")
registry.register("next", cmd_next, help_text="Next month.")
registry.register("year", cmd_year, help_text="Jump to year: /year <yyyy>.")
registry.register("month", cmd_month, help_text="Jump to month: /month <1-12>.")
registry.register("day", cmd_day, help_text="Filter by date: /day <YYYY-MM-DD>.")
registry.register("clear", cmd_clear, help_text="Clear the date filter.")
