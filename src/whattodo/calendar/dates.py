# src/whattodo/calendar/dates.py

"""
ISO date codec.

Dates travel between the backend and the view as "YYYY-MM-DD" strings.
Parsing is lenient the same way the web front end was: a broken month or day
becomes 1, and out-of-range parts roll over like a calendar does
("2026-02-30" is 2 March). Only a missing year is an error.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..errors import InvalidISODate

MONTHS_DE: tuple[str, ...] = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)


def to_iso(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def _part(parts: list[str], idx: int) -> int | None:
    if idx >= len(parts):
        return None
    try:
        return int(parts[idx].strip())
    except ValueError:
        return None


def from_iso(s: str) -> date:
    """
    Parse "YYYY-MM-DD" into a date.

    - missing/unparseable month -> 1
    - missing/unparseable day -> 1
    - month/day outside their range roll over into neighbouring months/years
    """
    parts = str(s).split("-")
    year = _part(parts, 0)
    if year is None:
        raise InvalidISODate(f"Invalid ISO date: {s!r}")

    month = _part(parts, 1)
    day = _part(parts, 2)
    if month is None:
        month = 1
    if day is None:
        day = 1

    # Normalize month first (0 -> December of previous year, 13 -> January of next).
    y = year + (month - 1) // 12
    m = (month - 1) % 12 + 1
    try:
        return date(y, m, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as e:
        raise InvalidISODate(f"Invalid ISO date: {s!r}") from e


def format_badge_date(iso: str) -> str:
    """Render an ISO date as DD.MM.YYYY (no locale involved)."""
    d = from_iso(iso)
    return f"{d.day:02d}.{d.month:02d}.{d.year:04d}"


def month_start(d: date) -> date:
    return d.replace(day=1)
