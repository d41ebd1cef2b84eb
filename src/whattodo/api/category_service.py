# src/whattodo/api/category_service.py

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from .http import JsonHttpClient


def sort_unique_strings(xs: Iterable[Any]) -> list[str]:
    """Drop blanks and non-strings, de-duplicate, sort case-insensitively."""
    return sorted({x for x in xs if isinstance(x, str) and x.strip()}, key=lambda s: (s.casefold(), s))


class CategoryService:
    def __init__(self, http: JsonHttpClient) -> None:
        self._http = http

    async def fetch_categories(self) -> list[str]:
        raw = await self._http.get_json("/categories")
        if not isinstance(raw, list):
            return []
        return sort_unique_strings(raw)

    async def create_category(self, name: str) -> None:
        await self._http.send_json("/categories", "POST", {"name": name})

    async def delete_category(self, name: str) -> None:
        await self._http.send_json(f"/categories/{quote(name, safe='')}", "DELETE")
