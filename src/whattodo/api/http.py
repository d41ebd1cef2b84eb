# src/whattodo/api/http.py

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..errors import ApiError

logger = logging.getLogger(__name__)


def make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


def _error_message(status: int, text: str) -> str:
    return f"HTTP {status} – {text}" if text else f"HTTP {status}"


class JsonHttpClient:
    """
    Thin JSON helper over httpx.AsyncClient.

    - non-2xx -> ApiError("HTTP {status}[ – body]")
    - transport failure -> ApiError("Network error: ...")
    - empty body (e.g. 204) -> {}
    No retries.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: httpx.Timeout | float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> JsonHttpClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def get_json(self, path: str) -> Any:
        return await self._request("GET", path)

    async def send_json(self, path: str, method: str, body: Any = None) -> Any:
        return await self._request(method.upper(), path, body=body, send_body=body is not None)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        send_body: bool = False,
    ) -> Any:
        kwargs: dict[str, Any] = {}
        if send_body:
            kwargs["content"] = json.dumps(body)
            kwargs["headers"] = {"Content-Type": "application/json"}

        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            res = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.info("%s %s failed: %s", method, path, e)
            raise ApiError(f"Network error: {e}") from e

        text = res.text
        if not res.is_success:
            logger.info("%s %s -> HTTP %s", method, path, res.status_code)
            raise ApiError(_error_message(res.status_code, text), status=res.status_code, body=text)

        if not text.strip():
            return {}
        try:
            return json.loads(text)
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {method} {path}", status=res.status_code, body=text) from e
