# src/whattodo/errors.py

from __future__ import annotations


class WhatToDoError(Exception):
    """Base class for errors raised by whattodo."""


class ApiError(WhatToDoError):
    """
    Remote API failure (non-2xx response or transport problem).

    The message is user-facing and shown verbatim by the view,
    e.g. "HTTP 500 – fail" or "Network error: ...".
    """

    def __init__(self, message: str, *, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class InvalidISODate(WhatToDoError, ValueError):
    """Raised when an ISO date string has no usable year."""
