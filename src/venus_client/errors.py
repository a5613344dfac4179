"""Errors raised by the Venus API clients."""

from __future__ import annotations

from typing import Any

import httpx


class APIError(httpx.HTTPStatusError):
    """Non-2xx response from the Venus API.

    Subclasses httpx.HTTPStatusError so callers can catch either. The
    original request and response are kept untouched; ``data`` holds the
    decoded JSON error payload, or None when the body is not JSON.
    """

    def __init__(self, response: httpx.Response, message: str, *, data: Any | None = None):
        super().__init__(message, request=response.request, response=response)
        self.status_code = response.status_code
        self.data = data


def _parse_error_message(response: httpx.Response) -> tuple[str, Any | None]:
    """Parse error message from API response."""
    parsed: Any | None = None
    message = f"HTTP {response.status_code}"
    try:
        parsed = response.json()
    except ValueError:
        parsed = None

    detail: str | None = None
    if isinstance(parsed, dict):
        candidate = parsed.get("message") or parsed.get("error")
        if isinstance(candidate, str) and candidate:
            detail = candidate
    elif parsed is None and response.text:
        text = response.text
        detail = text if len(text) <= 500 else text[:500] + "..."

    detail = detail or response.reason_phrase
    if detail:
        message = f"{message}: {detail}"
    return message, parsed


def raise_for_status(response: httpx.Response) -> None:
    """Raise APIError unless ``response`` has a 2xx status."""
    if response.is_success:
        return
    message, data = _parse_error_message(response)
    raise APIError(response, message, data=data)


__all__ = ["APIError", "raise_for_status"]
