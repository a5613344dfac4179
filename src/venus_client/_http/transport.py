"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

FileTuple = tuple[str, bytes, str]


@dataclass(frozen=True, slots=True)
class JSONBody:
    """JSON request body - sent with Content-Type application/json."""

    data: Any


@dataclass(frozen=True, slots=True)
class MultipartBody:
    """multipart/form-data request body.

    ``files`` maps field names to ``(filename, content, content_type)``;
    ``data`` holds plain form fields.
    """

    files: Mapping[str, FileTuple]
    data: Mapping[str, str] = field(default_factory=dict)


RequestBody = JSONBody | MultipartBody | None


def _request_kwargs(
    *,
    params: dict[str, Any] | None,
    body: RequestBody,
    headers: dict[str, str] | None,
) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"params": params or None, "headers": headers}
    if isinstance(body, JSONBody):
        kwargs["json"] = body.data
    elif isinstance(body, MultipartBody):
        kwargs["files"] = dict(body.files)
        kwargs["data"] = dict(body.data) or None
    return kwargs


def _normalize_path(path: str) -> str:
    # base_url always ends with "/", so relative paths join under it
    return path.lstrip("/")


class BaseTransport(abc.ABC):
    """Abstract transport with an async interface."""

    @abc.abstractmethod
    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: RequestBody = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send an HTTP request and return the response."""
        ...


class SyncTransport(BaseTransport):
    """
    Blocking transport over a configured httpx.Client.

    ``send`` is declared async but never suspends, so it can be driven by
    iter_coroutine().
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        return self._client

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: RequestBody = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return self._client.request(
            method,
            _normalize_path(path),
            **_request_kwargs(params=params, body=body, headers=headers),
        )

    def close(self) -> None:
        self._client.close()


class AsyncTransport(BaseTransport):
    """Async transport over a configured httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: RequestBody = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._client.request(
            method,
            _normalize_path(path),
            **_request_kwargs(params=params, body=body, headers=headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = [
    "BaseTransport",
    "SyncTransport",
    "AsyncTransport",
    "JSONBody",
    "MultipartBody",
    "RequestBody",
]
