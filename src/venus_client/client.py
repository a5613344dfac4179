"""Venus API clients with namespaced sub-clients."""

from __future__ import annotations

from typing import Any

import httpx

from ._http import (
    ApiConfig,
    AsyncTransport,
    SyncTransport,
    create_api_async_client,
    create_api_client,
    resolve_api_config,
)
from .auth import AsyncAuthClient, AuthClient
from .images import AsyncImagesClient, ImagesClient
from .projects import AsyncProjectsClient, ProjectsClient
from .session import FileSessionStore, SessionStore


class VenusClient:
    """Synchronous Venus API client.

    One transport is built from ``config`` and shared by the ``auth``,
    ``projects`` and ``images`` sub-clients. Without a ``config`` the
    environment is resolved with :func:`resolve_api_config`; without a
    ``store`` the session is kept in a :class:`FileSessionStore`.
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        store: SessionStore | None = None,
        *,
        http_client: httpx.Client | None = None,
    ):
        self.config = config if config is not None else resolve_api_config()
        self.store = store if store is not None else FileSessionStore()
        self._transport = SyncTransport(
            create_api_client(self.config, self.store, client=http_client)
        )
        self.auth = AuthClient(self._transport, self.store)
        self.projects = ProjectsClient(self._transport)
        self.images = ImagesClient(self._transport, self.config)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> VenusClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncVenusClient:
    """Asynchronous Venus API client.

    The auth hook reads the session store synchronously before each request.
    With the default :class:`FileSessionStore` that is a small file read on the
    event loop; pass an :class:`InMemorySessionStore` for request-heavy code.
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        store: SessionStore | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config if config is not None else resolve_api_config()
        self.store = store if store is not None else FileSessionStore()
        self._transport = AsyncTransport(
            create_api_async_client(self.config, self.store, client=http_client)
        )
        self.auth = AsyncAuthClient(self._transport, self.store)
        self.projects = AsyncProjectsClient(self._transport)
        self.images = AsyncImagesClient(self._transport, self.config)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> AsyncVenusClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


__all__ = ["VenusClient", "AsyncVenusClient"]
