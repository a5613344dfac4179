"""Client factory functions for creating pre-configured httpx clients."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence

import httpx

from ..session import TOKEN_KEY, SessionStore
from .config import ApiConfig

logger = logging.getLogger(__name__)

RequestHook = Callable[[httpx.Request], None]
AsyncRequestHook = Callable[[httpx.Request], Awaitable[None]]


def _normalize_base_url(base_url: str) -> str:
    """Ensure base_url ends with a trailing slash for consistent URL joining."""
    return base_url.rstrip("/") + "/"


# Applied per request so the multipart boundary httpx sets for uploads wins.
_HOOK_HEADERS = frozenset({"content-type"})


def _split_default_headers(
    headers: Mapping[str, str],
) -> tuple[dict[str, str], dict[str, str]]:
    """Split default headers into client-level headers and hook-applied headers."""
    client_headers: dict[str, str] = {}
    hook_headers: dict[str, str] = {}
    for key, value in headers.items():
        target = hook_headers if key.lower() in _HOOK_HEADERS else client_headers
        target[key] = value
    return client_headers, hook_headers


def _create_static_headers_hook(headers: Mapping[str, str]) -> RequestHook:
    """Create a request hook that adds static headers to every request.

    Uses setdefault so per-request headers take precedence.
    """
    headers = dict(headers)

    def hook(request: httpx.Request) -> None:
        for key, value in headers.items():
            request.headers.setdefault(key, value)

    return hook


def _create_auth_hook(store: SessionStore) -> RequestHook:
    """Create a request hook that attaches the persisted bearer token.

    The token is read from ``store`` right before each request. When no
    token is stored the request goes out unauthenticated.
    """

    def hook(request: httpx.Request) -> None:
        token = store.get(TOKEN_KEY)
        if token:
            request.headers.setdefault("Authorization", f"Bearer {token}")
        logger.debug(
            "%s %s (authenticated=%s)", request.method, request.url, bool(token)
        )

    return hook


def _as_async(hook: RequestHook) -> AsyncRequestHook:
    # httpx.AsyncClient awaits every event hook.
    async def async_hook(request: httpx.Request) -> None:
        hook(request)

    return async_hook


def _request_hooks(
    hook_headers: Mapping[str, str], store: SessionStore
) -> list[RequestHook]:
    return [_create_static_headers_hook(hook_headers), _create_auth_hook(store)]


def _prepend_request_hooks(
    client: httpx.Client | httpx.AsyncClient,
    hooks: Sequence[Callable[[httpx.Request], object]],
) -> None:
    """Prepend request hooks to an existing client's event hooks.

    Prepending ensures our default hooks run first, allowing user-configured
    hooks to override or intercept the defaults.
    """
    existing_hooks = list(client.event_hooks.get("request", []))
    client.event_hooks["request"] = list(hooks) + existing_hooks


def create_api_client(
    config: ApiConfig,
    store: SessionStore,
    *,
    client: httpx.Client | None = None,
) -> httpx.Client:
    """Create or configure a sync httpx client for the Venus API.

    Args:
        config: Resolved API configuration.
        store: Session store the auth hook reads the token from.
        client: Optional existing client to configure. If provided, the
            header and auth hooks are prepended to its existing hooks, the
            default headers are merged into its headers, and its own
            base_url and timeout are kept.

    Returns:
        An httpx.Client bound to ``config.base_url`` with the hooks installed.
    """
    client_headers, hook_headers = _split_default_headers(config.default_headers)
    hooks = _request_hooks(hook_headers, store)

    if client is not None:
        client.headers.update(client_headers)
        _prepend_request_hooks(client, hooks)
        return client

    return httpx.Client(
        base_url=_normalize_base_url(config.base_url),
        headers=client_headers,
        timeout=httpx.Timeout(config.timeout),
        event_hooks={"request": hooks},
    )


def create_api_async_client(
    config: ApiConfig,
    store: SessionStore,
    *,
    client: httpx.AsyncClient | None = None,
) -> httpx.AsyncClient:
    """Create or configure an async httpx client for the Venus API.

    Same as :func:`create_api_client`, with the hooks wrapped as coroutines.
    """
    client_headers, hook_headers = _split_default_headers(config.default_headers)
    hooks = [_as_async(hook) for hook in _request_hooks(hook_headers, store)]

    if client is not None:
        client.headers.update(client_headers)
        _prepend_request_hooks(client, hooks)
        return client

    return httpx.AsyncClient(
        base_url=_normalize_base_url(config.base_url),
        headers=client_headers,
        timeout=httpx.Timeout(config.timeout),
        event_hooks={"request": hooks},
    )


__all__ = [
    "create_api_client",
    "create_api_async_client",
]
