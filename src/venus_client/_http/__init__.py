"""Shared HTTP infrastructure for Venus API clients."""

from .clients import create_api_async_client, create_api_client
from .config import (
    API_PREFIX,
    API_URL_ENV,
    DEFAULT_DEV_ROOT,
    MODE_ENV,
    ApiConfig,
    resolve_api_config,
)
from .iter_coroutine import iter_coroutine
from .transport import (
    AsyncTransport,
    BaseTransport,
    JSONBody,
    MultipartBody,
    RequestBody,
    SyncTransport,
)

__all__ = [
    "API_PREFIX",
    "API_URL_ENV",
    "DEFAULT_DEV_ROOT",
    "MODE_ENV",
    "ApiConfig",
    "resolve_api_config",
    "iter_coroutine",
    "BaseTransport",
    "SyncTransport",
    "AsyncTransport",
    "JSONBody",
    "MultipartBody",
    "RequestBody",
    "create_api_client",
    "create_api_async_client",
]
