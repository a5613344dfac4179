"""HTTP configuration for Venus API clients."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

logger = logging.getLogger(__name__)

API_URL_ENV = "VENUS_API_URL"
MODE_ENV = "VENUS_ENV"

DEFAULT_DEV_ROOT = "http://localhost:8085"
API_PREFIX = "/api"

Mode = Literal["development", "production"]

_DEV_ALIASES = frozenset({"development", "dev"})


def _default_headers() -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


@dataclass(frozen=True)
class ApiConfig:
    """Resolved transport configuration.

    Built once by :func:`resolve_api_config`. ``default_headers`` is a
    read-only mapping. Use ``dataclasses.replace`` to derive a different
    configuration.
    """

    base_url: str = API_PREFIX
    image_base_url: str = ""
    default_headers: Mapping[str, str] = field(default_factory=_default_headers, hash=False)
    timeout: float | None = None

    def __post_init__(self) -> None:
        # Read-only copy detached from the caller's mapping.
        object.__setattr__(
            self, "default_headers", MappingProxyType(dict(self.default_headers))
        )


def _normalize_mode(mode: str | None) -> Mode:
    if mode and mode.strip().lower() in _DEV_ALIASES:
        return "development"
    return "production"


def resolve_api_config(
    override: str | None = None,
    mode: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> ApiConfig:
    """Resolve the API base URLs for the current environment.

    Args:
        override: Explicit API root (e.g. ``https://venus.example.com``).
            Falls back to the VENUS_API_URL env var. Empty means absent.
        mode: ``"development"`` or ``"production"``. Falls back to the
            VENUS_ENV env var, then to production.
        environ: Mapping to read env vars from. Defaults to ``os.environ``.
        timeout: Optional request timeout in seconds. ``None`` disables it.

    Returns:
        An ApiConfig whose ``base_url`` is ``<root>/api`` and whose
        ``image_base_url`` is ``<root>``. With no override in production the
        root is empty and requests use same-origin relative paths.
    """
    env = os.environ if environ is None else environ
    root = override or env.get(API_URL_ENV) or ""
    if not root:
        resolved_mode = _normalize_mode(mode if mode is not None else env.get(MODE_ENV))
        root = DEFAULT_DEV_ROOT if resolved_mode == "development" else ""
    root = root.rstrip("/")

    config = ApiConfig(
        base_url=f"{root}{API_PREFIX}",
        image_base_url=root,
        timeout=timeout,
    )
    logger.debug("Resolved API base URL %r (image base %r)", config.base_url, root)
    return config


__all__ = [
    "API_PREFIX",
    "API_URL_ENV",
    "DEFAULT_DEV_ROOT",
    "MODE_ENV",
    "ApiConfig",
    "Mode",
    "resolve_api_config",
]
