"""Venus auth API."""

from .client import AsyncAuthClient, AuthClient

__all__ = ["AuthClient", "AsyncAuthClient"]
