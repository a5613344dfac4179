"""Auth API client classes."""

from __future__ import annotations

from typing import Any

from .._http import iter_coroutine
from ..models import AuthSession, User
from ._core import _BaseAuthClient


class AuthClient(_BaseAuthClient):
    """Synchronous client for the Venus auth API."""

    def register(self, user_data: dict[str, Any]) -> AuthSession:
        """Create an account and store the returned token."""
        return iter_coroutine(self._register(user_data))

    def login(self, credentials: dict[str, Any]) -> AuthSession:
        """Log in and store the returned token."""
        return iter_coroutine(self._login(credentials))

    def get_current_user(self) -> User:
        """Fetch the user the stored token belongs to."""
        return iter_coroutine(self._get_current_user())


class AsyncAuthClient(_BaseAuthClient):
    """Asynchronous client for the Venus auth API."""

    async def register(self, user_data: dict[str, Any]) -> AuthSession:
        """Create an account and store the returned token."""
        return await self._register(user_data)

    async def login(self, credentials: dict[str, Any]) -> AuthSession:
        """Log in and store the returned token."""
        return await self._login(credentials)

    async def get_current_user(self) -> User:
        """Fetch the user the stored token belongs to."""
        return await self._get_current_user()


__all__ = ["AuthClient", "AsyncAuthClient"]
