"""Core business logic for the Venus auth API."""

from __future__ import annotations

import json
import logging
from typing import Any

from .._http import BaseTransport, JSONBody
from ..errors import raise_for_status
from ..models import AuthSession, User
from ..session import TOKEN_KEY, USER_KEY, SessionStore, clear_session

logger = logging.getLogger(__name__)


class _BaseAuthClient:
    """Base class for the auth API with shared async implementation."""

    def __init__(self, transport: BaseTransport, store: SessionStore) -> None:
        self._transport = transport
        self._store = store

    def _persist(self, session: AuthSession) -> None:
        self._store.set(TOKEN_KEY, session.token)
        if session.user is not None:
            self._store.set(USER_KEY, session.user.model_dump_json())
        else:
            self._store.delete(USER_KEY)
        logger.debug("Persisted session token")

    async def _authenticate(self, path: str, body: dict[str, Any]) -> AuthSession:
        resp = await self._transport.send("POST", path, body=JSONBody(body))
        raise_for_status(resp)
        session = AuthSession.model_validate(resp.json())
        self._persist(session)
        return session

    async def _register(self, user_data: dict[str, Any]) -> AuthSession:
        return await self._authenticate("/auth/register", user_data)

    async def _login(self, credentials: dict[str, Any]) -> AuthSession:
        return await self._authenticate("/auth/login", credentials)

    async def _get_current_user(self) -> User:
        resp = await self._transport.send("GET", "/auth/user")
        raise_for_status(resp)
        return User.model_validate(resp.json())

    def logout(self) -> None:
        """Forget the stored token and cached user. Safe to call repeatedly."""
        clear_session(self._store)
        logger.debug("Cleared session")

    def get_token(self) -> str | None:
        """Return the stored bearer token, if any."""
        return self._store.get(TOKEN_KEY)

    def get_cached_user(self) -> User | None:
        """Return the user cached at login, if any."""
        raw = self._store.get(USER_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except ValueError:
            return None

    def is_authenticated(self) -> bool:
        # Same check the auth hook uses before attaching the token.
        return bool(self.get_token())


__all__ = ["_BaseAuthClient"]
