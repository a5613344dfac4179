"""Persistent session storage for the bearer token and cached user."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Protocol

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"

SESSION_FILE_ENV = "VENUS_SESSION_FILE"


class SessionStore(Protocol):
    """Key/value storage holding the session token and cached user."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class InMemorySessionStore:
    """Session store that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


def _user_data_dir() -> str | None:
    try:
        home = os.path.expanduser("~")
        if sys.platform.startswith("win"):
            return os.environ.get("APPDATA") or os.path.join(home, "AppData", "Roaming")
        if sys.platform == "darwin":
            return os.path.join(home, "Library", "Application Support")
        return os.environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")
    except Exception:
        return None


def default_session_path() -> str:
    """Location of the session file: VENUS_SESSION_FILE or the user config dir."""
    env_path = os.getenv(SESSION_FILE_ENV)
    if env_path:
        return env_path
    base = _user_data_dir()
    if not base:
        raise RuntimeError(
            f"Unable to find user data directory. Set {SESSION_FILE_ENV}=..."
        )
    return os.path.join(base, "venus-client", "session.json")


class FileSessionStore:
    """Session store persisted as a JSON object in a single file.

    Every write rewrites the whole file. A missing or unreadable file reads
    as an empty session.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = os.fspath(path) if path is not None else default_session_path()

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> dict[str, str]:
        if not os.path.exists(self._path):
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.debug("Ignoring unreadable session file %s", self._path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        directory = os.path.dirname(self._path)
        try:
            if directory:
                os.makedirs(directory, mode=0o700, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            try:
                os.chmod(self._path, 0o600)
            except OSError:
                pass
        except OSError as e:
            raise RuntimeError(f"Failed to write session file {self._path}") from e

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug("Stored session key %r in %s", key, self._path)

    def delete(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._save(data)
        logger.debug("Removed session key %r from %s", key, self._path)


def clear_session(store: SessionStore) -> None:
    """Remove the token and cached user together."""
    store.delete(TOKEN_KEY)
    store.delete(USER_KEY)


__all__ = [
    "SESSION_FILE_ENV",
    "TOKEN_KEY",
    "USER_KEY",
    "FileSessionStore",
    "InMemorySessionStore",
    "SessionStore",
    "clear_session",
    "default_session_path",
]
