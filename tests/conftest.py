"""Shared fixtures for all tests."""

from collections.abc import Generator

import pytest

from venus_client import ApiConfig, InMemorySessionStore, resolve_api_config
from venus_client.session import TOKEN_KEY


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear all Venus-related environment variables for testing.

    This ensures tests don't pick up a real API root or session file from
    the environment.
    """
    env_vars_to_clear = [
        "VENUS_API_URL",
        "VENUS_ENV",
        "VENUS_SESSION_FILE",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def api_config() -> ApiConfig:
    """Development configuration pointing at the local backend."""
    return resolve_api_config(mode="development", environ={})


@pytest.fixture
def mock_token() -> str:
    """Mock session token for testing."""
    return "test_token_123456789"


@pytest.fixture
def store() -> InMemorySessionStore:
    """Empty (logged out) session store."""
    return InMemorySessionStore()


@pytest.fixture
def authed_store(mock_token: str) -> InMemorySessionStore:
    """Session store holding a token, as after a login."""
    return InMemorySessionStore({TOKEN_KEY: mock_token})
