"""Fixtures for live API tests.

These tests talk to a running Venus backend configured via environment
variables:
- VENUS_LIVE_API_URL: API root of the backend (e.g. http://localhost:8085)
- VENUS_LIVE_USERNAME / VENUS_LIVE_PASSWORD: an existing account
"""

import os

import pytest

from venus_client import ApiConfig, InMemorySessionStore, resolve_api_config


@pytest.fixture
def live_config() -> ApiConfig:
    """Configuration for the live backend."""
    root = os.getenv("VENUS_LIVE_API_URL")
    if not root:
        pytest.skip("VENUS_LIVE_API_URL environment variable not set")
    return resolve_api_config(root, environ={}, timeout=30.0)


@pytest.fixture
def live_credentials() -> dict[str, str]:
    """Login credentials for the live backend."""
    username = os.getenv("VENUS_LIVE_USERNAME")
    password = os.getenv("VENUS_LIVE_PASSWORD")
    if not (username and password):
        pytest.skip("VENUS_LIVE_USERNAME and VENUS_LIVE_PASSWORD must be set")
    return {"username": username, "password": password}


@pytest.fixture
def live_store() -> InMemorySessionStore:
    return InMemorySessionStore()
