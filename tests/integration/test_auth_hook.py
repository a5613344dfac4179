"""Tests for the request hooks installed on every API client.

The auth hook reads the session token right before each request and attaches
it as a bearer credential; without a token the request goes out as-is.
"""

import httpx
import pytest
import respx
from httpx import Response

from venus_client import AsyncVenusClient, VenusClient
from venus_client._http import (
    AsyncTransport,
    SyncTransport,
    create_api_async_client,
    create_api_client,
    iter_coroutine,
)
from venus_client.session import TOKEN_KEY

API_BASE = "http://localhost:8085/api"


class TestAuthHeader:
    @respx.mock
    def test_sync_request_carries_bearer_token(self, api_config, authed_store, mock_token):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))

        with VenusClient(api_config, authed_store) as client:
            client.projects.get_projects()

        assert route.calls.last.request.headers["authorization"] == f"Bearer {mock_token}"

    @respx.mock
    def test_sync_request_without_token_has_no_authorization(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))

        with VenusClient(api_config, store) as client:
            client.projects.get_projects()

        assert "authorization" not in route.calls.last.request.headers

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_request_carries_bearer_token(self, api_config, authed_store, mock_token):
        route = respx.get(f"{API_BASE}/images").mock(return_value=Response(200, json=[]))

        async with AsyncVenusClient(api_config, authed_store) as client:
            await client.images.list_images()

        assert route.calls.last.request.headers["authorization"] == f"Bearer {mock_token}"

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_request_without_token_has_no_authorization(self, api_config, store):
        route = respx.get(f"{API_BASE}/images").mock(return_value=Response(200, json=[]))

        async with AsyncVenusClient(api_config, store) as client:
            await client.images.list_images()

        assert "authorization" not in route.calls.last.request.headers

    @respx.mock
    def test_token_is_read_on_every_request(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))

        with VenusClient(api_config, store) as client:
            client.projects.get_projects()
            store.set(TOKEN_KEY, "first")
            client.projects.get_projects()
            store.set(TOKEN_KEY, "second")
            client.projects.get_projects()
            store.delete(TOKEN_KEY)
            client.projects.get_projects()

        headers = [call.request.headers.get("authorization") for call in route.calls]
        assert headers == [None, "Bearer first", "Bearer second", None]

    @respx.mock
    def test_per_request_authorization_wins(self, api_config, authed_store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        transport = SyncTransport(create_api_client(api_config, authed_store))

        try:
            iter_coroutine(
                transport.send("GET", "/projects", headers={"Authorization": "Bearer other"})
            )
        finally:
            transport.close()

        assert route.calls.last.request.headers["authorization"] == "Bearer other"


class TestDefaultHeaders:
    @respx.mock
    def test_json_headers_on_every_request(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))

        with VenusClient(api_config, store) as client:
            client.projects.get_projects()

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert request.headers["accept"] == "application/json"

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_json_headers_on_every_request(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        transport = AsyncTransport(create_api_async_client(api_config, store))

        try:
            await transport.send("GET", "/projects")
        finally:
            await transport.aclose()

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert request.headers["accept"] == "application/json"

    @respx.mock
    def test_existing_client_gets_json_accept(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        http_client = httpx.Client(base_url=f"{API_BASE}/")

        with VenusClient(api_config, store, http_client=http_client) as client:
            client.projects.get_projects()

        assert route.calls.last.request.headers["accept"] == "application/json"

    @respx.mock
    def test_per_request_accept_wins(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        transport = SyncTransport(create_api_client(api_config, store))

        try:
            iter_coroutine(transport.send("GET", "/projects", headers={"Accept": "text/plain"}))
        finally:
            transport.close()

        assert route.calls.last.request.headers["accept"] == "text/plain"


class TestExistingClient:
    @respx.mock
    def test_hooks_run_before_user_hooks(self, api_config, authed_store, mock_token):
        respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        seen: list[str | None] = []

        def user_hook(request: httpx.Request) -> None:
            seen.append(request.headers.get("authorization"))

        http_client = httpx.Client(
            base_url=f"{API_BASE}/", event_hooks={"request": [user_hook]}
        )
        with VenusClient(api_config, authed_store, http_client=http_client) as client:
            client.projects.get_projects()

        assert seen == [f"Bearer {mock_token}"]

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_hooks_run_before_user_hooks(self, api_config, authed_store, mock_token):
        respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        seen: list[str | None] = []

        async def user_hook(request: httpx.Request) -> None:
            seen.append(request.headers.get("authorization"))

        http_client = httpx.AsyncClient(
            base_url=f"{API_BASE}/", event_hooks={"request": [user_hook]}
        )
        async with AsyncVenusClient(api_config, authed_store, http_client=http_client) as client:
            await client.projects.get_projects()

        assert seen == [f"Bearer {mock_token}"]


class TestEmptyToken:
    @respx.mock
    def test_empty_token_is_not_attached(self, api_config, store):
        route = respx.get(f"{API_BASE}/projects").mock(return_value=Response(200, json=[]))
        store.set(TOKEN_KEY, "")

        with VenusClient(api_config, store) as client:
            client.projects.get_projects()
            assert not client.auth.is_authenticated()

        assert "authorization" not in route.calls.last.request.headers
