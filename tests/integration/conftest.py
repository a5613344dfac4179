"""Fixtures for integration tests using respx mocking."""

import pytest

# =============================================================================
# Auth Mock Responses
# =============================================================================


@pytest.fixture
def mock_user() -> dict:
    """Mock user record as returned by the auth endpoints."""
    return {
        "id": 7,
        "username": "ada",
        "email": "ada@example.com",
        "created_at": "2024-01-15T10:30:00Z",
    }


@pytest.fixture
def mock_auth_response(mock_user: dict) -> dict:
    """Mock register/login response."""
    return {
        "token": "eyJhbGciOiJIUzI1NiJ9.eyJ1aWQiOjd9.signature",
        "user": mock_user,
    }


# =============================================================================
# Projects Mock Responses
# =============================================================================


@pytest.fixture
def mock_project_data() -> dict:
    """Mock project record."""
    return {
        "id": "6f1c2d1e-2a43-4c8b-9f0e-1a2b3c4d5e6f",
        "name": "test-project",
        "content": {"nodes": [], "edges": []},
        "uid": 7,
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
    }


@pytest.fixture
def mock_projects_list_response(mock_project_data: dict) -> list:
    """Mock projects list response (summaries, newest first)."""
    return [
        {"id": mock_project_data["id"], "name": mock_project_data["name"]},
        {"id": "0b9e8d7c-6f5e-4d3c-2b1a-0f9e8d7c6b5a", "name": "older-project"},
    ]


# =============================================================================
# Images Mock Responses
# =============================================================================


@pytest.fixture
def mock_image_data() -> dict:
    """Mock image metadata."""
    return {
        "id": "img_3c2b1a",
        "filename": "img_3c2b1a.png",
        "original_name": "photo.png",
        "mime_type": "image/png",
        "size": 8,
        "width": None,
        "height": None,
        "project_id": None,
        "uploaded_by": 7,
        "created_at": "2024-01-15T10:31:00Z",
    }


@pytest.fixture
def mock_png_bytes() -> bytes:
    """PNG signature, enough to stand in for an image."""
    return b"\x89PNG\r\n\x1a\n"


# =============================================================================
# Error Response Fixtures
# =============================================================================


@pytest.fixture
def mock_error_not_found() -> dict:
    """Mock 404 Not Found error response."""
    return {"error": "Project not found"}


@pytest.fixture
def mock_error_unauthorized() -> dict:
    """Mock 401 Unauthorized error response."""
    return {"error": "Authentication required."}
