"""Python client for the Venus projects and images API."""

from ._http import ApiConfig, resolve_api_config
from .client import AsyncVenusClient, VenusClient
from .errors import APIError
from .models import AuthSession, Image, Project, ProjectSummary, User
from .session import FileSessionStore, InMemorySessionStore, SessionStore

__all__ = [
    "ApiConfig",
    "resolve_api_config",
    "VenusClient",
    "AsyncVenusClient",
    "APIError",
    "AuthSession",
    "Image",
    "Project",
    "ProjectSummary",
    "User",
    "SessionStore",
    "InMemorySessionStore",
    "FileSessionStore",
]
