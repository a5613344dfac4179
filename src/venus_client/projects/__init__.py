"""Venus projects API."""

from .client import AsyncProjectsClient, ProjectsClient

__all__ = ["ProjectsClient", "AsyncProjectsClient"]
