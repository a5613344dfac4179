"""Projects API client classes."""

from __future__ import annotations

from typing import Any

from .._http import iter_coroutine
from ..models import Project, ProjectSummary
from ._core import _BaseProjectsClient


class ProjectsClient(_BaseProjectsClient):
    """Synchronous client for the Venus projects API."""

    def get_projects(self) -> list[ProjectSummary]:
        """List the caller's projects in server order."""
        return iter_coroutine(self._get_projects())

    def get_project_by_id(self, project_id: str) -> Project:
        """Retrieve a single project."""
        return iter_coroutine(self._get_project_by_id(project_id))

    def create_project(self, project: dict[str, Any]) -> Project:
        """Create a new project. ``project`` must include at least ``name``."""
        return iter_coroutine(self._create_project(project))

    def update_project(self, project_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update a project and return the server payload."""
        return iter_coroutine(self._update_project(project_id, data))

    def delete_project(self, project_id: str) -> None:
        """Delete a project. Returns None on success (204)."""
        return iter_coroutine(self._delete_project(project_id))


class AsyncProjectsClient(_BaseProjectsClient):
    """Asynchronous client for the Venus projects API."""

    async def get_projects(self) -> list[ProjectSummary]:
        """List the caller's projects in server order."""
        return await self._get_projects()

    async def get_project_by_id(self, project_id: str) -> Project:
        """Retrieve a single project."""
        return await self._get_project_by_id(project_id)

    async def create_project(self, project: dict[str, Any]) -> Project:
        """Create a new project. ``project`` must include at least ``name``."""
        return await self._create_project(project)

    async def update_project(self, project_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update a project and return the server payload."""
        return await self._update_project(project_id, data)

    async def delete_project(self, project_id: str) -> None:
        """Delete a project. Returns None on success (204)."""
        await self._delete_project(project_id)


__all__ = ["ProjectsClient", "AsyncProjectsClient"]
