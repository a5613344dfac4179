"""Core business logic for the Venus projects API."""

from __future__ import annotations

import urllib.parse
from typing import Any

from .._http import BaseTransport, JSONBody
from ..errors import raise_for_status
from ..models import Project, ProjectSummary


def _project_path(project_id: str) -> str:
    return f"/projects/{urllib.parse.quote(str(project_id), safe='')}"


class _BaseProjectsClient:
    """Base class for the projects API with shared async implementation."""

    def __init__(self, transport: BaseTransport) -> None:
        self._transport = transport

    async def _get_projects(self) -> list[ProjectSummary]:
        resp = await self._transport.send("GET", "/projects")
        raise_for_status(resp)
        return [ProjectSummary.model_validate(item) for item in resp.json()]

    async def _get_project_by_id(self, project_id: str) -> Project:
        resp = await self._transport.send("GET", _project_path(project_id))
        raise_for_status(resp)
        return Project.model_validate(resp.json())

    async def _create_project(self, project: dict[str, Any]) -> Project:
        resp = await self._transport.send("POST", "/projects", body=JSONBody(project))
        raise_for_status(resp)
        return Project.model_validate(resp.json())

    async def _update_project(self, project_id: str, data: dict[str, Any]) -> dict[str, Any]:
        resp = await self._transport.send("PUT", _project_path(project_id), body=JSONBody(data))
        raise_for_status(resp)
        # the backend answers with a status object rather than the project
        return resp.json() if resp.content else {}

    async def _delete_project(self, project_id: str) -> None:
        resp = await self._transport.send("DELETE", _project_path(project_id))
        raise_for_status(resp)


__all__ = ["_BaseProjectsClient"]
