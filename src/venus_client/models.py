from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

# Fields not declared here are kept as extras so no part of a server
# payload is dropped.


class User(BaseModel):
    """User record returned by the auth endpoints."""

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    username: str | None = None
    email: str | None = None
    created_at: datetime | None = None


class AuthSession(BaseModel):
    """Payload of a successful register or login."""

    model_config = ConfigDict(extra="allow")

    token: str
    user: User | None = None


class ProjectSummary(BaseModel):
    """Project entry as returned by the list endpoint."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str | None = None


class Project(BaseModel):
    """Project record. The backend owns its whole lifecycle."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str | None = None
    content: Any = None
    uid: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Image(BaseModel):
    """Metadata of an uploaded image."""

    model_config = ConfigDict(extra="allow")

    id: str
    filename: str | None = None
    original_name: str | None = None
    mime_type: str | None = None
    size: int | None = None
    width: int | None = None
    height: int | None = None
    project_id: str | None = None
    uploaded_by: int | None = None
    created_at: datetime | None = None


__all__ = [
    "AuthSession",
    "Image",
    "Project",
    "ProjectSummary",
    "User",
]
