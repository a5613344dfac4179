"""Core business logic for the Venus images API."""

from __future__ import annotations

import mimetypes
import os
import urllib.parse
from typing import Protocol, Union

from .._http import API_PREFIX, ApiConfig, BaseTransport, MultipartBody
from .._http.transport import FileTuple
from ..errors import raise_for_status
from ..models import Image

DEFAULT_FILENAME = "image"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class SupportsRead(Protocol):
    def read(self, size: int = -1) -> bytes:  # pragma: no cover - Protocol
        ...


FileInput = Union[bytes, bytearray, memoryview, str, os.PathLike, SupportsRead]


def _image_path(image_id: str) -> str:
    return f"/images/{urllib.parse.quote(str(image_id), safe='')}"


def _read_file(
    file: FileInput,
    filename: str | None,
    content_type: str | None,
) -> FileTuple:
    """Turn the supported upload inputs into an httpx file tuple."""
    if isinstance(file, (bytes, bytearray, memoryview)):
        data = bytes(file)
        name = filename
    elif isinstance(file, (str, os.PathLike)):
        with open(file, "rb") as f:
            data = f.read()
        name = filename or os.path.basename(os.fspath(file))
    elif hasattr(file, "read"):
        data = file.read()
        if isinstance(data, str):
            raise TypeError("file must be opened in binary mode")
        source_name = getattr(file, "name", None)
        name = filename or (os.path.basename(source_name) if isinstance(source_name, str) else None)
    else:
        raise TypeError(f"unsupported file type: {type(file).__name__}")

    name = name or DEFAULT_FILENAME
    resolved_type = content_type or mimetypes.guess_type(name)[0] or DEFAULT_CONTENT_TYPE
    return name, data, resolved_type


def build_upload_body(
    file: FileInput,
    project_id: str | None = None,
    *,
    filename: str | None = None,
    content_type: str | None = None,
) -> MultipartBody:
    """Build the multipart body for an image upload.

    The form always carries the ``image`` file field; ``project_id`` is added
    only when it is not None.
    """
    data: dict[str, str] = {}
    if project_id is not None:
        data["project_id"] = str(project_id)
    return MultipartBody(
        files={"image": _read_file(file, filename, content_type)},
        data=data,
    )


class _BaseImagesClient:
    """Base class for the images API with shared async implementation."""

    def __init__(self, transport: BaseTransport, config: ApiConfig) -> None:
        self._transport = transport
        self._config = config

    def get_image_url(self, image_id: str) -> str:
        """Direct URL of an image, e.g. for an <img> tag. No request is made."""
        return f"{self._config.image_base_url}{API_PREFIX}/images/{image_id}"

    async def _upload_image(
        self,
        file: FileInput,
        project_id: str | None = None,
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Image:
        body = build_upload_body(
            file, project_id, filename=filename, content_type=content_type
        )
        resp = await self._transport.send("POST", "/images", body=body)
        raise_for_status(resp)
        return Image.model_validate(resp.json())

    async def _list_images(self) -> list[Image]:
        resp = await self._transport.send("GET", "/images")
        raise_for_status(resp)
        return [Image.model_validate(item) for item in resp.json()]

    async def _download_image(self, image_id: str) -> bytes:
        resp = await self._transport.send(
            "GET", _image_path(image_id), headers={"Accept": "*/*"}
        )
        raise_for_status(resp)
        return resp.content

    async def _delete_image(self, image_id: str) -> None:
        resp = await self._transport.send("DELETE", _image_path(image_id))
        raise_for_status(resp)


__all__ = ["FileInput", "_BaseImagesClient", "build_upload_body"]
