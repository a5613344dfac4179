"""Images API client classes."""

from __future__ import annotations

from .._http import iter_coroutine
from ..models import Image
from ._core import FileInput, _BaseImagesClient


class ImagesClient(_BaseImagesClient):
    """Synchronous client for the Venus images API."""

    def upload_image(
        self,
        file: FileInput,
        project_id: str | None = None,
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Image:
        """Upload an image, optionally attaching it to a project.

        ``file`` may be bytes, a binary file object, or a filesystem path.
        """
        return iter_coroutine(
            self._upload_image(file, project_id, filename=filename, content_type=content_type)
        )

    def list_images(self) -> list[Image]:
        """List the caller's images in server order."""
        return iter_coroutine(self._list_images())

    def download_image(self, image_id: str) -> bytes:
        """Fetch the raw bytes of an image."""
        return iter_coroutine(self._download_image(image_id))

    def delete_image(self, image_id: str) -> None:
        """Delete an image. Returns None on success (204)."""
        return iter_coroutine(self._delete_image(image_id))


class AsyncImagesClient(_BaseImagesClient):
    """Asynchronous client for the Venus images API."""

    async def upload_image(
        self,
        file: FileInput,
        project_id: str | None = None,
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Image:
        """Upload an image, optionally attaching it to a project.

        ``file`` may be bytes, a binary file object, or a filesystem path.
        """
        return await self._upload_image(
            file, project_id, filename=filename, content_type=content_type
        )

    async def list_images(self) -> list[Image]:
        """List the caller's images in server order."""
        return await self._list_images()

    async def download_image(self, image_id: str) -> bytes:
        """Fetch the raw bytes of an image."""
        return await self._download_image(image_id)

    async def delete_image(self, image_id: str) -> None:
        """Delete an image. Returns None on success (204)."""
        await self._delete_image(image_id)


__all__ = ["ImagesClient", "AsyncImagesClient"]
