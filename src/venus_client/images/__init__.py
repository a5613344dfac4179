"""Venus images API."""

from ._core import build_upload_body
from .client import AsyncImagesClient, ImagesClient

__all__ = ["ImagesClient", "AsyncImagesClient", "build_upload_body"]
