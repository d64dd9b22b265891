"""Client-side layer upload flow: validation, renaming and state tracking."""

import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from gridwalk_common.uploader.chunked import CHUNK_SIZE, ChunkedUploader
from gridwalk_common.uploader.shapefile import ShapefileUploader

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = ("gpkg", "zip", "xlsx", "csv", "parquet", "json", "geojson")


@dataclass
class UploadState:
    """What the upload dialog shows while a layer is being uploaded."""

    is_uploading: bool = False
    progress: int = 0
    error: str | None = None
    success: bool = False


class LayerUploadFlow:
    """
    Uploads a local file as a named layer of a workspace.

    The file goes up under ``<layer name>.<extension>``. Zip archives are
    treated as shapefiles; every other supported type is sent as-is.
    """

    def __init__(
        self,
        session: requests.Session,
        base_url: str,
        workspace_id: str,
        chunk_size: int = CHUNK_SIZE,
    ):
        self.workspace_id = workspace_id
        self.state = UploadState()
        uploader = ChunkedUploader.for_base_url(session, base_url, chunk_size=chunk_size)
        self._single = uploader
        self._shapefile = ShapefileUploader(session, uploader.endpoint, chunk_size)

    def upload(self, path: str, layer_name: str) -> dict[str, Any] | None:
        """Uploads the file at ``path``; the outcome is left in ``self.state``."""
        self.state = UploadState()

        extension = os.path.splitext(path)[1].lstrip(".").lower()
        if not layer_name.strip() or not os.path.isfile(path):
            self.state.error = "Please provide a valid file and name"
            return None
        if not extension:
            self.state.error = "File must have an extension"
            return None
        if extension not in SUPPORTED_TYPES:
            self.state.error = (
                f"Unsupported file type: {extension}. "
                f"Supported types are: {', '.join(SUPPORTED_TYPES)}"
            )
            return None

        file_name = f"{layer_name.strip()}.{extension}"
        uploader = self._shapefile if extension == "zip" else self._single

        self.state.is_uploading = True
        try:
            with open(path, "rb") as file:
                return uploader.upload(
                    file,
                    file_name,
                    os.path.getsize(path),
                    self.workspace_id,
                    on_progress=self._on_progress,
                    on_success=self._on_success,
                    on_error=self._on_error,
                )
        except OSError as e:
            logger.exception("Could not read layer file", extra={"path": path})
            self.state.error = str(e)
            return None
        finally:
            self.state.is_uploading = False

    def _on_progress(self, progress: int) -> None:
        self.state.progress = progress

    def _on_success(self, payload: dict[str, Any]) -> None:
        self.state.success = True

    def _on_error(self, message: str) -> None:
        self.state.error = message
