"""Upload of zipped shapefiles."""

import logging
import zipfile
from typing import Any, BinaryIO

import requests

from gridwalk_common.uploader.chunked import (
    CHUNK_SIZE,
    ChunkedUploader,
    ErrorCallback,
    ProgressCallback,
    SuccessCallback,
)

logger = logging.getLogger(__name__)

REQUIRED_EXTENSIONS = ("shp", "dbf", "shx")


def missing_components(archive: BinaryIO) -> list[str]:
    """
    Lists the required shapefile extensions absent from a zip archive.

    Raises:
        zipfile.BadZipFile: If the archive cannot be read.
    """
    archive.seek(0)
    with zipfile.ZipFile(archive) as zf:
        found = {
            name.rsplit(".", 1)[-1].lower() for name in zf.namelist() if "." in name
        }
    archive.seek(0)
    return [ext for ext in REQUIRED_EXTENSIONS if ext not in found]


class ShapefileUploader:
    """Checks a zip holds a complete shapefile, then uploads it in chunks."""

    def __init__(
        self,
        session: requests.Session,
        endpoint: str,
        chunk_size: int = CHUNK_SIZE,
    ):
        self._uploader = ChunkedUploader(
            session, endpoint, chunk_size=chunk_size, content_type="application/zip"
        )

    def upload(
        self,
        file: BinaryIO,
        file_name: str,
        file_size: int,
        workspace_id: str,
        on_progress: ProgressCallback | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        if not file_name.lower().endswith(".zip"):
            if on_error:
                on_error("Please upload a ZIP file containing shapefile components")
            return None

        try:
            missing = missing_components(file)
        except zipfile.BadZipFile:
            logger.exception("Unreadable shapefile archive", extra={"file_name": file_name})
            if on_error:
                on_error("Error processing ZIP file")
            return None

        if missing:
            if on_error:
                on_error(f"Missing required shapefile components: {', '.join(missing)}")
            return None

        return self._uploader.upload(
            file,
            file_name,
            file_size,
            workspace_id,
            on_progress=on_progress,
            on_success=on_success,
            on_error=on_error,
        )
