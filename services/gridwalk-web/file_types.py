"""Layer file types accepted by the upload proxy."""

import os

from pydantic import BaseModel

MB = 1024 * 1024


class FileType(BaseModel, frozen=True):
    """Limits and headers for one layer file extension."""

    max_size: int
    content_type: str
    original_type: str | None = None
    upstream_type: str | None = None


FILE_TYPES: dict[str, FileType] = {
    ".geojson": FileType(max_size=50 * MB, content_type="application/geo+json"),
    ".json": FileType(max_size=50 * MB, content_type="application/json"),
    ".kml": FileType(max_size=50 * MB, content_type="application/vnd.google-earth.kml+xml"),
    ".shp": FileType(max_size=100 * MB, content_type="application/x-esri-shape"),
    ".csv": FileType(max_size=100 * MB, content_type="text/csv"),
    ".xlsx": FileType(
        max_size=100 * MB,
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ),
    ".parquet": FileType(max_size=500 * MB, content_type="application/vnd.apache.parquet"),
    ".gpkg": FileType(
        max_size=500 * MB,
        content_type="application/octet-stream",
        original_type="application/geopackage+sqlite3",
    ),
    ".zip": FileType(
        max_size=500 * MB,
        content_type="application/zip",
        upstream_type="shapefile",
    ),
}


def extension_of(file_name: str) -> str:
    """Returns the lower-cased extension of ``file_name``, dot included."""
    return os.path.splitext(file_name)[1].lower()
