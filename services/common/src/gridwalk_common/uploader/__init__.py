from gridwalk_common.uploader.chunked import (
    CHUNK_SIZE,
    ChunkedUploader,
    ChunkInfo,
    ChunkUploadError,
    plan_chunks,
    progress_percent,
)
from gridwalk_common.uploader.flow import SUPPORTED_TYPES, LayerUploadFlow, UploadState
from gridwalk_common.uploader.shapefile import ShapefileUploader, missing_components

__all__ = [
    "CHUNK_SIZE",
    "ChunkedUploader",
    "ChunkInfo",
    "ChunkUploadError",
    "plan_chunks",
    "progress_percent",
    "ShapefileUploader",
    "missing_components",
    "LayerUploadFlow",
    "UploadState",
    "SUPPORTED_TYPES",
]
