"""File upload endpoints: remote JSON files to S3 and chunked layer uploads."""

from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile
from gridwalk_common import GridwalkError, StorageUploadError
from gridwalk_common.logging import setup_logging
from pydantic import ValidationError

from dependencies import ApiClientDep, AuthTokenDep, StorageDep
from exceptions import InvalidRequestError
from file_types import FILE_TYPES, MB, extension_of
from request_models import ChunkInfo, LayerInfo, RemoteFileUploadRequest
from response_models import DataResponse, RemoteFileUploadResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/remote-file-s3-upload", response_model=RemoteFileUploadResponse)
def upload_remote_file(
    body: RemoteFileUploadRequest,
    storage: StorageDep,
) -> RemoteFileUploadResponse:
    """Stores a layer's JSON data in the remote file bucket under its name."""
    if not body.layerName or body.data is None or body.data == "":
        raise InvalidRequestError("Missing required fields")

    try:
        url = storage.upload_json(body.layerName, body.data)
    except StorageUploadError:
        raise GridwalkError("Error uploading file to S3")

    return RemoteFileUploadResponse(message="File uploaded successfully", url=url)


def _parse_chunk_info(raw: str | None, fallback_size: int) -> ChunkInfo:
    if not raw:
        return ChunkInfo(current_chunk=0, total_chunks=1, file_size=fallback_size)
    try:
        info = ChunkInfo.model_validate_json(raw)
    except ValidationError:
        raise InvalidRequestError("Invalid chunk_info")
    if info.current_chunk >= info.total_chunks:
        raise InvalidRequestError("Invalid chunk_info")
    return info


@router.post("/upload/layer", response_model=DataResponse)
def upload_layer_chunk(
    token: AuthTokenDep,
    api: ApiClientDep,
    file: Annotated[UploadFile | None, File()] = None,
    workspace_id: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
    chunk_info: Annotated[str | None, Form()] = None,
) -> DataResponse:
    """
    Forwards one chunk of a layer file to the GridWalk API.

    Chunk position travels in ``X-Chunk-*`` headers; the layer description
    is attached to the final chunk only.
    """
    missing = [
        field
        for field, value in (("file", file), ("workspace_id", workspace_id))
        if not value
    ]
    if missing:
        raise InvalidRequestError(f"Missing required fields: {' '.join(missing)}")

    file_name = file.filename or name or ""
    extension = extension_of(file_name)
    file_type = FILE_TYPES.get(extension)
    if file_type is None:
        raise InvalidRequestError(f"Unsupported file type: {extension or file_name}")

    data = file.file.read()
    info = _parse_chunk_info(chunk_info, len(data))
    if info.file_size > file_type.max_size:
        raise InvalidRequestError(
            f"File exceeds the {file_type.max_size // MB}MB limit for {extension} files"
        )

    logger.info(
        "Received upload request",
        extra={
            "file_name": file_name,
            "workspace_id": workspace_id,
            "chunk": info.current_chunk,
            "total_chunks": info.total_chunks,
            "file_size": info.file_size,
            "chunk_bytes": len(data),
        },
    )

    upstream_type = file_type.upstream_type or extension
    headers = {
        "X-File-Type": upstream_type,
        "X-Original-Content-Type": file_type.original_type or file_type.content_type,
        "X-Workspace-Id": workspace_id,
        "X-Chunk-Number": str(info.current_chunk),
        "X-Total-Chunks": str(info.total_chunks),
        "X-File-Size": str(info.file_size),
    }
    layer_info = None
    if info.is_final:
        layer_info = LayerInfo(
            workspace_id=workspace_id,
            name=name or file_name,
            file_type=file_type.upstream_type or extension.lstrip("."),
        ).model_dump_json()

    result = api.upload_layer_chunk(
        token,
        file_name,
        data,
        file_type.content_type,
        headers,
        layer_info=layer_info,
    )
    return DataResponse(data=result)
