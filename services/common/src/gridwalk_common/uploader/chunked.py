"""Sequential chunked upload of a single file to the layer upload route."""

import json
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, BinaryIO

import requests

logger = logging.getLogger(__name__)

CHUNK_SIZE = 15 * 1024 * 1024
DEFAULT_UPLOAD_PATH = "/api/upload/layer"

ProgressCallback = Callable[[int], None]
SuccessCallback = Callable[[dict[str, Any]], None]
ErrorCallback = Callable[[str], None]


class ChunkUploadError(Exception):
    """Raised when one chunk is rejected by the upload route."""


@dataclass(frozen=True)
class ChunkInfo:
    """Position of one chunk inside the file it belongs to."""

    current_chunk: int
    total_chunks: int
    file_size: int

    def to_json(self) -> str:
        return json.dumps(
            {
                "currentChunk": self.current_chunk,
                "totalChunks": self.total_chunks,
                "fileSize": self.file_size,
            }
        )


def plan_chunks(file_size: int, chunk_size: int = CHUNK_SIZE) -> list[tuple[int, int]]:
    """
    Splits ``[0, file_size)`` into contiguous ``(start, end)`` byte ranges.

    Every range but the last is exactly ``chunk_size`` long.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    total = math.ceil(file_size / chunk_size)
    return [
        (index * chunk_size, min((index + 1) * chunk_size, file_size))
        for index in range(total)
    ]


def progress_percent(completed: int, total: int) -> int:
    """Whole percentage of chunks done, rounding halves up."""
    return math.floor(completed / total * 100 + 0.5)


class ChunkedUploader:
    """
    Uploads a file in fixed-size slices, one request per slice.

    Slices go out strictly in order and the next one is only read after the
    previous response has been checked. The first failure stops the upload
    and is reported once through ``on_error``; nothing is retried.
    """

    def __init__(
        self,
        session: requests.Session,
        endpoint: str,
        chunk_size: int = CHUNK_SIZE,
        content_type: str | None = None,
    ):
        self._session = session
        self._endpoint = endpoint
        self._chunk_size = chunk_size
        self._content_type = content_type

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @classmethod
    def for_base_url(cls, session: requests.Session, base_url: str, **kwargs):
        """Builds an uploader targeting the layer upload route of a web host."""
        return cls(session, base_url.rstrip("/") + DEFAULT_UPLOAD_PATH, **kwargs)

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
        """
        Uploads ``file`` and returns the final response payload.

        Returns None when the upload failed; the reason has then been passed
        to ``on_error``.
        """
        if file_size <= 0:
            self._fail(on_error, "File is empty")
            return None

        ranges = plan_chunks(file_size, self._chunk_size)
        total_chunks = len(ranges)
        final_payload: dict[str, Any] | None = None

        try:
            for index, (start, end) in enumerate(ranges):
                file.seek(start)
                data = file.read(end - start)
                chunk_info = ChunkInfo(index, total_chunks, file_size)
                final_payload = self._send_chunk(
                    data, file_name, workspace_id, chunk_info
                )

                logger.debug(
                    "Chunk uploaded",
                    extra={
                        "file_name": file_name,
                        "chunk": index,
                        "total_chunks": total_chunks,
                        "bytes": end - start,
                    },
                )
                if on_progress:
                    on_progress(progress_percent(index + 1, total_chunks))
        except (ChunkUploadError, requests.RequestException) as e:
            logger.exception(
                "Chunked upload failed",
                extra={"file_name": file_name, "workspace_id": workspace_id},
            )
            self._fail(on_error, str(e) or "Unknown error")
            return None

        logger.info(
            "File uploaded",
            extra={
                "file_name": file_name,
                "file_size": file_size,
                "total_chunks": total_chunks,
            },
        )
        if on_success:
            on_success(final_payload)
        return final_payload

    def _send_chunk(
        self,
        data: bytes,
        file_name: str,
        workspace_id: str,
        chunk_info: ChunkInfo,
    ) -> Any:
        content_type = self._content_type or "application/octet-stream"
        response = self._session.post(
            self._endpoint,
            files={"file": (file_name, data, content_type)},
            data={
                "workspace_id": workspace_id,
                "name": file_name,
                "chunk_info": chunk_info.to_json(),
            },
        )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            raise ChunkUploadError(self._error_message(response, payload))
        if payload is None:
            raise ChunkUploadError(f"Upload failed: {response.status_code}")
        if isinstance(payload, dict) and payload.get("success") is False:
            raise ChunkUploadError(self._error_message(response, payload))
        return payload

    @staticmethod
    def _error_message(response: requests.Response, payload: Any) -> str:
        """The body's ``error`` field, else the raw body text, else the status."""
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        if payload is None and response.text.strip():
            return response.text.strip()
        return f"Upload failed: {response.status_code}"

    @staticmethod
    def _fail(on_error: ErrorCallback | None, message: str) -> None:
        if on_error:
            on_error(message)
