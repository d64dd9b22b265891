"""Tile server proxy endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from dependencies import ConfigDep, TileClientDep
from exceptions import InvalidRequestError

router = APIRouter(prefix="/api", tags=["tiles"])

STREAM_CHUNK_BYTES = 64 * 1024


@router.get("/tiles/{path:path}")
def proxy_tile(
    path: str,
    request: Request,
    tiles: TileClientDep,
    config: ConfigDep,
    layers: str | None = None,
) -> StreamingResponse:
    """Streams ``{TILE_SERVER_URL}/{layers}/{path}`` back to the caller."""
    if not layers:
        raise InvalidRequestError("layers query parameter is required")

    upstream = tiles.fetch(layers, path, request.headers)
    return StreamingResponse(
        upstream.iter_content(chunk_size=STREAM_CHUNK_BYTES),
        status_code=upstream.status_code,
        media_type=upstream.headers.get("Content-Type", "application/octet-stream"),
        headers={"Cache-Control": f"public, max-age={config.tile_server.cache_max_age}"},
        background=BackgroundTask(upstream.close),
    )
