"""Ordnance Survey Maps API token endpoint."""

from typing import Any

from fastapi import APIRouter
from gridwalk_common import GridwalkError

from dependencies import OsTokenClientDep

router = APIRouter(prefix="/api", tags=["os-maps"])


@router.post("/os-map-auth")
def os_map_auth(client: OsTokenClientDep) -> dict[str, Any]:
    """Returns a fresh OS Maps access token for the map view."""
    if client is None:
        raise GridwalkError("API key or secret not configured")
    return client.generate_token()
