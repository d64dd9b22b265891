"""Tile server proxy client."""

from collections.abc import Mapping

import requests
from gridwalk_common.logging import setup_logging

from exceptions import TileServerError

logger = setup_logging()

# Connection-level headers, plus the browser session which the tile server
# has no use for.
_DROPPED_HEADERS = {
    "host",
    "cookie",
    "content-length",
    "connection",
    "keep-alive",
    "transfer-encoding",
    "upgrade",
    "te",
    "trailer",
    "proxy-authorization",
    "proxy-authenticate",
}


class TileServerClient:
    """Fetches tiles from the configured tile server as streamed responses."""

    def __init__(self, session: requests.Session, base_url: str):
        self._session = session
        self._base_url = base_url.rstrip("/")

    def tile_url(self, layers: str, path: str) -> str:
        return f"{self._base_url}/{layers}/{path.strip('/')}"

    def fetch(self, layers: str, path: str, headers: Mapping[str, str]) -> requests.Response:
        """
        Requests one tile and returns the open upstream response.

        The caller owns the response and must close it.

        Raises:
            TileServerError: If the server cannot be reached or answers non-2xx.
        """
        url = self.tile_url(layers, path)
        forwarded = {k: v for k, v in headers.items() if k.lower() not in _DROPPED_HEADERS}

        logger.info("Proxying GET request", extra={"tile_url": url})
        try:
            response = self._session.get(url, headers=forwarded, stream=True)
        except requests.RequestException as e:
            logger.exception("Error proxying to tile server", extra={"tile_url": url})
            raise TileServerError(url, e) from e

        if not response.ok:
            response.close()
            logger.error(
                "Tile server responded with an error",
                extra={"tile_url": url, "status": response.status_code},
            )
            raise TileServerError(url)
        return response
