"""Ordnance Survey OAuth2 token client."""

from typing import Any

import requests
from gridwalk_common.logging import setup_logging

from exceptions import TokenGenerationError

logger = setup_logging()


class OsTokenClient:
    """Obtains OS Maps API access tokens with the client-credentials grant."""

    def __init__(self, session: requests.Session, token_url: str, api_key: str, api_secret: str):
        self._session = session
        self._token_url = token_url
        self._auth = (api_key, api_secret)

    def generate_token(self) -> dict[str, Any]:
        """
        Returns the token document issued by the OAuth2 endpoint.

        Raises:
            TokenGenerationError: If the endpoint fails or returns non-JSON.
        """
        try:
            response = self._session.post(
                self._token_url,
                auth=self._auth,
                data={"grant_type": "client_credentials"},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.exception("Error generating token", extra={"token_url": self._token_url})
            raise TokenGenerationError(cause=e) from e
