"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated

import requests
from fastapi import Cookie, Depends
from gridwalk_common.dynamodb import get_dynamodb_resource
from gridwalk_common.logging import setup_logging
from gridwalk_common.s3 import get_s3_client

from config import AppConfig, load_config
from exceptions import AuthenticationError
from infrastructure import (
    DynamoDBConnectionStore,
    DynamoDBLeadStore,
    GridwalkApiClient,
    OsTokenClient,
    S3Storage,
    TileServerClient,
)
from interfaces import ConnectionStore, LeadStore, StorageClient

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return load_config()


@lru_cache
def _http_session() -> requests.Session:
    return requests.Session()


@lru_cache
def _tile_session() -> requests.Session:
    # Separate from the API session: tile responses are streamed and held open
    # until the response body has been sent.
    return requests.Session()


@lru_cache
def _dynamodb():
    return get_dynamodb_resource(get_config().aws)


def get_api_client() -> GridwalkApiClient:
    """Returns a client for the upstream GridWalk API."""
    config = get_config().gridwalk_api
    return GridwalkApiClient(_http_session(), config.base_url, config.timeout_seconds)


@lru_cache
def get_storage() -> StorageClient:
    """Returns the S3 storage client for the remote file bucket."""
    config = get_config()
    client = get_s3_client(config.aws, config.s3)
    logger.info(
        "S3 storage ready",
        extra={"bucket_name": config.s3.bucket_name, "region": config.aws.region},
    )
    return S3Storage(client, config.s3.bucket_name, config.aws.region)


def get_lead_store() -> LeadStore:
    """Returns the landing page lead store."""
    return DynamoDBLeadStore(_dynamodb().Table(get_config().dynamodb.landing_table))


def get_connection_store() -> ConnectionStore:
    """Returns the DynamoDB-backed connection store."""
    config = get_config().dynamodb
    return DynamoDBConnectionStore(
        _dynamodb().Table(config.connections_table), config.connection_prefix
    )


def get_tile_client() -> TileServerClient:
    """Returns the tile server proxy client."""
    return TileServerClient(_tile_session(), get_config().tile_server.url)


def get_os_token_client() -> OsTokenClient | None:
    """Returns the OS Maps token client, or None when credentials are unset."""
    config = get_config().os_maps
    if not config.configured:
        return None
    return OsTokenClient(_http_session(), config.token_url, config.api_key, config.api_secret)


def get_optional_token(sid: Annotated[str | None, Cookie()] = None) -> str | None:
    """Returns the session token from the ``sid`` cookie, if any."""
    return sid or None


def get_auth_token(token: Annotated[str | None, Depends(get_optional_token)]) -> str:
    """
    Returns the session token from the ``sid`` cookie.

    Raises:
        AuthenticationError: If the cookie is missing or empty.
    """
    if not token:
        raise AuthenticationError()
    return token


ConfigDep = Annotated[AppConfig, Depends(get_config)]
ApiClientDep = Annotated[GridwalkApiClient, Depends(get_api_client)]
AuthTokenDep = Annotated[str, Depends(get_auth_token)]
OptionalTokenDep = Annotated[str | None, Depends(get_optional_token)]
StorageDep = Annotated[StorageClient, Depends(get_storage)]
LeadStoreDep = Annotated[LeadStore, Depends(get_lead_store)]
ConnectionStoreDep = Annotated[ConnectionStore, Depends(get_connection_store)]
TileClientDep = Annotated[TileServerClient, Depends(get_tile_client)]
OsTokenClientDep = Annotated[OsTokenClient | None, Depends(get_os_token_client)]
