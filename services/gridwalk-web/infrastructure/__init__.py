"""Concrete implementations of infrastructure interfaces and API clients."""

from .dynamodb_connections import DynamoDBConnectionStore
from .dynamodb_leads import DynamoDBLeadStore
from .gridwalk_api import GridwalkApiClient
from .os_token import OsTokenClient
from .s3_storage import S3Storage
from .tile_server import TileServerClient

__all__ = [
    "DynamoDBConnectionStore",
    "DynamoDBLeadStore",
    "GridwalkApiClient",
    "OsTokenClient",
    "S3Storage",
    "TileServerClient",
]
