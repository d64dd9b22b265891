"""Application configuration loaded from environment variables."""

import os

from gridwalk_common import AwsConfig, DynamoDBConfig, S3Config
from pydantic import BaseModel, computed_field


class GridwalkApiConfig(BaseModel, frozen=True):
    """Upstream GridWalk REST API configuration."""

    base_url: str
    timeout_seconds: float = 30.0


class OsMapsConfig(BaseModel, frozen=True):
    """Ordnance Survey OAuth2 client-credentials configuration."""

    api_key: str | None = None
    api_secret: str | None = None
    token_url: str = "https://api.os.uk/oauth2/token/v1"

    @computed_field
    @property
    def configured(self) -> bool:
        """True when both halves of the credential pair are present."""
        return bool(self.api_key and self.api_secret)


class TileServerConfig(BaseModel, frozen=True):
    """Tile server proxy configuration."""

    url: str = "http://localhost:8080"
    cache_max_age: int = 3600


class SessionCookieConfig(BaseModel, frozen=True):
    """Settings of the ``sid`` session cookie."""

    name: str = "sid"
    secure: bool = False


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gridwalk_api: GridwalkApiConfig
    os_maps: OsMapsConfig
    aws: AwsConfig
    s3: S3Config
    dynamodb: DynamoDBConfig
    tile_server: TileServerConfig
    session_cookie: SessionCookieConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        gridwalk_api=GridwalkApiConfig(
            base_url=os.getenv("GRIDWALK_API", "http://localhost:3001").rstrip("/"),
            timeout_seconds=float(os.getenv("GRIDWALK_API_TIMEOUT", "30")),
        ),
        os_maps=OsMapsConfig(
            api_key=os.getenv("OS_PROJECT_API_KEY") or None,
            api_secret=os.getenv("OS_PROJECT_API_SECRET") or None,
            token_url=os.getenv("OS_TOKEN_URL", "https://api.os.uk/oauth2/token/v1"),
        ),
        aws=AwsConfig(
            region=os.getenv("AWS_REGION", "us-east-1"),
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID") or None,
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY") or None,
        ),
        s3=S3Config(
            bucket_name=os.getenv("S3_BUCKET_NAME", "gridwalk-remote-file-bucket"),
        ),
        dynamodb=DynamoDBConfig(
            landing_table=os.getenv("DYNAMODB_LANDING_TABLE", ""),
            connections_table=os.getenv("DYNAMODB_TABLE", ""),
        ),
        tile_server=TileServerConfig(
            url=os.getenv("TILE_SERVER_URL", "http://localhost:8080").rstrip("/"),
        ),
        session_cookie=SessionCookieConfig(
            secure=os.getenv("NODE_ENV", "development") == "production",
        ),
    )
