from gridwalk_common.config import AwsConfig, DynamoDBConfig, S3Config
from gridwalk_common.exceptions import (
    ErrorKind,
    GridwalkError,
    StorageUploadError,
    TableAccessError,
)
from gridwalk_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "ErrorKind",
    "GridwalkError",
    "StorageUploadError",
    "TableAccessError",
    "AwsConfig",
    "DynamoDBConfig",
    "S3Config",
]
