"""Shared configuration models for AWS-backed infrastructure components."""

from pydantic import BaseModel


class AwsConfig(BaseModel, frozen=True):
    """AWS account and region configuration."""

    region: str = "us-east-1"
    access_key_id: str | None = None
    secret_access_key: str | None = None


class S3Config(BaseModel, frozen=True):
    """S3 bucket configuration for remote file uploads."""

    endpoint: str = "s3.amazonaws.com"
    bucket_name: str = "gridwalk-remote-file-bucket"


class DynamoDBConfig(BaseModel, frozen=True):
    """DynamoDB table configuration."""

    landing_table: str = ""
    connections_table: str = ""
    connection_prefix: str = "CON#"
