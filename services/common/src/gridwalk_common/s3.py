import logging

from minio import Minio
from minio.credentials import (
    AWSConfigProvider,
    ChainedProvider,
    EnvAWSProvider,
    IamAwsProvider,
)

from gridwalk_common.config import AwsConfig, S3Config

logger = logging.getLogger(__name__)


def get_s3_client(aws: AwsConfig, s3: S3Config) -> Minio:
    """
    Initialize and return a MinIO SDK client pointed at AWS S3.

    Static keys from the configuration win; without them the client falls
    back to the usual AWS chain (environment, shared config file, instance
    role).

    Returns:
        Minio: Configured client for the S3 endpoint
    """
    try:
        if aws.access_key_id and aws.secret_access_key:
            return Minio(
                endpoint=s3.endpoint,
                access_key=aws.access_key_id,
                secret_key=aws.secret_access_key,
                region=aws.region,
                secure=True,
            )
        return Minio(
            endpoint=s3.endpoint,
            region=aws.region,
            secure=True,
            credentials=ChainedProvider(
                [EnvAWSProvider(), AWSConfigProvider(), IamAwsProvider()]
            ),
        )
    except Exception as e:
        logger.exception(
            "S3 Client Initialization Failed",
            extra={"endpoint": s3.endpoint, "region": aws.region},
        )
        raise e
