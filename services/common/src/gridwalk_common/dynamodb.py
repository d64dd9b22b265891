import logging

import boto3

from gridwalk_common.config import AwsConfig

logger = logging.getLogger(__name__)


def get_dynamodb_resource(aws: AwsConfig):
    """
    Creates a boto3 DynamoDB service resource for the configured region.

    Credentials are resolved by boto3 unless static keys are configured.

    Returns:
        boto3.resources.base.ServiceResource: The DynamoDB resource
    """
    try:
        return boto3.resource(
            "dynamodb",
            region_name=aws.region,
            aws_access_key_id=aws.access_key_id,
            aws_secret_access_key=aws.secret_access_key,
        )
    except Exception:
        logger.exception(
            "Failed to create DynamoDB resource",
            extra={"region": aws.region},
        )
        raise
