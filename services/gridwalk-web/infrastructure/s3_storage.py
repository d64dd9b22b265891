"""S3 implementation of the StorageClient interface."""

import io
import json
from typing import Any

from gridwalk_common import StorageUploadError
from gridwalk_common.logging import setup_logging
from minio import Minio

from interfaces import StorageClient

logger = setup_logging()


class S3Storage(StorageClient):
    """Writes JSON documents to the remote file bucket through the MinIO SDK."""

    def __init__(self, client: Minio, bucket_name: str, region: str):
        self._client = client
        self._bucket_name = bucket_name
        self._region = region

    def upload_json(self, object_name: str, data: Any) -> str:
        body = json.dumps(data).encode("utf-8")
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=io.BytesIO(body),
                length=len(body),
                content_type="application/json",
            )
        except Exception as e:
            logger.exception(
                "S3 upload failed",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
            raise StorageUploadError(object_name, e) from e

        logger.info(
            "File uploaded to S3",
            extra={
                "object_name": object_name,
                "size": len(body),
                "bucket": self._bucket_name,
            },
        )
        return f"https://{self._bucket_name}.s3.{self._region}.amazonaws.com/{object_name}"
