"""
S3 client for the upload bucket.

Stores raw uploads and reads them back for document processing.

Dependencies: boto3
System role: Blob store accessor
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tutor_backend.core.exceptions import UpstreamCallError

logger = logging.getLogger(__name__)


class UploadBucket:
    """S3 client for one upload bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-west-2",
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 client for the upload bucket.

        Args:
            bucket: S3 bucket name
            region: AWS region for S3 bucket
            client: Optional preconfigured boto3 client (tests)
        """
        self._bucket = bucket
        self._s3_client = client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def put_object(
        self,
        key: str,
        body: bytes | str,
        content_type: str | None = None,
    ) -> None:
        params: dict[str, Any] = {"Bucket": self._bucket, "Key": key, "Body": body}
        if content_type:
            params["ContentType"] = content_type
        try:
            self._s3_client.put_object(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error("put_object - Failed for %s: %s", key, e)
            raise UpstreamCallError(f"Upload of {key} failed", provider="s3") from e

    def get_object_text(self, key: str, bucket: str | None = None) -> str:
        """Read an object fully and decode it as UTF-8."""
        try:
            response = self._s3_client.get_object(Bucket=bucket or self._bucket, Key=key)
            return response["Body"].read().decode("utf-8")
        except (ClientError, BotoCoreError) as e:
            logger.error("get_object_text - Failed for %s: %s", key, e)
            raise UpstreamCallError(f"Download of {key} failed", provider="s3") from e
