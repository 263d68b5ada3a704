"""
Document upload and processing service.

Upload stores the raw body in S3 and queues the processing function.
Processing reads the object back and returns a short text preview;
format-specific text extraction is out of scope.

Dependencies: tutor_backend.boundary.aws
System role: Study material ingestion
"""

import asyncio
import logging
import secrets
import string
import time

from tutor_backend.boundary.aws.lambda_client import FunctionInvoker
from tutor_backend.boundary.aws.s3_client import UploadBucket
from tutor_backend.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100
_KEY_ALPHABET = string.ascii_lowercase + string.digits


def generate_upload_key() -> str:
    """``uploads/<epoch-ms>-<random>`` object key."""
    suffix = "".join(secrets.choice(_KEY_ALPHABET) for _ in range(13))
    return f"uploads/{int(time.time() * 1000)}-{suffix}"


class DocumentService:
    """Document service orchestrator."""

    def __init__(
        self,
        bucket: UploadBucket,
        invoker: FunctionInvoker | None = None,
        processing_function: str | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            bucket: Upload bucket client
            invoker: Lambda invoker for the processing function
            processing_function: Name of the processing function
        """
        self.bucket = bucket
        self.invoker = invoker
        self.processing_function = processing_function

    async def upload(self, body: bytes, content_type: str | None = None) -> str:
        """
        Store an upload and start processing asynchronously.

        Returns:
            str: S3 key of the stored object

        Raises:
            ConfigurationError: No processing function configured
        """
        if self.invoker is None or not self.processing_function:
            raise ConfigurationError("Document processing function is not configured")

        key = generate_upload_key()
        await asyncio.to_thread(self.bucket.put_object, key, body, content_type)
        await asyncio.to_thread(
            self.invoker.invoke_async, self.processing_function, {"fileKey": key}
        )
        logger.info("upload - Stored upload and queued processing", extra={"s3_key": key})
        return key

    async def process(self, key: str, bucket: str | None = None) -> str:
        """
        Read an uploaded object and return its preview text.

        Args:
            key: Object key
            bucket: Bucket name from the S3 event (defaults to the upload bucket)
        """
        content = await asyncio.to_thread(self.bucket.get_object_text, key, bucket)
        logger.info("process - Read object", extra={"s3_key": key, "length": len(content)})
        return f"Processed content of {key}: {content[:PREVIEW_LENGTH]}..."
