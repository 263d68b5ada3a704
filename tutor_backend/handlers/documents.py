"""
Lambda handlers for study material.

- upload_handler: POST body -> stored in S3, processing function queued
- processing_handler: S3 notification or {"fileKey": ...} -> text preview

Environment variables:
- UPLOAD_BUCKET_NAME: S3 upload bucket
- DOCUMENT_PROCESSING_FUNCTION_NAME: function queued after an upload

Dependencies: application.services.document_service
System role: Document ingestion entry points
"""

import json
import logging
from functools import lru_cache
from typing import Any

from tutor_backend.application.services.document_service import DocumentService
from tutor_backend.boundary.aws.lambda_client import FunctionInvoker
from tutor_backend.boundary.aws.s3_client import UploadBucket
from tutor_backend.configs import get_settings
from tutor_backend.core.exceptions import TutorBackendException
from tutor_backend.core.lambda_utils.event_loop import run_async
from tutor_backend.core.lambda_utils.event_parser import get_raw_body, parse_s3_event_record
from tutor_backend.core.lambda_utils.responses import http_handler
from tutor_backend.observability.log_utils import log_exception_with_context
from tutor_backend.observability.logger import configure_logging

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


@lru_cache
def get_document_service() -> DocumentService:
    settings = get_settings()
    return DocumentService(
        bucket=UploadBucket(settings.aws.upload_bucket, region=settings.aws.region),
        invoker=FunctionInvoker(region=settings.aws.region),
        processing_function=settings.aws.document_processing_function,
    )


@http_handler("POST", "Error during file upload or processing")
def upload_handler(event: dict[str, Any], context: Any):
    headers = {key.lower(): value for key, value in (event.get("headers") or {}).items()}
    key = run_async(
        get_document_service().upload(get_raw_body(event), headers.get("content-type"))
    )
    return 200, {
        "message": "File uploaded and document processing started",
        "fileKey": key,
    }


def processing_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    try:
        if event.get("fileKey"):
            bucket, key = None, event["fileKey"]
        else:
            bucket, key = parse_s3_event_record(event)

        extracted_text = run_async(get_document_service().process(key, bucket))
        return {
            "statusCode": 200,
            "body": json.dumps({
                "message": "Document processed successfully!",
                "extractedText": extracted_text,
            }),
        }
    except Exception as e:  # pylint: disable=broad-except
        log_exception_with_context(logger, "processing_handler - Document processing failed", e)
        error_text = e.message if isinstance(e, TutorBackendException) else "Internal server error"
        return {
            "statusCode": 500,
            "body": json.dumps({"message": "Document processing failed.", "error": error_text}),
        }
