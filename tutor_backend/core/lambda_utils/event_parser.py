"""
API Gateway and S3 event parsing utilities for Lambda.
"""

import base64
import json
import logging
from typing import Any
from urllib.parse import unquote_plus

from tutor_backend.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def get_method(event: dict[str, Any]) -> str | None:
    """HTTP method from a REST API (v1) or HTTP API (v2) proxy event."""
    method = event.get("httpMethod") or (
        (event.get("requestContext") or {}).get("http") or {}
    ).get("method")
    return method.upper() if method else None


def get_raw_body(event: dict[str, Any]) -> bytes:
    """Request body as bytes, base64-decoded when API Gateway encoded it."""
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def parse_json_body(event: dict[str, Any]) -> dict[str, Any]:
    """
    Decode the JSON object body of a proxy event.

    Raises:
        ValidationError: Body missing, not JSON, or not an object
    """
    try:
        raw = get_raw_body(event)
        if not raw:
            raise ValueError("Empty request body")
        body = json.loads(raw)
    except (ValueError, TypeError) as e:
        logger.warning("parse_json_body - Invalid request body: %s", e)
        raise ValidationError("Invalid request body.", field="body") from e

    if not isinstance(body, dict):
        raise ValidationError("Invalid request body.", field="body")
    return body


def get_path_parameter(event: dict[str, Any], name: str) -> str | None:
    return (event.get("pathParameters") or {}).get(name)


def get_query_parameter(event: dict[str, Any], name: str) -> str | None:
    return (event.get("queryStringParameters") or {}).get(name)


def parse_s3_event_record(event: dict[str, Any]) -> tuple[str, str]:
    """
    Extract ``(bucket, key)`` from the first record of an S3 notification.

    Keys arrive URL-encoded with ``+`` for spaces.

    Raises:
        ValidationError: Event has no usable S3 record
    """
    try:
        record = event["Records"][0]
        bucket = record["s3"]["bucket"]["name"]
        key = unquote_plus(record["s3"]["object"]["key"])
    except (KeyError, IndexError, TypeError) as e:
        logger.error("parse_s3_event_record - Invalid S3 event: %s", e)
        raise ValidationError("Invalid S3 event.", field="Records") from e
    return bucket, key
