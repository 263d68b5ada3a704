"""
Lambda handler utilities: event parsing and CORS responses.
"""

from tutor_backend.core.lambda_utils.event_loop import get_event_loop, run_async
from tutor_backend.core.lambda_utils.event_parser import (
    get_method,
    get_path_parameter,
    get_query_parameter,
    get_raw_body,
    parse_json_body,
    parse_s3_event_record,
)
from tutor_backend.core.lambda_utils.responses import (
    build_response,
    cors_headers,
    error_response,
    http_handler,
)

__all__ = [
    "build_response",
    "cors_headers",
    "error_response",
    "get_event_loop",
    "get_method",
    "get_path_parameter",
    "get_query_parameter",
    "get_raw_body",
    "http_handler",
    "parse_json_body",
    "parse_s3_event_record",
    "run_async",
]
