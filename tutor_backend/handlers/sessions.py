"""
Lambda handlers for the /sessions routes.

- create_handler: POST /sessions {studentId, sessionName} -> 201 session
- fetch_handler: GET /sessions?studentId=... -> 200 {sessions}
- delete_handler: DELETE /sessions/{session-id}/{user-id} -> 200 confirmation

Environment variables:
- TUTORING_SESSIONS_TABLE: DynamoDB sessions table

Dependencies: application.services.session_service
System role: Session CRUD entry points
"""

import logging
from functools import lru_cache
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tutor_backend.application.services.session_service import SessionService
from tutor_backend.boundary.aws.dynamodb_client import SessionTable
from tutor_backend.configs import get_settings
from tutor_backend.core.exceptions import ValidationError
from tutor_backend.core.lambda_utils.event_loop import run_async
from tutor_backend.core.lambda_utils.event_parser import (
    get_path_parameter,
    get_query_parameter,
    parse_json_body,
)
from tutor_backend.core.lambda_utils.responses import http_handler
from tutor_backend.models.session import CreateSessionRequest
from tutor_backend.observability.logger import configure_logging

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


@lru_cache
def get_session_service() -> SessionService:
    settings = get_settings()
    return SessionService(SessionTable(settings.aws.sessions_table, region=settings.aws.region))


@http_handler("POST", "Error creating session.")
def create_handler(event: dict[str, Any], context: Any):
    try:
        request = CreateSessionRequest.model_validate(parse_json_body(event))
    except PydanticValidationError as e:
        raise ValidationError("Invalid request body.", field="body") from e
    session = run_async(
        get_session_service().create_session(request.student_id, request.session_name)
    )
    return 201, session.to_response()


@http_handler("GET", "Error fetching sessions.")
def fetch_handler(event: dict[str, Any], context: Any):
    student_id = get_query_parameter(event, "studentId")
    sessions = run_async(get_session_service().list_sessions(student_id))
    return 200, {"sessions": [session.to_response() for session in sessions]}


@http_handler("DELETE", "Error deleting session.")
def delete_handler(event: dict[str, Any], context: Any):
    session_id = get_path_parameter(event, "session-id")
    user_id = get_path_parameter(event, "user-id")
    run_async(get_session_service().delete_session(session_id, user_id))
    return 200, {"message": f"Session {session_id} deleted successfully."}
