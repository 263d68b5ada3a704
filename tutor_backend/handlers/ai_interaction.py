"""
Lambda handler for POST /airesponse.

Validates the request, then delegates to InteractionService which
evaluates the prompt, consults every configured provider, and stores
the new turn in the session history.

Environment variables:
- TUTORING_SESSIONS_TABLE: DynamoDB sessions table
- GOOGLE_SEARCH_ENGINE_ID: Custom Search engine id (when search is enabled)
- PROVIDER_ENABLED_PROVIDERS: JSON list of providers, e.g. ["gemini", "openai"]
- LOG_LEVEL: Logging level

Dependencies: application.services.interaction_service
System role: Orchestration handler entry point
"""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tutor_backend.application.services.dependencies import get_interaction_dependencies
from tutor_backend.application.services.interaction_service import InteractionService
from tutor_backend.configs import get_settings
from tutor_backend.core.exceptions import ValidationError
from tutor_backend.core.lambda_utils.event_loop import run_async
from tutor_backend.core.lambda_utils.event_parser import parse_json_body
from tutor_backend.core.lambda_utils.responses import http_handler
from tutor_backend.models.interaction import InteractionRequest
from tutor_backend.observability.logger import configure_logging

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


def parse_interaction_request(event: dict[str, Any]) -> InteractionRequest:
    """
    Parse and validate the interaction body.

    Raises:
        ValidationError: Malformed body, missing sessionId or missing input
    """
    body = parse_json_body(event)
    try:
        request = InteractionRequest.model_validate(body)
    except PydanticValidationError as e:
        raise ValidationError("Invalid request body.", field="body") from e

    if not request.session_id:
        raise ValidationError("sessionId is required.", field="sessionId")
    if not request.input:
        raise ValidationError("input is required.", field="input")
    return request


@http_handler("POST", "AI interaction failed.")
def handler(event: dict[str, Any], context: Any):
    request = parse_interaction_request(event)
    logger.info("handler - Received interaction", extra={"session_id": request.session_id})

    service = InteractionService(get_interaction_dependencies())
    result = run_async(service.run(request.session_id, request.input))
    return 200, result.to_response()
