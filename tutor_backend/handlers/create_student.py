"""
Cognito post-confirmation trigger.

Stores the confirmed user as a student. Always returns the event so the
sign-up flow proceeds; failures are logged only.

Environment variables:
- STUDENTS_TABLE: DynamoDB students table

Dependencies: application.services.student_service
System role: Identity provider callback
"""

import logging
from functools import lru_cache
from typing import Any

from tutor_backend.application.services.student_service import StudentService
from tutor_backend.boundary.aws.dynamodb_client import StudentTable
from tutor_backend.configs import get_settings
from tutor_backend.core.lambda_utils.event_loop import run_async
from tutor_backend.observability.log_utils import log_exception_with_context, log_with_context
from tutor_backend.observability.logger import configure_logging

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


@lru_cache
def get_student_service() -> StudentService:
    settings = get_settings()
    return StudentService(StudentTable(settings.aws.students_table, region=settings.aws.region))


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    attributes = (event.get("request") or {}).get("userAttributes") or {}
    sub = attributes.get("sub")
    email = attributes.get("email")
    log_with_context(
        logger,
        logging.INFO,
        "handler - PostConfirmation event received",
        student_id=sub,
        trigger_source=event.get("triggerSource"),
    )

    try:
        run_async(get_student_service().register(sub, email))
    except Exception as e:  # pylint: disable=broad-except
        log_exception_with_context(logger, "handler - Error creating student", e, student_id=sub)

    return event
