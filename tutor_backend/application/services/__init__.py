"""
Application services.

Exports: InteractionService, SessionService, StudentService, DocumentService
"""

from tutor_backend.application.services.dependencies import (
    InteractionDependencies,
    build_interaction_dependencies,
    get_interaction_dependencies,
)
from tutor_backend.application.services.document_service import DocumentService
from tutor_backend.application.services.interaction_service import InteractionService
from tutor_backend.application.services.session_service import SessionService
from tutor_backend.application.services.student_service import StudentService

__all__ = [
    "DocumentService",
    "InteractionDependencies",
    "InteractionService",
    "SessionService",
    "StudentService",
    "build_interaction_dependencies",
    "get_interaction_dependencies",
]
