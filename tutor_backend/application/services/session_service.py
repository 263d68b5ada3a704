"""
Session service orchestrator.

Coordinates session lifecycle operations against the sessions table.

Dependencies: tutor_backend.boundary.aws
System role: Session use case orchestration
"""

import asyncio
import logging

from tutor_backend.boundary.aws.dynamodb_client import SessionTable
from tutor_backend.core.exceptions import ValidationError
from tutor_backend.models.session import Session

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, sessions: SessionTable) -> None:
        """
        Initialize session service.

        Args:
            sessions: Sessions table accessor
        """
        self.sessions = sessions

    async def create_session(self, student_id: str | None, session_name: str | None) -> Session:
        """
        Create an empty session for a student.

        Returns:
            Session: The stored session

        Raises:
            ValidationError: student_id or session_name missing
        """
        if not student_id:
            raise ValidationError("Student ID is required.", field="studentId")
        if not session_name:
            raise ValidationError("Session name is required.", field="sessionName")

        session = Session.new(student_id=student_id, session_name=session_name)
        await asyncio.to_thread(self.sessions.put_session, session)
        logger.info(
            "create_session - Session created",
            extra={"session_id": session.session_id, "student_id": student_id},
        )
        return session

    async def list_sessions(self, student_id: str | None) -> list[Session]:
        """
        Get every session owned by a student.

        Raises:
            ValidationError: student_id missing
        """
        if not student_id:
            raise ValidationError("Student ID is required.", field="studentId")
        return await asyncio.to_thread(self.sessions.list_by_student, student_id)

    async def delete_session(self, session_id: str | None, student_id: str | None) -> None:
        """
        Delete a session by its key pair.

        Raises:
            ValidationError: session_id or student_id missing
        """
        if not session_id:
            raise ValidationError("Session ID is required.", field="session-id")
        if not student_id:
            raise ValidationError("User ID is required.", field="user-id")
        await asyncio.to_thread(self.sessions.delete_session, session_id, student_id)
        logger.info("delete_session - Session deleted", extra={"session_id": session_id})
