"""
Student registration service.

Dependencies: tutor_backend.boundary.aws
System role: Post-confirmation student record creation
"""

import asyncio
import logging

from tutor_backend.boundary.aws.dynamodb_client import StudentTable
from tutor_backend.core.exceptions import ValidationError
from tutor_backend.models.student import Student

logger = logging.getLogger(__name__)


class StudentService:
    """Creates student records; records are never updated afterwards."""

    def __init__(self, students: StudentTable) -> None:
        self.students = students

    async def register(self, sub: str | None, email: str | None) -> Student:
        """
        Store a new student keyed by the identity provider subject.

        Raises:
            ValidationError: sub or email missing
        """
        if not sub or not email:
            raise ValidationError(
                "Missing required user attributes: 'sub' and/or 'email'.",
                field="userAttributes",
            )
        student = Student(student_id=sub, email=email)
        await asyncio.to_thread(self.students.put_student, student)
        logger.info("register - Student created", extra={"student_id": sub})
        return student
