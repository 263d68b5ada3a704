"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session storage and API contracts
"""

import json
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tutor_backend.models.message import utc_timestamp


def generate_session_id() -> str:
    """Time-based session id, e.g. ``session-1714000000000``."""
    return f"session-{int(time.time() * 1000)}"


class CreateSessionRequest(BaseModel):
    """Request schema for creating a new session."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: str | None = Field(default=None, alias="studentId")
    session_name: str | None = Field(default=None, alias="sessionName")


class Session(BaseModel):
    """
    Tutoring session record.

    ``(session_id, student_id)`` is the table key pair. History is stored
    as a JSON string attribute; both string and list forms are accepted
    when reading.
    """

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    student_id: str = Field(alias="studentId")
    session_name: str | None = Field(default=None, alias="sessionName")
    uploaded_files: list[Any] = Field(default_factory=list, alias="uploadedFiles")
    history: list[dict[str, Any]] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")

    @field_validator("history", mode="before")
    @classmethod
    def decode_history(cls, value: Any) -> Any:
        if value is None or value == "":
            return []
        if isinstance(value, str):
            return json.loads(value)
        return value

    @classmethod
    def new(cls, student_id: str, session_name: str) -> "Session":
        """Create a fresh, empty session for a student."""
        return cls(
            session_id=generate_session_id(),
            student_id=student_id,
            session_name=session_name,
            uploaded_files=[],
            history=[],
            created_at=utc_timestamp(),
        )

    def to_response(self) -> dict[str, Any]:
        """camelCase dict with history as a list, for API bodies."""
        return self.model_dump(by_alias=True)

    def to_item(self) -> dict[str, Any]:
        """DynamoDB item with history serialized to a JSON string."""
        item = self.model_dump(by_alias=True)
        item["history"] = json.dumps(self.history)
        return item
