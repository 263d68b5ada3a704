"""
Student model.

Created once by the identity provider's post-confirmation trigger.

Dependencies: pydantic
System role: Student record contract
"""

from pydantic import BaseModel, ConfigDict, Field

from tutor_backend.models.message import utc_timestamp


class Student(BaseModel):
    """Registered student keyed by the identity provider subject."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(alias="studentId", min_length=1)
    email: str = Field(min_length=1)
    created_at: str = Field(default_factory=utc_timestamp, alias="createdAt")

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True)
