"""
DynamoDB table accessors.

SessionTable is keyed by (sessionId, studentId); lookups by sessionId
alone are scans, so they tolerate callers that only know the partition
key. StudentTable is keyed by studentId.

Dependencies: boto3
System role: Session store and student store accessors
"""

import json
import logging
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from tutor_backend.core.exceptions import ConfigurationError, UpstreamCallError
from tutor_backend.models.session import Session
from tutor_backend.models.student import Student

logger = logging.getLogger(__name__)


def _table(table_name: str, region: str, resource: Any | None) -> Any:
    if not table_name:
        raise ConfigurationError("DynamoDB table name is not configured")
    dynamodb = resource or boto3.resource("dynamodb", region_name=region)
    return dynamodb.Table(table_name)


class SessionTable:
    """Accessor for the tutoring sessions table."""

    def __init__(
        self,
        table_name: str,
        region: str = "us-west-2",
        resource: Any | None = None,
    ) -> None:
        """
        Initialize sessions table accessor.

        Args:
            table_name: DynamoDB table name
            region: AWS region
            resource: Optional boto3 DynamoDB resource (tests)
        """
        self._table_name = table_name
        self._table = _table(table_name, region, resource)

    def scan_by_attribute(self, attribute: str, value: str) -> list[dict[str, Any]]:
        """
        Scan the whole table for items where ``attribute == value``.

        Follows ``LastEvaluatedKey`` so matches on later pages are found.
        """
        items: list[dict[str, Any]] = []
        scan_kwargs: dict[str, Any] = {"FilterExpression": Attr(attribute).eq(value)}
        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "scan_by_attribute - Scan failed on %s: %s", self._table_name, e
            )
            raise UpstreamCallError("Session lookup failed", provider="dynamodb") from e
        return items

    def find_by_session_id(self, session_id: str) -> Session | None:
        """Return the session matching ``session_id`` or None."""
        items = self.scan_by_attribute("sessionId", session_id)
        if not items:
            return None
        if len(items) > 1:
            logger.warning(
                "find_by_session_id - %d items share sessionId, using the first",
                len(items),
                extra={"session_id": session_id},
            )
        return Session.model_validate(items[0])

    def list_by_student(self, student_id: str) -> list[Session]:
        """Return every session owned by ``student_id``."""
        items = self.scan_by_attribute("studentId", student_id)
        return [Session.model_validate(item) for item in items]

    def put_session(self, session: Session) -> None:
        try:
            self._table.put_item(Item=session.to_item())
        except (ClientError, BotoCoreError) as e:
            logger.error("put_session - Failed: %s", e)
            raise UpstreamCallError("Session write failed", provider="dynamodb") from e

    def update_history(
        self,
        session_id: str,
        student_id: str,
        history: list[dict[str, Any]],
    ) -> None:
        """
        Overwrite the full history attribute of one session.

        No condition expression: concurrent writers race and the last one wins.
        """
        try:
            self._table.update_item(
                Key={"sessionId": session_id, "studentId": student_id},
                UpdateExpression="SET history = :history",
                ExpressionAttributeValues={":history": json.dumps(history)},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("update_history - Failed for %s: %s", session_id, e)
            raise UpstreamCallError("Session history update failed", provider="dynamodb") from e

    def delete_session(self, session_id: str, student_id: str) -> None:
        try:
            self._table.delete_item(Key={"sessionId": session_id, "studentId": student_id})
        except (ClientError, BotoCoreError) as e:
            logger.error("delete_session - Failed for %s: %s", session_id, e)
            raise UpstreamCallError("Session delete failed", provider="dynamodb") from e


class StudentTable:
    """Accessor for the students table."""

    def __init__(
        self,
        table_name: str,
        region: str = "us-west-2",
        resource: Any | None = None,
    ) -> None:
        self._table = _table(table_name, region, resource)

    def put_student(self, student: Student) -> None:
        try:
            self._table.put_item(Item=student.to_item())
        except (ClientError, BotoCoreError) as e:
            logger.error("put_student - Failed: %s", e)
            raise UpstreamCallError("Student write failed", provider="dynamodb") from e
