"""
Conversation message models.

A Message is one turn in a session history. User turns carry the prompt
evaluation, provider turns carry the answer confidence evaluation.

Dependencies: pydantic
System role: History entry contract shared by services and storage
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SENDER_USER = "user"
SENDER_OPENAI = "openai"
SENDER_GEMINI = "gemini"
SENDER_GOOGLE_SEARCH = "googleSearch"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Message(BaseModel):
    """
    Single history entry.

    Only ``message``, ``sender`` and ``timestamp`` are always present. The
    evaluation fields are written only when they were produced for this
    turn, and are written as null when the evaluation degraded.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    message: str | None = Field(description="Turn text")
    sender: str = Field(description="user, openai, gemini, googleSearch or a provider name")
    timestamp: str = Field(default_factory=utc_timestamp)

    score: int | None = None
    feedback: str | None = None
    prompt_summary: str | None = Field(default=None, alias="promptSummary")

    confidence: int | None = None
    concerns: str | None = None

    def to_item(self) -> dict[str, Any]:
        """Serialize for storage, keeping explicitly-set nulls."""
        item = self.model_dump(by_alias=True, exclude_unset=True)
        item["timestamp"] = self.timestamp
        return item


def chat_turns(history: list[dict[str, Any]]) -> list[tuple[str, str]]:
    """
    Reduce stored history to ``(sender, message)`` pairs for provider context.

    Entries without text (a degraded provider turn) are skipped.
    """
    turns = []
    for entry in history:
        text = entry.get("message")
        if not text:
            continue
        turns.append((entry.get("sender", ""), str(text)))
    return turns
