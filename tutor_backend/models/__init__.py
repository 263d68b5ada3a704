"""
Domain models and request/response schemas.
"""

from tutor_backend.models.evaluation import (
    NO_CONCERNS,
    ConfidenceEvaluation,
    ConfidenceGrade,
    PromptEvaluation,
    PromptGrade,
)
from tutor_backend.models.interaction import (
    InteractionRequest,
    InteractionResult,
    ProviderAnswer,
)
from tutor_backend.models.message import (
    SENDER_GEMINI,
    SENDER_GOOGLE_SEARCH,
    SENDER_OPENAI,
    SENDER_USER,
    Message,
    chat_turns,
    utc_timestamp,
)
from tutor_backend.models.search import SearchResult
from tutor_backend.models.session import CreateSessionRequest, Session, generate_session_id
from tutor_backend.models.student import Student

__all__ = [
    "NO_CONCERNS",
    "ConfidenceEvaluation",
    "ConfidenceGrade",
    "CreateSessionRequest",
    "InteractionRequest",
    "InteractionResult",
    "Message",
    "PromptEvaluation",
    "PromptGrade",
    "ProviderAnswer",
    "SENDER_GEMINI",
    "SENDER_GOOGLE_SEARCH",
    "SENDER_OPENAI",
    "SENDER_USER",
    "SearchResult",
    "Session",
    "Student",
    "chat_turns",
    "generate_session_id",
    "utc_timestamp",
]
