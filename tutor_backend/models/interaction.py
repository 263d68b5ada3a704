"""
Interaction request/response models.

Dependencies: pydantic
System role: Contract of the AI interaction handler
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tutor_backend.models.evaluation import PromptEvaluation
from tutor_backend.models.search import SearchResult


class InteractionRequest(BaseModel):
    """Body of POST /airesponse."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    input: str | None = Field(default=None, description="Student prompt")
    session_id: str | None = Field(default=None, alias="sessionId")


class ProviderAnswer(BaseModel):
    """One provider's answer with its own confidence evaluation."""

    provider: str
    answer: str | None = None
    confidence: int | None = None
    concerns: str | None = None
    error: str | None = None


class InteractionResult(BaseModel):
    """Aggregate of one interaction, in fixed provider order."""

    session_id: str
    prompt_evaluation: PromptEvaluation
    prompt_summary: str | None = None
    answers: list[ProviderAnswer] = Field(default_factory=list)
    search_results: list[SearchResult] | None = None
    updated_history: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def primary_answer(self) -> str | None:
        """First provider answer that was produced."""
        for answer in self.answers:
            if answer.answer is not None:
                return answer.answer
        return None

    def to_response(self) -> dict[str, Any]:
        """Response body for a successful interaction."""
        return {
            "message": "AI guidance generated successfully!",
            "aiGuidance": self.primary_answer,
            "aiResults": {
                answer.provider: {
                    "response": answer.answer,
                    "confidence": answer.confidence,
                    "concerns": answer.concerns,
                }
                for answer in self.answers
            },
            "promptEvaluation": {
                "score": self.prompt_evaluation.score,
                "feedback": self.prompt_evaluation.feedback,
                "promptSummary": self.prompt_summary,
            },
            "searchResults": (
                [result.model_dump() for result in self.search_results]
                if self.search_results is not None
                else None
            ),
            "updatedHistory": self.updated_history,
        }
