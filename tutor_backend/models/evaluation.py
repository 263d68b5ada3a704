"""
Evaluation result models.

Two layers: the strict grade shapes the auxiliary model must emit
(``PromptGrade``, ``ConfidenceGrade``) and the degraded-capable results
stored on history entries (``PromptEvaluation``, ``ConfidenceEvaluation``).

Dependencies: pydantic
System role: Evaluator output contracts
"""

from pydantic import BaseModel, Field, field_validator

NO_CONCERNS = "No concerns found."


def _clamp_percent(value: float) -> int:
    return int(round(min(100.0, max(0.0, float(value)))))


class PromptGrade(BaseModel):
    """JSON shape requested from the prompt-quality grader."""

    score: float
    feedback: list[str]

    @field_validator("score")
    @classmethod
    def clamp_score(cls, value: float) -> int:
        return _clamp_percent(value)


class ConfidenceGrade(BaseModel):
    """JSON shape requested from the answer-confidence grader."""

    confidence: float
    concerns: list[str]

    @field_validator("confidence")
    @classmethod
    def clamp_confidence(cls, value: float) -> int:
        return _clamp_percent(value)


class PromptEvaluation(BaseModel):
    """Prompt quality result; both fields null when grading degraded."""

    score: int | None = None
    feedback: str | None = None

    @classmethod
    def from_grade(cls, grade: PromptGrade) -> "PromptEvaluation":
        return cls(score=int(grade.score), feedback="\n- ".join(grade.feedback))


class ConfidenceEvaluation(BaseModel):
    """Answer confidence result; both fields null when grading degraded."""

    confidence: int | None = None
    concerns: str | None = Field(default=None)

    @classmethod
    def from_grade(cls, grade: ConfidenceGrade) -> "ConfidenceEvaluation":
        concerns = "\n- ".join(grade.concerns) if grade.concerns else NO_CONCERNS
        return cls(confidence=int(grade.confidence), concerns=concerns)
