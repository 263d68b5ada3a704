"""
Response evaluator.

Uses an auxiliary chat model to grade prompt quality, grade answer
confidence, and summarize prompts. Model output is untrusted: it is
decoded defensively and every failure degrades to null fields instead
of raising.

Dependencies: langchain_core, pydantic
System role: Structured quality signals for history entries
"""

import json
import logging
from typing import TypeVar

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tutor_backend.boundary.providers.base import message_text
from tutor_backend.core.evaluation.evaluator_prompts import (
    PROMPT_QUALITY_SYSTEM_PROMPT,
    PROMPT_SUMMARY_SYSTEM_PROMPT,
    RESPONSE_CONFIDENCE_SYSTEM_PROMPT,
    prompt_quality_request,
    response_confidence_request,
)
from tutor_backend.core.exceptions import UpstreamParseError
from tutor_backend.models.evaluation import (
    ConfidenceEvaluation,
    ConfidenceGrade,
    PromptEvaluation,
    PromptGrade,
)

logger = logging.getLogger(__name__)

GradeT = TypeVar("GradeT", bound=BaseModel)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code block, if any."""
    if "```json" in text:
        text = text.split("```json", 1)[1].split("```", 1)[0]
    elif "```" in text:
        text = text.split("```", 1)[1].split("```", 1)[0]
    return text.strip()


def parse_grade(raw: str, grade_model: type[GradeT]) -> GradeT:
    """
    Decode model output into a grade shape.

    Raises:
        UpstreamParseError: Output is not JSON or does not match the shape
    """
    try:
        data = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        raise UpstreamParseError(f"Evaluator output is not JSON: {e}", provider="evaluator") from e
    try:
        return grade_model.model_validate(data)
    except PydanticValidationError as e:
        raise UpstreamParseError(
            f"Evaluator output does not match {grade_model.__name__}",
            provider="evaluator",
            details={"errors": e.error_count()},
        ) from e


class ResponseEvaluator:
    """
    Auxiliary-model grader.

    Usage:
        evaluator = ResponseEvaluator(ChatOpenAI(model="gpt-3.5-turbo"))
        evaluation = await evaluator.evaluate_prompt_quality("What is a closure?")
    """

    def __init__(self, chat_model: BaseChatModel) -> None:
        self._model = chat_model

    async def _complete(self, system_prompt: str, user_content: str) -> str:
        response = await self._model.ainvoke(
            [SystemMessage(content=system_prompt), HumanMessage(content=user_content)]
        )
        return message_text(response)

    async def evaluate_prompt_quality(self, prompt: str) -> PromptEvaluation:
        """
        Grade a student prompt on clarity, specificity and relevance.

        Returns:
            PromptEvaluation with score 0-100 and bullet-joined feedback,
            or both fields None when the call or parse fails
        """
        try:
            raw = await self._complete(PROMPT_QUALITY_SYSTEM_PROMPT, prompt_quality_request(prompt))
            grade = parse_grade(raw, PromptGrade)
        except UpstreamParseError as e:
            logger.warning("evaluate_prompt_quality - Failed to parse evaluation: %s", e)
            return PromptEvaluation()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "evaluate_prompt_quality - Evaluation call failed: %s: %s", type(e).__name__, e
            )
            return PromptEvaluation()

        evaluation = PromptEvaluation.from_grade(grade)
        logger.info("evaluate_prompt_quality - score=%s", evaluation.score)
        return evaluation

    async def evaluate_response_confidence(self, answer: str, prompt: str) -> ConfidenceEvaluation:
        """
        Grade how trustworthy ``answer`` is, capped by the quality of ``prompt``.

        Returns:
            ConfidenceEvaluation; an empty concerns list becomes
            "No concerns found.", failures give both fields None
        """
        try:
            raw = await self._complete(
                RESPONSE_CONFIDENCE_SYSTEM_PROMPT, response_confidence_request(answer, prompt)
            )
            grade = parse_grade(raw, ConfidenceGrade)
        except UpstreamParseError as e:
            logger.warning("evaluate_response_confidence - Failed to parse evaluation: %s", e)
            return ConfidenceEvaluation()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "evaluate_response_confidence - Evaluation call failed: %s: %s",
                type(e).__name__,
                e,
            )
            return ConfidenceEvaluation()

        evaluation = ConfidenceEvaluation.from_grade(grade)
        logger.info("evaluate_response_confidence - confidence=%s", evaluation.confidence)
        return evaluation

    async def summarize_prompt(self, prompt: str) -> str | None:
        """Short lookup phrase for the prompt, returned as the model wrote it."""
        try:
            return await self._complete(PROMPT_SUMMARY_SYSTEM_PROMPT, prompt)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("summarize_prompt - Summary call failed: %s: %s", type(e).__name__, e)
            return None
