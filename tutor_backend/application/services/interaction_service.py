"""
Interaction service orchestrator.

Runs one student prompt against the configured providers and records
the turn in the session history:

    load session -> evaluate prompt, summarize, search, provider chains
    (concurrently) -> append entries in fixed order -> overwrite history

A provider chain is the provider call followed by the confidence
evaluation of that provider's answer. A failing chain only nulls that
provider's entry; the turn is still stored.

Dependencies: asyncio, tutor_backend boundary clients, response evaluator
System role: Orchestration handler core
"""

import asyncio
import logging
from typing import Any

from tutor_backend.application.services.dependencies import InteractionDependencies
from tutor_backend.boundary.providers.base import ChatAdapter
from tutor_backend.boundary.providers.google_search import format_results
from tutor_backend.core.exceptions import SessionNotFoundError
from tutor_backend.models.evaluation import PromptEvaluation
from tutor_backend.models.interaction import InteractionResult, ProviderAnswer
from tutor_backend.models.message import SENDER_GOOGLE_SEARCH, SENDER_USER, Message
from tutor_backend.models.search import SearchResult

logger = logging.getLogger(__name__)


def unavailable_message(provider: str) -> str:
    return f"{provider} response unavailable."


class InteractionService:
    """Interaction orchestrator over injected dependencies."""

    def __init__(self, dependencies: InteractionDependencies) -> None:
        self._deps = dependencies

    async def run(self, session_id: str, prompt: str) -> InteractionResult:
        """
        Process one prompt for a session.

        Args:
            session_id: Session to append the turn to
            prompt: Student prompt text

        Returns:
            InteractionResult with answers in configured provider order

        Raises:
            SessionNotFoundError: No session matches ``session_id``
            UpstreamCallError: Session lookup or history write failed
        """
        session = await asyncio.to_thread(self._deps.sessions.find_by_session_id, session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        history = list(session.history)
        logger.info(
            "run - Loaded session",
            extra={"session_id": session_id, "history_length": len(history)},
        )

        search_task = None
        if self._deps.search is not None:
            search_task = asyncio.ensure_future(self._deps.search.search(prompt))

        prompt_evaluation, prompt_summary, *answers = await asyncio.gather(
            self._deps.evaluator.evaluate_prompt_quality(prompt),
            self._deps.evaluator.summarize_prompt(prompt),
            *(
                self._provider_chain(adapter, history, prompt, search_task)
                for adapter in self._deps.providers
            ),
        )
        search_results = await self._collect_search(search_task)

        new_entries = self._build_entries(
            prompt, prompt_evaluation, prompt_summary, answers, search_results
        )
        updated_history = history + new_entries

        await asyncio.to_thread(
            self._deps.sessions.update_history,
            session.session_id,
            session.student_id,
            updated_history,
        )
        logger.info(
            "run - Session history updated",
            extra={"session_id": session_id, "history_length": len(updated_history)},
        )

        return InteractionResult(
            session_id=session.session_id,
            prompt_evaluation=prompt_evaluation,
            prompt_summary=prompt_summary,
            answers=answers,
            search_results=search_results,
            updated_history=updated_history,
        )

    @staticmethod
    async def _collect_search(
        search_task: "asyncio.Future[list[SearchResult]] | None",
    ) -> list[SearchResult] | None:
        if search_task is None:
            return None
        try:
            return await search_task
        except Exception as e:  # pylint: disable=broad-except
            logger.error("_collect_search - Search failed: %s: %s", type(e).__name__, e)
            return []

    async def _provider_chain(
        self,
        adapter: ChatAdapter,
        history: list[dict[str, Any]],
        prompt: str,
        search_task: "asyncio.Future[list[SearchResult]] | None",
    ) -> ProviderAnswer:
        try:
            context = None
            if adapter.uses_search and search_task is not None:
                results = await self._collect_search(search_task)
                context = format_results(results) if results else None

            answer = await adapter.generate(history, prompt, context)
            confidence = await self._deps.evaluator.evaluate_response_confidence(answer, prompt)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "_provider_chain - %s failed: %s: %s", adapter.name, type(e).__name__, e
            )
            return ProviderAnswer(provider=adapter.name, error=str(e))

        return ProviderAnswer(
            provider=adapter.name,
            answer=answer,
            confidence=confidence.confidence,
            concerns=confidence.concerns,
        )

    @staticmethod
    def _build_entries(
        prompt: str,
        prompt_evaluation: PromptEvaluation,
        prompt_summary: str | None,
        answers: list[ProviderAnswer],
        search_results: list[SearchResult] | None,
    ) -> list[dict[str, Any]]:
        """User entry, then one entry per provider, then the search entry."""
        entries = [
            Message(
                message=prompt,
                sender=SENDER_USER,
                score=prompt_evaluation.score,
                feedback=prompt_evaluation.feedback,
                prompt_summary=prompt_summary,
            ).to_item()
        ]
        for answer in answers:
            entries.append(
                Message(
                    message=answer.answer if answer.answer is not None
                    else unavailable_message(answer.provider),
                    sender=answer.provider,
                    confidence=answer.confidence,
                    concerns=answer.concerns,
                ).to_item()
            )
        if search_results is not None:
            entries.append(
                Message(
                    message=format_results(search_results),
                    sender=SENDER_GOOGLE_SEARCH,
                ).to_item()
            )
        return entries
