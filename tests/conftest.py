"""
Shared test fixtures and configuration for entire test suite.

Provides: API Gateway event builders, fake provider adapters, fake search,
stub evaluator and mocked session table
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from tutor_backend.application.services.dependencies import InteractionDependencies
from tutor_backend.models.evaluation import ConfidenceEvaluation, PromptEvaluation
from tutor_backend.models.search import SearchResult
from tutor_backend.models.session import Session


class FakeAdapter:
    """Chat adapter double recording the context it was called with."""

    def __init__(
        self,
        name: str,
        answer: str = "",
        error: Exception | None = None,
        delay: float = 0.0,
        uses_search: bool = False,
    ) -> None:
        self.name = name
        self.answer = answer
        self.error = error
        self.delay = delay
        self.uses_search = uses_search
        self.calls: list[tuple[list[dict[str, Any]], str, str | None]] = []

    async def generate(self, history, prompt, context=None):
        self.calls.append((list(history), prompt, context))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeSearch:
    """Search adapter double."""

    def __init__(self, results: list[SearchResult]) -> None:
        self.results = results
        self.queries: list[str] = []

    async def search(self, query):
        self.queries.append(query)
        return self.results


@pytest.fixture
def api_event():
    """Build an API Gateway REST (v1) proxy event."""

    def _build(
        method: str,
        body: Any = None,
        query: dict | None = None,
        path: dict | None = None,
        raw_body: str | None = None,
    ) -> dict:
        if raw_body is None and body is not None:
            raw_body = json.dumps(body)
        return {
            "httpMethod": method,
            "body": raw_body,
            "queryStringParameters": query,
            "pathParameters": path,
            "headers": {"Content-Type": "application/json"},
        }

    return _build


@pytest.fixture
def stored_session() -> Session:
    return Session(
        session_id="session-1700000000000",
        student_id="student-sub-1",
        session_name="Closures",
        history=[],
        created_at="2024-01-01T00:00:00.000Z",
    )


@pytest.fixture
def mock_session_table(stored_session):
    """Sessions table double returning ``stored_session`` for lookups."""
    table = MagicMock()
    table.find_by_session_id.return_value = stored_session
    return table


@pytest.fixture
def stub_evaluator():
    """Evaluator double with fixed, successful evaluations."""
    evaluator = MagicMock()
    evaluator.evaluate_prompt_quality = AsyncMock(
        return_value=PromptEvaluation(score=72, feedback="Say which language you use")
    )
    evaluator.summarize_prompt = AsyncMock(return_value="Understanding closures")
    evaluator.evaluate_response_confidence = AsyncMock(
        return_value=ConfidenceEvaluation(confidence=88, concerns="No concerns found.")
    )
    return evaluator


@pytest.fixture
def search_results() -> list[SearchResult]:
    return [
        SearchResult(
            title="Closures - MDN",
            link="https://developer.mozilla.org/en-US/docs/Web/JavaScript/Closures",
            snippet="A closure is the combination of a function...",
            source="mozilla.org",
        )
    ]


@pytest.fixture
def multi_provider_dependencies(mock_session_table, stub_evaluator, search_results):
    """Gemini (search-augmented) then OpenAI, with web search enabled."""
    return InteractionDependencies(
        sessions=mock_session_table,
        evaluator=stub_evaluator,
        providers=[
            FakeAdapter("gemini", answer="Gemini: a closure captures scope.", uses_search=True),
            FakeAdapter("openai", answer="OpenAI: a closure is a function plus its environment."),
        ],
        search=FakeSearch(search_results),
    )


@pytest.fixture
def single_provider_dependencies(mock_session_table, stub_evaluator):
    return InteractionDependencies(
        sessions=mock_session_table,
        evaluator=stub_evaluator,
        providers=[FakeAdapter("openai", answer="A closure is a function plus its environment.")],
        search=None,
    )


@pytest.fixture
def make_adapter():
    """Factory for FakeAdapter instances."""
    return FakeAdapter


@pytest.fixture
def make_search():
    """Factory for FakeSearch instances."""
    return FakeSearch
