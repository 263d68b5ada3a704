"""
Tests for the POST /airesponse Lambda handler.

Dependencies are replaced with fakes by patching the container getter.
"""

import asyncio
import json
from unittest.mock import patch

import httpx
import pytest
from langchain_openai import ChatOpenAI

from tutor_backend.application.services.dependencies import InteractionDependencies
from tutor_backend.boundary.providers.openai_chat import TUTOR_SYSTEM_PROMPT, OpenAIChatAdapter
from tutor_backend.core.evaluation import ResponseEvaluator
from tutor_backend.core.evaluation.evaluator_prompts import (
    PROMPT_QUALITY_SYSTEM_PROMPT,
    PROMPT_SUMMARY_SYSTEM_PROMPT,
    RESPONSE_CONFIDENCE_SYSTEM_PROMPT,
)
from tutor_backend.core.lambda_utils.event_loop import run_async
from tutor_backend.handlers import ai_interaction

DEPENDENCIES_PATH = "tutor_backend.handlers.ai_interaction.get_interaction_dependencies"


@pytest.fixture
def patched_dependencies(multi_provider_dependencies):
    with patch(DEPENDENCIES_PATH, return_value=multi_provider_dependencies) as getter:
        yield getter


class TestAIInteractionHandler:
    """Test suite for the interaction handler contract."""

    def test_success_response(self, api_event, patched_dependencies, search_results) -> None:
        event = api_event("POST", body={"input": "What is a closure?", "sessionId": "session-1700000000000"})

        response = ai_interaction.handler(event, None)

        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        assert response["headers"]["Access-Control-Allow-Methods"] == "POST, OPTIONS"
        body = json.loads(response["body"])
        assert body["message"] == "AI guidance generated successfully!"
        assert body["aiGuidance"] == "Gemini: a closure captures scope."
        assert list(body["aiResults"]) == ["gemini", "openai"]
        assert body["aiResults"]["openai"] == {
            "response": "OpenAI: a closure is a function plus its environment.",
            "confidence": 88,
            "concerns": "No concerns found.",
        }
        assert body["promptEvaluation"] == {
            "score": 72,
            "feedback": "Say which language you use",
            "promptSummary": "Understanding closures",
        }
        assert body["searchResults"] == [result.model_dump() for result in search_results]
        assert len(body["updatedHistory"]) == 4

    def test_options_preflight(self, api_event, patched_dependencies) -> None:
        response = ai_interaction.handler(api_event("OPTIONS"), None)

        assert response["statusCode"] == 200
        assert response["body"] == ""
        patched_dependencies.assert_not_called()

    def test_get_not_allowed(self, api_event, patched_dependencies) -> None:
        response = ai_interaction.handler(api_event("GET"), None)

        assert response["statusCode"] == 405
        assert json.loads(response["body"]) == {"message": "Method Not Allowed."}

    @pytest.mark.parametrize(
        "event_kwargs,message",
        [
            ({"raw_body": "{broken"}, "Invalid request body."),
            ({"body": {"input": "hi"}}, "sessionId is required."),
            ({"body": {"sessionId": "session-1"}}, "input is required."),
            ({"body": {"sessionId": "session-1", "input": ["not", "text"]}}, "Invalid request body."),
        ],
    )
    def test_bad_request(
        self, api_event, patched_dependencies, mock_session_table, event_kwargs, message
    ) -> None:
        response = ai_interaction.handler(api_event("POST", **event_kwargs), None)

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"message": message}
        mock_session_table.find_by_session_id.assert_not_called()
        mock_session_table.update_history.assert_not_called()

    def test_unknown_session(self, api_event, patched_dependencies, mock_session_table) -> None:
        mock_session_table.find_by_session_id.return_value = None

        response = ai_interaction.handler(
            api_event("POST", body={"input": "hi", "sessionId": "session-missing"}), None
        )

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"message": "Session not found."}
        mock_session_table.update_history.assert_not_called()

    def test_store_failure_is_500(self, api_event, patched_dependencies, mock_session_table) -> None:
        mock_session_table.update_history.side_effect = RuntimeError("throttled")

        response = ai_interaction.handler(
            api_event("POST", body={"input": "hi", "sessionId": "session-1700000000000"}), None
        )

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {
            "message": "AI interaction failed.",
            "error": "Internal server error",
        }
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"


def _completion(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 5, "total_tokens": 10},
    }


class FakeOpenAIServer:
    """Chat completions endpoint answering by the request's system prompt."""

    REPLIES = {
        PROMPT_QUALITY_SYSTEM_PROMPT: json.dumps({"score": 80, "feedback": ["Name the language"]}),
        RESPONSE_CONFIDENCE_SYSTEM_PROMPT: json.dumps({"confidence": 90, "concerns": []}),
        PROMPT_SUMMARY_SYSTEM_PROMPT: "Understanding closures",
        TUTOR_SYSTEM_PROMPT: "A closure is a function bundled with its scope.",
    }

    def __init__(self) -> None:
        self.loops: set[int] = set()

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.loops.add(id(asyncio.get_running_loop()))
        body = json.loads(request.content)
        system_prompt = body["messages"][0]["content"]
        return httpx.Response(200, json=_completion(self.REPLIES[system_prompt]))


@pytest.fixture
def openai_server():
    return FakeOpenAIServer()


@pytest.fixture
def langchain_dependencies(openai_server, mock_session_table):
    """Container built from real ChatOpenAI models over a mocked transport."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(openai_server))

    def _chat_model(temperature: float) -> ChatOpenAI:
        return ChatOpenAI(
            model="gpt-3.5-turbo",
            api_key="sk-test",
            temperature=temperature,
            max_retries=0,
            http_async_client=http_client,
        )

    deps = InteractionDependencies(
        sessions=mock_session_table,
        evaluator=ResponseEvaluator(_chat_model(0)),
        providers=[OpenAIChatAdapter(_chat_model(0.7), system_prompt=TUTOR_SYSTEM_PROMPT)],
    )
    with patch(DEPENDENCIES_PATH, return_value=deps):
        yield deps
    run_async(http_client.aclose())


class TestWarmInvocations:
    """Test suite for repeated invocations sharing container-cached clients."""

    def test_second_invocation_keeps_answers_and_grades(
        self, api_event, langchain_dependencies, openai_server
    ) -> None:
        """Should grade and answer on every warm invocation, not only the first."""
        event = api_event("POST", body={"input": "What is a closure?", "sessionId": "session-1700000000000"})

        bodies = [json.loads(ai_interaction.handler(event, None)["body"]) for _ in range(3)]

        for body in bodies:
            assert body["aiGuidance"] == "A closure is a function bundled with its scope."
            assert body["aiResults"]["openai"] == {
                "response": "A closure is a function bundled with its scope.",
                "confidence": 90,
                "concerns": "No concerns found.",
            }
            assert body["promptEvaluation"] == {
                "score": 80,
                "feedback": "Name the language",
                "promptSummary": "Understanding closures",
            }
            assert body["updatedHistory"][1]["message"] != "openai response unavailable."
        assert len(openai_server.loops) == 1
