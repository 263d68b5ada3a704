"""
Interaction dependency container.

Holds the clients the interaction service needs. Built once per Lambda
container on the first request and reused for the container's lifetime;
tests construct it directly with doubles.

Dependencies: boto3 clients, provider adapters, langchain_openai
System role: Explicit client lifecycle for the orchestration handler
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from langchain_openai import ChatOpenAI

from tutor_backend.boundary.aws.dynamodb_client import SessionTable
from tutor_backend.boundary.aws.secrets_client import SecretsClient
from tutor_backend.boundary.providers.base import ChatAdapter
from tutor_backend.boundary.providers.gemini_chat import GeminiChatAdapter
from tutor_backend.boundary.providers.google_search import GoogleSearchAdapter
from tutor_backend.boundary.providers.openai_chat import OpenAIChatAdapter
from tutor_backend.configs import Settings, get_settings
from tutor_backend.core.evaluation.response_evaluator import ResponseEvaluator
from tutor_backend.core.exceptions import ConfigurationError
from tutor_backend.observability.log_utils import mask_secret

logger = logging.getLogger(__name__)


@dataclass
class InteractionDependencies:
    """Clients used by one interaction, in provider history order."""

    sessions: SessionTable
    evaluator: ResponseEvaluator
    providers: list[ChatAdapter] = field(default_factory=list)
    search: GoogleSearchAdapter | None = None


def build_interaction_dependencies(
    settings: Settings,
    secrets: SecretsClient,
) -> InteractionDependencies:
    """
    Construct every client from settings and Secrets Manager.

    Raises:
        ConfigurationError: Unknown provider name or missing search engine id
        UpstreamCallError: A secret could not be read
    """
    provider_settings = settings.providers

    openai_key = secrets.get_value(
        provider_settings.openai_secret_id, provider_settings.openai_secret_key
    )
    logger.debug("build_interaction_dependencies - OpenAI key %s", mask_secret(openai_key))
    evaluator = ResponseEvaluator(
        ChatOpenAI(model=provider_settings.evaluator_model, api_key=openai_key, temperature=0)
    )

    providers: list[ChatAdapter] = []
    for name in provider_settings.enabled_providers:
        if name == "openai":
            providers.append(
                OpenAIChatAdapter.from_api_key(
                    openai_key,
                    model=provider_settings.openai_model,
                    temperature=provider_settings.temperature,
                )
            )
        elif name == "gemini":
            gemini_key = secrets.get_value(
                provider_settings.gemini_secret_id, provider_settings.gemini_secret_key
            )
            providers.append(
                GeminiChatAdapter.from_api_key(
                    gemini_key,
                    model=provider_settings.gemini_model,
                    temperature=provider_settings.temperature,
                )
            )
        else:
            raise ConfigurationError(f"Unknown provider: {name}")

    search = None
    if provider_settings.enable_search:
        if not provider_settings.search_engine_id:
            raise ConfigurationError("GOOGLE_SEARCH_ENGINE_ID is not configured")
        google_key = secrets.get_value(
            provider_settings.google_secret_id, provider_settings.google_secret_key
        )
        search = GoogleSearchAdapter(
            api_key=google_key,
            engine_id=provider_settings.search_engine_id,
            result_count=provider_settings.search_result_count,
            timeout=provider_settings.search_timeout,
        )

    sessions = SessionTable(settings.aws.sessions_table, region=settings.aws.region)

    logger.info(
        "build_interaction_dependencies - Ready",
        extra={
            "providers": [provider.name for provider in providers],
            "search_enabled": search is not None,
        },
    )
    return InteractionDependencies(
        sessions=sessions,
        evaluator=evaluator,
        providers=providers,
        search=search,
    )


@lru_cache
def get_interaction_dependencies() -> InteractionDependencies:
    """Process-wide dependencies, created on first use."""
    settings = get_settings()
    return build_interaction_dependencies(settings, SecretsClient(region=settings.aws.region))
