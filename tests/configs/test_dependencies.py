"""Tests for building the interaction dependency container from settings."""

from unittest.mock import MagicMock, patch

import pytest

from tutor_backend.application.services.dependencies import build_interaction_dependencies
from tutor_backend.boundary.providers import GeminiChatAdapter, OpenAIChatAdapter
from tutor_backend.configs.aws import AWSSettings
from tutor_backend.configs.providers import ProviderSettings
from tutor_backend.configs.settings import Settings
from tutor_backend.core.exceptions import ConfigurationError


def _settings(**provider_overrides) -> Settings:
    return Settings(
        aws=AWSSettings(sessions_table="TutoringSessions", region="us-west-2"),
        providers=ProviderSettings(**provider_overrides),
    )


@pytest.fixture
def secrets():
    client = MagicMock()
    client.get_value.side_effect = lambda name, key: f"{name}-key-value"
    return client


@pytest.fixture(autouse=True)
def no_aws():
    with patch("tutor_backend.application.services.dependencies.SessionTable") as table:
        yield table


class TestBuildInteractionDependencies:
    def test_default_provider_order(self, secrets) -> None:
        deps = build_interaction_dependencies(_settings(search_engine_id="cx-1"), secrets)

        assert [type(p) for p in deps.providers] == [GeminiChatAdapter, OpenAIChatAdapter]
        assert deps.search is not None

    def test_single_provider_without_search(self, secrets) -> None:
        deps = build_interaction_dependencies(
            _settings(enabled_providers=["openai"], enable_search=False), secrets
        )

        assert [p.name for p in deps.providers] == ["openai"]
        assert deps.search is None
        requested = {call.args[0] for call in secrets.get_value.call_args_list}
        assert requested == {"OpenAI"}

    def test_search_requires_engine_id(self, secrets) -> None:
        with pytest.raises(ConfigurationError):
            build_interaction_dependencies(_settings(search_engine_id=""), secrets)

    def test_unknown_provider(self, secrets) -> None:
        with pytest.raises(ConfigurationError, match="Unknown provider: claude"):
            build_interaction_dependencies(
                _settings(enabled_providers=["claude"], enable_search=False), secrets
            )
