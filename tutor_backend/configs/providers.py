"""
AI provider configuration.

Secret identifiers, model names and provider selection for the
interaction handler.

Dependencies: pydantic_settings
System role: Provider adapter and evaluator configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Settings for chat providers, the evaluator model and web search."""

    model_config = SettingsConfigDict(
        env_prefix="PROVIDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    openai_secret_id: str = Field(default="OpenAI", description="Secrets Manager id for OpenAI")
    openai_secret_key: str = Field(default="OPENAI_API_KEY")
    gemini_secret_id: str = Field(default="Gemini", description="Secrets Manager id for Gemini")
    gemini_secret_key: str = Field(default="GEMINI_API_KEY")
    google_secret_id: str = Field(
        default="Google", description="Secrets Manager id for Google Custom Search"
    )
    google_secret_key: str = Field(default="GOOGLE_API_KEY")

    openai_model: str = Field(default="gpt-3.5-turbo", description="Primary chat model")
    evaluator_model: str = Field(
        default="gpt-3.5-turbo", description="Auxiliary model for prompt/answer grading"
    )
    gemini_model: str = Field(default="gemini-pro", description="Generative chat model")
    temperature: float = Field(default=0.7)

    search_engine_id: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_SEARCH_ENGINE_ID", "search_engine_id"),
        description="Custom Search engine id (cx)",
    )
    search_result_count: int = Field(default=3, ge=1, le=10)
    search_timeout: float = Field(default=10.0, description="Search request timeout in seconds")

    enabled_providers: list[str] = Field(
        default_factory=lambda: ["gemini", "openai"],
        description="Chat providers consulted per request, in history order",
    )
    enable_search: bool = Field(default=True, description="Run web search for each prompt")
