"""
Settings entry point for handlers and services.

Combines the shared fields with the AWS resource and provider groups.

Dependencies: tutor_backend.configs.aws, tutor_backend.configs.providers
System role: One settings object per Lambda container
"""

from functools import lru_cache

from pydantic import Field

from tutor_backend.configs.aws import AWSSettings
from tutor_backend.configs.base import BaseSettings
from tutor_backend.configs.providers import ProviderSettings


class Settings(BaseSettings):
    """Stage, log level, AWS resources and AI provider configuration."""

    aws: AWSSettings = Field(default_factory=AWSSettings)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Settings read from the environment on first use.

    The environment is read once per Lambda container; tests call
    ``get_settings.cache_clear()`` after changing variables.
    """
    return Settings()
