"""
Shared settings fields.

All Lambda functions of the stack read one environment block, so every
settings class ignores variables it does not declare. A local ``.env``
file is honoured for development runs.

Dependencies: pydantic_settings
System role: Parent class of the aggregated Settings
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Stage and log level shared by every function."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment stage (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level applied on cold start",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
