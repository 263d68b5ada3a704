"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
"""

from tutor_backend.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
