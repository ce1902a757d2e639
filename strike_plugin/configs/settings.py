"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the plugin
"""

from functools import lru_cache

from pydantic import Field

from strike_plugin.configs.base import BaseSettings
from strike_plugin.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified plugin settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from strike_plugin.configs import get_settings
        settings = get_settings()
    """
    return Settings()
