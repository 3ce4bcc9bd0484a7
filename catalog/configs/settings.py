"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
get_settings() caches one instance per process.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from catalog.configs.base import BaseSettings
from catalog.configs.database import DatabaseSettings
from catalog.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    server: ServerSettings = ServerSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from catalog.configs import get_settings
        settings = get_settings()
    """
    return Settings()
