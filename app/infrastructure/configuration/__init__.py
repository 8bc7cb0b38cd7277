"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the country
lookup service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    MaxMindSettings: Lookup database settings
    CacheSettings: Result cache settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    db_path = settings.maxmind.MAXMIND_DB_PATH
    cache_ttl = settings.cache.CACHE_TTL_SECONDS

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import MaxMindSettings
from infrastructure.configuration.infrastructure import CacheSettings

__all__ = ["Settings", "MaxMindSettings", "CacheSettings"]
