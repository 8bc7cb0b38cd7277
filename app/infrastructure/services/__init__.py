"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LookupServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_lookup_service,
)

__all__ = [
    "SettingsDep",
    "LookupServiceDep",
    "get_settings",
    "get_lookup_service",
]
