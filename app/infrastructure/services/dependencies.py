"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.services.providers import get_settings, get_lookup_service
from packages.country_lookup.service import LookupService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Lookup service dependency, owned by the application lifespan
LookupServiceDep = Annotated[LookupService, Depends(get_lookup_service)]

__all__ = [
    "SettingsDep",
    "LookupServiceDep",
]
