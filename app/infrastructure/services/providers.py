"""
Factory functions for dependency injection.

Provides the settings singleton and request-time accessors for services
created by the application lifespan.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from packages.country_lookup.service import LookupService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_lookup_service(request: Request) -> LookupService:
    """
    Get the LookupService owned by the running application.

    The service is built once in the application lifespan and stored on
    ``app.state``; its collaborators are injected there, not looked up
    globally.

    Returns:
        LookupService: The application's lookup service.

    Usage:
        @router.get("/")
        def get_country(service: LookupServiceDep, ip: str | None = None):
            result = service.lookup(ip)
    """
    return request.app.state.lookup_service
