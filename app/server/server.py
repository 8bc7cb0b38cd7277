from typing import Optional, TYPE_CHECKING

from fastapi import FastAPI

from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import build_lifespan
from server.request_context_middleware import RequestContextMiddleware

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from packages.country_lookup import LookupService


def create_app(
    settings: Optional["Settings"] = None,
    lookup_service: Optional["LookupService"] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Optional settings; loaded from the environment by default
        lookup_service: Optional pre-built LookupService

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    handler = FastAPI(
        title="IP Country Lookup",
        lifespan=build_lifespan(settings, lookup_service),
    )
    handler.add_middleware(RequestContextMiddleware)
    handler.include_router(api_router)
    return handler
