from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from packages.country_lookup import LookupService, build_lookup_service

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def build_lifespan(
    settings: "Settings", lookup_service: Optional[LookupService] = None
):
    """Create the application lifespan.

    Args:
        settings: Application settings
        lookup_service: Optional pre-built service; built from settings
            when not provided

    Returns:
        Async context manager usable as ``FastAPI(lifespan=...)``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger = configure_logging(settings=settings)

        app.state.settings = settings
        app.state.logger = logger

        logger.info("application_startup")
        _list_configs(settings, logger)

        service = lookup_service
        if service is None:
            service = build_lookup_service(settings)
        app.state.lookup_service = service

        yield

        logger.info("application_shutdown")
        service.close()

    return lifespan
