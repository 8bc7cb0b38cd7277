"""Construction of lookup collaborators from settings."""

from typing import TYPE_CHECKING

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.clients.redis import RedisClient
from infrastructure.logging import get_module_logger
from packages.country_lookup.cache import (
    DisabledResultCache,
    InMemoryResultCache,
    RedisResultCache,
    ResultCache,
)
from packages.country_lookup.resolver import MaxMindCountryResolver
from packages.country_lookup.service import LookupService
from packages.country_lookup.validation import AddressValidator

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def build_result_cache(settings: "Settings") -> ResultCache:
    """Build the result cache selected by configuration.

    Args:
        settings: Settings with the cache section

    Returns:
        RedisResultCache, InMemoryResultCache, or DisabledResultCache when
        caching is off or the driver is unknown
    """
    cache_settings = settings.cache

    if not cache_settings.CACHE_ENABLED:
        logger.info("result_cache_disabled")
        return DisabledResultCache()

    driver = cache_settings.CACHE_DRIVER
    if driver == "redis":
        logger.info(
            "initialized_result_cache",
            backend="redis",
            host=cache_settings.CACHE_HOST,
            port=cache_settings.CACHE_PORT,
        )
        return RedisResultCache(RedisClient(cache_settings=cache_settings))

    if driver == "memory":
        logger.info("initialized_result_cache", backend="memory")
        return InMemoryResultCache()

    logger.warning("unknown_cache_driver", driver=driver)
    return DisabledResultCache()


def build_lookup_service(settings: "Settings") -> LookupService:
    """Build a LookupService wired from configuration.

    Args:
        settings: Application settings

    Returns:
        LookupService with a MaxMind resolver and the configured cache
    """
    return LookupService(
        validator=AddressValidator(),
        resolver=MaxMindCountryResolver(MaxMindClient(settings=settings)),
        cache=build_result_cache(settings),
        ttl_seconds=settings.cache.CACHE_TTL_SECONDS,
    )
