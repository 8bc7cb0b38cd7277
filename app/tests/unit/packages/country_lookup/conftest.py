"""Fixtures for country lookup unit tests."""

import pytest
from unittest.mock import Mock

from infrastructure.operations import OperationResult
from packages.country_lookup.cache import InMemoryResultCache, ResultCache
from packages.country_lookup.errors import (
    ADDRESS_NOT_FOUND,
    CACHE_UNAVAILABLE,
    DATABASE_UNAVAILABLE,
)
from packages.country_lookup.resolver import CountryResolver
from packages.country_lookup.service import LookupService
from packages.country_lookup.validation import AddressValidator


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_cache(clock):
    return InMemoryResultCache(clock=clock)


@pytest.fixture
def resolver(us_record):
    """Resolver mock that resolves every address to the United States."""
    resolver = Mock(spec=CountryResolver)
    resolver.resolve.return_value = OperationResult.success(data=us_record)
    resolver.health_check.return_value = OperationResult.success()
    return resolver


@pytest.fixture
def not_found_result():
    return OperationResult.not_found(
        "IP address not found in database: 2001:db8::1",
        error_code=ADDRESS_NOT_FOUND,
    )


@pytest.fixture
def database_unavailable_result():
    return OperationResult.unavailable(
        "MaxMind database file error: No such file",
        error_code=DATABASE_UNAVAILABLE,
    )


@pytest.fixture
def unreachable_cache():
    """Cache mock whose backend cannot be reached."""
    cache = Mock(spec=ResultCache)
    failure = OperationResult.unavailable(
        "Connection error: Connection refused", error_code=CACHE_UNAVAILABLE
    )
    cache.get.return_value = failure
    cache.set.return_value = failure
    cache.health_check.return_value = failure
    return cache


@pytest.fixture
def make_service(resolver, memory_cache):
    """Build a LookupService, defaulting to the mock resolver and memory cache."""

    def _make(resolver=resolver, cache=memory_cache, ttl_seconds=3600):
        return LookupService(
            validator=AddressValidator(),
            resolver=resolver,
            cache=cache,
            ttl_seconds=ttl_seconds,
        )

    return _make
