"""Fixtures for country lookup integration tests.

The application is built through create_app with a real LookupService.
Only the resolver is mocked, at the GeoIP database boundary; validation,
caching and routing run for real.
"""

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from infrastructure.operations import OperationResult
from packages.country_lookup import (
    AddressValidator,
    CountryResolver,
    InMemoryResultCache,
    LookupService,
)
from server.server import create_app


@pytest.fixture
def resolver(us_record):
    resolver = Mock(spec=CountryResolver)
    resolver.resolve.return_value = OperationResult.success(data=us_record)
    resolver.health_check.return_value = OperationResult.success()
    return resolver


@pytest.fixture
def result_cache():
    return InMemoryResultCache()


@pytest.fixture
def lookup_service(resolver, result_cache):
    return LookupService(
        validator=AddressValidator(),
        resolver=resolver,
        cache=result_cache,
        ttl_seconds=3600,
    )


@pytest.fixture
def app(mock_settings, lookup_service):
    return create_app(settings=mock_settings, lookup_service=lookup_service)


@pytest.fixture
def client(app):
    """Create test client with the application lifespan running."""
    with TestClient(app) as client:
        yield client
