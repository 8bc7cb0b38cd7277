"""Fixtures for server integration tests."""

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from infrastructure.operations import OperationResult
from packages.country_lookup import LookupService
from server.server import create_app


@pytest.fixture
def lookup_service():
    """LookupService mock with a healthy database and cache."""
    service = Mock(spec=LookupService)
    service.health_check.return_value = {"database": "ok", "cache": "ok"}
    service.lookup.return_value = OperationResult.invalid_input(
        "IP address is missing", error_code="INVALID_IP_ADDRESS"
    )
    return service


@pytest.fixture
def app(mock_settings, lookup_service):
    return create_app(settings=mock_settings, lookup_service=lookup_service)


@pytest.fixture
def app_with_lifespan(app):
    """Test client with startup and shutdown run around the test."""
    with TestClient(app) as client:
        yield client
