import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection
# regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
from unittest.mock import MagicMock

from infrastructure.services.providers import get_settings
from packages.country_lookup.schemas import CountryRecord


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """Run every test from an empty directory so a local .env is not read."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_settings():
    """Settings mock with the sections used by the lookup pipeline."""
    settings = MagicMock()
    settings.LOG_LEVEL = "INFO"
    settings.GIT_SHA = "abc123"
    settings.is_production = False
    settings.maxmind.MAXMIND_DB_PATH = "/path/to/GeoLite2-Country.mmdb"
    settings.cache.CACHE_ENABLED = True
    settings.cache.CACHE_DRIVER = "memory"
    settings.cache.CACHE_HOST = "localhost"
    settings.cache.CACHE_PORT = 6379
    settings.cache.CACHE_PASSWORD = None
    settings.cache.CACHE_DB = 0
    settings.cache.CACHE_TTL_SECONDS = 3600
    settings.cache.CACHE_SOCKET_TIMEOUT = 2.0
    settings.model_dump.return_value = {"LOG_LEVEL": "INFO", "cache": {}, "maxmind": {}}
    return settings


@pytest.fixture
def us_record():
    return CountryRecord(iso_code="US", name="United States")


@pytest.fixture
def de_record():
    return CountryRecord(iso_code="DE", name="Germany")
