"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- CacheSettings validation and defaults
- MaxMindSettings defaults and overrides
- Settings aggregator initialization
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import CacheSettings, MaxMindSettings, Settings
from infrastructure.services.providers import get_settings


@pytest.mark.unit
class TestCacheSettings:
    """Test suite for CacheSettings configuration."""

    def test_cache_settings_defaults(self):
        cache = CacheSettings()

        assert cache.CACHE_ENABLED is True
        assert cache.CACHE_DRIVER == "redis"
        assert cache.CACHE_HOST == "redis"
        assert cache.CACHE_PORT == 6379
        assert cache.CACHE_PASSWORD is None
        assert cache.CACHE_DB == 0
        assert cache.CACHE_TTL_SECONDS == 3600

    def test_cache_settings_custom_values(self, monkeypatch):
        monkeypatch.setenv("CACHE_ENABLED", "false")
        monkeypatch.setenv("CACHE_DRIVER", "memory")
        monkeypatch.setenv("CACHE_HOST", "cache.internal")
        monkeypatch.setenv("CACHE_PORT", "6380")
        monkeypatch.setenv("CACHE_PASSWORD", "s3cret")
        monkeypatch.setenv("CACHE_DB", "3")
        monkeypatch.setenv("CACHE_TTL_SECONDS", "60")

        cache = CacheSettings()

        assert cache.CACHE_ENABLED is False
        assert cache.CACHE_DRIVER == "memory"
        assert cache.CACHE_HOST == "cache.internal"
        assert cache.CACHE_PORT == 6380
        assert cache.CACHE_PASSWORD == "s3cret"
        assert cache.CACHE_DB == 3
        assert cache.CACHE_TTL_SECONDS == 60

    def test_cache_driver_is_normalized(self, monkeypatch):
        monkeypatch.setenv("CACHE_DRIVER", "  Redis ")

        assert CacheSettings().CACHE_DRIVER == "redis"

    def test_cache_ttl_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("CACHE_TTL_SECONDS", "0")

        with pytest.raises(ValidationError):
            CacheSettings()


@pytest.mark.unit
class TestMaxMindSettings:
    def test_maxmind_settings_default_path(self):
        assert MaxMindSettings().MAXMIND_DB_PATH == "./geodb/GeoLite2-Country.mmdb"

    def test_maxmind_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAXMIND_DB_PATH", "/data/GeoIP2-Country.mmdb")

        assert MaxMindSettings().MAXMIND_DB_PATH == "/data/GeoIP2-Country.mmdb"

    def test_maxmind_settings_from_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("MAXMIND_DB_PATH=/env/file.mmdb\n")

        assert MaxMindSettings().MAXMIND_DB_PATH == "/env/file.mmdb"


@pytest.mark.unit
class TestSettings:
    def test_settings_instantiates_sections(self):
        settings = Settings()

        assert isinstance(settings.maxmind, MaxMindSettings)
        assert isinstance(settings.cache, CacheSettings)

    def test_settings_accepts_section_overrides(self):
        cache = CacheSettings(CACHE_ENABLED=False)

        settings = Settings(cache=cache)

        assert settings.cache is cache

    def test_is_production_when_prefix_empty(self):
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_get_settings_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GIT_SHA", "deadbeef")

        assert get_settings().GIT_SHA == "deadbeef"
