"""Result cache infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class CacheSettings(InfrastructureSettings):
    """Result cache configuration for country lookups.

    Environment Variables:
        CACHE_ENABLED: Enable the result cache (default: true)
        CACHE_DRIVER: Cache backend, "redis" or "memory" (default: redis)
        CACHE_HOST: Redis host (default: redis)
        CACHE_PORT: Redis port (default: 6379)
        CACHE_PASSWORD: Redis password (optional)
        CACHE_DB: Redis database index (default: 0)
        CACHE_TTL_SECONDS: Time-to-live for cached lookups (default: 3600s = 1h)
        CACHE_SOCKET_TIMEOUT: Redis connect/read timeout in seconds (default: 2)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.cache.CACHE_ENABLED:
            ttl = settings.cache.CACHE_TTL_SECONDS
        ```
    """

    CACHE_ENABLED: bool = Field(default=True, alias="CACHE_ENABLED")
    CACHE_DRIVER: str = Field(default="redis", alias="CACHE_DRIVER")
    CACHE_HOST: str = Field(default="redis", alias="CACHE_HOST")
    CACHE_PORT: int = Field(default=6379, alias="CACHE_PORT")
    CACHE_PASSWORD: Optional[str] = Field(default=None, alias="CACHE_PASSWORD")
    CACHE_DB: int = Field(default=0, alias="CACHE_DB")
    CACHE_TTL_SECONDS: int = Field(default=3600, gt=0, alias="CACHE_TTL_SECONDS")
    CACHE_SOCKET_TIMEOUT: float = Field(
        default=2.0, gt=0, alias="CACHE_SOCKET_TIMEOUT"
    )

    @field_validator("CACHE_DRIVER", mode="before")
    @classmethod
    def normalize_driver(cls, v: Optional[str]) -> str:
        """Normalize the driver name; unknown names are rejected by the factory."""
        if v is None:
            return ""
        return str(v).strip().lower()
