"""Redis client for result caching.

This module provides a Redis CLIENT connection used as the key/value store
behind the lookup result cache.

Features:
- Connection pooling, created on first use
- Standardized error handling via OperationResult
- TTL support for automatic expiration

Usage:
    from infrastructure.clients.redis import RedisClient

    client = RedisClient(cache_settings=settings.cache)

    result = client.set_value("geoip:8.8.8.8", payload, ttl_seconds=3600)
    if result.is_success:
        print("Value saved")

    result = client.get_value("geoip:8.8.8.8")
    if result.is_success and result.data is not None:
        payload = result.data
"""

import threading
from typing import TYPE_CHECKING, Optional

import structlog
from redis import Redis, ConnectionPool, RedisError  # type: ignore
from redis.exceptions import ConnectionError, TimeoutError  # type: ignore

from infrastructure.operations.result import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import CacheSettings

logger = structlog.get_logger()


class RedisClient:
    """Redis key/value client.

    Connection errors never raise out of the public methods; they are
    reported as UNAVAILABLE results so callers can degrade gracefully.

    Args:
        cache_settings: CacheSettings with host, port, password, db and timeout
        client: Optional pre-built Redis client (skips pool creation)
    """

    def __init__(
        self, cache_settings: "CacheSettings", client: Optional[Redis] = None
    ) -> None:
        self._host = cache_settings.CACHE_HOST
        self._port = cache_settings.CACHE_PORT
        self._password = cache_settings.CACHE_PASSWORD
        self._db = cache_settings.CACHE_DB
        self._socket_timeout = cache_settings.CACHE_SOCKET_TIMEOUT
        self._connection_pool: Optional[ConnectionPool] = None
        self._client = client
        self._lock = threading.Lock()
        self._logger = logger.bind(component="redis_client")

    def _get_client(self) -> Redis:
        """Get or create the Redis client with connection pooling.

        No connection is made here; each command connects through the pool
        and fails on its own when Redis is unreachable.
        """
        if self._client is not None:
            return self._client

        with self._lock:
            if self._client is not None:
                return self._client

            if self._connection_pool is None:
                self._connection_pool = ConnectionPool(
                    host=self._host,
                    port=self._port,
                    password=self._password,
                    db=self._db,
                    max_connections=50,
                    socket_timeout=self._socket_timeout,
                    socket_connect_timeout=self._socket_timeout,
                    health_check_interval=30,
                )
                self._logger.info(
                    "redis_connection_pool_created",
                    host=self._host,
                    port=self._port,
                    db=self._db,
                )

            self._client = Redis(connection_pool=self._connection_pool)
            return self._client

    def set_value(
        self, key: str, value: str, ttl_seconds: Optional[int] = None
    ) -> OperationResult:
        """Set a key to a string value with optional TTL.

        Args:
            key: The key to set
            value: The serialized value, encoded as UTF-8 by redis-py
            ttl_seconds: Optional expiration time in seconds

        Returns:
            OperationResult: Success/failure result
        """
        try:
            client = self._get_client()

            if ttl_seconds:
                client.setex(key, ttl_seconds, value)
                self._logger.debug("redis_set_with_ttl", key=key, ttl_seconds=ttl_seconds)
            else:
                client.set(key, value)
                self._logger.debug("redis_set", key=key)

            return OperationResult.success(message=f"Value set for key: {key}")

        except (ConnectionError, TimeoutError) as e:
            self._logger.warning("redis_set_connection_error", key=key, error=str(e))
            return OperationResult.unavailable(
                message=f"Connection error setting key {key}: {str(e)}",
                error_code="CONNECTION_ERROR",
            )

        except RedisError as e:
            self._logger.error("redis_set_error", key=key, error=str(e))
            return OperationResult.unavailable(
                message=f"Error setting key {key}: {str(e)}",
                error_code="REDIS_ERROR",
            )

    def get_value(self, key: str) -> OperationResult:
        """Get the raw bytes stored at a key.

        Values are not decoded; callers own the payload encoding.

        Args:
            key: The key to retrieve

        Returns:
            OperationResult: Result with data=value or data=None if not found
        """
        try:
            client = self._get_client()
            value = client.get(key)

            if value is None:
                self._logger.debug("redis_key_not_found", key=key)
                return OperationResult.success(
                    message=f"Key not found: {key}",
                    data=None,
                )

            self._logger.debug("redis_get_success", key=key)
            return OperationResult.success(
                message=f"Value retrieved for key: {key}",
                data=value,
            )

        except (ConnectionError, TimeoutError) as e:
            self._logger.warning("redis_get_connection_error", key=key, error=str(e))
            return OperationResult.unavailable(
                message=f"Connection error getting key {key}: {str(e)}",
                error_code="CONNECTION_ERROR",
            )

        except RedisError as e:
            self._logger.error("redis_get_error", key=key, error=str(e))
            return OperationResult.unavailable(
                message=f"Error getting key {key}: {str(e)}",
                error_code="REDIS_ERROR",
            )

    def health_check(self) -> OperationResult:
        """Check Redis connection health.

        Returns:
            OperationResult: Success if healthy, UNAVAILABLE otherwise
        """
        try:
            client = self._get_client()
            client.ping()
            return OperationResult.success(message="Redis connection healthy")

        except (ConnectionError, TimeoutError) as e:
            self._logger.warning("redis_health_check_connection_error", error=str(e))
            return OperationResult.unavailable(
                message=f"Redis connection error: {str(e)}",
                error_code="CONNECTION_ERROR",
            )

        except RedisError as e:
            self._logger.error("redis_health_check_error", error=str(e))
            return OperationResult.unavailable(
                message=f"Redis health check failed: {str(e)}",
                error_code="REDIS_ERROR",
            )

    def close(self) -> None:
        """Release pooled connections."""
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
            if self._connection_pool is not None:
                self._connection_pool.disconnect()
                self._connection_pool = None
