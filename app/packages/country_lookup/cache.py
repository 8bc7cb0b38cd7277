"""Result cache implementations.

A ResultCache stores serialized lookup results by key with a TTL. Every
method returns an OperationResult; failures are reported as UNAVAILABLE
and never raise, so callers can treat them as a cache miss.

Implementations:
- RedisResultCache: shared cache backed by Redis
- InMemoryResultCache: per-process cache for single-process deployments
- DisabledResultCache: stands in when caching is turned off
"""

import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple

from infrastructure.clients.redis import RedisClient
from infrastructure.operations import OperationResult
from packages.country_lookup.errors import CACHE_DISABLED, CACHE_UNAVAILABLE


class ResultCache(ABC):
    """Abstract base class for result cache implementations."""

    @abstractmethod
    def get(self, key: str) -> OperationResult:
        """Get the cached payload for a key.

        Args:
            key: Cache key.

        Returns:
            SUCCESS with the payload (str, or bytes from Redis), SUCCESS with
            data=None on a miss, or UNAVAILABLE when the cache cannot be read.
        """
        pass

    @abstractmethod
    def set(self, key: str, payload: str, ttl_seconds: int) -> OperationResult:
        """Store a payload for a key.

        Args:
            key: Cache key.
            payload: Serialized entry.
            ttl_seconds: Time-to-live in seconds.

        Returns:
            SUCCESS, or UNAVAILABLE when the write failed.
        """
        pass

    @abstractmethod
    def health_check(self) -> OperationResult:
        pass

    def close(self) -> None:
        """Release resources held by the cache."""


class RedisResultCache(ResultCache):
    """Redis-backed result cache."""

    def __init__(self, client: RedisClient) -> None:
        self._client = client

    def get(self, key: str) -> OperationResult:
        result = self._client.get_value(key)
        if result.is_success:
            return result
        return OperationResult.unavailable(
            message=result.message, error_code=CACHE_UNAVAILABLE
        )

    def set(self, key: str, payload: str, ttl_seconds: int) -> OperationResult:
        result = self._client.set_value(key, payload, ttl_seconds=ttl_seconds)
        if result.is_success:
            return result
        return OperationResult.unavailable(
            message=result.message, error_code=CACHE_UNAVAILABLE
        )

    def health_check(self) -> OperationResult:
        result = self._client.health_check()
        if result.is_success:
            return result
        return OperationResult.unavailable(
            message=result.message, error_code=CACHE_UNAVAILABLE
        )

    def close(self) -> None:
        self._client.close()


class InMemoryResultCache(ResultCache):
    """Thread-safe in-process cache with per-entry expiry.

    Expired entries are dropped when read.

    Args:
        clock: Monotonic time source, in seconds
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> OperationResult:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return OperationResult.success(data=None, message=f"Key not found: {key}")

            payload, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return OperationResult.success(data=None, message=f"Key expired: {key}")

        return OperationResult.success(data=payload, message=f"Value retrieved for key: {key}")

    def set(self, key: str, payload: str, ttl_seconds: int) -> OperationResult:
        with self._lock:
            self._entries[key] = (payload, self._clock() + ttl_seconds)
        return OperationResult.success(message=f"Value set for key: {key}")

    def health_check(self) -> OperationResult:
        return OperationResult.success(message="In-memory cache healthy")

    def close(self) -> None:
        with self._lock:
            self._entries.clear()


class DisabledResultCache(ResultCache):
    """Cache used when caching is turned off; every call reports UNAVAILABLE."""

    def get(self, key: str) -> OperationResult:
        return OperationResult.unavailable(
            message="Result cache is disabled", error_code=CACHE_DISABLED
        )

    def set(self, key: str, payload: str, ttl_seconds: int) -> OperationResult:
        return OperationResult.unavailable(
            message="Result cache is disabled", error_code=CACHE_DISABLED
        )

    def health_check(self) -> OperationResult:
        return OperationResult.unavailable(
            message="Result cache is disabled", error_code=CACHE_DISABLED
        )
