"""
Business logic for resolving the country of an IP address.

LookupService runs the cache-aside flow for one request:

    validate -> cache read -> (hit: done) -> resolve -> cache write -> done

Validation and resolution failures end the lookup and are returned to the
caller. Cache failures are logged and treated as a miss; they never change
the result. Concurrent lookups of the same uncached address each call the
resolver.
"""

from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from packages.country_lookup.cache import ResultCache
from packages.country_lookup.errors import CACHE_DISABLED
from packages.country_lookup.resolver import CountryResolver
from packages.country_lookup.schemas import (
    Address,
    CacheEntry,
    CountryRecord,
    LookupOutcome,
    Provenance,
)
from packages.country_lookup.validation import AddressValidator

logger = get_module_logger()


class LookupService:
    """Cache-aside country lookup.

    Args:
        validator: AddressValidator for raw input
        resolver: CountryResolver for the authoritative lookup
        cache: ResultCache for lookup results
        ttl_seconds: TTL applied to every cache write
    """

    def __init__(
        self,
        validator: AddressValidator,
        resolver: CountryResolver,
        cache: ResultCache,
        ttl_seconds: int,
    ) -> None:
        self._validator = validator
        self._resolver = resolver
        self._cache = cache
        self._ttl_seconds = ttl_seconds

    def lookup(self, raw_ip: Optional[str]) -> OperationResult:
        """Resolve the country for a raw IP string.

        Args:
            raw_ip: IP address as received from the caller

        Returns:
            OperationResult with a LookupOutcome, or the validation or
            resolution failure (INVALID_INPUT, NOT_FOUND, UNAVAILABLE)
        """
        validated = self._validator.validate(raw_ip)
        if not validated.is_success:
            return validated

        address: Address = validated.data
        log = logger.bind(ip_address=address.value)

        cached = self._read_cache(address)
        if cached is not None:
            log.info("lookup_cache_hit", country=cached.iso_code)
            return OperationResult.success(
                data=LookupOutcome(address, cached, Provenance.CACHE_HIT),
                message="Country found in cache",
            )

        log.info("lookup_cache_miss")
        resolved = self._resolver.resolve(address)
        if not resolved.is_success:
            if resolved.status == OperationStatus.UNAVAILABLE:
                log.error("lookup_database_unavailable", error=resolved.message)
            else:
                log.info("lookup_address_not_found", error=resolved.message)
            return resolved

        record: CountryRecord = resolved.data
        self._write_cache(address, record)

        log.info("lookup_resolved", country=record.iso_code)
        return OperationResult.success(
            data=LookupOutcome(address, record, Provenance.RESOLVED),
            message="Country resolved",
        )

    def _read_cache(self, address: Address) -> Optional[CountryRecord]:
        result = self._cache.get(address.cache_key)

        if not result.is_success:
            self._log_cache_failure("lookup_cache_get_failed", address, result)
            return None

        if result.data is None:
            return None

        entry = CacheEntry.decode(result.data)
        if entry is None:
            logger.warning(
                "lookup_cache_entry_malformed",
                ip_address=address.value,
                cache_key=address.cache_key,
            )
            return None

        return entry.to_record()

    def _write_cache(self, address: Address, record: CountryRecord) -> None:
        payload = CacheEntry.from_record(record).encode()
        result = self._cache.set(address.cache_key, payload, self._ttl_seconds)

        if not result.is_success:
            self._log_cache_failure("lookup_cache_set_failed", address, result)
            return

        logger.debug(
            "lookup_cache_set",
            ip_address=address.value,
            ttl_seconds=self._ttl_seconds,
        )

    def _log_cache_failure(
        self, event: str, address: Address, result: OperationResult
    ) -> None:
        if result.error_code == CACHE_DISABLED:
            return
        logger.warning(
            event,
            ip_address=address.value,
            error_code=result.error_code,
            error=result.message,
        )

    def health_check(self) -> dict:
        """Report the state of the database and the cache.

        Returns:
            Dict with "database" and "cache" set to "ok", "unavailable" or
            "disabled"
        """
        database = self._resolver.health_check()
        cache = self._cache.health_check()

        if cache.is_success:
            cache_state = "ok"
        elif cache.error_code == CACHE_DISABLED:
            cache_state = "disabled"
        else:
            cache_state = "unavailable"

        return {
            "database": "ok" if database.is_success else "unavailable",
            "cache": cache_state,
        }

    def close(self) -> None:
        """Close the resolver and the cache."""
        self._resolver.close()
        self._cache.close()
