"""Country lookup package - IP to country via MaxMind with a result cache."""

from packages.country_lookup.cache import (
    DisabledResultCache,
    InMemoryResultCache,
    RedisResultCache,
    ResultCache,
)
from packages.country_lookup.factory import build_lookup_service, build_result_cache
from packages.country_lookup.resolver import CountryResolver, MaxMindCountryResolver
from packages.country_lookup.schemas import (
    Address,
    CacheEntry,
    CountryRecord,
    CountryResponse,
    LookupOutcome,
    Provenance,
)
from packages.country_lookup.service import LookupService
from packages.country_lookup.validation import AddressValidator

__all__ = [
    "Address",
    "AddressValidator",
    "CacheEntry",
    "CountryRecord",
    "CountryResolver",
    "CountryResponse",
    "DisabledResultCache",
    "InMemoryResultCache",
    "LookupOutcome",
    "LookupService",
    "MaxMindCountryResolver",
    "Provenance",
    "RedisResultCache",
    "ResultCache",
    "build_lookup_service",
    "build_result_cache",
]
