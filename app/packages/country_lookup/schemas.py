"""Pydantic schemas for the country lookup package."""

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CACHE_KEY_PREFIX = "geoip:"
CACHE_ENTRY_VERSION = 1


class Address(BaseModel):
    """A syntactically valid IPv4 or IPv6 literal.

    Construction is the validation gate: an Address cannot exist for a
    string that does not parse as an IP literal.
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(
        ...,
        description="IPv4 or IPv6 address literal",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )

    @field_validator("value")
    @classmethod
    def validate_ip_format(cls, v: str) -> str:
        """Validate IP address format."""
        try:
            parsed = ipaddress.ip_address(v)
        except ValueError:
            raise ValueError(f"Invalid IP address format: {v}")
        if getattr(parsed, "scope_id", None):
            raise ValueError(f"Scoped IPv6 addresses are not supported: {v}")
        return v

    @property
    def cache_key(self) -> str:
        """Cache key for this address, keyed on the exact input string."""
        return f"{CACHE_KEY_PREFIX}{self.value}"

    def __str__(self) -> str:
        return self.value


class CountryRecord(BaseModel):
    """Country resolved for an address."""

    model_config = ConfigDict(frozen=True)

    iso_code: str = Field(..., description="ISO 3166-1 alpha-2 country code")
    name: str = Field(..., description="Country name")


class CacheEntry(BaseModel):
    """Versioned JSON encoding of a cached CountryRecord.

    Example payload: ``{"v": 1, "iso_code": "US", "name": "United States"}``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    v: Literal[1]
    iso_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    @classmethod
    def from_record(cls, record: CountryRecord) -> "CacheEntry":
        return cls(v=CACHE_ENTRY_VERSION, iso_code=record.iso_code, name=record.name)

    def to_record(self) -> CountryRecord:
        return CountryRecord(iso_code=self.iso_code, name=self.name)

    def encode(self) -> str:
        return self.model_dump_json()

    @classmethod
    def decode(cls, payload: str | bytes) -> "CacheEntry | None":
        """Decode a cached payload, returning None when it is malformed."""
        try:
            if isinstance(payload, bytes):
                payload = payload.decode("utf-8")
            return cls.model_validate_json(payload)
        except (UnicodeDecodeError, ValidationError):
            return None


class Provenance(str, Enum):
    """Where a lookup answer came from."""

    CACHE_HIT = "cache-hit"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class LookupOutcome:
    """Successful result of one lookup."""

    address: Address
    record: CountryRecord
    provenance: Provenance


class CountryResponse(BaseModel):
    """Response body for a successful lookup."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ip": "8.8.8.8",
                "country": {"iso_code": "US", "name": "United States"},
            }
        }
    )

    ip: str = Field(..., description="Queried IP address")
    country: CountryRecord
