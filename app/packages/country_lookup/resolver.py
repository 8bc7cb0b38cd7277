"""Country resolution against the local GeoIP database."""

from abc import ABC, abstractmethod

import structlog

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.operations import OperationResult, OperationStatus
from packages.country_lookup.errors import ADDRESS_NOT_FOUND, DATABASE_UNAVAILABLE
from packages.country_lookup.schemas import Address, CountryRecord

logger = structlog.get_logger()


class CountryResolver(ABC):
    """Resolves a validated address to a CountryRecord.

    ``resolve`` returns one of:
    - SUCCESS with a CountryRecord
    - NOT_FOUND with error_code ADDRESS_NOT_FOUND
    - UNAVAILABLE with error_code DATABASE_UNAVAILABLE
    """

    @abstractmethod
    def resolve(self, address: Address) -> OperationResult:
        pass

    @abstractmethod
    def health_check(self) -> OperationResult:
        pass

    def close(self) -> None:
        """Release resources held by the resolver."""


class MaxMindCountryResolver(CountryResolver):
    """CountryResolver backed by a MaxMind database.

    Args:
        client: MaxMindClient used for lookups
    """

    def __init__(self, client: MaxMindClient) -> None:
        self._client = client

    def resolve(self, address: Address) -> OperationResult:
        result = self._client.country(ip_address=address.value)

        if result.status == OperationStatus.UNAVAILABLE:
            return OperationResult.unavailable(
                message=result.message,
                error_code=DATABASE_UNAVAILABLE,
            )

        if not result.is_success:
            return OperationResult.not_found(
                message=result.message,
                error_code=ADDRESS_NOT_FOUND,
            )

        country = result.data
        if not country.iso_code or not country.name:
            # e.g. anonymous proxy or satellite records carry no country
            logger.info("country_record_incomplete", ip_address=address.value)
            return OperationResult.not_found(
                message=f"No country recorded for IP address: {address.value}",
                error_code=ADDRESS_NOT_FOUND,
            )

        return OperationResult.success(
            data=CountryRecord(iso_code=country.iso_code, name=country.name),
            message="Country resolved",
        )

    def health_check(self) -> OperationResult:
        return self._client.healthcheck()

    def close(self) -> None:
        self._client.close()
