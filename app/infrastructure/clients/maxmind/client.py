"""MaxMind GeoIP2 client for country lookups.

Provides type-safe access to a MaxMind GeoIP2/GeoLite2 database with
consistent error handling and OperationResult return types.
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import geoip2.database
import structlog
from geoip2.errors import AddressNotFoundError, GeoIP2Error
from maxminddb import InvalidDatabaseError

from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

HEALTHCHECK_IP = "8.8.8.8"


@dataclass(frozen=True)
class CountryData:
    """Country data for an IP address."""

    iso_code: Optional[str] = None
    name: Optional[str] = None


class MaxMindClient:
    """Client for MaxMind GeoIP2 database operations.

    The database reader is opened on first use and shared by all later
    lookups; geoip2 readers are safe for concurrent reads. A failed open is
    not cached, so the next lookup tries again.

    All lookup methods return OperationResult for consistent error handling.

    Args:
        settings: Settings instance with maxmind.MAXMIND_DB_PATH
        reader: Optional pre-opened reader (used instead of opening the file)
    """

    def __init__(
        self,
        settings: "Settings",
        reader: Optional[geoip2.database.Reader] = None,
    ) -> None:
        self._db_path = settings.maxmind.MAXMIND_DB_PATH
        self._reader = reader
        self._lock = threading.Lock()
        self._logger = logger.bind(component="maxmind_client")

    def _get_reader(self) -> geoip2.database.Reader:
        if self._reader is not None:
            return self._reader

        with self._lock:
            if self._reader is None:
                self._reader = geoip2.database.Reader(self._db_path)
                self._logger.info(
                    "database_opened",
                    db_path=self._db_path,
                    database_type=self._reader.metadata().database_type,
                )
        return self._reader

    def country(self, ip_address: str) -> OperationResult:
        """Look up the country of an IP address.

        City databases are queried with ``city()``; every other database
        with ``country()``. Both expose the same country section.

        Args:
            ip_address: IPv4 or IPv6 address to look up

        Returns:
            OperationResult with CountryData, NOT_FOUND when the database has
            no country for the address, or UNAVAILABLE when the database
            cannot be opened or queried
        """
        log = self._logger.bind(ip_address=ip_address)
        log.debug("looking_up_country")

        try:
            reader = self._get_reader()
        except (OSError, InvalidDatabaseError, ValueError) as e:
            log.error("database_file_error", error=str(e), db_path=self._db_path)
            return OperationResult.unavailable(
                message=f"MaxMind database file error: {str(e)}",
                error_code="DB_FILE_ERROR",
            )

        try:
            if "City" in reader.metadata().database_type:
                response = reader.city(ip_address)
            else:
                response = reader.country(ip_address)

        except AddressNotFoundError:
            log.info("ip_not_found")
            return OperationResult.not_found(
                message=f"IP address not found in database: {ip_address}",
                error_code="IP_NOT_FOUND",
            )

        except ValueError as e:
            # Raised for IPv6 lookups against an IPv4-only database
            log.info("ip_not_covered", error=str(e))
            return OperationResult.not_found(
                message=f"IP address not covered by database: {ip_address}",
                error_code="IP_NOT_COVERED",
            )

        except (GeoIP2Error, InvalidDatabaseError, TypeError) as e:
            log.error("geoip2_error", error=str(e))
            return OperationResult.unavailable(
                message=f"GeoIP2 database error: {str(e)}",
                error_code="GEOIP2_ERROR",
            )

        country = CountryData(
            iso_code=response.country.iso_code,
            name=response.country.name,
        )
        log.debug("country_found", country=country.iso_code)
        return OperationResult.success(
            data=country, message="IP country found successfully"
        )

    def healthcheck(self) -> OperationResult:
        """Check if the MaxMind database is accessible.

        A lookup that reaches the database counts as healthy even when the
        test address is not covered.

        Returns:
            OperationResult indicating health status
        """
        log = self._logger.bind(operation="healthcheck")

        result = self.country(HEALTHCHECK_IP)

        if result.is_success or result.error_code in ("IP_NOT_FOUND", "IP_NOT_COVERED"):
            log.debug("healthcheck_success")
            return OperationResult.success(
                data={"status": "healthy", "test_ip": HEALTHCHECK_IP},
                message="MaxMind database is accessible",
            )

        log.error("healthcheck_failed", error=result.message)
        return OperationResult.unavailable(
            message=f"MaxMind healthcheck failed: {result.message}",
            error_code="HEALTHCHECK_FAILED",
        )

    def close(self) -> None:
        """Close the database reader if it was opened."""
        with self._lock:
            if self._reader is not None:
                self._reader.close()
                self._reader = None
                self._logger.info("database_closed")
