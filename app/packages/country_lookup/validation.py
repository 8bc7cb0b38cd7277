"""Syntactic validation of IP address input."""

from typing import Optional

import structlog
from pydantic import ValidationError

from infrastructure.operations import OperationResult
from packages.country_lookup.errors import INVALID_IP_ADDRESS
from packages.country_lookup.schemas import Address

logger = structlog.get_logger()


class AddressValidator:
    """Turns raw input into an Address.

    Any IPv4 or IPv6 literal is accepted, including private, reserved and
    loopback ranges. No side effects.
    """

    def validate(self, raw: Optional[str]) -> OperationResult:
        """Validate a raw IP string.

        Args:
            raw: Candidate address, possibly absent

        Returns:
            OperationResult with an Address, or INVALID_INPUT
        """
        if not raw:
            return OperationResult.invalid_input(
                message="IP address is missing",
                error_code=INVALID_IP_ADDRESS,
            )

        try:
            address = Address(value=raw)
        except ValidationError:
            logger.debug("invalid_ip_format", ip_address=raw)
            return OperationResult.invalid_input(
                message=f"Invalid IP address format: {raw}",
                error_code=INVALID_IP_ADDRESS,
            )

        return OperationResult.success(data=address, message="IP address is valid")
