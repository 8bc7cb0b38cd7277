"""FastAPI routes for the country lookup package."""

from typing import Optional

import structlog
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from infrastructure.operations import OperationStatus
from infrastructure.services import LookupServiceDep
from packages.country_lookup.errors import INVALID_IP_MESSAGE, UNRESOLVED_IP_MESSAGE
from packages.country_lookup.schemas import CountryResponse

logger = structlog.get_logger()
router = APIRouter(tags=["country"])


@router.get(
    "/",
    response_model=CountryResponse,
    summary="Country for IP Address",
    description="Resolve the country of an IPv4 or IPv6 address",
    responses={400: {"content": {"text/plain": {}}}},
)
def get_country(
    service: LookupServiceDep,
    ip: Optional[str] = Query(None, description="IPv4 or IPv6 address"),
) -> Response:
    """Resolve the country of an IP address via HTTP GET.

    Args:
        service: Injected LookupService
        ip: IP address to resolve

    Returns:
        200 JSON with the country, or 400 plain text for invalid input and
        for addresses that cannot be resolved
    """
    log = logger.bind(ip_address=ip, endpoint="/")
    log.info("country_request")

    result = service.lookup(ip)

    if result.is_success:
        outcome = result.data
        log.info(
            "country_success",
            provenance=outcome.provenance.value,
            country=outcome.record.iso_code,
        )
        body = CountryResponse(ip=outcome.address.value, country=outcome.record)
        return JSONResponse(content=body.model_dump())

    if result.status == OperationStatus.INVALID_INPUT:
        log.warning("country_invalid_ip", error=result.message)
        return PlainTextResponse(INVALID_IP_MESSAGE, status_code=400)

    if result.status == OperationStatus.UNAVAILABLE:
        log.error("country_database_unavailable", error=result.message)
    else:
        log.warning("country_not_found", error=result.message)
    return PlainTextResponse(UNRESOLVED_IP_MESSAGE, status_code=400)
