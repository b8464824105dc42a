"""Lookup API endpoints for the address step and the legislators step."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from loguru import logger
from pydantic import ValidationError

from tn_legislators.core.config import Settings, get_settings
from tn_legislators.lib.contact_card import mailto_uri, tel_uri
from tn_legislators.schemas.lookup import (
    AddressInputSchema,
    AddressLookupRequest,
    GeocodingResultSchema,
    LegislatorLookupResponse,
    LegislatorResponse,
    LookupContext,
)
from tn_legislators.services.lookup_service import FailureKind, LookupFailure, find_legislators, geocode_address

lookup_router = APIRouter(prefix="/lookup", tags=["lookup"])

FAILURE_MESSAGES: dict[FailureKind, str] = {
    FailureKind.NETWORK: "Error finding your address. Please try again.",
    FailureKind.NOT_FOUND: "Address not found. Please check your address and ZIP code.",
    FailureKind.NOT_IN_TENNESSEE: "The address must be in Tennessee.",
    FailureKind.DISTRICTS_UNDETERMINED: "We found your address but could not determine your legislative districts.",
}

_FAILURE_STATUS: dict[FailureKind, int] = {
    FailureKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    FailureKind.NETWORK: status.HTTP_502_BAD_GATEWAY,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.NOT_IN_TENNESSEE: status.HTTP_404_NOT_FOUND,
    FailureKind.DISTRICTS_UNDETERMINED: status.HTTP_404_NOT_FOUND,
}

MISSING_CONTEXT_MESSAGE = "Please enter your address first"

NO_LEGISLATORS_MESSAGE = (
    "Unable to find legislators for your address. "
    "Please verify your address or contact the TN Secretary of State for assistance."
)


def failure_message(failure: LookupFailure) -> str:
    """User-facing message for a lookup failure."""
    if failure.kind == FailureKind.VALIDATION:
        return failure.detail
    message = FAILURE_MESSAGES[failure.kind]
    if failure.kind == FailureKind.DISTRICTS_UNDETERMINED and failure.county:
        message = f"{message} (County: {failure.county})"
    return message


@lookup_router.post(
    "/address",
    response_model=LookupContext,
)
async def lookup_address(
    body: AddressLookupRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> LookupContext:
    """Validate and geocode an address, returning the context for the legislators step."""
    outcome = await geocode_address(body.street, body.zip_code, settings=settings)

    if isinstance(outcome, LookupFailure):
        raise HTTPException(
            status_code=_FAILURE_STATUS[outcome.kind],
            detail=failure_message(outcome),
        )

    return LookupContext(
        address=AddressInputSchema.model_validate(outcome.address),
        geocoding=GeocodingResultSchema.model_validate(outcome.result),
    )


@lookup_router.post(
    "/legislators",
    response_model=LegislatorLookupResponse,
)
async def lookup_legislators(
    payload: Any = Body(default=None),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> LegislatorLookupResponse:
    """Match legislators for a context produced by ``POST /lookup/address``.

    A missing or malformed context is rejected with the same message.
    """
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=MISSING_CONTEXT_MESSAGE,
        )
    try:
        context = LookupContext.model_validate(payload)
    except ValidationError as e:
        logger.info(f"Rejected lookup context with {e.error_count()} validation error(s)")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=MISSING_CONTEXT_MESSAGE,
        ) from e

    lookup = await find_legislators(
        context.address.to_input(),
        context.geocoding.to_result(),
        settings=settings,
    )

    if lookup.match.is_empty:
        return LegislatorLookupResponse(found=False, message=NO_LEGISLATORS_MESSAGE)

    senator = lookup.match.senator
    representative = lookup.match.representative
    return LegislatorLookupResponse(
        senator=LegislatorResponse.model_validate(senator) if senator else None,
        representative=LegislatorResponse.model_validate(representative) if representative else None,
        found=True,
        contact_summary=lookup.contact_summary,
        qr_code_url=lookup.qr_code_url,
        senator_tel=tel_uri(senator.contact_info.phone) if senator else None,
        senator_mailto=mailto_uri(senator.contact_info.email) if senator else None,
        representative_tel=tel_uri(representative.contact_info.phone) if representative else None,
        representative_mailto=mailto_uri(representative.contact_info.email) if representative else None,
    )
