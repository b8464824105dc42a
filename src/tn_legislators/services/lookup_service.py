"""Address-to-legislator lookup service.

Stitches the pipeline stages together and converts every stage failure into
a tagged LookupFailure. Nothing raised by a provider escapes this module's
public functions; mapping failure kinds to user messages is left to callers.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from loguru import logger

from tn_legislators.core.logging import redact_address
from tn_legislators.lib.contact_card import build_contact_summary, build_qr_image_url
from tn_legislators.lib.directory import LegislatorRecord, TNLegislatureDirectory
from tn_legislators.lib.districts import (
    CensusDistrictResolver,
    DistrictInfo,
    DistrictProviderError,
    DistrictResolutionError,
)
from tn_legislators.lib.geocoder import (
    AddressInput,
    AddressValidationError,
    BaseGeocoder,
    GeocodingProviderError,
    GeocodingResult,
    build_query,
    get_configured_geocoder,
    is_tennessee_state,
    validate_address,
)
from tn_legislators.lib.matcher import MatchResult, match_legislators

if TYPE_CHECKING:
    from tn_legislators.core.config import Settings


class FailureKind(StrEnum):
    """Why a lookup stage failed."""

    VALIDATION = "validation"
    NETWORK = "network"
    NOT_FOUND = "not_found"
    NOT_IN_TENNESSEE = "not_in_tennessee"
    DISTRICTS_UNDETERMINED = "districts_undetermined"


@dataclass(frozen=True)
class LookupFailure:
    """A failed lookup stage.

    Attributes:
        kind: Failure category.
        detail: Diagnostic detail (validation message or provider error).
        county: Containing county, for DISTRICTS_UNDETERMINED when known.
    """

    kind: FailureKind
    detail: str = ""
    county: str | None = None


@dataclass(frozen=True)
class LookupSuccess:
    """A validated address with its geocoding result."""

    address: AddressInput
    result: GeocodingResult


@dataclass(frozen=True)
class LegislatorLookup:
    """Matched legislators with the rendered contact card."""

    match: MatchResult
    contact_summary: str | None = None
    qr_code_url: str | None = None


def build_district_resolver(settings: Settings) -> CensusDistrictResolver:
    """Create the district resolver from settings."""
    return CensusDistrictResolver(
        timeout=settings.district_timeout,
        benchmark=settings.census_benchmark,
        vintage=settings.census_vintage,
        relay_prefix=settings.relay_prefix,
    )


def build_directory(settings: Settings) -> TNLegislatureDirectory:
    """Create the legislator directory client from settings."""
    return TNLegislatureDirectory(
        senate_url=settings.directory_senate_url,
        house_url=settings.directory_house_url,
        image_base_url=settings.directory_image_base_url,
        timeout=settings.directory_timeout,
        relay_prefix=settings.relay_prefix,
    )


async def resolve_districts(
    resolver: CensusDistrictResolver,
    latitude: float,
    longitude: float,
) -> DistrictInfo | LookupFailure:
    """Resolve districts for a point, returning a tagged failure instead of raising."""
    try:
        return await resolver.resolve(latitude, longitude)
    except DistrictProviderError as e:
        logger.warning(f"District lookup failed: {e}")
        return LookupFailure(FailureKind.NETWORK, detail=str(e))
    except DistrictResolutionError as e:
        return LookupFailure(FailureKind.DISTRICTS_UNDETERMINED, detail=str(e), county=e.county)


async def geocode_address(
    street: str,
    zip_code: str,
    *,
    settings: Settings,
    geocoder: BaseGeocoder | None = None,
    resolver: CensusDistrictResolver | None = None,
) -> LookupSuccess | LookupFailure:
    """Validate, geocode and resolve districts for a submitted address.

    Args:
        street: Raw street address.
        zip_code: Raw ZIP code.
        settings: Application settings.
        geocoder: Geocoder override; defaults to the configured provider.
        resolver: District resolver override.

    Returns:
        LookupSuccess, or LookupFailure describing the failed stage.
    """
    try:
        address = validate_address(street, zip_code)
    except AddressValidationError as e:
        return LookupFailure(FailureKind.VALIDATION, detail=str(e))

    if geocoder is None:
        try:
            geocoder = get_configured_geocoder(settings)
        except ValueError as e:
            logger.error(f"Geocoder misconfigured: {e}")
            return LookupFailure(FailureKind.NETWORK, detail=str(e))

    query = build_query(address)
    logger.debug(f"Geocoding {redact_address(query)} with {geocoder.provider_name}")
    try:
        match = await geocoder.geocode(query)
    except GeocodingProviderError as e:
        return LookupFailure(FailureKind.NETWORK, detail=str(e))
    except ValueError as e:
        logger.warning(f"Geocoder {geocoder.provider_name} returned invalid coordinates: {e}")
        return LookupFailure(FailureKind.NETWORK, detail=str(e))

    if match is None:
        logger.info(f"Geocoder {geocoder.provider_name} found no match for {redact_address(query)}")
        return LookupFailure(FailureKind.NOT_FOUND)

    if match.state is not None and not is_tennessee_state(match.state):
        logger.info("Geocoder {} matched outside Tennessee ({})", geocoder.provider_name, match.state)
        return LookupFailure(FailureKind.NOT_IN_TENNESSEE, detail=match.state)

    resolver = resolver or build_district_resolver(settings)
    districts = await resolve_districts(resolver, match.latitude, match.longitude)

    if isinstance(districts, LookupFailure):
        if not settings.demo_mode:
            return districts
        logger.warning("Demo mode: continuing without districts ({})", districts.kind)
        districts = None

    return LookupSuccess(
        address=address,
        result=GeocodingResult(
            latitude=match.latitude,
            longitude=match.longitude,
            formatted_address=match.matched_address,
            district=districts,
        ),
    )


async def fetch_legislators(
    *,
    settings: Settings,
    directory: TNLegislatureDirectory | None = None,
) -> list[LegislatorRecord]:
    """Fetch all legislators; a failed chamber contributes no records."""
    directory = directory or build_directory(settings)
    return await directory.fetch_all()


async def find_legislators(
    address: AddressInput,
    result: GeocodingResult,
    *,
    settings: Settings,
    directory: TNLegislatureDirectory | None = None,
    rng: random.Random | None = None,
) -> LegislatorLookup:
    """Match legislators for a geocoded address and build the contact card.

    Args:
        address: The validated address the user submitted.
        result: Geocoding result from :func:`geocode_address`.
        settings: Application settings.
        directory: Directory client override.
        rng: Random source for demo-mode placeholders.

    Returns:
        LegislatorLookup; ``match.is_empty`` when no legislator was found.
    """
    records = await fetch_legislators(settings=settings, directory=directory)
    if not records:
        logger.warning("No legislator data available")

    match = match_legislators(
        records,
        result.formatted_address or "",
        result.district,
        allow_random_fallback=settings.demo_mode,
        rng=rng,
    )

    if match.is_empty:
        logger.info("No legislators matched for districts {}", result.district)
        return LegislatorLookup(match=match)

    logger.info(
        "Matched senator={} representative={}",
        match.senator.name if match.senator else None,
        match.representative.name if match.representative else None,
    )
    display_address = f"{address.street}, {address.zip_code}"
    summary = build_contact_summary(match, display_address)
    return LegislatorLookup(
        match=match,
        contact_summary=summary,
        qr_code_url=build_qr_image_url(summary, settings.qr_endpoint, settings.qr_size, settings.qr_margin),
    )
