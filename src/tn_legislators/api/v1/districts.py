"""District lookup API endpoint for a coordinate pair."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tn_legislators.core.config import Settings, get_settings
from tn_legislators.lib.geocoder import validate_tennessee_coordinates
from tn_legislators.schemas.lookup import DistrictInfoSchema, DistrictLookupResponse
from tn_legislators.services.lookup_service import (
    FailureKind,
    LookupFailure,
    build_district_resolver,
    resolve_districts,
)

districts_router = APIRouter(prefix="/districts", tags=["districts"])


@districts_router.get(
    "",
    response_model=DistrictLookupResponse,
)
async def lookup_districts(
    lat: float = Query(..., description="WGS84 latitude"),  # noqa: B008
    lng: float = Query(..., description="WGS84 longitude"),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> DistrictLookupResponse:
    """Look up state senate and house districts for a point in Tennessee."""
    try:
        validate_tennessee_coordinates(lat, lng)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    districts = await resolve_districts(build_district_resolver(settings), lat, lng)

    if isinstance(districts, LookupFailure):
        if districts.kind == FailureKind.NETWORK:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="District lookup provider is temporarily unavailable. Please retry later.",
            )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(districts.detail),
        )

    return DistrictLookupResponse(
        latitude=lat,
        longitude=lng,
        district=DistrictInfoSchema.model_validate(districts),
    )
