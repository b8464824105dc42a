"""Legislator directory API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tn_legislators.core.config import Settings, get_settings
from tn_legislators.lib.directory import Chamber, find_legislator_by_id
from tn_legislators.schemas.lookup import LegislatorResponse
from tn_legislators.services.lookup_service import fetch_legislators

legislators_router = APIRouter(prefix="/legislators", tags=["legislators"])


@legislators_router.get(
    "",
    response_model=list[LegislatorResponse],
)
async def list_legislators(
    chamber: Chamber | None = Query(None, description="Filter by chamber (senate or house)"),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[LegislatorResponse]:
    """List legislators scraped from the directory pages."""
    records = await fetch_legislators(settings=settings)
    if chamber is not None:
        records = [r for r in records if r.chamber == chamber]
    return [LegislatorResponse.model_validate(r) for r in records]


@legislators_router.get(
    "/{legislator_id}",
    response_model=LegislatorResponse,
)
async def get_legislator(
    legislator_id: str,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> LegislatorResponse:
    """Get a single legislator by directory id (e.g. ``senate-3``)."""
    records = await fetch_legislators(settings=settings)
    record = find_legislator_by_id(records, legislator_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Legislator {legislator_id!r} not found.",
        )
    return LegislatorResponse.model_validate(record)
