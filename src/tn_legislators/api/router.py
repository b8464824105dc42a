"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from tn_legislators.api.middleware import setup_cors
from tn_legislators.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from tn_legislators.api.v1.districts import districts_router
    from tn_legislators.api.v1.legislators import legislators_router
    from tn_legislators.api.v1.lookup import lookup_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(lookup_router)
    root_router.include_router(districts_router)
    root_router.include_router(legislators_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
