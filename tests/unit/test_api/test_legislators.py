"""Unit tests for the legislator directory endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tn_legislators.api.v1.legislators import legislators_router
from tn_legislators.core.config import get_settings


@pytest.fixture
def app(settings) -> FastAPI:
    """Create a minimal FastAPI app with the legislators router."""
    app = FastAPI()
    app.include_router(legislators_router, prefix="/api/v1")
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def client(app: FastAPI) -> AsyncClient:
    """Create an async test client."""
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def mock_fetch(records):
    """Patch the directory fetch to return the shared records."""
    with patch(
        "tn_legislators.api.v1.legislators.fetch_legislators", new_callable=AsyncMock, return_value=records
    ) as mock:
        yield mock


class TestListLegislators:
    """Tests for GET /api/v1/legislators."""

    @pytest.mark.asyncio
    async def test_lists_all(self, client, mock_fetch) -> None:
        resp = await client.get("/api/v1/legislators")
        assert resp.status_code == 200
        assert [item["id"] for item in resp.json()] == ["senate-0", "senate-1", "house-0", "house-1"]

    @pytest.mark.asyncio
    async def test_filter_by_chamber(self, client, mock_fetch) -> None:
        resp = await client.get("/api/v1/legislators", params={"chamber": "house"})
        assert resp.status_code == 200
        data = resp.json()
        assert {item["chamber"] for item in data} == {"house"}
        assert data[1]["contact_info"]["email"] == "wright@example.gov"

    @pytest.mark.asyncio
    async def test_invalid_chamber(self, client, mock_fetch) -> None:
        resp = await client.get("/api/v1/legislators", params={"chamber": "council"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_directory(self, client) -> None:
        with patch("tn_legislators.api.v1.legislators.fetch_legislators", new_callable=AsyncMock, return_value=[]):
            resp = await client.get("/api/v1/legislators")
        assert resp.status_code == 200
        assert resp.json() == []


class TestGetLegislator:
    """Tests for GET /api/v1/legislators/{legislator_id}."""

    @pytest.mark.asyncio
    async def test_found(self, client, mock_fetch) -> None:
        resp = await client.get("/api/v1/legislators/senate-1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Becky Massey"
        assert data["party"] == "Republican"

    @pytest.mark.asyncio
    async def test_not_found(self, client, mock_fetch) -> None:
        resp = await client.get("/api/v1/legislators/senate-99")
        assert resp.status_code == 404
