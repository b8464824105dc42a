"""Unit tests for Nominatim geocoder provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from tn_legislators.lib.geocoder.base import GeocodingProviderError
from tn_legislators.lib.geocoder.nominatim import NominatimGeocoder


class TestNominatimResponseParsing:
    """Tests for Nominatim API response parsing."""

    def setup_method(self) -> None:
        self.geocoder = NominatimGeocoder()

    def test_successful_match(self) -> None:
        data = [
            {
                "lat": "36.1627",
                "lon": "-86.7816",
                "display_name": "123, Main Street, Nashville, Davidson County, Tennessee, 37203, United States",
                "address": {"state": "Tennessee", "postcode": "37203"},
            }
        ]
        result = self.geocoder._parse_response(data)
        assert result is not None
        assert result.latitude == 36.1627
        assert result.longitude == -86.7816
        assert result.state == "Tennessee"
        assert result.matched_address.startswith("123, Main Street")

    def test_no_results(self) -> None:
        assert self.geocoder._parse_response([]) is None

    def test_missing_lat_raises(self) -> None:
        with pytest.raises(GeocodingProviderError, match="nominatim"):
            self.geocoder._parse_response([{"lon": "-86.0"}])

    def test_malformed_coords_raises(self) -> None:
        with pytest.raises(GeocodingProviderError, match="nominatim"):
            self.geocoder._parse_response([{"lat": "not-a-number", "lon": "-86.0"}])

    def test_error_body_raises(self) -> None:
        with pytest.raises(GeocodingProviderError, match="Unable to geocode"):
            self.geocoder._parse_response({"error": "Unable to geocode"})

    @pytest.mark.parametrize("data", [{"results": []}, "oops", ["not-a-dict"]])
    def test_unexpected_shapes_raise(self, data: object) -> None:
        with pytest.raises(GeocodingProviderError, match="nominatim"):
            self.geocoder._parse_response(data)


class TestNominatimRequests:
    """Tests for Nominatim HTTP behavior."""

    @pytest.mark.asyncio
    async def test_sends_user_agent_and_email(self) -> None:
        geocoder = NominatimGeocoder(email="ops@example.com")
        response = MagicMock()
        response.json.return_value = []
        response.raise_for_status = MagicMock()

        with patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=response) as mock_get:
            assert await geocoder.geocode("123 Main St, 37203, Tennessee, USA") is None

        kwargs = mock_get.call_args.kwargs
        assert kwargs["params"]["email"] == "ops@example.com"
        assert kwargs["params"]["limit"] == 1
        assert kwargs["headers"]["User-Agent"] == "tn-legislators/1.0"

    @pytest.mark.asyncio
    async def test_http_error_raises_provider_error(self) -> None:
        geocoder = NominatimGeocoder()
        mock_response = httpx.Response(status_code=429, request=httpx.Request("GET", "http://test"))
        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock) as mock_get,
            pytest.raises(GeocodingProviderError) as exc_info,
        ):
            mock_get.side_effect = httpx.HTTPStatusError(
                "Too many requests", request=mock_response.request, response=mock_response
            )
            await geocoder.geocode("123 Main St")

        assert exc_info.value.provider_name == "nominatim"
        assert exc_info.value.status_code == 429
