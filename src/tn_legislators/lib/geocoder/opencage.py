"""OpenCage geocoder provider.

Uses the OpenCage Geocoding API (https://opencagedata.com/api). Requires an
API key.
"""

from loguru import logger

from tn_legislators.lib.geocoder.base import BaseGeocoder, GeocodeMatch, GeocodingProviderError

OPENCAGE_API_URL = "https://api.opencagedata.com/geocode/v1/json"
DEFAULT_TIMEOUT = 10.0


class OpenCageGeocoder(BaseGeocoder):
    """OpenCage geocoder provider."""

    def __init__(self, api_key: str = "", timeout: float = DEFAULT_TIMEOUT, relay_prefix: str = "") -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._relay_prefix = relay_prefix

    @property
    def provider_name(self) -> str:
        return "opencage"

    @property
    def requires_api_key(self) -> bool:
        return True

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, address: str) -> GeocodeMatch | None:
        """Geocode an address using the OpenCage API.

        Raises:
            GeocodingProviderError: On missing API key, transport or service errors.
        """
        if not self._api_key:
            raise GeocodingProviderError("opencage", "API key is not configured")

        params: dict[str, str | int] = {
            "q": address,
            "key": self._api_key,
            "countrycode": "us",
            "limit": 1,
            "no_annotations": 1,
        }
        data = await self._get_json(
            OPENCAGE_API_URL,
            params,
            timeout=self._timeout,
            relay_prefix=self._relay_prefix,
        )
        return self._parse_response(data)

    def _parse_response(self, data: dict) -> GeocodeMatch | None:
        """Parse an OpenCage response into a GeocodeMatch."""
        if not isinstance(data, dict):
            raise GeocodingProviderError("opencage", f"Unexpected response type: {type(data).__name__}")

        results = data.get("results") or []
        if not isinstance(results, list):
            raise GeocodingProviderError("opencage", f"Unexpected results type: {type(results).__name__}")
        if not results:
            return None

        best = results[0]
        if not isinstance(best, dict):
            raise GeocodingProviderError("opencage", f"Unexpected result type: {type(best).__name__}")
        try:
            geometry = best["geometry"]
            lat = float(geometry["lat"])
            lng = float(geometry["lng"])
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Failed to parse OpenCage response: {e}")
            raise GeocodingProviderError("opencage", f"Failed to parse response: {e}") from e

        components = best.get("components") or {}

        return GeocodeMatch(
            latitude=lat,
            longitude=lng,
            matched_address=best.get("formatted"),
            state=components.get("state_code") or components.get("state"),
        )
