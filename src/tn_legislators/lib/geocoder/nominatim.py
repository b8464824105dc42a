"""OpenStreetMap Nominatim geocoder provider.

Uses the Nominatim search API (https://nominatim.org/release-docs/develop/api/Search/).
The public instance allows one request per second and requires an
identifying User-Agent; an operator email is sent when configured.
"""

from loguru import logger

from tn_legislators.lib.geocoder.base import BaseGeocoder, GeocodeMatch, GeocodingProviderError

NOMINATIM_API_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "tn-legislators/1.0"


class NominatimGeocoder(BaseGeocoder):
    """Nominatim geocoder restricted to US results."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        email: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        relay_prefix: str = "",
    ) -> None:
        self._timeout = timeout
        self._email = email
        self._user_agent = user_agent
        self._relay_prefix = relay_prefix

    @property
    def provider_name(self) -> str:
        return "nominatim"

    async def geocode(self, address: str) -> GeocodeMatch | None:
        """Geocode a single-line address, asking for one US result with address details.

        Raises:
            GeocodingProviderError: On transport, HTTP or parse errors.
        """
        params: dict[str, str | int] = {
            "q": address,
            "format": "json",
            "limit": 1,
            "addressdetails": 1,
            "countrycodes": "us",
        }
        if self._email:
            params["email"] = self._email

        data = await self._get_json(
            NOMINATIM_API_URL,
            params,
            timeout=self._timeout,
            relay_prefix=self._relay_prefix,
            headers={"User-Agent": self._user_agent},
        )
        return self._parse_response(data)

    def _parse_response(self, data: list[dict]) -> GeocodeMatch | None:
        """Build a GeocodeMatch from the first search result.

        ``address.state`` is the full state name (e.g. "Tennessee").
        """
        if isinstance(data, dict) and data.get("error"):
            logger.warning(f"Nominatim returned an error body: {data['error']}")
            raise GeocodingProviderError("nominatim", f"Provider error: {data['error']}")
        if not isinstance(data, list):
            raise GeocodingProviderError("nominatim", f"Unexpected response type: {type(data).__name__}")
        if not data:
            return None

        first = data[0]
        if not isinstance(first, dict):
            raise GeocodingProviderError("nominatim", f"Unexpected result type: {type(first).__name__}")
        try:
            lat = float(first["lat"])
            lng = float(first["lon"])
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Failed to parse Nominatim response: {e}")
            raise GeocodingProviderError("nominatim", f"Failed to parse response: {e}") from e

        details = first.get("address") or {}
        return GeocodeMatch(
            latitude=lat,
            longitude=lng,
            matched_address=first.get("display_name"),
            state=details.get("state"),
        )
