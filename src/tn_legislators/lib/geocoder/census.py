"""US Census Bureau geocoder provider.

Uses the Census Geocoding API onelineaddress endpoint
(https://geocoding.geo.census.gov/geocoder/locations/onelineaddress). Only the
first entry of ``result.addressMatches`` is used; candidates are not ranked.
"""

from loguru import logger

from tn_legislators.lib.geocoder.base import BaseGeocoder, GeocodeMatch, GeocodingProviderError

CENSUS_API_URL = "https://geocoding.geo.census.gov/geocoder/locations/onelineaddress"
DEFAULT_TIMEOUT = 30.0


class CensusGeocoder(BaseGeocoder):
    """Census Bureau onelineaddress geocoder. Free, keyless, US-only."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        benchmark: str = "Public_AR_Current",
        relay_prefix: str = "",
    ) -> None:
        self._timeout = timeout
        self._benchmark = benchmark
        self._relay_prefix = relay_prefix

    @property
    def provider_name(self) -> str:
        return "census"

    async def geocode(self, address: str) -> GeocodeMatch | None:
        """Geocode a single-line address.

        Args:
            address: Query such as ``"123 Main St, 37203, Tennessee, USA"``.

        Returns:
            GeocodeMatch, or None when the Census returned no address matches.

        Raises:
            GeocodingProviderError: On transport, HTTP or parse errors.
        """
        data = await self._get_json(
            CENSUS_API_URL,
            {"address": address, "benchmark": self._benchmark, "format": "json"},
            timeout=self._timeout,
            relay_prefix=self._relay_prefix,
        )
        return self._parse_response(data)

    def _parse_response(self, data: dict) -> GeocodeMatch | None:
        """Read coordinates, matched address and state from the first address match.

        ``coordinates.x`` is longitude and ``coordinates.y`` latitude. A match
        without both coordinates counts as no match.
        """
        try:
            matches = (data.get("result") or {}).get("addressMatches") or []
            if not matches:
                return None

            first = matches[0]
            coords = first.get("coordinates") or {}
            if coords.get("x") is None or coords.get("y") is None:
                return None

            components = first.get("addressComponents") or {}
            return GeocodeMatch(
                latitude=float(coords["y"]),
                longitude=float(coords["x"]),
                matched_address=first.get("matchedAddress"),
                state=components.get("state"),
            )
        except (AttributeError, ValueError, TypeError) as e:
            logger.warning(f"Failed to parse Census geocoder response: {e}")
            raise GeocodingProviderError("census", f"Failed to parse response: {e}") from e
