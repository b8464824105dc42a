"""US Census Bureau geographies lookup for state legislative districts.

Uses the Census Geocoding API geographies endpoint
(https://geocoding.geo.census.gov/geocoder/geographies/coordinates) with
``layers=all``. All spatial logic is delegated to the service; this module
only reads the returned layer attributes.
"""

import httpx
from loguru import logger

from tn_legislators.lib.districts.base import DistrictInfo, DistrictProviderError, DistrictResolutionError
from tn_legislators.lib.districts.extract import LayerKind, extract_county, extract_district
from tn_legislators.lib.relay import relay_target

CENSUS_GEOGRAPHIES_URL = "https://geocoding.geo.census.gov/geocoder/geographies/coordinates"
DEFAULT_TIMEOUT = 30.0


class CensusDistrictResolver:
    """Resolve senate and house districts for a point via Census geographies."""

    provider_name = "census"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        benchmark: str = "Public_AR_Current",
        vintage: str = "Current_Current",
        relay_prefix: str = "",
    ) -> None:
        self._timeout = timeout
        self._benchmark = benchmark
        self._vintage = vintage
        self._relay_prefix = relay_prefix

    async def resolve(self, latitude: float, longitude: float) -> DistrictInfo:
        """Resolve legislative districts for a coordinate pair.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            DistrictInfo with at least one chamber populated.

        Raises:
            DistrictProviderError: On transport or service errors.
            DistrictResolutionError: If neither chamber could be determined.
        """
        params = {
            "x": longitude,
            "y": latitude,
            "benchmark": self._benchmark,
            "vintage": self._vintage,
            "layers": "all",
            "format": "json",
        }
        url, query = relay_target(CENSUS_GEOGRAPHIES_URL, params, self._relay_prefix)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=query)
                response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Census geographies timeout")
            raise DistrictProviderError("census", "District lookup timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Census geographies HTTP error {e.response.status_code}")
            raise DistrictProviderError(
                "census", f"Provider returned HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Census geographies request failed: {e}")
            raise DistrictProviderError("census", "Connection to geography provider failed") from e
        except ValueError as e:
            logger.warning("Census geographies returned non-JSON response")
            raise DistrictProviderError("census", "Invalid JSON response") from e

        return self._parse_response(data)

    def _parse_response(self, data: dict) -> DistrictInfo:
        """Parse a geographies response into DistrictInfo.

        Raises:
            DistrictResolutionError: If neither chamber resolved.
        """
        result = data.get("result") if isinstance(data, dict) else None
        geographies = result.get("geographies") if isinstance(result, dict) else None
        if not isinstance(geographies, dict):
            geographies = {}

        info = DistrictInfo(
            senate=extract_district(geographies, LayerKind.UPPER),
            house=extract_district(geographies, LayerKind.LOWER),
        )
        if info.is_empty:
            county = extract_county(geographies)
            logger.info("No legislative districts in geographies response (county={})", county)
            raise DistrictResolutionError(county=county)

        logger.debug("Resolved districts senate={} house={}", info.senate, info.house)
        return info
