"""Abstract base geocoder interface for pluggable provider support."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from tn_legislators.lib.districts.base import DistrictInfo
from tn_legislators.lib.relay import relay_target


@dataclass(frozen=True)
class GeocodeMatch:
    """First candidate returned by a geocoding provider."""

    latitude: float
    longitude: float
    matched_address: str | None = None
    state: str | None = None

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)


@dataclass(frozen=True)
class GeocodingResult:
    """A geocoded Tennessee address with its legislative districts."""

    latitude: float
    longitude: float
    formatted_address: str | None = None
    district: DistrictInfo | None = None


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no match (which returns None).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseGeocoder(ABC):
    """Abstract geocoder interface. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @property
    def requires_api_key(self) -> bool:
        """Whether this provider requires an API key to function."""
        return False

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def geocode(self, address: str) -> GeocodeMatch | None:
        """Geocode a single-line address, keeping only the first candidate.

        Args:
            address: Full single-line address string.

        Returns:
            GeocodeMatch or None if the provider found no candidates.

        Raises:
            GeocodingProviderError: On transport, HTTP or parse errors.
        """

    async def _get_json(
        self,
        url: str,
        params: dict[str, Any],
        *,
        timeout: float,
        relay_prefix: str = "",
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a provider endpoint and decode the JSON body.

        Query parameters are folded into the URL when a relay prefix is set.
        Log lines never include the query, which carries the user's address.

        Raises:
            GeocodingProviderError: On timeout, HTTP status, connection or
                JSON decode errors.
        """
        name = self.provider_name
        target, query = relay_target(url, params, relay_prefix)

        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.get(target, params=query, headers=headers)
                response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as e:
            logger.warning(f"{name} geocoder timeout")
            raise GeocodingProviderError(name, "Geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"{name} geocoder HTTP error {status_code}")
            raise GeocodingProviderError(name, f"Provider returned HTTP {status_code}", status_code=status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"{name} geocoder connection error: {type(e).__name__}")
            raise GeocodingProviderError(name, "Connection to geocoding provider failed") from e
        except ValueError as e:
            logger.warning(f"{name} geocoder returned non-JSON response")
            raise GeocodingProviderError(name, "Invalid JSON response") from e
