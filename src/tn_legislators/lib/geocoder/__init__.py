"""Geocoder library: pluggable address geocoding for Tennessee addresses.

Public API:
    - AddressInput: Validated street + ZIP pair
    - AddressValidationError: User-facing validation failure
    - validate_address: Validate raw street/ZIP input
    - build_query: Single-line geocoder query for an address
    - is_tennessee_state: Provider state check
    - validate_tennessee_coordinates: Validate coords are in Tennessee
    - BaseGeocoder: Abstract provider interface
    - GeocodeMatch: First provider candidate
    - GeocodingResult: Geocoded address with districts
    - GeocodingProviderError: Transport/service error
    - CensusGeocoder: US Census Bureau provider
    - NominatimGeocoder: OpenStreetMap Nominatim provider
    - OpenCageGeocoder: OpenCage provider
    - DemoGeocoder: Offline demo provider
    - get_geocoder: Provider factory/registry
    - get_configured_geocoder: Provider built from application settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tn_legislators.lib.geocoder.address import (
    AddressInput,
    AddressValidationError,
    build_query,
    is_tennessee_state,
    validate_address,
    validate_tennessee_coordinates,
)
from tn_legislators.lib.geocoder.base import BaseGeocoder, GeocodeMatch, GeocodingProviderError, GeocodingResult
from tn_legislators.lib.geocoder.census import CensusGeocoder
from tn_legislators.lib.geocoder.demo import DemoGeocoder
from tn_legislators.lib.geocoder.nominatim import NominatimGeocoder
from tn_legislators.lib.geocoder.opencage import OpenCageGeocoder

if TYPE_CHECKING:
    from tn_legislators.core.config import Settings

# Provider registry
_PROVIDERS: dict[str, type[BaseGeocoder]] = {
    "census": CensusGeocoder,
    "nominatim": NominatimGeocoder,
    "opencage": OpenCageGeocoder,
    "demo": DemoGeocoder,
}


def get_available_providers() -> list[str]:
    """Return the names of all registered geocoder providers.

    Returns:
        Sorted list of provider name strings.
    """
    return sorted(_PROVIDERS.keys())


def get_geocoder(provider: str = "census", **kwargs: Any) -> BaseGeocoder:
    """Get a geocoder instance by provider name.

    Args:
        provider: Provider name (e.g., "census").
        **kwargs: Additional arguments forwarded to the provider constructor
            (e.g., ``timeout=2.0``).

    Returns:
        An instance of the requested geocoder provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(provider)
    if cls is None:
        msg = f"Unknown geocoder provider: {provider!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


def get_configured_geocoder(settings: Settings) -> BaseGeocoder:
    """Build the geocoder selected by ``settings.geocoder_provider``.

    Args:
        settings: Application settings.

    Returns:
        Configured BaseGeocoder instance.

    Raises:
        ValueError: If the provider is unknown or missing required configuration.
    """
    provider_kwargs: dict[str, dict[str, Any]] = {
        "census": {
            "timeout": settings.geocoder_census_timeout,
            "benchmark": settings.census_benchmark,
            "relay_prefix": settings.relay_prefix,
        },
        "nominatim": {
            "timeout": settings.geocoder_nominatim_timeout,
            "email": settings.geocoder_nominatim_email,
            "relay_prefix": settings.relay_prefix,
        },
        "opencage": {
            "api_key": settings.geocoder_opencage_api_key or "",
            "timeout": settings.geocoder_opencage_timeout,
            "relay_prefix": settings.relay_prefix,
        },
        "demo": {},
    }

    name = settings.geocoder_provider
    geocoder = get_geocoder(name, **provider_kwargs.get(name, {}))
    if not geocoder.is_configured:
        msg = f"Geocoder provider {name!r} is missing required configuration"
        raise ValueError(msg)
    return geocoder


__all__ = [
    "AddressInput",
    "AddressValidationError",
    "BaseGeocoder",
    "CensusGeocoder",
    "DemoGeocoder",
    "GeocodeMatch",
    "GeocodingProviderError",
    "GeocodingResult",
    "NominatimGeocoder",
    "OpenCageGeocoder",
    "build_query",
    "get_available_providers",
    "get_configured_geocoder",
    "get_geocoder",
    "is_tennessee_state",
    "validate_address",
    "validate_tennessee_coordinates",
]
