"""District identifiers and district-lookup error types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DistrictInfo:
    """State legislative district identifiers for a point.

    Both fields are digit-only strings without leading zeros, or None when
    the chamber's district could not be determined.
    """

    senate: str | None = None
    house: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.senate is None and self.house is None


class DistrictProviderError(Exception):
    """Raised when the geography service experiences a transport or service error.

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


class DistrictResolutionError(Exception):
    """Raised when the geography service responded but neither chamber resolved.

    Args:
        county: Containing county name, when the response reported one.
    """

    def __init__(self, county: str | None = None) -> None:
        self.county = county
        where = f" in {county}" if county else ""
        super().__init__(f"Legislative districts could not be determined{where}")
