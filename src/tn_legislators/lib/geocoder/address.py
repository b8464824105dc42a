"""Street address validation and query formatting for Tennessee lookups.

Validation is pure and synchronous: a rejected address never reaches a
geocoding provider.
"""

import re
from dataclasses import dataclass

TN_ZIP_PATTERN = re.compile(r"^(37|38)\d{3}$")

TN_STATE_NAMES = frozenset({"TN", "TENNESSEE"})

# Tennessee approximate bounding box (WGS84) with small buffer for GPS inaccuracy
TN_MIN_LAT = 34.95
TN_MAX_LAT = 36.70
TN_MIN_LNG = -90.35
TN_MAX_LNG = -81.60


class AddressValidationError(ValueError):
    """Raised when a submitted address fails validation.

    The message is safe to show to the user as-is.
    """


@dataclass(frozen=True)
class AddressInput:
    """A validated street address and Tennessee ZIP code."""

    street: str
    zip_code: str


def validate_address(street: str, zip_code: str) -> AddressInput:
    """Validate a raw street address and ZIP code.

    Args:
        street: Street address line (e.g. "123 Main St").
        zip_code: Five-digit ZIP code.

    Returns:
        AddressInput with both fields trimmed.

    Raises:
        AddressValidationError: If either field is empty or the ZIP code is
            not a Tennessee ZIP code.
    """
    street = (street or "").strip()
    zip_code = (zip_code or "").strip()

    if not street or not zip_code:
        msg = "Please enter both street address and ZIP code"
        raise AddressValidationError(msg)

    if not TN_ZIP_PATTERN.match(zip_code):
        msg = "Please enter a valid Tennessee ZIP code (starts with 37 or 38)"
        raise AddressValidationError(msg)

    return AddressInput(street=street, zip_code=zip_code)


def build_query(address: AddressInput) -> str:
    """Build the single-line geocoder query for an address."""
    return f"{address.street}, {address.zip_code}, Tennessee, USA"


def is_tennessee_state(state: str | None) -> bool:
    """Whether a provider-reported state name or code is Tennessee."""
    if not state:
        return False
    return state.strip().upper() in TN_STATE_NAMES


def validate_tennessee_coordinates(lat: float, lng: float) -> None:
    """Validate that coordinates fall within the Tennessee service area.

    Args:
        lat: WGS84 latitude.
        lng: WGS84 longitude.

    Raises:
        ValueError: If coordinates are outside Tennessee's bounding box.
    """
    if not (TN_MIN_LAT <= lat <= TN_MAX_LAT and TN_MIN_LNG <= lng <= TN_MAX_LNG):
        msg = "Coordinates are outside the Tennessee service area."
        raise ValueError(msg)
