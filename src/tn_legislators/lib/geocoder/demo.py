"""Offline demo geocoder returning fixed Tennessee coordinates.

37xxx ZIP codes resolve to downtown Nashville, 38xxx to downtown Memphis.
Intended for local development and demonstrations without network access.
"""

import re

from tn_legislators.lib.geocoder.base import BaseGeocoder, GeocodeMatch

_ZIP_IN_QUERY = re.compile(r"\b(3[78]\d{3})\b")

_DEMO_POINTS: dict[str, tuple[float, float, str]] = {
    "37": (36.1627, -86.7816, "Nashville"),
    "38": (35.1495, -90.0490, "Memphis"),
}


class DemoGeocoder(BaseGeocoder):
    """Deterministic geocoder for demo mode."""

    @property
    def provider_name(self) -> str:
        return "demo"

    async def geocode(self, address: str) -> GeocodeMatch | None:
        zips = _ZIP_IN_QUERY.findall(address)
        if not zips:
            return None
        zip_code = zips[-1]
        lat, lng, city = _DEMO_POINTS[zip_code[:2]]
        street = address.split(",", 1)[0].strip()
        return GeocodeMatch(
            latitude=lat,
            longitude=lng,
            matched_address=f"{street}, {city}, TN {zip_code}",
            state="TN",
        )
