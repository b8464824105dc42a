"""Pydantic v2 schemas for address lookup, districts and legislators."""

from pydantic import BaseModel, Field

from tn_legislators.lib.districts.base import DistrictInfo
from tn_legislators.lib.geocoder.address import AddressInput
from tn_legislators.lib.geocoder.base import GeocodingResult


class AddressLookupRequest(BaseModel):
    """Raw address form submission. Validation happens in the service layer."""

    street: str = Field(..., max_length=500, description="Street address line")
    zip_code: str = Field(..., max_length=10, description="Tennessee ZIP code (37xxx or 38xxx)")


class AddressInputSchema(BaseModel):
    """A validated street address and ZIP code."""

    model_config = {"from_attributes": True}

    street: str
    zip_code: str = Field(..., pattern=r"^(37|38)\d{3}$")

    def to_input(self) -> AddressInput:
        return AddressInput(street=self.street, zip_code=self.zip_code)


class DistrictInfoSchema(BaseModel):
    """Senate and house district identifiers."""

    model_config = {"from_attributes": True}

    senate: str | None = Field(default=None, pattern=r"^[1-9]\d*$")
    house: str | None = Field(default=None, pattern=r"^[1-9]\d*$")

    def to_info(self) -> DistrictInfo:
        return DistrictInfo(senate=self.senate, house=self.house)


class GeocodingResultSchema(BaseModel):
    """A geocoded address with its districts."""

    model_config = {"from_attributes": True}

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    formatted_address: str | None = None
    district: DistrictInfoSchema | None = None

    def to_result(self) -> GeocodingResult:
        return GeocodingResult(
            latitude=self.latitude,
            longitude=self.longitude,
            formatted_address=self.formatted_address,
            district=self.district.to_info() if self.district else None,
        )


class LookupContext(BaseModel):
    """Handoff from the address step to the legislators step.

    Returned by ``POST /lookup/address`` and posted back, unchanged, to
    ``POST /lookup/legislators``. The client owns it; starting a new lookup
    discards the previous context.
    """

    address: AddressInputSchema
    geocoding: GeocodingResultSchema


class DistrictLookupResponse(BaseModel):
    """Districts for a coordinate pair."""

    latitude: float
    longitude: float
    district: DistrictInfoSchema


class ContactInfoSchema(BaseModel):
    """Legislator contact channels."""

    model_config = {"from_attributes": True}

    phone: str | None = None
    email: str | None = None
    website: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None


class LegislatorResponse(BaseModel):
    """A legislator scraped from the directory."""

    model_config = {"from_attributes": True}

    id: str
    chamber: str
    name: str
    district: str
    party: str
    image_url: str | None = None
    contact_info: ContactInfoSchema
    committees: list[str] = Field(default_factory=list)
    biography: str | None = None


class LegislatorLookupResponse(BaseModel):
    """Matched legislators plus the shareable contact card."""

    senator: LegislatorResponse | None = None
    representative: LegislatorResponse | None = None
    found: bool = Field(description="Whether at least one legislator was matched")
    message: str | None = Field(default=None, description="User-facing message when nothing matched")
    contact_summary: str | None = None
    qr_code_url: str | None = None
    senator_tel: str | None = None
    senator_mailto: str | None = None
    representative_tel: str | None = None
    representative_mailto: str | None = None
