"""Unit tests for the lookup service."""

import random
from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import parse_qs, urlparse

import pytest

from tn_legislators.lib.districts import (
    CensusDistrictResolver,
    DistrictInfo,
    DistrictProviderError,
    DistrictResolutionError,
)
from tn_legislators.lib.geocoder import AddressInput, GeocodeMatch, GeocodingProviderError, GeocodingResult
from tn_legislators.lib.geocoder.nominatim import NominatimGeocoder
from tn_legislators.lib.geocoder.opencage import OpenCageGeocoder
from tn_legislators.services.lookup_service import (
    FailureKind,
    LookupFailure,
    LookupSuccess,
    build_directory,
    build_district_resolver,
    find_legislators,
    geocode_address,
    resolve_districts,
)

NASHVILLE = GeocodeMatch(
    latitude=36.1627,
    longitude=-86.7816,
    matched_address="123 MAIN ST, NASHVILLE, TN, 37203",
    state="TN",
)


def _geocoder(match: GeocodeMatch | None = NASHVILLE, side_effect: Exception | None = None) -> MagicMock:
    geocoder = MagicMock()
    geocoder.provider_name = "fake"
    geocoder.geocode = AsyncMock(return_value=match, side_effect=side_effect)
    return geocoder


def _resolver(info: DistrictInfo | None = None, side_effect: Exception | None = None) -> MagicMock:
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=info or DistrictInfo(senate="6", house="19"), side_effect=side_effect)
    return resolver


def _directory(records) -> MagicMock:
    directory = MagicMock()
    directory.fetch_all = AsyncMock(return_value=records)
    return directory


class TestResolveDistricts:
    """Tests for resolve_districts."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        assert await resolve_districts(_resolver(), 36.16, -86.78) == DistrictInfo(senate="6", house="19")

    @pytest.mark.asyncio
    async def test_provider_error_is_network(self) -> None:
        resolver = _resolver(side_effect=DistrictProviderError("census", "Timeout", 504))
        outcome = await resolve_districts(resolver, 36.16, -86.78)
        assert isinstance(outcome, LookupFailure)
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_resolution_error_keeps_county(self) -> None:
        resolver = _resolver(side_effect=DistrictResolutionError(county="Knox County"))
        outcome = await resolve_districts(resolver, 36.16, -86.78)
        assert outcome.kind == FailureKind.DISTRICTS_UNDETERMINED
        assert outcome.county == "Knox County"


class TestGeocodeAddress:
    """Tests for geocode_address."""

    @pytest.mark.asyncio
    async def test_success(self, settings) -> None:
        geocoder = _geocoder()
        outcome = await geocode_address(
            "  123 Main St ", "37203", settings=settings, geocoder=geocoder, resolver=_resolver()
        )

        assert isinstance(outcome, LookupSuccess)
        assert outcome.address == AddressInput(street="123 Main St", zip_code="37203")
        assert outcome.result == GeocodingResult(
            latitude=36.1627,
            longitude=-86.7816,
            formatted_address="123 MAIN ST, NASHVILLE, TN, 37203",
            district=DistrictInfo(senate="6", house="19"),
        )
        geocoder.geocode.assert_awaited_once_with("123 Main St, 37203, Tennessee, USA")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("street", "zip_code"), [("", "37203"), ("123 Main St", "30303")])
    async def test_validation_failure_skips_geocoder(self, settings, street: str, zip_code: str) -> None:
        geocoder = _geocoder()
        outcome = await geocode_address(street, zip_code, settings=settings, geocoder=geocoder)

        assert outcome.kind == FailureKind.VALIDATION
        assert outcome.detail
        geocoder.geocode.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_provider_error_is_network(self, settings) -> None:
        geocoder = _geocoder(side_effect=GeocodingProviderError("fake", "Timeout"))
        outcome = await geocode_address("123 Main St", "37203", settings=settings, geocoder=geocoder)
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_invalid_coordinates_are_network(self, settings) -> None:
        geocoder = _geocoder(side_effect=ValueError("latitude out of range"))
        outcome = await geocode_address("123 Main St", "37203", settings=settings, geocoder=geocoder)
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_misconfigured_geocoder_is_network(self) -> None:
        from tn_legislators.core.config import Settings

        settings = Settings(_env_file=None, geocoder_provider="opencage")
        outcome = await geocode_address("123 Main St", "37203", settings=settings)
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_no_match(self, settings) -> None:
        resolver = _resolver()
        outcome = await geocode_address(
            "123 Main St", "37203", settings=settings, geocoder=_geocoder(None), resolver=resolver
        )
        assert outcome.kind == FailureKind.NOT_FOUND
        resolver.resolve.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_out_of_state(self, settings) -> None:
        match = GeocodeMatch(latitude=33.749, longitude=-84.388, matched_address="ATLANTA, GA", state="GA")
        outcome = await geocode_address(
            "123 Main St", "37203", settings=settings, geocoder=_geocoder(match), resolver=_resolver()
        )
        assert outcome.kind == FailureKind.NOT_IN_TENNESSEE

    @pytest.mark.asyncio
    async def test_missing_state_is_accepted(self, settings) -> None:
        match = GeocodeMatch(latitude=36.1627, longitude=-86.7816)
        outcome = await geocode_address(
            "123 Main St", "37203", settings=settings, geocoder=_geocoder(match), resolver=_resolver()
        )
        assert isinstance(outcome, LookupSuccess)
        assert outcome.result.formatted_address is None

    @pytest.mark.asyncio
    async def test_districts_undetermined(self, settings) -> None:
        resolver = _resolver(side_effect=DistrictResolutionError(county="Davidson County"))
        outcome = await geocode_address(
            "123 Main St", "37203", settings=settings, geocoder=_geocoder(), resolver=resolver
        )
        assert outcome.kind == FailureKind.DISTRICTS_UNDETERMINED
        assert outcome.county == "Davidson County"

    @pytest.mark.asyncio
    async def test_district_network_failure(self, settings) -> None:
        resolver = _resolver(side_effect=DistrictProviderError("census", "Timeout"))
        outcome = await geocode_address(
            "123 Main St", "37203", settings=settings, geocoder=_geocoder(), resolver=resolver
        )
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_demo_mode_keeps_result_without_districts(self, demo_settings) -> None:
        resolver = _resolver(side_effect=DistrictProviderError("census", "Timeout"))
        outcome = await geocode_address("123 Main St", "37203", settings=demo_settings, resolver=resolver)

        assert isinstance(outcome, LookupSuccess)
        assert outcome.result.district is None
        assert outcome.result.formatted_address == "123 Main St, Nashville, TN 37203"


class TestMalformedProviderPayloads:
    """Unexpected provider JSON surfaces as a tagged failure."""

    @pytest.mark.asyncio
    async def test_nominatim_error_body(self, settings) -> None:
        with patch.object(NominatimGeocoder, "_get_json", AsyncMock(return_value={"error": "Unable to geocode"})):
            outcome = await geocode_address(
                "123 Main St", "37203", settings=settings, geocoder=NominatimGeocoder(), resolver=_resolver()
            )
        assert isinstance(outcome, LookupFailure)
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_opencage_list_body(self, settings) -> None:
        with patch.object(OpenCageGeocoder, "_get_json", AsyncMock(return_value=[])):
            outcome = await geocode_address(
                "123 Main St",
                "37203",
                settings=settings,
                geocoder=OpenCageGeocoder(api_key="k"),
                resolver=_resolver(),
            )
        assert isinstance(outcome, LookupFailure)
        assert outcome.kind == FailureKind.NETWORK

    @pytest.mark.asyncio
    async def test_census_dict_layer(self) -> None:
        response = MagicMock()
        response.json.return_value = {
            "result": {"geographies": {"2024 State Legislative Districts - Upper": {"SLDUST": "006"}}}
        }
        response.raise_for_status = MagicMock()
        with patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=response):
            outcome = await resolve_districts(CensusDistrictResolver(), 36.16, -86.78)
        assert isinstance(outcome, LookupFailure)
        assert outcome.kind == FailureKind.DISTRICTS_UNDETERMINED


class TestFindLegislators:
    """Tests for find_legislators."""

    ADDRESS = AddressInput(street="123 Main St", zip_code="37203")

    @pytest.mark.asyncio
    async def test_match_with_contact_card(self, settings, records) -> None:
        result = GeocodingResult(36.1627, -86.7816, "123 MAIN ST", DistrictInfo(senate="6", house="19"))
        lookup = await find_legislators(self.ADDRESS, result, settings=settings, directory=_directory(records))

        assert lookup.match.senator.name == "Becky Massey"
        assert lookup.match.representative.name == "Dave Wright"
        assert lookup.contact_summary.startswith("LEGISLATOR CONTACT INFO")
        assert lookup.contact_summary.endswith("Address: 123 Main St, 37203")

        qr = urlparse(lookup.qr_code_url)
        assert qr.netloc == "api.qrserver.com"
        assert parse_qs(qr.query)["data"] == [lookup.contact_summary]

    @pytest.mark.asyncio
    async def test_no_match_has_no_card(self, settings, records) -> None:
        result = GeocodingResult(36.1627, -86.7816, "123 MAIN ST", DistrictInfo(senate="99", house="99"))
        lookup = await find_legislators(self.ADDRESS, result, settings=settings, directory=_directory(records))

        assert lookup.match.is_empty
        assert lookup.contact_summary is None
        assert lookup.qr_code_url is None

    @pytest.mark.asyncio
    async def test_empty_directory(self, settings) -> None:
        result = GeocodingResult(36.1627, -86.7816, None, DistrictInfo(senate="6", house="19"))
        lookup = await find_legislators(self.ADDRESS, result, settings=settings, directory=_directory([]))
        assert lookup.match.is_empty

    @pytest.mark.asyncio
    async def test_demo_mode_uses_placeholders(self, demo_settings, records) -> None:
        result = GeocodingResult(36.1627, -86.7816, None, None)
        lookup = await find_legislators(
            self.ADDRESS, result, settings=demo_settings, directory=_directory(records), rng=random.Random(3)
        )
        assert lookup.match.senator is not None
        assert lookup.match.representative is not None
        assert lookup.contact_summary is not None

    @pytest.mark.asyncio
    async def test_qr_settings_applied(self, records) -> None:
        from tn_legislators.core.config import Settings

        settings = Settings(_env_file=None, qr_endpoint="https://qr.example/render", qr_size=300)
        result = GeocodingResult(36.1627, -86.7816, None, DistrictInfo(senate="6"))
        lookup = await find_legislators(self.ADDRESS, result, settings=settings, directory=_directory(records))

        assert lookup.qr_code_url.startswith("https://qr.example/render?")
        assert "size=300x300" in lookup.qr_code_url

    @pytest.mark.asyncio
    async def test_default_directory_from_settings(self, settings, records) -> None:
        result = GeocodingResult(36.1627, -86.7816, None, DistrictInfo(senate="6"))
        with patch(
            "tn_legislators.lib.directory.tn_legislature.TNLegislatureDirectory.fetch_all",
            new_callable=AsyncMock,
            return_value=records,
        ) as mock_fetch:
            lookup = await find_legislators(self.ADDRESS, result, settings=settings)

        mock_fetch.assert_awaited_once()
        assert lookup.match.senator.name == "Becky Massey"


class TestBuilders:
    """Tests for settings-driven client construction."""

    def test_district_resolver(self, settings) -> None:
        assert build_district_resolver(settings).provider_name == "census"

    def test_directory(self, settings) -> None:
        assert build_directory(settings) is not None
