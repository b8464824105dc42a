"""District library: legislative district identifiers for a point.

Public API:
    - DistrictInfo: Senate/house district identifier pair
    - CensusDistrictResolver: Census geographies lookup
    - DistrictProviderError: Transport/service error
    - DistrictResolutionError: Neither chamber resolved (carries county)
    - normalize_district: Digit-only, no-leading-zero normalization
"""

from tn_legislators.lib.districts.base import DistrictInfo, DistrictProviderError, DistrictResolutionError
from tn_legislators.lib.districts.census import CensusDistrictResolver
from tn_legislators.lib.districts.extract import LayerKind, extract_county, extract_district, normalize_district

__all__ = [
    "CensusDistrictResolver",
    "DistrictInfo",
    "DistrictProviderError",
    "DistrictResolutionError",
    "LayerKind",
    "extract_county",
    "extract_district",
    "normalize_district",
]
