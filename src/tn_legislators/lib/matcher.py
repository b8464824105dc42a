"""Match resolved districts to directory records.

Per chamber, strategies run in order until one returns a record:

1. district equality against ``DistrictInfo``
2. ``"district N"`` / ``"districtN"`` in the lower-cased formatted address
3. a uniformly random record, only when ``allow_random_fallback`` is set
   (demo mode); otherwise the chamber stays unmatched
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from tn_legislators.lib.directory.base import Chamber, LegislatorRecord
from tn_legislators.lib.districts.base import DistrictInfo


@dataclass(frozen=True)
class MatchResult:
    """Matched senator and representative; None means not found."""

    senator: LegislatorRecord | None = None
    representative: LegislatorRecord | None = None

    @property
    def is_empty(self) -> bool:
        return self.senator is None and self.representative is None


def match_by_district(candidates: Sequence[LegislatorRecord], district: str | None) -> LegislatorRecord | None:
    """First candidate whose district equals the resolved identifier."""
    if not district:
        return None
    return next((c for c in candidates if c.district == district), None)


def match_by_address_text(candidates: Sequence[LegislatorRecord], formatted_address: str) -> LegislatorRecord | None:
    """First candidate whose district number appears as ``district N`` in the address."""
    address = (formatted_address or "").lower()
    if not address:
        return None
    for candidate in candidates:
        if not candidate.district:
            continue
        if f"district {candidate.district}" in address or f"district{candidate.district}" in address:
            return candidate
    return None


def _match_chamber(
    candidates: Sequence[LegislatorRecord],
    district: str | None,
    formatted_address: str,
    *,
    allow_random_fallback: bool,
    rng: random.Random | None,
) -> LegislatorRecord | None:
    match = match_by_district(candidates, district)
    if match is not None:
        return match

    match = match_by_address_text(candidates, formatted_address)
    if match is not None:
        return match

    if allow_random_fallback and candidates:
        pick = (rng or random).choice(list(candidates))
        logger.warning("Demo mode: using placeholder {} {!r}", pick.chamber, pick.name)
        return pick
    return None


def match_legislators(
    records: Sequence[LegislatorRecord],
    formatted_address: str,
    district_info: DistrictInfo | None = None,
    *,
    allow_random_fallback: bool = False,
    rng: random.Random | None = None,
) -> MatchResult:
    """Match a senator and a representative for an address.

    Args:
        records: Directory records for both chambers.
        formatted_address: Geocoder's formatted address (may be empty).
        district_info: Resolved districts, if any.
        allow_random_fallback: Pick a random record for an unmatched chamber.
            Placeholder data only; never enable outside demo mode.
        rng: Random source for the fallback, for reproducibility.

    Returns:
        MatchResult with None for each chamber that could not be matched.
    """
    senators = [r for r in records if r.chamber == Chamber.SENATE]
    representatives = [r for r in records if r.chamber == Chamber.HOUSE]
    info = district_info or DistrictInfo()

    return MatchResult(
        senator=_match_chamber(
            senators,
            info.senate,
            formatted_address,
            allow_random_fallback=allow_random_fallback,
            rng=rng,
        ),
        representative=_match_chamber(
            representatives,
            info.house,
            formatted_address,
            allow_random_fallback=allow_random_fallback,
            rng=rng,
        ),
    )
