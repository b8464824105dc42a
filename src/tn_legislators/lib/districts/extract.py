"""District-number extraction from Census geographies responses.

The geographies payload has drifted across API vintages: layer names gain
year prefixes and the district number moves between fields. Extraction is an
ordered list of strategies, each a plain function, tried until one yields a
value:

    layer lookup   known layer keys in order, then a pattern match on keys
    field lookup   structured district fields in order
    name fallback  ``District\\s*(\\d+)`` against the human-readable name
"""

import re
from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Any

DISTRICT_NAME_PATTERN = re.compile(r"District\s*(\d+)", re.IGNORECASE)
_DIGIT_RUN = re.compile(r"\d+")


class LayerKind(StrEnum):
    """State legislative district layers, keyed by chamber."""

    UPPER = "upper"
    LOWER = "lower"


KNOWN_LAYER_KEYS: dict[LayerKind, tuple[str, ...]] = {
    LayerKind.UPPER: (
        "State Legislative Districts - Upper",
        "2024 State Legislative Districts - Upper",
        "2022 State Legislative Districts - Upper",
        "2020 State Legislative Districts - Upper",
        "2018 State Legislative Districts - Upper",
    ),
    LayerKind.LOWER: (
        "State Legislative Districts - Lower",
        "2024 State Legislative Districts - Lower",
        "2022 State Legislative Districts - Lower",
        "2020 State Legislative Districts - Lower",
        "2018 State Legislative Districts - Lower",
    ),
}

_LAYER_KEY_PATTERNS: dict[LayerKind, re.Pattern[str]] = {
    LayerKind.UPPER: re.compile(r"state legislative districts?\s*[-–—]\s*upper", re.IGNORECASE),
    LayerKind.LOWER: re.compile(r"state legislative districts?\s*[-–—]\s*lower", re.IGNORECASE),
}

DISTRICT_FIELD_KEYS: dict[LayerKind, tuple[str, ...]] = {
    LayerKind.UPPER: ("SLDUST", "SLDU", "BASENAME", "DISTRICT"),
    LayerKind.LOWER: ("SLDLST", "SLDL", "BASENAME", "DISTRICT"),
}

COUNTY_LAYER_KEYS: tuple[str, ...] = ("Counties", "County")

Feature = dict[str, Any]
Geographies = dict[str, Any]


def normalize_district(value: Any) -> str | None:
    """Normalize a raw district value to digits without leading zeros.

    Keeps only the first run of digits found. Returns None when the value
    holds no digits or only zeros.

    >>> normalize_district("006")
    '6'
    >>> normalize_district("State Senate District 19A")
    '19'
    """
    if value is None:
        return None
    match = _DIGIT_RUN.search(str(value))
    if match is None:
        return None
    stripped = match.group(0).lstrip("0")
    return stripped or None


# ---------------------------------------------------------------------------
# Layer lookup strategies
# ---------------------------------------------------------------------------


def layer_by_known_key(geographies: Geographies, kind: LayerKind) -> list[Feature] | None:
    """Return the first non-empty layer stored under a known key."""
    for key in KNOWN_LAYER_KEYS[kind]:
        features = geographies.get(key)
        if isinstance(features, list) and features:
            return features
    return None


def layer_by_key_pattern(geographies: Geographies, kind: LayerKind) -> list[Feature] | None:
    """Return the first non-empty layer whose key matches the chamber pattern."""
    pattern = _LAYER_KEY_PATTERNS[kind]
    for key in sorted(geographies, reverse=True):
        if pattern.search(key) and isinstance(geographies[key], list) and geographies[key]:
            return geographies[key]
    return None


LAYER_STRATEGIES: Sequence[Callable[[Geographies, LayerKind], list[Feature] | None]] = (
    layer_by_known_key,
    layer_by_key_pattern,
)


def find_layer(geographies: Geographies, kind: LayerKind) -> list[Feature] | None:
    """Locate a chamber's feature list using each layer strategy in order."""
    for strategy in LAYER_STRATEGIES:
        features = strategy(geographies, kind)
        if features:
            return features
    return None


# ---------------------------------------------------------------------------
# District field strategies
# ---------------------------------------------------------------------------


def district_from_fields(feature: Feature, kind: LayerKind) -> str | None:
    """Read the district number from the first populated structured field."""
    for key in DISTRICT_FIELD_KEYS[kind]:
        district = normalize_district(feature.get(key))
        if district is not None:
            return district
    return None


def district_from_name(feature: Feature, kind: LayerKind) -> str | None:
    """Match ``District N`` in the feature's human-readable name."""
    for key in ("NAME", "name"):
        name = feature.get(key)
        if not isinstance(name, str):
            continue
        match = DISTRICT_NAME_PATTERN.search(name)
        if match:
            return normalize_district(match.group(1))
    return None


FIELD_STRATEGIES: Sequence[Callable[[Feature, LayerKind], str | None]] = (
    district_from_fields,
    district_from_name,
)


def extract_district(geographies: Geographies, kind: LayerKind) -> str | None:
    """Extract one chamber's district from a geographies mapping.

    Args:
        geographies: The ``result.geographies`` object of a Census response.
        kind: Which chamber layer to read.

    Returns:
        Normalized district string, or None if the chamber did not resolve.
    """
    features = find_layer(geographies, kind)
    if not features:
        return None
    feature = features[0]
    if not isinstance(feature, dict):
        return None
    for strategy in FIELD_STRATEGIES:
        district = strategy(feature, kind)
        if district is not None:
            return district
    return None


def extract_county(geographies: Geographies) -> str | None:
    """Return the containing county's name, if present."""
    for key in COUNTY_LAYER_KEYS:
        features = geographies.get(key)
        if isinstance(features, list) and features and isinstance(features[0], dict):
            name = features[0].get("NAME") or features[0].get("BASENAME")
            if name:
                return str(name)
    return None
