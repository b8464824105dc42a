"""HTML parsing for the Tennessee General Assembly legislator directory.

Each legislator is rendered as a container element with a fixed class per
chamber. Within a container the parser locates the name node, the district
label (which also carries the party), an optional portrait and contact
anchors identified by URL scheme or social-media domain.
"""

import re
from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from loguru import logger

from tn_legislators.lib.directory.base import Chamber, ContactInfo, LegislatorRecord, Party

DISTRICT_LABEL_PATTERN = re.compile(r"District\s*(\d+)", re.IGNORECASE)


@dataclass(frozen=True)
class ChamberSelectors:
    """CSS selectors for one chamber's directory page."""

    container: str
    name: str
    district: str


SELECTORS: dict[Chamber, ChamberSelectors] = {
    Chamber.SENATE: ChamberSelectors(
        container=".senatorContainer",
        name=".senator-name, strong",
        district=".senatorDistrict, p",
    ),
    Chamber.HOUSE: ChamberSelectors(
        container=".repContainer",
        name=".rep-name, strong",
        district=".repDistrict, p",
    ),
}

_SOCIAL_SELECTORS: dict[str, tuple[str, ...]] = {
    "facebook": ('a[href*="facebook.com"]',),
    "twitter": ('a[href*="twitter.com"]', 'a[href*="//x.com/"]', 'a[href*="//www.x.com/"]'),
    "instagram": ('a[href*="instagram.com"]',),
}


def infer_party(text: str) -> Party:
    """Infer party affiliation from district label text."""
    if "Republican" in text:
        return Party.REPUBLICAN
    if "Democrat" in text:
        return Party.DEMOCRAT
    return Party.UNKNOWN


def _anchor_value(anchor: Tag | None, scheme: str) -> str | None:
    """Prefer an anchor's visible text, falling back to its href minus the scheme."""
    if anchor is None:
        return None
    text = anchor.get_text(strip=True)
    if text:
        return text
    href = str(anchor.get("href") or "")
    value = href.removeprefix(scheme).strip()
    return value or None


def _first_href(card: Tag, selectors: tuple[str, ...]) -> str | None:
    for selector in selectors:
        anchor = card.select_one(selector)
        if anchor is not None and anchor.get("href"):
            return str(anchor["href"])
    return None


def _parse_card(card: Tag, chamber: Chamber, index: int, image_base_url: str) -> LegislatorRecord | None:
    """Parse one container into a record, or None if required nodes are missing."""
    selectors = SELECTORS[chamber]
    name_node = card.select_one(selectors.name)
    district_node = card.select_one(selectors.district)
    if name_node is None or district_node is None:
        return None

    name = name_node.get_text(strip=True)
    district_text = district_node.get_text(" ", strip=True)
    district_match = DISTRICT_LABEL_PATTERN.search(district_text)
    if not name or district_match is None:
        return None

    image_url = None
    img = card.select_one("img")
    if img is not None and img.get("src"):
        image_url = urljoin(image_base_url, str(img["src"]))

    contact = ContactInfo(
        phone=_anchor_value(card.select_one('a[href^="tel:"]'), "tel:"),
        email=_anchor_value(card.select_one('a[href^="mailto:"]'), "mailto:"),
        facebook=_first_href(card, _SOCIAL_SELECTORS["facebook"]),
        twitter=_first_href(card, _SOCIAL_SELECTORS["twitter"]),
        instagram=_first_href(card, _SOCIAL_SELECTORS["instagram"]),
    )

    return LegislatorRecord(
        id=f"{chamber}-{index}",
        chamber=chamber,
        name=name,
        district=district_match.group(1).lstrip("0") or "0",
        party=infer_party(district_text),
        image_url=image_url,
        contact_info=contact,
    )


def parse_directory(
    html: str,
    chamber: Chamber,
    image_base_url: str = "https://wapp.capitol.tn.gov",
) -> list[LegislatorRecord]:
    """Parse a chamber's directory page into legislator records.

    A card missing its name or district node is skipped; one bad card never
    prevents its siblings from parsing.

    Args:
        html: Directory page HTML.
        chamber: Chamber the page belongs to.
        image_base_url: Base URL for relative portrait paths.

    Returns:
        Parsed records in page order.
    """
    soup = BeautifulSoup(html, "html.parser")
    records: list[LegislatorRecord] = []

    for index, card in enumerate(soup.select(SELECTORS[chamber].container)):
        try:
            record = _parse_card(card, chamber, index, image_base_url)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("Error parsing {} card {}: {}", chamber, index, e)
            continue
        if record is None:
            logger.warning("Skipping {} card {}: missing name or district", chamber, index)
            continue
        records.append(record)

    logger.debug("Parsed {} {} legislators", len(records), chamber)
    return records
