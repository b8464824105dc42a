"""Legislator records and directory error types."""

from dataclasses import dataclass, field
from enum import StrEnum


class Chamber(StrEnum):
    """Tennessee General Assembly chamber."""

    SENATE = "senate"
    HOUSE = "house"


class Party(StrEnum):
    """Party affiliation as inferred from directory text."""

    REPUBLICAN = "Republican"
    DEMOCRAT = "Democrat"
    UNKNOWN = "Unknown"


@dataclass
class ContactInfo:
    """Contact channels scraped from a legislator's directory card."""

    phone: str | None = None
    email: str | None = None
    website: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None


@dataclass
class LegislatorRecord:
    """Normalized representation of one legislator from a directory page.

    ``id`` is ``"{chamber}-{index}"`` where index is the card's position on
    its chamber page, so it is only stable for a given page snapshot.
    """

    id: str
    chamber: Chamber
    name: str
    district: str
    party: Party = Party.UNKNOWN
    image_url: str | None = None
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    committees: list[str] = field(default_factory=list)
    biography: str | None = None


class DirectoryFetchError(Exception):
    """Raised when a chamber's directory page cannot be fetched.

    Args:
        chamber: The chamber whose page failed.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the site.
    """

    def __init__(self, chamber: Chamber, message: str, status_code: int | None = None) -> None:
        self.chamber = chamber
        self.message = message
        self.status_code = status_code
        super().__init__(f"{chamber} directory: {message}")
