"""Tennessee General Assembly directory client.

Fetches the senate and house directory pages concurrently and parses them
into LegislatorRecord lists. Records are parsed fresh on every call.
"""

import asyncio

import httpx
from loguru import logger

from tn_legislators.lib.directory.base import Chamber, DirectoryFetchError, LegislatorRecord
from tn_legislators.lib.directory.parser import parse_directory
from tn_legislators.lib.relay import relay_target

SENATE_DIRECTORY_URL = "https://wapp.capitol.tn.gov/apps/LegislatorInfo/directory.aspx?chamber=S"
HOUSE_DIRECTORY_URL = "https://wapp.capitol.tn.gov/apps/LegislatorInfo/directory.aspx?chamber=H"
IMAGE_BASE_URL = "https://wapp.capitol.tn.gov"
DEFAULT_TIMEOUT = 30.0


class TNLegislatureDirectory:
    """Scrapes legislator records from the capitol.tn.gov directory pages.

    Args:
        senate_url: Senate directory page URL.
        house_url: House directory page URL.
        image_base_url: Base URL for relative portrait paths.
        timeout: Request timeout in seconds.
        relay_prefix: Optional relay URL prefix.
    """

    def __init__(
        self,
        senate_url: str = SENATE_DIRECTORY_URL,
        house_url: str = HOUSE_DIRECTORY_URL,
        image_base_url: str = IMAGE_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        relay_prefix: str = "",
    ) -> None:
        self._urls = {Chamber.SENATE: senate_url, Chamber.HOUSE: house_url}
        self._image_base_url = image_base_url
        self._timeout = timeout
        self._relay_prefix = relay_prefix

    async def fetch_chamber(self, chamber: Chamber) -> list[LegislatorRecord]:
        """Fetch and parse one chamber's directory page.

        Raises:
            DirectoryFetchError: On transport or HTTP errors.
        """
        url, _ = relay_target(self._urls[chamber], None, self._relay_prefix)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                logger.debug("Fetching {} directory from {}", chamber, url)
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            msg = "Timeout fetching directory page"
            logger.error("{} {}", chamber, msg)
            raise DirectoryFetchError(chamber, msg) from exc
        except httpx.HTTPStatusError as exc:
            msg = f"HTTP {exc.response.status_code} fetching directory page"
            logger.error("{} {}", chamber, msg)
            raise DirectoryFetchError(chamber, msg, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            msg = f"HTTP error fetching directory page: {exc}"
            logger.error("{} {}", chamber, msg)
            raise DirectoryFetchError(chamber, msg) from exc

        return parse_directory(response.text, chamber, self._image_base_url)

    async def _fetch_chamber_or_empty(self, chamber: Chamber) -> list[LegislatorRecord]:
        try:
            return await self.fetch_chamber(chamber)
        except DirectoryFetchError as exc:
            logger.warning("Continuing without {} legislators: {}", chamber, exc.message)
            return []

    async def fetch_all(self) -> list[LegislatorRecord]:
        """Fetch both chambers concurrently.

        A chamber whose page fails contributes an empty list; the other
        chamber's records are still returned.

        Returns:
            Senate records followed by house records.
        """
        senators, representatives = await asyncio.gather(
            self._fetch_chamber_or_empty(Chamber.SENATE),
            self._fetch_chamber_or_empty(Chamber.HOUSE),
        )
        return [*senators, *representatives]


def find_legislator_by_id(records: list[LegislatorRecord], legislator_id: str) -> LegislatorRecord | None:
    """Return the record with the given id, or None."""
    return next((r for r in records if r.id == legislator_id), None)
