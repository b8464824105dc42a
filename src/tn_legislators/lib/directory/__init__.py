"""Directory library: Tennessee legislator records scraped from capitol.tn.gov.

Public API:
    - LegislatorRecord / ContactInfo: Parsed legislator data
    - Chamber / Party: Enumerations
    - DirectoryFetchError: Page fetch failure for one chamber
    - TNLegislatureDirectory: Concurrent two-chamber fetcher
    - parse_directory: HTML page to records
    - find_legislator_by_id: Lookup by record id
"""

from tn_legislators.lib.directory.base import Chamber, ContactInfo, DirectoryFetchError, LegislatorRecord, Party
from tn_legislators.lib.directory.parser import infer_party, parse_directory
from tn_legislators.lib.directory.tn_legislature import TNLegislatureDirectory, find_legislator_by_id

__all__ = [
    "Chamber",
    "ContactInfo",
    "DirectoryFetchError",
    "LegislatorRecord",
    "Party",
    "TNLegislatureDirectory",
    "find_legislator_by_id",
    "infer_party",
    "parse_directory",
]
