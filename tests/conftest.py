"""Shared test fixtures for settings, directory HTML and legislator records."""

import pytest

from tn_legislators.core.config import Settings
from tn_legislators.lib.directory import Chamber, ContactInfo, LegislatorRecord, Party

SENATE_HTML = """
<html><body>
<div class="senatorContainer">
  <img src="/images/senators/s6.jpg" />
  <strong class="senator-name">Becky Massey</strong>
  <p class="senatorDistrict">Republican - District 6</p>
  <a href="tel:615-741-1648">(615) 741-1648</a>
  <a href="mailto:sen.becky.massey@capitol.tn.gov">sen.becky.massey@capitol.tn.gov</a>
  <a href="https://www.facebook.com/beckymassey">Facebook</a>
</div>
<div class="senatorContainer">
  <strong class="senator-name">Jeff Yarbro</strong>
  <p class="senatorDistrict">Democrat - District 21</p>
  <a href="tel:6157413291"></a>
  <a href="https://twitter.com/jeffyarbro">Twitter</a>
</div>
</body></html>
"""

HOUSE_HTML = """
<html><body>
<div class="repContainer">
  <img src="/images/reps/h19.jpg" />
  <strong class="rep-name">Dave Wright</strong>
  <p class="repDistrict">Republican - District 19</p>
  <a href="mailto:rep.dave.wright@capitol.tn.gov"></a>
  <a href="https://instagram.com/davewright">Instagram</a>
</div>
<div class="repContainer">
  <p class="repDistrict">Republican - District 20</p>
</div>
<div class="repContainer">
  <strong class="rep-name">Bo Mitchell</strong>
  <p class="repDistrict">Democrat - District 50</p>
</div>
</body></html>
"""


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(_env_file=None)


@pytest.fixture
def demo_settings() -> Settings:
    """Settings with demo mode and the offline geocoder."""
    return Settings(_env_file=None, demo_mode=True, geocoder_provider="demo")


def make_record(
    chamber: Chamber,
    district: str,
    name: str,
    index: int = 0,
    phone: str | None = None,
    email: str | None = None,
) -> LegislatorRecord:
    """Build a LegislatorRecord for tests."""
    return LegislatorRecord(
        id=f"{chamber}-{index}",
        chamber=chamber,
        name=name,
        district=district,
        party=Party.REPUBLICAN,
        contact_info=ContactInfo(phone=phone, email=email),
    )


@pytest.fixture
def record_factory():
    """Factory fixture building LegislatorRecord instances."""
    return make_record


@pytest.fixture
def records() -> list[LegislatorRecord]:
    """A small two-chamber directory."""
    return [
        make_record(Chamber.SENATE, "5", "Senator Five", 0),
        make_record(Chamber.SENATE, "6", "Becky Massey", 1, phone="(615) 741-1648", email="massey@example.gov"),
        make_record(Chamber.HOUSE, "18", "Rep Eighteen", 0),
        make_record(Chamber.HOUSE, "19", "Dave Wright", 1, email="wright@example.gov"),
    ]


@pytest.fixture
def senate_html() -> str:
    """Senate directory page with two well-formed cards."""
    return SENATE_HTML


@pytest.fixture
def house_html() -> str:
    """House directory page with one malformed card between two good ones."""
    return HOUSE_HTML
