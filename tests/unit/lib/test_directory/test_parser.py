"""Unit tests for directory HTML parsing."""

import pytest

from tn_legislators.lib.directory import Chamber, Party, infer_party, parse_directory


class TestParseSenate:
    """Tests for senate page parsing."""

    def test_parses_all_cards(self, senate_html: str) -> None:
        records = parse_directory(senate_html, Chamber.SENATE)
        assert [r.name for r in records] == ["Becky Massey", "Jeff Yarbro"]
        assert [r.id for r in records] == ["senate-0", "senate-1"]

    def test_fields(self, senate_html: str) -> None:
        massey = parse_directory(senate_html, Chamber.SENATE)[0]
        assert massey.chamber == Chamber.SENATE
        assert massey.district == "6"
        assert massey.party == Party.REPUBLICAN
        assert massey.image_url == "https://wapp.capitol.tn.gov/images/senators/s6.jpg"
        assert massey.contact_info.phone == "(615) 741-1648"
        assert massey.contact_info.email == "sen.becky.massey@capitol.tn.gov"
        assert massey.contact_info.facebook == "https://www.facebook.com/beckymassey"
        assert massey.contact_info.twitter is None

    def test_anchor_without_text_falls_back_to_href(self, senate_html: str) -> None:
        yarbro = parse_directory(senate_html, Chamber.SENATE)[1]
        assert yarbro.contact_info.phone == "6157413291"
        assert yarbro.contact_info.email is None
        assert yarbro.contact_info.twitter == "https://twitter.com/jeffyarbro"
        assert yarbro.party == Party.DEMOCRAT
        assert yarbro.image_url is None

    def test_custom_image_base(self, senate_html: str) -> None:
        records = parse_directory(senate_html, Chamber.SENATE, image_base_url="https://mirror.example")
        assert records[0].image_url == "https://mirror.example/images/senators/s6.jpg"

    def test_house_containers_ignored_on_senate_page(self, house_html: str) -> None:
        assert parse_directory(house_html, Chamber.SENATE) == []


class TestParseHouse:
    """Tests for house page parsing."""

    def test_malformed_card_does_not_stop_siblings(self, house_html: str) -> None:
        records = parse_directory(house_html, Chamber.HOUSE)
        assert [r.name for r in records] == ["Dave Wright", "Bo Mitchell"]
        assert [r.district for r in records] == ["19", "50"]

    def test_ids_keep_page_position(self, house_html: str) -> None:
        records = parse_directory(house_html, Chamber.HOUSE)
        assert [r.id for r in records] == ["house-0", "house-2"]

    def test_mailto_href_fallback_and_instagram(self, house_html: str) -> None:
        wright = parse_directory(house_html, Chamber.HOUSE)[0]
        assert wright.contact_info.email == "rep.dave.wright@capitol.tn.gov"
        assert wright.contact_info.instagram == "https://instagram.com/davewright"

    def test_card_without_district_number_skipped(self) -> None:
        html = """
        <div class="repContainer"><strong>No Number</strong><p>At-large</p></div>
        <div class="repContainer"><strong>Has Number</strong><p>District 007 (Republican)</p></div>
        """
        records = parse_directory(html, Chamber.HOUSE)
        assert [r.name for r in records] == ["Has Number"]
        assert records[0].district == "7"

    def test_fallback_selectors(self) -> None:
        html = '<div class="repContainer"><strong>Plain Markup</strong><p>District 12</p></div>'
        records = parse_directory(html, Chamber.HOUSE)
        assert records[0].name == "Plain Markup"
        assert records[0].party == Party.UNKNOWN

    def test_empty_page(self) -> None:
        assert parse_directory("<html></html>", Chamber.HOUSE) == []

    def test_fax_link_is_not_twitter(self) -> None:
        html = """
        <div class="repContainer"><strong>Fax Only</strong><p>District 3</p>
          <a href="https://fax.com/send">Fax</a></div>
        <div class="repContainer"><strong>Has X</strong><p>District 4</p>
          <a href="https://fax.com/send">Fax</a><a href="https://x.com/hasx">X</a></div>
        """
        fax_only, has_x = parse_directory(html, Chamber.HOUSE)
        assert fax_only.contact_info.twitter is None
        assert has_x.contact_info.twitter == "https://x.com/hasx"


class TestInferParty:
    """Tests for party inference."""

    @pytest.mark.parametrize(
        ("text", "party"),
        [
            ("Republican - District 6", Party.REPUBLICAN),
            ("Democrat - District 21", Party.DEMOCRAT),
            ("Democratic Caucus - District 21", Party.DEMOCRAT),
            ("Independent - District 3", Party.UNKNOWN),
        ],
    )
    def test_infer_party(self, text: str, party: Party) -> None:
        assert infer_party(text) == party
