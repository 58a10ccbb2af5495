"""Tests for Google document link parsing and the touchpoint catalog."""

import pytest

from app.components.campaign.catalog import TOUCHPOINT_CATALOG, get_channel_catalog
from app.components.campaign.links import exported_pdf_name, extract_document_id, get_link_type


class TestExtractDocumentId:
    """Test document id extraction."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://docs.google.com/presentation/d/1SlIdEs_x-9/edit#slide=id.p", "1SlIdEs_x-9"),
            ("https://docs.google.com/document/d/1DoC/edit?usp=sharing", "1DoC"),
            ("https://docs.google.com/spreadsheets/d/1ShEeT/edit#gid=0", "1ShEeT"),
            ("https://docs.google.com/drawings/d/1DrAw/edit", "1DrAw"),
            ("https://drive.google.com/file/d/1FiLe/view", "1FiLe"),
            ("https://docs.google.com/forms/d/1FoRm/viewform", "1FoRm"),
            ("https://drive.google.com/open?id=1OpEn", "1OpEn"),
        ],
    )
    def test_known_formats(self, url, expected):
        assert extract_document_id(url) == expected

    def test_unparseable(self):
        assert extract_document_id("https://example.com/page") is None


class TestLinkType:
    """Test link type detection."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://docs.google.com/document/d/x/edit", "Google Doc"),
            ("https://docs.google.com/presentation/d/x/edit", "Google Slides"),
            ("https://docs.google.com/spreadsheets/d/x/edit", "Google Sheets"),
            ("https://docs.google.com/forms/d/x/viewform", "Google Form"),
            ("https://drive.google.com/file/d/x/view", "Google Link"),
        ],
    )
    def test_types(self, url, expected):
        assert get_link_type(url) == expected

    def test_exported_name_uses_id_prefix(self):
        assert exported_pdf_name("Google Sheets", "1234567890abc") == "Copy - Google Sheets - 12345678.pdf"


class TestCatalog:
    """Test the predefined touchpoint catalog."""

    def test_channels(self):
        assert [entry.channel for entry in TOUCHPOINT_CATALOG] == ["Organic", "Email", "Website"]

    def test_website_options(self):
        entry = get_channel_catalog("Website")
        assert [o.name for o in entry.options] == ["Teaser", "Product Page"]

    def test_unknown_channel(self):
        assert get_channel_catalog("Podcast") is None

    def test_email_launch_sequence(self):
        entry = get_channel_catalog("Email")
        assert [o.id for o in entry.options] == [1, 2, 3, 4, 5, 6]
        assert entry.options[-1].name == "Last Chance"
