"""
Unit tests for the filename parser and the document model.
"""

from datetime import date
from pathlib import Path

import pytest

from pdf_archiver.naming.document import Document, DocumentState
from pdf_archiver.naming.parser import FilenameParser
from pdf_archiver.naming.tags import TagRegistry


TODAY = date(2020, 5, 1)


@pytest.fixture
def parser():
    """Create a parser with a fixed 'today'."""
    return FilenameParser(today=lambda: TODAY)


@pytest.fixture
def registry():
    """Create an empty registry."""
    return TagRegistry()


class TestFilenameParser:
    """Tests for FilenameParser."""

    def test_canonical_filename(self, parser, registry):
        """Test all fields are recovered from a canonical name."""
        fields = parser.parse("2018-01-25--invoice-electricity__home_utilities.pdf", registry)

        assert fields.date == date(2018, 1, 25)
        assert fields.date_found is True
        assert fields.description == "invoice-electricity"
        assert fields.tag_names == ["home", "utilities"]
        assert registry.get("home").count == 1

    def test_unstructured_filename(self, parser, registry):
        """Test a name without structure still parses."""
        fields = parser.parse("scan001.pdf", registry)

        assert fields.date == TODAY
        assert fields.date_found is False
        assert fields.description == "scan001"
        assert fields.tag_names == []
        assert fields.tags_found is False
        assert len(registry) == 0

    def test_invalid_date_falls_back(self, parser, registry):
        """Test an impossible calendar date falls back to today."""
        fields = parser.parse("2018-13-45--invoice__home.pdf", registry)

        assert fields.date == TODAY
        assert fields.description == "invoice"
        assert fields.tag_names == ["home"]

    def test_uppercase_extension(self, parser, registry):
        """Test the extension is matched case-insensitively."""
        fields = parser.parse("2018-01-25--invoice__home_bills.PDF", registry)

        assert fields.tag_names == ["home", "bills"]

    def test_no_tag_block(self, parser, registry):
        """Test a name without tags keeps date and best-effort description."""
        fields = parser.parse("2018-01-25--invoice.pdf", registry)

        assert fields.date == date(2018, 1, 25)
        assert fields.description == "2018-01-25-invoice"
        assert fields.tag_names == []

    def test_description_fallback_before_tags(self, parser, registry):
        """Test the fallback description stops at the first '__'."""
        fields = parser.parse("My Scan__home.pdf", registry)

        assert fields.description == "my-scan"
        assert fields.tag_names == ["home"]

    def test_tags_without_date(self, parser, registry):
        """Test tags are parsed even when the date is missing."""
        fields = parser.parse("scan__home_bills.pdf", registry)

        assert fields.date == TODAY
        assert fields.description == "scan"
        assert fields.tag_names == ["home", "bills"]

    def test_description_is_normalized(self, parser, registry):
        """Test descriptions taken from a filename are normalized."""
        fields = parser.parse("2018-01-25--Invoice-Power__home.pdf", registry)

        assert fields.description == "invoice-power"

    def test_counts_across_documents(self, parser, registry):
        """Test parsing two documents shares the tag and counts both."""
        parser.parse("2018-01-25--a__home.pdf", registry)
        parser.parse("2018-02-25--b__home_bills.pdf", registry)

        assert registry.get("home").count == 2
        assert registry.get("bills").count == 1

    def test_repeated_tag_counted_once(self, parser, registry):
        """Test a tag repeated in the tag block is attached once."""
        fields = parser.parse("2018-01-25--rent__home_bills_home.pdf", registry)

        assert fields.tag_names == ["home", "bills"]
        assert registry.get("home").count == 1

    def test_full_path(self, parser, registry):
        """Test only the basename of a path is parsed."""
        fields = parser.parse("/tmp/2018-01-25--x__y/2019-02-03--rent__home.pdf", registry)

        assert fields.date == date(2019, 2, 3)
        assert fields.description == "rent"

    def test_parse_document(self, parser, registry):
        """Test a discovered document carries the parsed fields."""
        document = parser.parse_document(
            Path("/inbox/2018-01-25--invoice__home.pdf"), registry
        )

        assert document.path == Path("/inbox/2018-01-25--invoice__home.pdf")
        assert document.date == date(2018, 1, 25)
        assert document.description == "invoice"
        assert document.tag_names == ["home"]
        assert document.state is DocumentState.DISCOVERED


class TestDocument:
    """Tests for Document."""

    @pytest.fixture
    def document(self):
        """Create a bare document."""
        return Document(path=Path("/inbox/scan.pdf"), date=date(2018, 1, 25))

    def test_description_normalized_on_assignment(self, document):
        """Test raw descriptions are never stored."""
        document.set_description("Invoice: Electricity")

        assert document.description == "invoice-electricity"
        assert document.state is DocumentState.EDITABLE

    def test_add_tag(self, document, registry):
        """Test user tags are slugified and put first."""
        document.add_tag("home", registry)
        tag = document.add_tag("Utilities", registry)

        assert tag.name == "utilities"
        assert document.tag_names == ["utilities", "home"]

    def test_add_duplicate_tag(self, document, registry):
        """Test attaching a tag twice is a no-op."""
        document.add_tag("home", registry)

        assert document.add_tag("Home", registry) is None
        assert document.tag_names == ["home"]
        assert registry.get("home").count == 1

    def test_add_empty_tag(self, document, registry):
        """Test names that normalize to nothing are ignored."""
        assert document.add_tag("!!", registry) is None
        assert document.tag_names == []

    def test_remove_tag_keeps_count(self, document, registry):
        """Test detaching does not change the registry count."""
        document.add_tag("home", registry)

        assert document.remove_tag("home") is True
        assert document.tag_names == []
        assert registry.get("home").count == 1
        assert document.remove_tag("home") is False
