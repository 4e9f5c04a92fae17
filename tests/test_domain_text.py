"""
Tests for body normalization and quote stripping.
"""

import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from forward_reader.domain.text import normalize_body, strip_quotes


class TestNormalizeBody:
    """Test normalize_body."""

    def test_line_endings(self, catalog):
        """Test CRLF and lone CR become LF."""
        assert normalize_body(catalog, "a\r\nb\rc\nd") == "a\nb\nc\nd"

    def test_byte_order_mark_removed(self, catalog):
        """Test BOM characters are dropped."""
        assert normalize_body(catalog, "\ufeffFrom: a@b.com") == "From: a@b.com"

    def test_non_breaking_spaces(self, catalog):
        """Test trailing NBSP removed, inner NBSP turned into spaces."""
        assert normalize_body(catalog, "a\xa0b\xa0\nc") == "a b\nc"

    def test_none_body(self, catalog):
        """Test missing body normalizes to empty text."""
        assert normalize_body(catalog, None) == ""

    def test_idempotent(self, catalog):
        """Test normalizing twice equals normalizing once."""
        samples = [
            "Hello\r\n\r\n\ufeffWorld\xa0\r\n",
            "a\xa0\xa0\rb",
            "\r\r\n\n",
            "plain text",
        ]
        for sample in samples:
            once = normalize_body(catalog, sample)
            assert normalize_body(catalog, once) == once


class TestStripQuotes:
    """Test strip_quotes."""

    def test_quote_markers_removed(self, catalog):
        """Test leading quote markers are removed."""
        text = "> From: John Doe <john.doe@acme.com>\n> Subject: Hi"

        assert strip_quotes(catalog, text) == "From: John Doe <john.doe@acme.com>\nSubject: Hi"

    def test_quote_only_lines_keep_line_break(self, catalog):
        """Test blank quoted lines stay blank lines."""
        text = "> Subject: Hi\n>\n> body text"

        assert strip_quotes(catalog, text) == "Subject: Hi\n\nbody text"

    def test_nested_quote_markers(self, catalog):
        """Test runs of markers are removed at once."""
        assert strip_quotes(catalog, ">> nested\n>>\n>> text") == "nested\n\ntext"

    def test_four_space_indent(self, catalog):
        """Test four-space quoting is removed."""
        assert strip_quotes(catalog, "    From: a@b.com\n    To: c@d.com") == "From: a@b.com\nTo: c@d.com"

    def test_unquoted_text_unchanged(self, catalog):
        """Test regular text passes through."""
        assert strip_quotes(catalog, "From: a@b.com\n\nHello") == "From: a@b.com\n\nHello"
