"""
Tests for envelope extraction (per-role strategy cascades).
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from forward_reader.domain.headers import HeaderExtractor, first_success
from forward_reader.domain.models import Mailbox


GMAIL_HEADERS = (
    "From: John Doe <john.doe@acme.com>\n"
    "Date: Thu, Feb 6, 2020 at 8:32 AM\n"
    "Subject: Integer consequat non purus\n"
    "To: Bessie Berry <bessie.berry@acme.com>\n"
    "Cc: Suzanne <suzanne@globex.corp>\n"
    "\n"
    "Aenean quis diam urna."
)

# Yahoo Mail runs the header labels together on one line
YAHOO_HEADERS = (
    "From: John Doe <john.doe@acme.com>To: Bessie Berry <bessie.berry@acme.com>"
    "Sent: Thursday, February 6, 2020, 08:32:39 AM GMT+1"
    "Subject: Integer consequat non purus\n"
    "\n"
    "Aenean quis diam urna."
)

YAHOO_DE_HEADERS = (
    "Von: John Doe <john.doe@acme.com>An: Bessie Berry <bessie.berry@acme.com>"
    "Datum: Donnerstag, 6. Februar 2020, 08:32:39 MEZ"
    "Betreff: Integer consequat non purus\n"
    "\n"
    "Aenean quis diam urna."
)

OUTLOOK_2019_BODY = (
    "Praesent suscipit egestas.\n"
    "\n"
    'On Thursday, February 6, 2020 8:32 AM, "John Doe" <john.doe@acme.com> wrote:\n'
    "\n"
    "Aenean quis diam urna."
)


@pytest.fixture
def headers(catalog):
    """Header extractor on the built-in catalog."""
    return HeaderExtractor(catalog)


class TestFirstSuccess:
    """Test the cascade combinator."""

    def test_first_non_none_wins(self):
        """Test later strategies are skipped once one succeeds."""
        calls = []

        def empty(text, body):
            calls.append('empty')
            return None

        def found(text, body):
            calls.append('found')
            return ''

        def never(text, body):
            calls.append('never')
            return 'x'

        assert first_success((empty, found, never), 'text', 'body') == ''
        assert calls == ['empty', 'found']

    def test_default_when_all_fail(self):
        """Test the default is returned when every strategy fails."""
        def empty(text, body):
            return None

        assert first_success((empty,), 'text', 'body', default=[]) == []


class TestLabelledHeaders:
    """Test extraction from a regular header block."""

    def test_subject(self, headers):
        """Test subject label."""
        assert headers.subject(GMAIL_HEADERS) == "Integer consequat non purus"

    def test_sender(self, headers):
        """Test From label."""
        assert headers.sender(GMAIL_HEADERS, GMAIL_HEADERS) == Mailbox(
            address="john.doe@acme.com", name="John Doe"
        )

    def test_to(self, headers):
        """Test To label returns a list even for one recipient."""
        assert headers.to(GMAIL_HEADERS) == [
            Mailbox(address="bessie.berry@acme.com", name="Bessie Berry")
        ]

    def test_cc(self, headers):
        """Test Cc label."""
        assert headers.cc(GMAIL_HEADERS) == [
            Mailbox(address="suzanne@globex.corp", name="Suzanne")
        ]

    def test_date(self, headers):
        """Test Date label keeps the raw text."""
        assert headers.date(GMAIL_HEADERS, GMAIL_HEADERS) == "Thu, Feb 6, 2020 at 8:32 AM"

    def test_localized_labels(self, headers):
        """Test French header labels."""
        text = (
            "De : John Doe <john.doe@acme.com>\n"
            "Envoyé : jeudi 6 février 2020 08:32\n"
            "À : Bessie Berry <bessie.berry@acme.com>\n"
            "Objet : Integer consequat non purus\n"
        )

        assert headers.sender(text, text).address == "john.doe@acme.com"
        assert headers.to(text) == [Mailbox(address="bessie.berry@acme.com", name="Bessie Berry")]
        assert headers.subject(text) == "Integer consequat non purus"
        assert headers.date(text, text) == "jeudi 6 février 2020 08:32"


class TestLaxHeaders:
    """Test fallback strategies on run-on header lines."""

    def test_lax_subject(self, headers):
        """Test subject found mid-line."""
        assert headers.subject(YAHOO_HEADERS) == "Integer consequat non purus"

    def test_sender_from_run_on_line(self, headers):
        """Test the first mailbox of a run-on From line is the author."""
        assert headers.sender(YAHOO_HEADERS, YAHOO_HEADERS) == Mailbox(
            address="john.doe@acme.com", name="John Doe"
        )

    def test_lax_to_keeps_unstripped_labels(self, headers):
        """Test only the first Subject, Date and Cc labels are stripped before reading To."""
        assert headers.to(YAHOO_HEADERS) == [
            Mailbox(address="bessie.berry@acme.com", name="Bessie Berry"),
            Mailbox(address=None, name="Sent: Thursday, February 6, 2020, 08:32:39 AM GMT+1"),
        ]

    def test_lax_to_strips_datum(self, headers):
        """Test a run-on Datum label is cut with the rest of its line."""
        assert headers.to(YAHOO_DE_HEADERS) == [
            Mailbox(address="bessie.berry@acme.com", name="Bessie Berry")
        ]

    def test_lax_subject_localized(self, headers):
        """Test Betreff found mid-line."""
        assert headers.subject(YAHOO_DE_HEADERS) == "Integer consequat non purus"

    def test_lax_date(self, headers):
        """Test Sent found mid-line."""
        assert headers.date(YAHOO_HEADERS, YAHOO_HEADERS) == "Thursday, February 6, 2020, 08:32:39 AM GMT+1"

    def test_missing_cc(self, headers):
        """Test absent Cc gives an empty list."""
        assert headers.cc(YAHOO_HEADERS) == []


class TestSeparatorWithInformation:
    """Test author and date read from the separator line itself."""

    def test_sender_from_separator(self, headers):
        """Test "On <date>, <name> <address> wrote:" gives the author."""
        text = "Aenean quis diam urna."

        assert headers.sender(text, OUTLOOK_2019_BODY) == Mailbox(
            address="john.doe@acme.com", name="John Doe"
        )

    def test_date_from_separator(self, headers):
        """Test "On <date>, <name> <address> wrote:" gives the date."""
        text = "Aenean quis diam urna."

        assert headers.date(text, OUTLOOK_2019_BODY) == "Thursday, February 6, 2020 8:32 AM"

    @pytest.mark.parametrize('line,date', [
        ("John Doe <john.doe@acme.com> kirjoitti 6.2.2020 kello 8.32:", "6.2.2020 kello 8.32"),
        (
            "John Doe <john.doe@acme.com> skrev følgende den 6. februar 2020 kl. 08:32:",
            "6. februar 2020 kl. 08:32",
        ),
        (
            '"John Doe" <john.doe@acme.com>, 6 Şub 2020 Per 08:32 tarihinde şunu yazdı:',
            "6 Şub 2020 Per 08:32",
        ),
    ])
    def test_name_before_date(self, headers, line, date):
        """Test Finnish, Norwegian and Turkish lines that put the author first."""
        body = "Praesent suscipit egestas.\n\n" + line + "\n\nAenean quis diam urna."
        text = "Aenean quis diam urna."

        assert headers.sender(text, body) == Mailbox(
            address="john.doe@acme.com", name="John Doe"
        )
        assert headers.date(text, body) == date


class TestNothingFound:
    """Test roles with no matching header."""

    def test_empty_values(self, headers):
        """Test every role falls back to its empty value."""
        text = "Aenean quis diam urna."

        assert headers.subject(text) is None
        assert headers.sender(text, text) == Mailbox()
        assert headers.to(text) == []
        assert headers.cc(text) == []
        assert headers.date(text, text) is None
