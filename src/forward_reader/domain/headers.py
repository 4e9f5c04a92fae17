"""
Envelope extraction from the embedded email.

Each header role runs an ordered cascade of strategies, each more permissive
than the last. A strategy takes (text, body) and returns a value or None;
the first non-None value wins. "text" is the quote-stripped embedded email,
"body" the normalized full body (needed for separator lines that carry
the author and date inline).
"""

import logging
from typing import Any, Callable, List, Optional, Sequence

from . import matching
from .catalog import PatternCatalog
from .mailboxes import MailboxParser
from .models import Mailbox

logger = logging.getLogger(__name__)

Strategy = Callable[[str, str], Any]


def first_success(strategies: Sequence[Strategy], text: str, body: str, default: Any = None) -> Any:
    """Return the first strategy result that is not None."""
    for strategy in strategies:
        result = strategy(text, body)
        if result is not None:
            logger.debug(f"Header strategy {strategy.__name__} succeeded")
            return result
    return default


class HeaderExtractor:
    """Extracts From, To, Cc, Subject and Date from an embedded email."""

    def __init__(self, catalog: PatternCatalog, mailbox_parser: Optional[MailboxParser] = None):
        self.catalog = catalog
        self.mailboxes = mailbox_parser or MailboxParser(catalog)

    # ------------------------------------------------------------------
    # Public role extractors
    # ------------------------------------------------------------------

    def subject(self, text: str) -> Optional[str]:
        return first_success((self._subject_label, self._subject_lax), text, '')

    def sender(self, text: str, body: str) -> Mailbox:
        strategies = (
            self._from_label,  # Apple Mail, Gmail, Outlook Live / 365, New Outlook 2019, Thunderbird
            self._from_separator,  # Outlook 2019
            self._from_lax,  # Yahoo Mail
        )
        return first_success(strategies, text, body, default=Mailbox())

    def to(self, text: str) -> List[Mailbox]:
        return first_success((self._to_label, self._to_lax), text, '', default=[])

    def cc(self, text: str) -> List[Mailbox]:
        return first_success((self._cc_label, self._cc_lax), text, '', default=[])

    def date(self, text: str, body: str) -> Optional[str]:
        strategies = (
            self._date_label,
            self._date_separator,  # Outlook 2019
            self._date_lax,  # Yahoo Mail
        )
        return first_success(strategies, text, body)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _value(self, category: str, text: str) -> Optional[str]:
        outcome = matching.match(self.catalog[category], text)
        if not outcome:
            return None
        return (outcome.group('value') or '').strip()

    def _strip(self, text: str, *categories: str) -> str:
        # Some clients put Subject / Date / Cc on the same line as To,
        # which pollutes the lax captures
        for category in categories:
            text = matching.replace(self.catalog[category], text)
        return text

    # ------------------------------------------------------------------
    # Subject
    # ------------------------------------------------------------------

    def _subject_label(self, text: str, body: str) -> Optional[str]:
        return self._value('original_subject', text)

    def _subject_lax(self, text: str, body: str) -> Optional[str]:
        return self._value('original_subject_lax', text)

    # ------------------------------------------------------------------
    # From
    # ------------------------------------------------------------------

    def _from_label(self, text: str, body: str) -> Optional[Mailbox]:
        authors = self.mailboxes.from_header(self.catalog['original_from'], text)
        if not authors:
            return None

        if len(authors) == 1:
            return None if authors[0].is_empty else authors[0]

        # Several mailboxes: trust the first one only if it has an address
        return authors[0] if authors[0].address else None

    def _from_separator(self, text: str, body: str) -> Optional[Mailbox]:
        outcome = matching.match(self.catalog['separator_with_information'], body)
        if not outcome or not outcome.group('from_address'):
            return None
        return self.mailboxes.prepare(outcome.group('from_address'), outcome.group('from_name'))

    def _from_lax(self, text: str, body: str) -> Optional[Mailbox]:
        outcome = matching.match(self.catalog['original_from_lax'], text)
        if not outcome:
            return None
        return self.mailboxes.prepare(outcome.group('from_address'), outcome.group('from_name'))

    # ------------------------------------------------------------------
    # To / Cc
    # ------------------------------------------------------------------

    def _to_label(self, text: str, body: str) -> Optional[List[Mailbox]]:
        return self.mailboxes.from_header(self.catalog['original_to'], text)

    def _to_lax(self, text: str, body: str) -> Optional[List[Mailbox]]:
        clean = self._strip(text, 'original_subject_lax', 'original_date_lax', 'original_cc_lax')
        return self.mailboxes.from_header(self.catalog['original_to_lax'], clean)

    def _cc_label(self, text: str, body: str) -> Optional[List[Mailbox]]:
        return self.mailboxes.from_header(self.catalog['original_cc'], text)

    def _cc_lax(self, text: str, body: str) -> Optional[List[Mailbox]]:
        clean = self._strip(text, 'original_subject_lax', 'original_date_lax')
        return self.mailboxes.from_header(self.catalog['original_cc_lax'], clean)

    # ------------------------------------------------------------------
    # Date
    # ------------------------------------------------------------------

    def _date_label(self, text: str, body: str) -> Optional[str]:
        return self._value('original_date', text)

    def _date_separator(self, text: str, body: str) -> Optional[str]:
        outcome = matching.match(self.catalog['separator_with_information'], body)
        if not outcome or outcome.group('date') is None:
            return None
        return outcome.group('date').strip()

    def _date_lax(self, text: str, body: str) -> Optional[str]:
        return self._value('original_date_lax', self._strip(text, 'original_subject_lax'))
