"""
Mailbox list parsing.

Decomposes one raw header value ("Bessie Berry <bessie@acme.com>, x@y.com")
into an ordered list of Mailbox values.
"""

import logging
from typing import Iterable, List, Optional, Pattern

from . import matching
from .catalog import PatternCatalog
from .models import Mailbox
from .patterns import MAILBOX_SEPARATORS

logger = logging.getLogger(__name__)


class MailboxParser:
    """Turns raw header text into Mailbox values using the catalog."""

    def __init__(self, catalog: PatternCatalog):
        self.catalog = catalog

    def is_valid_address(self, address: Optional[str]) -> bool:
        """Check address syntax against the "mailbox_address" category."""
        return bool(matching.match(self.catalog['mailbox_address'], address))

    def prepare(
        self,
        address: Optional[str],
        name: Optional[str],
        candidate: Optional[str] = None
    ) -> Mailbox:
        """
        Build a Mailbox, enforcing the address invariants.

        Args:
            address: Raw address text
            name: Raw name text
            candidate: Raw text the pair was read from; becomes the name when
                the address fails validation (default: the address itself)

        Returns:
            Mailbox: address is None when invalid; name is None when it only
                repeats the address
        """
        address = address.strip() if address else None
        name = name.strip() if name else None

        if not self.is_valid_address(address):
            # Some clients only include the name
            fallback = candidate.strip() if candidate else None
            name = fallback or address or name
            address = None

        # Some clients fill the name with the address
        # ("bessie.berry@acme.com <bessie.berry@acme.com>")
        if name == address:
            name = None

        return Mailbox(address=address, name=name)

    def parse(self, value: Optional[str]) -> List[Mailbox]:
        """
        Parse every mailbox in a header value.

        Always returns a list; there is no flag to collapse it to a single
        mailbox. Callers pick the first entry for From and keep the whole
        list for To and Cc.

        Args:
            value: Raw header value, possibly holding several mailboxes

        Returns:
            List[Mailbox]: Mailboxes in header order (empty if none)
        """
        remaining = (value or '').strip()
        mailboxes = []

        while remaining:
            outcome = matching.match(self.catalog['mailbox'], remaining)

            if not outcome or not outcome.text:
                mailboxes.append(self.prepare(remaining, None))
                break

            mailboxes.append(self.prepare(
                outcome.group('address'),
                outcome.named.get('name'),
                candidate=outcome.text,
            ))

            remaining = remaining[outcome.position + len(outcome.text):].strip()
            if remaining and remaining[0] in MAILBOX_SEPARATORS:
                remaining = remaining[1:].strip()

        return mailboxes

    def from_header(self, patterns: Iterable[Pattern], text: str) -> Optional[List[Mailbox]]:
        """
        Locate a header in text and parse its mailboxes.

        Args:
            patterns: Header label patterns exposing a "value" group
            text: Text holding the header block

        Returns:
            List[Mailbox], or None if the header is absent or empty
        """
        outcome = matching.match(patterns, text)
        if not outcome:
            return None

        mailboxes = self.parse(outcome.group('value'))
        if not mailboxes:
            return None

        logger.debug(f"Parsed {len(mailboxes)} mailbox(es) from header: {outcome.text.strip()[:80]}")
        return mailboxes
