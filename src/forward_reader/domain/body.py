"""
Forward boundary detection and original body extraction.
"""

import logging
from typing import Optional

from . import matching
from .catalog import PatternCatalog
from .matching import every_third_from_second
from .models import BodySplit

logger = logging.getLogger(__name__)

# Header lines that may close the header block of the embedded email
BODY_BOUNDARY_CATEGORIES = (
    'original_subject',
    'original_cc',
    'original_to',
    'original_reply_to',
    'original_date',
)


class BodySplitter:
    """
    Cuts a normalized body into the forwarder's message and the embedded email.

    Two strategies, in order:
    1. Explicit separator line (Apple Mail, Gmail, Outlook Live / 365,
       Outlook 2019, Yahoo Mail, Thunderbird, ...). Always attempted.
    2. Bare "From:" header line (New Outlook 2019, Outlook Live / 365).
       Ambiguous, so only attempted when the subject already confirmed
       the forward.
    """

    def __init__(self, catalog: PatternCatalog):
        self.catalog = catalog

    def split(self, body: str, subject_confirmed_forward: bool = False) -> Optional[BodySplit]:
        """
        Locate the forward boundary.

        Args:
            body: Normalized email body
            subject_confirmed_forward: Whether the subject carried a forward prefix

        Returns:
            BodySplit, or None if no boundary was found
        """
        result = self._split_on_separator(body)

        if result is None and subject_confirmed_forward:
            result = self._split_on_from_line(body)

        return result

    def _split_on_separator(self, body: str) -> Optional[BodySplit]:
        # Line variant keeps the separator line itself as a segment:
        #   0: message, 1: separator line, 2: original email
        # Nested forwards repeat (line, text) pairs after that.
        outcome = matching.split(self.catalog.line('separator'), body)
        if not outcome or len(outcome) < 3:
            return None

        logger.debug(f"Separator split: {len(outcome)} segment(s)")
        embedded = matching.reconcile(outcome, 3, [2])
        return self._build(outcome[0], embedded, body)

    def _split_on_from_line(self, body: str) -> Optional[BodySplit]:
        # Segments repeat as (from line, from value, following text)
        outcome = matching.split(self.catalog.line('original_from'), body)
        if not outcome or len(outcome) <= 3:
            return None

        logger.debug(f"From-line split: {len(outcome)} segment(s)")
        embedded = matching.reconcile(outcome, 4, [1, 3], every_third_from_second)
        return self._build(outcome[0], embedded, body)

    @staticmethod
    def _build(message: str, embedded: str, body: str) -> Optional[BodySplit]:
        embedded = embedded.strip()
        if not embedded:
            return None

        return BodySplit(
            message=message.strip() or None,
            embedded_text=embedded,
            body=body,
        )


def extract_original_body(catalog: PatternCatalog, text: str) -> str:
    """
    Get the body of the embedded email, without its header block.

    The header block ends at the first header line followed by a blank line.
    Failing that, everything after the (lax) Subject line is the body.

    Args:
        catalog: Pattern catalog
        text: Embedded email text, quotes already stripped

    Returns:
        str: Trimmed body, or the text unchanged if no header block was found
    """
    for category in BODY_BOUNDARY_CATEGORIES:
        outcome = matching.split(catalog.line(category), text)
        if outcome and len(outcome) > 3 and outcome[3].startswith('\n\n'):
            body = matching.reconcile(outcome, 4, [3], every_third_from_second)
            return body.strip()

    outcome = matching.split(
        catalog.line('original_subject') + catalog.line('original_subject_lax'),
        text
    )
    if outcome and len(outcome) > 3:
        body = matching.reconcile(outcome, 4, [3], every_third_from_second)
        return body.strip()

    return text
