"""
Forward parsing pipeline - core business logic.

This module reads one email body (and optionally its subject) and decides
whether it is a forward:
1. Normalize the body
2. Classify the subject (if supplied)
3. Split the body at the forward boundary
4. Strip quoting from the embedded email
5. Extract the original envelope and body
6. Assemble the ParseResult

Heuristics never raise. An email that is not a forward comes back as
ParseResult(forwarded=False) with empty fields.
"""

import logging
from typing import Optional

from . import matching
from .body import BodySplitter, extract_original_body
from .catalog import PatternCatalog, default_catalog
from .headers import HeaderExtractor
from .models import OriginalEmail, ParseResult
from .text import normalize_body, strip_quotes

logger = logging.getLogger(__name__)


class ForwardParser:
    """
    Detects forwards and reconstructs the embedded original email.

    The parser holds no per-call state, so one instance can serve any number
    of read() calls, concurrently if needed.
    """

    def __init__(self, catalog: Optional[PatternCatalog] = None):
        """
        Initialize forward parser.

        Args:
            catalog: Pattern catalog (default: built-in catalog)
        """
        self.catalog = catalog or default_catalog()
        self.splitter = BodySplitter(self.catalog)
        self.headers = HeaderExtractor(self.catalog)

    def read(self, body: str, subject: Optional[str] = None) -> ParseResult:
        """
        Read an email and extract the forwarded original, if any.

        Args:
            body: Plain-text email body
            subject: Email subject line (optional)

        Returns:
            ParseResult: forwarded=False when no forward was detected
        """
        body = normalize_body(self.catalog, body)

        subject_remainder = None
        if subject is not None:
            subject_remainder = self.parse_subject(subject)
        forwarded = subject_remainder is not None

        # The subject prefix only vouches for the ambiguous From-line split;
        # an explicit separator is trusted on its own
        split = self.splitter.split(body, subject_confirmed_forward=forwarded)

        email = OriginalEmail()
        message = None

        if split is not None:
            forwarded = True
            message = split.message
            email = self.parse_original_email(split.embedded_text, split.body)
        elif forwarded:
            logger.debug("Subject has a forward prefix but no boundary was found in the body")

        # The subject line of the forward wins over the embedded Subject header
        if subject_remainder is not None:
            email.subject = subject_remainder

        result = ParseResult(forwarded=forwarded, message=message, email=email)
        logger.debug(f"Read result: {result!r}")
        return result

    def parse_subject(self, subject: str) -> Optional[str]:
        """
        Strip a forward prefix from a subject line.

        Args:
            subject: Email subject line

        Returns:
            str: Subject without its prefix (possibly ""), or None if the
                subject carries no forward prefix
        """
        outcome = matching.match(self.catalog['subject'], subject)
        if not outcome:
            return None
        return (outcome.group('value') or '').strip()

    def parse_original_email(self, text: str, body: str) -> OriginalEmail:
        """
        Rebuild the original email from the embedded text.

        Args:
            text: Embedded email text, as cut by the body splitter
            body: Full normalized body (some clients put the author on the
                separator line)

        Returns:
            OriginalEmail: Extracted fields (None / empty where not found)
        """
        text = strip_quotes(self.catalog, text)

        return OriginalEmail(
            body=extract_original_body(self.catalog, text),
            from_=self.headers.sender(text, body),
            to=self.headers.to(text),
            cc=self.headers.cc(text),
            subject=self.headers.subject(text),
            date=self.headers.date(text, body),
        )


def read(body: str, subject: Optional[str] = None) -> ParseResult:
    """
    Read an email using the built-in pattern catalog.

    Args:
        body: Plain-text email body
        subject: Email subject line (optional)

    Returns:
        ParseResult
    """
    return ForwardParser().read(body, subject)
