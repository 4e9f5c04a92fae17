"""
Data models for the forwarded email domain.

These type-safe data structures define clear contracts between the pipeline
components. All of them are transient value objects scoped to one read() call.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union


@dataclass
class Mailbox:
    """
    Sender or recipient identity.

    Attributes:
        address: Email address (None if no valid address was found)
        name: Display name (None if absent or identical to the address)
    """
    address: Optional[str] = None
    name: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if neither address nor name was extracted."""
        return not (self.address or self.name)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            'address': self.address,
            'name': self.name,
        }


@dataclass
class OriginalEmail:
    """
    Envelope and body of the email embedded in a forward.

    Attributes:
        body: Body of the original email, header block removed
        from_: Original author
        to: Primary recipients, in header order
        cc: Carbon-copy recipients, in header order
        subject: Original subject line
        date: Raw date text, locale format preserved (never parsed)
    """
    body: Optional[str] = None
    from_: Mailbox = field(default_factory=Mailbox)
    to: List[Mailbox] = field(default_factory=list)
    cc: List[Mailbox] = field(default_factory=list)
    subject: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the wire format.

        Returns:
            Dict keyed by header role ("from" rather than "from_")
        """
        return {
            'body': self.body,
            'from': self.from_.to_dict(),
            'to': [mailbox.to_dict() for mailbox in self.to],
            'cc': [mailbox.to_dict() for mailbox in self.cc],
            'subject': self.subject,
            'date': self.date,
        }


@dataclass
class ParseResult:
    """
    Result of reading one email.

    Attributes:
        forwarded: Whether the email was detected as a forward
        message: Text the forwarder typed above the original email
            (only set when forwarded and the body was split)
        email: The reconstructed original email (empty fields if not found)
    """
    forwarded: bool
    message: Optional[str] = None
    email: OriginalEmail = field(default_factory=OriginalEmail)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'forwarded': self.forwarded,
            'message': self.message,
            'email': self.email.to_dict(),
        }

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.forwarded:
            return (
                f"ParseResult(forwarded=True, from={self.email.from_.address}, "
                f"subject={self.email.subject})"
            )
        return "ParseResult(forwarded=False)"


@dataclass
class BodySplit:
    """
    Body cut at the forward boundary.

    Attributes:
        message: New text above the boundary (None if empty)
        embedded_text: Reconciled text of the embedded email, boundary line included
        body: Full normalized body the split was made on
    """
    message: Optional[str]
    embedded_text: str
    body: str


# ============================================================================
# Match outcomes (Matching Engine results)
# ============================================================================

class NoMatch:
    """Outcome of a heuristic that found nothing. Always falsy."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NoMatch()"


NO_MATCH = NoMatch()


@dataclass(frozen=True)
class Matched:
    """
    Winning outcome of a match-mode run.

    Attributes:
        captures: Positional capture groups ("" for groups that did not participate)
        named: Named capture groups (None for groups that did not participate)
        position: Start offset of the match in the searched text
        text: Whole matched substring
    """
    captures: Tuple[str, ...]
    named: Dict[str, Optional[str]]
    position: int
    text: str

    def group(self, name: str) -> Optional[str]:
        """Read a capture by its semantic field name."""
        return self.named.get(name)


@dataclass(frozen=True)
class Split:
    """
    Winning outcome of a split-mode run.

    Attributes:
        parts: Segments, with captured delimiter groups interleaved
        delimiter_length: Length of the first captured delimiter
    """
    parts: Tuple[str, ...]
    delimiter_length: int

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> str:
        return self.parts[index]


MatchOutcome = Union[NoMatch, Matched, Split]
ExcludeFn = Callable[[int], bool]
