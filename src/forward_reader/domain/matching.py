"""
Matching engine.

Runs an ordered list of candidate patterns against a string in one of three
modes and resolves which candidate wins:

- match:   earliest match position wins
- split:   earliest boundary (shortest leading segment) wins, then the
           shortest captured delimiter
- replace: first candidate whose result does not grow the text wins

Exact ties always go to the earlier candidate, so catalog order must stay
stable. "Nothing found" is returned as NO_MATCH, never raised.
"""

from typing import Iterable, List, Optional, Pattern, Sequence, Union

from .models import NO_MATCH, ExcludeFn, Matched, NoMatch, Split


def match(patterns: Iterable[Pattern], text: Optional[str]) -> Union[Matched, NoMatch]:
    """
    Find the earliest match among candidate patterns.

    Args:
        patterns: Candidate patterns, in catalog order
        text: String to search

    Returns:
        Matched for the winning candidate, or NO_MATCH
    """
    if not text:
        return NO_MATCH

    best = None
    for pattern in patterns:
        found = pattern.search(text)
        if found is None:
            continue
        if best is None or found.start() < best.start():
            best = found

    if best is None:
        return NO_MATCH

    return Matched(
        captures=tuple(group or '' for group in best.groups()),
        named=best.groupdict(),
        position=best.start(),
        text=best.group(0),
    )


def split(patterns: Iterable[Pattern], text: Optional[str]) -> Union[Split, NoMatch]:
    """
    Split text at the outermost boundary found by any candidate.

    Captured delimiter groups are kept as their own segments, so no text is
    lost. Groups that did not participate become empty strings.

    Args:
        patterns: Candidate patterns, in catalog order
        text: String to split

    Returns:
        Split for the winning candidate, or NO_MATCH
    """
    if not text:
        return NO_MATCH

    best = None
    for pattern in patterns:
        parts = pattern.split(text)
        if len(parts) <= 1:
            continue

        candidate = Split(
            parts=tuple(part or '' for part in parts),
            delimiter_length=len(parts[1] or ''),
        )
        if best is None or _precedes(candidate, best):
            best = candidate

    return best if best is not None else NO_MATCH


def _precedes(candidate: Split, current: Split) -> bool:
    if len(candidate.parts[0]) != len(current.parts[0]):
        return len(candidate.parts[0]) < len(current.parts[0])
    return candidate.delimiter_length < current.delimiter_length


def replace(patterns: Iterable[Pattern], text: Optional[str]) -> str:
    """
    Strip every occurrence of the first applicable candidate.

    Args:
        patterns: Candidate patterns, in catalog order
        text: String to clean

    Returns:
        str: Text with matches removed. A strip never grows the text, so the
            first candidate decides, even when it matches nothing
    """
    text = text or ''
    for pattern in patterns:
        stripped = pattern.sub('', text)
        if len(stripped) <= len(text):
            return stripped
    return text


def reconcile(
    parts: Union[Split, Sequence[str]],
    min_parts: int,
    seed_indices: Iterable[int],
    exclude: Optional[ExcludeFn] = None
) -> str:
    """
    Merge split segments back into one string.

    The result starts with the seed segments. When there are more than
    min_parts segments, every segment from index min_parts on is appended
    unless exclude(index) is true. For nested forwards this drops only the
    re-captured delimiter fragments and keeps all bodies in order.

    Args:
        parts: Segments produced by split()
        min_parts: Index of the first segment considered for appending
        seed_indices: Segments always included first
        exclude: Optional predicate marking segment indices to drop

    Returns:
        str: Concatenated text
    """
    pieces: List[str] = [parts[index] for index in seed_indices]

    if len(parts) > min_parts:
        for index in range(min_parts, len(parts)):
            if exclude is not None and exclude(index):
                continue
            pieces.append(parts[index])

    return ''.join(pieces)


def every_third_from_second(index: int) -> bool:
    """Exclusion rule for line-captured header splits (drops the value groups)."""
    return index % 3 == 2
