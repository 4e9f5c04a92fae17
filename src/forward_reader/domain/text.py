"""
Text normalization applied before and after the forward boundary is found.
"""

from typing import Iterable, Pattern

from .catalog import PatternCatalog


def _substitute(patterns: Iterable[Pattern], replacement: str, text: str) -> str:
    for pattern in patterns:
        text = pattern.sub(replacement, text)
    return text


def normalize_body(catalog: PatternCatalog, text: str) -> str:
    """
    Canonicalize line endings and whitespace artifacts.

    Order: line endings -> byte order marks -> trailing non-breaking spaces
    -> remaining non-breaking spaces. Idempotent.
    """
    text = _substitute(catalog['line_break'], '\n', text or '')
    text = _substitute(catalog['byte_order_mark'], '', text)
    text = _substitute(catalog['trailing_non_breaking_space'], '', text)
    return _substitute(catalog['non_breaking_space'], ' ', text)


def strip_quotes(catalog: PatternCatalog, text: str) -> str:
    """
    Remove quoting from the embedded email text.

    Quote-only lines are cleared first (keeping their line break) so later
    steps do not treat the marker as content.
    """
    text = _substitute(catalog['byte_order_mark'], '', text or '')
    text = _substitute(catalog['quote_line_break'], '', text)
    text = _substitute(catalog['quote'], '', text)
    return _substitute(catalog['four_spaces'], '', text)
