"""
Forwarded email reader.

Detects whether a plain-text email is a forward and rebuilds the embedded
original email (sender, recipients, subject, date and body).

    >>> from forward_reader import read
    >>> result = read(body, subject="Fwd: Lorem ipsum")
    >>> result.forwarded, result.email.from_.address
"""

from .domain.catalog import CatalogError, PatternCatalog, build_catalog, default_catalog
from .domain.forward_parser import ForwardParser, read
from .domain.models import Mailbox, OriginalEmail, ParseResult

__all__ = [
    'read',
    'ForwardParser',
    'Mailbox',
    'OriginalEmail',
    'ParseResult',
    'PatternCatalog',
    'CatalogError',
    'build_catalog',
    'default_catalog',
]
