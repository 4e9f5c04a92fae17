"""
Pattern catalog construction.

The catalog is built once from plain definitions (see patterns.py), validated,
compiled and frozen. Malformed data fails here, at startup, never during a
read() call.
"""

import functools
import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Pattern, Tuple

from .patterns import DEFAULT_DEFINITIONS, LINE_CATEGORIES

logger = logging.getLogger(__name__)

FLAG_BITS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
}

HEADER_CATEGORIES = (
    'original_subject', 'original_subject_lax', 'original_from', 'original_to',
    'original_to_lax', 'original_reply_to', 'original_cc', 'original_cc_lax',
    'original_date', 'original_date_lax',
)

# Named groups every pattern of a category must expose
REQUIRED_GROUPS: Dict[str, Tuple[str, ...]] = {
    'subject': ('value',),
    'separator_with_information': ('date', 'from_name', 'from_address'),
    'original_from_lax': ('from_name', 'from_address'),
    'mailbox': ('address',),
    **{category: ('value',) for category in HEADER_CATEGORIES},
}


class CatalogError(Exception):
    """Raised when pattern catalog data is malformed."""
    pass


@dataclass(frozen=True)
class PatternCategory:
    """
    Ordered, compiled patterns of one catalog category.

    Attributes:
        name: Category name (e.g. "separator")
        flags: Flag letters the patterns were compiled with
        patterns: Compiled patterns, catalog order preserved
        line: Same patterns wrapped so the whole matched line is captured
            (empty for categories never used in split mode)
    """
    name: str
    flags: str
    patterns: Tuple[Pattern, ...]
    line: Tuple[Pattern, ...] = ()


@dataclass(frozen=True)
class PatternCatalog:
    """Immutable mapping of category name to compiled patterns."""
    categories: Mapping[str, PatternCategory]

    def __getitem__(self, name: str) -> Tuple[Pattern, ...]:
        return self.categories[name].patterns

    def __contains__(self, name: object) -> bool:
        return name in self.categories

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def line(self, name: str) -> Tuple[Pattern, ...]:
        """
        Get the line-capturing variant of a category.

        Raises:
            KeyError: If the category has no line variant
        """
        category = self.categories[name]
        if not category.line:
            raise KeyError(f"Category '{name}' has no line variant")
        return category.line


def parse_flags(letters: str, category: str) -> int:
    """Convert flag letters ("im") to re flag bits."""
    bits = 0
    for letter in letters:
        if letter not in FLAG_BITS:
            raise CatalogError(f"Category '{category}': unknown regex flag '{letter}'")
        bits |= FLAG_BITS[letter]
    return bits


def _compile(source: str, flags: int, category: str) -> Pattern:
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise CatalogError(f"Category '{category}': invalid pattern {source!r}: {e}") from e


def build_category(name: str, definition: Mapping[str, Any], with_line: bool = False) -> PatternCategory:
    """
    Validate and compile one category definition.

    Args:
        name: Category name
        definition: Dict with "flags" (letters) and "patterns" (list of str)
        with_line: Also build the line-capturing variant

    Returns:
        PatternCategory: Compiled category

    Raises:
        CatalogError: If the definition is malformed
    """
    if not isinstance(definition, Mapping):
        raise CatalogError(f"Category '{name}': definition must be a mapping")

    sources = definition.get('patterns')
    if isinstance(sources, str) or not isinstance(sources, (list, tuple)):
        raise CatalogError(f"Category '{name}': 'patterns' must be a list of strings")
    if not sources:
        raise CatalogError(f"Category '{name}': no patterns defined")

    letters = definition.get('flags', '')
    if not isinstance(letters, str):
        raise CatalogError(f"Category '{name}': 'flags' must be a string of letters")
    flags = parse_flags(letters, name)

    required = REQUIRED_GROUPS.get(name, ())
    patterns = []
    lines = []
    for source in sources:
        if not isinstance(source, str) or not source:
            raise CatalogError(f"Category '{name}': patterns must be non-empty strings")

        pattern = _compile(source, flags, name)
        missing = [group for group in required if group not in pattern.groupindex]
        if missing:
            raise CatalogError(
                f"Category '{name}': pattern {source!r} is missing named group(s) "
                f"{', '.join(missing)}"
            )
        patterns.append(pattern)

        if with_line:
            lines.append(_compile(f"({source})", flags, name))

    return PatternCategory(
        name=name,
        flags=letters,
        patterns=tuple(patterns),
        line=tuple(lines),
    )


def merge_definitions(
    base: Mapping[str, Mapping[str, Any]],
    overrides: Mapping[str, Any]
) -> Dict[str, Dict[str, Any]]:
    """
    Merge an override document into base definitions.

    Override patterns are appended after the base patterns unless the override
    sets "replace": true. Unknown categories are added as-is.

    Args:
        base: Base definitions (e.g. DEFAULT_DEFINITIONS)
        overrides: Override document {category: {"flags", "patterns", "replace"}}

    Returns:
        Dict: New definitions (inputs are not modified)

    Raises:
        CatalogError: If the override document is malformed
    """
    if not isinstance(overrides, Mapping):
        raise CatalogError("Catalog override must be a JSON object")

    merged = {name: dict(definition) for name, definition in base.items()}

    for name, override in overrides.items():
        if not isinstance(override, Mapping):
            raise CatalogError(f"Category '{name}': override must be a mapping")

        patterns = override.get('patterns', [])
        if isinstance(patterns, str) or not isinstance(patterns, (list, tuple)):
            raise CatalogError(f"Category '{name}': 'patterns' must be a list of strings")

        current = merged.get(name)
        if current is None:
            if 'flags' not in override:
                raise CatalogError(f"Category '{name}' is unknown and declares no flags")
            merged[name] = {'flags': override['flags'], 'patterns': tuple(patterns)}
            continue

        if override.get('replace', False):
            current['patterns'] = tuple(patterns)
        else:
            current['patterns'] = tuple(current['patterns']) + tuple(patterns)

        if 'flags' in override:
            current['flags'] = override['flags']

    return merged


def build_catalog(definitions: Optional[Mapping[str, Mapping[str, Any]]] = None) -> PatternCatalog:
    """
    Build the immutable pattern catalog.

    Args:
        definitions: Category definitions (default: built-in DEFAULT_DEFINITIONS)

    Returns:
        PatternCatalog: Frozen catalog, safe to share between threads

    Raises:
        CatalogError: If any category is malformed or a required one is missing
    """
    if definitions is None:
        definitions = DEFAULT_DEFINITIONS

    missing = [name for name in DEFAULT_DEFINITIONS if name not in definitions]
    if missing:
        raise CatalogError(f"Catalog is missing required categories: {', '.join(missing)}")

    categories = {
        name: build_category(name, definition, with_line=name in LINE_CATEGORIES)
        for name, definition in definitions.items()
    }

    pattern_count = sum(len(category.patterns) for category in categories.values())
    logger.debug(f"Pattern catalog built: {len(categories)} categories, {pattern_count} patterns")

    return PatternCatalog(categories=MappingProxyType(categories))


@functools.lru_cache(maxsize=None)
def default_catalog() -> PatternCatalog:
    """Get the catalog built from the built-in definitions (built once per process)."""
    return build_catalog()
