"""
Tests for pattern catalog construction and validation.
"""

import re
import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from forward_reader.domain.catalog import (
    CatalogError, PatternCatalog, build_catalog, build_category,
    default_catalog, merge_definitions, parse_flags
)
from forward_reader.domain.patterns import DEFAULT_DEFINITIONS, LINE_CATEGORIES


class TestBuildCatalog:
    """Test building the built-in catalog."""

    def test_default_catalog_has_every_category(self, catalog):
        """Test that every built-in category is compiled."""
        assert isinstance(catalog, PatternCatalog)
        assert len(catalog) == len(DEFAULT_DEFINITIONS)
        for name in DEFAULT_DEFINITIONS:
            assert name in catalog
            assert len(catalog[name]) == len(DEFAULT_DEFINITIONS[name]['patterns'])

    def test_default_catalog_is_built_once(self):
        """Test that the built-in catalog is shared."""
        assert default_catalog() is default_catalog()

    def test_category_flags_applied(self, catalog):
        """Test that category flags reach the compiled patterns."""
        subject_pattern = catalog['original_subject'][0]

        assert subject_pattern.flags & re.IGNORECASE
        assert subject_pattern.flags & re.MULTILINE

    def test_line_variant_captures_whole_match(self, catalog):
        """Test that line variants wrap the pattern in a capture group."""
        for name in LINE_CATEGORIES:
            line_patterns = catalog.line(name)
            assert len(line_patterns) == len(catalog[name])
            assert line_patterns[0].pattern == f"({catalog[name][0].pattern})"

    def test_line_variant_missing(self, catalog):
        """Test that categories never split on have no line variant."""
        with pytest.raises(KeyError, match="has no line variant"):
            catalog.line('mailbox')

    def test_catalog_is_read_only(self, catalog):
        """Test that the published catalog cannot be modified."""
        with pytest.raises(TypeError):
            catalog.categories['separator'] = None

    def test_missing_required_category(self):
        """Test that a catalog without a required category is rejected."""
        definitions = dict(DEFAULT_DEFINITIONS)
        del definitions['separator']

        with pytest.raises(CatalogError, match="missing required categories: separator"):
            build_catalog(definitions)


class TestBuildCategory:
    """Test validation of single category definitions."""

    def test_build_category_success(self):
        """Test compiling a valid category."""
        category = build_category('custom', {'flags': 'i', 'patterns': ['abc']}, with_line=True)

        assert category.name == 'custom'
        assert category.patterns[0].match('ABC')
        assert category.line[0].pattern == '(abc)'

    def test_unknown_flag(self):
        """Test that unknown flag letters are rejected."""
        with pytest.raises(CatalogError, match="unknown regex flag 'q'"):
            build_category('custom', {'flags': 'iq', 'patterns': ['abc']})

    def test_invalid_regex(self):
        """Test that non-compiling patterns are rejected."""
        with pytest.raises(CatalogError, match="invalid pattern"):
            build_category('custom', {'flags': '', 'patterns': ['(abc']})

    def test_empty_category(self):
        """Test that a category without patterns is rejected."""
        with pytest.raises(CatalogError, match="no patterns defined"):
            build_category('custom', {'flags': '', 'patterns': []})

    def test_patterns_must_be_list(self):
        """Test that a bare string is not accepted as a pattern list."""
        with pytest.raises(CatalogError, match="must be a list of strings"):
            build_category('custom', {'flags': '', 'patterns': 'abc'})

    def test_definition_must_be_mapping(self):
        """Test that a definition must be a dict."""
        with pytest.raises(CatalogError, match="must be a mapping"):
            build_category('custom', ['abc'])

    def test_missing_named_group(self):
        """Test that header patterns without a value group are rejected."""
        with pytest.raises(CatalogError, match="missing named group"):
            build_category('original_to', {'flags': 'm', 'patterns': [r'^To:(.+)$']})

    def test_separator_with_information_groups(self):
        """Test that all author groups are required on metadata separators."""
        with pytest.raises(CatalogError, match="from_address"):
            build_category(
                'separator_with_information',
                {'flags': 'm', 'patterns': [r'^On (?P<date>.+), (?P<from_name>.+) wrote:']}
            )


class TestParseFlags:
    """Test flag letter conversion."""

    def test_parse_flags(self):
        """Test letters map to re flags."""
        assert parse_flags('', 'x') == 0
        assert parse_flags('im', 'x') == re.IGNORECASE | re.MULTILINE


class TestMergeDefinitions:
    """Test merging override documents."""

    def test_merge_appends_patterns(self):
        """Test that override patterns go after the built-in ones."""
        merged = merge_definitions(
            DEFAULT_DEFINITIONS,
            {'subject': {'patterns': [r'^Doorst:(?P<value>.*)']}}
        )

        assert merged['subject']['patterns'][-1] == r'^Doorst:(?P<value>.*)'
        assert len(merged['subject']['patterns']) == len(DEFAULT_DEFINITIONS['subject']['patterns']) + 1
        # Base definitions untouched
        assert r'^Doorst:(?P<value>.*)' not in DEFAULT_DEFINITIONS['subject']['patterns']

    def test_merge_replace(self):
        """Test that replace drops the built-in patterns."""
        merged = merge_definitions(
            DEFAULT_DEFINITIONS,
            {'subject': {'patterns': [r'^Fwd:(?P<value>.*)'], 'replace': True}}
        )

        assert merged['subject']['patterns'] == (r'^Fwd:(?P<value>.*)',)

    def test_merge_overrides_flags(self):
        """Test that override flags replace the category flags."""
        merged = merge_definitions(DEFAULT_DEFINITIONS, {'subject': {'flags': 'im'}})

        assert merged['subject']['flags'] == 'im'
        assert merged['subject']['patterns'] == DEFAULT_DEFINITIONS['subject']['patterns']

    def test_merge_new_category(self):
        """Test that unknown categories with flags are added."""
        merged = merge_definitions(DEFAULT_DEFINITIONS, {'custom': {'flags': '', 'patterns': ['x']}})

        assert merged['custom'] == {'flags': '', 'patterns': ('x',)}

    def test_merge_new_category_without_flags(self):
        """Test that unknown categories must declare their flags."""
        with pytest.raises(CatalogError, match="unknown and declares no flags"):
            merge_definitions(DEFAULT_DEFINITIONS, {'custom': {'patterns': ['x']}})

    def test_merge_rejects_non_object(self):
        """Test that the override document must be an object."""
        with pytest.raises(CatalogError, match="must be a JSON object"):
            merge_definitions(DEFAULT_DEFINITIONS, ['subject'])

    def test_merged_catalog_recognizes_new_prefix(self):
        """Test a built catalog picks up an added locale."""
        catalog = build_catalog(merge_definitions(
            DEFAULT_DEFINITIONS,
            {'subject': {'patterns': [r'^Doorst:(?P<value>.*)']}}
        ))

        assert any(pattern.match("Doorst: Hallo") for pattern in catalog['subject'])
