"""Unit tests for contact name normalization and exclusion matching."""

import pytest

from directory_gate.domain.value_objects import (
    NormalizedNameMatcher,
    normalize_contact_name,
)


@pytest.mark.unit
class TestNormalizeContactName:
    def test_lowercases_and_trims(self):
        assert normalize_contact_name("  Jane DOE ") == "jane doe"

    def test_none_becomes_empty(self):
        assert normalize_contact_name(None) == ""

    def test_inner_whitespace_is_kept(self):
        assert normalize_contact_name("Jane  Doe") == "jane  doe"


@pytest.mark.unit
class TestNormalizedNameMatcher:
    """Exclusion set construction and lookup."""

    def test_excludes_case_and_whitespace_variants(self):
        matcher = NormalizedNameMatcher()
        exclusions = matcher.build_exclusions(["jane doe"])

        assert matcher.is_excluded("Jane Doe", exclusions)
        assert matcher.is_excluded("  JANE DOE", exclusions)

    def test_does_not_exclude_other_names(self):
        matcher = NormalizedNameMatcher()
        exclusions = matcher.build_exclusions(["jane doe"])

        assert not matcher.is_excluded("Jane Doering", exclusions)
        assert not matcher.is_excluded(None, exclusions)

    def test_empty_exclusions_hide_nothing(self):
        matcher = NormalizedNameMatcher()

        assert not matcher.is_excluded("Jane Doe", matcher.build_exclusions([]))
