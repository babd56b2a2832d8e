"""
Unit tests for label formatters.

The formatting heuristics are display compatibility behaviour, so edge cases
are pinned down here rather than corrected.
"""
import pytest

from dataset_compliance.utils.formatters import (
    capitalize,
    format_as_capitalized_string_with_spaces,
    format_id_logical_type_label,
)


class TestCapitalize:
    """Test cases for first letter capitalization."""

    def test_capitalize_keeps_remaining_case(self):
        assert capitalize("hELLO") == "HELLO"
        assert capitalize("limited Distribution") == "Limited Distribution"

    def test_capitalize_empty_string(self):
        assert capitalize("") == ""


class TestFormatAsCapitalizedStringWithSpaces:
    """Test cases for classification label formatting."""

    @pytest.mark.parametrize("value, label", [
        ("confidential", "Confidential"),
        ("limitedDistribution", "Limited Distribution"),
        ("highlyConfidential", "Highly Confidential"),
        ("", ""),
    ])
    def test_camel_case_values(self, value, label):
        assert format_as_capitalized_string_with_spaces(value) == label

    def test_leading_capital_yields_leading_space(self):
        assert format_as_capitalized_string_with_spaces("LimitedDistribution") == " Limited Distribution"

    def test_formatting_is_not_idempotent(self):
        """Formatting a formatted label inserts a second space before each capital."""
        once = format_as_capitalized_string_with_spaces("limitedDistribution")
        twice = format_as_capitalized_string_with_spaces(once)

        assert once == "Limited Distribution"
        assert twice == " Limited  Distribution"
        assert twice.strip()[0].isupper()

    def test_consecutive_capitals_are_split(self):
        assert format_as_capitalized_string_with_spaces("piiURN") == "Pii U R N"


class TestFormatIdLogicalTypeLabel:
    """Test cases for identifier logical type label formatting."""

    @pytest.mark.parametrize("value, label", [
        ("NUMERIC", "Numeric"),
        ("URN", "Urn"),
        ("REVERSED_URN", "Reversed Urn"),
        ("COMPOSITE_URN", "Composite Urn"),
        ("MEMBER_ID", "Member ID"),
        ("ID", "ID"),
    ])
    def test_labels(self, value, label):
        assert format_id_logical_type_label(value) == label

    def test_consecutive_underscores_keep_spaces(self):
        assert format_id_logical_type_label("GROUP__URN") == "Group  Urn"

    def test_mixed_case_run(self):
        assert format_id_logical_type_label("ABCDid") == "Abcdid"
