"""Unit tests for core validation functions.

Tests cover:
- validate_required: None, empty, whitespace, stripping
- validate_max_length: boundary cases and user-facing message
- validate_pattern: full-match semantics
- validate_int_range: parsing and inclusive bounds
- Result type returns (Success/Failure)

Architecture:
- Unit tests for pure validation functions
- No mocking required (pure functions)
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.validation import (
    validate_int_range,
    validate_max_length,
    validate_pattern,
    validate_required,
)


@pytest.mark.unit
class TestValidateRequired:
    """Test validate_required function."""

    def test_returns_stripped_value(self):
        result = validate_required("  Ada ", "firstName", "first name")

        assert isinstance(result, Success)
        assert result.value == "Ada"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_fails_when_missing_or_blank(self, value):
        result = validate_required(value, "city", "city")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FIELD_REQUIRED
        assert result.error.message == "The city is required."
        assert result.error.field == "city"
        assert result.error.params == ("city",)


@pytest.mark.unit
class TestValidateMaxLength:
    """Test validate_max_length function."""

    def test_value_at_limit_passes(self):
        result = validate_max_length("a" * 30, 30, "firstName", "first name")

        assert isinstance(result, Success)

    def test_value_over_limit_fails_with_message(self):
        result = validate_max_length("a" * 31, 30, "firstName", "first name")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FIELD_TOO_LONG
        assert (
            result.error.message
            == "The first name cannot be longer than 30 characters."
        )
        assert result.error.params == ("firstName", "30")


@pytest.mark.unit
class TestValidatePattern:
    """Test validate_pattern function."""

    @pytest.mark.parametrize("value", ["10001", "10001-1234"])
    def test_matching_values_pass(self, value):
        assert isinstance(
            validate_pattern(value, r"\d{5}(-\d{4})?", "postalCode", "postal code"),
            Success,
        )

    @pytest.mark.parametrize("value", ["1000", "10001x", "x10001", "10001-12"])
    def test_pattern_must_match_whole_value(self, value):
        result = validate_pattern(value, r"\d{5}(-\d{4})?", "postalCode", "postal code")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FIELD_INVALID_FORMAT
        assert result.error.message == "The postal code is not valid."


@pytest.mark.unit
class TestValidateIntRange:
    """Test validate_int_range function."""

    @pytest.mark.parametrize("value,expected", [("1", 1), (" 99 ", 99), ("42", 42)])
    def test_values_in_range_are_parsed(self, value, expected):
        result = validate_int_range(value, 1, 99, "quantity", "quantity")

        assert isinstance(result, Success)
        assert result.value == expected

    @pytest.mark.parametrize("value", ["0", "100", "-3", "two", "1.5", ""])
    def test_out_of_range_or_non_integer_fails(self, value):
        result = validate_int_range(value, 1, 99, "quantity", "quantity")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FIELD_OUT_OF_RANGE
        assert (
            result.error.message
            == "The quantity must be a whole number between 1 and 99."
        )
        assert result.error.params == ("quantity", "1", "99")

    @pytest.mark.parametrize("value", ["1_0", "３", "٣", "+", "- 3"])
    def test_rejects_non_ascii_and_underscored_digits(self, value):
        result = validate_int_range(value, 1, 99, "quantity", "quantity")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FIELD_OUT_OF_RANGE

    def test_accepts_leading_plus_sign(self):
        result = validate_int_range("+7", 1, 99, "quantity", "quantity")

        assert result == Success(value=7)
