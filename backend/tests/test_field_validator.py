"""
Unit Tests for Single-Field Validation

Tests the inline checks used while a user fills in the form.
"""

import pytest

from bais_onboarding.domain.validators import validate_field


class TestValidateField:
    """Test suite for validate_field"""

    def test_required_field_missing(self):
        """Test required fields reject empty and whitespace values"""
        for value in (None, "", "   "):
            result = validate_field("business_name", value)
            assert not result.is_valid
            assert result.error == "This field is required"

    def test_optional_field_missing(self):
        """Test optional fields accept empty values"""
        result = validate_field("phone", "")

        assert result.is_valid
        assert result.error is None

    def test_pattern_mismatch(self):
        """Test values not matching the field pattern"""
        assert validate_field("service_id", "Room Booking").error == "Invalid format"
        assert validate_field("email", "owner@lodge").error == "Invalid format"
        assert validate_field("parameter_name", "check_in_date").is_valid

    def test_phone_formatting_ignored(self):
        """Test phone pattern is applied after stripping formatting"""
        assert validate_field("phone", "+1 (505) 555-1234").is_valid

    def test_length_bounds(self):
        """Test minimum and maximum string lengths"""
        assert validate_field("cancellation_policy_description", "Too short").error == (
            "Must be at least 10 characters"
        )
        assert validate_field("service_name", "x" * 101).error == "Must be no more than 100 characters"

    def test_value_bounds(self):
        """Test numeric bounds"""
        assert validate_field("advance_booking_days", 900).error == "Must be no more than 730"
        assert validate_field("advance_booking_days", 0).error == "Must be at least 1"
        assert validate_field("penalty_percentage", 0).is_valid
        assert validate_field("penalty_percentage", 100).is_valid

    def test_text_for_numeric_field(self):
        """Test non-numeric input for a numeric field"""
        assert validate_field("cache_timeout_seconds", "soon").error == "Invalid format"

    def test_unknown_field(self):
        """Test fields without a rule are a programming error"""
        with pytest.raises(KeyError, match="favorite_color"):
            validate_field("favorite_color", "blue")
