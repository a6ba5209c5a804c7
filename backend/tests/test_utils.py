"""
Unit Tests for Utility Functions

Tests phone sanitization, slug derivation and the validation predicates.
"""

from bais_onboarding.core.constants import VALIDATION_RULES
from bais_onboarding.utils import (
    canonical_json_dumps,
    generate_session_id,
    is_integer,
    is_number,
    is_valid_coordinates,
    is_valid_email,
    is_valid_iso_date,
    is_valid_phone,
    is_valid_regex,
    is_valid_string,
    is_valid_url,
    safe_json_loads,
    sanitize_phone,
    slugify_business_name,
)


class TestSanitizePhone:
    """Test suite for phone normalization"""

    def test_ten_digit_number(self):
        """Test 10-digit numbers get the +1 country code"""
        assert sanitize_phone("5055551234") == "+1-505-555-1234"
        assert sanitize_phone("(505) 555-1234") == "+1-505-555-1234"

    def test_eleven_digit_north_american_number(self):
        """Test 11 digits starting with 1 are formatted"""
        assert sanitize_phone("1 505 555 1234") == "+1-505-555-1234"
        assert sanitize_phone("+1-505-555-1234") == "+1-505-555-1234"

    def test_international_number(self):
        """Test other numbers keep their digits with a single plus"""
        assert sanitize_phone("+44 20 7946 0958") == "+442079460958"
        assert sanitize_phone("0044 20 7946 0958") == "+00442079460958"

    def test_empty_phone(self):
        """Test missing phones stay missing"""
        assert sanitize_phone("") is None
        assert sanitize_phone(None) is None


class TestSlugifyBusinessName:
    """Test suite for business slugs"""

    def test_basic_slug(self):
        """Test punctuation is dropped and words are hyphenated"""
        assert slugify_business_name("Zion Adventure Lodge!") == "zion-adventure-lodge"

    def test_runs_collapse(self):
        """Test runs of separators become a single hyphen"""
        assert slugify_business_name("  Joe's -- Diner & Bar  ") == "joe-s-diner-bar"

    def test_truncated_to_fifty(self):
        """Test long names are cut to 50 characters"""
        assert len(slugify_business_name("a" * 80)) == 50

    def test_fallback(self):
        """Test names with nothing usable fall back to 'business'"""
        assert slugify_business_name("") == "business"
        assert slugify_business_name("!!!") == "business"
        assert slugify_business_name(None) == "business"


class TestValidators:
    """Test suite for validation predicates"""

    def test_email(self):
        """Test email pattern"""
        assert is_valid_email("owner@lodge.com")
        assert not is_valid_email("owner@lodge")
        assert not is_valid_email(None)

    def test_phone(self):
        """Test phone pattern after stripping formatting"""
        assert is_valid_phone("+1-505-555-1234")
        assert is_valid_phone("+442079460958")
        assert not is_valid_phone("0123")
        assert not is_valid_phone("phone")

    def test_url(self):
        """Test only absolute http(s) URLs pass"""
        assert is_valid_url("https://api.lodge.com/mcp")
        assert is_valid_url("http://localhost:8000")
        assert not is_valid_url("ftp://lodge.com")
        assert not is_valid_url("lodge.com")
        assert not is_valid_url("")

    def test_numbers_exclude_booleans(self):
        """Test booleans are not numbers"""
        assert is_number(1.5)
        assert is_integer(3)
        assert not is_number(True)
        assert not is_integer(False)
        assert not is_integer(3.0)

    def test_string_rule(self):
        """Test required flag and length bounds"""
        rule = VALIDATION_RULES["cancellation_policy_description"]

        assert is_valid_string("No charges", rule)
        assert not is_valid_string("Too short", rule)
        assert not is_valid_string("   ", rule)
        assert is_valid_string("", VALIDATION_RULES["postal_code"])

    def test_regex(self):
        """Test regex compilation check"""
        assert is_valid_regex(r"^\d{5}$")
        assert not is_valid_regex("(unclosed")

    def test_iso_date(self):
        """Test ISO date check"""
        assert is_valid_iso_date("2010-03-01")
        assert not is_valid_iso_date("2010-02-30")
        assert not is_valid_iso_date("20100301")
        assert not is_valid_iso_date("2024-W01-1")

    def test_coordinates(self):
        """Test coordinate ranges"""
        assert is_valid_coordinates(37.2, -113.0)
        assert not is_valid_coordinates(-91, 0)
        assert not is_valid_coordinates(0, 181)
        assert not is_valid_coordinates(None, 0)


class TestMiscUtilities:
    """Test suite for converters and generators"""

    def test_canonical_json_dumps(self):
        """Test compact output that keeps key order"""
        assert canonical_json_dumps({"b": 1, "a": [1, 2]}) == '{"b":1,"a":[1,2]}'

    def test_safe_json_loads(self):
        """Test invalid JSON returns the default"""
        assert safe_json_loads('{"detail": "x"}') == {"detail": "x"}
        assert safe_json_loads("not json", default={}) == {}

    def test_generate_session_id(self):
        """Test session ids are unique and carry the prefix"""
        assert generate_session_id() != generate_session_id()
        assert generate_session_id("FORM").startswith("FORM-")
