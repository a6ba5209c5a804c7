"""Validation utilities.

Small predicates shared by the validation engine. None of them raise: each
answers a yes/no question about a single value.
"""

import re
from datetime import date
from numbers import Real
from typing import Any
from urllib.parse import urlparse

from ..core.constants import VALIDATION_RULES, FieldRule
from .strings import strip_phone_formatting

_ISO_CALENDAR_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_required_string(value: Any) -> bool:
    """Check that value is a string with non-whitespace content."""
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_string(value: Any, rule: FieldRule) -> bool:
    """Check a string against a rule's required flag and length bounds.

    Empty optional values are valid; length bounds only apply to present values.

    Examples:
        >>> is_valid_string("Room Booking", VALIDATION_RULES["service_name"])
        True
        >>> is_valid_string("", VALIDATION_RULES["service_name"])
        False
    """
    if rule.required and not is_required_string(value):
        return False

    if not value:
        return True

    if not isinstance(value, str):
        return False

    if rule.min_length is not None and len(value) < rule.min_length:
        return False

    if rule.max_length is not None and len(value) > rule.max_length:
        return False

    return True


def is_number(value: Any) -> bool:
    """Check that value is a real number (booleans excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Check that value is an integer (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_within_bounds(value: Any, rule: FieldRule) -> bool:
    """Check a number against a rule's value bounds."""
    if not is_number(value):
        return False

    if rule.min_value is not None and value < rule.min_value:
        return False

    if rule.max_value is not None and value > rule.max_value:
        return False

    return True


def is_non_negative(value: Any) -> bool:
    """Check that value is a number greater than or equal to zero."""
    return is_number(value) and value >= 0


def is_valid_email(email: Any) -> bool:
    """Validate email format.

    Examples:
        >>> is_valid_email("owner@lodge.com")
        True
        >>> is_valid_email("owner@lodge")
        False
    """
    if not email or not isinstance(email, str):
        return False
    return bool(VALIDATION_RULES["email"].pattern.match(email))


def is_valid_phone(phone: Any) -> bool:
    """Validate an E.164-like phone number.

    Common formatting characters (spaces, hyphens, dots, parentheses) are
    ignored, so the normalized ``+1-505-555-1234`` form is accepted.
    """
    if not phone or not isinstance(phone, str):
        return False
    return bool(VALIDATION_RULES["phone"].pattern.match(strip_phone_formatting(phone)))


def is_valid_url(url: Any) -> bool:
    """Validate an absolute http(s) URL.

    Examples:
        >>> is_valid_url("https://api.lodge.com/mcp")
        True
        >>> is_valid_url("ftp://lodge.com")
        False
        >>> is_valid_url("lodge.com")
        False
    """
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def is_valid_regex(pattern: Any) -> bool:
    """Check that pattern compiles as a regular expression."""
    if not isinstance(pattern, str):
        return False

    try:
        re.compile(pattern)
    except re.error:
        return False

    return True


def is_valid_iso_date(value: Any) -> bool:
    """Check that value is a ``YYYY-MM-DD`` calendar date.

    Other ISO 8601 shapes (week dates, ordinal dates) are rejected.
    """
    if not isinstance(value, str) or not _ISO_CALENDAR_DATE.match(value):
        return False

    try:
        date.fromisoformat(value)
    except ValueError:
        return False

    return True


def is_valid_coordinates(latitude: Any, longitude: Any) -> bool:
    """Check that latitude and longitude are numbers within range."""
    return (
        is_within_bounds(latitude, VALIDATION_RULES["latitude"])
        and is_within_bounds(longitude, VALIDATION_RULES["longitude"])
    )
