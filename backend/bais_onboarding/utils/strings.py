"""String manipulation utilities."""

import re

from ..core.constants import CollectionLimits, DefaultValues

_NON_ALNUM_RUN = re.compile(r'[^a-z0-9]+')
_NON_DIGIT = re.compile(r'\D')
_PHONE_FORMATTING = re.compile(r'[\s\-().]')


def slugify_business_name(name: str | None, max_length: int | None = None) -> str:
    """Derive a URL-safe slug from a business name.

    Lowercases, collapses every run of non-alphanumeric characters into a
    single hyphen, trims leading/trailing hyphens and truncates.

    Args:
        name: Human-readable business name
        max_length: Maximum slug length (default from CollectionLimits)

    Returns:
        Slug string, or the default slug when nothing usable remains

    Examples:
        >>> slugify_business_name("Zion Adventure Lodge!")
        "zion-adventure-lodge"
        >>> slugify_business_name("")
        "business"
    """
    if not name:
        return DefaultValues.BUSINESS_SLUG

    limit = max_length or CollectionLimits.MAX_SLUG_LENGTH
    slug = _NON_ALNUM_RUN.sub('-', name.lower()).strip('-')[:limit]

    return slug or DefaultValues.BUSINESS_SLUG


def strip_phone_formatting(phone: str) -> str:
    """Remove spaces, hyphens, dots and parentheses from a phone number.

    Examples:
        >>> strip_phone_formatting("+1 (505) 555-1234")
        "+15055551234"
    """
    return _PHONE_FORMATTING.sub('', phone)


def sanitize_phone(phone: str | None) -> str | None:
    """Normalize a phone number to international format.

    North-American numbers (10 digits, or 11 digits starting with 1) are
    formatted as ``+1-AAA-EEE-LLLL``. Anything else keeps its digits only,
    prefixed with ``+``.

    Args:
        phone: Phone number as typed by the user

    Returns:
        Normalized phone number, or None when no phone was given

    Examples:
        >>> sanitize_phone("5055551234")
        "+1-505-555-1234"
        >>> sanitize_phone("1 (505) 555-1234")
        "+1-505-555-1234"
        >>> sanitize_phone("+44 20 7946 0958")
        "+442079460958"
    """
    if not phone:
        return None

    digits = _NON_DIGIT.sub('', phone)

    if len(digits) == 11 and digits.startswith('1'):
        return f"+{digits[0]}-{digits[1:4]}-{digits[4:7]}-{digits[7:]}"

    if len(digits) == 10:
        return f"+1-{digits[0:3]}-{digits[3:6]}-{digits[6:]}"

    return f"+{digits}"
