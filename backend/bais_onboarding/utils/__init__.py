"""Utility functions organized by domain.

All functions are re-exported here. Prefer importing from specific modules:
    from bais_onboarding.utils.strings import sanitize_phone
    from bais_onboarding.utils.validators import is_valid_url
"""

# Converters
from .converters import canonical_json_dumps, safe_json_loads

# Generators
from .generators import generate_session_id

# Strings
from .strings import sanitize_phone, slugify_business_name, strip_phone_formatting

# Validators
from .validators import (
    is_integer,
    is_non_negative,
    is_number,
    is_required_string,
    is_valid_coordinates,
    is_valid_email,
    is_valid_iso_date,
    is_valid_phone,
    is_valid_regex,
    is_valid_string,
    is_valid_url,
    is_within_bounds,
)

__all__ = [
    # Converters
    "canonical_json_dumps",
    "safe_json_loads",
    # Generators
    "generate_session_id",
    # Strings
    "sanitize_phone",
    "slugify_business_name",
    "strip_phone_formatting",
    # Validators
    "is_integer",
    "is_non_negative",
    "is_number",
    "is_required_string",
    "is_valid_coordinates",
    "is_valid_email",
    "is_valid_iso_date",
    "is_valid_phone",
    "is_valid_regex",
    "is_valid_string",
    "is_valid_url",
    "is_within_bounds",
]
