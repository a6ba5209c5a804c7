"""Single-field validation for inline form feedback.

Checks one value against its ``VALIDATION_RULES`` entry and reports the first
rule it breaks, in the order: required, pattern, length, value bounds.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ...core.constants import VALIDATION_RULES, ErrorMessages
from ...utils.strings import strip_phone_formatting
from ...utils.validators import is_number

# Fields whose pattern applies to a normalized form of the value
_NORMALIZERS = {
    "phone": strip_phone_formatting,
}


class FieldValidationResult(BaseModel):
    """Outcome of a single-field check."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None


def validate_field(field_name: str, value: Any) -> FieldValidationResult:
    """Validate one value against the rule registered for field_name.

    Args:
        field_name: Key in VALIDATION_RULES (e.g. "email", "advance_booking_days")
        value: Value entered by the user

    Returns:
        FieldValidationResult with the first failing rule's message

    Raises:
        KeyError: If no rule is registered for field_name

    Examples:
        >>> validate_field("service_id", "Room Booking").error
        'Invalid format'
        >>> validate_field("advance_booking_days", 900).error
        'Must be no more than 730'
    """
    if field_name not in VALIDATION_RULES:
        raise KeyError(ErrorMessages.UNKNOWN_FIELD.format(field_name=field_name))

    rule = VALIDATION_RULES[field_name]

    if value is None or (isinstance(value, str) and not value.strip()):
        if rule.required:
            return _invalid(ErrorMessages.REQUIRED_FIELD)
        return FieldValidationResult(is_valid=True)

    if isinstance(value, str):
        return _validate_text(field_name, value, rule)

    if rule.min_value is not None or rule.max_value is not None:
        if not is_number(value):
            return _invalid(ErrorMessages.PATTERN_MISMATCH)
        if rule.min_value is not None and value < rule.min_value:
            return _invalid(ErrorMessages.MIN_VALUE.format(min_value=rule.min_value))
        if rule.max_value is not None and value > rule.max_value:
            return _invalid(ErrorMessages.MAX_VALUE.format(max_value=rule.max_value))

    return FieldValidationResult(is_valid=True)


def _validate_text(field_name: str, value: str, rule) -> FieldValidationResult:
    if rule.pattern is not None:
        normalize = _NORMALIZERS.get(field_name)
        candidate = normalize(value) if normalize else value
        if not rule.pattern.match(candidate):
            return _invalid(ErrorMessages.PATTERN_MISMATCH)

    if rule.min_length is not None and len(value) < rule.min_length:
        return _invalid(ErrorMessages.MIN_LENGTH.format(min_length=rule.min_length))

    if rule.max_length is not None and len(value) > rule.max_length:
        return _invalid(ErrorMessages.MAX_LENGTH.format(max_length=rule.max_length))

    # Numeric rules reject text; the form converts number inputs before calling
    if rule.min_value is not None or rule.max_value is not None:
        return _invalid(ErrorMessages.PATTERN_MISMATCH)

    return FieldValidationResult(is_valid=True)


def _invalid(message: str) -> FieldValidationResult:
    return FieldValidationResult(is_valid=False, error=message)
