"""Field mapping between the editable model and the wire payload.

Every section of the payload is described by a tuple of ``FieldMapping``
entries. The forward and reverse transforms both walk these tables, so a
field renamed or defaulted here is renamed or defaulted in both directions.
"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from ...core.constants import (
    VALIDATION_RULES,
    ConstraintField,
    DefaultValues,
    ErrorMessages,
)
from ...core.exceptions import TransformationError
from ...utils.strings import sanitize_phone


@dataclass(frozen=True)
class FieldMapping:
    """How one model attribute appears on the wire.

    Attributes:
        attribute: Attribute name on the editable model
        wire_key: Key in the wire payload
        default: Value sent when the attribute is None
        optional: Omit the key when the value is None or an empty string
        required: Reverse transform fails when the key is missing
        normalize: Applied to the value before it is sent
    """
    attribute: str
    wire_key: str
    default: Any = None
    optional: bool = False
    required: bool = False
    normalize: Callable[[Any], Any] | None = None


# ============================================================================
# MAPPING TABLES
# ============================================================================

BUSINESS_FIELDS = (
    FieldMapping("name", "business_name", required=True),
    FieldMapping("type", "business_type", required=True),
    FieldMapping("description", "business_description", optional=True),
    FieldMapping("established_date", "established_date", optional=True),
    FieldMapping("capacity", "capacity", optional=True),
)

CONTACT_FIELDS = (
    FieldMapping("email", "email", required=True),
    FieldMapping("phone", "phone", optional=True, normalize=sanitize_phone),
    FieldMapping("secondary_email", "secondary_email", optional=True),
    FieldMapping("business_hours", "business_hours", optional=True),
)

# Website lives in the business block of the model but in contact_info on the wire
WEBSITE_FIELD = FieldMapping("website", "website", optional=True)

LOCATION_FIELDS = (
    FieldMapping("address", "address", required=True),
    FieldMapping("city", "city", required=True),
    FieldMapping("state", "state", required=True),
    FieldMapping("postal_code", "postal_code", optional=True),
    FieldMapping("country", "country", default=DefaultValues.COUNTRY),
    FieldMapping("timezone", "timezone", default=DefaultValues.TIMEZONE),
)

COORDINATE_FIELDS = (
    FieldMapping("latitude", "latitude", required=True),
    FieldMapping("longitude", "longitude", required=True),
)

SERVICE_FIELDS = (
    FieldMapping("service_id", "id", required=True),
    FieldMapping("name", "name", required=True),
    FieldMapping("description", "description", required=True),
    FieldMapping("category", "category", required=True),
)

WORKFLOW_FIELDS = (
    FieldMapping("pattern", "workflow_pattern", default=DefaultValues.WORKFLOW_PATTERN),
)

WORKFLOW_STEP_FIELDS = (
    FieldMapping("name", "name", required=True),
    FieldMapping("description", "description", optional=True),
    FieldMapping("required", "required", default=True),
    FieldMapping("timeout_minutes", "timeout_minutes", default=DefaultValues.TIMEOUT_MINUTES),
    FieldMapping("retry_attempts", "retry_attempts", default=DefaultValues.RETRY_ATTEMPTS),
)

# Parameter name is the key of the parameters object, not a field
PARAMETER_FIELDS = (
    FieldMapping("type", "type", default=DefaultValues.PARAMETER_TYPE),
    FieldMapping("description", "description", required=True),
    FieldMapping("required", "required", default=False),
    FieldMapping("default", "default", optional=True),
)

# Constraints are flattened into the parameter object under snake_case keys
CONSTRAINT_FIELDS = tuple(
    FieldMapping(field, field, optional=True) for field in ConstraintField.ALL
)

PRICING_FIELDS = (
    FieldMapping("base_rate", "base_rate", default=VALIDATION_RULES["price"].default),
    FieldMapping("currency", "currency", default=DefaultValues.CURRENCY),
    FieldMapping("tax_rate", "tax_rate", default=VALIDATION_RULES["tax_rate"].default),
    FieldMapping("service_fee", "service_fee", default=VALIDATION_RULES["price"].default),
    FieldMapping("minimum_charge", "minimum_charge", optional=True),
)

AVAILABILITY_FIELDS = (
    FieldMapping("endpoint", "endpoint", optional=True),
    FieldMapping("real_time", "real_time", default=DefaultValues.REAL_TIME_AVAILABILITY),
    FieldMapping("cache_timeout_seconds", "cache_timeout_seconds", default=DefaultValues.CACHE_TIMEOUT_SECONDS),
    FieldMapping("advance_booking_days", "advance_booking_days", default=DefaultValues.ADVANCE_BOOKING_DAYS),
)

CANCELLATION_FIELDS = (
    FieldMapping("type", "type", default=DefaultValues.CANCELLATION_POLICY_TYPE),
    FieldMapping("free_until_hours", "free_until_hours", default=DefaultValues.FREE_CANCELLATION_HOURS),
    FieldMapping("penalty_percentage", "penalty_percentage", default=DefaultValues.PENALTY_PERCENTAGE),
    FieldMapping("description", "description", required=True),
)

PAYMENT_FIELDS = (
    FieldMapping("methods", "methods", default=DefaultValues.PAYMENT_METHODS),
    FieldMapping("timing", "timing", default=DefaultValues.PAYMENT_TIMING),
    FieldMapping("deposit_required", "deposit_required", default=DefaultValues.DEPOSIT_REQUIRED),
)

# Only sent when a deposit is required
DEPOSIT_PERCENTAGE_FIELD = FieldMapping(
    "deposit_percentage", "deposit_percentage", default=VALIDATION_RULES["deposit_percentage"].default
)

POLICY_FIELDS = (
    FieldMapping("modification_fee", "modification_fee", default=VALIDATION_RULES["price"].default),
    FieldMapping("no_show_penalty", "no_show_penalty", default=VALIDATION_RULES["price"].default),
)

AP2_FIELDS = (
    FieldMapping("enabled", "enabled", default=DefaultValues.AP2_ENABLED),
    FieldMapping("verification_required", "verification_required", default=DefaultValues.AP2_VERIFICATION_REQUIRED),
    FieldMapping("mandate_expiry_hours", "mandate_expiry_hours", default=DefaultValues.AP2_MANDATE_EXPIRY_HOURS),
)


# ============================================================================
# GENERIC HELPERS
# ============================================================================

def forward_value(model: BaseModel, mapping: FieldMapping) -> Any:
    """Read one attribute for the wire: normalized, defaulted, and copied.

    Returns None when the field should be omitted.
    """
    value = getattr(model, mapping.attribute)

    if value is not None and mapping.normalize is not None:
        value = mapping.normalize(value)

    if value is None:
        value = mapping.default

    if mapping.optional and (value is None or value == ""):
        return None

    # Lists and dicts must not be shared between the model and the payload
    return deepcopy(value)


def map_forward(model: BaseModel, mappings: tuple[FieldMapping, ...]) -> dict[str, Any]:
    """Build a wire section from a model using a mapping table."""
    section: dict[str, Any] = {}

    for mapping in mappings:
        value = forward_value(model, mapping)
        if value is None and mapping.optional:
            continue
        section[mapping.wire_key] = value

    return section


def map_reverse(payload: Any, mappings: tuple[FieldMapping, ...], section: str) -> dict[str, Any]:
    """Collect model attributes from a wire section using a mapping table.

    Keys absent from the payload (or null) are left out so the model default applies.

    Args:
        payload: Wire section (must be a dict)
        mappings: Mapping table for the section
        section: Section path used in error messages

    Raises:
        TransformationError: If the section is not an object or a required key is missing
    """
    if not isinstance(payload, dict):
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section=section))

    attributes: dict[str, Any] = {}

    for mapping in mappings:
        if payload.get(mapping.wire_key) is None:
            if mapping.required:
                require_section(payload, mapping.wire_key, section)
            continue
        attributes[mapping.attribute] = deepcopy(payload[mapping.wire_key])

    return attributes


def require_section(payload: dict[str, Any], key: str, section: str) -> Any:
    """Return payload[key], raising TransformationError when it is missing."""
    value = payload.get(key)
    if value is None:
        path = f"{section}.{key}" if section else key
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section=path))
    return value
