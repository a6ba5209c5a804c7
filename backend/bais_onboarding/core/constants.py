"""Domain Schema Constants.

Centralized enumerations, limits, validation rules and defaults for the
Business-Agent Integration Standard (BAIS) onboarding schema.
Changing a bound here changes validation and transformation everywhere.
"""

import re
from dataclasses import dataclass
from typing import Any

# ============================================================================
# BUSINESS TYPE CONSTANTS
# ============================================================================

class BusinessType:
    """Allowed business types."""
    HOSPITALITY = "hospitality"
    FOOD_SERVICE = "food_service"
    RETAIL = "retail"
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    PROFESSIONAL_SERVICES = "professional_services"
    EDUCATION = "education"
    TECHNOLOGY = "technology"
    CREATIVE = "creative"
    OTHER = "other"

    ALL = [
        HOSPITALITY,
        FOOD_SERVICE,
        RETAIL,
        HEALTHCARE,
        FINANCE,
        PROFESSIONAL_SERVICES,
        EDUCATION,
        TECHNOLOGY,
        CREATIVE,
        OTHER,
    ]


# ============================================================================
# WORKFLOW CONSTANTS
# ============================================================================

class WorkflowPattern:
    """Supported service workflow patterns."""
    BOOKING_CONFIRMATION_PAYMENT = "booking_confirmation_payment"
    REQUEST_APPROVAL_PAYMENT = "request_approval_payment"
    INSTANT_PURCHASE = "instant_purchase"
    QUOTE_NEGOTIATION_CONTRACT = "quote_negotiation_contract"

    ALL = [
        BOOKING_CONFIRMATION_PAYMENT,
        REQUEST_APPROVAL_PAYMENT,
        INSTANT_PURCHASE,
        QUOTE_NEGOTIATION_CONTRACT,
    ]


# ============================================================================
# PARAMETER CONSTANTS
# ============================================================================

class ParameterType:
    """Parameter data types."""
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"

    ALL = [STRING, INTEGER, NUMBER, BOOLEAN, ARRAY, OBJECT, DATE, DATETIME, TIME]


class ParameterFormat:
    """Format tags a parameter constraint may carry."""
    DATE = "date"
    DATETIME = "date-time"
    TIME = "time"
    EMAIL = "email"
    URL = "url"
    UUID = "uuid"
    PHONE = "phone"

    ALL = [DATE, DATETIME, TIME, EMAIL, URL, UUID, PHONE]


class ConstraintField:
    """Constraint field names (editable model attribute names)."""
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    ENUM = "enum"
    FORMAT = "format"
    MIN_ITEMS = "min_items"
    MAX_ITEMS = "max_items"

    ALL = [MINIMUM, MAXIMUM, MIN_LENGTH, MAX_LENGTH, PATTERN, ENUM, FORMAT, MIN_ITEMS, MAX_ITEMS]

    LABELS: dict[str, str] = {
        MINIMUM: "minimum",
        MAXIMUM: "maximum",
        MIN_LENGTH: "minLength",
        MAX_LENGTH: "maxLength",
        PATTERN: "pattern",
        ENUM: "enum",
        FORMAT: "format",
        MIN_ITEMS: "minItems",
        MAX_ITEMS: "maxItems",
    }


# ============================================================================
# CANCELLATION & PAYMENT CONSTANTS
# ============================================================================

class CancellationPolicyType:
    """Cancellation policy types."""
    FLEXIBLE = "flexible"
    MODERATE = "moderate"
    STRICT = "strict"
    NON_REFUNDABLE = "non_refundable"

    ALL = [FLEXIBLE, MODERATE, STRICT, NON_REFUNDABLE]


class PaymentMethod:
    """Accepted payment methods."""
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    DIGITAL_WALLET = "digital_wallet"
    CRYPTOCURRENCY = "cryptocurrency"
    BUY_NOW_PAY_LATER = "buy_now_pay_later"
    CASH = "cash"
    CHECK = "check"

    ALL = [
        CREDIT_CARD,
        DEBIT_CARD,
        BANK_TRANSFER,
        DIGITAL_WALLET,
        CRYPTOCURRENCY,
        BUY_NOW_PAY_LATER,
        CASH,
        CHECK,
    ]


class PaymentTiming:
    """When a customer is charged."""
    AT_BOOKING = "at_booking"
    ON_ARRIVAL = "on_arrival"
    AFTER_SERVICE = "after_service"
    DEPOSIT_THEN_BALANCE = "deposit_then_balance"

    ALL = [AT_BOOKING, ON_ARRIVAL, AFTER_SERVICE, DEPOSIT_THEN_BALANCE]


class PaymentProcessing:
    """Payment processing modes sent to the registration service."""
    SECURE_TOKENIZED = "secure_tokenized"


class Currency:
    """Currency codes offered by the form (ISO 4217)."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"
    CNY = "CNY"
    INR = "INR"

    ALL = [USD, EUR, GBP, CAD, AUD, JPY, CNY, INR]


# ============================================================================
# INTEGRATION CONSTANTS
# ============================================================================

class WebhookEvent:
    """Webhook event types."""
    BOOKING_CONFIRMED = "booking_confirmed"
    BOOKING_MODIFIED = "booking_modified"
    BOOKING_CANCELLED = "booking_cancelled"
    PAYMENT_PROCESSED = "payment_processed"
    PAYMENT_FAILED = "payment_failed"
    PAYMENT_REFUNDED = "payment_refunded"
    SERVICE_STARTED = "service_started"
    SERVICE_COMPLETED = "service_completed"

    ALL = [
        BOOKING_CONFIRMED,
        BOOKING_MODIFIED,
        BOOKING_CANCELLED,
        PAYMENT_PROCESSED,
        PAYMENT_FAILED,
        PAYMENT_REFUNDED,
        SERVICE_STARTED,
        SERVICE_COMPLETED,
    ]

    # Sent when the caller does not choose any events
    DEFAULT = [BOOKING_CONFIRMED, PAYMENT_PROCESSED, BOOKING_CANCELLED]


class IntegrationEndpoints:
    """Protocol-specific endpoint shapes."""
    MCP_SUFFIX = "/mcp"
    A2A_DISCOVERY_PATH = "/.well-known/agent.json"
    WEBHOOK_PATH = "/webhooks"
    BUSINESS_PATH_PREFIX = "/businesses"


# ============================================================================
# LOCATION CONSTANTS
# ============================================================================

class CountryCode:
    """Supported country codes (ISO 3166-1 alpha-2)."""
    COUNTRY_NAMES: dict[str, str] = {
        "US": "United States",
        "CA": "Canada",
        "GB": "United Kingdom",
        "AU": "Australia",
        "DE": "Germany",
        "FR": "France",
        "IT": "Italy",
        "ES": "Spain",
        "NL": "Netherlands",
        "SE": "Sweden",
        "NO": "Norway",
        "DK": "Denmark",
        "FI": "Finland",
        "IE": "Ireland",
        "JP": "Japan",
        "CN": "China",
        "IN": "India",
        "BR": "Brazil",
        "MX": "Mexico",
        "NZ": "New Zealand",
        "SG": "Singapore",
        "HK": "Hong Kong",
        "AE": "United Arab Emirates",
    }

    ALL = list(COUNTRY_NAMES)


class Timezone:
    """Timezones offered by the form (IANA identifiers)."""
    ALL = [
        "UTC",
        "America/New_York",
        "America/Chicago",
        "America/Denver",
        "America/Los_Angeles",
        "America/Anchorage",
        "Pacific/Honolulu",
        "America/Toronto",
        "America/Vancouver",
        "Europe/London",
        "Europe/Paris",
        "Europe/Berlin",
        "Europe/Rome",
        "Europe/Madrid",
        "Europe/Amsterdam",
        "Europe/Stockholm",
        "Asia/Tokyo",
        "Asia/Shanghai",
        "Asia/Hong_Kong",
        "Asia/Singapore",
        "Asia/Dubai",
        "Australia/Sydney",
        "Australia/Melbourne",
        "Pacific/Auckland",
    ]


# ============================================================================
# VALIDATION RULES
# ============================================================================

@dataclass(frozen=True)
class FieldRule:
    """Validation rule for a single field.

    Length bounds apply to strings, value bounds to numbers. ``default`` is the
    value injected by the transformer when the field is absent.
    """
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: re.Pattern | None = None
    min_value: float | None = None
    max_value: float | None = None
    default: Any = None


VALIDATION_RULES: dict[str, FieldRule] = {
    "business_name": FieldRule(required=True, min_length=1, max_length=255),
    "business_description": FieldRule(min_length=0, max_length=1000),
    "service_name": FieldRule(required=True, min_length=1, max_length=100),
    "service_id": FieldRule(
        required=True, min_length=1, max_length=100, pattern=re.compile(r"^[a-z0-9_]+$")
    ),
    "service_description": FieldRule(required=True, min_length=1, max_length=500),
    "parameter_name": FieldRule(
        required=True, min_length=1, max_length=100, pattern=re.compile(r"^[a-z_][a-z0-9_]*$")
    ),
    "parameter_description": FieldRule(required=True, min_length=1, max_length=500),
    "email": FieldRule(required=True, pattern=re.compile(r"^[^@]+@[^@]+\.[^@]+$")),
    "phone": FieldRule(pattern=re.compile(r"^\+?[1-9]\d{1,14}$")),
    "url": FieldRule(pattern=re.compile(r"^https?://.+")),
    "postal_code": FieldRule(min_length=3, max_length=10),
    "country": FieldRule(required=True, min_length=2, max_length=2, default="US"),
    "timezone": FieldRule(required=True, default="UTC"),
    "cancellation_policy_description": FieldRule(required=True, min_length=10, max_length=500),
    "deposit_percentage": FieldRule(min_value=0, max_value=100, default=0),
    "tax_rate": FieldRule(min_value=0, max_value=1, default=0),
    "price": FieldRule(min_value=0, default=0),
    "currency": FieldRule(min_length=3, max_length=3, default=Currency.USD),
    "capacity": FieldRule(min_value=1),
    "latitude": FieldRule(min_value=-90, max_value=90),
    "longitude": FieldRule(min_value=-180, max_value=180),
    "advance_booking_days": FieldRule(min_value=1, max_value=730, default=365),
    "cache_timeout_seconds": FieldRule(min_value=0, max_value=3600, default=300),
    "free_cancellation_hours": FieldRule(min_value=0, max_value=168, default=24),
    "penalty_percentage": FieldRule(min_value=0, max_value=100, default=0),
    "step_timeout_minutes": FieldRule(min_value=1, max_value=1440, default=30),
    "step_retry_attempts": FieldRule(min_value=0, max_value=10, default=3),
    "mandate_expiry_hours": FieldRule(min_value=1, max_value=168, default=24),
}


# ============================================================================
# DEFAULT VALUES
# ============================================================================

class DefaultValues:
    """Schema defaults for a new onboarding session."""
    CURRENCY = Currency.USD
    COUNTRY = "US"
    TIMEZONE = "UTC"
    WORKFLOW_PATTERN = WorkflowPattern.BOOKING_CONFIRMATION_PAYMENT
    CANCELLATION_POLICY_TYPE = CancellationPolicyType.FLEXIBLE
    PAYMENT_METHODS = [PaymentMethod.CREDIT_CARD]
    PAYMENT_TIMING = PaymentTiming.AT_BOOKING
    REAL_TIME_AVAILABILITY = True
    CACHE_TIMEOUT_SECONDS = VALIDATION_RULES["cache_timeout_seconds"].default
    ADVANCE_BOOKING_DAYS = VALIDATION_RULES["advance_booking_days"].default
    FREE_CANCELLATION_HOURS = VALIDATION_RULES["free_cancellation_hours"].default
    PENALTY_PERCENTAGE = VALIDATION_RULES["penalty_percentage"].default
    DEPOSIT_REQUIRED = False
    AP2_ENABLED = True
    AP2_VERIFICATION_REQUIRED = True
    AP2_MANDATE_EXPIRY_HOURS = VALIDATION_RULES["mandate_expiry_hours"].default
    AUTO_GENERATE_ENDPOINTS = True
    RETRY_ATTEMPTS = VALIDATION_RULES["step_retry_attempts"].default
    TIMEOUT_MINUTES = VALIDATION_RULES["step_timeout_minutes"].default
    PARAMETER_TYPE = ParameterType.STRING
    BUSINESS_SLUG = "business"


class CollectionLimits:
    """Size limits for dynamic collections."""
    MAX_SERVICES = 20
    MAX_PARAMETERS_PER_SERVICE = 50
    MAX_WORKFLOW_STEPS = 10
    MIN_PARAMETERS_PER_SERVICE = 1
    MAX_SLUG_LENGTH = 50


# Constraint fields meaningful for each parameter type
CONSTRAINT_FIELDS_BY_TYPE: dict[str, frozenset[str]] = {
    ParameterType.STRING: frozenset({
        ConstraintField.MIN_LENGTH,
        ConstraintField.MAX_LENGTH,
        ConstraintField.PATTERN,
        ConstraintField.ENUM,
        ConstraintField.FORMAT,
    }),
    ParameterType.INTEGER: frozenset({
        ConstraintField.MINIMUM,
        ConstraintField.MAXIMUM,
        ConstraintField.ENUM,
        ConstraintField.FORMAT,
    }),
    ParameterType.NUMBER: frozenset({
        ConstraintField.MINIMUM,
        ConstraintField.MAXIMUM,
        ConstraintField.ENUM,
        ConstraintField.FORMAT,
    }),
    ParameterType.ARRAY: frozenset({ConstraintField.MIN_ITEMS, ConstraintField.MAX_ITEMS}),
    ParameterType.DATE: frozenset({ConstraintField.FORMAT}),
    ParameterType.DATETIME: frozenset({ConstraintField.FORMAT}),
    ParameterType.TIME: frozenset({ConstraintField.FORMAT}),
    ParameterType.BOOLEAN: frozenset(),
    ParameterType.OBJECT: frozenset(),
}


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """User-facing validation messages."""
    # Business
    BUSINESS_NAME_INVALID = "Business name is required and must be 1-255 characters"
    BUSINESS_TYPE_INVALID = "Please select a valid business type"
    WEBSITE_INVALID = "Please enter a valid website URL"
    BUSINESS_DESCRIPTION_TOO_LONG = "Business description must be no more than {max_length} characters"
    CAPACITY_INVALID = "Business capacity must be a positive integer"
    ESTABLISHED_DATE_INVALID = "Established date must be a valid date (YYYY-MM-DD)"

    # Location
    ADDRESS_REQUIRED = "Address is required"
    CITY_REQUIRED = "City is required"
    STATE_REQUIRED = "State/Province is required"
    COUNTRY_INVALID = "Please select a valid country"
    TIMEZONE_REQUIRED = "Timezone is required"
    POSTAL_CODE_INVALID = "Postal code must be {min_length}-{max_length} characters"
    COORDINATES_INVALID = "Invalid coordinates format"

    # Contact
    EMAIL_INVALID = "Please enter a valid email address"
    PHONE_INVALID = "Please enter a valid phone number (e.g., +1-555-555-5555)"
    SECONDARY_EMAIL_INVALID = "Secondary email must be a valid email address"

    # Services
    SERVICES_REQUIRED = "At least one service must be defined"
    SERVICES_TOO_MANY = "Maximum {max_services} services allowed"
    SERVICE_NAME_INVALID = "{prefix}: Service name is required (1-100 characters)"
    SERVICE_ID_INVALID = "{prefix}: Service ID is required (1-100 characters)"
    SERVICE_ID_PATTERN = "{prefix}: Service ID must contain only lowercase letters, numbers, and underscores"
    SERVICE_ID_DUPLICATE = '{prefix}: Service ID "{service_id}" is already used by Service {first_index}'
    SERVICE_DESCRIPTION_INVALID = "{prefix}: Service description is required (1-500 characters)"
    SERVICE_CATEGORY_REQUIRED = "{prefix}: Service category is required"

    # Workflow
    WORKFLOW_REQUIRED = "{prefix}: Workflow configuration is required"
    WORKFLOW_PATTERN_INVALID = "{prefix}: Please select a valid workflow pattern"
    WORKFLOW_STEPS_TOO_MANY = "{prefix}: Maximum {max_steps} workflow steps allowed"
    STEP_NAME_REQUIRED = "{prefix}: Step name is required"
    STEP_TIMEOUT_INVALID = "{prefix}: Timeout must be between {min_value} and {max_value} minutes"
    STEP_RETRY_INVALID = "{prefix}: Retry attempts must be between {min_value} and {max_value}"

    # Parameters
    PARAMETERS_REQUIRED = "{prefix}: At least one parameter is required"
    PARAMETERS_TOO_MANY = "{prefix}: Maximum {max_parameters} parameters allowed"
    PARAMETER_NAME_INVALID = "{prefix}: Parameter name is required (1-100 characters)"
    PARAMETER_NAME_PATTERN = (
        "{prefix}: Parameter name must start with a letter and contain only "
        "lowercase letters, numbers, and underscores"
    )
    PARAMETER_NAME_DUPLICATE = '{prefix}: Parameter name "{name}" is already used by Parameter {first_index}'
    PARAMETER_TYPE_INVALID = "{prefix}: Please select a valid parameter type"
    PARAMETER_DESCRIPTION_INVALID = "{prefix}: Description is required (1-500 characters)"
    PARAMETER_DEFAULT_INVALID = "{prefix}: Default value must be a valid {type} value"

    # Constraints
    CONSTRAINT_NOT_APPLICABLE = "{prefix}: Constraint '{field}' does not apply to {type} parameters"
    CONSTRAINT_MIN_GREATER_THAN_MAX = "{prefix}: Minimum cannot be greater than maximum"
    CONSTRAINT_MIN_LENGTH_GREATER = "{prefix}: Minimum length cannot be greater than maximum length"
    CONSTRAINT_LENGTH_NEGATIVE = "{prefix}: Length constraints must be non-negative integers"
    CONSTRAINT_PATTERN_INVALID = "{prefix}: Invalid regex pattern"
    CONSTRAINT_ENUM_EMPTY = "{prefix}: Allowed values list cannot be empty"
    CONSTRAINT_FORMAT_INVALID = '{prefix}: Unknown format "{format}"'
    CONSTRAINT_MIN_ITEMS_GREATER = "{prefix}: Minimum items cannot be greater than maximum items"
    CONSTRAINT_ITEMS_NEGATIVE = "{prefix}: Item count constraints must be non-negative integers"

    # Pricing
    PRICING_BASE_RATE_INVALID = "{prefix}: Base rate must be a non-negative number"
    PRICING_CURRENCY_INVALID = "{prefix}: Currency must be a 3-character code (e.g., USD)"
    PRICING_TAX_RATE_INVALID = "{prefix}: Tax rate must be between 0 and 1"
    PRICING_SERVICE_FEE_INVALID = "{prefix}: Service fee must be a non-negative number"
    PRICING_MINIMUM_CHARGE_INVALID = "{prefix}: Minimum charge must be a non-negative number"

    # Availability
    AVAILABILITY_REQUIRED = "{prefix}: Availability configuration is required"
    CACHE_TIMEOUT_INVALID = "{prefix}: Cache timeout must be between {min_value} and {max_value} seconds"
    ADVANCE_BOOKING_INVALID = "{prefix}: Advance booking days must be between {min_value} and {max_value}"
    AVAILABILITY_ENDPOINT_INVALID = "{prefix}: Availability endpoint must be a valid URL"

    # Cancellation
    CANCELLATION_REQUIRED = "{prefix}: Cancellation policy is required"
    CANCELLATION_TYPE_INVALID = "{prefix}: Please select a valid cancellation policy type"
    FREE_CANCELLATION_INVALID = "{prefix}: Free cancellation hours must be between {min_value} and {max_value}"
    PENALTY_INVALID = "{prefix}: Penalty percentage must be between {min_value} and {max_value}"
    CANCELLATION_DESCRIPTION_INVALID = "{prefix}: Cancellation policy description is required (10-500 characters)"

    # Payment
    PAYMENT_REQUIRED = "{prefix}: Payment configuration is required"
    PAYMENT_METHODS_REQUIRED = "{prefix}: At least one payment method must be selected"
    PAYMENT_METHOD_INVALID = '{prefix}: Invalid payment method "{method}"'
    PAYMENT_TIMING_INVALID = "{prefix}: Please select a valid payment timing"
    DEPOSIT_INVALID = "{prefix}: Deposit percentage must be between {min_value} and {max_value}"

    # Policies
    MODIFICATION_FEE_INVALID = "{prefix}: Modification fee must be a non-negative number"
    NO_SHOW_PENALTY_INVALID = "{prefix}: No-show penalty must be a non-negative number"

    # Integration
    MCP_ENDPOINT_REQUIRED = "MCP endpoint is required when auto-generate is disabled"
    MCP_ENDPOINT_INVALID = "MCP endpoint must be a valid URL ending with /mcp"
    A2A_URL_REQUIRED = "A2A discovery URL is required when auto-generate is disabled"
    A2A_URL_INVALID = "A2A discovery URL must be a valid URL containing /.well-known/agent.json"
    WEBHOOK_ENDPOINT_REQUIRED = "Webhook endpoint is required when auto-generate is disabled"
    WEBHOOK_ENDPOINT_INVALID = "Webhook endpoint must be a valid URL"
    WEBHOOK_EVENT_INVALID = 'Invalid webhook event "{event}"'

    # AP2
    AP2_EXPIRY_INVALID = "AP2 mandate expiry must be between {min_value} and {max_value} hours"

    # Single-field checks
    REQUIRED_FIELD = "This field is required"
    PATTERN_MISMATCH = "Invalid format"
    MIN_LENGTH = "Must be at least {min_length} characters"
    MAX_LENGTH = "Must be no more than {max_length} characters"
    MIN_VALUE = "Must be at least {min_value}"
    MAX_VALUE = "Must be no more than {max_value}"
    UNKNOWN_FIELD = "No validation rule registered for field '{field_name}'"

    # Transformation / registration
    SECTION_MISSING = "Cannot transform configuration: '{section}' is missing"
    CONFIGURATION_INVALID = "Configuration is invalid: {count} error(s)"
    REGISTRATION_FAILED = "Registration failed: {detail}"
