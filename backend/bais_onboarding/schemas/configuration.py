"""Pydantic Schemas for the Editable Business Configuration.

These models hold the in-memory configuration the onboarding form edits.
Attributes are snake_case; the camelCase names used by the form
(``businessInfo``, ``cacheTimeoutSeconds``...) are accepted as aliases, so a
form-state document loads with ``BusinessConfiguration.model_validate(data)``.

The models are intentionally permissive: values that violate a business rule
(unknown enum member, out-of-range number, empty required string) are kept as
typed so the validation engine can report every problem in one pass.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.constants import DefaultValues, WebhookEvent


class EditableModel(BaseModel):
    """Base model accepting both snake_case and camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# BUSINESS, LOCATION, CONTACT
# ============================================================================

class BusinessInfo(EditableModel):
    """Business identity block."""
    name: str = ""
    type: str = ""
    description: str | None = None
    website: str | None = None
    established_date: str | None = None
    capacity: int | None = None


class Coordinates(EditableModel):
    """Geographic coordinates."""
    latitude: int | float | None = None
    longitude: int | float | None = None


class Location(EditableModel):
    """Physical business location."""
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str | None = None
    country: str = DefaultValues.COUNTRY
    timezone: str = DefaultValues.TIMEZONE
    coordinates: Coordinates | None = None


class ContactInfo(EditableModel):
    """Contact information."""
    email: str = ""
    phone: str | None = None
    secondary_email: str | None = None
    business_hours: str | None = None


# ============================================================================
# SERVICE PARAMETERS
# ============================================================================

class Constraints(EditableModel):
    """Parameter constraints.

    Which fields are meaningful depends on the parameter type; see
    ``CONSTRAINT_FIELDS_BY_TYPE`` and the constraint strategies.
    """
    minimum: int | float | None = None
    maximum: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    enum: list[Any] | None = None
    format: str | None = None
    min_items: int | None = None
    max_items: int | None = None

    def set_fields(self) -> dict[str, Any]:
        """Return only the constraint fields that carry a value."""
        return {name: value for name, value in self if value is not None}


class Pricing(EditableModel):
    """Per-parameter pricing."""
    base_rate: int | float | None = 0
    currency: str | None = DefaultValues.CURRENCY
    tax_rate: int | float | None = 0
    service_fee: int | float | None = 0
    minimum_charge: int | float | None = None


class Parameter(EditableModel):
    """Service input parameter."""
    name: str = ""
    type: str = DefaultValues.PARAMETER_TYPE
    description: str = ""
    required: bool = False
    default: Any = None
    constraints: Constraints | None = None
    pricing: Pricing | None = None


# ============================================================================
# SERVICE BLOCKS
# ============================================================================

class WorkflowStep(EditableModel):
    """Single workflow step."""
    name: str = ""
    description: str | None = None
    required: bool = True
    timeout_minutes: int | None = DefaultValues.TIMEOUT_MINUTES
    retry_attempts: int | None = DefaultValues.RETRY_ATTEMPTS


class Workflow(EditableModel):
    """Service workflow."""
    pattern: str = DefaultValues.WORKFLOW_PATTERN
    steps: list[WorkflowStep] = Field(default_factory=list)


class Availability(EditableModel):
    """Availability lookup settings."""
    real_time: bool = DefaultValues.REAL_TIME_AVAILABILITY
    cache_timeout_seconds: int | None = DefaultValues.CACHE_TIMEOUT_SECONDS
    advance_booking_days: int | None = DefaultValues.ADVANCE_BOOKING_DAYS
    endpoint: str | None = None


class CancellationPolicy(EditableModel):
    """Cancellation terms."""
    type: str = DefaultValues.CANCELLATION_POLICY_TYPE
    free_until_hours: int | float | None = DefaultValues.FREE_CANCELLATION_HOURS
    penalty_percentage: int | float | None = DefaultValues.PENALTY_PERCENTAGE
    description: str = ""


class PaymentConfig(EditableModel):
    """Payment settings."""
    methods: list[str] = Field(default_factory=lambda: list(DefaultValues.PAYMENT_METHODS))
    timing: str = DefaultValues.PAYMENT_TIMING
    deposit_required: bool = DefaultValues.DEPOSIT_REQUIRED
    deposit_percentage: int | float | None = None


class ServicePolicies(EditableModel):
    """Modification and no-show fees."""
    modification_fee: int | float | None = 0
    no_show_penalty: int | float | None = 0


class ServiceConfiguration(EditableModel):
    """Bookable service offered by the business.

    ``service_id`` is exposed to the form as ``id``.
    """
    service_id: str = Field(default="", alias="id")
    name: str = ""
    description: str = ""
    category: str = ""
    workflow: Workflow | None = Field(default_factory=Workflow)
    parameters: list[Parameter] = Field(default_factory=list)
    availability: Availability | None = Field(default_factory=Availability)
    cancellation_policy: CancellationPolicy | None = Field(default_factory=CancellationPolicy)
    payment: PaymentConfig | None = Field(default_factory=PaymentConfig)
    policies: ServicePolicies | None = Field(default_factory=ServicePolicies)


# ============================================================================
# INTEGRATION & AP2
# ============================================================================

class McpIntegration(EditableModel):
    """Model Context Protocol endpoint settings."""
    auto_generate: bool = DefaultValues.AUTO_GENERATE_ENDPOINTS
    endpoint: str | None = None


class A2AIntegration(EditableModel):
    """Agent-to-Agent discovery settings."""
    auto_generate: bool = DefaultValues.AUTO_GENERATE_ENDPOINTS
    discovery_url: str | None = None


class WebhookIntegration(EditableModel):
    """Webhook delivery settings."""
    auto_generate: bool = DefaultValues.AUTO_GENERATE_ENDPOINTS
    endpoint: str | None = None
    events: list[str] = Field(default_factory=lambda: list(WebhookEvent.DEFAULT))


class IntegrationConfig(EditableModel):
    """Agent integration endpoints."""
    mcp: McpIntegration | None = Field(default_factory=McpIntegration)
    a2a: A2AIntegration | None = Field(default_factory=A2AIntegration)
    webhooks: WebhookIntegration | None = Field(default_factory=WebhookIntegration)


class AP2Config(EditableModel):
    """Autonomous Payment Protocol settings."""
    enabled: bool = DefaultValues.AP2_ENABLED
    verification_required: bool = DefaultValues.AP2_VERIFICATION_REQUIRED
    mandate_expiry_hours: int | None = DefaultValues.AP2_MANDATE_EXPIRY_HOURS


# ============================================================================
# ROOT AGGREGATE
# ============================================================================

class BusinessConfiguration(EditableModel):
    """Root aggregate describing one business and its services.

    The form calls the contact block ``contact`` and the AP2 block ``ap2``.
    """
    business_info: BusinessInfo = Field(default_factory=BusinessInfo)
    location: Location = Field(default_factory=Location)
    contact: ContactInfo = Field(default_factory=ContactInfo)
    services: list[ServiceConfiguration] = Field(default_factory=list)
    integration: IntegrationConfig | None = Field(default_factory=IntegrationConfig)
    ap2: AP2Config | None = Field(default_factory=AP2Config)
