"""Factories for new onboarding trees.

Each call returns a fresh object seeded with the schema defaults, so callers
can mutate the result without affecting later sessions.
"""

from ...core.constants import DefaultValues, WebhookEvent
from ...schemas.configuration import (
    A2AIntegration,
    AP2Config,
    Availability,
    BusinessConfiguration,
    CancellationPolicy,
    IntegrationConfig,
    McpIntegration,
    Parameter,
    PaymentConfig,
    ServiceConfiguration,
    ServicePolicies,
    WebhookIntegration,
    Workflow,
    WorkflowStep,
)


def create_empty_service() -> ServiceConfiguration:
    """Create a blank service with default workflow, availability and terms."""
    return ServiceConfiguration(
        service_id="",
        name="",
        description="",
        category="",
        workflow=Workflow(pattern=DefaultValues.WORKFLOW_PATTERN, steps=[]),
        parameters=[],
        availability=Availability(
            real_time=DefaultValues.REAL_TIME_AVAILABILITY,
            cache_timeout_seconds=DefaultValues.CACHE_TIMEOUT_SECONDS,
            advance_booking_days=DefaultValues.ADVANCE_BOOKING_DAYS,
        ),
        cancellation_policy=CancellationPolicy(
            type=DefaultValues.CANCELLATION_POLICY_TYPE,
            free_until_hours=DefaultValues.FREE_CANCELLATION_HOURS,
            penalty_percentage=DefaultValues.PENALTY_PERCENTAGE,
        ),
        payment=PaymentConfig(
            methods=list(DefaultValues.PAYMENT_METHODS),
            timing=DefaultValues.PAYMENT_TIMING,
            deposit_required=DefaultValues.DEPOSIT_REQUIRED,
        ),
        policies=ServicePolicies(modification_fee=0, no_show_penalty=0),
    )


def create_empty_parameter(name: str = "") -> Parameter:
    """Create a blank optional string parameter."""
    return Parameter(name=name, type=DefaultValues.PARAMETER_TYPE, description="", required=False)


def create_workflow_step(name: str = "") -> WorkflowStep:
    """Create a required workflow step with default timeout and retries."""
    return WorkflowStep(
        name=name,
        required=True,
        timeout_minutes=DefaultValues.TIMEOUT_MINUTES,
        retry_attempts=DefaultValues.RETRY_ATTEMPTS,
    )


def create_default_configuration() -> BusinessConfiguration:
    """Create the configuration a new onboarding session starts from.

    The tree holds one empty service, auto-generated integration endpoints
    and AP2 enabled with the default mandate expiry.

    Examples:
        >>> config = create_default_configuration()
        >>> len(config.services)
        1
        >>> config.location.country
        'US'
    """
    return BusinessConfiguration(
        services=[create_empty_service()],
        integration=IntegrationConfig(
            mcp=McpIntegration(auto_generate=DefaultValues.AUTO_GENERATE_ENDPOINTS),
            a2a=A2AIntegration(auto_generate=DefaultValues.AUTO_GENERATE_ENDPOINTS),
            webhooks=WebhookIntegration(
                auto_generate=DefaultValues.AUTO_GENERATE_ENDPOINTS,
                events=list(WebhookEvent.DEFAULT),
            ),
        ),
        ap2=AP2Config(
            enabled=DefaultValues.AP2_ENABLED,
            verification_required=DefaultValues.AP2_VERIFICATION_REQUIRED,
            mandate_expiry_hours=DefaultValues.AP2_MANDATE_EXPIRY_HOURS,
        ),
    )
