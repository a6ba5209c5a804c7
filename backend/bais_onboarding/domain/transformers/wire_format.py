"""Wire Format Transformers.

Converts between the editable ``BusinessConfiguration`` and the normalized
snake_case payload accepted by the registration API:

- ``to_wire_format``: injects defaults for absent fields, omits empty optional
  fields and auto-generated endpoints, flattens parameter constraints and
  normalizes the phone number.
- ``from_wire_format``: rebuilds a configuration from a payload using the same
  mapping tables; auto-generate flags are derived from absent endpoints and a
  missing AP2 block means AP2 is disabled.

Neither direction mutates its input, and neither re-validates: callers run
``validate_configuration`` first.
"""

from typing import Any

from ...core.constants import ErrorMessages, PaymentProcessing, WebhookEvent
from ...core.exceptions import TransformationError
from ...core.logging import get_logger
from ...schemas.configuration import (
    A2AIntegration,
    AP2Config,
    Availability,
    BusinessConfiguration,
    BusinessInfo,
    CancellationPolicy,
    ContactInfo,
    Constraints,
    Coordinates,
    IntegrationConfig,
    Location,
    McpIntegration,
    Parameter,
    PaymentConfig,
    Pricing,
    ServiceConfiguration,
    ServicePolicies,
    WebhookIntegration,
    Workflow,
    WorkflowStep,
)
from .mapping import (
    AP2_FIELDS,
    AVAILABILITY_FIELDS,
    BUSINESS_FIELDS,
    CANCELLATION_FIELDS,
    CONSTRAINT_FIELDS,
    CONTACT_FIELDS,
    COORDINATE_FIELDS,
    DEPOSIT_PERCENTAGE_FIELD,
    LOCATION_FIELDS,
    PARAMETER_FIELDS,
    PAYMENT_FIELDS,
    POLICY_FIELDS,
    PRICING_FIELDS,
    SERVICE_FIELDS,
    WEBSITE_FIELD,
    WORKFLOW_FIELDS,
    WORKFLOW_STEP_FIELDS,
    forward_value,
    map_forward,
    map_reverse,
    require_section,
)

logger = get_logger(__name__)


# ============================================================================
# FORWARD: configuration -> wire payload
# ============================================================================

def to_wire_format(config: BusinessConfiguration) -> dict[str, Any]:
    """Transform a validated configuration into the registration payload.

    Args:
        config: Configuration that passed validate_configuration

    Returns:
        New payload dict; shares no mutable state with config

    Raises:
        TransformationError: If a service lacks its workflow, availability,
            cancellation policy or payment block
    """
    payload = map_forward(config.business_info, BUSINESS_FIELDS)
    payload["contact_info"] = _contact_to_wire(config.contact, config.business_info)
    payload["location"] = _location_to_wire(config.location)
    payload["services_config"] = [
        _service_to_wire(service, f"services[{index}]")
        for index, service in enumerate(config.services)
    ]
    payload["integration"] = _integration_to_wire(config.integration or IntegrationConfig())

    if config.ap2 is not None and config.ap2.enabled:
        payload["ap2_config"] = map_forward(config.ap2, AP2_FIELDS)

    logger.debug(
        "Configuration transformed to wire format",
        extra={
            'service_count': len(config.services),
            'ap2_included': 'ap2_config' in payload
        }
    )

    return payload


def _contact_to_wire(contact: ContactInfo, business_info: BusinessInfo) -> dict[str, Any]:
    section = map_forward(contact, CONTACT_FIELDS)

    website = forward_value(business_info, WEBSITE_FIELD)
    if website is not None:
        section[WEBSITE_FIELD.wire_key] = website

    return section


def _location_to_wire(location: Location) -> dict[str, Any]:
    section = map_forward(location, LOCATION_FIELDS)

    if location.coordinates is not None:
        section["coordinates"] = map_forward(location.coordinates, COORDINATE_FIELDS)

    return section


def _require_block(block, path: str):
    if block is None:
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section=path))
    return block


def _service_to_wire(service: ServiceConfiguration, path: str) -> dict[str, Any]:
    workflow = _require_block(service.workflow, f"{path}.workflow")
    availability = _require_block(service.availability, f"{path}.availability")
    cancellation_policy = _require_block(service.cancellation_policy, f"{path}.cancellation_policy")
    payment = _require_block(service.payment, f"{path}.payment")

    section = map_forward(service, SERVICE_FIELDS)
    section.update(map_forward(workflow, WORKFLOW_FIELDS))

    if workflow.steps:
        section["workflow_steps"] = [map_forward(step, WORKFLOW_STEP_FIELDS) for step in workflow.steps]

    section["parameters"] = {
        parameter.name: _parameter_to_wire(parameter) for parameter in service.parameters
    }
    section["availability"] = map_forward(availability, AVAILABILITY_FIELDS)
    section["cancellation_policy"] = map_forward(cancellation_policy, CANCELLATION_FIELDS)
    section["payment_config"] = _payment_to_wire(payment)
    section["policies"] = map_forward(service.policies or ServicePolicies(), POLICY_FIELDS)

    return section


def _parameter_to_wire(parameter: Parameter) -> dict[str, Any]:
    section = map_forward(parameter, PARAMETER_FIELDS)

    if parameter.constraints is not None:
        section.update(map_forward(parameter.constraints, CONSTRAINT_FIELDS))

    if parameter.pricing is not None:
        section["pricing"] = map_forward(parameter.pricing, PRICING_FIELDS)

    return section


def _payment_to_wire(payment: PaymentConfig) -> dict[str, Any]:
    section = map_forward(payment, PAYMENT_FIELDS)
    section["processing"] = PaymentProcessing.SECURE_TOKENIZED

    if payment.deposit_required:
        section[DEPOSIT_PERCENTAGE_FIELD.wire_key] = forward_value(payment, DEPOSIT_PERCENTAGE_FIELD)

    return section


def _manual_endpoint(settings, attribute: str) -> str | None:
    """Endpoint to send, or None when it is auto-generated or blank."""
    if settings is None or settings.auto_generate:
        return None
    return getattr(settings, attribute) or None


def _integration_to_wire(integration: IntegrationConfig) -> dict[str, Any]:
    section: dict[str, Any] = {}

    endpoints = (
        ("mcp_endpoint", integration.mcp, "endpoint"),
        ("a2a_discovery_url", integration.a2a, "discovery_url"),
        ("webhook_endpoint", integration.webhooks, "endpoint"),
    )
    for wire_key, settings, attribute in endpoints:
        endpoint = _manual_endpoint(settings, attribute)
        if endpoint is not None:
            section[wire_key] = endpoint

    events = integration.webhooks.events if integration.webhooks is not None else None
    section["webhook_events"] = list(WebhookEvent.DEFAULT if events is None else events)

    return section


# ============================================================================
# REVERSE: wire payload -> configuration
# ============================================================================

def from_wire_format(payload: dict[str, Any]) -> BusinessConfiguration:
    """Rebuild an editable configuration from a registration payload.

    Args:
        payload: Payload in the shape produced by to_wire_format

    Returns:
        New BusinessConfiguration

    Raises:
        TransformationError: If a required section or key is missing
    """
    if not isinstance(payload, dict):
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section="payload"))

    business = map_reverse(payload, BUSINESS_FIELDS, "")

    contact_wire = require_section(payload, "contact_info", "")
    contact = map_reverse(contact_wire, CONTACT_FIELDS, "contact_info")
    business.update(map_reverse(contact_wire, (WEBSITE_FIELD,), "contact_info"))

    services_wire = require_section(payload, "services_config", "")
    if not isinstance(services_wire, list):
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section="services_config"))

    config = BusinessConfiguration(
        business_info=BusinessInfo(**business),
        location=_location_from_wire(require_section(payload, "location", "")),
        contact=ContactInfo(**contact),
        services=[
            _service_from_wire(service, f"services_config[{index}]")
            for index, service in enumerate(services_wire)
        ],
        integration=_integration_from_wire(payload.get("integration") or {}),
        ap2=_ap2_from_wire(payload.get("ap2_config")),
    )

    logger.debug(
        "Configuration loaded from wire format",
        extra={'service_count': len(config.services)}
    )

    return config


def _location_from_wire(section: dict[str, Any]) -> Location:
    attributes = map_reverse(section, LOCATION_FIELDS, "location")

    if section.get("coordinates") is not None:
        attributes["coordinates"] = Coordinates(
            **map_reverse(section["coordinates"], COORDINATE_FIELDS, "location.coordinates")
        )

    return Location(**attributes)


def _service_from_wire(section: dict[str, Any], path: str) -> ServiceConfiguration:
    attributes = map_reverse(section, SERVICE_FIELDS, path)

    steps = [
        WorkflowStep(**map_reverse(step, WORKFLOW_STEP_FIELDS, f"{path}.workflow_steps[{index}]"))
        for index, step in enumerate(section.get("workflow_steps") or [])
    ]
    attributes["workflow"] = Workflow(**map_reverse(section, WORKFLOW_FIELDS, path), steps=steps)

    parameters = require_section(section, "parameters", path)
    if not isinstance(parameters, dict):
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section=f"{path}.parameters"))
    attributes["parameters"] = [
        _parameter_from_wire(name, parameter, f"{path}.parameters.{name}")
        for name, parameter in parameters.items()
    ]

    availability = require_section(section, "availability", path)
    attributes["availability"] = Availability(
        **map_reverse(availability, AVAILABILITY_FIELDS, f"{path}.availability")
    )

    cancellation = require_section(section, "cancellation_policy", path)
    attributes["cancellation_policy"] = CancellationPolicy(
        **map_reverse(cancellation, CANCELLATION_FIELDS, f"{path}.cancellation_policy")
    )

    attributes["payment"] = _payment_from_wire(
        require_section(section, "payment_config", path), f"{path}.payment_config"
    )
    attributes["policies"] = ServicePolicies(
        **map_reverse(section.get("policies") or {}, POLICY_FIELDS, f"{path}.policies")
    )

    return ServiceConfiguration(**attributes)


def _parameter_from_wire(name: str, section: dict[str, Any], path: str) -> Parameter:
    attributes = map_reverse(section, PARAMETER_FIELDS, path)
    attributes["name"] = name

    constraints = map_reverse(section, CONSTRAINT_FIELDS, path)
    if constraints:
        attributes["constraints"] = Constraints(**constraints)

    if section.get("pricing") is not None:
        attributes["pricing"] = Pricing(**map_reverse(section["pricing"], PRICING_FIELDS, f"{path}.pricing"))

    return Parameter(**attributes)


def _payment_from_wire(section: dict[str, Any], path: str) -> PaymentConfig:
    attributes = map_reverse(section, PAYMENT_FIELDS, path)

    if attributes.get("deposit_required"):
        attributes.update(map_reverse(section, (DEPOSIT_PERCENTAGE_FIELD,), path))

    return PaymentConfig(**attributes)


def _integration_from_wire(section: dict[str, Any]) -> IntegrationConfig:
    if not isinstance(section, dict):
        raise TransformationError(ErrorMessages.SECTION_MISSING.format(section="integration"))

    mcp_endpoint = section.get("mcp_endpoint")
    discovery_url = section.get("a2a_discovery_url")
    webhook_endpoint = section.get("webhook_endpoint")
    events = section.get("webhook_events")

    return IntegrationConfig(
        mcp=McpIntegration(auto_generate=not mcp_endpoint, endpoint=mcp_endpoint),
        a2a=A2AIntegration(auto_generate=not discovery_url, discovery_url=discovery_url),
        webhooks=WebhookIntegration(
            auto_generate=not webhook_endpoint,
            endpoint=webhook_endpoint,
            events=list(WebhookEvent.DEFAULT if events is None else events),
        ),
    )


def _ap2_from_wire(section: dict[str, Any] | None) -> AP2Config:
    if section is None:
        return AP2Config(enabled=False)

    return AP2Config(**map_reverse(section, AP2_FIELDS, "ap2_config"))
