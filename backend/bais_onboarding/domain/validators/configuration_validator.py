"""Business Configuration Validation.

Walks the whole configuration in a fixed order (business, location, contact,
services, integration, AP2) and collects every violation as a human-readable
message. Validation never raises for typed input and never mutates it; the
error list lives only for the duration of one call.
"""

from ...core.constants import (
    VALIDATION_RULES,
    BusinessType,
    CountryCode,
    ErrorMessages,
    IntegrationEndpoints,
    WebhookEvent,
)
from ...core.logging import get_logger
from ...schemas.configuration import (
    AP2Config,
    BusinessConfiguration,
    BusinessInfo,
    ContactInfo,
    IntegrationConfig,
    Location,
)
from ...strategies.base import ValidationResult
from ...utils.validators import (
    is_integer,
    is_required_string,
    is_valid_coordinates,
    is_valid_email,
    is_valid_iso_date,
    is_valid_phone,
    is_valid_string,
    is_valid_url,
    is_within_bounds,
)
from .service_validator import validate_services

logger = get_logger(__name__)


def validate_configuration(config: BusinessConfiguration) -> ValidationResult:
    """Validate a complete business configuration.

    Args:
        config: Configuration to check

    Returns:
        ValidationResult with every violation in discovery order

    Examples:
        >>> result = validate_configuration(config)
        >>> result.is_valid
        False
        >>> result.errors[0]
        'Business name is required and must be 1-255 characters'
    """
    errors: list[str] = []

    _validate_business_info(config.business_info, errors)
    _validate_location(config.location, errors)
    _validate_contact(config.contact, errors)
    validate_services(config.services, errors)

    if config.integration is not None:
        _validate_integration(config.integration, errors)

    if config.ap2 is not None:
        _validate_ap2(config.ap2, errors)

    logger.debug(
        "Configuration validated",
        extra={
            'service_count': len(config.services),
            'error_count': len(errors)
        }
    )

    return ValidationResult.from_errors(errors)


def _validate_business_info(info: BusinessInfo, errors: list[str]) -> None:
    if not is_valid_string(info.name, VALIDATION_RULES["business_name"]):
        errors.append(ErrorMessages.BUSINESS_NAME_INVALID)

    if info.type not in BusinessType.ALL:
        errors.append(ErrorMessages.BUSINESS_TYPE_INVALID)

    if info.website and not is_valid_url(info.website):
        errors.append(ErrorMessages.WEBSITE_INVALID)

    description_rule = VALIDATION_RULES["business_description"]
    if info.description and len(info.description) > description_rule.max_length:
        errors.append(ErrorMessages.BUSINESS_DESCRIPTION_TOO_LONG.format(max_length=description_rule.max_length))

    if info.capacity is not None and not (
        is_integer(info.capacity) and is_within_bounds(info.capacity, VALIDATION_RULES["capacity"])
    ):
        errors.append(ErrorMessages.CAPACITY_INVALID)

    if info.established_date and not is_valid_iso_date(info.established_date):
        errors.append(ErrorMessages.ESTABLISHED_DATE_INVALID)


def _validate_location(location: Location, errors: list[str]) -> None:
    if not is_required_string(location.address):
        errors.append(ErrorMessages.ADDRESS_REQUIRED)

    if not is_required_string(location.city):
        errors.append(ErrorMessages.CITY_REQUIRED)

    if not is_required_string(location.state):
        errors.append(ErrorMessages.STATE_REQUIRED)

    if location.country not in CountryCode.ALL:
        errors.append(ErrorMessages.COUNTRY_INVALID)

    if not is_required_string(location.timezone):
        errors.append(ErrorMessages.TIMEZONE_REQUIRED)

    postal_rule = VALIDATION_RULES["postal_code"]
    if location.postal_code and not is_valid_string(location.postal_code, postal_rule):
        errors.append(ErrorMessages.POSTAL_CODE_INVALID.format(
            min_length=postal_rule.min_length, max_length=postal_rule.max_length
        ))

    coordinates = location.coordinates
    if coordinates is not None and not is_valid_coordinates(coordinates.latitude, coordinates.longitude):
        errors.append(ErrorMessages.COORDINATES_INVALID)


def _validate_contact(contact: ContactInfo, errors: list[str]) -> None:
    if not is_valid_email(contact.email):
        errors.append(ErrorMessages.EMAIL_INVALID)

    if contact.phone and not is_valid_phone(contact.phone):
        errors.append(ErrorMessages.PHONE_INVALID)

    if contact.secondary_email and not is_valid_email(contact.secondary_email):
        errors.append(ErrorMessages.SECONDARY_EMAIL_INVALID)


def _validate_integration(integration: IntegrationConfig, errors: list[str]) -> None:
    """Check manually configured endpoints.

    An endpoint is only inspected when its ``auto_generate`` flag is off;
    auto-generated endpoints are synthesized by the registration API.
    """
    mcp = integration.mcp
    if mcp is not None and not mcp.auto_generate:
        if not mcp.endpoint:
            errors.append(ErrorMessages.MCP_ENDPOINT_REQUIRED)
        elif not (is_valid_url(mcp.endpoint) and mcp.endpoint.endswith(IntegrationEndpoints.MCP_SUFFIX)):
            errors.append(ErrorMessages.MCP_ENDPOINT_INVALID)

    a2a = integration.a2a
    if a2a is not None and not a2a.auto_generate:
        if not a2a.discovery_url:
            errors.append(ErrorMessages.A2A_URL_REQUIRED)
        elif not (
            is_valid_url(a2a.discovery_url)
            and IntegrationEndpoints.A2A_DISCOVERY_PATH in a2a.discovery_url
        ):
            errors.append(ErrorMessages.A2A_URL_INVALID)

    webhooks = integration.webhooks
    if webhooks is not None:
        if not webhooks.auto_generate:
            if not webhooks.endpoint:
                errors.append(ErrorMessages.WEBHOOK_ENDPOINT_REQUIRED)
            elif not is_valid_url(webhooks.endpoint):
                errors.append(ErrorMessages.WEBHOOK_ENDPOINT_INVALID)

        for event in webhooks.events:
            if event not in WebhookEvent.ALL:
                errors.append(ErrorMessages.WEBHOOK_EVENT_INVALID.format(event=event))


def _validate_ap2(ap2: AP2Config, errors: list[str]) -> None:
    if not ap2.enabled:
        return

    rule = VALIDATION_RULES["mandate_expiry_hours"]
    if ap2.mandate_expiry_hours is not None and not is_within_bounds(ap2.mandate_expiry_hours, rule):
        errors.append(ErrorMessages.AP2_EXPIRY_INVALID.format(min_value=rule.min_value, max_value=rule.max_value))
