"""Service validation.

Each service is checked block by block (basics, workflow, parameters,
availability, cancellation, payment, policies). Service ids must be unique
across the whole configuration; the first service to use an id owns it and
every later service reusing it is reported against its own index.
"""

from ...core.constants import (
    VALIDATION_RULES,
    CancellationPolicyType,
    CollectionLimits,
    ErrorMessages,
    FieldRule,
    PaymentMethod,
    PaymentTiming,
    WorkflowPattern,
)
from ...schemas.configuration import (
    Availability,
    CancellationPolicy,
    PaymentConfig,
    ServiceConfiguration,
    ServicePolicies,
    Workflow,
)
from ...utils.validators import (
    is_non_negative,
    is_required_string,
    is_valid_string,
    is_valid_url,
    is_within_bounds,
)
from .parameter_validator import validate_parameters


def validate_services(services: list[ServiceConfiguration], errors: list[str]) -> None:
    """Validate every service of a configuration.

    Args:
        services: Services in declaration order
        errors: Error list to append to
    """
    if not services:
        errors.append(ErrorMessages.SERVICES_REQUIRED)
        return

    if len(services) > CollectionLimits.MAX_SERVICES:
        errors.append(ErrorMessages.SERVICES_TOO_MANY.format(max_services=CollectionLimits.MAX_SERVICES))

    # service_id -> index of first service using it
    seen_ids: dict[str, int] = {}

    for index, service in enumerate(services, start=1):
        prefix = f"Service {index}"

        _validate_basics(service, prefix, index, seen_ids, errors)
        _validate_workflow(service.workflow, prefix, errors)
        validate_parameters(service.parameters, prefix, errors)
        _validate_availability(service.availability, prefix, errors)
        _validate_cancellation(service.cancellation_policy, prefix, errors)
        _validate_payment(service.payment, prefix, errors)

        if service.policies is not None:
            _validate_policies(service.policies, prefix, errors)


def _check_bounds(value, rule: FieldRule, message: str, prefix: str, errors: list[str]) -> None:
    """Append message when an optional numeric value falls outside the rule's bounds."""
    if value is not None and not is_within_bounds(value, rule):
        errors.append(message.format(prefix=prefix, min_value=rule.min_value, max_value=rule.max_value))


def _validate_basics(
    service: ServiceConfiguration,
    prefix: str,
    index: int,
    seen_ids: dict[str, int],
    errors: list[str]
) -> None:
    if not is_valid_string(service.name, VALIDATION_RULES["service_name"]):
        errors.append(ErrorMessages.SERVICE_NAME_INVALID.format(prefix=prefix))

    id_rule = VALIDATION_RULES["service_id"]
    service_id = service.service_id

    if not is_valid_string(service_id, id_rule):
        errors.append(ErrorMessages.SERVICE_ID_INVALID.format(prefix=prefix))
    else:
        if not id_rule.pattern.match(service_id):
            errors.append(ErrorMessages.SERVICE_ID_PATTERN.format(prefix=prefix))

        if service_id in seen_ids:
            errors.append(ErrorMessages.SERVICE_ID_DUPLICATE.format(
                prefix=prefix, service_id=service_id, first_index=seen_ids[service_id]
            ))
        else:
            seen_ids[service_id] = index

    if not is_valid_string(service.description, VALIDATION_RULES["service_description"]):
        errors.append(ErrorMessages.SERVICE_DESCRIPTION_INVALID.format(prefix=prefix))

    if not is_required_string(service.category):
        errors.append(ErrorMessages.SERVICE_CATEGORY_REQUIRED.format(prefix=prefix))


def _validate_workflow(workflow: Workflow | None, prefix: str, errors: list[str]) -> None:
    if workflow is None:
        errors.append(ErrorMessages.WORKFLOW_REQUIRED.format(prefix=prefix))
        return

    if workflow.pattern not in WorkflowPattern.ALL:
        errors.append(ErrorMessages.WORKFLOW_PATTERN_INVALID.format(prefix=prefix))

    if len(workflow.steps) > CollectionLimits.MAX_WORKFLOW_STEPS:
        errors.append(ErrorMessages.WORKFLOW_STEPS_TOO_MANY.format(
            prefix=prefix, max_steps=CollectionLimits.MAX_WORKFLOW_STEPS
        ))

    for step_index, step in enumerate(workflow.steps, start=1):
        step_prefix = f"{prefix}, Step {step_index}"

        if not is_required_string(step.name):
            errors.append(ErrorMessages.STEP_NAME_REQUIRED.format(prefix=step_prefix))

        _check_bounds(
            step.timeout_minutes, VALIDATION_RULES["step_timeout_minutes"],
            ErrorMessages.STEP_TIMEOUT_INVALID, step_prefix, errors
        )
        _check_bounds(
            step.retry_attempts, VALIDATION_RULES["step_retry_attempts"],
            ErrorMessages.STEP_RETRY_INVALID, step_prefix, errors
        )


def _validate_availability(availability: Availability | None, prefix: str, errors: list[str]) -> None:
    if availability is None:
        errors.append(ErrorMessages.AVAILABILITY_REQUIRED.format(prefix=prefix))
        return

    _check_bounds(
        availability.cache_timeout_seconds, VALIDATION_RULES["cache_timeout_seconds"],
        ErrorMessages.CACHE_TIMEOUT_INVALID, prefix, errors
    )
    _check_bounds(
        availability.advance_booking_days, VALIDATION_RULES["advance_booking_days"],
        ErrorMessages.ADVANCE_BOOKING_INVALID, prefix, errors
    )

    if availability.endpoint and not is_valid_url(availability.endpoint):
        errors.append(ErrorMessages.AVAILABILITY_ENDPOINT_INVALID.format(prefix=prefix))


def _validate_cancellation(policy: CancellationPolicy | None, prefix: str, errors: list[str]) -> None:
    if policy is None:
        errors.append(ErrorMessages.CANCELLATION_REQUIRED.format(prefix=prefix))
        return

    if policy.type not in CancellationPolicyType.ALL:
        errors.append(ErrorMessages.CANCELLATION_TYPE_INVALID.format(prefix=prefix))

    _check_bounds(
        policy.free_until_hours, VALIDATION_RULES["free_cancellation_hours"],
        ErrorMessages.FREE_CANCELLATION_INVALID, prefix, errors
    )
    _check_bounds(
        policy.penalty_percentage, VALIDATION_RULES["penalty_percentage"],
        ErrorMessages.PENALTY_INVALID, prefix, errors
    )

    if not is_valid_string(policy.description, VALIDATION_RULES["cancellation_policy_description"]):
        errors.append(ErrorMessages.CANCELLATION_DESCRIPTION_INVALID.format(prefix=prefix))


def _validate_payment(payment: PaymentConfig | None, prefix: str, errors: list[str]) -> None:
    if payment is None:
        errors.append(ErrorMessages.PAYMENT_REQUIRED.format(prefix=prefix))
        return

    if not payment.methods:
        errors.append(ErrorMessages.PAYMENT_METHODS_REQUIRED.format(prefix=prefix))

    for method in payment.methods:
        if method not in PaymentMethod.ALL:
            errors.append(ErrorMessages.PAYMENT_METHOD_INVALID.format(prefix=prefix, method=method))

    if payment.timing not in PaymentTiming.ALL:
        errors.append(ErrorMessages.PAYMENT_TIMING_INVALID.format(prefix=prefix))

    if payment.deposit_required:
        _check_bounds(
            payment.deposit_percentage, VALIDATION_RULES["deposit_percentage"],
            ErrorMessages.DEPOSIT_INVALID, prefix, errors
        )


def _validate_policies(policies: ServicePolicies, prefix: str, errors: list[str]) -> None:
    if policies.modification_fee is not None and not is_non_negative(policies.modification_fee):
        errors.append(ErrorMessages.MODIFICATION_FEE_INVALID.format(prefix=prefix))

    if policies.no_show_penalty is not None and not is_non_negative(policies.no_show_penalty):
        errors.append(ErrorMessages.NO_SHOW_PENALTY_INVALID.format(prefix=prefix))
