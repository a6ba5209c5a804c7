"""Parameter validation.

Parameters are validated per service: names must be unique within their
service only, so the uniqueness map is created on each call.
"""

from ...core.constants import VALIDATION_RULES, CollectionLimits, ErrorMessages
from ...schemas.configuration import Parameter, Pricing
from ...strategies.factory import ConstraintStrategyFactory
from ...utils.validators import is_non_negative, is_valid_string, is_within_bounds


def validate_parameters(parameters: list[Parameter], service_prefix: str, errors: list[str]) -> None:
    """Validate the parameter list of one service.

    Args:
        parameters: Parameters in declaration order
        service_prefix: Message prefix of the owning service (e.g. "Service 1")
        errors: Error list to append to
    """
    if len(parameters) < CollectionLimits.MIN_PARAMETERS_PER_SERVICE:
        errors.append(ErrorMessages.PARAMETERS_REQUIRED.format(prefix=service_prefix))
        return

    if len(parameters) > CollectionLimits.MAX_PARAMETERS_PER_SERVICE:
        errors.append(ErrorMessages.PARAMETERS_TOO_MANY.format(
            prefix=service_prefix,
            max_parameters=CollectionLimits.MAX_PARAMETERS_PER_SERVICE
        ))

    # name -> index of first parameter using it
    seen_names: dict[str, int] = {}

    for index, parameter in enumerate(parameters, start=1):
        prefix = f"{service_prefix}, Parameter {index}"
        _validate_name(parameter.name, prefix, index, seen_names, errors)
        _validate_type_rules(parameter, prefix, errors)

        if parameter.pricing is not None:
            _validate_pricing(parameter.pricing, prefix, errors)


def _validate_name(
    name: str,
    prefix: str,
    index: int,
    seen_names: dict[str, int],
    errors: list[str]
) -> None:
    rule = VALIDATION_RULES["parameter_name"]

    if not is_valid_string(name, rule):
        errors.append(ErrorMessages.PARAMETER_NAME_INVALID.format(prefix=prefix))
        return

    if not rule.pattern.match(name):
        errors.append(ErrorMessages.PARAMETER_NAME_PATTERN.format(prefix=prefix))

    if name in seen_names:
        errors.append(ErrorMessages.PARAMETER_NAME_DUPLICATE.format(
            prefix=prefix, name=name, first_index=seen_names[name]
        ))
    else:
        seen_names[name] = index


def _validate_type_rules(parameter: Parameter, prefix: str, errors: list[str]) -> None:
    """Check type, description, then the type-specific constraints and default."""
    supported = ConstraintStrategyFactory.is_type_supported(parameter.type)
    if not supported:
        errors.append(ErrorMessages.PARAMETER_TYPE_INVALID.format(prefix=prefix))

    if not is_valid_string(parameter.description, VALIDATION_RULES["parameter_description"]):
        errors.append(ErrorMessages.PARAMETER_DESCRIPTION_INVALID.format(prefix=prefix))

    # Constraint rules depend on the type, so they cannot be checked without one
    if supported:
        strategy = ConstraintStrategyFactory.get_strategy(parameter.type)
        errors.extend(strategy.validate_constraints(parameter.constraints, prefix))
        errors.extend(strategy.validate_default(parameter.default, prefix))


def _validate_pricing(pricing: Pricing, prefix: str, errors: list[str]) -> None:
    if pricing.base_rate is not None and not is_non_negative(pricing.base_rate):
        errors.append(ErrorMessages.PRICING_BASE_RATE_INVALID.format(prefix=prefix))

    if pricing.currency is not None and len(pricing.currency) != 3:
        errors.append(ErrorMessages.PRICING_CURRENCY_INVALID.format(prefix=prefix))

    if pricing.tax_rate is not None and not is_within_bounds(pricing.tax_rate, VALIDATION_RULES["tax_rate"]):
        errors.append(ErrorMessages.PRICING_TAX_RATE_INVALID.format(prefix=prefix))

    if pricing.service_fee is not None and not is_non_negative(pricing.service_fee):
        errors.append(ErrorMessages.PRICING_SERVICE_FEE_INVALID.format(prefix=prefix))

    if pricing.minimum_charge is not None and not is_non_negative(pricing.minimum_charge):
        errors.append(ErrorMessages.PRICING_MINIMUM_CHARGE_INVALID.format(prefix=prefix))
