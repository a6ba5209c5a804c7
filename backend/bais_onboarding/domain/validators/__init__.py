from ...strategies.base import ValidationResult
from .configuration_validator import validate_configuration
from .field_validator import FieldValidationResult, validate_field
from .parameter_validator import validate_parameters
from .service_validator import validate_services

__all__ = [
    "ValidationResult",
    "validate_configuration",
    "FieldValidationResult",
    "validate_field",
    "validate_parameters",
    "validate_services",
]
