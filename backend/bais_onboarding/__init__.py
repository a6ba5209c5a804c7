"""BAIS business onboarding core.

Validation and wire-format transformation for business configurations
submitted to the BAIS registration API.
"""

from .domain.factories import create_default_configuration
from .domain.transformers import from_wire_format, preview_integration_endpoints, to_wire_format
from .domain.validators import FieldValidationResult, ValidationResult, validate_configuration, validate_field
from .schemas.configuration import BusinessConfiguration

__all__ = [
    "BusinessConfiguration",
    "FieldValidationResult",
    "ValidationResult",
    "create_default_configuration",
    "from_wire_format",
    "preview_integration_endpoints",
    "to_wire_format",
    "validate_configuration",
    "validate_field",
]
