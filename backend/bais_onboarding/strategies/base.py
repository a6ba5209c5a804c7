"""Base Strategy Pattern for Type-Specific Parameter Constraints.

Each parameter type accepts a different set of constraint fields. A strategy
owns exactly one parameter type: it knows which constraint fields are
meaningful for that type, checks their internal consistency, and checks that a
default value has the right shape.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.constants import CONSTRAINT_FIELDS_BY_TYPE, ConstraintField, ErrorMessages, ParameterFormat
from ..schemas.configuration import Constraints


class ValidationResult(BaseModel):
    """Result of validation operations.

    Immutable: ``errors`` is an ordered tuple of human-readable messages.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        """Build a result from an accumulated error list."""
        return cls(is_valid=not errors, errors=tuple(errors))


class BaseConstraintStrategy(ABC):
    """Abstract base class for parameter-type constraint strategies.

    Subclasses declare ``PARAMETER_TYPE`` and implement the consistency checks
    for the constraint fields that type accepts.
    """

    PARAMETER_TYPE: str = ""

    def __init__(self):
        self.allowed_fields = CONSTRAINT_FIELDS_BY_TYPE[self.PARAMETER_TYPE]

    def validate_constraints(self, constraints: Constraints | None, prefix: str) -> list[str]:
        """Validate constraints for a parameter of this strategy's type.

        Args:
            constraints: Constraints declared on the parameter (may be None)
            prefix: Error message prefix identifying the parameter

        Returns:
            List of error messages (empty if valid)
        """
        if constraints is None:
            return []

        present = constraints.set_fields()
        errors = [
            ErrorMessages.CONSTRAINT_NOT_APPLICABLE.format(
                prefix=prefix,
                field=ConstraintField.LABELS[field],
                type=self.PARAMETER_TYPE
            )
            for field in present
            if field not in self.allowed_fields
        ]

        if ConstraintField.FORMAT in self.allowed_fields and constraints.format is not None:
            if constraints.format not in ParameterFormat.ALL:
                errors.append(
                    ErrorMessages.CONSTRAINT_FORMAT_INVALID.format(prefix=prefix, format=constraints.format)
                )

        errors.extend(self._check_consistency(constraints, prefix))
        return errors

    def validate_default(self, default: Any, prefix: str) -> list[str]:
        """Check that a default value is consistent with the parameter type.

        Args:
            default: Declared default value (None means no default)
            prefix: Error message prefix identifying the parameter

        Returns:
            List of error messages (empty if valid)
        """
        if default is None or self.is_valid_value(default):
            return []

        return [ErrorMessages.PARAMETER_DEFAULT_INVALID.format(prefix=prefix, type=self.PARAMETER_TYPE)]

    @abstractmethod
    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        """Check relationships between this type's constraint fields."""

    @abstractmethod
    def is_valid_value(self, value: Any) -> bool:
        """Check that value has the shape this parameter type expects."""
