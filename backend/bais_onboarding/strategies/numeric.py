from typing import Any

from ..core.constants import ErrorMessages, ParameterType
from ..schemas.configuration import Constraints
from ..utils.validators import is_integer, is_number
from .base import BaseConstraintStrategy


class NumberConstraintStrategy(BaseConstraintStrategy):
    """Strategy for ``number`` parameters (minimum, maximum, enum, format)."""

    PARAMETER_TYPE = ParameterType.NUMBER

    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        errors = []

        if constraints.minimum is not None and constraints.maximum is not None:
            if constraints.minimum > constraints.maximum:
                errors.append(ErrorMessages.CONSTRAINT_MIN_GREATER_THAN_MAX.format(prefix=prefix))

        if constraints.enum is not None and not constraints.enum:
            errors.append(ErrorMessages.CONSTRAINT_ENUM_EMPTY.format(prefix=prefix))

        return errors

    def is_valid_value(self, value: Any) -> bool:
        return is_number(value)


class IntegerConstraintStrategy(NumberConstraintStrategy):
    """Strategy for ``integer`` parameters.

    Shares the numeric bounds checks; defaults must be whole numbers.
    """

    PARAMETER_TYPE = ParameterType.INTEGER

    def is_valid_value(self, value: Any) -> bool:
        return is_integer(value)
