from typing import Any

from ..core.constants import ErrorMessages, ParameterType
from ..schemas.configuration import Constraints
from ..utils.validators import is_valid_regex
from .base import BaseConstraintStrategy


class StringConstraintStrategy(BaseConstraintStrategy):
    """Strategy for ``string`` parameters.

    Accepts minLength, maxLength, pattern, enum and format.
    """

    PARAMETER_TYPE = ParameterType.STRING

    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        errors = []
        min_length = constraints.min_length
        max_length = constraints.max_length

        if (min_length is not None and min_length < 0) or (max_length is not None and max_length < 0):
            errors.append(ErrorMessages.CONSTRAINT_LENGTH_NEGATIVE.format(prefix=prefix))
        elif min_length is not None and max_length is not None and min_length > max_length:
            errors.append(ErrorMessages.CONSTRAINT_MIN_LENGTH_GREATER.format(prefix=prefix))

        if constraints.pattern and not is_valid_regex(constraints.pattern):
            errors.append(ErrorMessages.CONSTRAINT_PATTERN_INVALID.format(prefix=prefix))

        if constraints.enum is not None and not constraints.enum:
            errors.append(ErrorMessages.CONSTRAINT_ENUM_EMPTY.format(prefix=prefix))

        return errors

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, str)
