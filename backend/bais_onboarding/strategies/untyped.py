from typing import Any

from ..core.constants import ParameterType
from ..schemas.configuration import Constraints
from .base import BaseConstraintStrategy


class BooleanConstraintStrategy(BaseConstraintStrategy):
    """Strategy for ``boolean`` parameters, which accept no constraints."""

    PARAMETER_TYPE = ParameterType.BOOLEAN

    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        return []

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, bool)


class ObjectConstraintStrategy(BaseConstraintStrategy):
    """Strategy for ``object`` parameters, which accept no constraints."""

    PARAMETER_TYPE = ParameterType.OBJECT

    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        return []

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, dict)
