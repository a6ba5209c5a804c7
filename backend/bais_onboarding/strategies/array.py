from typing import Any

from ..core.constants import ErrorMessages, ParameterType
from ..schemas.configuration import Constraints
from .base import BaseConstraintStrategy


class ArrayConstraintStrategy(BaseConstraintStrategy):
    """Strategy for ``array`` parameters (minItems, maxItems)."""

    PARAMETER_TYPE = ParameterType.ARRAY

    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        min_items = constraints.min_items
        max_items = constraints.max_items

        if (min_items is not None and min_items < 0) or (max_items is not None and max_items < 0):
            return [ErrorMessages.CONSTRAINT_ITEMS_NEGATIVE.format(prefix=prefix)]

        if min_items is not None and max_items is not None and min_items > max_items:
            return [ErrorMessages.CONSTRAINT_MIN_ITEMS_GREATER.format(prefix=prefix)]

        return []

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, list)
