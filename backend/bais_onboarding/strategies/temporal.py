"""Strategies for date, datetime and time parameters.

These types only accept a ``format`` tag. Default values are ISO 8601
strings: ``YYYY-MM-DD``, ``YYYY-MM-DDTHH:MM[:SS]`` and ``HH:MM[:SS]``.
"""

from datetime import date, datetime, time
from typing import Any

from ..core.constants import ParameterType
from ..schemas.configuration import Constraints
from ..utils.validators import is_valid_iso_date
from .base import BaseConstraintStrategy


class DateConstraintStrategy(BaseConstraintStrategy):
    """Strategy for ``date`` parameters."""

    PARAMETER_TYPE = ParameterType.DATE

    def _check_consistency(self, constraints: Constraints, prefix: str) -> list[str]:
        return []

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, date) or is_valid_iso_date(value)


class DateTimeConstraintStrategy(DateConstraintStrategy):
    """Strategy for ``datetime`` parameters."""

    PARAMETER_TYPE = ParameterType.DATETIME

    def is_valid_value(self, value: Any) -> bool:
        if isinstance(value, datetime):
            return True
        if not isinstance(value, str) or 'T' not in value:
            return False
        try:
            datetime.fromisoformat(value)
        except ValueError:
            return False
        return True


class TimeConstraintStrategy(DateConstraintStrategy):
    """Strategy for ``time`` parameters."""

    PARAMETER_TYPE = ParameterType.TIME

    def is_valid_value(self, value: Any) -> bool:
        if isinstance(value, time):
            return True
        if not isinstance(value, str):
            return False
        try:
            time.fromisoformat(value)
        except ValueError:
            return False
        return True
