"""Constraint Strategy Factory.

Maps each parameter type to the strategy that owns its constraint rules.
Adding a parameter type means adding one strategy class and one entry here.
"""

from ..core.constants import ParameterType
from .array import ArrayConstraintStrategy
from .base import BaseConstraintStrategy
from .numeric import IntegerConstraintStrategy, NumberConstraintStrategy
from .string import StringConstraintStrategy
from .temporal import DateConstraintStrategy, DateTimeConstraintStrategy, TimeConstraintStrategy
from .untyped import BooleanConstraintStrategy, ObjectConstraintStrategy


class ConstraintStrategyFactory:
    """Factory for parameter-type constraint strategies.

    Usage:
        strategy = ConstraintStrategyFactory.get_strategy(ParameterType.STRING)
        errors = strategy.validate_constraints(parameter.constraints, prefix)
    """

    _strategies: dict[str, type[BaseConstraintStrategy]] = {
        ParameterType.STRING: StringConstraintStrategy,
        ParameterType.INTEGER: IntegerConstraintStrategy,
        ParameterType.NUMBER: NumberConstraintStrategy,
        ParameterType.BOOLEAN: BooleanConstraintStrategy,
        ParameterType.ARRAY: ArrayConstraintStrategy,
        ParameterType.OBJECT: ObjectConstraintStrategy,
        ParameterType.DATE: DateConstraintStrategy,
        ParameterType.DATETIME: DateTimeConstraintStrategy,
        ParameterType.TIME: TimeConstraintStrategy,
    }

    @classmethod
    def get_strategy(cls, parameter_type: str) -> BaseConstraintStrategy:
        """Get the strategy for a parameter type.

        Args:
            parameter_type: One of ``ParameterType.ALL``

        Returns:
            New strategy instance for the type

        Raises:
            ValueError: If the parameter type is not supported
        """
        strategy_class = cls._strategies.get(parameter_type)

        if not strategy_class:
            raise ValueError(
                f"Unsupported parameter type '{parameter_type}'. "
                f"Supported types: {', '.join(cls._strategies.keys())}"
            )

        return strategy_class()

    @classmethod
    def is_type_supported(cls, parameter_type: str) -> bool:
        """Check if a parameter type has a registered strategy."""
        return parameter_type in cls._strategies


def get_constraint_strategy(parameter_type: str) -> BaseConstraintStrategy:
    """Convenience function to get a constraint strategy."""
    return ConstraintStrategyFactory.get_strategy(parameter_type)
