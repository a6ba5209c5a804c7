"""
Unit Tests for Parameter Constraint Strategies

Tests constraint applicability, consistency checks and default-value checks
for each parameter type.
"""

import pytest

from bais_onboarding.core.constants import ParameterType
from bais_onboarding.schemas.configuration import Constraints
from bais_onboarding.strategies.array import ArrayConstraintStrategy
from bais_onboarding.strategies.factory import ConstraintStrategyFactory, get_constraint_strategy
from bais_onboarding.strategies.numeric import IntegerConstraintStrategy, NumberConstraintStrategy
from bais_onboarding.strategies.string import StringConstraintStrategy
from bais_onboarding.strategies.temporal import (
    DateConstraintStrategy,
    DateTimeConstraintStrategy,
    TimeConstraintStrategy,
)
from bais_onboarding.strategies.untyped import BooleanConstraintStrategy, ObjectConstraintStrategy

PREFIX = "Service 1, Parameter 1"


class TestConstraintStrategyFactory:
    """Test suite for strategy selection"""

    def test_every_parameter_type_has_a_strategy(self):
        """Test all parameter types are supported"""
        for parameter_type in ParameterType.ALL:
            assert ConstraintStrategyFactory.is_type_supported(parameter_type)

    def test_strategy_classes(self):
        """Test the factory returns the strategy owning each type"""
        assert isinstance(get_constraint_strategy("string"), StringConstraintStrategy)
        assert isinstance(get_constraint_strategy("integer"), IntegerConstraintStrategy)
        assert isinstance(get_constraint_strategy("number"), NumberConstraintStrategy)
        assert isinstance(get_constraint_strategy("array"), ArrayConstraintStrategy)
        assert isinstance(get_constraint_strategy("date"), DateConstraintStrategy)
        assert isinstance(get_constraint_strategy("boolean"), BooleanConstraintStrategy)
        assert isinstance(get_constraint_strategy("object"), ObjectConstraintStrategy)

    def test_unsupported_type_raises(self):
        """Test unknown types raise ValueError"""
        assert not ConstraintStrategyFactory.is_type_supported("decimal")

        with pytest.raises(ValueError, match="Unsupported parameter type 'decimal'"):
            ConstraintStrategyFactory.get_strategy("decimal")


class TestStringConstraintStrategy:
    """Test suite for string constraints"""

    def setup_method(self):
        """Setup test fixtures"""
        self.strategy = StringConstraintStrategy()

    def test_no_constraints(self):
        """Test a parameter without constraints is valid"""
        assert self.strategy.validate_constraints(None, PREFIX) == []

    def test_length_order(self):
        """Test min_length may not exceed max_length"""
        errors = self.strategy.validate_constraints(Constraints(min_length=10, max_length=5), PREFIX)

        assert errors == [f"{PREFIX}: Minimum length cannot be greater than maximum length"]
        assert self.strategy.validate_constraints(Constraints(min_length=5, max_length=10), PREFIX) == []
        assert self.strategy.validate_constraints(Constraints(min_length=5, max_length=5), PREFIX) == []

    def test_negative_length(self):
        """Test negative lengths are rejected"""
        errors = self.strategy.validate_constraints(Constraints(min_length=-1), PREFIX)

        assert errors == [f"{PREFIX}: Length constraints must be non-negative integers"]

    def test_invalid_pattern(self):
        """Test pattern must compile"""
        errors = self.strategy.validate_constraints(Constraints(pattern="[a-z"), PREFIX)

        assert errors == [f"{PREFIX}: Invalid regex pattern"]
        assert self.strategy.validate_constraints(Constraints(pattern="^[A-Z]{3}$"), PREFIX) == []

    def test_empty_enum(self):
        """Test an empty allowed-values list is rejected"""
        errors = self.strategy.validate_constraints(Constraints(enum=[]), PREFIX)

        assert errors == [f"{PREFIX}: Allowed values list cannot be empty"]

    def test_unknown_format(self):
        """Test format tag must be known"""
        errors = self.strategy.validate_constraints(Constraints(format="zipcode"), PREFIX)

        assert errors == [f'{PREFIX}: Unknown format "zipcode"']
        assert self.strategy.validate_constraints(Constraints(format="email"), PREFIX) == []

    def test_numeric_bounds_not_applicable(self):
        """Test minimum/maximum are reported for strings"""
        errors = self.strategy.validate_constraints(Constraints(minimum=1, maximum=3), PREFIX)

        assert errors == [
            f"{PREFIX}: Constraint 'minimum' does not apply to string parameters",
            f"{PREFIX}: Constraint 'maximum' does not apply to string parameters",
        ]

    def test_default_value(self):
        """Test default must be a string"""
        assert self.strategy.validate_default("King", PREFIX) == []
        assert self.strategy.validate_default(None, PREFIX) == []
        assert self.strategy.validate_default(3, PREFIX) == [
            f"{PREFIX}: Default value must be a valid string value"
        ]


class TestNumericConstraintStrategies:
    """Test suite for integer and number constraints"""

    def test_minimum_greater_than_maximum(self):
        """Test numeric bounds must be ordered"""
        strategy = NumberConstraintStrategy()

        assert strategy.validate_constraints(Constraints(minimum=5.5, maximum=1), PREFIX) == [
            f"{PREFIX}: Minimum cannot be greater than maximum"
        ]
        assert strategy.validate_constraints(Constraints(minimum=0, maximum=0), PREFIX) == []

    def test_items_not_applicable(self):
        """Test array constraints are reported for integers"""
        errors = IntegerConstraintStrategy().validate_constraints(Constraints(min_items=1), PREFIX)

        assert errors == [f"{PREFIX}: Constraint 'minItems' does not apply to integer parameters"]

    def test_integer_default(self):
        """Test integer defaults exclude floats and booleans"""
        strategy = IntegerConstraintStrategy()

        assert strategy.is_valid_value(2)
        assert not strategy.is_valid_value(2.5)
        assert not strategy.is_valid_value(True)

    def test_number_default(self):
        """Test number defaults accept ints and floats but not strings"""
        strategy = NumberConstraintStrategy()

        assert strategy.is_valid_value(2)
        assert strategy.is_valid_value(2.5)
        assert not strategy.is_valid_value("2.5")
        assert not strategy.is_valid_value(False)


class TestArrayConstraintStrategy:
    """Test suite for array constraints"""

    def setup_method(self):
        """Setup test fixtures"""
        self.strategy = ArrayConstraintStrategy()

    def test_items_order(self):
        """Test min_items may not exceed max_items"""
        assert self.strategy.validate_constraints(Constraints(min_items=3, max_items=1), PREFIX) == [
            f"{PREFIX}: Minimum items cannot be greater than maximum items"
        ]
        assert self.strategy.validate_constraints(Constraints(min_items=1, max_items=3), PREFIX) == []

    def test_negative_items(self):
        """Test negative item counts are rejected"""
        assert self.strategy.validate_constraints(Constraints(max_items=-2), PREFIX) == [
            f"{PREFIX}: Item count constraints must be non-negative integers"
        ]

    def test_format_not_applicable(self):
        """Test format tag is not accepted on arrays"""
        assert self.strategy.validate_constraints(Constraints(format="date"), PREFIX) == [
            f"{PREFIX}: Constraint 'format' does not apply to array parameters"
        ]

    def test_default_value(self):
        """Test default must be a list"""
        assert self.strategy.is_valid_value(["wifi", "parking"])
        assert not self.strategy.is_valid_value("wifi")


class TestTemporalConstraintStrategies:
    """Test suite for date, datetime and time parameters"""

    def test_only_format_applies(self):
        """Test temporal types accept a format tag and nothing else"""
        strategy = DateConstraintStrategy()

        assert strategy.validate_constraints(Constraints(format="date"), PREFIX) == []
        assert strategy.validate_constraints(Constraints(pattern=r"\d+"), PREFIX) == [
            f"{PREFIX}: Constraint 'pattern' does not apply to date parameters"
        ]

    def test_date_default(self):
        """Test date defaults are ISO calendar dates"""
        strategy = DateConstraintStrategy()

        assert strategy.is_valid_value("2025-06-01")
        assert not strategy.is_valid_value("06/01/2025")
        assert not strategy.is_valid_value("2025-06-01T10:00")

    def test_datetime_default(self):
        """Test datetime defaults need a time component"""
        strategy = DateTimeConstraintStrategy()

        assert strategy.is_valid_value("2025-06-01T10:00:00")
        assert not strategy.is_valid_value("2025-06-01")

    def test_time_default(self):
        """Test time defaults are ISO times"""
        strategy = TimeConstraintStrategy()

        assert strategy.is_valid_value("15:00")
        assert not strategy.is_valid_value("3pm")


class TestUntypedConstraintStrategies:
    """Test suite for boolean and object parameters"""

    def test_boolean_rejects_constraints(self):
        """Test boolean parameters accept no constraints"""
        errors = BooleanConstraintStrategy().validate_constraints(Constraints(enum=[True]), PREFIX)

        assert errors == [f"{PREFIX}: Constraint 'enum' does not apply to boolean parameters"]

    def test_default_values(self):
        """Test boolean and object default shapes"""
        assert BooleanConstraintStrategy().is_valid_value(False)
        assert not BooleanConstraintStrategy().is_valid_value(0)
        assert ObjectConstraintStrategy().is_valid_value({"beds": 2})
        assert not ObjectConstraintStrategy().is_valid_value([])
