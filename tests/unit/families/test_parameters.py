from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from pysatl_reliability.families import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)


class TestParametrizationAPI:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_decorator_builds_frozen_dataclass(self) -> None:
        @parametrization
        class Rate(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        obj = Rate(value=1.25)  # type: ignore[call-arg]
        assert obj.parameters == {"value": 1.25}
        assert hasattr(Rate, "__dataclass_fields__")
        assert [c.description for c in obj.constraints] == ["value > 0"]

        with pytest.raises(AttributeError):
            obj.value = 2.0  # type: ignore[misc]

    def test_validate_reports_first_failing_constraint(self) -> None:
        @parametrization
        class Pair(Parametrization):
            a: float
            b: float

            @constraint(description="a > 0")
            def check_a(self) -> bool:
                return self.a > 0

            @constraint(description="b > a")
            def check_b(self) -> bool:
                return self.b > self.a

        Pair(a=1.0, b=2.0).validate()  # type: ignore[call-arg]

        with pytest.raises(ValueError, match='Constraint "a > 0" does not hold'):
            Pair(a=-1.0, b=-2.0).validate()  # type: ignore[call-arg]
        with pytest.raises(ValueError, match='Constraint "b > a" does not hold'):
            Pair(a=1.0, b=0.5).validate()  # type: ignore[call-arg]

    def test_static_constraint_rejected(self) -> None:
        with pytest.raises(TypeError, match="instance method"):

            @parametrization
            class Bad(Parametrization):
                value: float

                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True
