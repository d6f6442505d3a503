"""
Validated parameter sets for distribution families.

A family declares its parameters as a class decorated with
:func:`parametrization`; methods marked with :func:`constraint` are checked,
in definition order, by :meth:`Parametrization.validate`.
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

_IS_CONSTRAINT = "__is_constraint"
_DESCRIPTION = "__constraint_description"

_F = TypeVar("_F", bound="Callable[..., bool]")
_P = TypeVar("_P", bound="type[Parametrization]")


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values.

    Parameters
    ----------
    description : str
        Condition that must hold, e.g. ``"shape > 0"``. Used verbatim in the
        validation error.
    check : Callable[[Any], bool]
        Predicate evaluated on the parameter object.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """Base class of parameter sets built by :func:`parametrization`."""

    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every declared constraint.

        Raises
        ------
        ValueError
            On the first constraint that does not hold.
        """
        for item in self._constraints:
            if not item.check(self):
                raise ValueError(f'Constraint "{item.description}" does not hold')


def constraint(description: str) -> Callable[[_F], _F]:
    """Mark an instance method as a parameter constraint described by ``description``."""

    def decorator(func: _F) -> _F:
        setattr(func, _IS_CONSTRAINT, True)
        setattr(func, _DESCRIPTION, description)
        return func

    return decorator


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, _IS_CONSTRAINT, False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and getattr(attr, _IS_CONSTRAINT, False):
            found.append(ParametrizationConstraint(getattr(attr, _DESCRIPTION), attr))
    return tuple(found)


def parametrization(cls: _P) -> _P:
    """
    Turn ``cls`` into a frozen, slotted dataclass and register its constraints.

    Parameters
    ----------
    cls : type[Parametrization]
        Class whose annotations are the parameters.

    Returns
    -------
    type[Parametrization]
        The dataclass.

    Raises
    ------
    TypeError
        If a static or class method is marked with :func:`constraint`.
    """
    constraints = _collect_constraints(cls)
    if not is_dataclass(cls):
        cls = dataclass(slots=True, frozen=True)(cls)
    cls._constraints = constraints
    return cls
