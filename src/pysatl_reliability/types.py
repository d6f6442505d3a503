"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Reliability.
"""

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast

import numpy as np
import numpy.typing as npt

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = npt.NDArray[np.float64]
"""Type alias for numeric arrays."""

BoolArray = npt.NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Half-open interval ``[left, right)`` of lifetimes.

    Parameters
    ----------
    left : float, default=0.0
        Smallest contained value.
    right : float, default=inf
        Exclusive upper bound.
    """

    left: float = 0.0
    right: float = inf

    def __post_init__(self) -> None:
        if not self.left < self.right:
            raise ValueError(f"Empty interval [{self.left}, {self.right})")

    def contains(self, x: npt.ArrayLike) -> bool | BoolArray:
        """Elementwise membership; a scalar input gives a ``bool``."""
        arr = np.asarray(x, dtype=np.float64)
        inside = (arr >= self.left) & (arr < self.right)
        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(float, x)))


ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Enumeration of reliability characteristics.

    Note
    ----------
    PDF, CDF and random draws are the primitive characteristics every family
    implements; the remaining ones are derived from them.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    RELIABILITY = "reliability"
    CONDITIONAL_RELIABILITY = "conditional_reliability"
    HAZARD = "hazard"


class FamilyName(StrEnum):
    WEIBULL = "Weibull"


__all__ = [
    "BoolArray",
    "CharacteristicName",
    "FamilyName",
    "Interval1D",
    "Number",
    "NumericArray",
    "NumPyNumber",
    "ScalarFunc",
]
