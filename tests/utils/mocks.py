from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np

from pysatl_reliability.distributions import ReliabilityDistribution


class ExponentialStub(ReliabilityDistribution):
    """
    Minimal exponential lifetime distribution.

    Implements only the three scalar primitives, so every public method
    exercised on it comes from the base class.
    """

    __slots__ = ("rate", "calls")

    def __init__(self, rate: float = 0.5) -> None:
        self.rate = rate
        self.calls = 0

    def _pdf(self, x: float) -> float:
        return self.rate * math.exp(-self.rate * x) if x >= 0.0 else 0.0

    def _cdf(self, x: float) -> float:
        return -math.expm1(-self.rate * x) if x > 0.0 else 0.0

    def _random(self, rng: np.random.Generator) -> float:
        self.calls += 1
        return -math.log1p(-float(rng.random())) / self.rate


class ConstantStub(ReliabilityDistribution):
    """Degenerate distribution with all its mass at 1.0."""

    __slots__ = ()

    def _pdf(self, x: float) -> float:
        return 0.0

    def _cdf(self, x: float) -> float:
        return 1.0 if x >= 1.0 else 0.0

    def _random(self, rng: np.random.Generator) -> float:
        return 1.0
