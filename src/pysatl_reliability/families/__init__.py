"""
Parametric families of lifetime distributions.

Currently provides the two-parameter Weibull family and the parametrization
primitives it is declared with.
"""

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .weibull import WeibullDistribution, WeibullParameters

__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "WeibullDistribution",
    "WeibullParameters",
    "constraint",
    "parametrization",
]
