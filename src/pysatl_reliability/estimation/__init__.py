"""
Parameter estimation subpackage.

- censored Weibull maximum likelihood (:mod:`.censored`);
- numeric failure types (:mod:`.errors`).
"""

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .censored import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, estimate_weibull
from .errors import ConvergenceError, EstimationError

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
    "ConvergenceError",
    "EstimationError",
    "estimate_weibull",
]
