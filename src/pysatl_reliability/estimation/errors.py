"""
Estimation errors.

Numeric failures raised by the estimators. Invalid arguments are reported with
:class:`ValueError` and never reach these types.
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class EstimationError(ArithmeticError):
    """Raised when an estimation produces no finite, valid parameter set."""


class ConvergenceError(EstimationError):
    """
    Raised when an iterative estimator exhausts its iteration budget.

    Parameters
    ----------
    message : str
        Error description.
    iterations : int
        Number of iterations performed.
    last_estimate : float
        Estimate reached by the last iteration.
    """

    def __init__(self, message: str, *, iterations: int, last_estimate: float) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.last_estimate = last_estimate
