"""
Censored Weibull Maximum Likelihood
===================================

Maximum likelihood fit of the two-parameter Weibull distribution to lifetime
data with right censoring.

The scale parameter is eliminated analytically from the likelihood, which
leaves a single equation in the shape parameter (the profile likelihood
equation)::

    f(k) = m/k + Σ_F ln t - m Σ t^k ln t / Σ t^k = 0

where ``Σ_F`` runs over the ``m`` exact failures and the unqualified sums run
over every observation. The root is found with an undamped Newton-Raphson
iteration started at ``k = 1`` (the exponential distribution); the scale is
then computed in closed form from the converged shape.

Notes
-----
- Right-censored observations enter the shape equation only through
  ``t^k`` and its derivatives; they contribute no ``ln t`` term of their own.
- The iteration stops when the relative change of the shape is not greater
  than ``tolerance``. Running out of iterations raises
  :class:`~pysatl_reliability.estimation.errors.ConvergenceError`; there is no
  retry with another start point.
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from math import isfinite
from typing import TYPE_CHECKING

import numpy as np

from pysatl_reliability.distributions.sampling import as_censored_sample
from pysatl_reliability.estimation.errors import ConvergenceError, EstimationError
from pysatl_reliability.families.weibull import WeibullDistribution

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_reliability.distributions.sampling import CensoredSample

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100
"""Default cap on Newton-Raphson iterations."""

DEFAULT_TOLERANCE = 1e-6
"""Default relative tolerance on the shape parameter."""

INITIAL_SHAPE = 1.0
"""Newton-Raphson start point (exponential distribution)."""


@dataclass(frozen=True, slots=True)
class SufficientStatistics:
    """
    Sums that determine the profile likelihood equation at a given shape.

    Attributes
    ----------
    s1, log_sum, s1_log, s1_log2 : float
        Over exact failures: ``Σ t^k``, ``Σ ln t``, ``Σ t^k ln t`` and
        ``Σ t^k ln² t``.
    s2, s2_log, s2_log2 : float
        Over right-censored observations: ``Σ t^k``, ``Σ t^k ln t`` and
        ``Σ t^k ln² t``.
    """

    s1: float
    log_sum: float
    s1_log: float
    s1_log2: float
    s2: float
    s2_log: float
    s2_log2: float

    @classmethod
    def compute(cls, sample: CensoredSample, shape: float) -> SufficientStatistics:
        """Compute the statistics of ``sample`` at the shape ``k = shape``."""
        log_f = np.log(sample.failure_times)
        log_c = np.log(sample.censored_times)

        with np.errstate(over="ignore", invalid="ignore"):
            tk_f = sample.failure_times**shape
            tk_c = sample.censored_times**shape

            return cls(
                s1=float(np.sum(tk_f)),
                log_sum=float(np.sum(log_f)),
                s1_log=float(np.sum(tk_f * log_f)),
                s1_log2=float(np.sum(tk_f * log_f**2)),
                s2=float(np.sum(tk_c)),
                s2_log=float(np.sum(tk_c * log_c)),
                s2_log2=float(np.sum(tk_c * log_c**2)),
            )

    def profile_score(self, shape: float, n_failures: int) -> tuple[float, float]:
        """
        Evaluate the profile likelihood equation and its Newton slope.

        Parameters
        ----------
        shape : float
            Current shape ``k``.
        n_failures : int
            Number of exact failures ``m``.

        Returns
        -------
        tuple[float, float]
            ``(f(k), f'(k))``. Without censoring ``s2 = s2_log = s2_log2 = 0``
            and ``m = n``, which reduces both to the uncensored form.
        """
        m = np.float64(n_failures)
        k = np.float64(shape)
        total = np.float64(self.s1 + self.s2)
        total_log = np.float64(self.s1_log + self.s2_log)
        total_log2 = np.float64(self.s1_log2 + self.s2_log2)

        with np.errstate(all="ignore"):
            f = m / k + self.log_sum - m * total_log / total
            df = -m / k**2 - (-(total_log**2) / total**2 + total_log2 / total)
        return float(f), float(df)


def _newton_shape(sample: CensoredSample, max_iterations: int, tolerance: float) -> float:
    shape = INITIAL_SHAPE
    m = sample.n_failures

    for iteration in range(1, max_iterations + 1):
        stats = SufficientStatistics.compute(sample, shape)
        f, df = stats.profile_score(shape, m)

        with np.errstate(all="ignore"):
            new_shape = float(np.float64(shape) - np.float64(f) / np.float64(df))
            change = float(np.abs(np.float64(new_shape) - shape) / np.abs(np.float64(shape)))

        logger.debug(
            "Newton iteration %d: shape %.10g -> %.10g (relative change %.3g)",
            iteration,
            shape,
            new_shape,
            change,
        )

        if change <= tolerance:
            logger.debug("Shape converged to %.10g after %d iterations", new_shape, iteration)
            return new_shape
        shape = new_shape

    logger.warning(
        "Newton method did not converge in %d iterations (last shape %.10g)",
        max_iterations,
        shape,
    )
    raise ConvergenceError(
        f"Newton method did not converge in {max_iterations} iterations.",
        iterations=max_iterations,
        last_estimate=shape,
    )


def _scale_from_shape(sample: CensoredSample, shape: float) -> float:
    n = sample.n
    m = sample.n_failures
    r = sample.n_censored

    with np.errstate(all="ignore"):
        sum1 = np.sum(sample.failure_times**shape)
        sum2 = np.sum(sample.censored_times**shape)
        if r == 0:
            base = sum1 / n
        else:
            base = sum1 / m + sum2 / r
        return float(base ** (1.0 / shape))


def estimate_weibull(
    data: CensoredSample | npt.ArrayLike,
    censored: npt.ArrayLike | None = None,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> WeibullDistribution:
    """
    Estimate Weibull shape and scale from possibly right-censored lifetimes.

    Parameters
    ----------
    data : CensoredSample or array_like
        Sample, or observed times (finite, strictly positive).
    censored : array_like, optional
        Censoring flags parallel to ``data``: ``True`` (or a non-zero type code)
        for a right-censored observation. Omitted means no censoring. Must be
        omitted when ``data`` is a :class:`CensoredSample`.
    max_iterations : int, default 100
        Maximum number of Newton-Raphson iterations.
    tolerance : float, default 1e-6
        Relative tolerance on the shape parameter.

    Returns
    -------
    WeibullDistribution
        New distribution with the fitted shape and scale.

    Raises
    ------
    ValueError
        If the data vector is missing or empty, the censoring vector length
        differs, a time is not finite and positive, ``max_iterations`` or
        ``tolerance`` is not positive, or every observation is censored.
    ConvergenceError
        If the shape did not converge within ``max_iterations``.
    EstimationError
        If the fitted shape or scale is not a finite positive number.

    Examples
    --------
    >>> from pysatl_reliability import estimate_weibull
    >>> fitted = estimate_weibull([12.0, 15.5, 9.1, 20.3], [False, False, True, False])
    >>> fitted.shape > 0
    True
    """
    sample = as_censored_sample(data, censored)

    if max_iterations <= 0:
        raise ValueError("Maximum number of iterations must be greater than 0.")
    if not tolerance > 0.0:
        raise ValueError("Tolerance must be greater than 0.")
    if sample.is_fully_censored:
        raise ValueError("At least one uncensored observation is required.")

    logger.debug(
        "Estimating Weibull parameters from %d observations (%d censored)",
        sample.n,
        sample.n_censored,
    )

    shape = _newton_shape(sample, max_iterations, tolerance)
    if not (isfinite(shape) and shape > 0.0):
        raise EstimationError(f"Shape parameter estimation error: got {shape}.")

    scale = _scale_from_shape(sample, shape)
    if not (isfinite(scale) and scale > 0.0):
        raise EstimationError(f"Scale parameter estimation error: got {scale}.")

    return WeibullDistribution(shape=shape, scale=scale)
