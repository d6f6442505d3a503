"""
Weibull distribution family implementation.

Contains the two-parameter Weibull lifetime distribution in the
shape/scale parametrization.
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite, log
from typing import TYPE_CHECKING, overload

import numpy as np
from scipy.special import gamma

from pysatl_reliability.distributions.distribution import (
    ReliabilityDistribution,
    elementwise,
)
from pysatl_reliability.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_reliability.types import CharacteristicName, FamilyName, Interval1D

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    import numpy.typing as npt

    from pysatl_reliability.distributions.sampling import CensoredSample
    from pysatl_reliability.types import Number, NumericArray


@parametrization
class WeibullParameters(Parametrization):
    """
    Shape/scale parametrization of the Weibull distribution.

    Parameters
    ----------
    shape : float
        Shape parameter (k). ``k < 1`` gives a decreasing failure rate,
        ``k = 1`` a constant one (exponential), ``k > 1`` an increasing one.
    scale : float
        Scale parameter (λ), the characteristic life.
    """

    shape: float
    scale: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        """Check that shape parameter is positive."""
        return self.shape > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        """Check that scale parameter is positive."""
        return self.scale > 0

    @constraint(description="shape and scale are finite")
    def check_finite(self) -> bool:
        return isfinite(self.shape) and isfinite(self.scale)


class WeibullDistribution(ReliabilityDistribution):
    """
    Two-parameter Weibull distribution.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-(x/λ)^k) for x > 0

    Parameters
    ----------
    shape : float, default=1.0
        Shape parameter (k > 0).
    scale : float, default=1.0
        Scale parameter (λ > 0).

    Raises
    ------
    ValueError
        If shape or scale is not a finite positive number.

    Notes
    -----
    Instances are immutable. Fitting new parameters with :meth:`estimate`
    returns a new instance.
    """

    __slots__ = ("_parameters",)

    family_name = FamilyName.WEIBULL

    def __init__(self, shape: float = 1.0, scale: float = 1.0) -> None:
        parameters = WeibullParameters(  # type: ignore[call-arg]
            shape=float(shape), scale=float(scale)
        )
        parameters.validate()
        self._parameters: WeibullParameters = parameters

    @classmethod
    def estimate(
        cls,
        data: CensoredSample | npt.ArrayLike,
        censored: npt.ArrayLike | None = None,
        **options: Any,
    ) -> WeibullDistribution:
        """
        Fit a Weibull distribution to possibly right-censored lifetimes.

        Shortcut for
        :func:`~pysatl_reliability.estimation.censored.estimate_weibull`;
        ``**options`` are forwarded (``max_iterations``, ``tolerance``).
        """
        from pysatl_reliability.estimation.censored import estimate_weibull

        return estimate_weibull(data, censored, **options)

    @property
    def parameters(self) -> WeibullParameters:
        """Get the validated parameters."""
        return self._parameters

    @property
    def shape(self) -> float:
        """Shape parameter (k)."""
        return self._parameters.shape

    @property
    def scale(self) -> float:
        """Scale parameter (λ)."""
        return self._parameters.scale

    @property
    def support(self) -> Interval1D:
        """Support of the Weibull distribution, ``[0, inf)``."""
        return Interval1D(left=0.0)

    @property
    def mean(self) -> float:
        """Mean life ``λ Γ(1 + 1/k)``."""
        return float(self.scale * gamma(1.0 + 1.0 / self.shape))

    @property
    def variance(self) -> float:
        """Variance ``λ² (Γ(1 + 2/k) - Γ(1 + 1/k)²)``."""
        g1 = gamma(1.0 + 1.0 / self.shape)
        g2 = gamma(1.0 + 2.0 / self.shape)
        return float(self.scale**2 * (g2 - g1**2))

    @property
    def median(self) -> float:
        """Median life ``λ (ln 2)^(1/k)``."""
        return self.scale * log(2.0) ** (1.0 / self.shape)

    def _pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0

        k = self.shape
        z = np.float64(x) / self.scale
        with np.errstate(divide="ignore", over="ignore"):
            zk = z**k
            if np.isinf(zk):
                # exp(-z^k) underflows before z^(k-1) can overflow
                return 0.0
            # 0 ** (k - 1) is +inf for k < 1
            return float(k / self.scale * z ** (k - 1.0) * np.exp(-zk))

    def _cdf(self, x: float) -> float:
        if not x > 0.0:
            return 0.0

        z = np.float64(x) / self.scale
        with np.errstate(over="ignore"):
            return float(-np.expm1(-(z**self.shape)))

    def _ppf(self, p: float) -> float:
        if p >= 1.0:
            return float("inf")
        return float(self.scale * (-np.log1p(-p)) ** (1.0 / self.shape))

    def _random(self, rng: np.random.Generator) -> float:
        # U is drawn on [0, 1), so the draw is always finite
        return self._ppf(float(rng.random()))

    @overload
    def ppf(self, p: Number) -> float: ...
    @overload
    def ppf(self, p: npt.ArrayLike) -> NumericArray: ...

    def ppf(self, p: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Percent point function (inverse CDF).

        Parameters
        ----------
        p : Number or array_like
            Probabilities from ``[0, 1]``.

        Returns
        -------
        float or NumericArray
            Quantiles ``λ (-ln(1 - p))^(1/k)``; ``0`` at ``p = 0`` and ``inf``
            at ``p = 1``.

        Raises
        ------
        ValueError
            If a probability is outside ``[0, 1]``.
        """
        arr = np.asarray(p, dtype=np.float64)
        if not np.all((arr >= 0.0) & (arr <= 1.0)):
            raise ValueError("Probability must be in [0, 1]")
        return elementwise(self._ppf, p)

    def _characteristics(self) -> dict[str, Callable[..., Any]]:
        characteristics = super()._characteristics()
        characteristics[CharacteristicName.PPF] = self.ppf
        return characteristics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeibullDistribution):
            return NotImplemented
        return self._parameters == other._parameters

    def __hash__(self) -> int:
        return hash((self.family_name, self._parameters))

    def __repr__(self) -> str:
        return f"WeibullDistribution(shape={self.shape!r}, scale={self.scale!r})"

    def __str__(self) -> str:
        return (
            f"{self.family_name} Distribution {{\n"
            f"\tshape = {self.shape}\n"
            f"\tscale = {self.scale}\n}}"
        )
