"""
Reliability Distribution Interface
==================================

This module defines :class:`ReliabilityDistribution`, the abstract base shared
by every lifetime distribution of the package.

A concrete family implements three scalar primitives:

- ``_pdf(x)`` – probability density at a single point;
- ``_cdf(x)`` – cumulative probability at a single point;
- ``_random(rng)`` – a single draw using the given uniform source.

Everything else (vector forms, batch sampling, reliability, conditional
reliability, hazard and the censored log-likelihood) is derived generically
from these primitives.

Notes
-----
- Every public characteristic accepts either a scalar, returning ``float``, or
  an array-like, returning a float64 array of the same shape evaluated
  element-wise in order.
- Where the reliability vanishes, ratios follow IEEE arithmetic and yield
  ``inf`` or ``nan`` instead of raising.
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, overload

import numpy as np

from pysatl_reliability.distributions.sampling import as_censored_sample, resolve_rng
from pysatl_reliability.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy.typing as npt

    from pysatl_reliability.distributions.sampling import CensoredSample
    from pysatl_reliability.types import Number, NumericArray, ScalarFunc


def elementwise(func: ScalarFunc, x: Number | npt.ArrayLike) -> float | NumericArray:
    """Apply a scalar function to a scalar or, element by element, to an array."""
    if np.ndim(x) == 0:
        return float(func(float(x)))  # type: ignore[arg-type]

    arr = np.asarray(x, dtype=np.float64)
    values = np.fromiter((func(float(v)) for v in arr.flat), dtype=np.float64, count=arr.size)
    return values.reshape(arr.shape)


def _ratio(num: float, den: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


class ReliabilityDistribution(ABC):
    """
    Abstract lifetime distribution.

    Subclasses provide the scalar primitives ``_pdf``, ``_cdf`` and
    ``_random``; the public API below is inherited.
    """

    __slots__ = ()

    @abstractmethod
    def _pdf(self, x: float) -> float:
        """Probability density at a single point."""

    @abstractmethod
    def _cdf(self, x: float) -> float:
        """Cumulative probability ``P(T <= x)`` at a single point."""

    @abstractmethod
    def _random(self, rng: np.random.Generator) -> float:
        """Draw a single variate using ``rng`` as the uniform source."""

    # ------------------------------------------------------------------
    # Primitive characteristics
    # ------------------------------------------------------------------

    @overload
    def pdf(self, x: Number) -> float: ...
    @overload
    def pdf(self, x: npt.ArrayLike) -> NumericArray: ...

    def pdf(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Probability density function.

        Parameters
        ----------
        x : Number or array_like
            Point(s) at which to evaluate the density.

        Returns
        -------
        float or NumericArray
            Density value(s), with the shape of ``x``.
        """
        return elementwise(self._pdf, x)

    @overload
    def cdf(self, x: Number) -> float: ...
    @overload
    def cdf(self, x: npt.ArrayLike) -> NumericArray: ...

    def cdf(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Cumulative distribution function.

        Parameters
        ----------
        x : Number or array_like
            Point(s) at which to evaluate the distribution function.

        Returns
        -------
        float or NumericArray
            Probabilities ``P(T <= x)`` in ``[0, 1]``, with the shape of ``x``.
        """
        return elementwise(self._cdf, x)

    @overload
    def random(self, n: None = None, *, rng: np.random.Generator | None = None) -> float: ...
    @overload
    def random(self, n: int, *, rng: np.random.Generator | None = None) -> NumericArray: ...

    def random(
        self, n: int | None = None, *, rng: np.random.Generator | None = None
    ) -> float | NumericArray:
        """
        Generate random variates.

        Parameters
        ----------
        n : int, optional
            Number of independent draws. When omitted a single ``float`` is
            returned.
        rng : numpy.random.Generator, optional
            Uniform source. Defaults to the process-wide generator.

        Returns
        -------
        float or NumericArray
            A single draw, or a 1D array of ``n`` draws.

        Raises
        ------
        ValueError
            If ``n`` is not greater than 0.
        """
        generator = resolve_rng(rng)
        if n is None:
            return float(self._random(generator))

        if n <= 0:
            raise ValueError("Number of samples must be greater than 0.")
        return np.fromiter((self._random(generator) for _ in range(n)), dtype=np.float64, count=n)

    # ------------------------------------------------------------------
    # Derived characteristics
    # ------------------------------------------------------------------

    def _reliability(self, x: float) -> float:
        return 1.0 - self._cdf(x)

    def _conditional_reliability(self, x: float, age: float) -> float:
        return _ratio(self._reliability(age + x), self._reliability(age))

    def _hazard(self, x: float) -> float:
        return _ratio(self._pdf(x), self._reliability(x))

    @overload
    def reliability(self, x: Number) -> float: ...
    @overload
    def reliability(self, x: npt.ArrayLike) -> NumericArray: ...

    def reliability(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Reliability (survival) function ``R(x) = 1 - F(x)``.

        Parameters
        ----------
        x : Number or array_like
            Time(s) at which to evaluate the survival probability.

        Returns
        -------
        float or NumericArray
            Probabilities of surviving beyond ``x``.
        """
        return elementwise(self._reliability, x)

    @overload
    def conditional_reliability(self, x: Number, age: Number) -> float: ...
    @overload
    def conditional_reliability(self, x: npt.ArrayLike, age: npt.ArrayLike) -> NumericArray: ...

    def conditional_reliability(
        self, x: Number | npt.ArrayLike, age: Number | npt.ArrayLike
    ) -> float | NumericArray:
        """
        Conditional reliability ``R(age + x) / R(age)``.

        The probability of surviving an additional ``x`` time units given
        survival up to ``age``.

        Parameters
        ----------
        x : Number or array_like
            Additional mission time(s).
        age : Number or array_like
            Time(s) already survived. Arrays are paired with ``x`` position by
            position.

        Returns
        -------
        float or NumericArray
            Conditional survival probabilities.

        Raises
        ------
        ValueError
            If ``x`` and ``age`` are not both scalars or arrays of one shape.
        """
        if np.ndim(x) == 0 and np.ndim(age) == 0:
            return self._conditional_reliability(float(x), float(age))  # type: ignore[arg-type]

        x_arr = np.asarray(x, dtype=np.float64)
        age_arr = np.asarray(age, dtype=np.float64)
        if x_arr.shape != age_arr.shape:
            raise ValueError(
                f"Mission times and ages must have the same shape, "
                f"got {x_arr.shape} and {age_arr.shape}."
            )

        values = np.fromiter(
            (
                self._conditional_reliability(float(xi), float(ai))
                for xi, ai in zip(x_arr.flat, age_arr.flat, strict=True)
            ),
            dtype=np.float64,
            count=x_arr.size,
        )
        return values.reshape(x_arr.shape)

    @overload
    def hazard(self, x: Number) -> float: ...
    @overload
    def hazard(self, x: npt.ArrayLike) -> NumericArray: ...

    def hazard(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Hazard (instantaneous failure rate) ``h(x) = f(x) / R(x)``.

        Parameters
        ----------
        x : Number or array_like
            Time(s) at which to evaluate the failure rate.

        Returns
        -------
        float or NumericArray
            Hazard value(s); ``inf`` or ``nan`` where ``R(x) = 0``.
        """
        return elementwise(self._hazard, x)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def _characteristics(self) -> dict[str, Callable[..., Any]]:
        return {
            CharacteristicName.PDF: self.pdf,
            CharacteristicName.CDF: self.cdf,
            CharacteristicName.RELIABILITY: self.reliability,
            CharacteristicName.CONDITIONAL_RELIABILITY: self.conditional_reliability,
            CharacteristicName.HAZARD: self.hazard,
        }

    def calculate_characteristic(self, characteristic_name: str, *values: Any) -> Any:
        """
        Evaluate a characteristic by name.

        Parameters
        ----------
        characteristic_name : str
            One of :class:`~pysatl_reliability.types.CharacteristicName`.
        *values
            Arguments forwarded to the characteristic.

        Raises
        ------
        KeyError
            If the distribution does not provide the characteristic.
        """
        characteristics = self._characteristics()
        if characteristic_name not in characteristics:
            raise KeyError(f"Unknown characteristic '{characteristic_name}'.")
        return characteristics[characteristic_name](*values)

    def log_likelihood(
        self,
        data: CensoredSample | npt.ArrayLike,
        censored: npt.ArrayLike | None = None,
    ) -> float:
        """
        Censored log-likelihood of a lifetime sample.

        Exact failures contribute ``log f(t)`` and right-censored observations
        contribute ``log R(t)``.

        Parameters
        ----------
        data : CensoredSample or array_like
            Sample or observed times.
        censored : array_like, optional
            Censoring flags, only allowed together with raw times.

        Returns
        -------
        float
            Log-likelihood value, ``-inf`` if some observation has zero
            likelihood.
        """
        sample = as_censored_sample(data, censored)
        with np.errstate(divide="ignore"):
            failures = np.log(self.pdf(sample.failure_times))
            survivors = np.log(self.reliability(sample.censored_times))
        return float(np.sum(failures) + np.sum(survivors))

