"""
Sampling Interfaces
===================

This module defines the container for right-censored lifetime samples and the
uniform random source used by the distributions' samplers.

Notes
-----
- Sample arrays are copied on construction and made read-only, so a sample can
  be shared between estimations without defensive copies.
- Randomness is always drawn from an explicit :class:`numpy.random.Generator`.
  When the caller does not supply one, the process-wide generator returned by
  :func:`default_rng` is used.
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt

    from pysatl_reliability.types import BoolArray, NumericArray

_DEFAULT_RNG: np.random.Generator | None = None


def default_rng() -> np.random.Generator:
    """
    Return the process-wide uniform source.

    The generator is created lazily on first use and is not seeded.
    """
    global _DEFAULT_RNG
    if _DEFAULT_RNG is None:
        _DEFAULT_RNG = np.random.default_rng()
    return _DEFAULT_RNG


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` itself or the process-wide generator when it is ``None``."""
    return default_rng() if rng is None else rng


class CensoredSample:
    """
    Right-censored lifetime sample.

    Stores two parallel one-dimensional arrays: observed times and censoring
    flags. A flag is ``True`` when the unit was still alive at the recorded
    time (right-censored) and ``False`` for an exact failure.

    Parameters
    ----------
    times : array_like
        Observed times; every value must be finite and strictly positive.
    censored : array_like, optional
        Censoring flags of the same length as ``times``. Integer type codes are
        accepted: ``0`` is an exact failure, any other value is right-censored.
        ``None`` marks every observation as an exact failure.

    Raises
    ------
    ValueError
        If ``times`` is ``None``, empty or not one-dimensional, if the
        censoring vector has a different length, or if a time is not a finite
        positive number.
    """

    __slots__ = ("_censored", "_times")

    _times: NumericArray
    _censored: BoolArray

    def __init__(
        self,
        times: npt.ArrayLike,
        censored: npt.ArrayLike | None = None,
    ) -> None:
        if times is None:
            raise ValueError("Data vector can not be None.")

        times_arr = np.array(times, dtype=np.float64)
        if times_arr.ndim != 1:
            raise ValueError("Data vector must be one-dimensional.")
        if times_arr.size == 0:
            raise ValueError("Data vector must contain at least one observation.")

        if censored is None:
            censored_arr = np.zeros(times_arr.shape, dtype=np.bool_)
        else:
            censored_arr = np.array(censored).astype(np.bool_)
            if censored_arr.shape != times_arr.shape:
                raise ValueError("Censoring vector must have the same length as the data vector.")

        if not np.all(np.isfinite(times_arr) & (times_arr > 0.0)):
            raise ValueError("Observed times must be finite and greater than 0.")

        times_arr.flags.writeable = False
        censored_arr.flags.writeable = False
        self._times = times_arr
        self._censored = censored_arr

    def __len__(self) -> int:
        """Return the number of observations (n)."""
        return int(self._times.size)

    def __iter__(self) -> Iterator[tuple[float, bool]]:
        """Iterate over ``(time, censored)`` pairs in their original order."""
        for t, c in zip(self._times, self._censored, strict=True):
            yield float(t), bool(c)

    def __repr__(self) -> str:
        return f"CensoredSample(n={self.n}, censored={self.n_censored})"

    @property
    def times(self) -> NumericArray:
        """Read-only array of observed times."""
        return self._times

    @property
    def censored(self) -> BoolArray:
        """Read-only array of censoring flags."""
        return self._censored

    @property
    def n(self) -> int:
        """Total number of observations."""
        return len(self)

    @property
    def n_censored(self) -> int:
        """Number of right-censored observations (r)."""
        return int(np.count_nonzero(self._censored))

    @property
    def n_failures(self) -> int:
        """Number of exact failure observations (m = n - r)."""
        return self.n - self.n_censored

    @property
    def is_fully_censored(self) -> bool:
        """Whether no exact failure was observed."""
        return self.n_failures == 0

    @property
    def failure_times(self) -> NumericArray:
        """Times of the exact failures, in sample order."""
        return self._times[~self._censored]

    @property
    def censored_times(self) -> NumericArray:
        """Times of the right-censored observations, in sample order."""
        return self._times[self._censored]


def as_censored_sample(
    data: CensoredSample | npt.ArrayLike, censored: npt.ArrayLike | None = None
) -> CensoredSample:
    """
    Coerce raw times and flags into a :class:`CensoredSample`.

    Raises
    ------
    ValueError
        If censoring flags are passed together with a ready sample, or if the
        raw arrays fail :class:`CensoredSample` validation.
    """
    if isinstance(data, CensoredSample):
        if censored is not None:
            raise ValueError("Censoring flags must not be passed together with a CensoredSample.")
        return data
    return CensoredSample(data, censored)
