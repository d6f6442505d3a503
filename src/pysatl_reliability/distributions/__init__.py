"""
Distributions subpackage

Interfaces shared by every lifetime distribution:

- reliability distribution base class (:mod:`.distribution`);
- censored sample container and random sources (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import ReliabilityDistribution
from .sampling import CensoredSample, as_censored_sample, default_rng

__all__ = [
    # distribution
    "ReliabilityDistribution",
    # sampling
    "CensoredSample",
    "as_censored_sample",
    "default_rng",
]
