"""
PySATL Reliability
==================

Parametric reliability analysis: a lifetime distribution abstraction with
reliability, conditional reliability and hazard functions, the Weibull
distribution, and maximum likelihood estimation from right-censored data.
"""

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .estimation import *
from .estimation import __all__ as _estimation_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-reliability")
__all__ = [
    "__version__",
    *_distr_all,
    *_estimation_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _estimation_all
del _family_all
del _types_all
