"""
PySATL Reliability
==================

Unit tests: distribution interface, Weibull family and censored estimation.
"""

__author__ = "PySATL Reliability contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
