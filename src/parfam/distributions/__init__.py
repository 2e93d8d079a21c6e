"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
parfam:

- distribution protocol (:mod:`.distribution`);
- analytical computation primitive (:mod:`.computation`);
- characteristic callers (:mod:`.characteristics`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- support primitives (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .characteristics import GenericCharacteristic
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample, make_rng
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    ParametricSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    "GenericCharacteristic",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    "make_rng",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "ParametricSamplingUnivariateStrategy",
    # support
    "Support",
    "ContinuousSupport",
]
