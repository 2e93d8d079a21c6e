"""
Core Type Definitions
=====================

Enumerations, numeric aliases and the interval type shared by the
distribution protocol and the parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf, isfinite
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution has a density or a probability mass function."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution on ``R^dimension``.

    Parameters
    ----------
    kind : Kind
        Continuous or discrete.
    dimension : int
        Number of coordinates of a single draw.
    """

    kind: Kind
    dimension: int

    @property
    def is_univariate(self) -> bool:
        return self.dimension == 1


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type shared by the Erlang and Pareto families."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
ComplexArray = NDArray[np.complexfloating[Any]]
BoolArray = NDArray[np.bool_]


class ContinuousSupportShape1D(Enum):
    """
    Topological classification of an :class:`Interval1D`.

    ``RAY_RIGHT`` is bounded below, e.g. ``[θ, ∞)``; ``RAY_LEFT`` is bounded
    above, e.g. ``(-∞, b]``.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval of the real line.

    Parameters
    ----------
    left, right : float
        Endpoints; unbounded by default.
    left_closed, right_closed : bool
        Whether the endpoints belong to the interval. Infinite endpoints are
        always open whatever the flags say.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_closed", self.left_closed and isfinite(self.left))
        object.__setattr__(self, "right_closed", self.right_closed and isfinite(self.right))

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Elementwise membership test.

        Returns a Python ``bool`` for scalar input and a boolean array
        otherwise.
        """
        points = np.asarray(x)
        above = (np.greater_equal if self.left_closed else np.greater)(points, self.left)
        below = (np.less_equal if self.right_closed else np.less)(points, self.right)
        inside = np.logical_and(above, below)
        if np.ndim(inside) == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        if self.left == self.right:
            return not (self.left_closed and self.right_closed)
        return bool(self.left > self.right)

    @property
    def shape(self) -> ContinuousSupportShape1D:
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT

        bounded_below, bounded_above = isfinite(self.left), isfinite(self.right)
        if bounded_below and bounded_above:
            return ContinuousSupportShape1D.BOUNDED_INTERVAL
        if bounded_below:
            return ContinuousSupportShape1D.RAY_RIGHT
        if bounded_above:
            return ContinuousSupportShape1D.RAY_LEFT
        return ContinuousSupportShape1D.REAL_LINE


type GenericCharacteristicName = str
"""Key of an analytical characteristic, e.g. ``"pdf"``."""

type ParametrizationName = str


class CharacteristicName(StrEnum):
    """
    Characteristics a family can provide in closed form.

    Families may register further names; these are the ones the
    distribution methods look up.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    LOGCDF = "logcdf"
    SF = "sf"
    LOGSF = "logsf"
    PPF = "ppf"
    ISF = "isf"
    CF = "cf"
    MGF = "mgf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    """Registry names of the built-in families."""

    ERLANG = "Erlang"
    PARETO = "Pareto"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ParametrizationName",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "ComplexArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
