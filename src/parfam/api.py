"""
Convenience constructors for the built-in families.

Examples
--------
>>> d = Erlang(2, 3.0)
>>> float(d.mean()), float(d.var())
(6.0, 18.0)
>>> Pareto()
Pareto(shape=1.0, scale=1.0)
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from parfam.families.configuration import configure_families_register
from parfam.families.parametric_family import ParametricFamily
from parfam.types import FamilyName

if TYPE_CHECKING:
    import numpy.typing as npt

    from parfam.families.distribution import ParametricFamilyDistribution


def get_family(name: str) -> ParametricFamily:
    """Look up a family in the configured registry."""
    return configure_families_register().get(name)


def Erlang(shape: int = 1, scale: float = 1.0) -> ParametricFamilyDistribution:
    """
    Erlang distribution with integer shape and scale θ.

    ``Erlang()`` is Erlang(1, 1); ``Erlang(k)`` has unit scale.

    Raises
    ------
    InvalidParameterError
        If shape is not a non-negative integer.
    """
    return get_family(FamilyName.ERLANG)(shape=shape, scale=scale)


def Pareto(shape: float = 1.0, scale: float = 1.0) -> ParametricFamilyDistribution:
    """
    Pareto distribution with shape α and scale θ, supported on [θ, ∞).

    ``Pareto()`` is Pareto(1, 1); ``Pareto(a)`` has unit scale.

    Raises
    ------
    InvalidParameterError
        If shape or scale is not strictly positive.
    """
    return get_family(FamilyName.PARETO)(shape=shape, scale=scale)


def fit_mle(family: ParametricFamily | str, data: npt.ArrayLike) -> ParametricFamilyDistribution:
    """
    Fit a family to a one-dimensional sample by maximum likelihood.

    Parameters
    ----------
    family : ParametricFamily or str
        Family object or registered family name (e.g. ``"Pareto"``).
    data : array_like
        Observations.

    Examples
    --------
    >>> fitted = fit_mle("Pareto", [2.0, 3.0, 4.0, 5.0])
    >>> float(fitted.scale)
    2.0
    """
    if not isinstance(family, ParametricFamily):
        family = get_family(family)
    return family.fit(data)
