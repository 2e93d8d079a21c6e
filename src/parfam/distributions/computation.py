"""
Closed-form characteristic evaluators.

Every characteristic of a distribution (``pdf``, ``mean``, ``mgf``, ...) is
reached through a callable tagged with the characteristic's name. Families
bind their formulas to concrete parameters and hand them out as
:class:`AnalyticalComputation` objects; anything satisfying
:class:`Computation` can stand in for one.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from parfam.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Characteristic evaluator: ``computation(data, **options)``."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Formula of one characteristic with the parameters already bound.

    Parameters
    ----------
    target : str
        Characteristic the formula computes, e.g. ``"pdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Function of the evaluation point. Scalar statistics ignore the point
        and are called with ``None``. Keyword options such as ``excess`` for
        the kurtosis are passed through unchanged.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
