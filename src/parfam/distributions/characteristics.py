"""
Characteristic callers.

``PDF(dist, x)``, ``MEAN(dist, None)`` and friends ask the distribution's
computation strategy for the named characteristic and call it. Keyword
options reach the formula unchanged. A scalar argument gives a NumPy scalar
back and an array argument an array.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from parfam.distributions.strategies import Method
from parfam.types import (
    CharacteristicName,
    GenericCharacteristicName,
)

if TYPE_CHECKING:
    from parfam.distributions.distribution import Distribution


def unwrap_scalar(value: Any) -> Any:
    """Turn a 0-d array into the NumPy scalar of the same dtype."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value[()]
    return value


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Named characteristic, callable on any :class:`Distribution`.

    It holds no formula: every call resolves ``name`` through the
    distribution's computation strategy.

    Examples
    --------
    >>> from parfam import Pareto
    >>> from parfam.distributions.characteristics import PDF
    >>> float(PDF(Pareto(3.0, 2.0), 4.0))
    0.09375
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: "Distribution", data: In, **options: Any) -> Out:
        method = cast(
            Method[In, Out],
            distribution.computation_strategy.query_method(self.name, distribution),
        )
        return cast(Out, unwrap_scalar(method(data, **options)))


PDF = GenericCharacteristic[Any, Any](CharacteristicName.PDF)
LOGPDF = GenericCharacteristic[Any, Any](CharacteristicName.LOGPDF)
CDF = GenericCharacteristic[Any, Any](CharacteristicName.CDF)
LOGCDF = GenericCharacteristic[Any, Any](CharacteristicName.LOGCDF)
SF = GenericCharacteristic[Any, Any](CharacteristicName.SF)
LOGSF = GenericCharacteristic[Any, Any](CharacteristicName.LOGSF)
PPF = GenericCharacteristic[Any, Any](CharacteristicName.PPF)
ISF = GenericCharacteristic[Any, Any](CharacteristicName.ISF)
CF = GenericCharacteristic[Any, Any](CharacteristicName.CF)
MGF = GenericCharacteristic[Any, Any](CharacteristicName.MGF)
MEAN = GenericCharacteristic[None, Any](CharacteristicName.MEAN)
MEDIAN = GenericCharacteristic[None, Any](CharacteristicName.MEDIAN)
MODE = GenericCharacteristic[None, Any](CharacteristicName.MODE)
VAR = GenericCharacteristic[None, Any](CharacteristicName.VAR)
SKEW = GenericCharacteristic[None, Any](CharacteristicName.SKEW)
KURT = GenericCharacteristic[None, Any](CharacteristicName.KURT)
ENTROPY = GenericCharacteristic[None, Any](CharacteristicName.ENTROPY)
