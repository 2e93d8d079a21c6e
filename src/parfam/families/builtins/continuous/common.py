"""
Helpers shared by the built-in continuous families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

    from parfam.types import NumericArray


def check_probability(p: npt.ArrayLike) -> NumericArray:
    """
    Convert ``p`` to an array and check it is a probability.

    Raises
    ------
    ValueError
        If any value is outside [0, 1] or NaN.
    """
    arr = np.asarray(p, dtype=np.float64)
    if np.any(~((arr >= 0) & (arr <= 1))):
        raise ValueError("Probability must be in [0, 1]")
    return arr


def as_dtype(value: Any, dtype: np.dtype[Any]) -> Any:
    """Cast a scalar or array result to the precision of the parameters."""
    return np.asarray(value).astype(dtype, copy=False)
