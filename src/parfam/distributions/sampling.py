"""
Samples and random generators.

Sampling strategies return :class:`ArraySample` objects, one row per draw.
The ``rng`` option accepted throughout the package is normalized by
:func:`make_rng`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    type FloatArray = npt.NDArray[np.floating[Any]]
    type RandomState = np.random.Generator | int | np.random.SeedSequence | None


class Sample(Protocol):
    """Anything exposing its draws as a 2-D ``array`` of shape ``(n, d)``."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Draws stored row-wise in a 2-D array.

    Parameters
    ----------
    data : numpy.ndarray
        Array of shape ``(n, d)``: ``n`` draws of a ``d``-dimensional variable.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    dimension: int
    data: FloatArray

    def __init__(self, data: FloatArray) -> None:
        if np.ndim(data) != 2:
            raise ValueError(f"ArraySample expects an (n, d) array, got shape {np.shape(data)}.")
        self.data = data
        self.dimension = data.shape[1]

    @classmethod
    def from_values(cls, values: npt.ArrayLike) -> ArraySample:
        """Wrap a flat sequence of univariate draws as an ``(n, 1)`` sample."""
        return cls(np.asarray(values).reshape(-1, 1))

    def __len__(self) -> int:
        return self.data.shape[0]

    def __iter__(self) -> Iterator[FloatArray]:
        return iter(self.data)

    @property
    def array(self) -> FloatArray:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        rows, cols = self.data.shape
        return rows, cols

    def ravel(self) -> FloatArray:
        """
        Draws of a univariate sample as a flat array.

        Raises
        ------
        ValueError
            If the sample has more than one column.
        """
        if self.dimension != 1:
            raise ValueError(f"Cannot flatten a {self.dimension}-dimensional sample.")
        return self.data[:, 0]


def make_rng(rng: RandomState = None) -> np.random.Generator:
    """
    Generator for the ``rng`` option.

    A :class:`numpy.random.Generator` is used as is; a seed, a
    :class:`numpy.random.SeedSequence` or None seeds a fresh
    :func:`numpy.random.default_rng`.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)
