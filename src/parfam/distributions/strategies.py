"""
Strategies for evaluating and sampling distributions.

A distribution delegates two decisions to strategy objects: how a
characteristic name is turned into a callable (:class:`ComputationStrategy`)
and how draws are produced (:class:`SamplingStrategy`).

Defaults
--------
- :class:`DefaultComputationStrategy` hands out the family's closed-form
  formulas and raises when a characteristic has none.
- :class:`DefaultSamplingUnivariateStrategy` pushes uniform variates through
  ``ppf``.
- :class:`ParametricSamplingUnivariateStrategy` calls a family-specific
  variate generator, e.g. ``Generator.gamma`` for Erlang.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np
import numpy.typing as npt

from parfam.distributions.computation import AnalyticalComputation
from parfam.errors import CharacteristicNotFoundError
from parfam.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample, make_rng

if TYPE_CHECKING:
    from parfam.families.parametrizations import Parametrization

    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]

type VariateGenerator = Callable[
    ["Parametrization", int, np.random.Generator], npt.NDArray[np.floating[Any]]
]


class ComputationStrategy[In, Out](Protocol):
    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """Look characteristics up among the distribution's analytical computations."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Callable computing ``state`` for ``distr``.

        Raises
        ------
        CharacteristicNotFoundError
            If the family has no formula for ``state``.
        """
        computations = distr.analytical_computations
        try:
            return computations[state]
        except KeyError:
            available = ", ".join(sorted(computations)) or "none"
            raise CharacteristicNotFoundError(
                f"Characteristic '{state}' is not available (available: {available})."
            ) from None


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Inverse transform sampling: ``ppf(U)`` with ``U`` uniform on [0, 1).

    The ``rng`` option selects the generator; remaining options are passed
    to the ``ppf`` lookup.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        rng = make_rng(options.pop("rng", None))
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        draws = np.asarray(ppf(rng.random(n)), dtype=np.float64)
        return ArraySample.from_values(draws)


class ParametricSamplingUnivariateStrategy(SamplingStrategy):
    """
    Sampling through a variate generator written for the family.

    Parameters
    ----------
    generator : Callable[[Parametrization, int, Generator], numpy.ndarray]
        Draws ``n`` variates for the given base parameters.
    """

    def __init__(self, generator: VariateGenerator) -> None:
        self.generator = generator

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        rng = make_rng(options.get("rng"))
        parameters = distr.family.to_base(distr.parameters)  # type: ignore[attr-defined]
        return ArraySample.from_values(self.generator(parameters, n, rng))
