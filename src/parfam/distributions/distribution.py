"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by
strategies and by the characteristic caller.

Notes
-----
- Sampling goes through the distribution's sampling strategy.
- Log-likelihood is computed element-wise using ``logpdf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from parfam.distributions.sampling import ArraySample
from parfam.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy.typing as npt

    from parfam.distributions.computation import AnalyticalComputation
    from parfam.distributions.sampling import Sample
    from parfam.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from parfam.distributions.support import Support
    from parfam.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    def log_likelihood(self, data: ArraySample | npt.ArrayLike) -> float:
        """
        Sum of log-densities of the observations.

        Parameters
        ----------
        data : ArraySample or array_like
            Univariate observations, either an ``(n, 1)`` sample or a flat array.

        Returns
        -------
        float
            ``sum(logpdf(x_i))``; ``-inf`` if any point lies outside the support.
        """
        values = data.ravel() if isinstance(data, ArraySample) else np.ravel(data)
        logpdf = self.query_method(CharacteristicName.LOGPDF)
        return float(np.sum(logpdf(values)))
