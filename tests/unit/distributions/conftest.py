from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np
import pytest

from parfam.distributions.computation import AnalyticalComputation
from parfam.distributions.support import ContinuousSupport
from parfam.types import CharacteristicName, Kind
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


def _logistic_cdf(x: Any, **_: Any) -> Any:
    return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))


def _unit_uniform_logpdf(x: Any, **_: Any) -> Any:
    arr = np.asarray(x, dtype=float)
    return np.where((arr >= 0.0) & (arr <= 1.0), 0.0, -np.inf)


@pytest.fixture
def logistic() -> StandaloneEuclideanUnivariateDistribution:
    """Logistic distribution known only through its CDF."""
    return StandaloneEuclideanUnivariateDistribution(
        Kind.CONTINUOUS,
        [AnalyticalComputation[Any, Any](target=CharacteristicName.CDF, func=_logistic_cdf)],
    )


@pytest.fixture
def unit_uniform() -> StandaloneEuclideanUnivariateDistribution:
    """Uniform distribution on [0, 1] with ``logpdf`` and ``ppf``."""
    return StandaloneEuclideanUnivariateDistribution(
        Kind.CONTINUOUS,
        {
            CharacteristicName.LOGPDF: AnalyticalComputation[Any, Any](
                target=CharacteristicName.LOGPDF, func=_unit_uniform_logpdf
            ),
            CharacteristicName.PPF: AnalyticalComputation[Any, Any](
                target=CharacteristicName.PPF, func=lambda q, **_: q
            ),
        },
        support=ContinuousSupport(0, 1),
    )
