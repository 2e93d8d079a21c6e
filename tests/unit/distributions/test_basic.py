from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from parfam.distributions import Distribution
from parfam.distributions.computation import AnalyticalComputation
from parfam.distributions.sampling import ArraySample
from parfam.errors import CharacteristicNotFoundError
from parfam.types import CharacteristicName


def test_satisfies_distribution_protocol(logistic) -> None:
    assert isinstance(logistic, Distribution)
    assert logistic.distribution_type.is_univariate


def test_query_method_returns_the_analytical_form(logistic) -> None:
    cdf = logistic.query_method(CharacteristicName.CDF)
    assert isinstance(cdf, AnalyticalComputation)
    assert cdf.target == CharacteristicName.CDF
    assert float(cdf(0.0)) == 0.5


def test_calculate_characteristic_on_arrays(logistic) -> None:
    values = logistic.calculate_characteristic(CharacteristicName.CDF, np.array([-40.0, 0.0, 40.0]))
    np.testing.assert_allclose(values, [0.0, 0.5, 1.0], atol=1e-12)


def test_missing_characteristic_names_what_is_available(logistic) -> None:
    with pytest.raises(CharacteristicNotFoundError, match="available: cdf"):
        logistic.query_method(CharacteristicName.PDF)


def test_support_bounds_the_sample(unit_uniform) -> None:
    assert unit_uniform.support.contains(0.5)
    assert not unit_uniform.support.contains(1.5)

    sample = unit_uniform.sample(32, rng=3)
    assert sample.shape == (32, 1)
    assert unit_uniform.support.contains(sample.ravel()).all()


def test_log_likelihood_of_a_standalone_distribution(unit_uniform) -> None:
    assert unit_uniform.log_likelihood([0.1, 0.9]) == 0.0
    assert unit_uniform.log_likelihood([0.1, 2.0]) == -np.inf


def test_log_likelihood_accepts_array_samples(unit_uniform) -> None:
    sample = ArraySample(np.array([[0.1], [0.3], [1.5]]))
    assert np.isneginf(unit_uniform.log_likelihood(sample))
    assert unit_uniform.log_likelihood(ArraySample.from_values([0.2, 0.4])) == 0.0
