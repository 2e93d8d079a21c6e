from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from parfam.distributions.characteristics import GenericCharacteristic, unwrap_scalar
from parfam.distributions.strategies import (
    DefaultComputationStrategy,
    ParametricSamplingUnivariateStrategy,
)
from parfam.errors import CharacteristicNotFoundError
from parfam.types import CharacteristicName
from tests.utils.families import make_toy_family


def test_default_strategy_hands_out_the_stored_computation(logistic) -> None:
    method = DefaultComputationStrategy().query_method(CharacteristicName.CDF, logistic)
    assert method is logistic.analytical_computations[CharacteristicName.CDF]


def test_default_strategy_reports_missing_characteristic(logistic) -> None:
    with pytest.raises(CharacteristicNotFoundError, match="'pdf' is not available") as info:
        DefaultComputationStrategy().query_method(CharacteristicName.PDF, logistic)
    assert isinstance(info.value, KeyError)


def test_generic_characteristic_unwraps_zero_dim_results(logistic) -> None:
    value = GenericCharacteristic[float, float](CharacteristicName.CDF)(logistic, 0.0)
    assert isinstance(value, np.float64)
    assert value == pytest.approx(0.5)


def test_unwrap_scalar_keeps_dtype_and_arrays() -> None:
    assert isinstance(unwrap_scalar(np.asarray(2.5, dtype=np.float32)), np.float32)
    arr = np.array([1.0, 2.0])
    assert unwrap_scalar(arr) is arr
    assert unwrap_scalar(3.0) == 3.0


def test_parametric_sampler_receives_base_parameters() -> None:
    seen = []

    def draw(params, n, rng):
        seen.append(params.name)
        return np.full(n, params.value)

    family = make_toy_family(sampling_strategy=ParametricSamplingUnivariateStrategy(draw))
    sample = family.distribution("alt", value=4.0).sample(3)

    assert seen == ["base"]
    np.testing.assert_array_equal(sample.ravel(), [4.0, 4.0, 4.0])


def test_parametric_sampler_rejects_negative_size() -> None:
    family = make_toy_family(
        sampling_strategy=ParametricSamplingUnivariateStrategy(lambda p, n, rng: np.zeros(n))
    )
    with pytest.raises(ValueError, match="non-negative"):
        family(value=1.0).sample(-1)
