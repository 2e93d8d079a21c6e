from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from parfam.families import ParametricFamily
from parfam.types import CharacteristicName
from tests.utils.families import make_toy_family


@pytest.fixture
def family() -> ParametricFamily:
    return make_toy_family(
        {
            CharacteristicName.PDF: {"base": lambda p, x: p.value * x},
            CharacteristicName.CDF: {"base": lambda p, x: p.value + x},
        }
    )


def test_computations_are_built_once(family: ParametricFamily) -> None:
    distr = family.distribution("alt", value=2.0)
    assert distr.analytical_computations is distr.analytical_computations


def test_alternative_parameters_fall_back_to_base_forms(family: ParametricFamily) -> None:
    computations = family.distribution("alt", value=2.0).analytical_computations

    assert computations[CharacteristicName.PDF](1.5) == pytest.approx(3.0)
    assert computations[CharacteristicName.CDF](0.5) == pytest.approx(2.5)


def test_instances_are_frozen(family: ParametricFamily) -> None:
    distr = family(value=2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        distr.parameters = family.base(value=5.0)  # type: ignore[misc, call-arg]


def test_equality_ignores_the_cache(family: ParametricFamily) -> None:
    warm = family(value=1.0)
    _ = warm.analytical_computations
    cold = family(value=1.0)

    assert warm == cold
    assert hash(warm) == hash(cold)
    assert warm != family(value=1.5)
