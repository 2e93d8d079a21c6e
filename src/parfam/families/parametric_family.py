"""
Parametric families of distributions.

A :class:`ParametricFamily` ties together the parametrizations of a family,
the closed-form characteristics written for them, the sampling strategy, the
support and, optionally, a maximum-likelihood fitter. Calling the family
creates validated, immutable distribution instances.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from parfam.distributions.computation import AnalyticalComputation
from parfam.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from parfam.errors import UndefinedOperationError
from parfam.families.distribution import ParametricFamilyDistribution
from parfam.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any

    import numpy.typing as npt

    from parfam.distributions.strategies import ComputationStrategy, SamplingStrategy
    from parfam.distributions.support import Support
    from parfam.families.parametrizations import Parametrization
    from parfam.types import GenericCharacteristicName, ParametrizationName

    type ParametrizedFunction = Callable[..., Any]
    type CharacteristicForms = dict[ParametrizationName, ParametrizedFunction]
    type SupportResolver = Callable[[Parametrization], Support | None]
    type Fitter = Callable[[npt.ArrayLike], Parametrization]

logger = logging.getLogger(__name__)


def _plan_providers(
    names: Sequence[ParametrizationName],
    characteristics: Mapping[GenericCharacteristicName, CharacteristicForms],
) -> dict[ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]]:
    """
    Decide, per parametrization, whose formula computes each characteristic.

    A parametrization uses its own formula when one is registered, otherwise
    the base formula; characteristics with neither are left out.
    """
    base = names[0]
    plan: dict[ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]] = {}
    for pname in names:
        plan[pname] = {
            characteristic: pname if pname in forms else base
            for characteristic, forms in characteristics.items()
            if pname in forms or base in forms
        }
    return plan


class ParametricFamily:
    """
    Family of distributions sharing closed-form characteristics.

    Parameters
    ----------
    name : str
        Registry name of the family, e.g. ``"Pareto"``.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Type of every member, or a function of the base parameters.
    distr_parametrizations : list[str]
        Parametrization names; the first is the base parametrization.
    distr_characteristics : dict
        Characteristic name to either one function ``f(parameters, x, **options)``
        written for the base parametrization, or a dict of such functions keyed
        by parametrization name.
    sampling_strategy : SamplingStrategy, optional
        Defaults to inverse transform sampling through ``ppf``.
    computation_strategy : ComputationStrategy, optional
        Defaults to plain lookup of the analytical characteristics.
    support_by_parametrization : Callable, optional
        Support of the member with the given base parameters.
    fitter : Callable, optional
        Maximum-likelihood estimator mapping a 1-D sample to parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[
            GenericCharacteristicName, CharacteristicForms | ParametrizedFunction
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
        fitter: Fitter | None = None,
    ):
        self._name = name
        if isinstance(distr_type, DistributionType):
            self._distr_type: Callable[[Parametrization], DistributionType] = (
                lambda _params: distr_type
            )
        else:
            self._distr_type = distr_type

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicForms] = {
            key: dict(forms) if isinstance(forms, dict) else {self.base_parametrization_name: forms}
            for key, forms in distr_characteristics.items()
        }
        self._analytical_plan = _plan_providers(
            self.parametrization_names, self.distr_characteristics
        )

        self.sampling_strategy = sampling_strategy or DefaultSamplingUnivariateStrategy()
        self.computation_strategy = computation_strategy or DefaultComputationStrategy()
        self._support_resolver: SupportResolver = support_by_parametrization or (
            lambda _params: None
        )
        self._fitter = fitter

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self._name!r}, parametrizations={self.parametrization_names})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If it has not been registered yet.
        """
        cls = self._parametrizations.get(self.base_parametrization_name)
        if cls is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return cls

    @property
    def support_resolver(self) -> SupportResolver:
        return self._support_resolver

    @property
    def characteristics(self) -> set[GenericCharacteristicName]:
        """Names of all characteristics the family provides analytically."""
        return set(self.distr_characteristics)

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Express ``parameters`` in the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every planned characteristic to ``parameters`` or their base form."""
        base_parameters: Parametrization | None = None
        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        for characteristic, provider in self._analytical_plan.get(parameters.name, {}).items():
            if provider == parameters.name:
                bound = parameters
            else:
                base_parameters = base_parameters or self.to_base(parameters)
                bound = base_parameters
            computations[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(self.distr_characteristics[characteristic][provider], bound),
            )
        return computations

    def _make_distribution(self, parameters: Parametrization) -> ParametricFamilyDistribution:
        parameters.validate()
        base_parameters = self.to_base(parameters)
        return ParametricFamilyDistribution(
            self.name,
            self._distr_type(base_parameters),
            parameters,
            self._support_resolver(base_parameters),
        )

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a member of the family.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; the base one by default.
        **parameters_values
            Parameter values, e.g. ``shape=2, scale=3.0``.

        Raises
        ------
        KeyError
            If the parametrization name is unknown.
        InvalidParameterError
            If the values violate a constraint.
        """
        if parametrization_name is None:
            cls = self.base
        else:
            cls = self._parametrizations[parametrization_name]
        return self._make_distribution(cls(**parameters_values))

    __call__ = distribution

    def fit(self, data: npt.ArrayLike) -> ParametricFamilyDistribution:
        """
        Maximum-likelihood fit to a one-dimensional sample.

        Raises
        ------
        UndefinedOperationError
            If the family has no fitter.
        InvalidSampleError
            If the sample admits no estimate.
        """
        if self._fitter is None:
            raise UndefinedOperationError(f"Family {self.name} does not support fitting.")
        parameters = self._fitter(data)
        logger.debug("Fitted %s parameters: %s", self.name, parameters.parameters)
        return self._make_distribution(parameters)

    fit_mle = fit

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Decorator registering a parametrization class with this family."""
        from parfam.families.parametrizations import parametrization as _register

        return _register(family=self, name=name)
