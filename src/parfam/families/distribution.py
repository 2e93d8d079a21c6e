"""
Members of parametric families.

A :class:`ParametricFamilyDistribution` is what calling a family returns: a
frozen record of the family name and the parameters, with evaluation,
statistics and sampling methods that resolve through the family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from math import inf
from typing import TYPE_CHECKING

import numpy as np

from parfam.distributions import characteristics as ch
from parfam.distributions.distribution import Distribution
from parfam.distributions.support import ContinuousSupport
from parfam.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy.typing as npt

    from parfam.distributions.computation import AnalyticalComputation
    from parfam.distributions.sampling import ArraySample, RandomState
    from parfam.distributions.strategies import ComputationStrategy, SamplingStrategy
    from parfam.distributions.support import Support
    from parfam.families.parametric_family import ParametricFamily
    from parfam.families.parametrizations import Parametrization
    from parfam.types import (
        BoolArray,
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True)
class ParametricFamilyDistribution(Distribution):
    """
    Distribution with fixed parameter values.

    Instances are immutable, compare equal when family and parameters agree,
    and are hashable. Closed-form characteristics are bound to the parameters
    on first use.

    Parameters
    ----------
    family_name : str
        Registry name of the family.
    _distribution_type : DistributionType
        Type shared by the members of the family.
    parameters : Parametrization
        Values in the parametrization the instance was created with.
    _support : Support or None
        Support resolved from the base parameters.

    Examples
    --------
    >>> from parfam import Pareto
    >>> d = Pareto(3.0, 2.0)
    >>> float(d.mean())
    3.0
    >>> float(d.pdf(4.0))
    0.09375
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = (
        field(default=None, init=False, repr=False, compare=False)
    )

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v}" for k, v in self.parameters.parameters.items())
        return f"{self.family_name}({args})"

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """Family object, looked up in the registry by name."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the instance was created with."""
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @property
    def params(self) -> tuple[Any, ...]:
        """Base parameter values as a tuple, e.g. ``(shape, scale)``."""
        return self.base_parameters.values

    @property
    def shape(self) -> Any:
        """Shape parameter of the base parametrization."""
        return getattr(self.base_parameters, "shape")

    @property
    def scale(self) -> Any:
        """Scale parameter of the base parametrization."""
        return getattr(self.base_parameters, "scale")

    @property
    def rate(self) -> Any:
        """Rate parameter, where the family defines one."""
        return getattr(self.base_parameters, "rate")

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristic formulas bound to this instance's parameters."""
        cache = self._analytical_cache
        if cache is None:
            cache = self.family._build_analytical_computations(self.parameters)
            object.__setattr__(self, "_analytical_cache", cache)
        return cache

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def minimum(self) -> float:
        """Left end of the support (``-inf`` if undeclared)."""
        if isinstance(self._support, ContinuousSupport):
            return self._support.left
        return -inf

    @property
    def maximum(self) -> float:
        """Right end of the support (``inf`` if undeclared)."""
        if isinstance(self._support, ContinuousSupport):
            return self._support.right
        return inf

    def insupport(self, x: npt.ArrayLike) -> bool | BoolArray:
        """Check whether point(s) lie in the declared support."""
        if self._support is None:
            return True if np.ndim(x) == 0 else np.ones(np.shape(x), dtype=bool)
        return self._support.contains(x)  # type: ignore[arg-type]

    # Evaluation

    def pdf(self, x: Any) -> Any:
        """Probability density at ``x``."""
        return ch.PDF(self, x)

    def logpdf(self, x: Any) -> Any:
        """Log of the probability density at ``x``."""
        return ch.LOGPDF(self, x)

    def cdf(self, x: Any) -> Any:
        """Cumulative distribution function ``P(X <= x)``."""
        return ch.CDF(self, x)

    def logcdf(self, x: Any) -> Any:
        """Log of the cumulative distribution function."""
        return ch.LOGCDF(self, x)

    def ccdf(self, x: Any) -> Any:
        """Complementary CDF (survival function) ``P(X > x)``."""
        return ch.SF(self, x)

    sf = ccdf

    def logccdf(self, x: Any) -> Any:
        """Log of the complementary CDF."""
        return ch.LOGSF(self, x)

    logsf = logccdf

    def quantile(self, p: Any) -> Any:
        """Inverse of the CDF."""
        return ch.PPF(self, p)

    ppf = quantile

    def cquantile(self, p: Any) -> Any:
        """Inverse of the complementary CDF."""
        return ch.ISF(self, p)

    isf = cquantile

    def mgf(self, t: Any) -> Any:
        """Moment generating function ``E[exp(tX)]``."""
        return ch.MGF(self, t)

    def cf(self, t: Any) -> Any:
        """Characteristic function ``E[exp(itX)]``."""
        return ch.CF(self, t)

    # Statistics

    def mean(self) -> Any:
        return ch.MEAN(self, None)

    def median(self) -> Any:
        return ch.MEDIAN(self, None)

    def mode(self) -> Any:
        return ch.MODE(self, None)

    def var(self) -> Any:
        return ch.VAR(self, None)

    def std(self) -> Any:
        return np.sqrt(self.var())

    def skewness(self) -> Any:
        return ch.SKEW(self, None)

    def kurtosis(self, excess: bool = True) -> Any:
        """Excess kurtosis by default; ``excess=False`` gives raw kurtosis."""
        return ch.KURT(self, None, excess=excess)

    def entropy(self) -> Any:
        """Differential entropy in nats."""
        return ch.ENTROPY(self, None)

    # Sampling

    def sample(self, n: int, **options: Any) -> ArraySample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Additional options for sampling, e.g. ``rng``.

        Returns
        -------
        ArraySample
            Generated samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)  # type: ignore[return-value]

    def rand(self, n: int | None = None, rng: RandomState = None) -> Any:
        """
        Draw random variates.

        Returns a single NumPy scalar when ``n`` is None, otherwise a 1-D
        array of ``n`` draws.
        """
        values = self.sample(1 if n is None else n, rng=rng).ravel()
        return values[0] if n is None else values
