"""
Pareto distribution family implementation.

Contains the Pareto (type I) family with shape-scale parameterization and a
closed-form maximum-likelihood fitter.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from parfam.distributions.strategies import ParametricSamplingUnivariateStrategy
from parfam.distributions.support import ContinuousSupport
from parfam.errors import InvalidSampleError
from parfam.families.builtins.continuous.common import as_dtype, check_probability
from parfam.families.parametric_family import ParametricFamily
from parfam.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
    promote_to_float,
)
from parfam.families.registry import ParametricFamilyRegister
from parfam.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt


def _as_points(x: npt.ArrayLike, dtype: np.dtype[Any]) -> NumericArray:
    arr = np.asarray(x)
    return arr.astype(np.promote_types(arr.dtype, dtype), copy=False)


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto distribution.

    The Pareto (type I) distribution with shape α and scale θ is a power-law
    distribution supported on [θ, ∞). Its survival function decays as
    (θ/x)^α, so moments of order ≥ α are infinite.

    Probability density function:
        f(x) = α θ^α / x^(α+1) for x ≥ θ
    """

    def _params(parameters: Parametrization) -> tuple[np.floating[Any], np.floating[Any]]:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape, parameters.scale

    def _dtype(parameters: Parametrization) -> np.dtype[Any]:
        return np.asarray(cast(_ShapeScale, parameters).shape).dtype

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Pareto distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (α)
            - scale: float (θ)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            α (θ/x)^α / x for x ≥ θ, 0 otherwise
        """
        alpha, theta = _params(parameters)
        x = _as_points(x, _dtype(parameters))
        with np.errstate(divide="ignore", invalid="ignore"):
            density = np.where(x >= theta, alpha * (theta / x) ** alpha * (1 / x), 0)
        return as_dtype(density, _dtype(parameters))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density ln α + α ln θ - (α + 1) ln x for x ≥ θ, ``-inf`` otherwise."""
        alpha, theta = _params(parameters)
        x = _as_points(x, _dtype(parameters))
        with np.errstate(divide="ignore", invalid="ignore"):
            log_density = np.where(
                x >= theta,
                np.log(alpha) + alpha * np.log(theta) - (alpha + 1) * np.log(x),
                -np.inf,
            )
        return as_dtype(log_density, _dtype(parameters))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function (θ/x)^α for x ≥ θ, 1 otherwise."""
        alpha, theta = _params(parameters)
        x = _as_points(x, _dtype(parameters))
        with np.errstate(divide="ignore", invalid="ignore"):
            survival = np.where(x >= theta, (theta / x) ** alpha, 1)
        return as_dtype(survival, _dtype(parameters))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function 1 - sf(x)."""
        return 1 - sf(parameters, x)

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-survival function α ln(θ/x) for x ≥ θ, 0 otherwise."""
        alpha, theta = _params(parameters)
        x = _as_points(x, _dtype(parameters))
        with np.errstate(divide="ignore", invalid="ignore"):
            log_survival = np.where(x >= theta, alpha * np.log(theta / x), 0)
        return as_dtype(log_survival, _dtype(parameters))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-CDF computed as log1p(-sf(x)) to avoid cancellation when sf(x) ≈ 1."""
        with np.errstate(divide="ignore"):
            return np.log1p(-sf(parameters, x))

    def isf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Inverse survival function θ / p^(1/α).

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        alpha, theta = _params(parameters)
        p = check_probability(p)
        with np.errstate(divide="ignore"):
            return as_dtype(theta / p ** (1 / alpha), _dtype(parameters))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF), isf(1 - p).

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        return isf(parameters, 1 - check_probability(p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean αθ/(α - 1) of Pareto distribution, infinite for α ≤ 1."""
        alpha, theta = _params(parameters)
        return alpha * theta / (alpha - 1) if alpha > 1 else _dtype(parameters).type(np.inf)

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median θ 2^(1/α) of Pareto distribution."""
        alpha, theta = _params(parameters)
        return theta * 2 ** (1 / alpha)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of Pareto distribution (the scale θ)."""
        return cast(_ShapeScale, parameters).scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance θ²α / ((α - 1)²(α - 2)), infinite for α ≤ 2."""
        alpha, theta = _params(parameters)
        if alpha > 2:
            return (theta**2 * alpha) / ((alpha - 1) ** 2 * (alpha - 2))
        return _dtype(parameters).type(np.inf)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of Pareto distribution, NaN for α ≤ 3."""
        alpha, _theta = _params(parameters)
        if alpha > 3:
            return ((2 * (1 + alpha)) / (alpha - 3)) * np.sqrt((alpha - 2) / alpha)
        return _dtype(parameters).type(np.nan)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = True) -> float:
        """
        Excess kurtosis of Pareto distribution, NaN for α ≤ 4.

        Parameters
        ----------
        excess : bool
            Return excess kurtosis if True, raw kurtosis otherwise
        """
        alpha, _theta = _params(parameters)
        if not alpha > 4:
            return _dtype(parameters).type(np.nan)
        excess_kurtosis = (6 * (alpha**3 + alpha**2 - 6 * alpha - 2)) / (
            alpha * (alpha - 3) * (alpha - 4)
        )
        return excess_kurtosis if excess else excess_kurtosis + 3

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Entropy ln(θ/α) + 1/α + 1."""
        alpha, theta = _params(parameters)
        return np.log(theta / alpha) + 1 / alpha + 1

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support [θ, ∞) of Pareto distribution"""
        return ContinuousSupport(left=float(cast(_ShapeScale, parameters).scale))

    def _draw(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        """θ exp(E/α) with E standard exponential."""
        alpha, theta = _params(parameters)
        return as_dtype(theta * np.exp(rng.standard_exponential(n) / alpha), _dtype(parameters))

    def _fit_mle(data: npt.ArrayLike) -> Parametrization:
        """
        Maximum-likelihood estimate of Pareto parameters.

        θ̂ = min(x), α̂ = n / Σ(ln xᵢ - ln θ̂).

        Raises
        ------
        InvalidSampleError
            If the sample is not a non-empty 1-D array of positive finite
            values, or all values are equal.
        """
        x = np.asarray(data)
        if not np.issubdtype(x.dtype, np.floating):
            x = x.astype(np.float64)
        if x.ndim != 1:
            raise InvalidSampleError(f"Expected a one-dimensional sample, got shape {x.shape}")
        if x.size == 0:
            raise InvalidSampleError("Cannot fit Pareto distribution to an empty sample")
        if not np.all(np.isfinite(x)):
            raise InvalidSampleError("Sample contains NaN or infinite values")
        if np.any(x <= 0):
            raise InvalidSampleError("Pareto sample values must be positive")

        theta = x.min()
        total = np.sum(np.log(x) - np.log(theta))
        if total == 0:
            raise InvalidSampleError(
                "Cannot estimate Pareto shape: all sample values are equal"
            )
        alpha = x.size / total
        return _ShapeScale(shape=alpha, scale=theta)  # type: ignore[call-arg]

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shape_scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.LOGSF: logsf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=ParametricSamplingUnivariateStrategy(_draw),
        support_by_parametrization=_support,
        fitter=_fit_mle,
    )
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="shape_scale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of Pareto distribution.

        Both values are promoted to a common floating type.

        Parameters
        ----------
        shape : float
            Tail index α
        scale : float
            Minimum value θ
        """

        shape: float
        scale: float

        def __post_init__(self) -> None:
            shape, scale = promote_to_float(self.shape, self.scale)
            object.__setattr__(self, "shape", shape)
            object.__setattr__(self, "scale", scale)

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(Pareto)
