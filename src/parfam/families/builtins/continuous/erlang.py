"""
Erlang distribution family implementation.

Contains the Erlang family with shape-scale and shape-rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numbers
import warnings
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import digamma, gammaln

from parfam.distributions.strategies import ParametricSamplingUnivariateStrategy
from parfam.distributions.support import ContinuousSupport
from parfam.errors import UndefinedOperationError
from parfam.families.builtins.continuous.common import as_dtype
from parfam.families.builtins.continuous.gamma_funcs import (
    gamma_ccdf,
    gamma_cdf,
    gamma_cquantile,
    gamma_logccdf,
    gamma_logcdf,
    gamma_logpdf,
    gamma_pdf,
    gamma_quantile,
    gamma_rand,
)
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
    ComplexArray,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def _normalize_shape(shape: Any) -> Any:
    """Store integral shape values as ``int``; anything else is left for validation."""
    if isinstance(shape, bool | np.bool_):
        return shape
    if isinstance(shape, numbers.Integral):
        return int(shape)
    if isinstance(shape, numbers.Real) and float(shape).is_integer():
        return int(shape)
    return shape


def _is_non_negative_integer(shape: Any) -> bool:
    return isinstance(shape, int) and not isinstance(shape, bool) and shape >= 0


def configure_erlang_family() -> None:
    """
    Configure and register the Erlang distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.ERLANG):
        return

    ERLANG_DOC = """
    Erlang distribution.

    The Erlang distribution is the Gamma distribution restricted to a
    non-negative integer shape k. It describes the waiting time until the k-th
    event of a Poisson process with rate λ = 1/θ.

    Probability density function (shape-scale parametrization):
        f(x) = x^(k-1) * exp(-x/θ) / (θ^k * (k-1)!) for x ≥ 0

    Density, distribution and quantile functions are those of Gamma(k, θ).
    """

    def _params(parameters: Parametrization) -> tuple[int, np.floating[Any]]:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape, parameters.scale

    def _dtype(parameters: Parametrization) -> np.dtype[Any]:
        return np.asarray(cast(_ShapeScale, parameters).scale).dtype

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Erlang distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: int (number of phases k)
            - scale: float (θ)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        alpha, theta = _params(parameters)
        return as_dtype(gamma_pdf(alpha, theta, x), _dtype(parameters))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density for Erlang distribution; ``-inf`` for x < 0."""
        alpha, theta = _params(parameters)
        return as_dtype(gamma_logpdf(alpha, theta, x), _dtype(parameters))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function P(X ≤ x) for Erlang distribution."""
        alpha, theta = _params(parameters)
        return as_dtype(gamma_cdf(alpha, theta, x), _dtype(parameters))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        alpha, theta = _params(parameters)
        return as_dtype(gamma_ccdf(alpha, theta, x), _dtype(parameters))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        alpha, theta = _params(parameters)
        return as_dtype(gamma_logcdf(alpha, theta, x), _dtype(parameters))

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        alpha, theta = _params(parameters)
        return as_dtype(gamma_logccdf(alpha, theta, x), _dtype(parameters))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Erlang distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        alpha, theta = _params(parameters)
        return as_dtype(gamma_quantile(alpha, theta, p), _dtype(parameters))

    def isf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Inverse survival function (complementary quantile) for Erlang distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        alpha, theta = _params(parameters)
        return as_dtype(gamma_cquantile(alpha, theta, p), _dtype(parameters))

    def mgf(parameters: Parametrization, t: NumericArray) -> NumericArray:
        """
        Moment generating function (1 - tθ)^(-k).

        Only meaningful for t < 1/θ; the formula is evaluated as is elsewhere.
        """
        alpha, theta = _params(parameters)
        t_arr = np.asarray(t, dtype=_dtype(parameters))
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.power(1 - t_arr * theta, -float(alpha))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        """Characteristic function (1 - itθ)^(-k)."""
        alpha, theta = _params(parameters)
        t_arr = np.asarray(t, dtype=_dtype(parameters))
        return cast(ComplexArray, np.power(1 - 1j * t_arr * theta, -float(alpha)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Erlang distribution, kθ."""
        alpha, theta = _params(parameters)
        return alpha * theta

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Erlang distribution, kθ²."""
        alpha, theta = _params(parameters)
        return alpha * theta**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of Erlang distribution, 2/√k."""
        alpha, _theta = _params(parameters)
        k = _dtype(parameters).type(alpha)
        with np.errstate(divide="ignore"):
            return 2 / np.sqrt(k)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = True) -> float:
        """Excess kurtosis 6/k of Erlang distribution, or raw kurtosis if not ``excess``."""
        alpha, _theta = _params(parameters)
        k = _dtype(parameters).type(alpha)
        with np.errstate(divide="ignore"):
            excess_kurtosis = 6 / k
        return excess_kurtosis if excess else excess_kurtosis + 3

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """
        Mode of Erlang distribution, θ(k - 1).

        Raises
        ------
        UndefinedOperationError
            If shape < 1.
        """
        alpha, theta = _params(parameters)
        if alpha < 1:
            raise UndefinedOperationError("Erlang has no mode when shape < 1")
        return theta * (alpha - 1)

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median of Erlang distribution (no closed form, via the Gamma quantile)."""
        alpha, theta = _params(parameters)
        return as_dtype(gamma_quantile(alpha, theta, 0.5), _dtype(parameters))[()]

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Entropy k + lnΓ(k) + (1 - k)ψ(k) + ln θ."""
        alpha, theta = _params(parameters)
        with np.errstate(divide="ignore", invalid="ignore"):
            value = alpha + gammaln(alpha) + (1 - alpha) * digamma(alpha) + np.log(theta)
        return as_dtype(value, _dtype(parameters))[()]

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Erlang distribution"""
        return ContinuousSupport(left=0.0)

    def _draw(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        alpha, theta = _params(parameters)
        return as_dtype(gamma_rand(alpha, theta, n, rng), _dtype(parameters))

    Erlang = ParametricFamily(
        name=FamilyName.ERLANG,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shape_scale", "shape_rate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.LOGSF: logsf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MGF: mgf,
            CharacteristicName.CF: char_func,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=ParametricSamplingUnivariateStrategy(_draw),
        support_by_parametrization=_support,
    )
    Erlang.__doc__ = ERLANG_DOC

    @parametrization(family=Erlang, name="shape_scale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of Erlang distribution.

        Parameters
        ----------
        shape : int
            Number of phases k (non-negative integer)
        scale : float
            Scale parameter θ; its sign is not checked, but sampling
            requires scale >= 0
        """

        shape: int
        scale: float

        def __post_init__(self) -> None:
            object.__setattr__(self, "shape", _normalize_shape(self.shape))
            (scale,) = promote_to_float(self.scale)
            object.__setattr__(self, "scale", scale)
            if not scale > 0 or not np.isfinite(scale):
                warnings.warn(
                    f"Erlang scale should be a positive finite number, got {scale}",
                    stacklevel=4,
                )

        @property
        def rate(self) -> float:
            """Rate λ = 1/θ."""
            return 1 / self.scale

        @constraint(description="shape is a non-negative integer")
        def check_shape_non_negative_integer(self) -> bool:
            """Check that shape is a non-negative integer."""
            return _is_non_negative_integer(self.shape)

    @parametrization(family=Erlang, name="shape_rate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of Erlang distribution.

        Parameters
        ----------
        shape : int
            Number of phases k (non-negative integer)
        rate : float
            Rate parameter λ = 1/θ
        """

        shape: int
        rate: float

        def __post_init__(self) -> None:
            object.__setattr__(self, "shape", _normalize_shape(self.shape))
            (rate,) = promote_to_float(self.rate)
            object.__setattr__(self, "rate", rate)

        @constraint(description="shape is a non-negative integer")
        def check_shape_non_negative_integer(self) -> bool:
            """Check that shape is a non-negative integer."""
            return _is_non_negative_integer(self.shape)

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale parametrization instance
            """
            return _ShapeScale(shape=self.shape, scale=1 / self.rate)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Erlang)
