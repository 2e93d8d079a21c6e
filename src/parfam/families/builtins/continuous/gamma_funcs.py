"""
Gamma distribution evaluation functions.

Free functions parameterised by ``(shape, scale)`` that evaluate the Gamma
density/CDF family through :data:`scipy.stats.gamma`. Families whose
distributions are Gamma distributions with restricted parameters (Erlang)
delegate to these functions with their own parameters.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy import stats

from parfam.families.builtins.continuous.common import check_probability

if TYPE_CHECKING:
    import numpy.typing as npt

    from parfam.types import NumericArray


def gamma_pdf(shape: float, scale: float, x: npt.ArrayLike) -> NumericArray:
    """Density of Gamma(shape, scale) at ``x``."""
    return np.asarray(stats.gamma.pdf(x, shape, scale=scale))


def gamma_logpdf(shape: float, scale: float, x: npt.ArrayLike) -> NumericArray:
    """Log-density of Gamma(shape, scale) at ``x``; ``-inf`` outside ``[0, inf)``."""
    return np.asarray(stats.gamma.logpdf(x, shape, scale=scale))


def gamma_cdf(shape: float, scale: float, x: npt.ArrayLike) -> NumericArray:
    """Regularized lower incomplete gamma ``P(shape, x / scale)``."""
    return np.asarray(stats.gamma.cdf(x, shape, scale=scale))


def gamma_ccdf(shape: float, scale: float, x: npt.ArrayLike) -> NumericArray:
    """Regularized upper incomplete gamma ``Q(shape, x / scale)``."""
    return np.asarray(stats.gamma.sf(x, shape, scale=scale))


def gamma_logcdf(shape: float, scale: float, x: npt.ArrayLike) -> NumericArray:
    return np.asarray(stats.gamma.logcdf(x, shape, scale=scale))


def gamma_logccdf(shape: float, scale: float, x: npt.ArrayLike) -> NumericArray:
    return np.asarray(stats.gamma.logsf(x, shape, scale=scale))


def gamma_quantile(shape: float, scale: float, p: npt.ArrayLike) -> NumericArray:
    """
    Inverse CDF of Gamma(shape, scale).

    Raises
    ------
    ValueError
        If probability is outside [0, 1]
    """
    return np.asarray(stats.gamma.ppf(check_probability(p), shape, scale=scale))


def gamma_cquantile(shape: float, scale: float, p: npt.ArrayLike) -> NumericArray:
    """
    Inverse complementary CDF of Gamma(shape, scale).

    Raises
    ------
    ValueError
        If probability is outside [0, 1]
    """
    return np.asarray(stats.gamma.isf(check_probability(p), shape, scale=scale))


def gamma_rand(
    shape: float, scale: float, n: int, rng: np.random.Generator
) -> npt.NDArray[np.float64]:
    """Draw ``n`` Gamma(shape, scale) variates."""
    return rng.gamma(shape, scale, size=n)
