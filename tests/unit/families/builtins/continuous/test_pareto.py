"""
Tests for Pareto Distribution Family

This module tests the functionality of the Pareto distribution family,
including characteristics, sampling and maximum-likelihood fitting.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from parfam import Pareto, fit_mle
from parfam.distributions.support import ContinuousSupport
from parfam.errors import (
    CharacteristicNotFoundError,
    InvalidParameterError,
    InvalidSampleError,
)
from parfam.types import ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestParetoFamily(BaseDistributionTest):
    """Test suite for Pareto distribution family."""

    @pytest.fixture
    def pareto(self):
        return Pareto(3.0, 2.0)

    def test_family_properties(self):
        family = self.family(FamilyName.PARETO)
        assert family.name == FamilyName.PARETO
        assert family.parametrization_names == ["shape_scale"]

    def test_defaults_and_promotion(self):
        assert Pareto().params == (1.0, 1.0)
        assert Pareto(2.5).params == (2.5, 1.0)

        dist = Pareto(3, 2)
        assert isinstance(dist.shape, np.float64)
        assert isinstance(dist.scale, np.float64)

    def test_single_precision(self):
        dist = Pareto(np.float32(3.0), np.float32(2.0))
        assert dist.shape.dtype == np.float32
        assert dist.mean().dtype == np.float32
        assert dist.quantile(0.5).dtype == np.float32
        for method in (dist.pdf, dist.logpdf, dist.cdf, dist.ccdf, dist.logcdf, dist.logccdf):
            assert method(4.0).dtype == np.float32
            assert method(np.array([1.0, 4.0])).dtype == np.float32
        assert float(dist.pdf(4.0)) == pytest.approx(0.09375, rel=1e-6)

        mixed = Pareto(np.float32(3.0), 2)
        assert mixed.scale.dtype == np.float32

    @pytest.mark.parametrize("shape, scale", [(0.1, 1.0), (1.0, 0.01), (40.0, 7.0)])
    def test_valid_parameters(self, shape, scale):
        assert Pareto(shape, scale).params == (shape, scale)

    @pytest.mark.parametrize(
        "shape, scale, message",
        [
            (0.0, 1.0, "shape > 0"),
            (2.0, 0.0, "scale > 0"),
            (-1.0, 1.0, "shape > 0"),
            (1.0, -3.0, "scale > 0"),
            (float("nan"), 1.0, "shape > 0"),
        ],
    )
    def test_invalid_parameters(self, shape, scale, message):
        with pytest.raises(InvalidParameterError, match=message):
            Pareto(shape, scale)

    @pytest.mark.parametrize(
        "shape, scale",
        [("2", "1"), ("abc", 1.0), ([1.0, 2.0], 1.0), (True, 1.0), (2.0, 1 + 0j), (2.0, None)],
    )
    def test_non_real_parameters_rejected(self, shape, scale):
        with pytest.raises(InvalidParameterError, match="Expected a real number"):
            Pareto(shape, scale)

    def test_concrete_scenario(self, pareto):
        assert pareto.mean() == pytest.approx(3.0)
        assert pareto.median() == pytest.approx(2 * 2 ** (1 / 3))
        assert pareto.median() == pytest.approx(2.5198, abs=1e-4)
        assert pareto.pdf(4.0) == pytest.approx(0.09375)
        assert pareto.mode() == 2.0
        assert repr(pareto) == "Pareto(shape=3.0, scale=2.0)"

    def test_moment_thresholds(self):
        assert np.isfinite(Pareto(2, 1).mean())
        assert Pareto(2, 1).mean() == pytest.approx(2.0)
        assert Pareto(0.5, 1).mean() == np.inf
        assert Pareto(1, 1).mean() == np.inf

        assert Pareto(1, 1).var() == np.inf
        assert Pareto(2, 1).var() == np.inf
        assert Pareto(2.5, 1).var() == pytest.approx(2.5 / (1.5**2 * 0.5))

        assert np.isnan(Pareto(3, 1).skewness())
        assert np.isnan(Pareto(4, 1).kurtosis())
        assert np.isnan(Pareto(4, 1).kurtosis(excess=False))

    def test_higher_moments_match_scipy(self):
        dist = Pareto(6.0, 1.5)
        _, _, skew, kurt = stats.pareto.stats(6.0, scale=1.5, moments="mvsk")
        assert dist.skewness() == pytest.approx(float(skew))
        assert dist.kurtosis() == pytest.approx(float(kurt))
        assert dist.kurtosis(excess=False) == pytest.approx(float(kurt) + 3)
        assert dist.var() == pytest.approx(stats.pareto.var(6.0, scale=1.5))

    def test_entropy_matches_scipy(self, pareto):
        assert pareto.entropy() == pytest.approx(stats.pareto.entropy(3.0, scale=2.0))

    def test_evaluation_matches_scipy(self, pareto):
        x = np.array([0.5, 2.0, 2.5, 4.0, 10.0, 1e6])
        ref = stats.pareto(b=3.0, scale=2.0)

        self.assert_arrays_almost_equal(pareto.pdf(x), ref.pdf(x))
        self.assert_arrays_almost_equal(pareto.cdf(x), ref.cdf(x))
        self.assert_arrays_almost_equal(pareto.ccdf(x), ref.sf(x))
        self.assert_arrays_almost_equal(pareto.logpdf(x[1:]), ref.logpdf(x[1:]))
        self.assert_arrays_almost_equal(pareto.logccdf(x[1:]), ref.logsf(x[1:]))
        self.assert_arrays_almost_equal(pareto.logcdf(x[2:]), ref.logcdf(x[2:]))

    def test_cdf_and_ccdf_sum_to_one(self, pareto):
        x = np.linspace(-5.0, 50.0, 221)
        self.assert_arrays_almost_equal(pareto.cdf(x) + pareto.ccdf(x), np.ones_like(x))

    def test_quantile_inverts_cdf(self, pareto):
        x = np.array([2.0, 2.1, 3.0, 7.5, 40.0])
        self.assert_arrays_almost_equal(pareto.quantile(pareto.cdf(x)), x, precision=1e-8)
        self.assert_arrays_almost_equal(pareto.cquantile(pareto.ccdf(x)), x, precision=1e-8)

    def test_below_support(self, pareto):
        x = np.array([-1.0, 0.0, 1.0, 1.999])
        np.testing.assert_array_equal(pareto.pdf(x), 0.0)
        np.testing.assert_array_equal(pareto.cdf(x), 0.0)
        np.testing.assert_array_equal(pareto.ccdf(x), 1.0)
        np.testing.assert_array_equal(pareto.logpdf(x), -np.inf)
        np.testing.assert_array_equal(pareto.logcdf(x), -np.inf)
        np.testing.assert_array_equal(pareto.logccdf(x), 0.0)

    def test_at_scale(self, pareto):
        assert pareto.ccdf(2.0) == 1.0
        assert pareto.cdf(2.0) == 0.0
        assert pareto.pdf(2.0) == pytest.approx(1.5)

    def test_quantile_endpoints(self, pareto):
        assert pareto.quantile(0.0) == 2.0
        assert pareto.quantile(1.0) == np.inf
        assert pareto.cquantile(1.0) == 2.0
        assert pareto.cquantile(0.0) == np.inf

    @pytest.mark.parametrize("p", [-0.5, 1.01, float("nan")])
    def test_quantile_rejects_invalid_probability(self, pareto, p):
        with pytest.raises(ValueError, match=r"Probability must be in \[0, 1\]"):
            pareto.quantile(p)
        with pytest.raises(ValueError, match=r"Probability must be in \[0, 1\]"):
            pareto.cquantile(p)

    def test_support(self, pareto):
        support = pareto.support
        assert isinstance(support, ContinuousSupport)
        assert support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert pareto.minimum == 2.0
        assert pareto.maximum == np.inf
        assert pareto.insupport(2.0) is True
        assert pareto.insupport(1.5) is False

    def test_no_generating_functions(self, pareto):
        with pytest.raises(CharacteristicNotFoundError):
            pareto.mgf(0.1)
        with pytest.raises(CharacteristicNotFoundError):
            pareto.cf(0.1)

    def test_sampling(self, pareto, rng):
        draws = pareto.rand(50_000, rng=rng)
        assert draws.shape == (50_000,)
        assert (draws >= 2.0).all()
        # Var = 3 for Pareto(3, 2)
        self.assert_mean_close(draws, 3.0, math.sqrt(3.0))

    def test_log_likelihood(self, pareto):
        data = np.array([2.0, 3.0, 4.0])
        assert pareto.log_likelihood(data) == pytest.approx(float(np.sum(pareto.logpdf(data))))
        assert pareto.log_likelihood([1.0, 3.0]) == -np.inf


class TestParetoFit(BaseDistributionTest):
    """Maximum-likelihood fitting of Pareto distribution."""

    def test_concrete_sample(self):
        data = [2.0, 3.0, 4.0, 5.0]
        fitted = fit_mle("Pareto", data)

        expected_alpha = 4 / (math.log(1.0) + math.log(1.5) + math.log(2.0) + math.log(2.5))
        assert fitted.scale == 2.0
        assert fitted.shape == pytest.approx(expected_alpha)
        assert fitted.shape == pytest.approx(1.98521, abs=1e-5)

    def test_family_fit_and_integer_input(self):
        family = self.family(FamilyName.PARETO)
        fitted = family.fit_mle(np.array([2, 3, 4, 5]))
        assert fitted.scale == 2.0
        assert fitted.shape == pytest.approx(1.98521, abs=1e-5)
        assert fit_mle(family, [2, 3, 4, 5]) == fitted

    def test_fit_matches_scipy(self, rng):
        data = Pareto(2.5, 1.5).rand(500, rng=rng)
        fitted = fit_mle("Pareto", data)
        b, _, scale = stats.pareto.fit(data, floc=0, method="MLE")
        assert fitted.scale == pytest.approx(scale, rel=1e-6)
        assert fitted.shape == pytest.approx(b, rel=1e-3)

    def test_refit_is_consistent(self, rng):
        truth = Pareto(3.0, 2.0)
        errors = []
        for n in (100, 100_000):
            fitted = fit_mle("Pareto", truth.rand(n, rng=rng))
            errors.append(abs(float(fitted.shape) - 3.0))
            assert fitted.scale >= 2.0
        # Standard error of the shape estimate is about 3 / sqrt(n)
        assert errors[1] < 5 * 3.0 / math.sqrt(100_000)

    @pytest.mark.parametrize(
        "data, message",
        [
            ([], "empty"),
            ([1.0, float("nan")], "NaN or infinite"),
            ([1.0, float("inf")], "NaN or infinite"),
            ([1.0, 0.0, 2.0], "positive"),
            ([2.0, -3.0], "positive"),
            ([[1.0, 2.0], [3.0, 4.0]], "one-dimensional"),
            ([4.0, 4.0, 4.0], "all sample values are equal"),
        ],
    )
    def test_degenerate_samples(self, data, message):
        with pytest.raises(InvalidSampleError, match=message):
            fit_mle("Pareto", data)

    def test_invalid_sample_is_value_error(self):
        with pytest.raises(ValueError):
            fit_mle("Pareto", [])
