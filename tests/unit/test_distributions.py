"""Unit tests for the distribution helpers."""

import pytest
import math
from scipy import stats

from src.core.distributions import (
    beta_cdf,
    beta_pdf,
    gamma_cdf,
    gamma_pdf,
    normal_cdf,
    normal_pdf,
)


def test_normal_cdf_median():
    """Φ(0) = 0.5."""
    assert normal_cdf(0.0) == 0.5


@pytest.mark.parametrize("x", [-3.0, -1.0, 0.5, 1.96, 4.0])
def test_normal_cdf_accuracy(x):
    """Φ inherits the erf error bound, halved."""
    assert abs(normal_cdf(x) - stats.norm.cdf(x)) < 1e-7


def test_normal_cdf_clamped_tails():
    """Beyond ±8 standard deviations the CDF is 0 or 1."""
    assert normal_cdf(10.0) == 1.0
    assert normal_cdf(-10.0) == 0.0


def test_normal_pdf():
    """Peak value and negligible tails."""
    assert abs(normal_pdf(0.0) - 1.0 / math.sqrt(2.0 * math.pi)) < 1e-15
    assert normal_pdf(15.0) == 0.0


@pytest.mark.parametrize("x, shape, scale", [(1.0, 2.0, 1.0), (3.5, 4.5, 0.8), (0.2, 0.5, 2.0)])
def test_gamma_distribution(x, shape, scale):
    """Gamma density and CDF agree with scipy.stats."""
    assert gamma_pdf(x, shape, scale) == pytest.approx(stats.gamma.pdf(x, shape, scale=scale), rel=1e-8)
    assert gamma_cdf(x, shape, scale) == pytest.approx(stats.gamma.cdf(x, shape, scale=scale), abs=1e-8)


def test_gamma_distribution_edges():
    """Negative support and invalid parameters."""
    assert gamma_pdf(-1.0, 2.0) == 0.0
    assert gamma_cdf(-1.0, 2.0) == 0.0
    assert gamma_pdf(0.0, 1.0, 2.0) == 0.5
    assert math.isnan(gamma_pdf(1.0, 0.0))
    assert math.isnan(gamma_cdf(1.0, 2.0, -1.0))


@pytest.mark.parametrize("x, a, b", [(0.4, 2.0, 3.0), (0.2, 0.5, 0.5), (0.9, 5.0, 1.5)])
def test_beta_distribution(x, a, b):
    """Beta density and CDF agree with scipy.stats."""
    assert beta_pdf(x, a, b) == pytest.approx(stats.beta.pdf(x, a, b), rel=1e-8)
    assert beta_cdf(x, a, b) == pytest.approx(stats.beta.cdf(x, a, b), abs=1e-6)


def test_beta_distribution_edges():
    """Support boundaries and invalid parameters."""
    assert beta_pdf(1.5, 2.0, 2.0) == 0.0
    assert beta_pdf(0.0, 2.0, 2.0) == 0.0
    assert beta_pdf(0.0, 0.5, 2.0) == math.inf
    assert beta_pdf(0.0, 1.0, 3.0) == pytest.approx(3.0, rel=1e-8)
    assert beta_cdf(-0.2, 2.0, 2.0) == 0.0
    assert beta_cdf(1.2, 2.0, 2.0) == 1.0
    assert math.isnan(beta_pdf(0.5, -1.0, 2.0))
