"""
Unit tests for gamma, log-gamma, digamma and inverse gamma.

This module validates:
1. Known values (factorials, Γ(1/2) = √π)
2. Functional equation and reflection formula
3. Poles, overflow and domain handling
4. Inverse gamma on both branches
"""

import pytest
import math
from scipy import special

from src.core.gamma import digamma, gamma, gammaln, igamma
from src.utils.constants import GAMMA_MIN_VALUE, GAMMA_MIN_X, IGAMMA_C, SQRT_TWO_PI


# ===========================
# Gamma Tests
# ===========================


def test_gamma_one():
    """Γ(1) = 0! = 1."""
    assert abs(gamma(1.0) - 1.0) < 1e-6


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 10])
def test_gamma_factorial(n):
    """Γ(n+1) = n! for small integers."""
    assert abs(gamma(n + 1.0) - math.factorial(n)) / math.factorial(n) < 1e-6


def test_gamma_five():
    """Γ(5) = 4! = 24."""
    assert abs(gamma(5.0) - 24.0) < 1e-6


def test_gamma_half():
    """Γ(1/2) = √π."""
    assert abs(gamma(0.5) - math.sqrt(math.pi)) < 1e-12


@pytest.mark.parametrize("x", [0.5, 0.75, 1.3, 2.5, 7.1, 20.0, 50.5])
def test_gamma_functional_equation(x):
    """Γ(x+1) = x·Γ(x) within 1e-6 relative error."""
    assert abs(gamma(x + 1.0) - x * gamma(x)) / abs(x * gamma(x)) < 1e-6


@pytest.mark.parametrize("x", [0.1, 0.3, -0.5, -1.5, -2.7])
def test_gamma_reflection_region(x):
    """Arguments below 0.5 go through the reflection formula."""
    assert gamma(x) == pytest.approx(special.gamma(x), rel=1e-10)


@pytest.mark.parametrize("x", [0.0, -1.0, -2.0, -10.0])
def test_gamma_poles(x):
    """Non-positive integers are poles and return NaN."""
    assert math.isnan(gamma(x))


def test_gamma_overflow():
    """Beyond x ≈ 171.62 gamma overflows to inf instead of raising."""
    assert gamma(171.0) == pytest.approx(math.factorial(170), rel=1e-10)
    assert gamma(200.0) == math.inf


def test_gamma_nan():
    """NaN propagates."""
    assert math.isnan(gamma(math.nan))


# ===========================
# Log-Gamma Tests
# ===========================


def test_gammaln_five():
    """ln Γ(5) = ln 24 ≈ 3.17805."""
    assert abs(gammaln(5.0) - math.log(24.0)) < 1e-8
    assert abs(gammaln(5.0) - 3.17805) < 1e-5


@pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 3.7, 100.0, 1e4, 1e8])
def test_gammaln_against_reference(x):
    """gammaln agrees with scipy across many orders of magnitude."""
    assert gammaln(x) == pytest.approx(special.gammaln(x), rel=1e-9, abs=1e-9)


def test_gammaln_beyond_gamma_overflow():
    """gammaln stays finite where gamma overflows."""
    assert gamma(500.0) == math.inf
    assert math.isfinite(gammaln(500.0))


@pytest.mark.parametrize("x", [0.0, -1.0, -0.5])
def test_gammaln_non_positive(x):
    """gammaln is only defined for positive x."""
    assert math.isnan(gammaln(x))


# ===========================
# Digamma Tests
# ===========================


def test_digamma_one():
    """ψ(1) = -γ (Euler-Mascheroni)."""
    assert abs(digamma(1.0) + 0.5772156649) < 1e-8


@pytest.mark.parametrize("x", [0.001, 0.25, 1.0, 2.5, 8.5, 9.0, 40.0])
def test_digamma_against_reference(x):
    """digamma agrees with scipy on both sides of the asymptotic threshold."""
    assert digamma(x) == pytest.approx(special.digamma(x), rel=1e-8, abs=1e-8)


def test_digamma_small_argument():
    """Below 1e-5 the singular form -γ - 1/x is used."""
    x = 1e-6
    assert digamma(x) == -0.5772156649 - 1.0 / x


def test_digamma_recurrence():
    """ψ(x+1) = ψ(x) + 1/x."""
    x = 3.3
    assert abs(digamma(x + 1.0) - digamma(x) - 1.0 / x) < 1e-9


@pytest.mark.parametrize("x", [0.0, -1.0, -3.5])
def test_digamma_non_positive(x):
    """digamma returns NaN for x <= 0."""
    assert math.isnan(digamma(x))


# ===========================
# Inverse Gamma Tests
# ===========================


@pytest.mark.parametrize("x", [3.0, 4.0, 5.0, 6.0, 10.0])
def test_igamma_principal_large(x):
    """The principal branch is accurate for arguments well above the minimum."""
    assert abs(igamma(gamma(x)) - x) < 0.05


def test_igamma_principal_one():
    """Γ(2) = 1 on the principal branch."""
    assert abs(igamma(1.0) - 2.0) < 0.05


def test_igamma_secondary_one():
    """Γ(1) = 1 on the secondary branch, a rougher approximation."""
    assert abs(igamma(1.0, principal=False) - 1.0) < 0.1


def test_igamma_branches_straddle_minimum():
    """Principal results lie above the minimum of gamma, secondary below."""
    assert igamma(2.0) > 1.461632
    assert igamma(2.0, principal=False) < 1.461632


@pytest.mark.parametrize("x", [0.5, 0.8856, -1.0])
def test_igamma_below_minimum(x):
    """No real argument gives gamma below ≈ 0.885603."""
    assert math.isnan(igamma(x))


def test_igamma_at_minimum_value():
    """The rounded minimum of gamma is inside the domain on both branches."""
    for principal in (True, False):
        result = igamma(GAMMA_MIN_VALUE, principal=principal)
        assert abs(result - GAMMA_MIN_X) < 0.1


def test_igamma_secondary_at_log_zero():
    """Where ln((x + c)/√(2π)) = 0 the secondary branch stays below the minimum."""
    x = SQRT_TWO_PI - IGAMMA_C
    assert igamma(x) == math.e + 0.5
    assert igamma(x, principal=False) == 0.5
    assert igamma(x, principal=False) < GAMMA_MIN_X
