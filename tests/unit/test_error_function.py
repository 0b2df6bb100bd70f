"""
Unit tests for the error function and its inverse.

This module validates:
1. Odd symmetry and the value at zero
2. Accuracy against scipy.special.erf (documented bound 1.5e-7)
3. Limits and domain handling of the inverse
"""

import pytest
import math
from scipy import special

from src.core.error_function import erf, erfc, ierf


# ===========================
# Forward Function Tests
# ===========================


def test_erf_zero():
    """erf(0) is exactly zero."""
    assert erf(0.0) == 0.0


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.3, 4.0, 10.0])
def test_erf_odd_symmetry(x):
    """erf(-x) == -erf(x) exactly."""
    assert erf(-x) == -erf(x)


@pytest.mark.parametrize("x", [-3.0, -1.0, -0.2, 0.01, 0.3, 0.8, 1.5, 2.5, 5.0])
def test_erf_accuracy(x):
    """Absolute error stays within the Abramowitz & Stegun bound (1.5e-7)."""
    assert abs(erf(x) - special.erf(x)) < 2e-7


def test_erf_tails():
    """erf saturates at ±1."""
    assert erf(30.0) == 1.0
    assert erf(-30.0) == -1.0


def test_erf_nan():
    """NaN propagates."""
    assert math.isnan(erf(math.nan))


def test_erfc_complement():
    """erfc(x) = 1 - erf(x)."""
    assert abs(erfc(0.5) + erf(0.5) - 1.0) < 1e-15


# ===========================
# Inverse Function Tests
# ===========================


def test_ierf_zero():
    """ierf(0) is zero."""
    assert ierf(0.0) == 0.0


@pytest.mark.parametrize("x", [0.05, 0.2, 0.5])
def test_ierf_roundtrip_near_origin(x):
    """The truncated series inverts erf well near the origin."""
    assert abs(ierf(erf(x)) - x) < 1e-3


def test_ierf_odd_symmetry():
    """ierf is odd."""
    assert ierf(-0.4) == -ierf(0.4)


def test_ierf_limits():
    """ierf(±1) is ±inf."""
    assert ierf(1.0) == math.inf
    assert ierf(-1.0) == -math.inf


@pytest.mark.parametrize("x", [1.5, -1.0001, math.nan])
def test_ierf_out_of_domain(x):
    """Arguments outside [-1, 1] return NaN."""
    assert math.isnan(ierf(x))
