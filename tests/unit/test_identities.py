"""Unit tests for the numerical self-consistency diagnostics."""

import pytest
from src.diagnostics.identities import (
    REFERENCE_FUNCTIONS,
    check_against_reference,
    check_functional_equation,
    check_gamma_minimum,
    check_incomplete_gamma_sum,
    check_reflection,
)


def test_gamma_minimum_constants():
    """The hard-coded minimum of gamma and the igamma constant hold."""
    result = check_gamma_minimum()
    assert result.is_valid, result.violations
    assert result.details == {"location": True, "value": True, "igamma_constant": True}


def test_gamma_minimum_strict_tolerance_fails():
    """The constants are rounded to six decimals, so 1e-9 is too strict."""
    result = check_gamma_minimum(tolerance=1e-9)
    assert not result.is_valid
    assert not result.details["value"]


@pytest.mark.parametrize("x", [0.1, 0.3, 0.75, -1.5])
def test_reflection(x):
    """Γ(x)·Γ(1-x) = π / sin(πx)."""
    assert check_reflection(x).is_valid


@pytest.mark.parametrize("x", [0.5, 1.7, 3.0, 12.25])
def test_functional_equation(x):
    """Gamma and digamma recurrences hold."""
    result = check_functional_equation(x)
    assert result.is_valid, result.violations
    assert result.details["digamma_recurrence"]


def test_functional_equation_negative_skips_digamma():
    """For negative x only the gamma recurrence is checked."""
    result = check_functional_equation(-0.5)
    assert result.is_valid
    assert "digamma_recurrence" not in result.details


def test_incomplete_gamma_sum():
    """γ + Γ(s, x) = Γ(s)."""
    assert check_incomplete_gamma_sum(3.0, 2.0).is_valid
    assert check_incomplete_gamma_sum(2.5, 6.0).is_valid


@pytest.mark.parametrize(
    "name, args",
    [
        ("erf", (0.7,)),
        ("gamma", (4.5,)),
        ("gammaln", (30.0,)),
        ("digamma", (2.5,)),
        ("lower_gamma", (3.0, 2.0)),
        ("upper_gamma", (2.5, 6.0)),
        ("beta", (2.5, 3.5)),
        ("regularized_incomplete_beta", (2.0, 3.0, 0.4)),
        ("lambert", (5.0,)),
    ],
)
def test_against_reference(name, args):
    """Every registered function agrees with scipy.special."""
    result = check_against_reference(name, *args)
    assert result.is_valid, result.violations


def test_reference_registry_complete():
    """The registry covers the forward functions."""
    assert {"erf", "gamma", "gammaln", "digamma", "beta", "lambert"} <= set(REFERENCE_FUNCTIONS)


def test_against_reference_reports_violation():
    """A zero tolerance exposes the approximation error as a violation."""
    result = check_against_reference("gammaln", 0.3, tolerance=0.0)
    assert not result.is_valid
    assert "scipy gives" in result.violations[0]


def test_against_reference_unknown_function():
    """Unknown names raise."""
    with pytest.raises(ValueError, match="Unknown function"):
        check_against_reference("bessel", 1.0)
