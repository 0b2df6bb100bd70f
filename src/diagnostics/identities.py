"""
Numerical self-consistency diagnostics for the special functions.

This module implements checks that the approximations honour the
identities they are built on and agree with an independent reference:
- Location and value of the positive minimum of gamma
- Reflection formula
- Functional equation Γ(x+1) = x·Γ(x)
- Lower plus upper incomplete gamma equals gamma
- Agreement with scipy.special
"""

import math

from scipy import special
from scipy.optimize import minimize_scalar

from src.core.beta import beta, regularized_incomplete_beta
from src.core.error_function import erf
from src.core.gamma import digamma, gamma, gammaln
from src.core.incomplete_gamma import lower_gamma, upper_gamma
from src.core.lambert import lambert
from src.utils.constants import (
    ERF_TOLERANCE,
    GAMMA_MIN_TOLERANCE,
    GAMMA_MIN_VALUE,
    GAMMA_MIN_X,
    IDENTITY_TOLERANCE,
    IGAMMA_C,
    REFERENCE_TOLERANCE,
    SQRT_TWO_PI,
)
from src.utils.types import DiagnosticCheck

# name -> (our implementation, scipy.special reference)
REFERENCE_FUNCTIONS = {
    "erf": (erf, special.erf),
    "gamma": (gamma, special.gamma),
    "gammaln": (gammaln, special.gammaln),
    "digamma": (digamma, special.digamma),
    "lower_gamma": (lower_gamma, lambda s, x: special.gammainc(s, x) * special.gamma(s)),
    "upper_gamma": (upper_gamma, lambda s, x: special.gammaincc(s, x) * special.gamma(s)),
    "beta": (beta, special.beta),
    "regularized_incomplete_beta": (regularized_incomplete_beta, special.betainc),
    "lambert": (lambert, lambda x: special.lambertw(x).real),
}


def _relative_error(value: float, reference: float) -> float:
    return abs(value - reference) / max(abs(reference), 1.0)


def check_gamma_minimum(tolerance: float = GAMMA_MIN_TOLERANCE) -> DiagnosticCheck:
    """
    Validate the hard-coded minimum of gamma used by igamma.

    The minimum of Γ on [1, 2] is located with a bounded scalar
    minimization and compared with GAMMA_MIN_X, GAMMA_MIN_VALUE and the
    constant c = √(2π)/e - Γ(x_min).

    Args:
        tolerance: Absolute tolerance for each comparison

    Returns:
        DiagnosticCheck with validation results
    """
    violations = []
    details = {}

    found = minimize_scalar(gamma, bounds=(1.0, 2.0), method="bounded", options={"xatol": 1e-10})
    x_min = float(found.x)
    value_min = float(found.fun)

    # The minimum is flat, so its location is only resolved to ~sqrt(eps)
    location_ok = abs(x_min - GAMMA_MIN_X) < math.sqrt(tolerance)
    details["location"] = location_ok
    if not location_ok:
        violations.append(f"Minimum located at x={x_min:.6f}, expected {GAMMA_MIN_X}")

    value_ok = abs(value_min - GAMMA_MIN_VALUE) < tolerance
    details["value"] = value_ok
    if not value_ok:
        violations.append(f"Minimum value {value_min:.6f}, expected {GAMMA_MIN_VALUE}")

    c = SQRT_TWO_PI / math.e - value_min
    c_ok = abs(c - IGAMMA_C) < tolerance
    details["igamma_constant"] = c_ok
    if not c_ok:
        violations.append(f"igamma constant c={c:.6f}, expected {IGAMMA_C}")

    return DiagnosticCheck(is_valid=len(violations) == 0, violations=violations, details=details)


def check_reflection(x: float, tolerance: float = IDENTITY_TOLERANCE) -> DiagnosticCheck:
    """
    Validate Γ(x)·Γ(1-x) = π / sin(πx) for non-integer x.

    Args:
        x: Non-integer argument
        tolerance: Relative tolerance

    Returns:
        DiagnosticCheck with validation results
    """
    violations = []
    details = {}

    product = gamma(x) * gamma(1.0 - x)
    expected = math.pi / math.sin(math.pi * x)
    ok = _relative_error(product, expected) < tolerance
    details["reflection"] = ok
    if not ok:
        violations.append(f"Γ({x})·Γ({1.0 - x}) = {product:.10g}, expected {expected:.10g}")

    return DiagnosticCheck(is_valid=ok, violations=violations, details=details)


def check_functional_equation(x: float, tolerance: float = IDENTITY_TOLERANCE) -> DiagnosticCheck:
    """
    Validate Γ(x+1) = x·Γ(x) and ψ(x+1) = ψ(x) + 1/x.

    The digamma recurrence is only checked for positive x.
    """
    violations = []
    details = {}

    lhs = gamma(x + 1.0)
    rhs = x * gamma(x)
    gamma_ok = _relative_error(lhs, rhs) < tolerance
    details["gamma_recurrence"] = gamma_ok
    if not gamma_ok:
        violations.append(f"Γ({x + 1.0}) = {lhs:.10g}, but {x}·Γ({x}) = {rhs:.10g}")

    if x > 0:
        lhs = digamma(x + 1.0)
        rhs = digamma(x) + 1.0 / x
        digamma_ok = _relative_error(lhs, rhs) < tolerance
        details["digamma_recurrence"] = digamma_ok
        if not digamma_ok:
            violations.append(f"ψ({x + 1.0}) = {lhs:.10g}, but ψ({x}) + 1/{x} = {rhs:.10g}")

    return DiagnosticCheck(is_valid=len(violations) == 0, violations=violations, details=details)


def check_incomplete_gamma_sum(s: float, x: float, tolerance: float = IDENTITY_TOLERANCE) -> DiagnosticCheck:
    """
    Validate γ(s, x) + Γ(s, x) = Γ(s) and 0 <= γ(s, x) <= Γ(s).
    """
    violations = []
    details = {}

    lower = lower_gamma(s, x)
    upper = upper_gamma(s, x)
    total = gamma(s)

    sum_ok = _relative_error(lower + upper, total) < tolerance
    details["sum"] = sum_ok
    if not sum_ok:
        violations.append(f"γ({s}, {x}) + Γ({s}, {x}) = {lower + upper:.10g}, expected {total:.10g}")

    bounds_ok = -tolerance <= lower <= total * (1.0 + tolerance)
    details["bounds"] = bounds_ok
    if not bounds_ok:
        violations.append(f"γ({s}, {x}) = {lower:.10g} outside [0, {total:.10g}]")

    return DiagnosticCheck(is_valid=len(violations) == 0, violations=violations, details=details)


def check_against_reference(name: str, *args: float, tolerance: float = REFERENCE_TOLERANCE) -> DiagnosticCheck:
    """
    Compare one of the special functions against scipy.special.

    erf is compared with an absolute tolerance (its documented error
    bound is 1.5e-7); everything else with a relative tolerance.

    Args:
        name: Key of REFERENCE_FUNCTIONS
        *args: Arguments to the function
        tolerance: Relative tolerance

    Returns:
        DiagnosticCheck with validation results

    Raises:
        ValueError: If name is not a known function
    """
    if name not in REFERENCE_FUNCTIONS:
        raise ValueError(f"Unknown function {name!r}, expected one of {sorted(REFERENCE_FUNCTIONS)}")

    ours, reference = REFERENCE_FUNCTIONS[name]
    value = ours(*args)
    expected = float(reference(*args))

    if name == "erf":
        ok = abs(value - expected) <= ERF_TOLERANCE
    elif math.isnan(expected):
        ok = math.isnan(value)
    elif math.isinf(expected):
        ok = value == expected
    else:
        ok = _relative_error(value, expected) < tolerance

    args_text = ", ".join(f"{arg:g}" for arg in args)
    violations = [] if ok else [f"{name}({args_text}) = {value:.10g}, scipy gives {expected:.10g}"]
    return DiagnosticCheck(is_valid=ok, violations=violations, details={name: ok})
