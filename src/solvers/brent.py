"""
Brent's method for inverting the incomplete gamma and beta functions.

This module implements bracketed root-finding with scipy's brentq (a
hybrid bisection/inverse quadratic interpolation algorithm) as a robust
fallback when the secant or Newton-Raphson iterations fail. Both forward
functions are monotone in x, so a bracket exists whenever the target lies
in the function's range.
"""

import logging
import math

from scipy.optimize import brentq

from src.core.beta import regularized_incomplete_beta
from src.core.gamma import gamma
from src.core.incomplete_gamma import lower_gamma
from src.utils.constants import BRENT_MAX_ITERATIONS, BRENT_RTOL, BRENT_XTOL
from src.utils.types import SolverResult

logger = logging.getLogger(__name__)

_MAX_BRACKET_DOUBLINGS = 1100  # enough to reach the float maximum


def _solve(objective, lower: float, upper: float, xtol: float) -> SolverResult:
    """Run brentq on a bracket and wrap the outcome."""
    try:
        root, info = brentq(
            objective,
            lower,
            upper,
            xtol=xtol,
            rtol=BRENT_RTOL,
            maxiter=BRENT_MAX_ITERATIONS,
            full_output=True,
            disp=False,
        )
    except ValueError as e:
        # brentq raises if the objective doesn't bracket a root
        logger.debug("brentq rejected bracket [%r, %r]: %s", lower, upper, e)
        return SolverResult(
            value=math.nan,
            iterations=0,
            method="brent",
            success=False,
            message=f"Brent method failed on [{lower:.6g}, {upper:.6g}]: {e}",
        )

    return SolverResult(
        value=root,
        iterations=info.iterations,
        method="brent",
        success=bool(info.converged),
        message=f"{info.flag} after {info.iterations} iterations, residual {objective(root):.2e}",
    )


def brent_lower_gamma(s: float, y: float, xtol: float = BRENT_XTOL) -> SolverResult:
    """
    Solve γ(s, x) = y for x using Brent's method.

    The bracket starts at [0, max(s, 1)] and its upper end doubles until
    γ(s, upper) >= y.

    Args:
        s: Shape parameter, positive
        y: Target value, in [0, Γ(s))
        xtol: Absolute tolerance on x

    Returns:
        SolverResult with x, iterations, method, success flag
    """
    total = gamma(s)
    if math.isnan(s) or math.isnan(y) or s <= 0 or y < 0 or y >= total:
        return SolverResult(
            value=math.nan,
            iterations=0,
            method="brent",
            success=False,
            message=f"Target y={y} outside [0, Γ({s})={total:.6g})",
        )
    if y == 0:
        return SolverResult(value=0.0, iterations=0, method="brent", success=True, message="Exact: y = 0")

    def objective(x: float) -> float:
        return lower_gamma(s, x) - y

    upper = max(s, 1.0)
    for _ in range(_MAX_BRACKET_DOUBLINGS):
        if objective(upper) >= 0:
            break
        upper *= 2.0
    else:
        return SolverResult(
            value=math.nan,
            iterations=0,
            method="brent",
            success=False,
            message=f"Could not bracket γ({s}, x) = {y}",
        )

    return _solve(objective, 0.0, upper, xtol)


def brent_incomplete_beta(a: float, b: float, p: float, xtol: float = BRENT_XTOL) -> SolverResult:
    """
    Solve I_x(a, b) = p for x using Brent's method on [0, 1].

    Args:
        a: The alpha parameter, positive
        b: The beta parameter, positive
        p: Target probability, in [0, 1]
        xtol: Absolute tolerance on x

    Returns:
        SolverResult with x, iterations, method, success flag
    """
    if math.isnan(p) or a <= 0 or b <= 0:
        return SolverResult(
            value=math.nan,
            iterations=0,
            method="brent",
            success=False,
            message=f"Invalid arguments a={a}, b={b}, p={p}",
        )
    if p <= 0:
        return SolverResult(value=0.0, iterations=0, method="brent", success=True, message="p <= 0")
    if p >= 1:
        return SolverResult(value=1.0, iterations=0, method="brent", success=True, message="p >= 1")

    def objective(x: float) -> float:
        return regularized_incomplete_beta(a, b, x) - p

    return _solve(objective, 0.0, 1.0, xtol)
