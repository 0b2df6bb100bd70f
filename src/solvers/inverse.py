"""
Inverse incomplete gamma and beta functions with automatic method selection.

This module provides the high-level interface for inverting the lower
incomplete gamma and the regularized incomplete beta functions. The fast
iteration (secant or Newton-Raphson) runs first, and Brent's method takes
over when it does not converge.
"""

import logging

from src.solvers.brent import brent_incomplete_beta, brent_lower_gamma
from src.solvers.newton_raphson import newton_raphson_incomplete_beta
from src.solvers.secant import secant_lower_gamma
from src.utils.types import InverseMethod, SolverResult

logger = logging.getLogger(__name__)


def solve_lower_gamma(s: float, y: float, method: InverseMethod = "auto") -> SolverResult:
    """
    Solve γ(s, x) = y for x with automatic method selection.

    Args:
        s: Shape parameter, positive
        y: Target value, in [0, Γ(s))
        method: "auto" (default), "secant", or "brent"

    Returns:
        SolverResult containing:
            - value: x such that γ(s, x) = y
            - iterations: Number of iterations used
            - method: Method that produced the value ("secant" or "brent")
            - success: True if converged, False otherwise
            - message: Detailed information about convergence

    Raises:
        ValueError: If method is not one of the supported names

    Examples:
        >>> result = solve_lower_gamma(3.0, 0.6466471676)
        >>> result.success, round(result.value, 6)
        (True, 2.0)
    """
    if method not in ("auto", "secant", "brent"):
        raise ValueError(f"Method must be 'auto', 'secant' or 'brent', got {method!r}")

    if method in ("auto", "secant"):
        secant_result = secant_lower_gamma(s, y)

        if secant_result.success or method == "secant":
            return secant_result

        logger.info("secant failed for γ(%r, x) = %r (%s), trying brent", s, y, secant_result.message)

    return brent_lower_gamma(s, y)


def solve_incomplete_beta(a: float, b: float, p: float, method: InverseMethod = "auto") -> SolverResult:
    """
    Solve I_x(a, b) = p for x with automatic method selection.

    Args:
        a: The alpha parameter, positive
        b: The beta parameter, positive
        p: Target probability
        method: "auto" (default), "newton", or "brent"

    Returns:
        SolverResult; method is "newton-raphson" or "brent"

    Raises:
        ValueError: If method is not one of the supported names

    Notes:
        - Newton-Raphson typically converges in 3-5 iterations
        - Brent always finds a root in [0, 1] for valid a, b since
          I_x(a, b) is monotone from 0 to 1
    """
    if method not in ("auto", "newton", "brent"):
        raise ValueError(f"Method must be 'auto', 'newton' or 'brent', got {method!r}")

    if method in ("auto", "newton"):
        nr_result = newton_raphson_incomplete_beta(a, b, p)

        if nr_result.success or method == "newton":
            return nr_result

        logger.info(
            "newton-raphson failed for I_x(%r, %r) = %r (%s), trying brent", a, b, p, nr_result.message
        )

    return brent_incomplete_beta(a, b, p)


def ilower_gamma(s: float, y: float, method: InverseMethod = "auto") -> float:
    """
    Inverse of the lower incomplete gamma function in its second argument.

    Args:
        s: Shape parameter, positive
        y: Value of the lower incomplete gamma, in [0, Γ(s))
        method: Solver selection, see solve_lower_gamma

    Returns:
        x such that γ(s, x) = y. NaN if the inputs are invalid; if the
        solver does not converge the last estimate is returned and a
        warning is logged.
    """
    result = solve_lower_gamma(s, y, method)
    if not result.success:
        logger.warning("ilower_gamma(%r, %r): %s", s, y, result.message)
    return result.value


def iregularized_incomplete_beta(a: float, b: float, p: float, method: InverseMethod = "auto") -> float:
    """
    Inverse of the regularized incomplete beta function.

    Args:
        a: The alpha parameter, positive
        b: The beta parameter, positive
        p: Value of the regularized incomplete beta; p <= 0 maps to 0
           and p >= 1 maps to 1
        method: Solver selection, see solve_incomplete_beta

    Returns:
        x such that I_x(a, b) = p

    Examples:
        >>> x = iregularized_incomplete_beta(2.0, 2.0, 0.5)
        >>> abs(x - 0.5) < 1e-6
        True
    """
    result = solve_incomplete_beta(a, b, p, method)
    if not result.success:
        logger.warning("iregularized_incomplete_beta(%r, %r, %r): %s", a, b, p, result.message)
    return result.value


def beta_ppf(p: float, a: float, b: float) -> float:
    """Quantile function of the Beta(a, b) distribution."""
    return iregularized_incomplete_beta(a, b, p)
