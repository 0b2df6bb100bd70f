"""
Secant method for the inverse lower incomplete gamma function.

Finds x such that γ(s, x) = y. The secant update is

    x_{n+1} = x_n - g(x_n)·(x_n - x_{n-1}) / (g(x_n) - g(x_{n-1}))

with g(x) = γ(s, x) - y. Because γ(s, ·) flattens out towards Γ(s), a
secant step from the fixed seeds can overshoot below zero; such a step
is replaced by half the latest iterate so the search stays in x >= 0.
"""

import logging
import math

from src.core.incomplete_gamma import lower_gamma
from src.utils.constants import (
    ILOWER_GAMMA_GUESSES,
    ILOWER_GAMMA_MAX_ITERATIONS,
    ILOWER_GAMMA_PRECISION,
)
from src.utils.types import SolverResult

logger = logging.getLogger(__name__)


def secant_lower_gamma(
    s: float,
    y: float,
    guesses: tuple[float, float] = ILOWER_GAMMA_GUESSES,
    max_iterations: int = ILOWER_GAMMA_MAX_ITERATIONS,
    precision: int = ILOWER_GAMMA_PRECISION,
) -> SolverResult:
    """
    Solve γ(s, x) = y for x using the secant method.

    Args:
        s: Shape parameter of the lower incomplete gamma, positive
        y: Target value, in [0, Γ(s))
        guesses: Two starting points
        max_iterations: Maximum number of secant steps
        precision: Number of decimal places two successive guesses must
            share to count as converged

    Returns:
        SolverResult with x, iterations, method, success flag

    Notes:
        - Returns success=False with NaN if γ(s, ·) is NaN at a guess
          (invalid s) or y is negative
        - Returns success=False if two guesses give the same function
          value (flat secant) before convergence
    """
    if math.isnan(s) or math.isnan(y) or y < 0:
        return SolverResult(
            value=math.nan,
            iterations=0,
            method="secant",
            success=False,
            message=f"Target y={y} outside the range of the lower incomplete gamma",
        )
    if y == 0:
        return SolverResult(value=0.0, iterations=0, method="secant", success=True, message="Exact: y = 0")

    previous, current = guesses
    g_previous = lower_gamma(s, previous) - y
    iterations = 0

    while round(current, precision) != round(previous, precision):
        if iterations >= max_iterations:
            return SolverResult(
                value=current,
                iterations=iterations,
                method="secant",
                success=False,
                message=f"Max iterations ({max_iterations}) reached without convergence",
            )
        iterations += 1

        g_current = lower_gamma(s, current) - y
        if math.isnan(g_current):
            return SolverResult(
                value=math.nan,
                iterations=iterations,
                method="secant",
                success=False,
                message=f"lower_gamma({s}, {current}) is undefined",
            )
        if g_current == 0:
            return SolverResult(
                value=current,
                iterations=iterations,
                method="secant",
                success=True,
                message=f"Exact root found in {iterations} iterations",
            )
        if g_current == g_previous:
            return SolverResult(
                value=current,
                iterations=iterations,
                method="secant",
                success=False,
                message=f"Flat secant at x={current:.6g} after {iterations} iterations",
            )

        candidate = current - g_current * (current - previous) / (g_current - g_previous)
        if candidate < 0:
            candidate = 0.5 * current
        logger.debug("secant_lower_gamma iteration %d: x=%.17g", iterations, candidate)

        previous, g_previous = current, g_current
        current = candidate

    return SolverResult(
        value=current,
        iterations=iterations,
        method="secant",
        success=True,
        message=f"Converged in {iterations} iterations",
    )
