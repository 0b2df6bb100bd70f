"""
Iterative solver for the Lambert W function.

Solves w·e^w = x for w on either real branch. The update

    w ← (x·e^(-w) + w²) / (w + 1)

is Newton's method applied to f(w) = w·e^w - x, which converges
quadratically away from the branch point at x = -1/e.
"""

import logging
import math

from src.utils.constants import (
    LAMBERT_ASYMPTOTIC_X,
    LAMBERT_MAX_ITERATIONS,
    LAMBERT_SECONDARY_SEED,
    LAMBERT_SECONDARY_SPLIT,
    LAMBERT_TOLERANCE,
    NEG_INV_E,
)
from src.utils.types import SolverResult

logger = logging.getLogger(__name__)


def _initial_guess(x: float, principal: bool) -> float:
    """
    Seed for the iteration, or NaN if x is outside the branch's domain.

    Principal branch (W₀) is real on [-1/e, ∞); the secondary branch (W₋₁)
    is real on [-1/e, 0).
    """
    if principal:
        if x > LAMBERT_ASYMPTOTIC_X:
            return math.log(x) - math.log(math.log(x))
        if x >= NEG_INV_E:
            return 0.0
        return math.nan

    if NEG_INV_E <= x <= LAMBERT_SECONDARY_SPLIT:
        return LAMBERT_SECONDARY_SEED
    if LAMBERT_SECONDARY_SPLIT < x < 0:
        return math.log(-x) - math.log(-math.log(-x))
    return math.nan


def lambert_w(
    x: float,
    principal: bool = True,
    max_iterations: int = LAMBERT_MAX_ITERATIONS,
    tolerance: float = LAMBERT_TOLERANCE,
) -> SolverResult:
    """
    Solve w·e^w = x on the requested branch.

    Args:
        x: Argument to the Lambert W function
        principal: True for the principal branch W₀, False for W₋₁
        max_iterations: Maximum number of refinement steps
        tolerance: Absolute tolerance on successive estimates

    Returns:
        SolverResult with w, iterations, method, success flag

    Notes:
        - Returns success=False with value NaN outside the branch's domain
        - Returns success=False with the last estimate if the iteration
          cap is reached before two estimates agree within tolerance
    """
    branch = "principal" if principal else "secondary"
    w = math.nan if math.isnan(x) else _initial_guess(x, principal)

    if math.isnan(w):
        return SolverResult(
            value=math.nan,
            iterations=0,
            method="halley",
            success=False,
            message=f"x={x} outside the domain of the {branch} branch",
        )

    iterations = 0
    for _ in range(max_iterations):
        iterations += 1

        # At the branch point both numerator and denominator vanish
        if w == -1.0:
            return SolverResult(
                value=w,
                iterations=iterations,
                method="halley",
                success=True,
                message="Reached the branch point w = -1",
            )

        if x < 0:
            # x·e^(-w) in log space; e^(-w) alone overflows for tiny |x|
            scaled = -math.exp(math.log(-x) - w)
        else:
            scaled = x * math.exp(-w)
        w_new = (scaled + w * w) / (w + 1.0)
        logger.debug("lambert_w iteration %d: w=%.17g", iterations, w_new)

        if abs(w_new - w) < tolerance:
            return SolverResult(
                value=w_new,
                iterations=iterations,
                method="halley",
                success=True,
                message=f"Converged in {iterations} iterations",
            )

        w = w_new

    return SolverResult(
        value=w,
        iterations=iterations,
        method="halley",
        success=False,
        message=f"Max iterations ({max_iterations}) reached without convergence",
    )
