"""
Lambert W function, the inverse of f(w) = w·e^w.
"""

import logging

from src.solvers.halley import lambert_w
from src.utils.constants import LAMBERT_MAX_ITERATIONS, LAMBERT_TOLERANCE

logger = logging.getLogger(__name__)


def lambert(
    x: float,
    principal: bool = True,
    max_iterations: int = LAMBERT_MAX_ITERATIONS,
    tolerance: float = LAMBERT_TOLERANCE,
) -> float:
    """
    Lambert W function on the principal or secondary real branch.

    Args:
        x: Argument, in [-1/e, ∞) for the principal branch and
           [-1/e, 0) for the secondary branch
        principal: True for W₀, False for W₋₁

    Returns:
        w such that w·e^w = x, or NaN outside the branch's domain

    Examples:
        >>> lambert(0.0)
        0.0
        >>> abs(lambert(1.0) - 0.5671432904) < 1e-9
        True

    Notes:
        Use src.solvers.halley.lambert_w to inspect convergence.
    """
    result = lambert_w(x, principal, max_iterations, tolerance)
    if not result.success and result.iterations > 0:
        logger.warning("lambert(%r, principal=%s): %s", x, principal, result.message)
    return result.value
