"""
Newton-Raphson method for the inverse regularized incomplete beta function.

This module finds x such that I_x(a, b) = p. The derivative of I_x(a, b)
with respect to x is the Beta(a, b) density, so each step costs one
continued-fraction evaluation and one density evaluation. A Halley-style
second-order correction is applied to the Newton step.
"""

import logging
import math

from src.core.beta import regularized_incomplete_beta
from src.core.distributions import beta_pdf
from src.utils.constants import IBETA_EPS, IBETA_MAX_ITERATIONS
from src.utils.types import SolverResult

logger = logging.getLogger(__name__)


def initial_guess(a: float, b: float, p: float) -> float:
    """
    Analytic starting point for the inverse incomplete beta.

    For a, b >= 1 a normal approximation to the quantile is mapped onto
    (0, 1). Otherwise the two tails are approximated by
    x ≈ (a·w·p)^(1/a) and 1 - x ≈ (b·w·(1-p))^(1/b), with w the sum of
    the leading tail coefficients.

    Args:
        a, b: Shape parameters, positive
        p: Target probability, in (0, 1)

    Returns:
        Initial estimate in [0, 1]

    Reference:
        Press, W. H., et al. (2007). Numerical Recipes, 3rd ed., §6.14.10.
    """
    if a >= 1 and b >= 1:
        pp = p if p < 0.5 else 1.0 - p
        t = math.sqrt(-2.0 * math.log(pp))
        x = (2.30753 + t * 0.27061) / (1.0 + t * (0.99229 + t * 0.04481)) - t
        if p < 0.5:
            x = -x
        al = (x * x - 3.0) / 6.0
        h = 2.0 / (1.0 / (2.0 * a - 1.0) + 1.0 / (2.0 * b - 1.0))
        w = (x * math.sqrt(al + h) / h) - (1.0 / (2.0 * b - 1.0) - 1.0 / (2.0 * a - 1.0)) * (
            al + 5.0 / 6.0 - 2.0 / (3.0 * h)
        )
        return a / (a + b * math.exp(2.0 * w))

    lna = math.log(a / (a + b))
    lnb = math.log(b / (a + b))
    t = math.exp(a * lna) / a
    u = math.exp(b * lnb) / b
    w = t + u
    if p < t / w:
        return (a * w * p) ** (1.0 / a)
    return 1.0 - (b * w * (1.0 - p)) ** (1.0 / b)


def newton_raphson_incomplete_beta(
    a: float,
    b: float,
    p: float,
    max_iterations: int = IBETA_MAX_ITERATIONS,
    tolerance: float = IBETA_EPS,
) -> SolverResult:
    """
    Solve I_x(a, b) = p for x using Newton-Raphson.

    The update is:
        u = (I_x(a,b) - p) / f(x)
        x_{n+1} = x_n - u / (1 - ½·min(1, u·((a-1)/x - (b-1)/(1-x))))

    where f is the Beta(a, b) density. A step that leaves (0, 1) is
    replaced by the midpoint between the previous iterate and the
    violated boundary.

    Args:
        a: The alpha parameter, positive
        b: The beta parameter, positive
        p: Target probability
        max_iterations: Maximum number of Newton steps
        tolerance: Stop once the step is below tolerance·x

    Returns:
        SolverResult with x, iterations, method, success flag

    Notes:
        - p <= 0 and p >= 1 return 0 and 1 immediately (success=True)
        - Returns success=False if an iterate lands exactly on 0 or 1,
          the function is undefined for (a, b), or the budget runs out
    """
    if math.isnan(p) or math.isnan(a) or math.isnan(b):
        return SolverResult(
            value=math.nan, iterations=0, method="newton-raphson", success=False,
            message="NaN input",
        )
    if p <= 0:
        return SolverResult(value=0.0, iterations=0, method="newton-raphson", success=True, message="p <= 0")
    if p >= 1:
        return SolverResult(value=1.0, iterations=0, method="newton-raphson", success=True, message="p >= 1")
    if a <= 0 or b <= 0:
        return SolverResult(
            value=math.nan, iterations=0, method="newton-raphson", success=False,
            message=f"Shape parameters must be positive, got a={a}, b={b}",
        )

    a1 = a - 1.0
    b1 = b - 1.0
    x = initial_guess(a, b, p)
    iterations = 0

    for j in range(max_iterations):
        if x == 0 or x == 1:
            return SolverResult(
                value=x,
                iterations=iterations,
                method="newton-raphson",
                success=False,
                message=f"Iterate reached the boundary x={x} at iteration {iterations}",
            )
        iterations += 1

        err = regularized_incomplete_beta(a, b, x) - p
        density = beta_pdf(x, a, b)
        if math.isnan(err) or not 0 < density < math.inf:
            return SolverResult(
                value=math.nan if math.isnan(err) else x,
                iterations=iterations,
                method="newton-raphson",
                success=False,
                message=f"Density {density:.3g} unusable at x={x:.6g}, iteration {iterations}",
            )
        u = err / density
        step = u / (1.0 - 0.5 * min(1.0, u * (a1 / x - b1 / (1.0 - x))))
        x -= step

        # Keep the iterate inside (0, 1)
        if x <= 0:
            x = 0.5 * (x + step)
        if x >= 1:
            x = 0.5 * (x + step + 1.0)
        logger.debug("newton_raphson_incomplete_beta iteration %d: x=%.17g", iterations, x)

        if math.isnan(x):
            return SolverResult(
                value=math.nan,
                iterations=iterations,
                method="newton-raphson",
                success=False,
                message=f"Undefined step at iteration {iterations}",
            )

        if abs(step) < tolerance * x and j > 0:
            return SolverResult(
                value=x,
                iterations=iterations,
                method="newton-raphson",
                success=True,
                message=f"Converged in {iterations} iterations",
            )

    return SolverResult(
        value=x,
        iterations=iterations,
        method="newton-raphson",
        success=False,
        message=f"Max iterations ({max_iterations}) reached without convergence",
    )
