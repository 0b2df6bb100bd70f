"""
Continued-fraction evaluation by the modified Lentz method.

Both the incomplete beta and the upper-tail incomplete gamma functions
are expressed as continued fractions. Lentz's method evaluates them
front to back, keeping the ratios C_n = A_n/A_{n-1} and
D_n = B_{n-1}/B_n and multiplying the running value by C_n·D_n. Any
denominator that falls below FPMIN is replaced by FPMIN.

References:
    Press, W. H., et al. (2007). Numerical Recipes, 3rd ed., §5.2 and §6.4.
"""

import logging

from src.utils.constants import BETACF_MAX_ITERATIONS, BETACF_TOLERANCE, FPMIN
from src.utils.types import SolverResult

logger = logging.getLogger(__name__)


def _floor(value: float) -> float:
    if abs(value) < FPMIN:
        return FPMIN
    return value


def betacf(
    x: float,
    a: float,
    b: float,
    max_iterations: int = BETACF_MAX_ITERATIONS,
    tolerance: float = BETACF_TOLERANCE,
) -> SolverResult:
    """
    Continued fraction for the regularized incomplete beta function.

    Each iteration applies two steps of the recurrence:

        d_{2m}   =  m(b-m)x / ((a+2m-1)(a+2m))
        d_{2m+1} = -(a+m)(a+b+m)x / ((a+2m)(a+2m+1))

    Args:
        x: Upper limit of integration, in [0, 1]
        a, b: Shape parameters, both positive
        max_iterations: Maximum number of (even, odd) step pairs
        tolerance: Stop once the multiplicative update is within this of 1

    Returns:
        SolverResult whose value is the continued fraction
    """
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 / _floor(1.0 - qab * x / qap)
    h = d

    iterations = 0
    for m in range(1, max_iterations + 1):
        iterations = m
        m2 = 2 * m

        # Even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 / _floor(1.0 + aa * d)
        c = _floor(1.0 + aa / c)
        h *= d * c

        # Odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 / _floor(1.0 + aa * d)
        c = _floor(1.0 + aa / c)
        delta = d * c
        h *= delta

        if abs(delta - 1.0) < tolerance:
            return SolverResult(
                value=h,
                iterations=iterations,
                method="lentz",
                success=True,
                message=f"Converged in {iterations} iterations",
            )

    logger.debug("betacf(x=%r, a=%r, b=%r) exhausted %d iterations", x, a, b, max_iterations)
    return SolverResult(
        value=h,
        iterations=iterations,
        method="lentz",
        success=False,
        message=f"Max iterations ({max_iterations}) reached without convergence",
    )


def incomplete_gamma_fraction(s: float, x: float, terms: int) -> float:
    """
    Continued fraction for the upper regularized incomplete gamma.

        Q(s, x) = e^(-x)·x^s / Γ(s) · 1/(x+1-s- 1·(1-s)/(x+3-s- 2·(2-s)/(x+5-s- ...)))

    Returns only the fraction; the caller applies the prefactor. A fixed
    number of terms is evaluated, sized by the caller from s.

    Args:
        s: Shape parameter, positive
        x: Lower limit of integration, x >= s + 1 for fast convergence
        terms: Number of terms to evaluate
    """
    b = x + 1.0 - s
    c = 1.0 / FPMIN
    d = 1.0 / b
    h = d

    for i in range(1, terms + 1):
        an = -i * (i - s)
        b += 2.0
        d = 1.0 / _floor(an * d + b)
        c = _floor(b + an / c)
        h *= d * c

    return h
