"""
Gauss error function and its inverse.

The forward function uses the Abramowitz & Stegun rational approximation
7.1.26 (maximum absolute error 1.5e-7). The inverse is a truncated
Maclaurin series, accurate near the origin and increasingly rough as
|x| approaches 1.

References:
    Abramowitz, M., & Stegun, I. A. (1964). Handbook of Mathematical Functions,
    formula 7.1.26.
"""

import math

from src.utils.constants import ERF_COEFFICIENTS, ERF_P, IERF_SERIES


def erf(x: float) -> float:
    """
    Real error function.

    Args:
        x: Argument, any real number

    Returns:
        A value in [-1, 1]

    Formula:
        t = 1 / (1 + p·x)
        erf(x) ≈ 1 - (a1·t + a2·t² + a3·t³ + a4·t⁴ + a5·t⁵)·exp(-x²)

    Examples:
        >>> erf(0.0)
        0.0
        >>> abs(erf(1.0) - 0.8427007929) < 1.5e-7
        True
    """
    if math.isnan(x):
        return math.nan
    if x == 0:
        return 0.0
    # Odd symmetry reduces the domain to x > 0
    if x < 0:
        return -erf(-x)

    t = 1.0 / (1.0 + ERF_P * x)
    polynomial = 0.0
    for power, coefficient in enumerate(ERF_COEFFICIENTS, start=1):
        polynomial += coefficient * t**power

    return 1.0 - polynomial * math.exp(-x * x)


def erfc(x: float) -> float:
    """Complementary error function, 1 - erf(x)."""
    return 1.0 - erf(x)


def ierf(x: float) -> float:
    """
    Inverse real error function.

    Sums the first six terms of the series
        erf⁻¹(x) = (√π/2)·(x + π/12·x³ + 7π²/480·x⁵ + ...)

    Args:
        x: Value of the error function, in [-1, 1]

    Returns:
        The argument whose error function is x. ±inf at ±1, NaN
        outside [-1, 1].
    """
    if math.isnan(x) or abs(x) > 1.0:
        return math.nan
    if abs(x) == 1.0:
        return math.copysign(math.inf, x)

    total = 0.0
    for k, (numerator, denominator) in enumerate(IERF_SERIES):
        total += numerator * math.pi**k * x ** (2 * k + 1) / denominator

    return 0.5 * math.sqrt(math.pi) * total
