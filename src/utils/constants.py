"""
Numerical constants, coefficient tables and tolerances for special functions.

This module defines the fixed coefficient tables used by the closed-form
approximations together with the convergence criteria and iteration caps of
every iterative solver. All tables are tuples and are never mutated.
"""

import math

# Lanczos approximation for gamma (g = 7, n = 9), coefficients used by the GSL
LANCZOS_G = 7
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)
SQRT_TWO_PI = math.sqrt(2.0 * math.pi)

# Rational approximation for log-gamma
GAMMALN_COEFFICIENTS = (
    76.18009172947146,
    -86.50532032941677,
    24.01409824083091,
    -1.231739572450155,
    0.1208650973866179e-2,
    -0.5395239384953e-5,
)
GAMMALN_SERIES_START = 1.000000000190015
GAMMALN_SQRT_TWO_PI = 2.5066282746310005

GAMMA_OVERFLOW_X = 171.62  # gamma(x) exceeds the float range above this

# Abramowitz & Stegun 7.1.26, max absolute error 1.5e-7
ERF_P = 0.3275911
ERF_COEFFICIENTS = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)

# Maclaurin series of the inverse error function, (numerator, denominator)
# of the coefficient of x^(2k+1) * pi^k
IERF_SERIES = (
    (1, 1),
    (1, 12),
    (7, 480),
    (127, 40320),
    (4369, 5806080),
    (34807, 182476800),
)

# Digamma (Bernardo 1976, algorithm AS 103)
EULER_MASCHERONI = 0.5772156649
DIGAMMA_SMALL = 1.0e-5  # below this, psi(x) ~ -gamma - 1/x
DIGAMMA_ASYMPTOTIC = 8.5  # recurrence shifts x up to this before the series
DIGAMMA_S3 = 8.33333333e-2
DIGAMMA_S4 = 8.33333333e-3
DIGAMMA_S5 = 3.968253968e-3

# Positive minimum of gamma: gamma(1.461632) == 0.885603
GAMMA_MIN_X = 1.461632
GAMMA_MIN_VALUE = 0.885603
IGAMMA_C = 0.036534  # sqrt(2*pi)/e - gamma(GAMMA_MIN_X)

# Lambert W
NEG_INV_E = -1.0 / math.e  # branch point
LAMBERT_MAX_ITERATIONS = 150
LAMBERT_TOLERANCE = 1e-7
LAMBERT_ASYMPTOTIC_X = 10.0  # principal branch uses log seed above this
LAMBERT_SECONDARY_SPLIT = -0.1  # secondary branch seed switch
LAMBERT_SECONDARY_SEED = -2.0

# Continued fractions (modified Lentz)
FPMIN = 1e-30  # floor for vanishing denominators
BETACF_MAX_ITERATIONS = 100
BETACF_TOLERANCE = 3e-7

# Inverse lower incomplete gamma (secant)
ILOWER_GAMMA_GUESSES = (5.0, 20.0)
ILOWER_GAMMA_MAX_ITERATIONS = 1000
ILOWER_GAMMA_PRECISION = 8  # decimal digits two successive guesses must share

# Inverse regularized incomplete beta (Newton-Raphson)
IBETA_MAX_ITERATIONS = 10
IBETA_EPS = 1e-8

# Brent fallback
BRENT_XTOL = 1e-12
BRENT_RTOL = 1e-10
BRENT_MAX_ITERATIONS = 200

# Normal distribution bounds
MAX_STANDARD_DEVIATIONS = 8.0  # Beyond ±8σ, CDF is effectively 0 or 1

# Diagnostics tolerances
REFERENCE_TOLERANCE = 1e-6  # relative agreement with scipy.special
ERF_TOLERANCE = 2e-7  # A&S 7.1.26 bound of 1.5e-7 plus rounding
IDENTITY_TOLERANCE = 1e-6
GAMMA_MIN_TOLERANCE = 1e-5
