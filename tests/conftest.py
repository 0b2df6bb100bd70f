"""
Pytest configuration and shared fixtures.
"""

import pytest
import math


@pytest.fixture
def beta_cases():
    """Representative (a, b, x) triples covering both shape regimes."""
    return [
        (2.0, 3.0, 0.4),
        (2.0, 2.0, 0.5),
        (0.5, 0.5, 0.2),
        (0.7, 4.0, 0.05),
        (5.0, 1.5, 0.9),
        (10.0, 10.0, 0.3),
    ]


@pytest.fixture
def incomplete_gamma_cases():
    """(s, x) pairs on both sides of the series / continued fraction split."""
    return [
        (3.0, 2.0),  # series
        (1.0, 2.0),  # continued fraction, exact 1 - e^-x
        (0.5, 0.3),  # s < 1
        (2.5, 6.0),  # continued fraction
        (10.0, 8.0),  # large s, series
    ]


@pytest.fixture
def branch_point():
    """The Lambert W branch point -1/e."""
    return -1.0 / math.e
