"""
Tolerances for comparing results of finite-precision computations.

DOUBLE_EPS is the precision of a 64 bit float. DEFAULT_EPS (4 * DOUBLE_EPS)
tolerates a little cancellation, about 2 lost bits. MANY_CALCULATIONS_EPS
tolerates about 13 lost bits and suits results of long calculation chains such
as root extraction. FLOAT_EPS is the precision of a 32 bit float.
"""

from __future__ import annotations

DOUBLE_EPS = 2.0 ** -53  # 1.11e-16
DEFAULT_EPS = 4 * DOUBLE_EPS  # 4.44e-16
MANY_CALCULATIONS_EPS = 2.0 ** -39  # 9.09e-13
FLOAT_EPS = 2.0 ** -24  # 5.96e-08


def approx_equal(actual: float, expected: float, epsilon: float = DEFAULT_EPS) -> bool:
    """
    Check that actual lies in the open range (expected - epsilon, expected + epsilon).

    Args:
        actual: Computed value
        expected: Reference value
        epsilon: Half-width of the range, boundaries excluded

    Returns:
        True if |expected - actual| < epsilon. Always False when a NaN is involved.
    """
    return abs(expected - actual) < epsilon


def approx_zero(actual: float, epsilon: float = DEFAULT_EPS) -> bool:
    """Check that |actual| < epsilon."""
    return approx_equal(actual, 0.0, epsilon)
