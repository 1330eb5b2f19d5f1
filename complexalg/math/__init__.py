"""
complexalg.math - complex number algebra

Immutable complex values with:
- Cartesian and Polar representations
- Exact and tolerant comparison
- Powers, roots and equation solvers
- Multiple output formats
"""

from .algebra import (
    NEGATIVE_SQRT,
    POSITIVE_SQRT,
    all_complex_roots,
    all_complex_sqrts_of,
    as_complex,
    complex_root,
    complex_sqrt_of,
    is_one,
    is_zero,
    multiply_all,
    of,
    of_cartesian,
    of_polar,
    solve_linear_equation,
    solve_quadratic_equation,
    sum_all,
)
from .floating_point import DEFAULT_EPS, DOUBLE_EPS, FLOAT_EPS, MANY_CALCULATIONS_EPS, approx_equal, approx_zero
from .numeric import (
    IMAGINARY_UNIT,
    IMAGINARY_UNIT_NEGATIVE,
    ONE_CARTESIAN,
    ONE_POLAR,
    ZERO_CARTESIAN,
    ZERO_POLAR,
    CartesianComplex,
    PolarComplex,
    normalize_argument,
)
from .value import Complex, Representation

__all__ = [
    "Complex",
    "Representation",
    "CartesianComplex",
    "PolarComplex",
    "normalize_argument",
    "ZERO_CARTESIAN",
    "ZERO_POLAR",
    "ONE_CARTESIAN",
    "ONE_POLAR",
    "IMAGINARY_UNIT",
    "IMAGINARY_UNIT_NEGATIVE",
    "POSITIVE_SQRT",
    "NEGATIVE_SQRT",
    "DOUBLE_EPS",
    "DEFAULT_EPS",
    "MANY_CALCULATIONS_EPS",
    "FLOAT_EPS",
    "approx_equal",
    "approx_zero",
    "of",
    "of_cartesian",
    "of_polar",
    "as_complex",
    "is_zero",
    "is_one",
    "sum_all",
    "multiply_all",
    "complex_sqrt_of",
    "all_complex_sqrts_of",
    "complex_root",
    "all_complex_roots",
    "solve_linear_equation",
    "solve_quadratic_equation",
]
