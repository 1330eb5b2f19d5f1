"""complexalg - complex number algebra core.

Main namespace package:
- complexalg.math: Complex values, algebra library and rendering
- complexalg.core: Configuration, errors and logging

Call complexalg.setup_logging() to see the library's debug output.
"""

import logging

from .core import (
    ComplexError,
    ComplexZeroDivisionError,
    DomainError,
    InvalidArgumentError,
    MissingOperandsError,
    RootIndexError,
    Settings,
    UnsupportedOperationError,
    get_settings,
    setup_logging,
)
from .math import (
    IMAGINARY_UNIT,
    IMAGINARY_UNIT_NEGATIVE,
    NEGATIVE_SQRT,
    ONE_CARTESIAN,
    ONE_POLAR,
    POSITIVE_SQRT,
    ZERO_CARTESIAN,
    ZERO_POLAR,
    CartesianComplex,
    Complex,
    PolarComplex,
    all_complex_roots,
    all_complex_sqrts_of,
    as_complex,
    complex_root,
    complex_sqrt_of,
    multiply_all,
    of,
    of_cartesian,
    of_polar,
    solve_linear_equation,
    solve_quadratic_equation,
    sum_all,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Complex",
    "CartesianComplex",
    "PolarComplex",
    "ZERO_CARTESIAN",
    "ZERO_POLAR",
    "ONE_CARTESIAN",
    "ONE_POLAR",
    "IMAGINARY_UNIT",
    "IMAGINARY_UNIT_NEGATIVE",
    "POSITIVE_SQRT",
    "NEGATIVE_SQRT",
    "of",
    "of_cartesian",
    "of_polar",
    "as_complex",
    "sum_all",
    "multiply_all",
    "complex_sqrt_of",
    "all_complex_sqrts_of",
    "complex_root",
    "all_complex_roots",
    "solve_linear_equation",
    "solve_quadratic_equation",
    "ComplexError",
    "ComplexZeroDivisionError",
    "DomainError",
    "InvalidArgumentError",
    "MissingOperandsError",
    "RootIndexError",
    "UnsupportedOperationError",
    "Settings",
    "get_settings",
    "setup_logging",
]
