"""
Complex algebra library: factories, folds, real roots and equation solvers.

Client code builds values through the factories here (of, of_cartesian,
of_polar) rather than through the model classes, and combines them with the
functions below. Every function delegates back to the operations defined on
the values, so representation routing and fast paths apply.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from ..core.errors import DomainError, InvalidArgumentError, MissingOperandsError, UnsupportedOperationError
from ..core.logging import get_operation_logger
from .floating_point import DEFAULT_EPS, approx_zero
from .numeric import ZERO_CARTESIAN, CartesianComplex, PolarComplex
from .value import Complex, check_root_degree, check_root_index

logger = get_operation_logger(__name__)

# Root indexes for complex_sqrt_of and Complex.sqrt
POSITIVE_SQRT = 0
NEGATIVE_SQRT = 1


# Factories


def of(real: float) -> CartesianComplex:
    """Cartesian complex number with a zero imaginary part."""
    return CartesianComplex(real, 0.0)


def of_cartesian(real: float, imaginary: float) -> CartesianComplex:
    return CartesianComplex(real, imaginary)


def of_polar(modulus: float, argument: float | None = None) -> PolarComplex:
    """
    Polar complex number.

    With a single argument the value is read as a real number: a negative real
    becomes (|real|, pi) instead of being rejected as a negative modulus.

    Args:
        modulus: Modulus, >= 0 (or any real when argument is omitted)
        argument: Angle in radians, normalized to (-pi, pi]

    Raises:
        InvalidArgumentError: If a value is not finite or the modulus is negative
    """
    if argument is None:
        return PolarComplex.from_real(modulus)
    return PolarComplex(modulus, argument)


def as_complex(value: Any) -> Complex:
    """
    Promote a Python number to a Complex.

    Complex values pass through unchanged; int and float become real Cartesian
    values, builtin complex becomes a Cartesian value with both parts.
    """
    if isinstance(value, Complex):
        return value
    if isinstance(value, (int, float)):
        return of(float(value))
    if isinstance(value, complex):
        return of_cartesian(value.real, value.imag)
    if value is None:
        raise MissingOperandsError("as_complex", "Expected a complex number, got None")
    raise InvalidArgumentError(
        f"Cannot convert {type(value).__name__} to a complex number", field="value"
    )


def is_zero(z: Complex, eps: float | None = None) -> bool:
    return z.is_zero(eps)


def is_one(z: Complex) -> bool:
    return z.is_one()


# Folds


def _operands(operation: str, values: tuple) -> list[Complex]:
    """Accept either varargs or a single iterable of complex numbers."""
    if len(values) == 1 and not isinstance(values[0], Complex):
        collection = values[0]
        if collection is None:
            raise MissingOperandsError(operation)
        if not isinstance(collection, Iterable):
            raise MissingOperandsError(
                operation,
                f"{operation}() requires a collection of complex numbers, "
                f"got {type(collection).__name__}",
            )
        values = tuple(collection)

    for index, value in enumerate(values):
        if value is None:
            raise MissingOperandsError(
                operation, f"{operation}() got None at position {index}"
            )
        if not isinstance(value, Complex):
            raise MissingOperandsError(
                operation,
                f"{operation}() expects complex numbers, "
                f"got {type(value).__name__} at position {index}",
            )
    return list(values)


def sum_all(*values: Complex | Iterable[Complex]) -> Complex:
    """
    Sum complex numbers with Kahan compensated summation.

    Accepts varargs or a single iterable. An empty input sums to ZERO_CARTESIAN
    and a single value is returned unchanged.

    Raises:
        MissingOperandsError: If the collection or one of its elements is None
    """
    operands = _operands("sum_all", values)
    if not operands:
        return ZERO_CARTESIAN

    total = operands[0]
    compensation = ZERO_CARTESIAN
    for value in operands[1:]:
        corrected = value.minus(compensation)
        running = total.plus(corrected)
        # low-order parts lost when adding corrected to total
        compensation = running.minus(total).minus(corrected)
        total = running

    logger.debug("Summed complex numbers", operation="sum_all", count=len(operands))
    return total


def multiply_all(*values: Complex | Iterable[Complex]) -> Complex:
    """
    Multiply complex numbers left to right.

    The first value's representation governs the product.

    Raises:
        MissingOperandsError: If the collection or one of its elements is None
        UnsupportedOperationError: If there is nothing to multiply
    """
    operands = _operands("multiply_all", values)
    if not operands:
        raise UnsupportedOperationError(
            "multiply_all() requires at least one complex number",
            details={"operation": "multiply_all"},
        )

    product = operands[0]
    for value in operands[1:]:
        product = product.multiply_by(value)

    logger.debug("Multiplied complex numbers", operation="multiply_all", count=len(operands))
    return product


# Roots of real numbers


def complex_sqrt_of(real: float, k: int = POSITIVE_SQRT) -> Complex:
    """
    k-th complex square root of a real number, computed in Cartesian terms.

    Negative reals give purely imaginary roots, so no trigonometry is involved
    and the results are exact up to math.sqrt.

    Args:
        real: Real number
        k: POSITIVE_SQRT (0) or NEGATIVE_SQRT (1)

    Raises:
        InvalidArgumentError: If real is not finite or k is not an integer
        RootIndexError: If k is not 0 or 1
    """
    check_root_index(2, k)
    of(real)
    if approx_zero(real):
        return ZERO_CARTESIAN

    root = math.sqrt(abs(real))
    if k == NEGATIVE_SQRT:
        root = -root
    if real < 0:
        return of_cartesian(0.0, root)
    return of(root)


def all_complex_sqrts_of(real: float) -> list[Complex]:
    return [complex_sqrt_of(real, k) for k in range(2)]


def complex_root(real: float, n: int, k: int) -> Complex:
    """
    k-th complex n-th root of a real number.

    Raises:
        InvalidArgumentError: If n is not a positive integer or real is not finite
        RootIndexError: If k is outside [0, n)
    """
    check_root_degree(n)
    check_root_index(n, k)
    value = of_polar(real)
    if approx_zero(real):
        return ZERO_CARTESIAN
    return value.root(n, k)


def all_complex_roots(real: float, n: int) -> list[Complex]:
    check_root_degree(n)
    return [complex_root(real, n, k) for k in range(n)]


# Equations

_QUADRATIC = "solve_quadratic_equation"


def solve_linear_equation(a: Any, b: Any) -> Complex:
    """
    Solve a*x + b = 0.

    Raises:
        DomainError: If a is zero
    """
    a = as_complex(a)
    b = as_complex(b)
    if a.is_zero():
        raise DomainError("Coefficient of x^1 is zero", details={"equation": "linear"})
    return b.negate().divide_by(a)


def solve_quadratic_equation(a: Any, b: Any, c: Any) -> tuple[Complex, Complex]:
    """
    Solve a*x^2 + b*x + c = 0.

    When all coefficients are Python real numbers the discriminant is computed
    in floats and its square root through complex_sqrt_of; otherwise every
    coefficient is promoted and the computation runs on complex values.

    Args:
        a: Coefficient of x^2, non-zero
        b: Coefficient of x
        c: Constant term

    Returns:
        Pair of roots. The first one comes from the cancellation-free formula,
        the second one from Vieta's relation x1 * x2 = c / a.

    Raises:
        InvalidArgumentError: If a is zero or a coefficient is not finite
    """
    if all(isinstance(value, (int, float)) for value in (a, b, c)):
        return _solve_real_quadratic(float(a), float(b), float(c))
    return _solve_complex_quadratic(as_complex(a), as_complex(b), as_complex(c))


def _check_leading_coefficient(a: Complex) -> None:
    if a.is_zero():
        raise InvalidArgumentError(
            "Coefficient of x^2 must not be zero, use solve_linear_equation", field="a"
        )


def _solve_real_quadratic(a: float, b: float, c: float) -> tuple[Complex, Complex]:
    ca, cb, cc = of(a), of(b), of(c)
    _check_leading_coefficient(ca)

    if b == 0 and c == 0:
        logger.debug("Quadratic has double root 0", operation=_QUADRATIC, path="real")
        return ZERO_CARTESIAN, ZERO_CARTESIAN
    if b == 0:
        logger.debug("Quadratic without x^1 term", operation=_QUADRATIC, path="real")
        # exact +-sqrt(-c/a), however small
        ratio = -c / a
        root = math.sqrt(abs(ratio))
        x1 = of_cartesian(0.0, root) if ratio < 0 else of(root)
        return x1, x1.negate()
    if c == 0:
        logger.debug("Quadratic without constant term", operation=_QUADRATIC, path="real")
        return ZERO_CARTESIAN, solve_linear_equation(ca, cb)

    delta = b * b - 4 * a * c
    if approx_zero(delta):
        logger.debug("Quadratic has a double root", operation=_QUADRATIC, path="real")
        x = of(-b / (2 * a))
        return x, x

    logger.debug("Quadratic general case", operation=_QUADRATIC, path="real", delta=delta)
    return _stable_roots(ca, cb, cc, complex_sqrt_of(delta, POSITIVE_SQRT))


def _solve_complex_quadratic(a: Complex, b: Complex, c: Complex) -> tuple[Complex, Complex]:
    _check_leading_coefficient(a)

    if b.is_zero() and c.is_zero():
        logger.debug("Quadratic has double root 0", operation=_QUADRATIC, path="complex")
        return ZERO_CARTESIAN, ZERO_CARTESIAN
    if b.is_zero():
        logger.debug("Quadratic without x^1 term", operation=_QUADRATIC, path="complex")
        x1 = c.negate().divide_by(a).sqrt(POSITIVE_SQRT)
        return x1, x1.negate()
    if c.is_zero():
        logger.debug("Quadratic without constant term", operation=_QUADRATIC, path="complex")
        return ZERO_CARTESIAN, solve_linear_equation(a, b)

    delta = b.multiply_by(b).minus(a.multiply_by(c).multiply_by_real(4))
    if delta.is_zero(DEFAULT_EPS):
        logger.debug("Quadratic has a double root", operation=_QUADRATIC, path="complex")
        x = b.negate().divide_by(a.multiply_by_real(2))
        return x, x

    logger.debug("Quadratic general case", operation=_QUADRATIC, path="complex", delta=str(delta))
    return _stable_roots(a, b, c, delta.sqrt(POSITIVE_SQRT))


def _stable_roots(a: Complex, b: Complex, c: Complex, sqrt_delta: Complex) -> tuple[Complex, Complex]:
    # Pick the sign of sqrt_delta pointing the same way as b, so that
    # -b - sign * sqrt_delta adds magnitudes instead of cancelling them.
    alignment = (
        b.real_value() * sqrt_delta.real_value()
        + b.imaginary_value() * sqrt_delta.imaginary_value()
    )  # Re(conj(b) * sqrt_delta)
    sign = 1.0 if alignment >= 0 else -1.0

    two_a = a.multiply_by_real(2)
    numerator = b.negate().minus(sqrt_delta.multiply_by_real(sign))
    x1 = numerator.divide_by(two_a)
    if numerator.is_zero():
        x2 = b.negate().plus(sqrt_delta.multiply_by_real(sign)).divide_by(two_a)
    else:
        x2 = c.divide_by(x1.multiply_by(a))
    return x1, x2
