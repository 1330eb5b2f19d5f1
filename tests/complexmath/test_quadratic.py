"""Tests for solve_quadratic_equation, checked against numpy.roots."""

import math

import numpy as np
import pytest

from complexalg.core.errors import InvalidArgumentError
from complexalg.math.algebra import of, of_cartesian, solve_quadratic_equation
from complexalg.math.floating_point import MANY_CALCULATIONS_EPS
from complexalg.math.numeric import ONE_CARTESIAN, ZERO_CARTESIAN, ZERO_POLAR


def residual(a, b, c, x):
    """|a*x^2 + b*x + c| using builtin complex arithmetic."""
    x = complex(x)
    return abs(complex(a) * x * x + complex(b) * x + complex(c))


def assert_matches_numpy(roots, a, b, c, tol=1e-9):
    """Each root must match one numpy root, and vice versa."""
    expected = list(np.roots([complex(a), complex(b), complex(c)]))
    actual = [complex(root) for root in roots]
    scale = max(1.0, *(abs(value) for value in expected))
    for value in actual:
        assert min(abs(value - other) for other in expected) < tol * scale
    for other in expected:
        assert min(abs(value - other) for value in actual) < tol * scale


class TestRealCoefficients:
    """Quadratics with Python real coefficients."""

    def test_two_real_roots(self):
        x1, x2 = solve_quadratic_equation(1, -3, 2)
        assert x1 == of(2)
        assert x2 == of(1)

    def test_conjugate_roots(self):
        x1, x2 = solve_quadratic_equation(1, 2, 5)
        assert x1 == of_cartesian(-1, -2)
        assert x2 == of_cartesian(-1, 2)

    def test_no_linear_term(self):
        x1, x2 = solve_quadratic_equation(1, 0, 1)
        assert x1 == of_cartesian(0, 1)
        assert x2 == of_cartesian(0, -1)

    def test_no_linear_term_positive_roots(self):
        x1, x2 = solve_quadratic_equation(2, 0, -8)
        assert x1 == of(2)
        assert x2 == of(-2)

    def test_no_constant_term(self):
        x1, x2 = solve_quadratic_equation(1, 3, 0)
        assert x1 is ZERO_CARTESIAN
        assert x2 == of(-3)

    @pytest.mark.parametrize("c, expected", [(-1e-20, 1e-10), (1e-20, 1e-10j)])
    def test_tiny_constant_term(self, c, expected):
        """x^2 + c = 0 keeps its roots +-sqrt(-c) however small c is, on both paths."""
        x1, x2 = solve_quadratic_equation(1, 0, c)
        assert abs(complex(x1) - expected) < 1e-20
        assert abs(complex(x2) + expected) < 1e-20

        y1, y2 = solve_quadratic_equation(of(1), ZERO_CARTESIAN, of(c))
        assert abs(complex(x1) - complex(y1)) < 1e-20
        assert abs(complex(x2) - complex(y2)) < 1e-20

    def test_double_root_zero(self):
        x1, x2 = solve_quadratic_equation(5, 0, 0)
        assert x1.is_zero() and x2.is_zero()

    def test_double_root(self):
        x1, x2 = solve_quadratic_equation(1, -2, 1)
        assert x1 == of(1)
        assert x2 == of(1)

    def test_cancellation_avoided(self):
        """The small root of x^2 - 1e8 x + 1 keeps full relative precision."""
        x1, x2 = solve_quadratic_equation(1, -1e8, 1)
        assert x1.real_value() == pytest.approx(1e8, rel=1e-12)
        assert x2.real_value() == pytest.approx(1e-8, rel=1e-12)

        naive = (1e8 - math.sqrt(1e16 - 4)) / 2
        assert naive != pytest.approx(1e-8, rel=1e-3)

    def test_int_and_float_mixed(self):
        x1, x2 = solve_quadratic_equation(1.0, -3, 2.0)
        assert {complex(x1), complex(x2)} == {2, 1}

    @pytest.mark.parametrize("a, b, c", [
        (1, -3, 2),
        (2, 3, -5),
        (1, 2, 5),
        (-3, 1, 7),
        (0.5, -0.25, 4),
        (1e-3, 10, 1),
        (7, 1e4, -2),
    ])
    def test_matches_numpy(self, a, b, c):
        roots = solve_quadratic_equation(a, b, c)
        assert_matches_numpy(roots, a, b, c)


class TestComplexCoefficients:
    """Quadratics with complex coefficients."""

    def test_known_roots(self):
        x1, x2 = solve_quadratic_equation(1, of_cartesian(-4, -1), of_cartesian(5, 5))
        assert x1.equals(of_cartesian(3, -1), MANY_CALCULATIONS_EPS)
        assert x2.equals(of_cartesian(1, 2), MANY_CALCULATIONS_EPS)

    def test_builtin_complex_coefficients(self):
        x1, x2 = solve_quadratic_equation(1, -4 - 1j, 5 + 5j)
        assert residual(1, -4 - 1j, 5 + 5j, x1) < MANY_CALCULATIONS_EPS
        assert residual(1, -4 - 1j, 5 + 5j, x2) < MANY_CALCULATIONS_EPS
        assert_matches_numpy((x1, x2), 1, -4 - 1j, 5 + 5j)

    def test_double_root(self):
        x1, x2 = solve_quadratic_equation(ONE_CARTESIAN, of_cartesian(-2, -2), of_cartesian(0, 2))
        assert x1 == of_cartesian(1, 1)
        assert x2 == of_cartesian(1, 1)

    def test_no_linear_term(self, assert_complex_close):
        x1, x2 = solve_quadratic_equation(of(1), ZERO_CARTESIAN, of(4))
        assert_complex_close(x1, 0.0, 2.0, eps=1e-15)
        assert_complex_close(x2, 0.0, -2.0, eps=1e-15)

    def test_no_constant_term(self):
        x1, x2 = solve_quadratic_equation(of_cartesian(0, 1), of_cartesian(2, 0), ZERO_POLAR)
        assert x1 is ZERO_CARTESIAN
        assert x2 == of_cartesian(0, 2)

    def test_double_root_zero(self):
        x1, x2 = solve_quadratic_equation(of_cartesian(1, 1), ZERO_POLAR, 0j)
        assert x1.is_zero() and x2.is_zero()

    @pytest.mark.parametrize("a, b, c", [
        (1, 2 + 3j, -1 + 1j),
        (2 - 1j, 0.5j, 3),
        (1j, -2, 4 - 4j),
        (3 + 4j, -1 - 1j, 1e-3 + 2j),
        (1, 1e4 + 1e4j, 1 + 1j),
    ])
    def test_matches_numpy(self, a, b, c):
        roots = solve_quadratic_equation(a, b, c)
        assert_matches_numpy(roots, a, b, c)
        for root in roots:
            assert residual(a, b, c, root) < 1e-9 * max(1.0, abs(complex(b)) ** 2)


class TestQuadraticErrors:
    """Input validation."""

    def test_zero_leading_coefficient(self, assert_invalid_argument):
        assert_invalid_argument(solve_quadratic_equation, 0, 1, 2, expected_field="a")
        assert_invalid_argument(solve_quadratic_equation, ZERO_POLAR, 1j, 2, expected_field="a")

    def test_non_finite_coefficient(self):
        with pytest.raises(InvalidArgumentError):
            solve_quadratic_equation(1, math.nan, 2)
        with pytest.raises(InvalidArgumentError):
            solve_quadratic_equation(1, complex(math.inf, 0), 2)
