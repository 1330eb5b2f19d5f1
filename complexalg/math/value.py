"""
Base Complex class for the complexalg value types.

This module provides the representation-independent half of a complex number:
- Representation tag (Cartesian or Polar)
- Addition family, computed once in Cartesian terms
- Powers and roots, computed once in Polar terms
- Operator overloading
- Rendering hooks

Concrete representations live in numeric.py and implement the accessors, the
predicates and the multiplication family.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from ..core.errors import ComplexZeroDivisionError, InvalidArgumentError, RootIndexError
from . import formatting
from .floating_point import DEFAULT_EPS
from .formatting import Formatter

TWO_PI = 2 * math.pi


class Representation(str, Enum):
    """How a complex number stores its two fields."""

    CARTESIAN = "cartesian"  # (real, imaginary)
    POLAR = "polar"  # (modulus, argument)


def check_root_degree(n: Any) -> int:
    """Reject root degrees that are not positive integers."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(
            f"Root degree must be an integer, got {type(n).__name__}", field="n"
        )
    if n <= 0:
        raise InvalidArgumentError(f"Root degree must be positive, got {n}", field="n")
    return n


def check_root_index(n: int, k: Any) -> int:
    """Reject root indexes outside [0, n). The degree must already be valid."""
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidArgumentError(
            f"Root index must be an integer, got {type(k).__name__}", field="k"
        )
    if k < 0 or k >= n:
        raise RootIndexError(n, k)
    return k


class Complex(ABC):
    """
    Base class for complex numbers.

    Provides:
    - Addition and subtraction (always Cartesian)
    - pow/root/all_roots (always Polar)
    - Exact equality across representations
    - Python operators delegating to the named operations

    Subclasses must implement:
    - representation: Class variable tagging the storage form
    - All abstract methods

    Note: Concrete subclasses inherit from both BaseModel and Complex,
    e.g., `class CartesianComplex(BaseModel, Complex):`. Complex itself does
    not inherit from BaseModel to avoid MRO conflicts, so __eq__, __hash__ and
    __str__ are redefined on the concrete classes, ahead of BaseModel's.
    """

    representation: ClassVar[Representation]

    # Accessors

    @abstractmethod
    def real_value(self) -> float:
        """Real part."""

    @abstractmethod
    def imaginary_value(self) -> float:
        """Imaginary part."""

    @abstractmethod
    def modulus_value(self) -> float:
        """Modulus, never negative."""

    @abstractmethod
    def argument_value(self) -> float:
        """Main argument, in (-pi, pi]."""

    def positive_argument_value(self) -> float:
        """Main argument shifted into [0, 2*pi)."""
        angle = self.argument_value()
        if angle < 0:
            angle += TWO_PI
            if angle >= TWO_PI:
                # -tiny + 2*pi rounds up to 2*pi
                angle = 0.0
        return angle

    @abstractmethod
    def conjugate(self) -> Complex:
        """Complex conjugate, same representation."""

    @abstractmethod
    def negate(self) -> Complex:
        """Additive inverse, same representation."""

    # Predicates (eps=None means exact comparison)

    @abstractmethod
    def is_zero(self, eps: float | None = None) -> bool:
        pass

    @abstractmethod
    def is_one(self) -> bool:
        pass

    @abstractmethod
    def has_real_only(self, eps: float | None = None) -> bool:
        pass

    @abstractmethod
    def has_imaginary_only(self, eps: float | None = None) -> bool:
        pass

    @abstractmethod
    def has_null_argument(self, eps: float | None = None) -> bool:
        pass

    # Addition family

    def _plus(self, other_real: float, other_imaginary: float) -> Complex:
        # Import here to avoid circular imports
        from .numeric import CartesianComplex

        real = self.real_value() + other_real
        imaginary = self.imaginary_value() + other_imaginary
        return CartesianComplex(real, imaginary)

    def plus(self, other: Complex) -> Complex:
        return self._plus(other.real_value(), other.imaginary_value())

    def plus_real(self, amount: float) -> Complex:
        return self._plus(amount, 0.0)

    def plus_imaginary(self, amount: float) -> Complex:
        return self._plus(0.0, amount)

    def minus(self, other: Complex) -> Complex:
        return self._plus(-other.real_value(), -other.imaginary_value())

    def minus_real(self, amount: float) -> Complex:
        return self._plus(-amount, 0.0)

    def minus_imaginary(self, amount: float) -> Complex:
        return self._plus(0.0, -amount)

    # Multiplication family

    @abstractmethod
    def multiply_by(self, other: Complex) -> Complex:
        pass

    @abstractmethod
    def multiply_by_real(self, amount: float) -> Complex:
        pass

    @abstractmethod
    def multiply_by_imaginary(self, amount: float) -> Complex:
        pass

    @abstractmethod
    def divide_by(self, other: Complex) -> Complex:
        """Raises ComplexZeroDivisionError when other is 0 + 0i."""

    @abstractmethod
    def divide_by_real(self, amount: float) -> Complex:
        pass

    @abstractmethod
    def divide_by_imaginary(self, amount: float) -> Complex:
        pass

    @abstractmethod
    def reciprocal(self) -> Complex:
        """Raises ComplexZeroDivisionError when self is 0 + 0i."""

    # Powers and roots

    def pow(self, exponent: float) -> Complex:
        """
        Raise to a real exponent using De Moivre's formula.

        Args:
            exponent: Real exponent

        Returns:
            PolarComplex with modulus |z|^exponent and argument exponent * arg(z)

        Raises:
            ComplexZeroDivisionError: If self is zero and exponent is negative
        """
        from .numeric import PolarComplex

        if exponent < 0 and self.is_zero():
            raise ComplexZeroDivisionError(
                f"Unable to raise 0 + 0i to the negative power {exponent}"
            )
        modulus = self.modulus_value() ** exponent
        argument = exponent * self.argument_value()
        return PolarComplex(modulus, argument)

    def root(self, n: int, k: int) -> Complex:
        """
        k-th of the n complex n-th roots.

        Args:
            n: Root degree, a positive integer
            k: Root index in [0, n)

        Returns:
            PolarComplex with modulus |z|^(1/n) and argument (arg(z) + 2*pi*k) / n

        Raises:
            InvalidArgumentError: If n is not a positive integer
            RootIndexError: If k is outside [0, n)
        """
        from .numeric import PolarComplex

        check_root_degree(n)
        check_root_index(n, k)
        modulus = self.modulus_value() ** (1.0 / n)
        argument = (self.argument_value() + TWO_PI * k) / n
        return PolarComplex(modulus, argument)

    def all_roots(self, n: int) -> list[Complex]:
        """All n complex n-th roots, ordered by increasing k."""
        check_root_degree(n)
        return [self.root(n, k) for k in range(n)]

    def sqrt(self, k: int = 0) -> Complex:
        return self.root(2, k)

    def all_sqrts(self) -> list[Complex]:
        return self.all_roots(2)

    def cbrt(self, k: int = 0) -> Complex:
        return self.root(3, k)

    def all_cbrts(self) -> list[Complex]:
        return self.all_roots(3)

    # Equality

    @abstractmethod
    def equals(self, other: Complex, epsilon: float = DEFAULT_EPS) -> bool:
        """Tolerant equality in the pair space of this representation."""

    def exactly_equals(self, other: Complex) -> bool:
        """Exact equality of the real/imaginary pairs or of the modulus/argument pairs."""
        return (
            self.real_value() == other.real_value()
            and self.imaginary_value() == other.imaginary_value()
        ) or (
            self.modulus_value() == other.modulus_value()
            and self.argument_value() == other.argument_value()
        )

    def _equals_python_number(self, other: int | float | complex) -> bool:
        other = complex(other)
        return self.real_value() == other.real and self.imaginary_value() == other.imag

    def _hash(self) -> int:
        # Consistent with builtin complex and float hashing. Values equal only through
        # the modulus/argument pair (Polar vs Cartesian rounding) may hash differently.
        return hash(complex(self.real_value(), self.imaginary_value()))

    # String representations

    @abstractmethod
    def to_string(self, formatter: Formatter = None) -> str:
        """Render in the native representation."""

    @abstractmethod
    def to_tex(self, formatter: Formatter = None) -> str:
        """Render as LaTeX in the native representation."""

    def cartesian_form(self, formatter: Formatter = None) -> str:
        return formatting.cartesian_form(self, formatter)

    def cartesian_coordinates(self, formatter: Formatter = None) -> str:
        return formatting.cartesian_coordinates(self, formatter)

    def polar_form(self, formatter: Formatter = None) -> str:
        return formatting.polar_form(self, formatter)

    def polar_coordinates(self, formatter: Formatter = None) -> str:
        return formatting.polar_coordinates(self, formatter)

    def eulerian_form(self, formatter: Formatter = None) -> str:
        return formatting.eulerian_form(self, formatter)

    # Conversion helpers

    def to_python(self) -> complex:
        """Convert to Python complex."""
        return complex(self.real_value(), self.imaginary_value())

    def __complex__(self) -> complex:
        return self.to_python()

    # Operator overloading (Python magic methods)

    @staticmethod
    def _promote(value: complex | int | float) -> Complex:
        from .algebra import as_complex

        return as_complex(value)

    def __add__(self, other: Any) -> Complex:
        """Addition: self + other"""
        if isinstance(other, Complex):
            return self.plus(other)
        elif isinstance(other, (int, float)):
            return self.plus_real(float(other))
        elif isinstance(other, complex):
            return self.plus(self._promote(other))
        else:
            return NotImplemented

    def __radd__(self, other: Any) -> Complex:
        """Right addition: other + self"""
        return self.__add__(other)

    def __sub__(self, other: Any) -> Complex:
        """Subtraction: self - other"""
        if isinstance(other, Complex):
            return self.minus(other)
        elif isinstance(other, (int, float)):
            return self.minus_real(float(other))
        elif isinstance(other, complex):
            return self.minus(self._promote(other))
        else:
            return NotImplemented

    def __rsub__(self, other: Any) -> Complex:
        """Right subtraction: other - self"""
        if isinstance(other, (int, float, complex)):
            return self._promote(other).minus(self)
        return NotImplemented

    def __mul__(self, other: Any) -> Complex:
        """Multiplication: self * other"""
        if isinstance(other, Complex):
            return self.multiply_by(other)
        elif isinstance(other, (int, float)):
            return self.multiply_by_real(float(other))
        elif isinstance(other, complex):
            return self.multiply_by(self._promote(other))
        else:
            return NotImplemented

    def __rmul__(self, other: Any) -> Complex:
        """Right multiplication: other * self"""
        if isinstance(other, (int, float)):
            return self.multiply_by_real(float(other))
        elif isinstance(other, complex):
            return self._promote(other).multiply_by(self)
        return NotImplemented

    def __truediv__(self, other: Any) -> Complex:
        """Division: self / other"""
        if isinstance(other, Complex):
            return self.divide_by(other)
        elif isinstance(other, (int, float)):
            return self.divide_by_real(float(other))
        elif isinstance(other, complex):
            return self.divide_by(self._promote(other))
        else:
            return NotImplemented

    def __rtruediv__(self, other: Any) -> Complex:
        """Right division: other / self"""
        if isinstance(other, (int, float, complex)):
            return self._promote(other).divide_by(self)
        return NotImplemented

    def __pow__(self, exponent: Any) -> Complex:
        """Exponentiation with a real exponent: self ** exponent"""
        if isinstance(exponent, (int, float)):
            return self.pow(float(exponent))
        return NotImplemented

    def __neg__(self) -> Complex:
        """Unary negation: -self"""
        return self.negate()

    def __pos__(self) -> Complex:
        """Unary positive: +self"""
        return self

    def __abs__(self) -> float:
        """Absolute value: abs(self) is the modulus"""
        return self.modulus_value()
