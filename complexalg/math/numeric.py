"""
Concrete complex number representations: CartesianComplex, PolarComplex.

Both are frozen pydantic models. Field constraints enforce finiteness and a
non-negative modulus on every construction, including values produced by
operations; the Polar argument is normalized to (-pi, pi] by a validator.

Multiplicative operations are implemented per representation: the receiver's
representation decides how the operation executes, after projecting the other
operand through its accessors. Polar form turns products and quotients into
additions and subtractions of angles.
"""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from ..core.errors import ComplexZeroDivisionError, InvalidArgumentError
from . import formatting
from .floating_point import DEFAULT_EPS, approx_equal, approx_zero
from .formatting import Formatter
from .value import TWO_PI, Complex, Representation

HALF_PI = math.pi / 2


def normalize_argument(angle: float) -> float:
    """
    Wrap an angle into (-pi, pi].

    A wrapped value landing on -pi becomes +pi, and a zero angle is always +0.0.
    """
    wrapped = math.fmod(angle, TWO_PI)  # (-2*pi, 2*pi), sign of angle
    if wrapped > math.pi:
        wrapped -= TWO_PI
    elif wrapped <= -math.pi:
        wrapped += TWO_PI
    if wrapped == 0:
        return 0.0
    return wrapped


class CartesianComplex(BaseModel, Complex):
    """
    Complex number stored as (real, imaginary).

    Use the factories in algebra.py (of, of_cartesian) from client code.
    """

    model_config = ConfigDict(frozen=True)

    representation: ClassVar[Representation] = Representation.CARTESIAN

    real: float = Field(allow_inf_nan=False, description="The real part")
    imaginary: float = Field(allow_inf_nan=False, description="The imaginary part")

    def __init__(self, real: float = 0.0, imaginary: float = 0.0, **kwargs):
        """
        Initialize a Cartesian complex number.

        Args:
            real: Real part
            imaginary: Imaginary part (default 0)

        Raises:
            InvalidArgumentError: If a part is NaN, infinite or not a number
        """
        try:
            super().__init__(real=real, imaginary=imaginary, **kwargs)
        except ValidationError as exc:
            raise InvalidArgumentError.from_validation_error(
                "cartesian complex number", exc
            ) from exc

    # Accessors

    def real_value(self) -> float:
        return self.real

    def imaginary_value(self) -> float:
        return self.imaginary

    def modulus_value(self) -> float:
        return math.hypot(self.real, self.imaginary)

    def argument_value(self) -> float:
        angle = math.atan2(self.imaginary, self.real)
        if angle == -math.pi:
            # atan2(-0.0, x < 0)
            return math.pi
        if angle == 0:
            return 0.0
        return angle

    def conjugate(self) -> CartesianComplex:
        imaginary = 0.0 if self.imaginary == 0 else -self.imaginary
        return CartesianComplex(self.real, imaginary)

    def negate(self) -> CartesianComplex:
        real = 0.0 if self.real == 0 else -self.real
        imaginary = 0.0 if self.imaginary == 0 else -self.imaginary
        return CartesianComplex(real, imaginary)

    # Predicates

    def is_zero(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.real == 0 and self.imaginary == 0
        return approx_zero(self.real, eps) and approx_zero(self.imaginary, eps)

    def is_one(self) -> bool:
        return self.real == 1 and approx_zero(self.imaginary)

    def has_real_only(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.imaginary == 0
        return approx_zero(self.imaginary, eps)

    def has_imaginary_only(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.real == 0
        return approx_zero(self.real, eps)

    def has_null_argument(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.real >= 0 and self.imaginary == 0
        return self.real >= -eps and approx_zero(self.imaginary, eps)

    # Multiplication family

    def multiply_by(self, other: Complex) -> Complex:
        if self.is_zero() or other.is_zero():
            return ZERO_CARTESIAN
        if self.is_one():
            return other
        if other.is_one():
            return self

        if other.has_real_only():
            return self.multiply_by_real(other.real_value())
        if other.has_imaginary_only():
            return self.multiply_by_imaginary(other.imaginary_value())

        a1, b1 = self.real, self.imaginary
        a2, b2 = other.real_value(), other.imaginary_value()
        # (a1 + b1 i)(a2 + b2 i) = (a1 a2 - b1 b2) + (a1 b2 + a2 b1) i
        return CartesianComplex(a1 * a2 - b1 * b2, a1 * b2 + a2 * b1)

    def multiply_by_real(self, amount: float) -> Complex:
        if self.is_zero() or amount == 0:
            return ZERO_CARTESIAN
        if amount == 1:
            return self
        # (a + bi) * c = ac + (bc) i
        return CartesianComplex(self.real * amount, self.imaginary * amount)

    def multiply_by_imaginary(self, amount: float) -> Complex:
        if self.is_zero() or amount == 0:
            return ZERO_CARTESIAN
        # (a + bi) * (di) = -bd + (ad) i
        return CartesianComplex(-self.imaginary * amount, self.real * amount)

    def _divide_by(self, other_real: float, other_imaginary: float) -> Complex:
        denominator = other_real * other_real + other_imaginary * other_imaginary
        a1, b1 = self.real, self.imaginary
        real = (a1 * other_real + b1 * other_imaginary) / denominator
        imaginary = (b1 * other_real - a1 * other_imaginary) / denominator
        return CartesianComplex(real, imaginary)

    def divide_by(self, other: Complex) -> Complex:
        if other.is_zero():
            raise ComplexZeroDivisionError()
        if self.is_zero():
            return ZERO_CARTESIAN
        if other.is_one():
            return self

        if other.has_real_only():
            return self.divide_by_real(other.real_value())
        if other.has_imaginary_only():
            return self.divide_by_imaginary(other.imaginary_value())
        return self._divide_by(other.real_value(), other.imaginary_value())

    def divide_by_real(self, amount: float) -> Complex:
        if amount == 0:
            raise ComplexZeroDivisionError()
        if self.is_zero():
            return ZERO_CARTESIAN
        if amount == 1:
            return self
        # (a + bi) / c = a/c + (b/c) i
        return CartesianComplex(self.real / amount, self.imaginary / amount)

    def divide_by_imaginary(self, amount: float) -> Complex:
        if amount == 0:
            raise ComplexZeroDivisionError()
        if self.is_zero():
            return ZERO_CARTESIAN
        # (a + bi) / (di) = b/d - (a/d) i
        return CartesianComplex(self.imaginary / amount, -self.real / amount)

    def reciprocal(self) -> Complex:
        if self.is_zero():
            raise ComplexZeroDivisionError()
        denominator = self.real * self.real + self.imaginary * self.imaginary
        imaginary = 0.0 if self.imaginary == 0 else -self.imaginary / denominator
        return CartesianComplex(self.real / denominator, imaginary)

    # Equality

    def equals(self, other: Complex, epsilon: float = DEFAULT_EPS) -> bool:
        real_difference = abs(self.real - other.real_value())
        imaginary_difference = abs(self.imaginary - other.imaginary_value())
        return real_difference < epsilon and imaginary_difference < epsilon

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.exactly_equals(other)
        if isinstance(other, (int, float, complex)):
            return self._equals_python_number(other)
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash()

    # String representations

    def to_string(self, formatter: Formatter = None) -> str:
        return formatting.cartesian_form(self, formatter)

    def to_tex(self, formatter: Formatter = None) -> str:
        return formatting.cartesian_tex(self, formatter)

    def __str__(self) -> str:
        """String representation (for str() builtin)."""
        return self.to_string()


class PolarComplex(BaseModel, Complex):
    """
    Complex number stored as (modulus, argument).

    The modulus is never negative and the argument is kept in (-pi, pi].
    A zero modulus always carries a zero argument.
    Use the factory in algebra.py (of_polar) from client code.
    """

    model_config = ConfigDict(frozen=True)

    representation: ClassVar[Representation] = Representation.POLAR

    modulus: float = Field(allow_inf_nan=False, description="The modulus, never negative")
    argument: float = Field(allow_inf_nan=False, description="The main argument, in (-pi, pi]")

    def __init__(self, modulus: float = 0.0, argument: float = 0.0, **kwargs):
        """
        Initialize a Polar complex number.

        Args:
            modulus: Distance from the origin, >= 0
            argument: Angle in radians, any finite value (normalized to (-pi, pi])

        Raises:
            InvalidArgumentError: If a field is NaN, infinite or not a number,
                or if the modulus is negative
        """
        try:
            super().__init__(modulus=modulus, argument=argument, **kwargs)
        except ValidationError as exc:
            raise InvalidArgumentError.from_validation_error(
                "polar complex number", exc
            ) from exc

    @field_validator("modulus")
    @classmethod
    def _check_modulus(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Modulus must be positive or equal to 0")
        return 0.0 if value == 0 else value

    @field_validator("argument")
    @classmethod
    def _normalize_argument(cls, value: float, info: ValidationInfo) -> float:
        if info.data.get("modulus") == 0:
            return 0.0
        return normalize_argument(value)

    @classmethod
    def from_real(cls, real: float) -> PolarComplex:
        """Polar form of a real number: negative reals get argument pi."""
        if real >= 0:
            return cls(real, 0.0)
        return cls(-real, math.pi)

    # Accessors

    def real_value(self) -> float:
        return self.modulus * math.cos(self.argument)

    def imaginary_value(self) -> float:
        return self.modulus * math.sin(self.argument)

    def modulus_value(self) -> float:
        return self.modulus

    def argument_value(self) -> float:
        return self.argument

    def conjugate(self) -> PolarComplex:
        # cos(-t) = cos(t), sin(-t) = -sin(t); pi maps back onto pi
        return PolarComplex(self.modulus, -self.argument)

    def negate(self) -> PolarComplex:
        # cos(t + pi) = -cos(t), sin(t + pi) = -sin(t)
        return PolarComplex(self.modulus, self.argument + math.pi)

    # Predicates

    def is_zero(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.modulus == 0
        return approx_zero(self.modulus, eps)

    def is_one(self) -> bool:
        return self.modulus == 1 and approx_zero(self.argument)

    def has_real_only(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.argument == 0 or self.argument == math.pi
        return (
            approx_zero(self.modulus, eps)
            or approx_zero(self.argument, eps)
            or approx_equal(abs(self.argument), math.pi, eps)
        )

    def has_imaginary_only(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.modulus == 0 or abs(self.argument) == HALF_PI
        return approx_zero(self.modulus, eps) or approx_equal(abs(self.argument), HALF_PI, eps)

    def has_null_argument(self, eps: float | None = None) -> bool:
        if eps is None:
            return self.argument == 0
        return approx_zero(self.argument, eps)

    # Multiplication family

    def _multiply_by(self, other_modulus: float, other_argument: float) -> PolarComplex:
        return PolarComplex(self.modulus * other_modulus, self.argument + other_argument)

    def multiply_by(self, other: Complex) -> Complex:
        if self.is_zero() or other.is_zero():
            return ZERO_POLAR
        if self.is_one():
            return other
        if other.is_one():
            return self

        return self._multiply_by(other.modulus_value(), other.argument_value())

    def multiply_by_real(self, amount: float) -> Complex:
        if self.is_zero() or amount == 0:
            return ZERO_POLAR
        if amount == 1:
            return self

        if amount > 0:
            return self._multiply_by(amount, 0.0)
        return self._multiply_by(-amount, math.pi)

    def multiply_by_imaginary(self, amount: float) -> Complex:
        if self.is_zero() or amount == 0:
            return ZERO_POLAR

        if amount > 0:
            return self._multiply_by(amount, HALF_PI)
        return self._multiply_by(-amount, -HALF_PI)

    def _divide_by(self, other_modulus: float, other_argument: float) -> PolarComplex:
        return PolarComplex(self.modulus / other_modulus, self.argument - other_argument)

    def divide_by(self, other: Complex) -> Complex:
        if other.is_zero():
            raise ComplexZeroDivisionError()
        if self.is_zero():
            return ZERO_POLAR
        if other.is_one():
            return self

        return self._divide_by(other.modulus_value(), other.argument_value())

    def divide_by_real(self, amount: float) -> Complex:
        if amount == 0:
            raise ComplexZeroDivisionError()
        if self.is_zero():
            return ZERO_POLAR
        if amount == 1:
            return self

        if amount > 0:
            return self._divide_by(amount, 0.0)
        return self._divide_by(-amount, math.pi)

    def divide_by_imaginary(self, amount: float) -> Complex:
        if amount == 0:
            raise ComplexZeroDivisionError()
        if self.is_zero():
            return ZERO_POLAR

        if amount > 0:
            return self._divide_by(amount, HALF_PI)
        return self._divide_by(-amount, -HALF_PI)

    def reciprocal(self) -> Complex:
        if self.is_zero():
            raise ComplexZeroDivisionError()
        return PolarComplex(1.0 / self.modulus, -self.argument)

    # Equality

    def equals(self, other: Complex, epsilon: float = DEFAULT_EPS) -> bool:
        modulus_difference = abs(self.modulus - other.modulus_value())
        argument_difference = abs(self.argument - other.argument_value())
        if argument_difference > math.pi:
            # measured around the circle: pi and -pi + d are d apart
            argument_difference = TWO_PI - argument_difference
        return modulus_difference < epsilon and argument_difference < epsilon

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.exactly_equals(other)
        if isinstance(other, (int, float, complex)):
            return self._equals_python_number(other)
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash()

    # String representations

    def to_string(self, formatter: Formatter = None) -> str:
        return formatting.polar_form(self, formatter)

    def to_tex(self, formatter: Formatter = None) -> str:
        return formatting.polar_tex(self, formatter)

    def __str__(self) -> str:
        """String representation (for str() builtin)."""
        return self.to_string()


# Identity constants

ZERO_CARTESIAN = CartesianComplex(0.0, 0.0)
ZERO_POLAR = PolarComplex(0.0, 0.0)
ONE_CARTESIAN = CartesianComplex(1.0, 0.0)
ONE_POLAR = PolarComplex(1.0, 0.0)
IMAGINARY_UNIT = CartesianComplex(0.0, 1.0)
IMAGINARY_UNIT_NEGATIVE = CartesianComplex(0.0, -1.0)
