"""
String rendering for complex numbers.

Every renderer takes an optional formatter for the numeric fields: a callable
float -> str, or a format spec string such as ".3f". Without one, the
DISPLAY_FORMAT setting is used, then repr().

Examples:
    cartesian_form(z)          "+3.0 - 5.0i"
    cartesian_coordinates(z)   "(3.0, -5.0)"
    polar_form(z)              "2.0 * (cos(0.5) + i*sin(0.5))"
    polar_coordinates(z)       "(r= 2.0, theta= 0.5)"
    eulerian_form(z)           "2.0 * e^(0.5i)"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Union

from ..core.config import get_settings

if TYPE_CHECKING:
    from .value import Complex

Formatter = Union[Callable[[float], str], str, None]


def resolve_formatter(formatter: Formatter = None) -> Callable[[float], str]:
    """Turn a Formatter into a callable, falling back to the configured default."""
    if formatter is None:
        formatter = get_settings().DISPLAY_FORMAT
    if formatter is None:
        return repr
    if isinstance(formatter, str):
        spec = formatter
        return lambda value: format(value, spec)
    return formatter


def _sign(value: float) -> str:
    # -0.0 renders as "+0.0"
    return "+" if value >= 0 else "-"


def cartesian_form(z: Complex, formatter: Formatter = None) -> str:
    fmt = resolve_formatter(formatter)
    real = z.real_value()
    imaginary = z.imaginary_value()
    return (
        f"{_sign(real)}{fmt(abs(real))} "
        f"{_sign(imaginary)} {fmt(abs(imaginary))}i"
    )


def cartesian_coordinates(z: Complex, formatter: Formatter = None) -> str:
    fmt = resolve_formatter(formatter)
    return f"({fmt(z.real_value())}, {fmt(z.imaginary_value())})"


def polar_form(z: Complex, formatter: Formatter = None) -> str:
    fmt = resolve_formatter(formatter)
    argument = fmt(z.argument_value())
    return f"{fmt(z.modulus_value())} * (cos({argument}) + i*sin({argument}))"


def polar_coordinates(z: Complex, formatter: Formatter = None) -> str:
    fmt = resolve_formatter(formatter)
    return f"(r= {fmt(z.modulus_value())}, theta= {fmt(z.argument_value())})"


def eulerian_form(z: Complex, formatter: Formatter = None) -> str:
    fmt = resolve_formatter(formatter)
    return f"{fmt(z.modulus_value())} * e^({fmt(z.argument_value())}i)"


def cartesian_tex(z: Complex, formatter: Formatter = None) -> str:
    """LaTeX for a + bi, dropping zero parts and unit coefficients."""
    fmt = resolve_formatter(formatter)
    real = z.real_value()
    imaginary = z.imaginary_value()
    if imaginary == 0:
        return fmt(real)
    imag_str = "" if abs(imaginary) == 1 else fmt(abs(imaginary))
    if real == 0:
        sign = "-" if imaginary < 0 else ""
        return f"{sign}{imag_str}i"
    sign = "+" if imaginary > 0 else "-"
    return f"{fmt(real)} {sign} {imag_str}i"


def polar_tex(z: Complex, formatter: Formatter = None) -> str:
    """LaTeX for r e^{i theta}."""
    fmt = resolve_formatter(formatter)
    if z.modulus_value() == 0:
        return fmt(0.0)
    return rf"{fmt(z.modulus_value())} e^{{{fmt(z.argument_value())} i}}"
