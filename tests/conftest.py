"""
Shared pytest fixtures for testing the complexalg value types.

This module provides:
- Fixtures for comparing complex numbers within a tolerance
- Utilities for testing input validation
- Settings isolation for configuration and rendering tests
"""

import pytest
from typing import Any, Callable

from complexalg.core.config import get_settings
from complexalg.core.errors import InvalidArgumentError
from complexalg.math.floating_point import DEFAULT_EPS
from complexalg.math.value import Complex


@pytest.fixture
def assert_complex_close():
    """Helper to assert that a complex number matches expected Cartesian parts."""
    def _assert_close(
        actual: Complex,
        real: float,
        imaginary: float,
        eps: float = DEFAULT_EPS,
    ) -> None:
        """
        Assert that actual lies within eps of real + imaginary*i, part by part.

        Args:
            actual: The computed value
            real: Expected real part
            imaginary: Expected imaginary part
            eps: Tolerance on each part
        """
        assert abs(actual.real_value() - real) < eps, (
            f"Real part {actual.real_value()!r} != {real!r} (eps={eps})"
        )
        assert abs(actual.imaginary_value() - imaginary) < eps, (
            f"Imaginary part {actual.imaginary_value()!r} != {imaginary!r} (eps={eps})"
        )

    return _assert_close


@pytest.fixture
def assert_invalid_argument():
    """Helper to assert that a call is rejected with InvalidArgumentError."""
    def _assert_invalid(
        func: Callable[..., Any],
        *args: Any,
        expected_field: str | None = None,
    ) -> InvalidArgumentError:
        """
        Assert that calling func(*args) raises InvalidArgumentError.

        Args:
            func: Factory, constructor or operation to call
            args: Invalid arguments
            expected_field: Expected field name in error details (optional)

        Returns:
            The InvalidArgumentError that was raised
        """
        with pytest.raises(InvalidArgumentError) as exc_info:
            func(*args)

        error = exc_info.value
        if expected_field:
            assert error.details.get("field") == expected_field, (
                f"Expected error for field '{expected_field}', got {error.details.get('field')!r}"
            )

        return error

    return _assert_invalid


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings before and after a test that sets COMPLEXALG_* variables."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
