"""Tests for the exception hierarchy."""

import math
import pytest
from pydantic import ValidationError

from complexalg.core.errors import (
    ComplexError,
    ComplexZeroDivisionError,
    DomainError,
    InvalidArgumentError,
    MissingOperandsError,
    RootIndexError,
    UnsupportedOperationError,
)
from complexalg.math.algebra import of_cartesian, of_polar


class TestHierarchy:
    """Every error is a ComplexError and the matching builtin exception."""

    @pytest.mark.parametrize("error_class, builtin", [
        (InvalidArgumentError, ValueError),
        (DomainError, ArithmeticError),
        (ComplexZeroDivisionError, ZeroDivisionError),
        (ComplexZeroDivisionError, DomainError),
        (RootIndexError, DomainError),
        (MissingOperandsError, TypeError),
        (UnsupportedOperationError, ComplexError),
    ])
    def test_subclassing(self, error_class, builtin):
        assert issubclass(error_class, ComplexError)
        assert issubclass(error_class, builtin)


class TestErrorDetails:
    """Test messages and details."""

    def test_complex_error(self):
        error = ComplexError("boom", {"key": 1})
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.details == {"key": 1}

    def test_complex_error_default_details(self):
        assert ComplexError("boom").details == {}

    def test_invalid_argument_field(self):
        error = InvalidArgumentError("bad", field="n", value=3)
        assert error.details == {"field": "n", "value": 3}

    def test_zero_division_default_message(self):
        assert str(ComplexZeroDivisionError()) == "Unable to divide by: 0 + 0i"

    def test_root_index_error(self):
        error = RootIndexError(3, 4)
        assert error.message == "Root index k=4 must be in range [0, 3)"
        assert error.details == {"n": 3, "k": 4}

    def test_missing_operands_default_message(self):
        error = MissingOperandsError("sum_all")
        assert error.message == "sum_all() requires a collection of complex numbers, got None"
        assert error.details == {"operation": "sum_all"}


class TestValidationTranslation:
    """pydantic ValidationError never escapes the public API."""

    def test_translated_error(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            of_cartesian(math.nan, 1)
        error = exc_info.value
        assert error.message.startswith("Invalid cartesian complex number: real:")
        assert error.details["field"] == "real"
        assert error.details["errors"][0]["loc"] == ("real",)
        assert isinstance(error.__cause__, ValidationError)
        assert not isinstance(error, ValidationError)

    def test_all_failures_reported(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            of_polar(-1, math.inf)
        error = exc_info.value
        assert error.details["field"] == "modulus"
        locations = [e["loc"][0] for e in error.details["errors"]]
        assert locations == ["modulus", "argument"]
