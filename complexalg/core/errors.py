"""
Library exceptions.

Every failure raised by complexalg derives from ComplexError and carries a
human-readable message plus a details dict. The concrete classes also derive
from the matching builtin exception so callers can catch either.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError


class ComplexError(Exception):
    """Base exception for complexalg errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(ComplexError, ValueError):
    """Raised when an argument is rejected before any computation starts"""

    def __init__(self, message: str, field: Optional[str] = None, **details: Any):
        if field:
            details["field"] = field
        super().__init__(message=message, details=details)

    @classmethod
    def from_validation_error(cls, model: str, error: ValidationError) -> "InvalidArgumentError":
        """Translate a pydantic ValidationError raised by a complex model."""
        errors = error.errors(include_url=False)
        reasons = "; ".join(
            f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in errors
        )
        fields = [str(e["loc"][0]) for e in errors if e["loc"]]
        return cls(
            f"Invalid {model}: {reasons}",
            field=fields[0] if fields else None,
            model=model,
            errors=errors,
        )


class DomainError(ComplexError, ArithmeticError):
    """Raised when an operation is mathematically undefined for its operands"""


class ComplexZeroDivisionError(DomainError, ZeroDivisionError):
    """Raised when dividing by, or inverting, the complex zero"""

    def __init__(self, message: str = "Unable to divide by: 0 + 0i"):
        super().__init__(message=message)


class RootIndexError(DomainError):
    """Raised when a root index k falls outside [0, n)"""

    def __init__(self, n: int, k: int):
        super().__init__(
            message=f"Root index k={k} must be in range [0, {n})",
            details={"n": n, "k": k},
        )


class UnsupportedOperationError(ComplexError):
    """Raised when an operation has no defined result, e.g. an empty product"""


class MissingOperandsError(ComplexError, TypeError):
    """Raised when a collection of operands, or one of its elements, is absent"""

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"{operation}() requires a collection of complex numbers, got None",
            details={"operation": operation},
        )
