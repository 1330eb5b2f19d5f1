"""Core infrastructure: configuration, errors and logging."""

from .config import Settings, get_settings, settings
from .errors import (
    ComplexError,
    ComplexZeroDivisionError,
    DomainError,
    InvalidArgumentError,
    MissingOperandsError,
    RootIndexError,
    UnsupportedOperationError,
)
from .logging import OperationLogger, get_operation_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "ComplexError",
    "ComplexZeroDivisionError",
    "DomainError",
    "InvalidArgumentError",
    "MissingOperandsError",
    "RootIndexError",
    "UnsupportedOperationError",
    "OperationLogger",
    "get_operation_logger",
    "setup_logging",
]
