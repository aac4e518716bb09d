"""
Errors raised by dialect implementations.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class UnsupportedDialectOperationError(DialectError):
    """Raised when an operation needs a capability the dialect does not have."""

    def __init__(self, dialect: str, operation: str) -> None:
        super().__init__(f"Dialect '{dialect}' does not support {operation}.")
        self.dialect = dialect
        self.operation = operation


class DialectConfigurationError(DialectError):
    """Raised when a dialect configuration or lookup is invalid."""
