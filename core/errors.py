# core/errors.py

"""
Error codes and exception types raised by the roster models.

Entity constructors raise `ValidationError`, collection invariants raise `StateError`,
and missing or out-of-range arguments raise `ArgumentError`. All three derive from
`RosterError` and carry a machine-readable `ErrorCode`.

IO failures are not represented here; they are caught at the persistence boundary
and reported through a failed `Response` instead.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Validation Failures ===
    # required field is empty or whitespace-only
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # field value is out of bounds or has the wrong type
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # === Argument Failures ===
    MISSING_ARGUMENT = "MISSING_ARGUMENT"
    INVALID_RANGE = "INVALID_RANGE"

    # === State Restrictions ===
    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    NOT_FOUND = "NOT_FOUND"

    # === Internal Faults ===
    IO_FAILURE = "IO_FAILURE"


class RosterError(Exception):
    """Base exception for all roster errors."""

    def __init__(self, message: str, error_code: ErrorCode | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ValidationError(RosterError, ValueError):
    """Raised when an entity is constructed from malformed input."""

    def __init__(
        self, message: str, error_code: ErrorCode = ErrorCode.INVALID_FIELD_VALUE
    ):
        super().__init__(message, error_code)


class StateError(RosterError):
    """Raised when an operation would violate a collection invariant."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.NOT_FOUND):
        super().__init__(message, error_code)


class ArgumentError(RosterError, ValueError):
    """Raised when a required argument is absent or a range is invalid."""

    def __init__(
        self, message: str, error_code: ErrorCode = ErrorCode.MISSING_ARGUMENT
    ):
        super().__init__(message, error_code)
