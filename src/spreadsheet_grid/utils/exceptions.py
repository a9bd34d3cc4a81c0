"""Centralized exception classes for spreadsheet-grid.

This module provides a hierarchy of custom exceptions with error codes and
structured error details for consistent error handling throughout the
package.

Exception Hierarchy:
    SpreadsheetError (base)
    ├── CoordinateError
    │   ├── InvalidCoordinateError
    │   └── InvalidReferenceError
    ├── ColumnLabelError
    │   ├── InvalidColumnLabelError
    │   └── InvalidColumnIndexError
    └── ConfigurationError

Reads never raise: an out-of-bounds lookup yields an absent value. Errors
are reserved for writes to non-positive coordinates and for the strict
variants of the label helpers.

Error Codes:
    All errors have a unique error code (e.g., "E1001") that can be used
    for programmatic error handling and documentation.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used in the package.

    Error codes are grouped by category:
    - E1xxx: Coordinate errors
    - E2xxx: Column label errors
    - E9xxx: Internal/unexpected errors
    """

    # Coordinate errors (E1xxx)
    INVALID_COORDINATE = "E1001"
    INVALID_REFERENCE = "E1002"

    # Column label errors (E2xxx)
    INVALID_COLUMN_LABEL = "E2001"
    INVALID_COLUMN_INDEX = "E2002"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"
    CONFIGURATION_ERROR = "E9002"


class SpreadsheetError(Exception):
    """Base exception for all spreadsheet-grid errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary for logging.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# Coordinate Errors (E1xxx)
# =============================================================================


class CoordinateError(SpreadsheetError, ValueError):
    """Base class for coordinate-related errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_COORDINATE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class InvalidCoordinateError(CoordinateError):
    """Raised when a write targets a row or column below the minimum."""

    def __init__(
        self,
        row: int,
        column: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending coordinate.

        Args:
            row: Requested row index.
            column: Requested column index.
            message: Optional custom message.
            details: Additional details.
        """
        details = details or {}
        details["row"] = row
        details["column"] = column
        message = message or (
            f"Coordinate ({row}, {column}) is not addressable; "
            "rows and columns start at 1"
        )
        super().__init__(message, ErrorCode.INVALID_COORDINATE, details)
        self.row = row
        self.column = column


class InvalidReferenceError(CoordinateError):
    """Raised when an A1-style cell reference cannot be parsed."""

    def __init__(
        self,
        reference: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["reference"] = reference
        message = message or f"Invalid cell reference: {reference!r}"
        super().__init__(message, ErrorCode.INVALID_REFERENCE, details)
        self.reference = reference


# =============================================================================
# Column Label Errors (E2xxx)
# =============================================================================


class ColumnLabelError(SpreadsheetError, ValueError):
    """Base class for column label errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_COLUMN_LABEL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class InvalidColumnLabelError(ColumnLabelError):
    """Raised by strict label resolution for empty or non-alphabetic labels."""

    def __init__(
        self,
        label: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the rejected label.

        Args:
            label: The label that failed to resolve.
            message: Optional custom message.
            details: Additional details.
        """
        details = details or {}
        details["label"] = label
        message = message or f"Invalid column label: {label!r}"
        super().__init__(message, ErrorCode.INVALID_COLUMN_LABEL, details)
        self.label = label


class InvalidColumnIndexError(ColumnLabelError):
    """Raised when a column index has no spreadsheet label."""

    def __init__(
        self,
        index: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["index"] = index
        message = message or f"Column index {index} has no column label"
        super().__init__(message, ErrorCode.INVALID_COLUMN_INDEX, details)
        self.index = index


# =============================================================================
# Configuration Errors (E9xxx)
# =============================================================================


class ConfigurationError(SpreadsheetError):
    """Raised when settings cannot be applied to a grid."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)
        self.setting = setting
