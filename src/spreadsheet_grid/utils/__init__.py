"""Utilities package for spreadsheet-grid.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from spreadsheet_grid.utils.exceptions import (
    ColumnLabelError,
    ConfigurationError,
    CoordinateError,
    ErrorCode,
    InvalidColumnIndexError,
    InvalidColumnLabelError,
    InvalidCoordinateError,
    InvalidReferenceError,
    SpreadsheetError,
)
from spreadsheet_grid.utils.logging import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "ColumnLabelError",
    "ConfigurationError",
    "CoordinateError",
    "ErrorCode",
    "InvalidColumnIndexError",
    "InvalidColumnLabelError",
    "InvalidCoordinateError",
    "InvalidReferenceError",
    "SpreadsheetError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
