"""Configuration management for spreadsheet-grid.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
SPREADSHEET_ prefix, or via a .env file in the project root.

Environment Variables:
    SPREADSHEET_COLUMN_SEPARATOR: Separator between cells of a row (default: tab)
    SPREADSHEET_ROW_SEPARATOR: Separator between serialized rows (default: newline)
    SPREADSHEET_QUOTE_CELLS: Quote cells containing separators (default: false)
    SPREADSHEET_STRICT_COLUMN_LABELS: Reject invalid column labels (default: false)
    SPREADSHEET_LOG_LEVEL: Logging level (default: INFO)
"""

import logging
from typing import Any

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Example .env file:
        SPREADSHEET_COLUMN_SEPARATOR=,
        SPREADSHEET_QUOTE_CELLS=true
        SPREADSHEET_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="SPREADSHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Serialization Settings
    # =========================================================================

    column_separator: str = "\t"
    """Text placed between the rendered cells of a row."""

    row_separator: str = "\n"
    """Text placed between rendered rows. Never emitted after the last row."""

    quote_cells: bool = False
    """Wrap cells containing separators or quotes in double quotes."""

    # =========================================================================
    # Addressing Settings
    # =========================================================================

    strict_column_labels: bool = False
    """Reject empty or non-alphabetic column labels instead of resolving to 1."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    @field_validator("column_separator", "row_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate separators are non-empty."""
        if not v:
            raise ValueError("Separators must be non-empty strings")
        return v

    @model_validator(mode="after")
    def validate_distinct_separators(self) -> "Settings":
        """Validate the column and row separators differ."""
        if self.column_separator == self.row_separator:
            raise ValueError(
                f"column_separator ({self.column_separator!r}) must differ from "
                f"row_separator ({self.row_separator!r})"
            )
        return self

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level

    def to_safe_dict(self) -> dict[str, Any]:
        """Convert settings to a dictionary suitable for logging.

        Returns:
            Dictionary representation with separators shown escaped.
        """
        return {
            "column_separator": repr(self.column_separator),
            "row_separator": repr(self.row_separator),
            "quote_cells": self.quote_cells,
            "strict_column_labels": self.strict_column_labels,
            "log_level": self.log_level,
        }


# Create the global settings instance
settings = Settings()
