"""Tests for configuration management module."""

import logging
import os
from unittest.mock import patch

import pytest

from spreadsheet_grid.config import Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.column_separator == "\t"
        assert settings.row_separator == "\n"
        assert settings.quote_cells is False
        assert settings.strict_column_labels is False
        assert settings.log_level == "INFO"

    def test_environment_variable_prefix(self) -> None:
        """Test that environment variables use SPREADSHEET_ prefix."""
        env_vars = {
            "SPREADSHEET_COLUMN_SEPARATOR": ";",
            "SPREADSHEET_QUOTE_CELLS": "true",
            "SPREADSHEET_STRICT_COLUMN_LABELS": "1",
            "SPREADSHEET_LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)

        assert settings.column_separator == ";"
        assert settings.quote_cells is True
        assert settings.strict_column_labels is True
        assert settings.log_level == "DEBUG"

    def test_unprefixed_variables_ignored(self) -> None:
        env_vars = {"COLUMN_SEPARATOR": ";"}
        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)

        assert settings.column_separator == "\t"

    def test_log_level_int_property(self) -> None:
        """Test log_level_int computed property."""
        test_cases = [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ]

        for level_str, expected_int in test_cases:
            env_vars = {"SPREADSHEET_LOG_LEVEL": level_str}
            with patch.dict(os.environ, env_vars, clear=True):
                settings = Settings(_env_file=None)
            assert settings.log_level_int == expected_int, f"Failed for {level_str}"

    def test_to_safe_dict(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.to_safe_dict() == {
            "column_separator": "'\\t'",
            "row_separator": "'\\n'",
            "quote_cells": False,
            "strict_column_labels": False,
            "log_level": "INFO",
        }


class TestSettingsValidation:
    """Tests for settings validation."""

    def test_lowercase_log_level_normalized(self) -> None:
        """Test lowercase log levels are normalized to uppercase."""
        env_vars = {"SPREADSHEET_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)
            assert settings.log_level == "DEBUG"

    def test_invalid_log_level_raises_error(self) -> None:
        """Test invalid log level raises validation error."""
        env_vars = {"SPREADSHEET_LOG_LEVEL": "INVALID"}
        with (
            patch.dict(os.environ, env_vars, clear=True),
            pytest.raises(ValueError, match="Invalid log level"),
        ):
            Settings(_env_file=None)

    @pytest.mark.parametrize("field", ["column_separator", "row_separator"])
    def test_empty_separator_raises_error(self, field: str) -> None:
        with (
            patch.dict(os.environ, {}, clear=True),
            pytest.raises(ValueError, match="non-empty"),
        ):
            Settings(_env_file=None, **{field: ""})

    def test_identical_separators_raise_error(self) -> None:
        with (
            patch.dict(os.environ, {}, clear=True),
            pytest.raises(ValueError, match="must differ"),
        ):
            Settings(_env_file=None, column_separator="|", row_separator="|")
