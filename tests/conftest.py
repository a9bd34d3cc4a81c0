from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from spreadsheet_grid.config import Settings
from spreadsheet_grid.spreadsheet import Spreadsheet


@pytest.fixture
def default_settings() -> Settings:
    """Settings built from defaults only, ignoring the environment."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def sheet(default_settings: Settings) -> Spreadsheet:
    """Empty grid using default settings."""
    return Spreadsheet(name="test", settings=default_settings)


@pytest.fixture
def invoice_sheet(default_settings: Settings) -> Spreadsheet:
    """Small header-plus-rows table filled column by column."""
    grid = Spreadsheet(name="invoice", settings=default_settings)
    col = grid.set_header_and_values("Item", ["Widget", "Gadget"], 1)
    col = grid.set_header_and_values("Qty", [3, 1], col)
    grid.set_header_and_values("Price", [2.5, 10.0], col)
    return grid
