"""Tests for the DataFrame export."""

from __future__ import annotations

import pandas as pd

from spreadsheet_grid.config import Settings
from spreadsheet_grid.output.dataframe import to_dataframe
from spreadsheet_grid.spreadsheet import Spreadsheet


def test_header_row_becomes_columns(invoice_sheet: Spreadsheet) -> None:
    df = to_dataframe(invoice_sheet)

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["Item", "Qty", "Price"]
    assert len(df) == 2
    assert df.iloc[0]["Item"] == "Widget"
    assert df.iloc[1]["Qty"] == 1
    assert df.iloc[0]["Price"] == 2.5


def test_without_header_keeps_every_row(invoice_sheet: Spreadsheet) -> None:
    df = to_dataframe(invoice_sheet, header=False)

    assert df.shape == (3, 3)
    assert df.iloc[0, 0] == "Item"


def test_blank_headers_named_by_position(default_settings: Settings) -> None:
    sheet = Spreadsheet(settings=default_settings)
    sheet.set_headers(["Name", "", 7])
    sheet.set_label_and_value("Alice", 30, 2)

    df = to_dataframe(sheet)

    assert list(df.columns) == ["Name", "col_2", "7"]
    assert df.iloc[0]["col_2"] == 30
    assert df.iloc[0]["7"] is None


def test_empty_grid_gives_empty_frame(sheet: Spreadsheet) -> None:
    assert to_dataframe(sheet).empty


def test_header_only_grid(sheet: Spreadsheet) -> None:
    sheet.set_headers(["A", "B"])

    df = to_dataframe(sheet)

    assert list(df.columns) == ["A", "B"]
    assert len(df) == 0
