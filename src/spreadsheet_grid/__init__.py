"""spreadsheet-grid - growable in-memory grid with delimited text output."""

from spreadsheet_grid.axis import MINIMUM, column_index, column_label, split_reference
from spreadsheet_grid.models import Cell, CellKind, Coordinate, Row
from spreadsheet_grid.spreadsheet import Spreadsheet

__all__ = [
    "MINIMUM",
    "Cell",
    "CellKind",
    "Coordinate",
    "Row",
    "Spreadsheet",
    "column_index",
    "column_label",
    "split_reference",
]
__version__ = "0.1.0"
