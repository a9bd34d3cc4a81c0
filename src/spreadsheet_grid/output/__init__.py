"""Output module for exporting grids to other in-memory structures."""

from spreadsheet_grid.output.dataframe import to_dataframe

__all__ = ["to_dataframe"]
