"""pandas export for spreadsheet grids."""

from __future__ import annotations

import pandas as pd

from spreadsheet_grid.models import Cell
from spreadsheet_grid.spreadsheet import Spreadsheet
from spreadsheet_grid.utils.logging import get_logger

logger = get_logger(__name__)


def to_dataframe(sheet: Spreadsheet, *, header: bool = True) -> pd.DataFrame:
    """Convert a grid into a pandas DataFrame.

    Args:
        sheet: Grid to convert.
        header: Use the rendered first row as column names. Blank header
            cells are named ``col_<n>`` after their 1-based column.

    Returns:
        DataFrame holding the stored values; unwritten cells are None.
    """
    rows = list(sheet.iter_rows())
    if not rows:
        return pd.DataFrame()

    if not header:
        return pd.DataFrame(rows, dtype=object)

    columns = _derive_headers(rows[0])
    logger.debug(
        "Converting grid to DataFrame",
        sheet=sheet.name,
        columns=len(columns),
        rows=len(rows) - 1,
    )
    return pd.DataFrame(rows[1:], columns=columns, dtype=object)


def _derive_headers(values: tuple[object, ...]) -> list[str]:
    """Render header cells, naming blank ones by position."""
    headers: list[str] = []
    for idx, value in enumerate(values):
        text = Cell(value).render()
        headers.append(text if text else f"col_{idx + 1}")
    return headers
