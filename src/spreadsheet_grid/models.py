"""Grid building blocks: coordinates, cells and rows."""

from __future__ import annotations

import numbers
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from spreadsheet_grid.axis import MINIMUM, column_index, column_label, split_reference

_EXACT_FLOAT_LIMIT = 2**53


class Coordinate(NamedTuple):
    """A 1-based (row, col) address.

    Coordinates are not validated on construction; the grid decides what a
    coordinate means when it is used.
    """

    row: int
    col: int

    @classmethod
    def from_reference(cls, reference: str) -> Coordinate:
        """Build a coordinate from an A1-style reference such as ``"B3"``."""
        label, row = split_reference(reference)
        return cls(row, column_index(label, strict=True))

    @classmethod
    def from_label(cls, row: int, label: str, *, strict: bool = False) -> Coordinate:
        """Build a coordinate from a row index and a column label."""
        return cls(row, column_index(label, strict=strict))

    @property
    def reference(self) -> str:
        """A1-style reference for this coordinate."""
        return f"{column_label(self.col)}{self.row}"


class CellKind(str, Enum):
    """Kinds of value a cell can hold."""

    EMPTY = "empty"
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Cell:
    """A single immutable cell holding zero or one value.

    ``None`` means the cell is absent. An empty string is a stored value and
    is kept distinct from absence, though both render as ``""``.
    """

    value: Any = None

    @property
    def kind(self) -> CellKind:
        """Classify the stored value."""
        value = self.value
        if value is None:
            return CellKind.EMPTY
        if isinstance(value, str):
            return CellKind.TEXT
        # bool is an Integral, so it has to be checked first
        if isinstance(value, bool):
            return CellKind.BOOLEAN
        if isinstance(value, numbers.Integral):
            return CellKind.INTEGER
        if isinstance(value, float):
            return CellKind.FLOAT
        return CellKind.OTHER

    def render(self) -> str:
        """Render the stored value as text.

        Tabs, quotes and newlines inside the value are not escaped.
        """
        kind = self.kind
        if kind is CellKind.EMPTY:
            return ""
        if kind is CellKind.TEXT:
            return self.value
        if kind is CellKind.INTEGER:
            return str(int(self.value))
        if kind is CellKind.FLOAT:
            value = float(self.value)
            # Whole numbers print without a fraction only while floats are exact
            if value.is_integer() and abs(value) < _EXACT_FLOAT_LIMIT:
                return f"{value:.0f}"
            return repr(value)
        return str(self.value)


def quote_text(text: str, *separators: str) -> str:
    """Quote text the RFC 4180 way when it contains a separator or quote."""
    specials = ('"', "\r", "\n", *separators)
    if any(special in text for special in specials):
        return '"' + text.replace('"', '""') + '"'
    return text


class Row:
    """An ordered run of cells addressed by 1-based column index."""

    def __init__(self, column_count: int = 0) -> None:
        self._cells: list[Cell] = [Cell()] * max(column_count, 0)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def expand(self, column_count: int) -> None:
        """Append empty cells until the row holds ``column_count`` cells."""
        missing = column_count - len(self._cells)
        if missing > 0:
            self._cells.extend([Cell()] * missing)

    def assign(self, value: Any, column: int) -> None:
        """Replace the cell at ``column`` with one holding ``value``.

        The column must already exist; callers expand the row first.

        Raises:
            IndexError: If the column is outside the row.
        """
        self._cells[self._index(column)] = Cell(value)

    def cell(self, column: int) -> Cell:
        """Return the cell at ``column``.

        Raises:
            IndexError: If the column is outside the row.
        """
        return self._cells[self._index(column)]

    def _index(self, column: int) -> int:
        if not MINIMUM <= column <= len(self._cells):
            raise IndexError(
                f"Column {column} is outside the row (1 to {len(self._cells)})"
            )
        return column - MINIMUM

    def values(self) -> tuple[Any, ...]:
        """Return the stored values in column order."""
        return tuple(cell.value for cell in self._cells)

    def render(
        self,
        separator: str = "\t",
        *,
        quote: bool = False,
        row_separator: str = "\n",
    ) -> str:
        """Join the rendered cells with ``separator``.

        Args:
            separator: Text placed between cells.
            quote: Quote cells that contain a separator, a quote or a line
                break.
            row_separator: Row separator to treat as special when quoting.

        Returns:
            The row as a single line of text.
        """
        rendered = (cell.render() for cell in self._cells)
        if quote:
            rendered = (quote_text(text, separator, row_separator) for text in rendered)
        return separator.join(rendered)
