"""In-memory spreadsheet grid that grows on write."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from spreadsheet_grid.axis import MINIMUM, column_index
from spreadsheet_grid.config import Settings, settings as default_settings
from spreadsheet_grid.models import Coordinate, Row
from spreadsheet_grid.utils.exceptions import (
    ConfigurationError,
    InvalidCoordinateError,
)
from spreadsheet_grid.utils.logging import get_logger

logger = get_logger(__name__)


class Spreadsheet:
    """A two-dimensional grid of cells addressed by 1-based coordinates.

    Writes to any positive coordinate expand the grid as needed; reads
    outside the current bounds return ``None`` without expanding. Every row
    always holds exactly ``column_count`` cells, and neither dimension ever
    shrinks.

    The batch helpers return the next free column (or row) so a table can
    be filled without tracking offsets::

        sheet = Spreadsheet()
        col = sheet.set_header_and_value("Name", "Alice", MINIMUM)
        col = sheet.set_header_and_value("Amount", 12.5, col)
        sheet.serialize()  # "Name\\tAmount\\nAlice\\t12.5"
    """

    def __init__(
        self,
        row_count: int = 0,
        column_count: int = 0,
        *,
        name: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a grid, optionally pre-sized.

        Args:
            row_count: Number of rows to create up front.
            column_count: Number of columns to create up front.
            name: Optional name used in log messages.
            settings: Serialization and addressing settings. Defaults to the
                environment-driven global settings.
        """
        self._rows: list[Row] = []
        self._column_count = 0
        self.name = name
        self.settings = settings or default_settings

        # Columns first so the new rows are created at full width
        self.expand_columns(column_count)
        self.expand_rows(row_count)

    def __repr__(self) -> str:
        return (
            f"Spreadsheet(name={self.name!r}, rows={self.row_count}, "
            f"columns={self.column_count})"
        )

    def __str__(self) -> str:
        return self.serialize()

    @property
    def row_count(self) -> int:
        """Number of rows in the grid."""
        return len(self._rows)

    @property
    def column_count(self) -> int:
        """Number of cells in every row."""
        return self._column_count

    # ------------------------------------------------------------------ #
    # Expansion
    # ------------------------------------------------------------------ #

    def expand_columns(self, column_count: int) -> None:
        """Widen every row to ``column_count`` cells. Never narrows."""
        if column_count <= self._column_count:
            return
        logger.debug(
            "Expanding columns",
            sheet=self.name,
            from_count=self._column_count,
            to_count=column_count,
        )
        self._column_count = column_count
        for row in self._rows:
            row.expand(column_count)

    def expand_rows(self, row_count: int) -> None:
        """Append rows at the current width until there are ``row_count``."""
        if row_count <= len(self._rows):
            return
        logger.debug(
            "Expanding rows",
            sheet=self.name,
            from_count=len(self._rows),
            to_count=row_count,
        )
        while len(self._rows) < row_count:
            self._rows.append(Row(self._column_count))

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def get(self, coordinate: Coordinate | tuple[int, int]) -> Any | None:
        """Return the value stored at ``coordinate``.

        Returns:
            The stored value, or None when the coordinate lies outside the
            grid or the cell was never written.
        """
        row, col = coordinate
        return self.get_at(row, col)

    def get_at(self, row: int, column: int) -> Any | None:
        """Return the value stored at (``row``, ``column``)."""
        if not MINIMUM <= row <= len(self._rows):
            return None
        target = self._rows[row - MINIMUM]
        if not MINIMUM <= column <= len(target):
            return None
        return target.cell(column).value

    def iter_rows(self) -> Iterator[tuple[Any, ...]]:
        """Yield the stored values of each row, top to bottom."""
        for row in self._rows:
            yield row.values()

    def column(self, label: str) -> int:
        """Resolve a column label using this grid's label strictness."""
        return column_index(label, strict=self.settings.strict_column_labels)

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def set(self, value: Any, coordinate: Coordinate | tuple[int, int]) -> None:
        """Store ``value`` at ``coordinate``, expanding the grid if needed.

        Raises:
            InvalidCoordinateError: If the row or column is below 1.
        """
        row, col = coordinate
        self.set_at(value, row, col)

    def set_at(self, value: Any, row: int, column: int) -> None:
        """Store ``value`` at (``row``, ``column``), expanding if needed."""
        if row < MINIMUM or column < MINIMUM:
            raise InvalidCoordinateError(row, column)
        # Columns before rows: appended rows then start at the final width
        self.expand_columns(column)
        self.expand_rows(row)
        self._rows[row - MINIMUM].assign(value, column)

    def set_header_and_value(
        self, header: str, value: Any, column: int, row: int = MINIMUM
    ) -> int:
        """Write ``header`` at (row, column) and ``value`` directly below it.

        Returns:
            The next column, ``column + 1``.
        """
        self.set_at(header, row, column)
        self.set_at(value, row + 1, column)
        return column + 1

    def set_header_and_values(
        self, header: str, values: Iterable[Any], column: int, row: int = MINIMUM
    ) -> int:
        """Write ``header`` at (row, column) and ``values`` down the column.

        Returns:
            The next column, ``column + 1``.
        """
        self.set_at(header, row, column)
        for offset, value in enumerate(values, start=1):
            self.set_at(value, row + offset, column)
        return column + 1

    def set_headers(self, headers: Iterable[str], column: int = MINIMUM) -> int:
        """Write ``headers`` across the first row starting at ``column``.

        Returns:
            The column after the last header written.
        """
        at = column
        for header in headers:
            self.set_at(header, MINIMUM, at)
            at += 1
        return at

    def set_label_and_value(self, label: str, value: Any, row: int) -> int:
        """Write ``label`` in the first column of ``row`` and ``value`` beside it.

        Returns:
            The next row, ``row + 1``.
        """
        self.set_at(label, row, MINIMUM)
        self.set_at(value, row, MINIMUM + 1)
        return row + 1

    # ------------------------------------------------------------------ #
    # Serialization
    # ------------------------------------------------------------------ #

    def serialize(self, quote: bool | None = None) -> str:
        """Render the grid as delimited text.

        Rows are joined with the row separator (a newline by default) and
        cells with the column separator (a tab by default). Nothing follows
        the last row. Cell text is not escaped unless quoting is enabled.

        Args:
            quote: Quote cells containing separators, quotes or line breaks.
                Defaults to the ``quote_cells`` setting.

        Returns:
            The serialized grid.

        Raises:
            ConfigurationError: If quoting is requested while a separator
                contains a double quote.
        """
        column_separator = self.settings.column_separator
        row_separator = self.settings.row_separator
        if quote is None:
            quote = self.settings.quote_cells
        if quote and ('"' in column_separator or '"' in row_separator):
            raise ConfigurationError(
                "Cells cannot be quoted when a separator contains a double quote",
                setting="quote_cells",
            )

        logger.debug(
            "Serializing grid",
            sheet=self.name,
            rows=self.row_count,
            columns=self.column_count,
            quote=quote,
        )
        return row_separator.join(
            row.render(column_separator, quote=quote, row_separator=row_separator)
            for row in self._rows
        )
