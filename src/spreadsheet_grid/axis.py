"""Axis helpers: the minimum index and spreadsheet-style column labels."""

from __future__ import annotations

import re

from openpyxl.utils import get_column_letter

from spreadsheet_grid.utils.exceptions import (
    InvalidColumnIndexError,
    InvalidColumnLabelError,
    InvalidReferenceError,
)

MINIMUM = 1
"""The smallest valid row or column index."""

_BASE = 26
_FLOOR = ord("A")
_REFERENCE_PATTERN = re.compile(r"^\s*([A-Za-z]+)([1-9][0-9]*)\s*$")


def column_index(label: str, *, strict: bool = False) -> int:
    """Convert a column label ("A", "Z", "AA") to a 1-based column index.

    The label is read as a bijective base-26 numeral, most significant
    letter first, case-insensitively. Characters other than ASCII letters
    are skipped without resetting the accumulated value, and a label with
    no letters at all resolves to ``MINIMUM``.

    Args:
        label: Column label to resolve.
        strict: Raise instead of skipping invalid characters or falling
            back to ``MINIMUM``.

    Returns:
        The 1-based column index.

    Raises:
        InvalidColumnLabelError: In strict mode, when the label is empty or
            contains anything but ASCII letters.
    """
    result = 0
    letters = 0
    for char in label:
        if not (char.isascii() and char.isalpha()):
            if strict:
                raise InvalidColumnLabelError(label)
            continue
        result = result * _BASE + (ord(char.upper()) - _FLOOR + 1)
        letters += 1

    if letters == 0:
        if strict:
            raise InvalidColumnLabelError(label)
        return MINIMUM
    return result


def column_label(index: int) -> str:
    """Convert a 1-based column index to its column label.

    Raises:
        InvalidColumnIndexError: If the index is outside the range openpyxl
            can name (1 to 18278, "A" to "ZZZ").
    """
    try:
        return get_column_letter(index)
    except ValueError as exc:
        raise InvalidColumnIndexError(index) from exc


def split_reference(reference: str) -> tuple[str, int]:
    """Split an A1-style reference into (column_label, row).

    The column label is returned upper-cased: ``split_reference("b3")``
    gives ``("B", 3)``.

    Raises:
        InvalidReferenceError: If the reference is not letters followed by
            a positive row number.
    """
    match = _REFERENCE_PATTERN.match(reference)
    if match is None:
        raise InvalidReferenceError(reference)
    label, row = match.groups()
    return label.upper(), int(row)
