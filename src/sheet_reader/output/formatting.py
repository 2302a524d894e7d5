"""Per-type rendering rules shared by the exporters."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any

from sheet_reader.bounds import Bounds
from sheet_reader.cell_store import Cell, CellType, is_blank
from sheet_reader.coordinates import integer_to_timestring
from sheet_reader.utils.exceptions import UnsupportedCellTypeError

_NUMERIC_TYPES = (CellType.FLOAT, CellType.PERCENTAGE)
_DATE_TYPES = (CellType.DATE, CellType.DATETIME)


@dataclass(frozen=True)
class Region:
    """Rectangular area of a sheet; unset edges fall back to the sheet bounds."""

    from_row: int | None = None
    from_column: int | None = None
    to_row: int | None = None
    to_column: int | None = None

    def resolve(self, bounds: Bounds) -> tuple[range, range]:
        """Return row and column ranges, both empty for an empty sheet."""
        if bounds.is_empty:
            return range(0), range(0)
        rows = range(
            self.from_row or bounds.first_row, (self.to_row or bounds.last_row) + 1
        )
        cols = range(
            self.from_column or bounds.first_col,
            (self.to_column or bounds.last_col) + 1,
        )
        return rows, cols


def quote(text: str) -> str:
    """Wrap text in double quotes, doubling embedded quotes."""
    return '"' + text.replace('"', '""') + '"'


def format_number(value: Any) -> str:
    """Integral numbers render without a fractional part."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    number = float(value)
    if number.is_integer():
        return str(int(number))
    text = repr(number)
    # exponent form keeps a fractional mantissa: 1.0e-05, not 1e-05
    mantissa, sep, exponent = text.partition("e")
    if sep and "." not in mantissa:
        text = f"{mantissa}.0e{exponent}"
    return text


def format_date(value: dt.date) -> str:
    return value.isoformat()


def format_boolean(value: Any) -> str:
    return str(value).lower()


def plain_value(cell: Cell) -> str:
    """Unquoted text of a cell, as YAML and XML exports print it."""
    value = cell.value
    cell_type = cell.result_type if cell.cell_type is CellType.FORMULA else None
    cell_type = cell_type or cell.cell_type
    if cell_type is CellType.TIME:
        return integer_to_timestring(value)
    if cell_type is CellType.BOOLEAN:
        return format_boolean(value)
    if isinstance(value, dt.date):
        return format_date(value)
    return str(value)


def cell_to_csv(cell: Cell | None, row: int, col: int) -> str:
    """Render one cell for CSV output.

    Raises:
        UnsupportedCellTypeError: For a type, or formula result type, with no
            CSV rendering.
    """
    if cell is None or is_blank(cell.value):
        return ""

    cell_type = cell.cell_type
    if cell_type is CellType.FORMULA:
        return _formula_to_csv(cell, row, col)
    if cell_type is CellType.STRING:
        return quote(cell.value)
    if cell_type is CellType.BOOLEAN:
        return quote(format_boolean(cell.value))
    if cell_type in _NUMERIC_TYPES:
        return format_number(cell.value)
    if cell_type in _DATE_TYPES:
        return format_date(cell.value)
    if cell_type is CellType.TIME:
        return integer_to_timestring(cell.value)
    if cell_type is CellType.LINK:
        return quote(getattr(cell.value, "url", str(cell.value)))
    raise UnsupportedCellTypeError(cell_type, row, col)


def _formula_to_csv(cell: Cell, row: int, col: int) -> str:
    result_type = cell.result_type
    if result_type is CellType.STRING:
        return quote(str(cell.value))
    if result_type in _NUMERIC_TYPES:
        return format_number(cell.value)
    if result_type in _DATE_TYPES:
        return format_date(cell.value)
    if result_type is CellType.BOOLEAN:
        return quote(format_boolean(cell.value))
    raise UnsupportedCellTypeError(f"formula/{result_type}", row, col)
