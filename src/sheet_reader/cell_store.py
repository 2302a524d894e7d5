"""Sparse per-sheet cell storage with explicit cell type tags."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class CellType(str, Enum):
    """Declared type of a stored cell, fixed when the cell is stored."""

    STRING = "string"
    FLOAT = "float"
    PERCENTAGE = "percentage"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    FORMULA = "formula"
    LINK = "link"

    def __str__(self) -> str:
        return self.value


class Link(str):
    """Hyperlink cell value: behaves as its display text and carries a ``url``."""

    url: str

    def __new__(cls, text: str, url: str) -> Link:
        obj = super().__new__(cls, text)
        obj.url = url
        return obj

    def __repr__(self) -> str:
        return f"Link({str(self)!r}, url={self.url!r})"


@dataclass(frozen=True)
class Cell:
    """Represents a single stored cell with type metadata.

    ``result_type`` is only set for formula cells and names the type of the
    cached formula result.
    """

    value: Any
    cell_type: CellType
    formula: str | None = None
    result_type: CellType | None = None


def time_to_seconds(value: dt.time | dt.timedelta) -> int:
    """Convert a time of day or duration to integer seconds."""
    if isinstance(value, dt.timedelta):
        return int(value.total_seconds())
    return value.hour * 3600 + value.minute * 60 + value.second


def infer_cell_type(value: Any) -> tuple[Any, CellType]:
    """Decide the type tag for a plain Python value.

    Returns the (possibly converted) value with its tag; times become integer
    seconds.
    """
    if isinstance(value, Link):
        return value, CellType.LINK
    if isinstance(value, bool):
        return value, CellType.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return value, CellType.FLOAT
    # datetime is a subclass of date, so it is checked first
    if isinstance(value, dt.datetime):
        return value, CellType.DATETIME
    if isinstance(value, dt.date):
        return value, CellType.DATE
    if isinstance(value, (dt.time, dt.timedelta)):
        return time_to_seconds(value), CellType.TIME
    if isinstance(value, str):
        return value, CellType.STRING
    return str(value), CellType.STRING


def is_blank(value: Any) -> bool:
    """True for values that count as empty: ``None`` or the empty string.

    Whitespace is content; a cell holding ``" "`` is not blank.
    """
    if value is None:
        return True
    return isinstance(value, str) and value == ""


class SparseCellStore:
    """Mapping from 1-based ``(row, col)`` to :class:`Cell`.

    Only cells that were stored have entries; absent cells take no memory.
    Iteration order is insertion order, callers needing row-major order must
    sort.
    """

    def __init__(self) -> None:
        self._cells: dict[tuple[int, int], Cell] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: object) -> bool:
        return key in self._cells

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._cells)

    def items(self) -> Iterator[tuple[tuple[int, int], Cell]]:
        return iter(self._cells.items())

    def get(self, row: int, col: int) -> Cell | None:
        return self._cells.get((row, col))

    def set(
        self,
        row: int,
        col: int,
        value: Any,
        cell_type: CellType | None = None,
        *,
        formula: str | None = None,
        result_type: CellType | None = None,
    ) -> None:
        """Store a value, overwriting any previous entry.

        When ``cell_type`` is omitted the tag is inferred from ``value``.
        Storing ``None`` removes the entry.
        """
        if row < 1 or col < 1:
            raise ValueError(f"row and column must be >= 1, got ({row}, {col})")
        if value is None:
            self._cells.pop((row, col), None)
            return
        if cell_type is None:
            value, cell_type = infer_cell_type(value)
        self._cells[(row, col)] = Cell(
            value, cell_type, formula=formula, result_type=result_type
        )

    def delete(self, row: int, col: int) -> None:
        self._cells.pop((row, col), None)

    def value(self, row: int, col: int) -> Any:
        cell = self._cells.get((row, col))
        return cell.value if cell is not None else None

    def cell_type(self, row: int, col: int) -> CellType | None:
        cell = self._cells.get((row, col))
        return cell.cell_type if cell is not None else None

    def is_empty(self, row: int, col: int) -> bool:
        """True if the cell is absent or holds the empty string."""
        cell = self._cells.get((row, col))
        return cell is None or is_blank(cell.value)

    def replace_value(self, row: int, col: int, value: Any) -> None:
        """Swap the value of an existing cell, keeping its type tags."""
        cell = self._cells[(row, col)]
        self._cells[(row, col)] = Cell(
            value, cell.cell_type, formula=cell.formula, result_type=cell.result_type
        )
