"""A single named sheet: its cell store plus cached bounds."""

from __future__ import annotations

from typing import Any

from sheet_reader.bounds import Bounds, compute_bounds
from sheet_reader.cell_store import CellType, SparseCellStore
from sheet_reader.coordinates import number_to_letter


def sanitize_value(value: str) -> str:
    """Strip surrounding whitespace and drop non-ASCII or control characters."""
    return "".join(ch for ch in value.strip() if 32 <= ord(ch) < 127)


class Sheet:
    """One named table of cells.

    Bounds are computed lazily and cached until the store is mutated through
    this object or :meth:`invalidate_bounds` is called.
    """

    def __init__(self, name: str, store: SparseCellStore | None = None) -> None:
        self.name = name
        self.store = store if store is not None else SparseCellStore()
        self.cleaned = False
        self._bounds: Bounds | None = None

    def __repr__(self) -> str:
        return f"Sheet({self.name!r}, cells={len(self.store)})"

    # ------------------------------------------------------------------ #
    # Bounds
    # ------------------------------------------------------------------ #

    @property
    def bounds(self) -> Bounds:
        if self._bounds is None:
            self._bounds = compute_bounds(self.store)
        return self._bounds

    def invalidate_bounds(self) -> None:
        self._bounds = None

    @property
    def first_row(self) -> int | None:
        return self.bounds.first_row

    @property
    def last_row(self) -> int | None:
        return self.bounds.last_row

    @property
    def first_column(self) -> int | None:
        return self.bounds.first_col

    @property
    def last_column(self) -> int | None:
        return self.bounds.last_col

    @property
    def first_column_as_letter(self) -> str:
        return number_to_letter(self.first_column or 0)

    @property
    def last_column_as_letter(self) -> str:
        return number_to_letter(self.last_column or 0)

    # ------------------------------------------------------------------ #
    # Cells
    # ------------------------------------------------------------------ #

    def cell(self, row: int, col: int) -> Any:
        return self.store.value(row, col)

    def cell_type(self, row: int, col: int) -> CellType | None:
        return self.store.cell_type(row, col)

    def formula(self, row: int, col: int) -> str | None:
        cell = self.store.get(row, col)
        return cell.formula if cell is not None else None

    def is_empty(self, row: int, col: int) -> bool:
        return self.store.is_empty(row, col)

    def set(
        self, row: int, col: int, value: Any, cell_type: CellType | None = None
    ) -> None:
        """Overwrite a cell in memory only."""
        self.store.set(row, col, value, cell_type)
        self.invalidate_bounds()

    def row(self, row_number: int) -> list[Any]:
        """Values of one row from the first to the last non-empty column."""
        bounds = self.bounds
        if bounds.is_empty:
            return []
        return [
            self.store.value(row_number, col)
            for col in range(bounds.first_col, bounds.last_col + 1)
        ]

    def column(self, col_number: int) -> list[Any]:
        """Values of one column from the first to the last non-empty row."""
        bounds = self.bounds
        if bounds.is_empty:
            return []
        return [
            self.store.value(row, col_number)
            for row in range(bounds.first_row, bounds.last_row + 1)
        ]

    def clean(self) -> bool:
        """Sanitize every string cell once; returns False if already cleaned."""
        if self.cleaned:
            return False
        for (row, col), cell in list(self.store.items()):
            if cell.cell_type is CellType.STRING and isinstance(cell.value, str):
                self.store.replace_value(row, col, sanitize_value(cell.value))
        self.cleaned = True
        self.invalidate_bounds()
        return True
