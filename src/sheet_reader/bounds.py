"""Bounds of the non-empty region of a sheet."""

from __future__ import annotations

from dataclasses import dataclass

from sheet_reader.cell_store import SparseCellStore, is_blank
from sheet_reader.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Minimal rectangle holding every non-empty cell.

    All four fields are ``None`` when the sheet has no non-empty cell.
    """

    first_row: int | None = None
    last_row: int | None = None
    first_col: int | None = None
    last_col: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.first_row is None

    def to_dict(self) -> dict[str, int | None]:
        return {
            "first_row": self.first_row,
            "last_row": self.last_row,
            "first_col": self.first_col,
            "last_col": self.last_col,
        }


EMPTY_BOUNDS = Bounds()


def compute_bounds(store: SparseCellStore) -> Bounds:
    """Scan every entry of ``store`` once and return its bounds."""
    rows: list[int] = []
    cols: list[int] = []
    for (row, col), cell in store.items():
        if is_blank(cell.value):
            continue
        rows.append(row)
        cols.append(col)

    logger.debug("Computed bounds", entries=len(store), non_empty=len(rows))
    if not rows:
        return EMPTY_BOUNDS
    return Bounds(
        first_row=min(rows),
        last_row=max(rows),
        first_col=min(cols),
        last_col=max(cols),
    )
