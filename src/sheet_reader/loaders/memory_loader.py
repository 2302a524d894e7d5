"""Loader for workbooks described by in-memory Python data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sheet_reader.cell_store import SparseCellStore
from sheet_reader.loaders.base import Source

SheetData = Sequence[Sequence[Any]] | Mapping[tuple[int, int], Any]


class MemoryLoader:
    """Build stores from ``{sheet_name: rows}`` or ``{sheet_name: {(r, c): v}}``.

    Row lists are 1-based in the resulting sheet; ``None`` entries are skipped.
    Types are inferred once, when each value is stored. The ``source`` passed
    to :meth:`load` is only used as a label.
    """

    name = "an in-memory"
    extensions: tuple[str, ...] = ()

    def __init__(self, sheets: Mapping[str, SheetData]) -> None:
        self.sheets = sheets

    def load(self, source: Source | None = None) -> dict[str, SparseCellStore]:
        stores: dict[str, SparseCellStore] = {}
        for name, data in self.sheets.items():
            store = SparseCellStore()
            if isinstance(data, Mapping):
                for (row, col), value in data.items():
                    store.set(row, col, value)
            else:
                for row_number, values in enumerate(data, start=1):
                    for col_number, value in enumerate(values, start=1):
                        store.set(row_number, col_number, value)
            stores[name] = store
        return stores
