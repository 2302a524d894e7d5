"""Excel workbook loader built on openpyxl."""

from __future__ import annotations

import datetime as dt
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.cell import Cell as OpenpyxlCell
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from sheet_reader.cell_store import (
    CellType,
    Link,
    SparseCellStore,
    infer_cell_type,
    time_to_seconds,
)
from sheet_reader.loaders.base import Source, source_label
from sheet_reader.utils.exceptions import LoaderError
from sheet_reader.utils.logging import get_logger

logger = get_logger(__name__)


class ExcelLoader:
    """Populate cell stores from .xlsx/.xlsm workbooks using openpyxl."""

    name = "an Excel"
    extensions = (".xlsx", ".xlsm")

    def load(self, source: Source) -> dict[str, SparseCellStore]:
        """Load every worksheet in workbook order."""
        try:
            # Load twice: once to capture formulas, once for cached values
            workbook = load_workbook(filename=self._rewind(source), data_only=False)
            computed_wb = load_workbook(filename=self._rewind(source), data_only=True)
        except (OSError, BadZipFile, InvalidFileException, KeyError, ValueError) as e:
            raise LoaderError(
                f"Failed to read Excel workbook: {e}",
                file_path=source_label(source),
            ) from e

        stores: dict[str, SparseCellStore] = {}
        for name in workbook.sheetnames:
            stores[name] = self._load_sheet(workbook[name], computed_wb[name])
            logger.debug("Loaded worksheet", sheet=name, cells=len(stores[name]))
        return stores

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _rewind(source: Source) -> Any:
        if hasattr(source, "seek"):
            source.seek(0)
        return source

    def _load_sheet(
        self, sheet: Worksheet, computed_sheet: Worksheet
    ) -> SparseCellStore:
        store = SparseCellStore()
        for row_cells in sheet.iter_rows():
            for cell in row_cells:
                if cell.value is None:
                    continue
                computed_value = computed_sheet.cell(
                    row=cell.row, column=cell.column
                ).value
                self._store_cell(store, cell, computed_value)
        return store

    def _store_cell(
        self, store: SparseCellStore, cell: OpenpyxlCell, computed_value: Any
    ) -> None:
        if cell.data_type == "f":
            formula = str(cell.value)
            if computed_value is None:
                # No cached result was saved with the file
                store.set(
                    cell.row,
                    cell.column,
                    formula,
                    CellType.FORMULA,
                    formula=formula,
                    result_type=CellType.STRING,
                )
                return
            value, result_type = self._map_value(cell, computed_value)
            store.set(
                cell.row,
                cell.column,
                value,
                CellType.FORMULA,
                formula=formula,
                result_type=result_type,
            )
            return

        if cell.hyperlink is not None and cell.hyperlink.target:
            store.set(
                cell.row,
                cell.column,
                Link(str(cell.value), cell.hyperlink.target),
                CellType.LINK,
            )
            return

        value, cell_type = self._map_value(cell, cell.value)
        store.set(cell.row, cell.column, value, cell_type)

    @staticmethod
    def _map_value(cell: OpenpyxlCell, value: Any) -> tuple[Any, CellType]:
        """Map an openpyxl value and its number format to a typed value."""
        number_format = cell.number_format or ""
        if isinstance(value, bool):
            return value, CellType.BOOLEAN
        if isinstance(value, (int, float)) and "%" in number_format:
            return value, CellType.PERCENTAGE
        if isinstance(value, dt.datetime):
            if value.time() == dt.time() and not _has_time_part(number_format):
                return value.date(), CellType.DATE
            return value, CellType.DATETIME
        if isinstance(value, (dt.time, dt.timedelta)):
            return time_to_seconds(value), CellType.TIME
        return infer_cell_type(value)


def _has_time_part(number_format: str) -> bool:
    lowered = number_format.lower()
    return "h" in lowered or "s" in lowered
