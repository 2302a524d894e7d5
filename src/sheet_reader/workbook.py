"""Workbook: sheet selection, cell addressing, parsing and export."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from sheet_reader.bounds import Bounds
from sheet_reader.cell_store import CellType
from sheet_reader.config import FileWarning, Settings, WorkbookOptions, settings
from sheet_reader.coordinates import normalize, number_to_letter, split_coordinate
from sheet_reader.headers import HeaderResolver
from sheet_reader.loaders import (
    Loader,
    MemoryLoader,
    Source,
    check_file_type,
    default_loaders,
    loader_for,
)
from sheet_reader.loaders.base import source_label
from sheet_reader.loaders.memory_loader import SheetData
from sheet_reader.output import (
    CsvGenerator,
    MatrixGenerator,
    Region,
    XmlGenerator,
    YamlGenerator,
)
from sheet_reader.sheet import Sheet
from sheet_reader.utils.exceptions import (
    InvalidSheetError,
    NotFoundError,
    RangeError,
    UnknownOperationError,
)
from sheet_reader.utils.logging import LogContext, get_logger, timed_operation

logger = get_logger(__name__)

SheetRef = int | str | Sheet | None

_ADDRESS_TOKEN = re.compile(r"([A-Za-z]+)([1-9][0-9]*)")


class Workbook:
    """An ordered collection of sheets loaded from one source.

    Sheets are referenced by 1-based index, by name, or by :class:`Sheet`
    handle; ``None`` means the current sheet. Changes made with
    :meth:`set_cell` live in memory only.
    """

    def __init__(
        self,
        source: Source | None,
        loader: Loader,
        options: WorkbookOptions | None = None,
        config: Settings | None = None,
    ) -> None:
        self.source = source
        self.loader = loader
        self.config = config or settings
        self.options = options or WorkbookOptions.from_settings(self.config)
        self.header_line = self.options.header_line
        self.headers: dict[Any, int] | None = None
        self._sheets: dict[str, Sheet] = {}
        self._current: Sheet | None = None
        self._header_resolver = HeaderResolver(
            self, search_limit=self.config.header_search_limit
        )
        self._load()

    @classmethod
    def from_rows(
        cls, sheets: Mapping[str, SheetData], **kwargs: Any
    ) -> Workbook:
        """Build a workbook from in-memory rows or coordinate maps."""
        return cls(None, MemoryLoader(sheets), **kwargs)

    def __repr__(self) -> str:
        return f"Workbook({self.label!r}, sheets={self.sheets!r})"

    def __iter__(self) -> Iterator[Any]:
        return self.each()

    @property
    def label(self) -> str:
        return "<memory>" if self.source is None else source_label(self.source)

    def _load(self) -> None:
        with LogContext(source=self.label), timed_operation(logger, "load") as metrics:
            stores = self.loader.load(self.source)
            self._sheets = {name: Sheet(name, store) for name, store in stores.items()}
            self._current = next(iter(self._sheets.values()), None)
            metrics.sheets = len(self._sheets)
            metrics.cells = sum(len(store) for store in stores.values())

    # ------------------------------------------------------------------ #
    # Sheet selection
    # ------------------------------------------------------------------ #

    @property
    def sheets(self) -> list[str]:
        """Sheet names in source order."""
        return list(self._sheets)

    @property
    def worksheets(self) -> list[Sheet]:
        return list(self._sheets.values())

    @property
    def default_sheet(self) -> str | None:
        """Name of the current sheet."""
        return self._current.name if self._current is not None else None

    @default_sheet.setter
    def default_sheet(self, ref: SheetRef) -> None:
        sheet = self.get_sheet(ref)
        sheet.invalidate_bounds()
        self._current = sheet
        logger.debug("Selected sheet", sheet=sheet.name)

    def get_sheet(self, ref: SheetRef = None) -> Sheet:
        """Resolve a sheet reference to a sheet of this workbook.

        Raises:
            RangeError: If a 1-based index is outside the workbook.
            NotFoundError: If a name is not a sheet of this workbook.
            InvalidSheetError: If a handle belongs to another workbook, or the
                reference is of an unsupported type.
        """
        if ref is None:
            if self._current is None:
                raise InvalidSheetError(f"{self.label} contains no sheets")
            return self._current
        if isinstance(ref, Sheet):
            if self._sheets.get(ref.name) is not ref:
                raise InvalidSheetError(
                    f"Sheet {ref.name} is not a valid worksheet for this spreadsheet",
                    details={"name": ref.name},
                )
            return ref
        if isinstance(ref, bool):
            raise InvalidSheetError(f"Not a valid sheet type: {ref!r}")
        if isinstance(ref, int):
            if not 1 <= ref <= len(self._sheets):
                raise RangeError(ref, len(self._sheets))
            return self.worksheets[ref - 1]
        if isinstance(ref, str):
            if ref not in self._sheets:
                raise NotFoundError(ref)
            return self._sheets[ref]
        raise InvalidSheetError(f"Not a valid sheet type: {ref!r}")

    def sheet(self, ref: SheetRef) -> Workbook:
        """Select a sheet and return the workbook, for chaining."""
        self.default_sheet = ref
        return self

    def each_with_pagename(self) -> Iterator[tuple[str, Workbook]]:
        """Yield ``(name, workbook)`` with each sheet selected in turn."""
        for name in self.sheets:
            yield name, self.sheet(name)

    def reload(self) -> None:
        """Discard all in-memory state and load the source again.

        The previously selected sheet is restored by name.

        Raises:
            NotFoundError: If that sheet no longer exists after reloading.
        """
        previous = self.default_sheet
        self._sheets = {}
        self._current = None
        self.header_line = self.options.header_line
        self.headers = None
        logger.info("Reloading workbook", source=self.label)
        self._load()
        if previous is not None:
            self.default_sheet = previous

    # ------------------------------------------------------------------ #
    # Bounds
    # ------------------------------------------------------------------ #

    def bounds(self, sheet: SheetRef = None) -> Bounds:
        return self.get_sheet(sheet).bounds

    def first_row(self, sheet: SheetRef = None) -> int | None:
        return self.get_sheet(sheet).first_row

    def last_row(self, sheet: SheetRef = None) -> int | None:
        return self.get_sheet(sheet).last_row

    def first_column(self, sheet: SheetRef = None) -> int | None:
        return self.get_sheet(sheet).first_column

    def last_column(self, sheet: SheetRef = None) -> int | None:
        return self.get_sheet(sheet).last_column

    def first_column_as_letter(self, sheet: SheetRef = None) -> str:
        return self.get_sheet(sheet).first_column_as_letter

    def last_column_as_letter(self, sheet: SheetRef = None) -> str:
        return self.get_sheet(sheet).last_column_as_letter

    # ------------------------------------------------------------------ #
    # Addressing
    # ------------------------------------------------------------------ #

    def cell(self, row: int | str, col: int | str, sheet: SheetRef = None) -> Any:
        """Value at ``(row, col)``; ``None`` for an absent cell.

        The column may be given as letters, and ``("B", 5)`` is accepted for
        ``(5, "B")``.
        """
        row, col = normalize(row, col)
        return self.get_sheet(sheet).cell(row, col)

    def cell_type(
        self, row: int | str, col: int | str, sheet: SheetRef = None
    ) -> CellType | None:
        row, col = normalize(row, col)
        return self.get_sheet(sheet).cell_type(row, col)

    def formula(
        self, row: int | str, col: int | str, sheet: SheetRef = None
    ) -> str | None:
        row, col = normalize(row, col)
        return self.get_sheet(sheet).formula(row, col)

    def is_empty(self, row: int | str, col: int | str, sheet: SheetRef = None) -> bool:
        row, col = normalize(row, col)
        return self.get_sheet(sheet).is_empty(row, col)

    def set_cell(
        self, row: int | str, col: int | str, value: Any, sheet: SheetRef = None
    ) -> None:
        """Set a cell in memory; the source file is never written."""
        row, col = normalize(row, col)
        self.get_sheet(sheet).set(row, col, value)

    def address(self, token: str, sheet: SheetRef = None) -> Any:
        """Look up a cell by a token such as ``"aa42"``.

        Raises:
            UnknownOperationError: If the token is not letters followed by digits.
        """
        if not isinstance(token, str) or not _ADDRESS_TOKEN.fullmatch(token):
            raise UnknownOperationError(str(token))
        row, col = split_coordinate(token)
        return self.cell(row, col, sheet)

    def row(self, row_number: int, sheet: SheetRef = None) -> list[Any]:
        return self.get_sheet(sheet).row(row_number)

    def column(self, col_number: int | str, sheet: SheetRef = None) -> list[Any]:
        _, col = normalize(1, col_number)
        return self.get_sheet(sheet).column(col)

    # ------------------------------------------------------------------ #
    # Iteration and parsing
    # ------------------------------------------------------------------ #

    def each(
        self, options: Mapping[Any, Any] | None = None, /, **kwargs: Any
    ) -> Iterator[Any]:
        """Iterate the current sheet.

        Without options, yields every row ``1..last_row`` as a list. With
        ``headers=True``, ``header_search=[...]`` or ``label=query`` options,
        yields a dict per row from the header line onward. ``clean=True``
        sanitizes string cells once per sheet first.

        Example::

            book.sheet("New Prices").parse(upc="UPC", price="^(Cost|Price)")
            book.parse(header_search=["UPC*SKU", "^Price*\\sCost\\s"])
        """
        merged = dict(options or {})
        merged.update(kwargs)
        return self._header_resolver.each(merged)

    def parse(
        self,
        options: Mapping[Any, Any] | None = None,
        /,
        mapper: Callable[[Any], Any] | None = None,
        **kwargs: Any,
    ) -> list[Any]:
        """Collect :meth:`each`'s results, optionally transformed by ``mapper``."""
        with LogContext(source=self.label, sheet=self.default_sheet):
            rows = self.each(options, **kwargs)
            if mapper is None:
                return list(rows)
            return [mapper(row) for row in rows]

    def find_header_row(
        self, query: Sequence[Any], return_headers: bool = False
    ) -> list[str] | int:
        """Find the header line matching every term of ``query``.

        Raises:
            HeaderNotFoundError: If no row within the search limit qualifies.
        """
        with LogContext(source=self.label, sheet=self.default_sheet):
            return self._header_resolver.row_with(query, return_headers)

    row_with = find_header_row

    def find(
        self,
        selector: int | str,
        *,
        conditions: Mapping[Any, Any] | None = None,
        array: bool = False,
    ) -> Any:
        """Find rows of the current sheet.

        ``find(n)`` returns row ``n`` counted from the header line.
        ``find("all", conditions={header: value})`` returns every row whose
        cells under the named headers equal the given values, as dicts keyed
        by header (or as lists with ``array=True``). ``find("first", ...)``
        returns only the first such row, or ``None``.
        """
        if isinstance(selector, int) and not isinstance(selector, bool):
            return self.row(selector + self.header_line - 1)
        if selector not in ("all", "first"):
            raise ValueError(f"unsupported find selector: {selector!r}")

        results = self._find_by_conditions(conditions or {}, array)
        if selector == "first":
            return results[0] if results else None
        return results

    def _find_by_conditions(
        self, conditions: Mapping[Any, Any], array: bool
    ) -> list[Any]:
        sheet = self.get_sheet()
        if sheet.bounds.is_empty:
            return []
        columns = range(1, sheet.last_column + 1)
        header_for = {col: sheet.cell(self.header_line, col) for col in columns}
        column_with = {header: col for col, header in header_for.items()}

        def matches(row: int) -> bool:
            for key, expected in conditions.items():
                col = column_with.get(key)
                if col is None or sheet.cell(row, col) != expected:
                    return False
            return True

        results: list[Any] = []
        for row in range(sheet.first_row, sheet.last_row + 1):
            if not matches(row):
                continue
            if array:
                results.append(sheet.row(row))
            else:
                results.append(
                    {header_for[col]: sheet.cell(row, col) for col in columns}
                )
        return results

    # ------------------------------------------------------------------ #
    # Export
    # ------------------------------------------------------------------ #

    def to_csv(
        self,
        filename: str | Path | None = None,
        sheet: SheetRef = None,
        separator: str | None = None,
    ) -> str | None:
        """Render a sheet as CSV; written to ``filename`` if given, else returned."""
        generator = CsvGenerator(separator or self.config.csv_separator)
        target = self.get_sheet(sheet)
        if filename is None:
            return generator.generate(target)
        generator.save(target, filename)
        return None

    def to_matrix(
        self,
        from_row: int | None = None,
        from_column: int | None = None,
        to_row: int | None = None,
        to_column: int | None = None,
        sheet: SheetRef = None,
    ) -> np.ndarray:
        region = Region(from_row, from_column, to_row, to_column)
        return MatrixGenerator().to_matrix(self.get_sheet(sheet), region)

    def to_yaml(
        self,
        prefix: Mapping[str, Any] | None = None,
        from_row: int | None = None,
        from_column: int | None = None,
        to_row: int | None = None,
        to_column: int | None = None,
        sheet: SheetRef = None,
    ) -> str:
        """Render non-empty cells as YAML-like blocks.

        Extra attributes can be attached with ``prefix``, e.g.
        ``book.to_yaml({"file": "flightdata_2007-06-26", "sheet": "1"})``.
        """
        region = Region(from_row, from_column, to_row, to_column)
        return YamlGenerator().generate(self.get_sheet(sheet), prefix, region)

    def to_xml(self) -> str:
        """Render every sheet of the workbook as XML."""
        return XmlGenerator().generate(self.worksheets)

    def to_dataframe(self, sheet: SheetRef = None, header: bool = True) -> pd.DataFrame:
        """Return a sheet as a DataFrame, labelled by the header line if ``header``."""
        header_line = self.header_line if header else None
        return MatrixGenerator().to_dataframe(self.get_sheet(sheet), header_line)

    def info(self) -> str:
        """Text report of the workbook and the bounds of each sheet."""
        names = self.sheets
        parts = [
            f"File: {Path(self.label).name}\n",
            f"Number of sheets: {len(names)}\n",
            f"Sheets: {', '.join(names)}\n",
        ]
        for n, sheet in enumerate(self.worksheets, start=1):
            parts.append(f"Sheet {n}:\n")
            bounds = sheet.bounds
            if bounds.is_empty:
                parts.append("  - empty -")
            else:
                parts.append(f"  First row: {bounds.first_row}\n")
                parts.append(f"  Last row: {bounds.last_row}\n")
                parts.append(f"  First column: {number_to_letter(bounds.first_col)}\n")
                parts.append(f"  Last column: {number_to_letter(bounds.last_col)}")
            if n != len(names):
                parts.append("\n")
        return "".join(parts)

    summary_info = info


def open_workbook(
    source: Source,
    *,
    loader: Loader | None = None,
    file_warning: FileWarning | str | None = None,
    header_line: int | None = None,
    config: Settings | None = None,
) -> Workbook:
    """Open a spreadsheet.

    The loader is chosen by file extension unless one is given. A mismatch
    between the extension and the loader is handled per ``file_warning``:
    ``error`` raises, ``warning`` logs and proceeds, ``ignore`` proceeds.

    Raises:
        FileTypeError: On an extension mismatch with ``file_warning="error"``.
        UnknownFileTypeError: If no loader handles the extension.
    """
    config = config or settings
    options = WorkbookOptions.from_settings(
        config, file_warning=file_warning, header_line=header_line
    )
    if loader is None:
        loader = loader_for(source, default_loaders())
    check_file_type(source, loader, options.file_warning)
    return Workbook(source, loader, options, config)
