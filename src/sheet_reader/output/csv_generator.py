"""CSV rendering of a sheet."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TextIO

from sheet_reader.output.formatting import cell_to_csv
from sheet_reader.sheet import Sheet
from sheet_reader.utils.logging import get_logger

logger = get_logger(__name__)


class CsvGenerator:
    """Writes rows ``1..last_row`` and columns ``1..last_column`` of a sheet.

    Leading empty rows and columns are kept so cell positions survive a
    round trip through a spreadsheet program.
    """

    def __init__(self, separator: str = ",") -> None:
        self.separator = separator

    def write(self, sheet: Sheet, out: TextIO) -> int:
        """Write CSV lines to ``out`` and return the number of rows written."""
        bounds = sheet.bounds
        if bounds.is_empty:
            return 0
        for row in range(1, bounds.last_row + 1):
            fields = [
                cell_to_csv(sheet.store.get(row, col), row, col)
                for col in range(1, bounds.last_col + 1)
            ]
            out.write(self.separator.join(fields))
            out.write("\n")
        return bounds.last_row

    def generate(self, sheet: Sheet) -> str:
        """Return the CSV text for ``sheet``; empty sheets give ""."""
        buffer = io.StringIO()
        self.write(sheet, buffer)
        return buffer.getvalue()

    def save(self, sheet: Sheet, filename: str | Path) -> None:
        with open(filename, "w", encoding="utf-8", newline="") as fh:
            rows = self.write(sheet, fh)
        logger.info("Wrote CSV", file=str(filename), sheet=sheet.name, rows=rows)
