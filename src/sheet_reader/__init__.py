"""Sheet Reader - uniform in-memory access to spreadsheet content."""

from sheet_reader.bounds import Bounds
from sheet_reader.cell_store import Cell, CellType, Link, SparseCellStore
from sheet_reader.coordinates import (
    letter_to_number,
    number_to_letter,
    split_coordinate,
)
from sheet_reader.sheet import Sheet
from sheet_reader.workbook import Workbook, open_workbook

__all__ = [
    "Bounds",
    "Cell",
    "CellType",
    "Link",
    "Sheet",
    "SparseCellStore",
    "Workbook",
    "letter_to_number",
    "number_to_letter",
    "open_workbook",
    "split_coordinate",
]
__version__ = "0.1.0"
