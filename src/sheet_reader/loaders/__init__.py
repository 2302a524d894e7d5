"""Loaders that populate cell stores from source files or in-memory data."""

from sheet_reader.loaders.base import (
    Loader,
    Source,
    check_file_type,
    loader_for,
    source_extension,
)
from sheet_reader.loaders.csv_loader import CsvLoader
from sheet_reader.loaders.excel_loader import ExcelLoader
from sheet_reader.loaders.memory_loader import MemoryLoader


def default_loaders() -> list[Loader]:
    """Loaders consulted, in order, when a workbook is opened by path."""
    return [ExcelLoader(), CsvLoader()]


__all__ = [
    "CsvLoader",
    "ExcelLoader",
    "Loader",
    "MemoryLoader",
    "Source",
    "check_file_type",
    "default_loaders",
    "loader_for",
    "source_extension",
]
