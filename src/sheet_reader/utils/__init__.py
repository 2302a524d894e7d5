"""Utilities package for sheet_reader.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from sheet_reader.utils.exceptions import (
    ErrorCode,
    FileError,
    FileTypeError,
    HeaderNotFoundError,
    InvalidColumnError,
    InvalidSheetError,
    LoaderError,
    MalformedReferenceError,
    NotFoundError,
    RangeError,
    SheetReaderError,
    UnknownFileTypeError,
    UnknownOperationError,
    UnsupportedCellTypeError,
)
from sheet_reader.utils.logging import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "ErrorCode",
    "FileError",
    "FileTypeError",
    "HeaderNotFoundError",
    "InvalidColumnError",
    "InvalidSheetError",
    "LoaderError",
    "MalformedReferenceError",
    "NotFoundError",
    "RangeError",
    "SheetReaderError",
    "UnknownFileTypeError",
    "UnknownOperationError",
    "UnsupportedCellTypeError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
