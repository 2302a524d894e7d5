"""Centralized exception classes for sheet_reader.

This module provides a hierarchy of custom exceptions with error codes and
structured error details for consistent error handling throughout the
package.

Exception Hierarchy:
    SheetReaderError (base)
    ├── FileError
    │   ├── FileTypeError
    │   ├── UnknownFileTypeError
    │   └── LoaderError
    ├── SheetError
    │   ├── RangeError
    │   ├── NotFoundError
    │   └── InvalidSheetError
    ├── AddressError
    │   ├── InvalidColumnError
    │   ├── MalformedReferenceError
    │   └── UnknownOperationError
    ├── HeaderNotFoundError
    └── UnsupportedCellTypeError

Error Codes:
    All errors have a unique error code (e.g., "E2001") that can be used
    for programmatic error handling and documentation.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used in the package.

    Error codes are grouped by category:
    - E1xxx: File/loader errors
    - E2xxx: Sheet selection errors
    - E3xxx: Addressing errors
    - E4xxx: Header resolution errors
    - E5xxx: Export errors
    - E9xxx: Internal/unexpected errors
    """

    # File errors (E1xxx)
    FILE_TYPE_MISMATCH = "E1001"
    UNKNOWN_FILE_TYPE = "E1002"
    LOAD_FAILED = "E1003"

    # Sheet errors (E2xxx)
    SHEET_INDEX_OUT_OF_RANGE = "E2001"
    SHEET_NOT_FOUND = "E2002"
    INVALID_SHEET = "E2003"

    # Addressing errors (E3xxx)
    INVALID_COLUMN = "E3001"
    MALFORMED_REFERENCE = "E3002"
    UNKNOWN_OPERATION = "E3003"

    # Header errors (E4xxx)
    HEADER_NOT_FOUND = "E4001"

    # Export errors (E5xxx)
    UNSUPPORTED_CELL_TYPE = "E5001"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"
    CONFIGURATION_ERROR = "E9002"


class SheetReaderError(Exception):
    """Base exception for all sheet_reader errors.

    It provides:
    - Unique error codes for programmatic handling
    - Structured error details for logging and debugging

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# File Errors (E1xxx)
# =============================================================================


class FileError(SheetReaderError):
    """Base class for file and loader errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.LOAD_FAILED,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with file path information.

        Args:
            message: Error message.
            error_code: Error code.
            file_path: Path to the problematic file.
            details: Additional details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, error_code, details)
        self.file_path = file_path


class FileTypeError(FileError):
    """Raised when a file's extension does not match the loader handling it."""

    def __init__(
        self,
        file_path: str,
        expected: str,
        actual: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the expected and actual extensions.

        Args:
            file_path: Path of the mismatching file.
            expected: Extension(s) the loader accepts.
            actual: Extension found on the file.
            details: Additional details.
        """
        details = details or {}
        details["expected"] = expected
        details["actual"] = actual
        super().__init__(
            f"{file_path} is not a {expected} file",
            error_code=ErrorCode.FILE_TYPE_MISMATCH,
            file_path=file_path,
            details=details,
        )
        self.expected = expected
        self.actual = actual


class UnknownFileTypeError(FileError):
    """Raised when no loader is registered for a file extension."""

    def __init__(self, file_path: str, extension: str) -> None:
        super().__init__(
            f"unknown file type: {extension or '(none)'}",
            error_code=ErrorCode.UNKNOWN_FILE_TYPE,
            file_path=file_path,
            details={"extension": extension},
        )
        self.extension = extension


class LoaderError(FileError):
    """Raised when a loader cannot decode its source."""


# =============================================================================
# Sheet Errors (E2xxx)
# =============================================================================


class SheetError(SheetReaderError):
    """Base class for sheet selection errors."""


class RangeError(SheetError):
    """Raised when a 1-based sheet index is outside the workbook."""

    def __init__(self, index: int, sheet_count: int) -> None:
        super().__init__(
            f"Sheet index {index} not found",
            error_code=ErrorCode.SHEET_INDEX_OUT_OF_RANGE,
            details={"index": index, "sheet_count": sheet_count},
        )
        self.index = index


class NotFoundError(SheetError):
    """Raised when a sheet name is absent from the workbook."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"sheet '{name}' not found",
            error_code=ErrorCode.SHEET_NOT_FOUND,
            details={"name": name},
        )
        self.name = name


class InvalidSheetError(SheetError):
    """Raised when a sheet handle, or reference type, is foreign to the workbook."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, ErrorCode.INVALID_SHEET, details)


# =============================================================================
# Addressing Errors (E3xxx)
# =============================================================================


class AddressError(SheetReaderError):
    """Base class for cell addressing errors."""


class InvalidColumnError(AddressError):
    """Raised when a column reference contains a character outside A-Z."""

    def __init__(self, letters: str, character: str | None = None) -> None:
        if character is None:
            message = f"invalid column reference '{letters}'"
        else:
            message = f"invalid column character '{character}'"
        super().__init__(
            message,
            error_code=ErrorCode.INVALID_COLUMN,
            details={"letters": letters},
        )
        self.letters = letters


class MalformedReferenceError(AddressError):
    """Raised when a combined reference like "A2" cannot be parsed."""

    def __init__(self, reference: str) -> None:
        super().__init__(
            f"malformed cell reference '{reference}'",
            error_code=ErrorCode.MALFORMED_REFERENCE,
            details={"reference": reference},
        )
        self.reference = reference


class UnknownOperationError(AddressError):
    """Raised when a dynamic address token does not look like "aa42"."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"unknown operation '{token}'",
            error_code=ErrorCode.UNKNOWN_OPERATION,
            details={"token": token},
        )
        self.token = token


# =============================================================================
# Header Errors (E4xxx)
# =============================================================================


class HeaderNotFoundError(SheetReaderError):
    """Raised when no row qualifies as a header line within the scan limit."""

    def __init__(self, query: list[Any], rows_scanned: int) -> None:
        super().__init__(
            "Couldn't find header row.",
            error_code=ErrorCode.HEADER_NOT_FOUND,
            details={"query": query, "rows_scanned": rows_scanned},
        )
        self.query = query
        self.rows_scanned = rows_scanned


# =============================================================================
# Export Errors (E5xxx)
# =============================================================================


class UnsupportedCellTypeError(SheetReaderError):
    """Raised when an export meets a cell type it has no rendering for."""

    def __init__(self, cell_type: Any, row: int, col: int) -> None:
        super().__init__(
            f"unhandled celltype {cell_type}",
            error_code=ErrorCode.UNSUPPORTED_CELL_TYPE,
            details={"cell_type": str(cell_type), "row": row, "col": col},
        )
        self.cell_type = cell_type
