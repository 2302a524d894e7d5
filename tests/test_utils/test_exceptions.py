"""Tests for the centralized exception classes."""

import pytest

from sheet_reader.utils.exceptions import (
    AddressError,
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
    SheetError,
    SheetReaderError,
    UnknownFileTypeError,
    UnknownOperationError,
    UnsupportedCellTypeError,
)


class TestErrorCode:
    """Tests for ErrorCode enumeration."""

    def test_error_codes_are_unique(self) -> None:
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    def test_error_code_format(self) -> None:
        """Error codes should follow Exxxx format."""
        for code in ErrorCode:
            assert code.value.startswith("E")
            assert len(code.value) == 5
            assert code.value[1:].isdigit()

    @pytest.mark.parametrize(
        ("prefix", "codes"),
        [
            ("E1", [ErrorCode.FILE_TYPE_MISMATCH, ErrorCode.UNKNOWN_FILE_TYPE]),
            ("E2", [ErrorCode.SHEET_INDEX_OUT_OF_RANGE, ErrorCode.SHEET_NOT_FOUND]),
            ("E3", [ErrorCode.INVALID_COLUMN, ErrorCode.UNKNOWN_OPERATION]),
            ("E4", [ErrorCode.HEADER_NOT_FOUND]),
        ],
    )
    def test_code_groups(self, prefix: str, codes: list[ErrorCode]) -> None:
        for code in codes:
            assert code.value.startswith(prefix)


class TestSheetReaderError:
    """Tests for the base exception."""

    def test_basic_initialization(self) -> None:
        error = SheetReaderError("Test error message")
        assert str(error) == "[E9001] Test error message"
        assert error.message == "Test error message"
        assert error.error_code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}

    def test_to_dict(self) -> None:
        error = SheetReaderError(
            "Bad sheet", error_code=ErrorCode.INVALID_SHEET, details={"name": "x"}
        )
        assert error.to_dict() == {
            "error_code": "E2003",
            "message": "Bad sheet",
            "details": {"name": "x"},
        }

    def test_to_dict_without_details(self) -> None:
        assert "details" not in SheetReaderError("Test").to_dict()


class TestFileErrors:
    def test_file_type_error(self) -> None:
        error = FileTypeError("book.xlsx", expected=".csv", actual=".xlsx")
        assert isinstance(error, FileError)
        assert error.message == "book.xlsx is not a .csv file"
        assert error.details == {
            "expected": ".csv",
            "actual": ".xlsx",
            "file_path": "book.xlsx",
        }

    def test_unknown_file_type_error(self) -> None:
        error = UnknownFileTypeError("notes", "")
        assert error.error_code == ErrorCode.UNKNOWN_FILE_TYPE
        assert "(none)" in error.message

    def test_loader_error_defaults(self) -> None:
        error = LoaderError("cannot read", file_path="x.csv")
        assert error.error_code == ErrorCode.LOAD_FAILED
        assert error.file_path == "x.csv"


class TestSheetErrors:
    def test_range_error(self) -> None:
        error = RangeError(5, 2)
        assert isinstance(error, SheetError)
        assert error.message == "Sheet index 5 not found"
        assert error.details == {"index": 5, "sheet_count": 2}

    def test_not_found_error(self) -> None:
        error = NotFoundError("Prices")
        assert error.name == "Prices"
        assert str(error) == "[E2002] sheet 'Prices' not found"

    def test_invalid_sheet_error(self) -> None:
        assert InvalidSheetError("nope").error_code == ErrorCode.INVALID_SHEET


class TestAddressErrors:
    def test_invalid_column_error(self) -> None:
        error = InvalidColumnError("A1", "1")
        assert isinstance(error, AddressError)
        assert error.letters == "A1"
        assert "'1'" in error.message

    def test_malformed_reference_error(self) -> None:
        error = MalformedReferenceError("2A")
        assert error.reference == "2A"
        assert error.error_code == ErrorCode.MALFORMED_REFERENCE

    def test_unknown_operation_error(self) -> None:
        error = UnknownOperationError("first_row")
        assert error.token == "first_row"
        assert error.error_code == ErrorCode.UNKNOWN_OPERATION


def test_header_not_found_error() -> None:
    error = HeaderNotFoundError(["UPC*SKU"], 101)
    assert error.message == "Couldn't find header row."
    assert error.details == {"query": ["UPC*SKU"], "rows_scanned": 101}


def test_unsupported_cell_type_error() -> None:
    error = UnsupportedCellTypeError("sparkline", 3, 4)
    assert error.message == "unhandled celltype sparkline"
    assert error.details == {"cell_type": "sparkline", "row": 3, "col": 4}
