"""Tests for bounds computation and caching."""

from unittest.mock import patch

from sheet_reader import sheet as sheet_module
from sheet_reader.bounds import Bounds, compute_bounds
from sheet_reader.cell_store import SparseCellStore
from sheet_reader.sheet import Sheet
from sheet_reader.workbook import Workbook


def test_bounds_of_sparse_sheet(sparse_book: Workbook) -> None:
    assert sparse_book.bounds() == Bounds(
        first_row=3, last_row=7, first_col=2, last_col=5
    )
    assert sparse_book.first_row() == 3
    assert sparse_book.last_row() == 7
    assert sparse_book.first_column() == 2
    assert sparse_book.last_column() == 5
    assert sparse_book.first_column_as_letter() == "B"
    assert sparse_book.last_column_as_letter() == "E"


def test_empty_sheet_has_no_bounds() -> None:
    bounds = compute_bounds(SparseCellStore())
    assert bounds == Bounds(None, None, None, None)
    assert bounds.is_empty


def test_empty_strings_do_not_extend_bounds() -> None:
    store = SparseCellStore()
    store.set(2, 2, "value")
    store.set(10, 10, "")
    assert compute_bounds(store).to_dict() == {
        "first_row": 2,
        "last_row": 2,
        "first_col": 2,
        "last_col": 2,
    }


def test_whitespace_strings_extend_bounds() -> None:
    store = SparseCellStore()
    store.set(2, 2, "value")
    store.set(10, 10, "   ")
    assert compute_bounds(store) == Bounds(2, 10, 2, 10)


def test_bounds_are_cached_until_mutation() -> None:
    sheet = Sheet("Data")
    sheet.store.set(3, 2, "a")
    sheet.store.set(7, 5, "b")

    with patch.object(
        sheet_module, "compute_bounds", wraps=compute_bounds
    ) as scanner:
        first = sheet.bounds
        second = sheet.bounds
        assert first == second
        assert scanner.call_count == 1

        sheet.set(9, 1, "c")
        assert sheet.bounds == Bounds(3, 9, 1, 5)
        assert scanner.call_count == 2


def test_selecting_sheet_resets_cache(sparse_book: Workbook) -> None:
    with patch.object(
        sheet_module, "compute_bounds", wraps=compute_bounds
    ) as scanner:
        sparse_book.bounds()
        sparse_book.bounds()
        sparse_book.default_sheet = "Sparse"
        sparse_book.bounds()
        assert scanner.call_count == 2
