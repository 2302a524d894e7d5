"""Tests for matrix and DataFrame export."""

import numpy as np
import pandas as pd

from sheet_reader.output.matrix_generator import MatrixGenerator
from sheet_reader.sheet import Sheet
from sheet_reader.workbook import Workbook


class TestToMatrix:
    def test_shape_follows_bounds(self, sparse_book: Workbook) -> None:
        matrix = sparse_book.to_matrix()
        assert isinstance(matrix, np.ndarray)
        assert matrix.shape == (5, 4)
        assert matrix[0, 0] == "top left"
        assert matrix[4, 3] == 42
        assert matrix[2, 1] is None

    def test_explicit_region(self, sparse_book: Workbook) -> None:
        matrix = sparse_book.to_matrix(from_row=1, from_column=1)
        assert matrix.shape == (7, 5)
        assert matrix[2, 1] == "top left"

    def test_region_on_named_sheet(self, price_book: Workbook) -> None:
        matrix = price_book.to_matrix(4, 1, 6, 1, sheet="Prices")
        assert matrix.tolist() == [["A-100"], ["A-200"], ["A-300"]]

    def test_empty_sheet(self) -> None:
        assert MatrixGenerator().to_matrix(Sheet("Empty")).shape == (0, 0)


class TestToDataFrame:
    def test_header_line_labels_columns(self, price_book: Workbook) -> None:
        price_book.header_line = 3
        frame = price_book.to_dataframe()
        assert list(frame.columns) == ["SKU", "Description", "Price"]
        assert frame["SKU"].tolist() == ["A-100", "A-200", "A-300"]
        assert len(frame) == 3

    def test_missing_header_cells_get_placeholders(self, price_book: Workbook) -> None:
        frame = price_book.to_dataframe()
        assert list(frame.columns) == ["Quarterly price list", "col_2", "col_3"]
        assert len(frame) == 5

    def test_without_header(self, price_book: Workbook) -> None:
        frame = price_book.to_dataframe(header=False)
        assert list(frame.columns) == ["A", "B", "C"]
        assert len(frame) == 6
        assert frame.iloc[3, 2] == 9.5

    def test_empty_sheet(self) -> None:
        frame = MatrixGenerator().to_dataframe(Sheet("Empty"), header_line=1)
        assert isinstance(frame, pd.DataFrame)
        assert frame.empty
