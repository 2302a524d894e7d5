"""Grid exports of a sheet region: numpy matrices and pandas DataFrames."""

from __future__ import annotations

import numpy as np
import pandas as pd

from sheet_reader.coordinates import number_to_letter
from sheet_reader.output.formatting import Region
from sheet_reader.sheet import Sheet


class MatrixGenerator:
    """Turns a sheet region into rectangular value grids."""

    def to_matrix(self, sheet: Sheet, region: Region | None = None) -> np.ndarray:
        """Return a 2-D object array; an empty sheet gives shape ``(0, 0)``."""
        rows, cols = (region or Region()).resolve(sheet.bounds)
        matrix = np.empty((len(rows), len(cols)), dtype=object)
        for i, row in enumerate(rows):
            for j, col in enumerate(cols):
                matrix[i, j] = sheet.cell(row, col)
        return matrix

    def to_dataframe(
        self, sheet: Sheet, header_line: int | None = None
    ) -> pd.DataFrame:
        """Return the sheet as a DataFrame.

        With a ``header_line`` the values of that row label the columns and
        only later rows become data; otherwise columns are labelled by letter.
        """
        bounds = sheet.bounds
        if bounds.is_empty:
            return pd.DataFrame()
        cols = range(bounds.first_col, bounds.last_col + 1)

        if header_line is None:
            columns = [number_to_letter(col) for col in cols]
            first_data_row = bounds.first_row
        else:
            columns = [
                sheet.cell(header_line, col)
                if sheet.cell(header_line, col) is not None
                else f"col_{col}"
                for col in cols
            ]
            first_data_row = header_line + 1

        data = [
            [sheet.cell(row, col) for col in cols]
            for row in range(first_data_row, bounds.last_row + 1)
        ]
        return pd.DataFrame(data, columns=columns)
