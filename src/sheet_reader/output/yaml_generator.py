"""YAML-like text rendering of a sheet region, one block per non-empty cell."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sheet_reader.output.formatting import Region, plain_value
from sheet_reader.sheet import Sheet


class YamlGenerator:
    """Emits blocks of the form::

        cell_<row>_<col>:
          <prefix key>: <prefix value>
          row: <row>
          col: <col>
          celltype: <type>
          value: <value>

    Every line ends with a space before the newline, and the document starts
    with ``--- `` unless the sheet is empty.
    """

    def generate(
        self,
        sheet: Sheet,
        prefix: Mapping[str, Any] | None = None,
        region: Region | None = None,
    ) -> str:
        bounds = sheet.bounds
        if bounds.is_empty:
            return ""
        rows, cols = (region or Region()).resolve(bounds)
        prefix = prefix or {}

        parts = ["--- \n"]
        for row in rows:
            for col in cols:
                if sheet.is_empty(row, col):
                    continue
                cell = sheet.store.get(row, col)
                parts.append(f"cell_{row}_{col}: \n")
                for key, value in prefix.items():
                    parts.append(f"  {key}: {value} \n")
                parts.append(f"  row: {row} \n")
                parts.append(f"  col: {col} \n")
                parts.append(f"  celltype: {cell.cell_type} \n")
                parts.append(f"  value: {plain_value(cell)} \n")
        return "".join(parts)
