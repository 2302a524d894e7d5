from __future__ import annotations

import pytest

from sheet_reader.workbook import Workbook


@pytest.fixture
def price_book() -> Workbook:
    """Two-sheet workbook with a title block above a price table."""
    return Workbook.from_rows(
        {
            "Prices": [
                ["Quarterly price list", None, None],
                [None, None, None],
                ["SKU", "Description", "Price"],
                ["A-100", "Widget", 9.5],
                ["A-200", "Gadget", 12],
                ["A-300", "Gizmo", 3.25],
            ],
            "Notes": [
                ["Reviewed", True],
            ],
        }
    )


@pytest.fixture
def sparse_book() -> Workbook:
    """Workbook whose only sheet has entries at (3, 2) and (7, 5)."""
    return Workbook.from_rows({"Sparse": {(3, 2): "top left", (7, 5): 42}})
