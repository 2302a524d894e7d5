"""Tests for header search and structured iteration."""

import pytest

from sheet_reader.config import Settings
from sheet_reader.headers import HeaderResolver, split_term
from sheet_reader.utils.exceptions import HeaderNotFoundError
from sheet_reader.workbook import Workbook


def test_split_term_drops_empty_alternatives() -> None:
    assert split_term("UPC*SKU") == ["UPC", "SKU"]
    assert split_term("*Price**") == ["Price"]


class TestRowWith:
    """Tests for locating the header line."""

    def test_alternatives(self) -> None:
        book = Workbook.from_rows({"Sheet1": [["SKU", "Price"], ["A-1", 3]]})
        assert book.row_with(["UPC*SKU"]) == 1
        assert book.header_line == 1

    def test_returns_matched_headers(self, price_book: Workbook) -> None:
        found = price_book.find_header_row(["sku", "^price"], return_headers=True)
        assert found == ["SKU", "Price"]
        assert price_book.header_line == 3

    def test_title_row_does_not_qualify(self, price_book: Workbook) -> None:
        # The title row matches "price" but not "sku"
        assert price_book.find_header_row(["price", "sku"]) == 3

    def test_first_alternative_wins(self) -> None:
        book = Workbook.from_rows({"Sheet1": [["Unit price", "Price"]]})
        assert book.row_with(["price*^Price$"], return_headers=True) == ["Unit price"]

    def test_only_string_cells_are_searched(self) -> None:
        book = Workbook.from_rows({"Sheet1": [[2024, "Year"], ["2024", None]]})
        with pytest.raises(HeaderNotFoundError):
            book.row_with(["2024", "Year*x"])

    def test_gives_up_after_search_limit(self) -> None:
        rows = [["filler"] for _ in range(150)] + [["SKU"]]
        book = Workbook.from_rows({"Sheet1": rows})
        with pytest.raises(HeaderNotFoundError) as exc_info:
            book.row_with(["SKU"])
        assert exc_info.value.rows_scanned == 101
        assert exc_info.value.query == ["SKU"]

    def test_search_limit_from_settings(self) -> None:
        rows = [["filler"]] * 10 + [["SKU"]]
        config = Settings(_env_file=None, header_search_limit=5)
        book = Workbook.from_rows({"Sheet1": rows}, config=config)
        with pytest.raises(HeaderNotFoundError):
            book.row_with(["SKU"])

    def test_header_just_inside_limit(self) -> None:
        rows = [["filler"]] * 100 + [["SKU"]]
        book = Workbook.from_rows({"Sheet1": rows})
        assert book.row_with(["SKU"]) == 101

    def test_sheet_ends_without_match(self, price_book: Workbook) -> None:
        with pytest.raises(HeaderNotFoundError) as exc_info:
            price_book.row_with(["UPC"])
        assert exc_info.value.rows_scanned == 6
        assert exc_info.value.error_code.value == "E4001"


class TestEach:
    """Tests for iteration with and without grouping options."""

    def test_plain_rows(self, price_book: Workbook) -> None:
        rows = list(price_book.each())
        assert len(rows) == 6
        assert rows[3] == ["A-100", "Widget", 9.5]

    def test_headers_from_first_row(self) -> None:
        book = Workbook.from_rows({"Sheet1": [["Name", "Age"], ["Al", "30"]]})
        records = book.parse(headers=True)
        assert records[0] == {"Name": "Name", "Age": "Age"}
        assert records[1] == {"Name": "Al", "Age": "30"}
        assert book.headers == {"Name": 1, "Age": 2}

    def test_first_row_flag_with_offset_columns(self) -> None:
        book = Workbook.from_rows(
            {"Sheet1": {(1, 2): "Name", (1, 3): "Age", (2, 2): "Al", (2, 3): 30}}
        )
        records = book.parse(headers="first_row")
        assert book.headers == {"Name": 2, "Age": 3}
        assert records[1] == {"Name": "Al", "Age": 30}

    def test_header_search(self, price_book: Workbook) -> None:
        records = price_book.parse(header_search=["UPC*SKU", "Price"])
        assert price_book.header_line == 3
        assert price_book.headers == {"SKU": 1, "Description": 2, "Price": 3}
        assert records[0] == {
            "SKU": "SKU",
            "Description": "Description",
            "Price": "Price",
        }
        assert records[-1] == {"SKU": "A-300", "Description": "Gizmo", "Price": 3.25}
        assert len(records) == 4

    def test_header_search_on_simple_sheet(self) -> None:
        book = Workbook.from_rows({"Sheet1": [["SKU", "Price"], ["A-1", 3]]})
        records = book.parse(header_search=["UPC*SKU"])
        assert book.header_line == 1
        assert book.headers == {"SKU": 1, "Price": 2}
        assert records[1] == {"SKU": "A-1", "Price": 3}

    def test_label_queries(self, price_book: Workbook) -> None:
        records = price_book.parse(sku="SKU", price="^(Cost|Price)")
        assert price_book.headers == {"sku": 1, "price": 3}
        assert records[1:] == [
            {"sku": "A-100", "price": 9.5},
            {"sku": "A-200", "price": 12},
            {"sku": "A-300", "price": 3.25},
        ]

    def test_integer_queries_are_literal_columns(self, price_book: Workbook) -> None:
        records = price_book.parse({"sku": "SKU", "name": 2})
        assert price_book.headers == {"sku": 1, "name": 2}
        assert records[1] == {"sku": "A-100", "name": "Widget"}

    def test_only_integer_queries_skip_search(self, price_book: Workbook) -> None:
        records = price_book.parse(name=2)
        assert price_book.header_line == 1
        assert records[0] == {"name": None}
        assert len(records) == 6

    def test_parse_with_mapper(self, price_book: Workbook) -> None:
        skus = price_book.parse(sku="SKU", mapper=lambda record: record["sku"])
        assert skus == ["SKU", "A-100", "A-200", "A-300"]

    def test_missing_header_propagates(self, price_book: Workbook) -> None:
        with pytest.raises(HeaderNotFoundError):
            price_book.parse(upc="UPC")


class TestClean:
    def test_clean_sanitizes_strings_once(self) -> None:
        book = Workbook.from_rows({"Sheet1": [["  café\t", 5], ["ok", None]]})
        rows = book.parse(clean=True)
        assert rows[0] == ["caf", 5]
        sheet = book.get_sheet()
        assert sheet.cleaned

        sheet.store.replace_value(2, 1, " é ")
        book.parse(clean=True)
        assert book.cell(2, 1) == " é "

    def test_clean_before_header_search(self) -> None:
        book = Workbook.from_rows({"Sheet1": [[" SKU "], ["A-1"]]})
        records = book.parse(clean=True, header_search=["^SKU$"])
        assert records == [{"SKU": "SKU"}, {"SKU": "A-1"}]


def test_resolver_uses_current_sheet(price_book: Workbook) -> None:
    price_book.default_sheet = "Notes"
    resolver = HeaderResolver(price_book)
    assert resolver.first_row_map() == {"Reviewed": 1, True: 2}
    assert resolver.header_line_map() == {"Reviewed": 1, True: 2}
