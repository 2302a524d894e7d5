"""Header line discovery and structured row iteration.

Header search terms are strings whose ``*`` separates alternatives, e.g.
``"UPC*SKU"`` matches a column titled either UPC or SKU. Alternatives are
case-insensitive regular expressions searched within string cells. Within a
term the first alternative that matches anything in the row wins, even if a
later alternative would match a more specific header.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sheet_reader.utils.exceptions import HeaderNotFoundError
from sheet_reader.utils.logging import get_logger

if TYPE_CHECKING:
    from sheet_reader.workbook import Workbook

logger = get_logger(__name__)

DEFAULT_SEARCH_LIMIT = 100

# Values of the ``headers`` option meaning "use the first row as-is"
FIRST_ROW = "first_row"
_FIRST_ROW_FLAGS = (True, FIRST_ROW)


def split_term(term: Any) -> list[str]:
    """Split a search term on ``*`` into its non-empty alternatives."""
    return [alternative for alternative in str(term).split("*") if alternative]


def first_match(pattern: re.Pattern[str], row: Sequence[Any]) -> str | None:
    for value in row:
        if isinstance(value, str) and pattern.search(value):
            return value
    return None


class HeaderResolver:
    """Locates header lines and drives structured iteration over the
    current sheet of a workbook.

    The resolved header line is stored back on ``workbook.header_line`` and
    the resolved label map on ``workbook.headers``.
    """

    def __init__(
        self, workbook: Workbook, search_limit: int = DEFAULT_SEARCH_LIMIT
    ) -> None:
        self.workbook = workbook
        self.search_limit = search_limit

    def row_with(
        self, query: Sequence[Any], return_headers: bool = False
    ) -> list[str] | int:
        """Find the first row in which every term of ``query`` matches a cell.

        Returns the matched cell values when ``return_headers`` is true,
        otherwise the 1-based row number.

        Raises:
            HeaderNotFoundError: If more than ``search_limit`` rows are scanned,
                or the sheet ends, without a qualifying row.
        """
        terms = [
            [re.compile(alternative, re.IGNORECASE) for alternative in split_term(q)]
            for q in query
        ]
        sheet = self.workbook.get_sheet()
        last_row = sheet.last_row or 0

        line_no = 0
        for line_no in range(1, last_row + 1):
            row = sheet.row(line_no)
            headers = []
            for alternatives in terms:
                for pattern in alternatives:
                    match = first_match(pattern, row)
                    if match is not None:
                        headers.append(match)
                        break

            if len(headers) == len(terms):
                self.workbook.header_line = line_no
                logger.info("Found header row", line=line_no, terms=len(terms))
                return headers if return_headers else line_no
            if line_no > self.search_limit:
                break

        raise HeaderNotFoundError(list(query), line_no)

    def build_header_map(self, label_to_query: Mapping[Any, Any]) -> dict[Any, int]:
        """Map each label to the column of its matched header cell.

        Integer queries are literal column numbers and are not searched for.
        """
        searched = {
            label: query
            for label, query in label_to_query.items()
            if not isinstance(query, int)
        }
        matches: list[str] = []
        if searched:
            matches = self.row_with(list(searched.values()), return_headers=True)

        sheet = self.workbook.get_sheet()
        header_row = sheet.row(self.workbook.header_line)
        first_col = sheet.first_column or 1
        columns = dict(zip(searched, matches, strict=True))

        header_map: dict[Any, int] = {}
        for label, query in label_to_query.items():
            if label in columns:
                header_map[label] = header_row.index(columns[label]) + first_col
            else:
                header_map[label] = query
        return header_map

    def first_row_map(self) -> dict[Any, int]:
        """Label map taken from the first non-empty row, in encountered order."""
        sheet = self.workbook.get_sheet()
        if sheet.first_row is None:
            return {}
        first_col = sheet.first_column
        return {
            value: first_col + offset
            for offset, value in enumerate(sheet.row(sheet.first_row))
        }

    def header_line_map(self) -> dict[Any, int]:
        """Label map built from the literal cells of the current header line."""
        sheet = self.workbook.get_sheet()
        if sheet.first_column is None:
            return {}
        return {
            sheet.cell(self.workbook.header_line, col): col
            for col in range(sheet.first_column, sheet.last_column + 1)
        }

    def each(self, options: Mapping[str, Any]) -> Iterator[Any]:
        """Yield rows, or label->value records when grouping options are given.

        Recognised options are ``clean``, ``headers`` (``True`` or
        ``"first_row"``) and ``header_search`` (list of terms); any other
        key is a label mapped to a header query or a literal column number.
        """
        opts = dict(options)
        clean = opts.pop("clean", False)
        sheet = self.workbook.get_sheet()

        if clean and sheet.clean():
            logger.info("Cleaned sheet", sheet=sheet.name)

        header_search = opts.pop("header_search", None)
        headers_flag = opts.pop("headers", None)
        if not header_search and headers_flag not in _FIRST_ROW_FLAGS and not opts:
            for line in range(1, (sheet.last_row or 0) + 1):
                yield sheet.row(line)
            return

        if header_search:
            self.workbook.headers = None
            self.row_with(header_search)
            header_map = self.header_line_map()
        elif headers_flag in _FIRST_ROW_FLAGS:
            header_map = self.first_row_map()
        else:
            header_map = self.build_header_map(opts)
        self.workbook.headers = header_map

        for line in range(self.workbook.header_line, (sheet.last_row or 0) + 1):
            yield {label: sheet.cell(line, col) for label, col in header_map.items()}
