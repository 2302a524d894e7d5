"""XML rendering of every sheet in a workbook."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable

from sheet_reader.output.formatting import plain_value
from sheet_reader.sheet import Sheet

XML_DECLARATION = '<?xml version="1.0"?>\n'


class XmlGenerator:
    """Builds ``<spreadsheet><sheet name=..><cell row col type>value</cell>``.

    Sheets without bounds still get a ``<sheet>`` element, with no cells.
    """

    def build(self, sheets: Iterable[Sheet]) -> ET.Element:
        root = ET.Element("spreadsheet")
        for sheet in sheets:
            sheet_el = ET.SubElement(root, "sheet", {"name": sheet.name})
            bounds = sheet.bounds
            if bounds.is_empty:
                continue
            for row in range(bounds.first_row, bounds.last_row + 1):
                for col in range(bounds.first_col, bounds.last_col + 1):
                    if sheet.is_empty(row, col):
                        continue
                    cell = sheet.store.get(row, col)
                    cell_el = ET.SubElement(
                        sheet_el,
                        "cell",
                        {
                            "row": str(row),
                            "column": str(col),
                            "type": str(cell.cell_type),
                        },
                    )
                    cell_el.text = plain_value(cell)
        return root

    def generate(self, sheets: Iterable[Sheet]) -> str:
        root = self.build(sheets)
        ET.indent(root)
        # ElementTree writes "<sheet />"; markup and attribute values never
        # otherwise contain " />" since ">" is escaped
        body = ET.tostring(root, encoding="unicode").replace(" />", "/>")
        return XML_DECLARATION + body + "\n"
