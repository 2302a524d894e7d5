"""Export module for sheets.

This module renders sheets, or regions of them, as CSV, YAML-like text,
XML, numpy matrices and pandas DataFrames.
"""

from sheet_reader.output.csv_generator import CsvGenerator
from sheet_reader.output.formatting import Region, cell_to_csv, plain_value
from sheet_reader.output.matrix_generator import MatrixGenerator
from sheet_reader.output.xml_generator import XmlGenerator
from sheet_reader.output.yaml_generator import YamlGenerator

__all__ = [
    "CsvGenerator",
    "MatrixGenerator",
    "Region",
    "XmlGenerator",
    "YamlGenerator",
    "cell_to_csv",
    "plain_value",
]
