"""CSV loader with automatic encoding and delimiter detection."""

from __future__ import annotations

import csv
import io
from pathlib import Path

import chardet

from sheet_reader.cell_store import CellType, SparseCellStore
from sheet_reader.loaders.base import Source, source_label
from sheet_reader.utils.exceptions import LoaderError
from sheet_reader.utils.logging import get_logger

logger = get_logger(__name__)


class CsvLoader:
    """Load a CSV file as a single sheet of string cells.

    The sheet is named ``default``. Blank fields are not stored.
    """

    name = "a CSV"
    extensions = (".csv",)

    SHEET_NAME = "default"

    # Common encodings to try if chardet fails
    FALLBACK_ENCODINGS = ["utf-8", "cp1252", "latin-1"]

    # Minimum confidence threshold for encoding detection
    MIN_ENCODING_CONFIDENCE = 0.5

    def __init__(self, delimiter: str | None = None) -> None:
        self.delimiter = delimiter

    def load(self, source: Source) -> dict[str, SparseCellStore]:
        content = self._read_bytes(source)
        text = self._decode(content, source_label(source))
        delimiter = self.delimiter or self._detect_delimiter(text)

        store = SparseCellStore()
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
        for row_number, fields in enumerate(reader, start=1):
            for col_number, field in enumerate(fields, start=1):
                if field == "":
                    continue
                store.set(row_number, col_number, field, CellType.STRING)

        logger.debug("Loaded CSV", cells=len(store), delimiter=repr(delimiter))
        return {self.SHEET_NAME: store}

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _read_bytes(source: Source) -> bytes:
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise LoaderError(f"File not found: {source}", file_path=str(source))
            return path.read_bytes()
        if hasattr(source, "seek"):
            source.seek(0)
        data = source.read()
        return data.encode("utf-8") if isinstance(data, str) else data

    def _decode(self, content: bytes, label: str) -> str:
        if not content:
            return ""

        result = chardet.detect(content)
        encoding = result.get("encoding")
        confidence = result.get("confidence", 0.0) or 0.0
        candidates = list(self.FALLBACK_ENCODINGS)
        if encoding and confidence >= self.MIN_ENCODING_CONFIDENCE:
            logger.debug(
                f"Detected encoding: {encoding} (confidence: {confidence:.2f})"
            )
            candidates.insert(0, encoding)

        for candidate in candidates:
            try:
                return content.decode(candidate)
            except (UnicodeDecodeError, LookupError):
                continue

        raise LoaderError("Failed to decode CSV content", file_path=label)

    @staticmethod
    def _detect_delimiter(text: str) -> str:
        try:
            dialect = csv.Sniffer().sniff(text[:8192], delimiters=",;\t|")
            return dialect.delimiter
        except csv.Error:
            logger.debug("CSV delimiter detection failed, defaulting to comma")
            return ","
