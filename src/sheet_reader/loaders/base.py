"""Loader contract and file-type checking."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import IO, Any, Protocol, runtime_checkable

from sheet_reader.cell_store import SparseCellStore
from sheet_reader.config import FileWarning
from sheet_reader.utils.exceptions import FileTypeError, UnknownFileTypeError
from sheet_reader.utils.logging import get_logger

logger = get_logger(__name__)

Source = str | Path | IO[Any]

# Macro-enabled and plain workbooks share one container format
_INTERCHANGEABLE = frozenset({".xlsx", ".xlsm"})


@runtime_checkable
class Loader(Protocol):
    """Decodes a source into ordered, populated cell stores.

    ``load`` must be callable again with the same source to support reload.
    """

    name: str
    extensions: tuple[str, ...]

    def load(self, source: Source) -> dict[str, SparseCellStore]: ...


def is_uri(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def source_label(source: Source) -> str:
    """Human-readable identifier for a source, used in logs and reports."""
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


def source_extension(source: str | Path) -> str:
    """Lower-cased suffix of a path or URL, ignoring any query string."""
    text = str(source)
    if is_uri(text) and "?" in text:
        text = text[: text.rindex("?")]
    return PurePosixPath(text).suffix.lower()


def check_file_type(
    source: Source,
    loader: Loader,
    file_warning: FileWarning,
) -> None:
    """Verify that ``source``'s extension matches ``loader``.

    Streams carry no extension and are never checked, nor are loaders that
    declare no extensions.

    Raises:
        FileTypeError: On mismatch when ``file_warning`` is ``error``.
    """
    if not isinstance(source, (str, Path)) or not loader.extensions:
        return

    extension = source_extension(source)
    accepted = set(loader.extensions)
    if extension in accepted:
        return
    if extension in _INTERCHANGEABLE and accepted & _INTERCHANGEABLE:
        return

    expected = "/".join(loader.extensions)
    if file_warning is FileWarning.ERROR:
        raise FileTypeError(str(source), expected=expected, actual=extension)
    if file_warning is FileWarning.WARNING:
        logger.warning(
            f"are you sure, this is {loader.name} spreadsheet file?",
            file=str(source),
            expected=expected,
            actual=extension or "(none)",
        )


def loader_for(source: Source, loaders: list[Loader]) -> Loader:
    """Pick the loader registered for ``source``'s extension.

    Raises:
        UnknownFileTypeError: If no loader accepts the extension.
    """
    if not isinstance(source, (str, Path)):
        raise UnknownFileTypeError(source_label(source), "")
    extension = source_extension(source)
    for loader in loaders:
        if extension in loader.extensions:
            return loader
    raise UnknownFileTypeError(str(source), extension)
