"""Spreadsheet-style coordinate conversions.

Columns are numbered in bijective base 26: "A" is 1, "Z" is 26, "AA" is 27.
There is no symbol for zero.
"""

from __future__ import annotations

import re

from sheet_reader.utils.exceptions import (
    InvalidColumnError,
    MalformedReferenceError,
)

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_LETTERS_PATTERN = re.compile(r"[A-Za-z]+")
_REFERENCE_PATTERN = re.compile(r"([A-Za-z]+)([1-9][0-9]*)")


def letter_to_number(letters: str) -> int:
    """Convert column letters to a 1-based column number.

    Raises:
        InvalidColumnError: If ``letters`` is empty or holds a non A-Z character.
    """
    if not letters:
        raise InvalidColumnError(letters)
    if _LETTERS_PATTERN.fullmatch(letters) is None:
        bad = next(ch for ch in letters if ch not in LETTERS + LETTERS.lower())
        raise InvalidColumnError(letters, bad)

    result = 0
    for character in letters.upper():
        result = result * 26 + LETTERS.index(character) + 1
    return result


def number_to_letter(number: int) -> str:
    """Convert a 1-based column number to letters; ``number <= 0`` gives ""."""
    result = []
    number = int(number)
    while number > 0:
        number, modulo = divmod(number - 1, 26)
        result.append(LETTERS[modulo])
    return "".join(reversed(result))


def split_coord(reference: str) -> tuple[str, int]:
    """Split "A2" into ``("A", 2)``."""
    match = _REFERENCE_PATTERN.fullmatch(reference)
    if match is None:
        raise MalformedReferenceError(reference)
    return match.group(1), int(match.group(2))


def split_coordinate(reference: str) -> tuple[int, int]:
    """Parse a reference like "AA12" into ``(row, column)``.

    Raises:
        MalformedReferenceError: If the reference is not letters followed by a
            row number of at least 1.
    """
    letters, row = split_coord(reference)
    return row, letter_to_number(letters)


def normalize(row: int | str, col: int | str) -> tuple[int, int]:
    """Normalise a cell address to numeric ``(row, col)``.

    Accepts ``(5, "B")`` and the swapped ``("B", 5)`` form besides plain numbers.
    """
    if isinstance(row, str):
        if not isinstance(col, int):
            raise MalformedReferenceError(f"{row},{col}")
        row, col = col, row
    if isinstance(col, str):
        col = letter_to_number(col)
    return row, col


def integer_to_timestring(seconds: int) -> str:
    """Render integer seconds as ``HH:MM:SS``; hours are not wrapped at 24."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
