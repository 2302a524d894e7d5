"""Tests for column letter and reference conversions."""

import pytest

from sheet_reader.coordinates import (
    integer_to_timestring,
    letter_to_number,
    normalize,
    number_to_letter,
    split_coord,
    split_coordinate,
)
from sheet_reader.utils.exceptions import InvalidColumnError, MalformedReferenceError


class TestLetterConversion:
    """Tests for letter_to_number and number_to_letter."""

    @pytest.mark.parametrize(
        ("number", "letters"),
        [(1, "A"), (26, "Z"), (27, "AA"), (52, "AZ"), (702, "ZZ"), (703, "AAA")],
    )
    def test_anchors(self, number: int, letters: str) -> None:
        assert number_to_letter(number) == letters
        assert letter_to_number(letters) == number

    def test_round_trip_through_three_letters(self) -> None:
        """Every column up to ZZZ survives encode then decode."""
        for n in range(1, 18279):
            assert letter_to_number(number_to_letter(n)) == n
        assert number_to_letter(18278) == "ZZZ"

    def test_case_insensitive(self) -> None:
        assert letter_to_number("aa") == 27
        assert letter_to_number("xFd") == 16384

    def test_non_positive_numbers_give_empty_string(self) -> None:
        assert number_to_letter(0) == ""
        assert number_to_letter(-5) == ""

    @pytest.mark.parametrize("letters", ["A1", "B-", "Ä", " A", ""])
    def test_invalid_characters_rejected(self, letters: str) -> None:
        with pytest.raises(InvalidColumnError):
            letter_to_number(letters)

    @pytest.mark.parametrize("letters", ["ı", "ſ", "Aı", "ſZ"])
    def test_letters_that_upper_case_into_ascii_rejected(self, letters: str) -> None:
        """Dotless i and long s upper-case to I and S but are not column letters."""
        with pytest.raises(InvalidColumnError) as exc_info:
            letter_to_number(letters)
        assert exc_info.value.letters == letters


class TestSplitCoordinate:
    """Tests for parsing "A2"-style references."""

    def test_simple_reference(self) -> None:
        assert split_coordinate("A2") == (2, 1)

    def test_two_letter_column(self) -> None:
        assert split_coordinate("AA10") == (10, 27)

    def test_lower_case(self) -> None:
        assert split_coordinate("aa42") == (42, 27)

    def test_split_coord_keeps_letters(self) -> None:
        assert split_coord("BC7") == ("BC", 7)

    @pytest.mark.parametrize(
        "reference", ["2A", "A", "12", "A2B", "", "A 2", "A0", "ſ2"]
    )
    def test_malformed_references(self, reference: str) -> None:
        with pytest.raises(MalformedReferenceError) as exc_info:
            split_coordinate(reference)
        assert exc_info.value.reference == reference


class TestNormalize:
    def test_numeric_passthrough(self) -> None:
        assert normalize(5, 2) == (5, 2)

    def test_column_letters(self) -> None:
        assert normalize(5, "B") == (5, 2)

    def test_swapped_form(self) -> None:
        assert normalize("B", 5) == (5, 2)

    def test_two_strings_rejected(self) -> None:
        with pytest.raises(MalformedReferenceError):
            normalize("B", "C")


def test_integer_to_timestring() -> None:
    assert integer_to_timestring(0) == "00:00:00"
    assert integer_to_timestring(7506) == "02:05:06"
    assert integer_to_timestring(90000) == "25:00:00"
