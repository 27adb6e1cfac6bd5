"""Tests for the area letter encoding table."""

import pytest

from taiwan_id.domain.codes import AREA_CODES, CATEGORY_DIGITS, LETTERS, code_for


class TestCodeFor:
    @pytest.mark.parametrize(
        "letter,expected",
        [
            ("A", (1, 0)),
            ("H", (1, 7)),
            ("I", (3, 4)),
            ("J", (1, 8)),
            ("O", (3, 5)),
            ("W", (3, 2)),
            ("X", (3, 0)),
            ("Y", (3, 1)),
            ("Z", (3, 3)),
        ],
    )
    def test_known_codes(self, letter: str, expected: tuple[int, int]) -> None:
        assert code_for(letter) == expected

    def test_lowercase_is_not_a_key(self) -> None:
        with pytest.raises(KeyError):
            code_for("a")


class TestAreaCodes:
    def test_covers_every_letter(self) -> None:
        assert set(AREA_CODES) == set(LETTERS)
        assert len(LETTERS) == 26

    def test_numbers_are_distinct_and_in_range(self) -> None:
        numbers = [tens * 10 + ones for tens, ones in AREA_CODES.values()]
        assert len(set(numbers)) == 26
        assert sorted(numbers) == list(range(10, 36))

    def test_default_category_digits(self) -> None:
        assert CATEGORY_DIGITS == (1, 2)
