"""Tests for the weighted checksum engine."""

import random

import pytest

from taiwan_id.domain.checksum import (
    EXPANSION_LENGTH,
    WEIGHTS,
    expand,
    passes_checksum,
    solve_check_digit,
    weighted_sum,
)
from taiwan_id.domain.codes import LETTERS


class TestExpand:
    def test_letter_pair_then_digits(self) -> None:
        assert expand("Z", "123456789") == [3, 3, 1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_partial_digits(self) -> None:
        assert expand("A", "2") == [1, 0, 2]


class TestWeightedSum:
    def test_weights(self) -> None:
        assert WEIGHTS == (1, 9, 8, 7, 6, 5, 4, 3, 2, 1, 1)
        assert EXPANSION_LENGTH == 11

    def test_worked_example(self) -> None:
        assert weighted_sum([3, 3, 1, 2, 3, 4, 5, 6, 7, 8, 9]) == 159

    def test_valid_id_sum(self) -> None:
        # A123456789
        assert weighted_sum([1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9]) == 130

    def test_partial_uses_leading_weights(self) -> None:
        assert weighted_sum([1, 1]) == 10

    def test_all_nines_max(self) -> None:
        assert weighted_sum([9] * 11) == 9 * sum(WEIGHTS)


class TestPassesChecksum:
    def test_passing(self) -> None:
        assert passes_checksum([1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9])

    def test_failing(self) -> None:
        assert not passes_checksum([3, 3, 1, 2, 3, 4, 5, 6, 7, 8, 9])


class TestSolveCheckDigit:
    def test_known_check_digit(self) -> None:
        assert solve_check_digit([1, 0, 1, 2, 3, 4, 5, 6, 7, 8]) == 9

    def test_zero_when_already_divisible(self) -> None:
        partial = [1, 0, 0, 0, 0, 0, 0, 0, 0, 9]
        assert weighted_sum(partial) == 10
        assert solve_check_digit(partial) == 0

    @pytest.mark.parametrize("letter", list(LETTERS))
    def test_solved_expansion_always_passes(self, letter: str) -> None:
        rng = random.Random(letter)
        for _ in range(50):
            digits = "".join(str(rng.randrange(10)) for _ in range(8))
            partial = expand(letter, digits)
            assert passes_checksum([*partial, solve_check_digit(partial)])

    @pytest.mark.parametrize("size", [0, 9, 11])
    def test_wrong_length_raises(self, size: int) -> None:
        with pytest.raises(ValueError, match="Expected 10 positions"):
            solve_check_digit([0] * size)
