"""Weighted checksum over the 11-digit numeric expansion.

The expansion is the letter's digit pair followed by the nine trailing
digits of the ID. A valid ID has a weighted sum divisible by 10.

INVARIANT: The final weight is 1, so the check digit can be solved with a
single modular subtraction.
"""

from __future__ import annotations

from collections.abc import Sequence

from taiwan_id.domain.codes import code_for

WEIGHTS: tuple[int, ...] = (1, 9, 8, 7, 6, 5, 4, 3, 2, 1, 1)
EXPANSION_LENGTH = len(WEIGHTS)


def expand(letter: str, digits: str) -> list[int]:
    """Build the numeric expansion for an area *letter* and its *digits*."""
    return [*code_for(letter), *(int(d) for d in digits)]


def weighted_sum(expansion: Sequence[int]) -> int:
    """Sum each expansion position times its weight.

    A shorter (partial) expansion uses only the leading weights.
    """
    return sum(value * weight for value, weight in zip(expansion, WEIGHTS))


def passes_checksum(expansion: Sequence[int]) -> bool:
    return weighted_sum(expansion) % 10 == 0


def solve_check_digit(partial: Sequence[int]) -> int:
    """Return the digit that makes *partial* plus that digit pass the checksum.

    Args:
        partial: Expansion positions 0-9 (the check digit slot excluded).

    Raises:
        ValueError: If *partial* does not hold exactly 10 positions.
    """
    if len(partial) != EXPANSION_LENGTH - 1:
        msg = f"Expected {EXPANSION_LENGTH - 1} positions, got {len(partial)}"
        raise ValueError(msg)
    return (10 - weighted_sum(partial) % 10) % 10
