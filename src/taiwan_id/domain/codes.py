"""Administrative area letter codes.

Each of the 26 area letters maps to a two-digit number that is split into
the first two positions of the numeric expansion. The numbers are not
contiguous with the alphabet: I, O, W, X, Y and Z were assigned late and
sit in the 30s.
"""

from __future__ import annotations

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

CATEGORY_DIGITS: tuple[int, ...] = (1, 2)

AREA_CODES: dict[str, tuple[int, int]] = {
    "A": (1, 0),
    "B": (1, 1),
    "C": (1, 2),
    "D": (1, 3),
    "E": (1, 4),
    "F": (1, 5),
    "G": (1, 6),
    "H": (1, 7),
    "I": (3, 4),
    "J": (1, 8),
    "K": (1, 9),
    "L": (2, 0),
    "M": (2, 1),
    "N": (2, 2),
    "O": (3, 5),
    "P": (2, 3),
    "Q": (2, 4),
    "R": (2, 5),
    "S": (2, 6),
    "T": (2, 7),
    "U": (2, 8),
    "V": (2, 9),
    "W": (3, 2),
    "X": (3, 0),
    "Y": (3, 1),
    "Z": (3, 3),
}


def code_for(letter: str) -> tuple[int, int]:
    """Return the digit pair for an uppercase area *letter*.

    The caller is responsible for passing an A-Z letter; anything else
    raises ``KeyError``.
    """
    return AREA_CODES[letter]
