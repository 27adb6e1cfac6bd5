"""Random ID generation under a caller-supplied prefix.

A prefix is any leading part of an ID: nothing, an area letter, a letter
plus category digit, or a letter plus up to eight digits. Missing leading
parts are drawn at random (letter from A-Z, category digit from the
category pool), the remaining person digits are filled uniformly, and the
check digit is solved last.

INVARIANT: Every returned ID passes ``is_valid`` and starts with the prefix.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from taiwan_id.domain.checksum import EXPANSION_LENGTH, expand, solve_check_digit
from taiwan_id.domain.codes import AREA_CODES, CATEGORY_DIGITS, LETTERS

logger = logging.getLogger(__name__)

MAX_PREFIX_LENGTH = 9
_DIGITS = frozenset("0123456789")

# SystemRandom keeps no shared state, so concurrent callers need no lock.
_default_rng = random.SystemRandom()


class PrefixError(ValueError):
    """A generation prefix the caller should never have passed."""

    reason = "invalid_prefix"

    def __init__(self, prefix: str, message: str) -> None:
        super().__init__(message)
        self.prefix = prefix


class PrefixTooLongError(PrefixError):
    """Prefix leaves no room for the check digit."""

    reason = "prefix_too_long"

    def __init__(self, prefix: str) -> None:
        super().__init__(
            prefix,
            f"Prefix is too long: {len(prefix)} characters (max {MAX_PREFIX_LENGTH})",
        )


class InvalidPrefixError(PrefixError):
    """Prefix has a non-letter in the area slot or a non-digit after it."""

    def __init__(self, prefix: str, position: int) -> None:
        expected = "an uppercase letter A-Z" if position == 0 else "a digit 0-9"
        super().__init__(
            prefix,
            f"Prefix is not valid: {prefix[position]!r} at position {position}, "
            f"expected {expected}",
        )
        self.position = position


def check_category_digits(category_digits: Sequence[int]) -> None:
    """Raise ``ValueError`` unless *category_digits* is a non-empty pool of 0-9."""
    if not category_digits:
        raise ValueError("category_digits must not be empty")
    bad = [d for d in category_digits if not 0 <= d <= 9]
    if bad:
        raise ValueError(f"category_digits must be 0-9, got {bad}")


def check_prefix(prefix: str) -> None:
    """Raise a :class:`PrefixError` if *prefix* cannot start an ID."""
    if len(prefix) > MAX_PREFIX_LENGTH:
        raise PrefixTooLongError(prefix)
    if prefix and prefix[0] not in AREA_CODES:
        raise InvalidPrefixError(prefix, 0)
    for position, char in enumerate(prefix[1:], start=1):
        if char not in _DIGITS:
            raise InvalidPrefixError(prefix, position)


def generate_with_prefix(
    prefix: str,
    *,
    rng: random.Random | None = None,
    category_digits: Sequence[int] = CATEGORY_DIGITS,
) -> str:
    """Generate a random valid ID starting with *prefix*.

    Args:
        prefix: Up to nine leading characters of the ID.
        rng: Random source; defaults to a shared ``SystemRandom``.
        category_digits: Pool for the category digit when the prefix
            stops at (or before) the area letter.

    Raises:
        PrefixTooLongError: If *prefix* is longer than nine characters.
        InvalidPrefixError: If *prefix* is not a letter followed by digits.
        ValueError: If *category_digits* is empty or holds a non-digit.
    """
    check_prefix(prefix)
    check_category_digits(category_digits)
    rng = rng or _default_rng
    requested = prefix

    if not prefix:
        prefix = rng.choice(LETTERS)
    if len(prefix) == 1:
        prefix += str(rng.choice(category_digits))

    partial = expand(prefix[0], prefix[1:])
    fill = [rng.randrange(10) for _ in range(EXPANSION_LENGTH - 1 - len(partial))]
    check_digit = solve_check_digit([*partial, *fill])

    result = prefix + "".join(str(d) for d in fill) + str(check_digit)
    logger.debug("Generated ID %s from prefix %r", result, requested)
    return result


def generate(
    *,
    rng: random.Random | None = None,
    category_digits: Sequence[int] = CATEGORY_DIGITS,
) -> str:
    """Generate a random valid ID with a random area letter and category digit."""
    return generate_with_prefix("", rng=rng, category_digits=category_digits)
