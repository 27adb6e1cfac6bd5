"""ID shape and validity.

An ID is one uppercase area letter followed by nine ASCII digits. Length is
counted in characters, never in encoded bytes.
"""

from __future__ import annotations

import re
from enum import StrEnum

from taiwan_id.domain.checksum import expand, passes_checksum

ID_LENGTH = 10

# Explicit ranges: \d and str.isdigit() would admit full-width and other
# non-ASCII numerals.
ID_PATTERN: re.Pattern[str] = re.compile(r"[A-Z][0-9]{9}")


class Rejection(StrEnum):
    """Why a candidate ID is not valid."""

    LENGTH = "length"
    SHAPE = "shape"
    CHECKSUM = "checksum"


def rejection_reason(value: object) -> Rejection | None:
    """Return the first check *value* fails, or None if it is a valid ID."""
    if not isinstance(value, str) or len(value) != ID_LENGTH:
        return Rejection.LENGTH
    if ID_PATTERN.fullmatch(value) is None:
        return Rejection.SHAPE
    if not passes_checksum(expand(value[0], value[1:])):
        return Rejection.CHECKSUM
    return None


def is_valid(value: object) -> bool:
    """Check whether *value* is a well-formed ID with a passing checksum.

    Never raises: wrong types, lengths and character classes all return False.
    """
    return rejection_reason(value) is None
