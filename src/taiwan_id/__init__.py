"""Validate and generate Taiwan National ID numbers."""

from __future__ import annotations

from taiwan_id.config.logging import configure_logging
from taiwan_id.config.settings import TaiwanIdSettings
from taiwan_id.domain.checksum import passes_checksum, solve_check_digit, weighted_sum
from taiwan_id.domain.codes import code_for
from taiwan_id.domain.generator import (
    InvalidPrefixError,
    PrefixError,
    PrefixTooLongError,
    generate,
    generate_with_prefix,
)
from taiwan_id.domain.ids import is_valid

__version__ = "0.1.0"

__all__ = [
    "InvalidPrefixError",
    "PrefixError",
    "PrefixTooLongError",
    "TaiwanIdSettings",
    "code_for",
    "configure_logging",
    "generate",
    "generate_with_prefix",
    "is_valid",
    "passes_checksum",
    "solve_check_digit",
    "weighted_sum",
]
