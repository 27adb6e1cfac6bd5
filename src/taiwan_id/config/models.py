"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from taiwan_id.domain.codes import CATEGORY_DIGITS
from taiwan_id.domain.generator import check_category_digits


class GeneratorConfig(BaseModel):
    """Generator section (``TAIWAN_ID_GENERATOR__*``)."""

    model_config = {"frozen": True}

    category_digits: tuple[int, ...] = CATEGORY_DIGITS

    @field_validator("category_digits")
    @classmethod
    def _check_digits(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        check_category_digits(value)
        return value
