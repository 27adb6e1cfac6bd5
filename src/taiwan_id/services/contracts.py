"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so a shape
regression fails fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel

_M = TypeVar("_M", bound=BaseModel)


def dump_validated(model_cls: type[_M], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ValidateResultData(BaseModel):
    """Payload contract for ``IdService.validate``.

    ``id`` is None when the checked value was not a string at all.
    """

    id: str | None
    valid: bool
    reason: Literal["length", "shape", "checksum"] | None = None


class GenerateResultData(BaseModel):
    """Payload contract for ``IdService.generate``."""

    id: str
    prefix: str
    area_code: str
    category: int
