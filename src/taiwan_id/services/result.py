"""ServiceResult and ServiceError — the service contract.

INVARIANT: All service-layer methods return ServiceResult. Caller mistakes
surface as ``ok=False`` with a structured error, never as an exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"validate"`` or ``"generate"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal notes, e.g. an unusual category digit.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
