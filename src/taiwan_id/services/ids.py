"""IdService — validation and generation behind the ServiceResult contract."""

from __future__ import annotations

import random
from typing import Any

import structlog

from taiwan_id.config.settings import TaiwanIdSettings
from taiwan_id.domain.codes import CATEGORY_DIGITS
from taiwan_id.domain.generator import InvalidPrefixError, PrefixError, generate_with_prefix
from taiwan_id.domain.ids import rejection_reason
from taiwan_id.services.contracts import GenerateResultData, ValidateResultData, dump_validated
from taiwan_id.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)

_ERROR_CODES = {
    "prefix_too_long": "PREFIX_TOO_LONG",
    "invalid_prefix": "INVALID_PREFIX",
}


class IdService:
    """Validate and generate IDs.

    Usage::

        service = IdService()
        result = service.generate("A2")
        if result.ok:
            print(result.data["id"])
    """

    def __init__(
        self,
        settings: TaiwanIdSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or TaiwanIdSettings()
        self._rng = rng

    def validate(self, value: object) -> ServiceResult:
        """Check *value*. Always succeeds; ``data["valid"]`` holds the verdict.

        A valid ID whose category digit is outside 1-2 (legacy or special
        registrations) passes with a warning.
        """
        reason = rejection_reason(value)
        data = dump_validated(
            ValidateResultData,
            {
                "id": value if isinstance(value, str) else None,
                "valid": reason is None,
                "reason": reason.value if reason else None,
            },
        )
        warnings: list[str] = []
        if reason is None and isinstance(value, str) and int(value[1]) not in CATEGORY_DIGITS:
            warnings.append(f"Category digit {value[1]} is outside {CATEGORY_DIGITS}")
        logger.debug("id.validated", valid=data["valid"], reason=data["reason"])
        return ServiceResult(ok=True, op="validate", data=data, warnings=warnings)

    def generate(self, prefix: str = "") -> ServiceResult:
        """Generate an ID starting with *prefix*.

        A malformed prefix yields ``ok=False`` with ``PREFIX_TOO_LONG`` or
        ``INVALID_PREFIX`` instead of raising.
        """
        op = "generate"
        try:
            new_id = generate_with_prefix(
                prefix,
                rng=self._rng,
                category_digits=self._settings.generator.category_digits,
            )
        except PrefixError as exc:
            detail: dict[str, Any] = {"prefix": prefix}
            if isinstance(exc, InvalidPrefixError):
                detail["position"] = exc.position
            logger.warning("id.generate_failed", reason=exc.reason, prefix=prefix)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=_ERROR_CODES[exc.reason], message=str(exc), detail=detail),
            )

        data = dump_validated(
            GenerateResultData,
            {
                "id": new_id,
                "prefix": prefix,
                "area_code": new_id[0],
                "category": int(new_id[1]),
            },
        )
        logger.debug("id.generated", id=new_id, prefix=prefix)
        return ServiceResult(ok=True, op=op, data=data)
