"""RutService — validate, format, compute, and generate RUTs.

Every operation returns a :class:`ServiceResult`. Domain :class:`RutError`
codes surface unchanged as ``error.code``.
"""

from __future__ import annotations

import logging
from typing import Any

from rutctl.domain.formatting import compact_format, decimal_format
from rutctl.domain.generator import RutGenerator
from rutctl.domain.rut import (
    GROUP_SEPARATOR,
    MAX_LENGTH,
    MIN_LENGTH,
    NormalizedRut,
    RutError,
    RutErrorCode,
    compute_check_digit,
    normalize,
    verify,
)
from rutctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Body lengths accepted by normalize(): total length minus separator and check.
MIN_BODY_DIGITS = MIN_LENGTH - 2
MAX_BODY_DIGITS = MAX_LENGTH - 2


def _rut_data(rut: NormalizedRut) -> dict[str, Any]:
    return {
        "rut": compact_format(rut),
        "body": rut.body,
        "check": rut.check,
        "formatted": decimal_format(rut),
    }


def _rut_failure(op: str, raw: str, exc: RutError, **extra: Any) -> ServiceResult:
    detail: dict[str, Any] = {"input": raw, **extra}
    if exc.expected is not None:
        detail["expected"] = exc.expected
    return ServiceResult.failure(op, exc.code.value, str(exc), detail)


class RutService:
    """Entry point for RUT operations used by the CLI and library callers.

    Args:
        generator: Random source for :meth:`generate`. A fresh unseeded
            :class:`RutGenerator` is created when omitted.
    """

    def __init__(self, generator: RutGenerator | None = None) -> None:
        self._generator = generator or RutGenerator()

    def validate(self, raw: str) -> ServiceResult:
        """Normalize *raw* and check its check digit."""
        op = "validate"
        try:
            rut = normalize(raw)
        except RutError as exc:
            logger.debug("Rejected %r: %s", raw, exc.code)
            return _rut_failure(op, raw, exc)

        try:
            expected = verify(rut)
        except RutError as exc:
            logger.debug("Check digit mismatch for %r: expected %s", raw, exc.expected)
            return _rut_failure(op, raw, exc, rut=compact_format(rut))

        logger.debug("Validated %s", rut)
        return ServiceResult(ok=True, op=op, data={**_rut_data(rut), "expected": expected})

    def format(self, raw: str) -> ServiceResult:
        """Validate *raw*, then return its dotted display form."""
        validated = self.validate(raw)
        if not validated.ok:
            return validated.model_copy(update={"op": "format"})
        return ServiceResult(
            ok=True,
            op="format",
            data={
                "rut": validated.data["rut"],
                "formatted": validated.data["formatted"],
            },
        )

    def check_digit(self, body: str) -> ServiceResult:
        """Compute the check digit for a bare *body* (dots allowed)."""
        op = "check_digit"
        digits = body.replace(GROUP_SEPARATOR, "")
        try:
            if not digits:
                raise RutError(RutErrorCode.NON_DIGIT_BODY)
            check = compute_check_digit(digits)
        except RutError as exc:
            return _rut_failure(op, body, exc)

        rut = NormalizedRut(body=digits, check=check)
        warnings = _body_length_warnings(digits)
        logger.debug("Computed check digit %s for %s", check, digits)
        return ServiceResult(ok=True, op=op, data=_rut_data(rut), warnings=warnings)

    def generate(self, min_body: int, max_body: int) -> ServiceResult:
        """Generate a valid RUT with a body in ``[min_body, max_body)``."""
        op = "generate"
        try:
            rut = self._generator.generate(min_body, max_body)
        except ValueError as exc:
            return ServiceResult.failure(
                op, "INVALID_RANGE", str(exc), {"min": min_body, "max": max_body}
            )

        logger.debug("Generated %s from [%d, %d)", rut, min_body, max_body)
        return ServiceResult(
            ok=True,
            op=op,
            data={**_rut_data(rut), "min": min_body, "max": max_body},
            warnings=_body_length_warnings(rut.body),
        )


def _body_length_warnings(body: str) -> list[str]:
    if MIN_BODY_DIGITS <= len(body) <= MAX_BODY_DIGITS:
        return []
    return [
        f"Body has {len(body)} digits; validate accepts "
        f"{MIN_BODY_DIGITS}-{MAX_BODY_DIGITS} digits only"
    ]
