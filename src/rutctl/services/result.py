"""ServiceResult and ServiceError returned by every RutService operation.

A rejected identifier is a normal outcome, not an exception: it comes back
as ``ok=False`` with ``error.code`` set to a ``RutErrorCode`` value (or
``INVALID_RANGE`` for generation). The CLI maps ``ok`` to the exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation was rejected.

    ``detail`` always holds the caller's ``input`` for RUT operations, plus
    ``expected`` (and the normalized ``rut``) on a check digit mismatch.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one RutService call.

    Attributes:
        ok: Whether the identifier (or range) was accepted.
        op: ``"validate"``, ``"format"``, ``"check_digit"`` or ``"generate"``.
        data: Rendered forms of the RUT on success (``rut``, ``formatted``, ...).
        warnings: Non-fatal notes, e.g. a body outside the 7-8 digit policy.
        error: Set when ``ok`` is False.
        meta: Unused by the built-in operations; kept for callers.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        """Build an ``ok=False`` result in one call."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
