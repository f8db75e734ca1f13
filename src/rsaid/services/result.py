"""ServiceResult and ServiceError — value-typed outcome of a decode.

Callers that would rather branch on a flag than catch exceptions use
:class:`rsaid.services.decode.DecodeService`, which converts the domain
error taxonomy into these frozen models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rsaid.domain.errors import ErrorCode, IdentityError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: IdentityError, **detail: Any) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one decode operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``).
        data: JSON-friendly payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)
