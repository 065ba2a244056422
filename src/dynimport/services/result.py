"""ServiceResult, ServiceError, and the failure taxonomy.

INVARIANT: Every service method returns ServiceResult. Failures are data,
never exceptions that unwind past the call. The public API in
:mod:`dynimport.api` collapses a failed result to ``None``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Every way a resolution can fail."""

    MISSING_CUSTOM_PATTERN = "MISSING_CUSTOM_PATTERN"
    UNKNOWN_OUTPUT_STRUCTURE = "UNKNOWN_OUTPUT_STRUCTURE"
    UNKNOWN_STATEMENT_KIND = "UNKNOWN_STATEMENT_KIND"
    PATH_RESOLUTION_ERROR = "PATH_RESOLUTION_ERROR"
    CUSTOM_BUILDER_ERROR = "CUSTOM_BUILDER_ERROR"


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
        op: Name of the operation (e.g. ``"resolve_import"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
