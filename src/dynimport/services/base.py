"""BaseService — shared failure reporting for the resolution stages.

Services carry no state beyond a diagnostic logger, so one instance can be
shared freely across threads. The logger is the only side effect: failures
are reported through it and then returned as data.
"""

from __future__ import annotations

from typing import Any, Protocol

from dynimport.config.logging import get_diagnostic_logger
from dynimport.services.result import ErrorCode, ServiceError, ServiceResult


class DiagnosticLogger(Protocol):
    """Minimal logging capability the services depend on."""

    def warning(self, event: str, **fields: Any) -> Any: ...


class BaseService:
    """Base for the layout, relativize, and statement services.

    Usage::

        class LayoutService(BaseService):
            def resolve_target_path(self, descriptor, policy) -> ServiceResult:
                if ...:
                    return self._fail(op, ErrorCode.UNKNOWN_OUTPUT_STRUCTURE, "...")
                return ServiceResult(ok=True, op=op, data={...})
    """

    def __init__(self, log: DiagnosticLogger | None = None) -> None:
        self._log: DiagnosticLogger = log or get_diagnostic_logger(type(self).__module__)

    def _fail(
        self,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Emit a diagnostic and build the failed result."""
        self._log.warning(message, op=op, code=str(code), **detail)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
