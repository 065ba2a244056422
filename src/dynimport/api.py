"""Public operations: resolve an import path, generate an import statement.

Both return ``None`` instead of raising. The reason for a ``None`` has
already been reported through the diagnostic logger by the time the call
returns; use :class:`~dynimport.services.resolver.ImportResolver` directly
to get the structured error.
"""

from __future__ import annotations

from dynimport.domain.models import LayoutPolicy, StatementRequest, TargetDescriptor
from dynimport.services.base import DiagnosticLogger
from dynimport.services.resolver import ImportResolver


def resolve_import_path(
    descriptor: TargetDescriptor,
    policy: LayoutPolicy,
    *,
    log: DiagnosticLogger | None = None,
) -> str | None:
    """Relative import path from the descriptor's source file to its target.

    The result always starts with ``./`` or ``../``, e.g.
    ``'../../generated/models/User.ts'``.
    """
    result = ImportResolver(log).resolve_import(descriptor, policy)
    if not result.ok:
        return None
    return result.data["path"]


def generate_import_statement(
    request: StatementRequest,
    *,
    log: DiagnosticLogger | None = None,
) -> str | None:
    """Full statement text, e.g. ``"import type { User } from './models/User.ts';"``."""
    result = ImportResolver(log).generate_statement(request)
    if not result.ok:
        return None
    return result.data["statement"]
