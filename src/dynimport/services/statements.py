"""StatementService — render import/require statements."""

from __future__ import annotations

from collections.abc import Sequence

from dynimport.domain.types import StatementKind, parse_statement_kind
from dynimport.services.base import BaseService
from dynimport.services.result import ErrorCode, ServiceResult

_OP = "synthesize"

WILDCARD = "*"
MODULE_BINDING = "module"


def export_clause(named_exports: Sequence[str], default_export_name: str | None) -> str:
    """Named exports win over the default name; neither means a wildcard."""
    if named_exports:
        return f"{{ {', '.join(named_exports)} }}"
    if default_export_name:
        return default_export_name
    return WILDCARD


def require_binding(named_exports: Sequence[str], default_export_name: str | None) -> str:
    """Left-hand side of a CommonJS require; the default name wins here."""
    if default_export_name:
        return default_export_name
    if named_exports:
        return f"{{ {', '.join(named_exports)} }}"
    return MODULE_BINDING


class StatementService(BaseService):
    """Synthesize statement text from a resolved relative path."""

    def synthesize(
        self,
        relative_path: str,
        statement_kind: str,
        named_exports: Sequence[str] = (),
        default_export_name: str | None = None,
    ) -> ServiceResult:
        kind = parse_statement_kind(statement_kind)
        if kind is StatementKind.TYPED_IMPORT:
            clause = export_clause(named_exports, default_export_name)
            statement = f"import type {clause} from '{relative_path}';"
        elif kind is StatementKind.VALUE_IMPORT:
            clause = export_clause(named_exports, default_export_name)
            statement = f"import {clause} from '{relative_path}';"
        elif kind is StatementKind.COMMONJS_REQUIRE:
            binding = require_binding(named_exports, default_export_name)
            statement = f"const {binding} = require('{relative_path}');"
        else:
            return self._fail(
                _OP,
                ErrorCode.UNKNOWN_STATEMENT_KIND,
                f"Unknown statement_kind: {statement_kind!r}",
                statement_kind=statement_kind,
            )

        return ServiceResult(
            ok=True,
            op=_OP,
            data={"statement": statement, "kind": str(kind), "path": relative_path},
        )
