"""dynimport — relative import paths and statements for generated code."""

from __future__ import annotations

from dynimport.api import generate_import_statement, resolve_import_path
from dynimport.domain.models import LayoutPolicy, StatementRequest, TargetDescriptor

__version__ = "1.0.5"

__all__ = [
    "LayoutPolicy",
    "StatementRequest",
    "TargetDescriptor",
    "__version__",
    "generate_import_statement",
    "resolve_import_path",
]
