"""RelativizeService — lexical relative paths between a source and a target.

Purely string/segment arithmetic: no symlink resolution and no existence
checks. Relative sources are anchored at ``base_source_dir`` (cwd when
unset); relative targets are anchored at the process cwd.
"""

from __future__ import annotations

import os

from dynimport.services.base import BaseService
from dynimport.services.result import ErrorCode, ServiceResult

_OP = "relativize"


def to_import_specifier(relative: str) -> str:
    """Normalize a relative path for use inside an import statement.

    Separators become forward slashes and bare paths get a ``./`` prefix,
    so the result can never be mistaken for a package specifier.

    Examples:
        >>> to_import_specifier("generated/User.ts")
        './generated/User.ts'
        >>> to_import_specifier("..\\\\models\\\\User.ts")
        '../models/User.ts'
    """
    specifier = relative.replace("\\", "/")
    if specifier == ".." or specifier.startswith(("./", "../")):
        return specifier
    return f"./{specifier}"


def _malformed(value: object, field: str) -> str | None:
    if not isinstance(value, str) or not value:
        return f"{field} is empty"
    if "\x00" in value:
        return f"{field} contains a NUL byte"
    return None


class RelativizeService(BaseService):
    """Compute import-ready relative paths."""

    def relativize(
        self,
        source_file_path: str,
        target_path: str,
        base_source_dir: str | None = None,
    ) -> ServiceResult:
        """Relative path from the directory containing the source to the target.

        Success data: ``path`` (import specifier), ``source`` and ``target``
        (the anchored locations used for the computation).
        """
        problem = _malformed(source_file_path, "source_file_path") or _malformed(
            target_path, "target_path"
        )
        if problem is None and base_source_dir and "\x00" in base_source_dir:
            problem = "base_source_dir contains a NUL byte"
        if problem is not None:
            return self._fail(
                _OP,
                ErrorCode.PATH_RESOLUTION_ERROR,
                f"Cannot resolve import path: {problem}",
                source_file_path=source_file_path,
                target_path=target_path,
            )

        try:
            source_root = os.path.abspath(base_source_dir or os.getcwd())
            source = os.path.normpath(os.path.join(source_root, source_file_path))
            target = os.path.abspath(target_path)
            relative = os.path.relpath(target, start=os.path.dirname(source))
        except (OSError, TypeError, ValueError) as exc:
            return self._fail(
                _OP,
                ErrorCode.PATH_RESOLUTION_ERROR,
                f"Cannot resolve import path: {exc}",
                source_file_path=source_file_path,
                target_path=target_path,
            )

        return ServiceResult(
            ok=True,
            op=_OP,
            data={
                "path": to_import_specifier(relative),
                "source": source,
                "target": target,
            },
        )
