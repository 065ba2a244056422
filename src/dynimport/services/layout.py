"""LayoutService — where a target file lives under the output root.

Branches on the policy's output structure:

- ``flat``: ``<name><ext>`` directly under the output root.
- ``nested`` / ``by-type``: ``<type dir>/<name><ext>``, where the type dir
  comes from ``type_dir_map`` or falls back to ``<type>s``.
- ``custom``: whatever the policy's ``custom_path_builder`` returns.

The joined path is not made absolute; the relativizer anchors it.
"""

from __future__ import annotations

import os

from dynimport.domain.models import LayoutPolicy, TargetDescriptor
from dynimport.domain.naming import apply_naming_convention
from dynimport.domain.types import (
    TYPED_DIRECTORY_STRUCTURES,
    OutputStructure,
    parse_output_structure,
)
from dynimport.services.base import BaseService
from dynimport.services.result import ErrorCode, ServiceResult

_OP = "resolve_target_path"
_SEPARATORS = "/\\"


def type_directory(target_type: str, type_dir_map: dict[str, str]) -> str:
    """Directory for *target_type*; unmapped types get a literal ``s`` appended."""
    return type_dir_map.get(target_type) or f"{target_type}s"


def join_under(root: str, *parts: str) -> str:
    """Join *parts* beneath *root*, treating leading separators as relative.

    ``os.path.join`` drops everything before an absolute part; here
    ``join_under("gen", "/models", "User.ts")`` stays ``gen/models/User.ts``.
    """
    return os.path.join(root, *(part.lstrip(_SEPARATORS) for part in parts))


class LayoutService(BaseService):
    """Resolve a target's path from a LayoutPolicy."""

    def resolve_target_path(
        self,
        descriptor: TargetDescriptor,
        policy: LayoutPolicy,
    ) -> ServiceResult:
        """Compute the target path joined onto ``policy.base_output_dir``.

        Success data: ``formatted_name``, ``relative_path`` (inside the
        output root) and ``path`` (joined onto the output root).
        """
        formatted = apply_naming_convention(descriptor.target_name, policy.naming_convention)
        structure = parse_output_structure(policy.output_structure)

        if structure is OutputStructure.CUSTOM:
            if policy.custom_path_builder is None:
                return self._fail(
                    _OP,
                    ErrorCode.MISSING_CUSTOM_PATTERN,
                    "output_structure is 'custom' but no custom_path_builder is set",
                    target_type=descriptor.target_type,
                    target_name=descriptor.target_name,
                )
            try:
                inner = policy.custom_path_builder(descriptor.target_type, formatted)
            except Exception as exc:
                return self._fail(
                    _OP,
                    ErrorCode.CUSTOM_BUILDER_ERROR,
                    f"custom_path_builder raised: {exc}",
                    target_type=descriptor.target_type,
                    target_name=formatted,
                )
            if not isinstance(inner, str) or not inner.strip(_SEPARATORS):
                return self._fail(
                    _OP,
                    ErrorCode.CUSTOM_BUILDER_ERROR,
                    "custom_path_builder returned no path",
                    target_type=descriptor.target_type,
                    target_name=formatted,
                    returned=repr(inner),
                )
        elif structure in TYPED_DIRECTORY_STRUCTURES:
            directory = type_directory(descriptor.target_type, policy.type_dir_map)
            inner = join_under(directory, f"{formatted}{policy.file_extension}")
        elif structure is OutputStructure.FLAT:
            inner = f"{formatted}{policy.file_extension}"
        else:
            return self._fail(
                _OP,
                ErrorCode.UNKNOWN_OUTPUT_STRUCTURE,
                f"Unknown output_structure: {policy.output_structure!r}",
                output_structure=policy.output_structure,
            )

        inner = inner.lstrip(_SEPARATORS)
        return ServiceResult(
            ok=True,
            op=_OP,
            data={
                "formatted_name": formatted,
                "relative_path": inner,
                "path": os.path.join(policy.base_output_dir, inner),
            },
        )
