"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dynimport.toml only contains
overrides. An empty file resolves to a flat ``.ts`` layout under
``generated/``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from dynimport.domain.models import LayoutPolicy, pattern_path_builder
from dynimport.domain.types import NamingConvention, StatementKind


class LayoutConfig(BaseModel):
    """[layout] section.

    Mirrors LayoutPolicy, except that a custom layout is described by a
    ``custom_pattern`` format string (``{type}`` and ``{name}``
    placeholders) instead of a callable.
    """

    model_config = {"frozen": True}

    output_structure: str = "flat"
    type_dir_map: dict[str, str] = Field(default_factory=dict)
    file_extension: str = ".ts"
    base_output_dir: str = "generated"
    naming_convention: NamingConvention | None = None
    base_source_dir: str | None = None
    custom_pattern: str | None = None

    def to_policy(self) -> LayoutPolicy:
        """Build the LayoutPolicy this section describes."""
        builder = pattern_path_builder(self.custom_pattern) if self.custom_pattern else None
        return LayoutPolicy(
            output_structure=self.output_structure,
            type_dir_map=self.type_dir_map,
            file_extension=self.file_extension,
            base_output_dir=self.base_output_dir,
            naming_convention=self.naming_convention,
            base_source_dir=self.base_source_dir,
            custom_path_builder=builder,
        )


class StatementConfig(BaseModel):
    """[statement] section."""

    model_config = {"frozen": True}

    kind: str = StatementKind.VALUE_IMPORT.value

