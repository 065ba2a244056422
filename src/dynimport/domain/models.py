"""Immutable request models for import resolution.

All models are frozen and compared by value. They are built by the caller
right before each call and never cached or mutated.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, Field

from dynimport.domain.types import NamingConvention

PathBuilder = Callable[[str, str], str]


class LayoutPolicy(BaseModel):
    """Where generated files live and how they are named.

    Attributes:
        output_structure: ``flat``, ``nested``, ``by-type`` or ``custom``.
            Kept as a plain string so unknown values surface as a
            resolution failure instead of a construction error.
        type_dir_map: Logical type to subdirectory name.
        file_extension: Literal filename suffix, e.g. ``.ts`` or ``.zod.ts``.
        base_output_dir: Root of all generated targets.
        naming_convention: Optional filename transform.
        base_source_dir: Root for relative source paths (cwd when unset).
        custom_path_builder: ``(target_type, formatted_name) -> path``
            relative to *base_output_dir*. Required for ``custom``.
    """

    model_config = {"frozen": True}

    output_structure: str
    file_extension: str
    base_output_dir: str
    type_dir_map: dict[str, str] = Field(default_factory=dict)
    naming_convention: NamingConvention | None = None
    base_source_dir: str | None = None
    custom_path_builder: PathBuilder | None = Field(default=None, exclude=True)


class TargetDescriptor(BaseModel):
    """The importing file plus the logical target it wants to import."""

    model_config = {"frozen": True}

    source_file_path: str
    target_name: str
    target_type: str


class StatementRequest(TargetDescriptor):
    """A TargetDescriptor plus everything needed to render a statement."""

    policy: LayoutPolicy
    statement_kind: str
    named_exports: tuple[str, ...] = ()
    default_export_name: str | None = None

    @property
    def descriptor(self) -> TargetDescriptor:
        return TargetDescriptor(
            source_file_path=self.source_file_path,
            target_name=self.target_name,
            target_type=self.target_type,
        )


def pattern_path_builder(pattern: str) -> PathBuilder:
    """Build a custom path builder from a format string.

    ``{type}`` and ``{name}`` are replaced by the target type and the
    formatted target name::

        >>> build = pattern_path_builder("schemas/{type}Schemas/{name}Schema.zod.ts")
        >>> build("model", "Order")
        'schemas/modelSchemas/OrderSchema.zod.ts'
    """

    def build(target_type: str, formatted_name: str) -> str:
        return pattern.format(type=target_type, name=formatted_name)

    return build
