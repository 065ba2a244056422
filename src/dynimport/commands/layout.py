"""Command: where a target file lives under the output root."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from dynimport.commands._base import DynCommand
from dynimport.commands._options import layout_options

if TYPE_CHECKING:
    from dynimport.commands._context import AppContext


@click.command(
    cls=DynCommand,
    examples="""\
  dynimport layout User model
  dynimport layout orderItem model --naming kebab-case
  dynimport layout User model --structure nested --type-dir model=models
  dynimport layout Order model --structure custom --pattern 'schemas/{type}/{name}.zod.ts'""",
)
@click.argument("name")
@click.argument("target_type", metavar="TYPE")
@layout_options
@click.pass_obj
def layout(app: AppContext, name: str, target_type: str, **overrides: Any) -> None:
    """Show the generated file path for NAME of logical TYPE."""
    from dynimport.domain.models import TargetDescriptor
    from dynimport.services.resolver import ImportResolver

    descriptor = TargetDescriptor(source_file_path=".", target_name=name, target_type=target_type)
    app.emit(ImportResolver().resolve_target(descriptor, app.layout_policy(**overrides)))
