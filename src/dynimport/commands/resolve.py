"""Command: relative import path from a source file to a target."""

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
  dynimport resolve app/components/UserComponent.ts User model
  dynimport resolve app/index.ts User model --structure nested --type-dir model=models
  dynimport -q resolve app/index.ts orderItem model --naming kebab-case""",
)
@click.argument("source")
@click.argument("name")
@click.argument("target_type", metavar="TYPE")
@layout_options
@click.pass_obj
def resolve(app: AppContext, source: str, name: str, target_type: str, **overrides: Any) -> None:
    """Resolve the import path from SOURCE to NAME of logical TYPE."""
    from dynimport.domain.models import TargetDescriptor
    from dynimport.services.resolver import ImportResolver

    descriptor = TargetDescriptor(
        source_file_path=source, target_name=name, target_type=target_type
    )
    app.emit(ImportResolver().resolve_import(descriptor, app.layout_policy(**overrides)))
