"""Command: render an import or require statement."""

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
  dynimport statement app/index.ts User model --kind typed-import --named User --named UserType
  dynimport statement index.cjs legacyModule module --kind commonjs-require --default legacy
  dynimport -q statement app/index.ts User model""",
)
@click.argument("source")
@click.argument("name")
@click.argument("target_type", metavar="TYPE")
@click.option(
    "--kind",
    "statement_kind",
    default=None,
    help="typed-import, value-import or commonjs-require (default from config).",
)
@click.option("--named", "named_exports", multiple=True, help="Named export (repeatable).")
@click.option("--default", "default_export_name", default=None, help="Default export name.")
@layout_options
@click.pass_obj
def statement(
    app: AppContext,
    source: str,
    name: str,
    target_type: str,
    statement_kind: str | None,
    named_exports: tuple[str, ...],
    default_export_name: str | None,
    **overrides: Any,
) -> None:
    """Render the statement importing NAME of logical TYPE into SOURCE."""
    from dynimport.domain.models import StatementRequest
    from dynimport.services.resolver import ImportResolver

    request = StatementRequest(
        source_file_path=source,
        target_name=name,
        target_type=target_type,
        policy=app.layout_policy(**overrides),
        statement_kind=statement_kind or app.settings.statement.kind,
        named_exports=named_exports,
        default_export_name=default_export_name,
    )
    app.emit(ImportResolver().generate_statement(request))
