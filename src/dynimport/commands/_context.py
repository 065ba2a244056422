"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Builds layout policies from settings plus per-command
overrides and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError

from dynimport.config.models import LayoutConfig
from dynimport.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dynimport.config.settings import DynImportSettings
    from dynimport.domain.models import LayoutPolicy
    from dynimport.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DynImportSettings) -> None:
        self.settings = settings

        from dynimport.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from dynimport.services.telemetry import enable_telemetry

            enable_telemetry()

    def layout_policy(self, **overrides: Any) -> LayoutPolicy:
        """Configured ``[layout]`` section with non-None *overrides* applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        merged = {**self.settings.layout.model_dump(), **changes}
        if "type_dir_map" in changes:
            merged["type_dir_map"] = {
                **self.settings.layout.type_dir_map,
                **changes["type_dir_map"],
            }
        try:
            return LayoutConfig.model_validate(merged).to_policy()
        except ValidationError as exc:
            raise click.ClickException(f"Invalid layout configuration: {exc}") from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
