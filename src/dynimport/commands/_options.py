"""Layout override options shared by every command.

Each option defaults to None so that only flags the user actually passed
override the configured ``[layout]`` section.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from dynimport.domain.types import NamingConvention, OutputStructure

_F = TypeVar("_F", bound=Callable[..., Any])


def _parse_type_dirs(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str] | None:
    if not values:
        return None
    mapping: dict[str, str] = {}
    for item in values:
        target_type, sep, directory = item.partition("=")
        if not sep or not target_type or not directory:
            raise click.BadParameter(f"expected TYPE=DIR, got {item!r}")
        mapping[target_type] = directory
    return mapping


_LAYOUT_OPTIONS = [
    click.option(
        "--structure",
        "output_structure",
        type=click.Choice([s.value for s in OutputStructure]),
        default=None,
        help="Output structure.",
    ),
    click.option("--ext", "file_extension", default=None, help="Generated file extension."),
    click.option("--out-dir", "base_output_dir", default=None, help="Output root directory."),
    click.option(
        "--source-dir", "base_source_dir", default=None, help="Root for relative source paths."
    ),
    click.option(
        "--naming",
        "naming_convention",
        type=click.Choice([c.value for c in NamingConvention]),
        default=None,
        help="Filename naming convention.",
    ),
    click.option(
        "--type-dir",
        "type_dir_map",
        multiple=True,
        callback=_parse_type_dirs,
        metavar="TYPE=DIR",
        help="Map a target type to a directory (repeatable).",
    ),
    click.option(
        "--pattern",
        "custom_pattern",
        default=None,
        help="Custom path pattern with {type} and {name} placeholders.",
    ),
]


def layout_options(func: _F) -> _F:
    """Apply every layout override option to a command."""
    for option in reversed(_LAYOUT_OPTIONS):
        func = option(func)
    return func
