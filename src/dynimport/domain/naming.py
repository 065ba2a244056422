"""Filename naming conventions.

Transforms only look at ASCII case boundaries. Names already written in
another convention (all-caps acronyms, for instance) segment literally:
``HTTPServer`` becomes ``httpserver`` in kebab-case, not ``http-server``.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from dynimport.domain.types import NamingConvention

_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def _split_boundaries(name: str, sep: str) -> str:
    return _BOUNDARY.sub(rf"\1{sep}\2", name).lower()


def to_pascal_case(name: str) -> str:
    """Uppercase the first character; the rest is left untouched."""
    return name[:1].upper() + name[1:]


def to_camel_case(name: str) -> str:
    """Lowercase the first character; the rest is left untouched."""
    return name[:1].lower() + name[1:]


def to_kebab_case(name: str) -> str:
    return _split_boundaries(name, "-")


def to_snake_case(name: str) -> str:
    return _split_boundaries(name, "_")


def to_lower_case(name: str) -> str:
    return name.lower()


NAMING_TRANSFORMS: dict[NamingConvention, Callable[[str], str]] = {
    NamingConvention.PASCAL: to_pascal_case,
    NamingConvention.CAMEL: to_camel_case,
    NamingConvention.KEBAB: to_kebab_case,
    NamingConvention.SNAKE: to_snake_case,
    NamingConvention.LOWER: to_lower_case,
}


def apply_naming_convention(name: str, convention: NamingConvention | None) -> str:
    """Format *name* for use as a filename stem.

    Returns *name* unchanged when no convention is configured.
    """
    if convention is None:
        return name
    return NAMING_TRANSFORMS[convention](name)
