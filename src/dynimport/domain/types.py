"""Layout, naming, and statement vocabularies."""

from __future__ import annotations

from enum import StrEnum


class OutputStructure(StrEnum):
    """How generated files are arranged under the output root."""

    FLAT = "flat"
    NESTED = "nested"
    BY_TYPE = "by-type"
    CUSTOM = "custom"


class NamingConvention(StrEnum):
    """Filename transforms applied to a target name."""

    PASCAL = "PascalCase"
    CAMEL = "camelCase"
    KEBAB = "kebab-case"
    SNAKE = "snake_case"
    LOWER = "lowerCase"


class StatementKind(StrEnum):
    """Import/require syntax families."""

    TYPED_IMPORT = "typed-import"
    VALUE_IMPORT = "value-import"
    COMMONJS_REQUIRE = "commonjs-require"


# Older spellings still accepted wherever a statement kind is parsed.
STATEMENT_KIND_ALIASES: dict[str, StatementKind] = {
    "typescript-type": StatementKind.TYPED_IMPORT,
    "javascript-value": StatementKind.VALUE_IMPORT,
}

# nested and by-type share one directory rule.
TYPED_DIRECTORY_STRUCTURES = frozenset({OutputStructure.NESTED, OutputStructure.BY_TYPE})


def parse_statement_kind(value: str) -> StatementKind | None:
    """Return the StatementKind for *value*, or None if unrecognized."""
    alias = STATEMENT_KIND_ALIASES.get(value)
    if alias is not None:
        return alias
    try:
        return StatementKind(value)
    except ValueError:
        return None


def parse_output_structure(value: str) -> OutputStructure | None:
    """Return the OutputStructure for *value*, or None if unrecognized."""
    try:
        return OutputStructure(value)
    except ValueError:
        return None
