"""Config file discovery.

A project keeps its layout either in a dedicated ``dynimport.toml`` or in a
``[tool.dynimport]`` table of its ``pyproject.toml``. Discovery walks up from
the start directory; at each level the dedicated file wins over pyproject.
``DYNIMPORT_CONFIG`` names a file explicitly and skips the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "dynimport.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "DYNIMPORT_CONFIG"
TOOL_TABLE = "dynimport"


def _pyproject_table(data: dict[str, Any]) -> dict[str, Any] | None:
    table = data.get("tool", {}).get(TOOL_TABLE)
    return table if isinstance(table, dict) else None


def _declares_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        # A broken pyproject is not ours to report unless it is the config.
        return False
    return _pyproject_table(data) is not None


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for layout config.

    Returns ``dynimport.toml`` or a ``pyproject.toml`` that declares
    ``[tool.dynimport]``, whichever is closest; None if neither exists.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        dedicated = current / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_tool_table(pyproject):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the settings table held by *path*.

    For ``pyproject.toml`` that is ``[tool.dynimport]`` (empty when absent);
    any other file is read whole. Raises ``tomllib.TOMLDecodeError`` on
    malformed TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return _pyproject_table(data) or {}
    return data
