"""Shared pytest fixtures and test helpers for dynimport tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from dynimport.domain.models import LayoutPolicy, TargetDescriptor
from dynimport.services.telemetry import _current_span, disable_telemetry


class RecordingLogger:
    """DiagnosticLogger that keeps every warning for assertions."""

    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []

    def warning(self, event: str, **fields: Any) -> None:
        self.events.append({"event": event, **fields})

    @property
    def codes(self) -> list[str]:
        return [e["code"] for e in self.events]


@pytest.fixture(autouse=True)
def _clean_global_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Undo logging/telemetry configuration done by CLI invocations."""
    monkeypatch.delenv("DYNIMPORT_CONFIG", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dyn = logging.getLogger("dynimport")
    dyn_level = dyn.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dyn.setLevel(dyn_level)
    structlog.reset_defaults()
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp project so cwd-anchored paths are stable."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_policy(**overrides: Any) -> LayoutPolicy:
    """Flat PascalCase ``.ts`` layout under ./src/generated, sources under ./src."""
    fields: dict[str, Any] = {
        "output_structure": "flat",
        "file_extension": ".ts",
        "base_output_dir": "./src/generated",
        "base_source_dir": "./src",
        "naming_convention": "PascalCase",
    }
    fields.update(overrides)
    return LayoutPolicy(**fields)


def make_descriptor(
    source: str = "./app/components/UserComponent.ts",
    name: str = "User",
    target_type: str = "model",
) -> TargetDescriptor:
    return TargetDescriptor(source_file_path=source, target_name=name, target_type=target_type)
