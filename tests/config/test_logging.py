"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from dynimport.config.logging import configure_logging
from dynimport.services.layout import LayoutService
from tests.conftest import make_descriptor, make_policy


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("dynimport").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("dynimport").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        structlog.get_logger("dynimport.services.layout").warning(
            "Unknown output_structure", code="UNKNOWN_OUTPUT_STRUCTURE"
        )
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Unknown output_structure"
        assert parsed["code"] == "UNKNOWN_OUTPUT_STRUCTURE"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dynimport.services.layout"
        assert "timestamp" in parsed

    def test_debug_suppressed_unless_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("dynimport.services.telemetry").debug("span.complete")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestDiagnosticLogger:
    def test_unconfigured_failures_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = LayoutService().resolve_target_path(
            make_descriptor(), make_policy(output_structure="spiral")
        )
        assert not result.ok
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unknown output_structure" in captured.err
        assert "UNKNOWN_OUTPUT_STRUCTURE" in captured.err

    def test_configured_failures_use_stdlib_routing(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        LayoutService().resolve_target_path(make_descriptor(), make_policy(output_structure="spiral"))
        captured = capfd.readouterr()
        assert captured.out == ""
        parsed = json.loads(captured.err.strip())
        assert parsed["logger"] == "dynimport.services.layout"
        assert parsed["code"] == "UNKNOWN_OUTPUT_STRUCTURE"
