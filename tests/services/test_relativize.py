"""Tests for RelativizeService and import specifier normalization."""

from pathlib import Path

import pytest

from dynimport.services.relativize import RelativizeService, to_import_specifier
from dynimport.services.result import ErrorCode
from tests.conftest import RecordingLogger


class TestToImportSpecifier:
    def test_bare_path_gets_dot_slash(self) -> None:
        assert to_import_specifier("generated/User.ts") == "./generated/User.ts"

    def test_parent_path_unchanged(self) -> None:
        assert to_import_specifier("../generated/User.ts") == "../generated/User.ts"

    def test_backslashes_normalized(self) -> None:
        assert to_import_specifier("..\\models\\User.ts") == "../models/User.ts"
        assert to_import_specifier("models\\User.ts") == "./models/User.ts"

    def test_dotfile_is_not_treated_as_relative(self) -> None:
        assert to_import_specifier(".env.ts") == "./.env.ts"

    def test_double_dot_prefixed_name(self) -> None:
        assert to_import_specifier("..hidden.ts") == "./..hidden.ts"


@pytest.mark.usefixtures("project_dir")
class TestRelativize:
    def test_same_directory(self) -> None:
        result = RelativizeService().relativize("index.ts", "User.ts")
        assert result.ok
        assert result.data["path"] == "./User.ts"

    def test_up_and_over(self) -> None:
        result = RelativizeService().relativize(
            "./app/components/UserComponent.ts", "./src/generated/User.ts", "./src"
        )
        assert result.data["path"] == "../../generated/User.ts"

    def test_source_anchored_at_base_source_dir(self) -> None:
        result = RelativizeService().relativize("index.ts", "./src/generated/User.ts", "./src")
        assert result.data["path"] == "./generated/User.ts"
        assert Path(result.data["source"]) == Path.cwd() / "src" / "index.ts"

    def test_default_base_is_cwd(self) -> None:
        result = RelativizeService().relativize("src/index.ts", "generated/User.ts")
        assert result.data["path"] == "../generated/User.ts"

    def test_absolute_paths(self, tmp_path: Path) -> None:
        root = tmp_path / "proj"
        result = RelativizeService().relativize(
            str(root / "a" / "b.ts"), str(root / "x.ts"), str(tmp_path / "elsewhere")
        )
        assert result.data["path"] == "../x.ts"

    def test_lexical_dot_segments(self) -> None:
        result = RelativizeService().relativize("a/../b/./c.ts", "b/d/e.ts")
        assert result.data["path"] == "./d/e.ts"

    def test_target_need_not_exist(self, project_dir: Path) -> None:
        result = RelativizeService().relativize("src/x.ts", "nowhere/at/all/Y.ts")
        assert result.ok
        assert not (project_dir / "nowhere").exists()

    def test_empty_source_fails(self, recorder: RecordingLogger) -> None:
        result = RelativizeService(recorder).relativize("", "User.ts")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.PATH_RESOLUTION_ERROR
        assert recorder.codes == ["PATH_RESOLUTION_ERROR"]

    def test_nul_byte_fails(self, recorder: RecordingLogger) -> None:
        result = RelativizeService(recorder).relativize("a.ts", "bad\x00path.ts")
        assert not result.ok
        assert result.error is not None
        assert "NUL" in result.error.message

    def test_nul_byte_in_base_fails(self, recorder: RecordingLogger) -> None:
        result = RelativizeService(recorder).relativize("a.ts", "b.ts", "sr\x00c")
        assert not result.ok

    def test_deterministic(self) -> None:
        svc = RelativizeService()
        first = svc.relativize("app/x.ts", "gen/y.ts", "src")
        second = svc.relativize("app/x.ts", "gen/y.ts", "src")
        assert first == second
