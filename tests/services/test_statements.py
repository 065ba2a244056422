"""Tests for StatementService."""

import pytest

from dynimport.services.result import ErrorCode
from dynimport.services.statements import StatementService, export_clause, require_binding
from tests.conftest import RecordingLogger

PATH = "./generated/User.ts"


def _render(kind: str, named: tuple[str, ...] = (), default: str | None = None) -> str:
    result = StatementService().synthesize(PATH, kind, named_exports=named, default_export_name=default)
    assert result.ok, result.error
    return result.data["statement"]


class TestExportClause:
    def test_named_win_over_default(self) -> None:
        assert export_clause(["A", "B"], "Default") == "{ A, B }"

    def test_default(self) -> None:
        assert export_clause([], "Default") == "Default"

    def test_wildcard(self) -> None:
        assert export_clause([], None) == "*"


class TestRequireBinding:
    def test_default_wins_over_named(self) -> None:
        assert require_binding(["a"], "legacy") == "legacy"

    def test_named(self) -> None:
        assert require_binding(["a", "b"], None) == "{ a, b }"

    def test_module(self) -> None:
        assert require_binding([], None) == "module"


class TestTypedImport:
    def test_named(self) -> None:
        assert _render("typed-import", ("User", "UserType")) == (
            "import type { User, UserType } from './generated/User.ts';"
        )

    def test_default(self) -> None:
        assert _render("typed-import", default="Helpers") == (
            "import type Helpers from './generated/User.ts';"
        )

    def test_wildcard(self) -> None:
        assert _render("typed-import") == "import type * from './generated/User.ts';"


class TestValueImport:
    def test_named_preserve_order(self) -> None:
        assert _render("value-import", ("validateUser", "UserSchema")) == (
            "import { validateUser, UserSchema } from './generated/User.ts';"
        )

    def test_default(self) -> None:
        assert _render("value-import", default="appConfig") == (
            "import appConfig from './generated/User.ts';"
        )

    def test_wildcard(self) -> None:
        assert _render("value-import") == "import * from './generated/User.ts';"


class TestCommonjsRequire:
    def test_default(self) -> None:
        assert _render("commonjs-require", ("a",), "legacy") == (
            "const legacy = require('./generated/User.ts');"
        )

    def test_named(self) -> None:
        assert _render("commonjs-require", ("functionA", "functionB")) == (
            "const { functionA, functionB } = require('./generated/User.ts');"
        )

    def test_module(self) -> None:
        assert _render("commonjs-require") == "const module = require('./generated/User.ts');"


class TestKinds:
    @pytest.mark.parametrize(
        ("legacy", "current"),
        [("typescript-type", "typed-import"), ("javascript-value", "value-import")],
    )
    def test_legacy_spellings(self, legacy: str, current: str) -> None:
        assert _render(legacy, ("User",)) == _render(current, ("User",))

    def test_kind_in_data(self) -> None:
        result = StatementService().synthesize(PATH, "typescript-type")
        assert result.data["kind"] == "typed-import"

    def test_unknown_kind(self, recorder: RecordingLogger) -> None:
        result = StatementService(recorder).synthesize(PATH, "invalid-statement")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.UNKNOWN_STATEMENT_KIND
        assert recorder.codes == ["UNKNOWN_STATEMENT_KIND"]
