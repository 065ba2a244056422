"""Tests for the frozen request models."""

import pytest
from pydantic import ValidationError

from dynimport.domain.models import (
    LayoutPolicy,
    StatementRequest,
    TargetDescriptor,
    pattern_path_builder,
)
from dynimport.domain.types import NamingConvention
from tests.conftest import make_policy


class TestLayoutPolicy:
    def test_defaults(self) -> None:
        policy = LayoutPolicy(output_structure="flat", file_extension=".ts", base_output_dir="out")
        assert policy.type_dir_map == {}
        assert policy.naming_convention is None
        assert policy.base_source_dir is None
        assert policy.custom_path_builder is None

    def test_naming_convention_parsed(self) -> None:
        assert make_policy(naming_convention="kebab-case").naming_convention is NamingConvention.KEBAB

    def test_invalid_naming_convention_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_policy(naming_convention="Title Case")

    def test_unknown_structure_accepted(self) -> None:
        """Unknown structures are reported at resolution time."""
        assert make_policy(output_structure="spiral").output_structure == "spiral"

    def test_structural_equality(self) -> None:
        assert make_policy() == make_policy()
        assert make_policy() != make_policy(file_extension=".js")

    def test_frozen(self) -> None:
        policy = make_policy()
        with pytest.raises(ValidationError):
            policy.file_extension = ".js"  # type: ignore[misc]

    def test_builder_excluded_from_dump(self) -> None:
        policy = make_policy(output_structure="custom", custom_path_builder=lambda t, n: n)
        assert "custom_path_builder" not in policy.model_dump()


class TestStatementRequest:
    def test_descriptor_projection(self) -> None:
        request = StatementRequest(
            source_file_path="./index.ts",
            target_name="User",
            target_type="model",
            policy=make_policy(),
            statement_kind="typed-import",
        )
        assert request.descriptor == TargetDescriptor(
            source_file_path="./index.ts", target_name="User", target_type="model"
        )

    def test_named_exports_keep_order(self) -> None:
        request = StatementRequest(
            source_file_path="a.ts",
            target_name="User",
            target_type="model",
            policy=make_policy(),
            statement_kind="value-import",
            named_exports=["b", "a", "c"],
        )
        assert request.named_exports == ("b", "a", "c")
        assert request.default_export_name is None


class TestPatternPathBuilder:
    def test_substitutes_placeholders(self) -> None:
        build = pattern_path_builder("schemas/{type}Schemas/{name}Schema.zod.ts")
        assert build("model", "Order") == "schemas/modelSchemas/OrderSchema.zod.ts"

    def test_unknown_placeholder_raises(self) -> None:
        with pytest.raises(KeyError):
            pattern_path_builder("{kind}/{name}.ts")("model", "Order")
