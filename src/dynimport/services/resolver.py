"""ImportResolver — the layout → relativize → synthesize pipeline.

Each stage consumes only the string the previous one produced. The first
failing stage stops the pipeline and its failed result is returned as-is,
so ``result.op`` names the stage that failed.
"""

from __future__ import annotations

from dynimport.domain.models import LayoutPolicy, StatementRequest, TargetDescriptor
from dynimport.services.base import BaseService, DiagnosticLogger
from dynimport.services.layout import LayoutService
from dynimport.services.relativize import RelativizeService
from dynimport.services.result import ServiceResult
from dynimport.services.statements import StatementService
from dynimport.services.telemetry import trace_span, traced


class ImportResolver(BaseService):
    """Compose the three stages.

    Holds no per-call state; a single instance may serve concurrent callers.
    """

    def __init__(self, log: DiagnosticLogger | None = None) -> None:
        super().__init__(log)
        self._layout = LayoutService(log)
        self._relativize = RelativizeService(log)
        self._statements = StatementService(log)

    @traced
    def resolve_target(self, descriptor: TargetDescriptor, policy: LayoutPolicy) -> ServiceResult:
        """Layout stage only: where the target lives under the output root."""
        with trace_span("layout"):
            return self._layout.resolve_target_path(descriptor, policy)

    @traced
    def resolve_import(self, descriptor: TargetDescriptor, policy: LayoutPolicy) -> ServiceResult:
        """Layout then relativize.

        Success data: ``path`` (import specifier), ``target_path`` and
        ``formatted_name``.
        """
        return self._resolve(descriptor, policy)

    @traced
    def generate_statement(self, request: StatementRequest) -> ServiceResult:
        """Resolve the embedded descriptor and render the statement.

        Synthesis is never attempted when resolution fails.
        """
        resolved = self._resolve(request.descriptor, request.policy)
        if not resolved.ok:
            return resolved

        with trace_span("synthesize") as span:
            rendered = self._statements.synthesize(
                resolved.data["path"],
                request.statement_kind,
                named_exports=request.named_exports,
                default_export_name=request.default_export_name,
            )
            if span:
                span.annotate("kind", request.statement_kind)
        if not rendered.ok:
            return rendered

        return ServiceResult(
            ok=True,
            op="generate_statement",
            data={**resolved.data, **rendered.data},
        )

    def _resolve(self, descriptor: TargetDescriptor, policy: LayoutPolicy) -> ServiceResult:
        with trace_span("layout") as span:
            layout = self._layout.resolve_target_path(descriptor, policy)
            if span:
                span.annotate("structure", policy.output_structure)
        if not layout.ok:
            return layout

        with trace_span("relativize"):
            relative = self._relativize.relativize(
                descriptor.source_file_path,
                layout.data["path"],
                policy.base_source_dir,
            )
        if not relative.ok:
            return relative

        return ServiceResult(
            ok=True,
            op="resolve_import",
            data={
                "path": relative.data["path"],
                "target_path": layout.data["path"],
                "formatted_name": layout.data["formatted_name"],
            },
        )
