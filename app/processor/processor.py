from pathlib import Path

from app.authority.bitbucket_client import BitbucketAuthorityClient, authority_base_url
from app.authority.client_base import BasePermissionAuthority
from app.config.settings import Settings
from app.evidence.base import BaseRenderer
from app.evidence.capturer import EvidenceCapturer
from app.evidence.factory import RendererFactory
from app.extraction.extractor import RecordExtractor
from app.extraction.factory import SpreadsheetReaderFactory
from app.ledger.ledger import ResultLedger
from app.logging.logger import Log
from app.normalization.normalizer import EntitlementNormalizer
from app.processor.exceptions import InputNotFoundError
from app.processor.layout import OutputLayout
from app.processor.models import RunSummary
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    BuildReportsStep,
    ExtractRecordsStep,
    NormalizeRecordsStep,
    VerifyAccessStep,
)
from app.report.docx_builder import ReportBuilder
from app.verification.verifier import AccessVerifier


class Processor:
    """Runs the audit once over a decision spreadsheet.

    Pipeline: extract -> normalize -> verify (+ capture, ledger) -> reports.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        layout: OutputLayout,
        authority: BasePermissionAuthority | None = None,
    ) -> None:
        self._steps = steps
        self._layout = layout
        self._authority = authority

    def process(self, input_path: Path) -> RunSummary:
        context = PipelineContext(input_path=input_path)
        try:
            if not input_path.is_file():
                raise InputNotFoundError(f"Input spreadsheet not found at: {input_path}")
            self._layout.ensure()
            for step in self._steps:
                context = step.run(context)
        finally:
            if self._authority is not None:
                self._authority.close()
        summary = context.summary
        Log.info(
            f"Audit complete: {summary.revoked} revoked, {summary.has_access} HAS_ACCESS, "
            f"{summary.no_access} NO_ACCESS, {summary.authority_errors} query error(s), "
            f"{len(summary.reports)} report(s)"
        )
        return summary


def build_processor(
    settings: Settings,
    authority: BasePermissionAuthority | None = None,
    renderer: BaseRenderer | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    layout = OutputLayout(settings.output_dir)
    if authority is None:
        authority = BitbucketAuthorityClient(
            base_url=authority_base_url(settings.bb_url, settings.bb_scheme),
            username=settings.bb_username,
            password=settings.bb_keyname,
            timeout_seconds=settings.bb_timeout_seconds,
            verify_tls=settings.bb_verify_tls,
        )
    if renderer is None:
        renderer = RendererFactory.create(settings)

    steps: list[PipelineStep] = [
        ExtractRecordsStep(
            RecordExtractor(
                lambda path: SpreadsheetReaderFactory.create(settings, path),
                layout.revoked_csv,
            )
        ),
        NormalizeRecordsStep(EntitlementNormalizer(layout.formatted_csv)),
        VerifyAccessStep(
            verifier=AccessVerifier(authority),
            capturer=EvidenceCapturer(renderer, layout),
            ledger=ResultLedger(layout),
        ),
        BuildReportsStep(ReportBuilder(layout, title=settings.report_title)),
    ]
    return Processor(steps=steps, layout=layout, authority=authority)
