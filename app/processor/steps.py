from app.evidence.capturer import EvidenceCapturer
from app.extraction.extractor import RecordExtractor
from app.ledger.ledger import ResultLedger
from app.logging.logger import Log
from app.normalization.normalizer import EntitlementNormalizer
from app.processor.models import AccessStatus
from app.processor.pipeline import PipelineContext, PipelineStep
from app.report.docx_builder import ReportBuilder
from app.verification.verifier import AccessVerifier


class ExtractRecordsStep(PipelineStep):
    def __init__(self, extractor: RecordExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info(f"Step 1: reading {context.input_path} and extracting revoked rows")
        context.header, context.revoked_records = self._extractor.extract(context.input_path)
        context.summary.revoked = len(context.revoked_records)
        return context


class NormalizeRecordsStep(PipelineStep):
    def __init__(self, normalizer: EntitlementNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info("Step 2: normalizing entitlement descriptions")
        context.normalized_records = self._normalizer.normalize(context.revoked_records)
        return context


class VerifyAccessStep(PipelineStep):
    """Query, capture and log each record in input order, one record at a time.

    The renderer is released when the loop ends, however it ends.
    """

    def __init__(
        self,
        verifier: AccessVerifier,
        capturer: EvidenceCapturer,
        ledger: ResultLedger,
    ) -> None:
        self._verifier = verifier
        self._capturer = capturer
        self._ledger = ledger

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info(f"Step 3: verifying access for {len(context.normalized_records)} record(s)")
        self._ledger.open()
        try:
            for record in context.normalized_records:
                outcome = self._verifier.verify(record)
                artifact = self._capturer.capture(outcome)
                self._ledger.append(outcome, artifact)
                context.artifacts.append(artifact)
                if outcome.authority_error is not None:
                    context.summary.authority_errors += 1
        finally:
            self._capturer.release()

        context.summary.has_access = self._ledger.count(AccessStatus.HAS_ACCESS)
        context.summary.no_access = self._ledger.count(AccessStatus.NO_ACCESS)
        self._ledger.log_locations()
        return context


class BuildReportsStep(PipelineStep):
    def __init__(self, report_builder: ReportBuilder) -> None:
        self._report_builder = report_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info("Step 4: building evidence reports")
        for status in AccessStatus:
            report = self._report_builder.build(status)
            if report is not None:
                context.summary.reports.append(report)
        return context
