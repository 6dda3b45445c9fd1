from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from app.evidence.exceptions import RenderError
from app.ledger.ledger import ResultLedger
from app.processor.layout import OutputLayout
from app.processor.models import AccessStatus, EvidenceArtifact, VerificationOutcome
from app.processor.pipeline import PipelineContext
from app.processor.steps import (
    BuildReportsStep,
    ExtractRecordsStep,
    NormalizeRecordsStep,
    VerifyAccessStep,
)
from audit_factories import make_outcome, make_record


def _artifact_for(outcome: VerificationOutcome) -> EvidenceArtifact:
    return EvidenceArtifact(
        outcome=outcome,
        html_path=Path(f"/tmp/{outcome.record.user_sso}.html"),
        image_path=Path(f"/tmp/{outcome.record.user_sso}.png"),
        viewport_height=10,
    )


def _verify_step(
    outcomes: list[VerificationOutcome],
) -> tuple[VerifyAccessStep, MagicMock, MagicMock, MagicMock]:
    verifier = MagicMock()
    verifier.verify.side_effect = outcomes
    capturer = MagicMock()
    capturer.capture.side_effect = _artifact_for
    ledger = MagicMock(spec=ResultLedger)
    ledger.count.side_effect = lambda status: sum(1 for o in outcomes if o.status is status)
    return VerifyAccessStep(verifier, capturer, ledger), verifier, capturer, ledger


class TestExtractAndNormalizeSteps:
    def test_extract_step_fills_context(self) -> None:
        extractor = MagicMock()
        extractor.extract.return_value = (["Decision"], ["r1", "r2"])
        context = PipelineContext(input_path=Path("in.xlsx"))

        context = ExtractRecordsStep(extractor).run(context)

        extractor.extract.assert_called_once_with(Path("in.xlsx"))
        assert context.revoked_records == ["r1", "r2"]
        assert context.summary.revoked == 2

    def test_normalize_step_passes_revoked_records(self) -> None:
        normalizer = MagicMock()
        normalizer.normalize.return_value = ["n1"]
        context = PipelineContext(input_path=Path("in.xlsx"), revoked_records=["r1"])  # type: ignore[list-item]

        context = NormalizeRecordsStep(normalizer).run(context)

        normalizer.normalize.assert_called_once_with(["r1"])
        assert context.normalized_records == ["n1"]


class TestVerifyAccessStep:
    def test_processes_records_in_order_one_at_a_time(self) -> None:
        records = [make_record(user_sso=u) for u in ("a", "b", "c")]
        outcomes = [
            make_outcome(record=records[0], values=[{"p": 1}]),
            make_outcome(record=records[1]),
            make_outcome(record=records[2], authority_error="HTTP 500"),
        ]
        step, verifier, capturer, ledger = _verify_step(outcomes)
        manager = MagicMock()
        manager.attach_mock(verifier.verify, "verify")
        manager.attach_mock(capturer.capture, "capture")
        manager.attach_mock(ledger.append, "append")
        context = PipelineContext(input_path=Path("in.xlsx"), normalized_records=records)

        context = step.run(context)

        expected: list = []
        for record, outcome in zip(records, outcomes):
            expected += [
                call.verify(record),
                call.capture(outcome),
                call.append(outcome, _artifact_for(outcome)),
            ]
        assert manager.mock_calls == expected
        assert context.summary.has_access == 1
        assert context.summary.no_access == 2
        assert context.summary.authority_errors == 1
        assert len(context.artifacts) == 3

    def test_opens_ledger_before_any_record(self) -> None:
        step, _verifier, _capturer, ledger = _verify_step([])

        step.run(PipelineContext(input_path=Path("in.xlsx")))

        ledger.open.assert_called_once()

    def test_releases_renderer_on_empty_input(self) -> None:
        step, _verifier, capturer, _ledger = _verify_step([])

        step.run(PipelineContext(input_path=Path("in.xlsx")))

        capturer.release.assert_called_once()

    def test_releases_renderer_when_capture_fails(self) -> None:
        step, _verifier, capturer, ledger = _verify_step([make_outcome()])
        capturer.capture.side_effect = RenderError("boom")
        context = PipelineContext(input_path=Path("in.xlsx"), normalized_records=[make_record()])

        with pytest.raises(RenderError):
            step.run(context)

        capturer.release.assert_called_once()
        ledger.append.assert_not_called()


class TestBuildReportsStep:
    def test_builds_one_report_per_status(self) -> None:
        builder = MagicMock()
        builder.build.side_effect = lambda status: (
            Path("has.docx") if status is AccessStatus.HAS_ACCESS else None
        )

        context = BuildReportsStep(builder).run(PipelineContext(input_path=Path("in.xlsx")))

        assert builder.build.call_args_list == [
            call(AccessStatus.HAS_ACCESS),
            call(AccessStatus.NO_ACCESS),
        ]
        assert context.summary.reports == [Path("has.docx")]


class TestOutputLayout:
    def test_status_partition_is_disjoint(self, tmp_path: Path) -> None:
        layout = OutputLayout(tmp_path)
        assert layout.image_dir(AccessStatus.HAS_ACCESS) != layout.image_dir(AccessStatus.NO_ACCESS)
        assert layout.ledger_path(AccessStatus.HAS_ACCESS).name == "access_check_results.csv"
        assert layout.ledger_path(AccessStatus.NO_ACCESS).name == "no_access_check_results.csv"

    def test_ensure_creates_tree(self, tmp_path: Path) -> None:
        layout = OutputLayout(tmp_path / "out")

        layout.ensure()

        for path in (
            layout.html_dir,
            layout.doc_dir,
            layout.image_dir(AccessStatus.HAS_ACCESS),
            layout.image_dir(AccessStatus.NO_ACCESS),
        ):
            assert path.is_dir()
