import re

from app.evidence.base import BaseRenderer
from app.evidence.fact_sheet import build_fact_sheet
from app.logging.logger import Log
from app.processor.layout import OutputLayout
from app.processor.models import EvidenceArtifact, VerificationOutcome

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._@-]")


def evidence_stem(outcome: VerificationOutcome) -> str:
    """'{user}_{project}_{safe timestamp}' with path-hostile characters replaced."""
    parts = (outcome.record.user_sso, outcome.record.project_key, outcome.safe_timestamp)
    return "_".join(_UNSAFE_FILENAME_CHARS.sub("_", part) for part in parts)


class EvidenceCapturer:
    """Writes the HTML fact sheet for an outcome and screenshots it into its status folder."""

    def __init__(self, renderer: BaseRenderer, layout: OutputLayout) -> None:
        self._renderer = renderer
        self._layout = layout

    def capture(self, outcome: VerificationOutcome) -> EvidenceArtifact:
        stem = evidence_stem(outcome)
        html_path = self._layout.html_dir / f"{stem}.html"
        image_path = self._layout.image_dir(outcome.status) / f"{stem}.png"

        page = build_fact_sheet(outcome)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(page, encoding="utf-8")

        height = self._renderer.render(page, image_path)
        Log.debug(f"Captured {image_path} ({height}px high)")
        return EvidenceArtifact(
            outcome=outcome,
            html_path=html_path,
            image_path=image_path,
            viewport_height=height,
        )

    def release(self) -> None:
        self._renderer.close()
