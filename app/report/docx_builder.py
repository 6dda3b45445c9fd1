from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.image.image import Image as DocxImage
from docx.shared import Inches, Length, Pt

from app.logging.logger import Log
from app.processor.layout import OutputLayout
from app.processor.models import AccessStatus

STATUS_HEADINGS: dict[AccessStatus, str] = {
    AccessStatus.HAS_ACCESS: "Revoked entitlements still granted (HAS_ACCESS)",
    AccessStatus.NO_ACCESS: "Revoked entitlements confirmed removed (NO_ACCESS)",
}


class ReportBuilder:
    """Assembles the screenshots of one access status into a DOCX evidence report.

    Layout: a title page, then one page per image (sorted by file name), each
    image centered and scaled to fit the printable area.
    """

    def __init__(
        self,
        layout: OutputLayout,
        title: str,
        clock: Callable[[], datetime] = datetime.now,
        max_width: Length = Inches(6.5),
        max_height: Length = Inches(9),
    ) -> None:
        self._layout = layout
        self._title = title
        self._clock = clock
        self._max_width = max_width
        self._max_height = max_height

    def build(self, status: AccessStatus) -> Path | None:
        """Write the report for `status`; returns None when there are no screenshots."""
        image_dir = self._layout.image_dir(status)
        images = sorted(p for p in image_dir.glob("*.png") if p.is_file())
        if not images:
            Log.info(f"No PNG files in {image_dir}, skipping {status.value} report")
            return None

        document = Document()
        self._add_title_page(document, status)
        for image in images:
            document.add_page_break()
            paragraph = document.add_paragraph()
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
            paragraph.add_run().add_picture(str(image), **self._fit(image))

        report_path = self._layout.report_path(status)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(report_path))
        Log.info(f"DOCX with {len(images)} screenshot(s) generated: {report_path}")
        return report_path

    def _add_title_page(self, document: DocxDocument, status: AccessStatus) -> None:
        title = document.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        title_run = title.add_run(self._title)
        title_run.bold = True
        title_run.font.size = Pt(28)

        heading = document.add_paragraph()
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
        heading.add_run(STATUS_HEADINGS[status]).font.size = Pt(16)

        document.add_paragraph()

        generated = document.add_paragraph()
        generated.alignment = WD_ALIGN_PARAGRAPH.CENTER
        generated_at = self._clock().strftime("%Y-%m-%d %H:%M:%S")
        generated.add_run(f"Generated: {generated_at}").font.size = Pt(14)

    def _fit(self, image: Path) -> dict[str, Length]:
        # Tall captures would overflow the page if only the width were fixed.
        info = DocxImage.from_file(str(image))
        if info.px_width * self._max_height >= info.px_height * self._max_width:
            return {"width": self._max_width}
        return {"height": self._max_height}
