from dataclasses import dataclass
from pathlib import Path

from app.processor.models import AccessStatus


@dataclass(frozen=True)
class OutputLayout:
    """Every file and directory an audit run writes, rooted at one output directory."""

    root: Path

    @property
    def revoked_csv(self) -> Path:
        return self.root / "revoked_rows.csv"

    @property
    def formatted_csv(self) -> Path:
        return self.root / "formatted_revoked_rows.csv"

    @property
    def html_dir(self) -> Path:
        return self.root / "html"

    @property
    def png_dir(self) -> Path:
        return self.root / "png"

    @property
    def doc_dir(self) -> Path:
        return self.root / "doc"

    def ledger_path(self, status: AccessStatus) -> Path:
        return self.root / _LEDGER_FILES[status]

    def image_dir(self, status: AccessStatus) -> Path:
        return self.png_dir / _IMAGE_SUBDIRS[status]

    def report_path(self, status: AccessStatus) -> Path:
        return self.doc_dir / f"Bitbucket_Access_Report_{status.value}.docx"

    def ensure(self) -> None:
        """Create the output tree; existing files are left in place."""
        for directory in (self.root, self.html_dir, self.doc_dir):
            directory.mkdir(parents=True, exist_ok=True)
        for status in AccessStatus:
            self.image_dir(status).mkdir(parents=True, exist_ok=True)


_LEDGER_FILES: dict[AccessStatus, str] = {
    AccessStatus.HAS_ACCESS: "access_check_results.csv",
    AccessStatus.NO_ACCESS: "no_access_check_results.csv",
}

_IMAGE_SUBDIRS: dict[AccessStatus, str] = {
    AccessStatus.HAS_ACCESS: "has_access",
    AccessStatus.NO_ACCESS: "no_access",
}
