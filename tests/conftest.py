from collections.abc import Callable
from pathlib import Path

import openpyxl
import pymupdf
import pytest

from app.processor.layout import OutputLayout

DECISION_HEADER = ["User SSO", "Account ID", "Entitlement Description", "Decision", "Reviewer"]


@pytest.fixture()
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Write an .xlsx decision sheet; extra sheets are appended after the first."""

    def _make(
        rows: list[list[object]],
        header: list[str] | None = None,
        name: str = "decisions.xlsx",
        extra_sheets: dict[str, list[list[object]]] | None = None,
    ) -> Path:
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.title = "Decisions"
        if header is not None or rows:
            sheet.append(header if header is not None else DECISION_HEADER)
        for row in rows:
            sheet.append(row)
        for title, extra_rows in (extra_sheets or {}).items():
            extra = workbook.create_sheet(title)
            for row in extra_rows:
                extra.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return _make


@pytest.fixture()
def make_png() -> Callable[[Path, int, int], Path]:
    """Write a blank white PNG of the given pixel size."""

    def _make(path: Path, width: int = 40, height: int = 30) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        pixmap = pymupdf.Pixmap(pymupdf.csRGB, pymupdf.IRect(0, 0, width, height), False)
        pixmap.clear_with(255)
        pixmap.save(str(path))
        return path

    return _make


@pytest.fixture()
def layout(tmp_path: Path) -> OutputLayout:
    return OutputLayout(tmp_path / "output_files")
