from unittest.mock import MagicMock

import pytest

from app.evidence.factory import RendererFactory
from app.evidence.pymupdf_renderer import PyMuPdfRenderer


def _make_settings(render_engine: str, width: int = 1280) -> MagicMock:
    return MagicMock(render_engine=render_engine, screenshot_width=width)


class TestRendererFactory:
    def test_creates_pymupdf_renderer(self) -> None:
        renderer = RendererFactory.create(_make_settings("pymupdf"))
        assert isinstance(renderer, PyMuPdfRenderer)
        assert not renderer.is_open

    def test_is_case_insensitive(self) -> None:
        assert isinstance(RendererFactory.create(_make_settings("PyMuPDF")), PyMuPdfRenderer)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown render engine"):
            RendererFactory.create(_make_settings("chromium"))

    def test_raises_for_non_positive_width(self) -> None:
        with pytest.raises(ValueError, match="screenshot_width"):
            RendererFactory.create(_make_settings("pymupdf", width=0))
