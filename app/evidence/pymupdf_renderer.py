import math
from pathlib import Path

import pymupdf

from app.evidence.base import BaseRenderer
from app.evidence.exceptions import RenderError
from app.logging.logger import Log

# PDF user space caps a page side at 14400 units.
MAX_PAGE_HEIGHT = 14400
BOTTOM_MARGIN = 20


class PyMuPdfRenderer(BaseRenderer):
    """Lays HTML out with PyMuPDF's HTML engine and rasterizes it at 72 dpi (1 pt = 1 px).

    The surface is a scratch in-memory document; each render adds one tall page,
    measures how much of it the content used, captures that strip and drops the page.
    """

    def __init__(self, width: int = 1280) -> None:
        self._width = width
        self._surface: pymupdf.Document | None = None

    @property
    def is_open(self) -> bool:
        return self._surface is not None

    def render(self, html: str, image_path: Path) -> int:
        surface = self._acquire()
        page = surface.new_page(width=self._width, height=MAX_PAGE_HEIGHT)
        try:
            spare_height, _scale = page.insert_htmlbox(page.rect, html, scale_low=1)
            if spare_height < 0:
                Log.warning(f"Evidence page taller than {MAX_PAGE_HEIGHT}px, truncating {image_path.name}")
                height = MAX_PAGE_HEIGHT
            else:
                used = math.ceil(page.rect.height - spare_height)
                height = min(MAX_PAGE_HEIGHT, used + BOTTOM_MARGIN)
            pixmap = page.get_pixmap(clip=pymupdf.Rect(0, 0, self._width, height))
            image_path.parent.mkdir(parents=True, exist_ok=True)
            pixmap.save(str(image_path))
        except Exception as exc:
            raise RenderError(f"pymupdf render failed for {image_path.name}: {exc}") from exc
        finally:
            surface.delete_page(page.number)
        return height

    def close(self) -> None:
        if self._surface is not None:
            self._surface.close()
            self._surface = None
            Log.debug("Rendering surface released")

    def _acquire(self) -> pymupdf.Document:
        if self._surface is None:
            self._surface = pymupdf.open()
            Log.debug("Rendering surface created")
        return self._surface
