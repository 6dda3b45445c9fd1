from app.config.settings import Settings
from app.evidence.base import BaseRenderer
from app.evidence.pymupdf_renderer import PyMuPdfRenderer


class RendererFactory:
    """Creates the evidence renderer based on settings."""

    ADAPTERS: dict[str, type[BaseRenderer]] = {
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRenderer:
        engine = settings.render_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown render engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if settings.screenshot_width <= 0:
            raise ValueError("screenshot_width must be a positive number of pixels")
        return adapter_cls(width=settings.screenshot_width)  # type: ignore[call-arg]
