from abc import ABC, abstractmethod
from pathlib import Path


class BaseRenderer(ABC):
    """Contract for HTML-to-image evidence renderers.

    A renderer owns one rendering surface, created on the first `render` call
    and kept until `close`.
    """

    @abstractmethod
    def render(self, html: str, image_path: Path) -> int:
        """Render `html` at the configured width and save it as a PNG.

        Returns:
            Height in pixels of the captured image, fitted to the content.

        Raises:
            RenderError: if rendering or saving fails.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the rendering surface. Safe to call more than once."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Whether the rendering surface currently exists."""
