class RenderError(Exception):
    """Raised when an evidence page cannot be rendered to an image."""
