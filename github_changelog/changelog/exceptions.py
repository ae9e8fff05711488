"""Contains exceptions raised when rendering changelogs."""


class RenderError(Exception):
    """Raised when a section or changelog cannot be rendered."""

    pass
