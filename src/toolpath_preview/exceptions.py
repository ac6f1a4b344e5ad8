"""Exceptions raised by the toolpath preview pipeline."""


class ToolpathError(Exception):
    """Base class for toolpath preview failures."""


class GCodeReadError(ToolpathError):
    """The G-code source could not be read."""


class EmptyToolpathError(ToolpathError):
    """No movement segments remain to display."""


class DegenerateBoundsError(ToolpathError):
    """Bounds contain no extrusion, so no center or scale can be derived."""
