"""G-code toolpath preview: segment interpretation, priming trim and bounds."""

from .bounds import compute_bounds
from .exceptions import (
    DegenerateBoundsError,
    EmptyToolpathError,
    GCodeReadError,
    ToolpathError,
)
from .interpreter import parse_gcode
from .models import Bounds, LineSegment, Point3D
from .pipeline import ToolpathLoader, ToolpathModel
from .trimmer import TrimConfig, trim_priming_moves

__all__ = [
    "ToolpathLoader",
    "ToolpathModel",
    "Point3D",
    "Bounds",
    "LineSegment",
    "TrimConfig",
    "parse_gcode",
    "trim_priming_moves",
    "compute_bounds",
    "ToolpathError",
    "GCodeReadError",
    "EmptyToolpathError",
    "DegenerateBoundsError",
]
