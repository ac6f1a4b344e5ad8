"""Bounding volume of the extruded part of a toolpath."""

from typing import Iterable

from toolpath_preview.models.geometry import Bounds
from toolpath_preview.models.segment import LineSegment


def compute_bounds(segments: Iterable[LineSegment]) -> Bounds:
    """Compute the bounds of all extruding segments.

    Travel moves are ignored so homing and positioning never affect centering
    or scale.

    Args:
        segments: Segments to measure

    Returns:
        Bounds covering the start and end of every extruding segment. If no
        segment extrudes the bounds stay empty (see Bounds.is_empty()).
    """
    bounds = Bounds()
    for seg in segments:
        if seg.is_extrusion:
            bounds.expand(seg.start)
            bounds.expand(seg.end)
    return bounds
