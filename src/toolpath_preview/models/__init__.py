"""Core data models for toolpath previews.

This package contains the geometry primitives and the segment model.
"""

from toolpath_preview.models.geometry import Bounds, Point3D
from toolpath_preview.models.segment import LineSegment

__all__ = [
    "Point3D",
    "Bounds",
    "LineSegment",
]
