"""Line segment model for toolpath previews."""

import math
from dataclasses import dataclass

from toolpath_preview.models.geometry import Point3D


@dataclass(frozen=True)
class LineSegment:
    """One continuous straight move of the toolhead.

    Attributes:
        start: Position before the move
        end: Position after the move
        is_extrusion: True if the move increased the extruder position (E)
        layer_z: Z coordinate of the endpoint, used for layer filtering
    """

    start: Point3D
    end: Point3D
    is_extrusion: bool
    layer_z: float

    def __post_init__(self) -> None:
        """Reject zero-length moves."""
        if self.start == self.end:
            raise ValueError(f"start and end must differ, got {self.start} for both")

    def x_extent(self) -> float:
        """Absolute distance travelled along X."""
        return abs(self.end.x - self.start.x)

    def y_extent(self) -> float:
        """Absolute distance travelled along Y."""
        return abs(self.end.y - self.start.y)

    def length(self) -> float:
        """Euclidean length of the move in millimeters."""
        return math.dist(
            (self.start.x, self.start.y, self.start.z),
            (self.end.x, self.end.y, self.end.z),
        )
