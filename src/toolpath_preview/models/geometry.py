"""Geometry primitives: 3-D points and axis-aligned bounds."""

import math
from dataclasses import dataclass, field

from toolpath_preview.exceptions import DegenerateBoundsError


@dataclass(frozen=True)
class Point3D:
    """A point in machine coordinates (millimeters).

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate (layer height axis)
    """

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> "Point3D":
        """Return the point (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)


def _empty_min() -> Point3D:
    return Point3D(math.inf, math.inf, math.inf)


def _empty_max() -> Point3D:
    return Point3D(-math.inf, -math.inf, -math.inf)


@dataclass
class Bounds:
    """Axis-aligned bounding volume accumulator.

    A fresh Bounds starts at (+inf, +inf, +inf) / (-inf, -inf, -inf) and only
    ever grows through expand(). Until a point has been added the bounds are
    empty and the derived queries are not meaningful.

    Attributes:
        min: Lowest coordinate seen on each axis
        max: Highest coordinate seen on each axis
    """

    min: Point3D = field(default_factory=_empty_min)
    max: Point3D = field(default_factory=_empty_max)

    def expand(self, point: Point3D) -> None:
        """Grow the bounds to include a point."""
        self.min = Point3D(
            min(self.min.x, point.x),
            min(self.min.y, point.y),
            min(self.min.z, point.z),
        )
        self.max = Point3D(
            max(self.max.x, point.x),
            max(self.max.y, point.y),
            max(self.max.z, point.z),
        )

    def is_empty(self) -> bool:
        """Check whether no point has been added yet."""
        return self.min.x > self.max.x

    def center(self) -> Point3D:
        """Per-axis midpoint of min and max."""
        return Point3D(
            (self.min.x + self.max.x) * 0.5,
            (self.min.y + self.max.y) * 0.5,
            (self.min.z + self.max.z) * 0.5,
        )

    def size(self) -> Point3D:
        """Per-axis extents (max - min)."""
        return Point3D(
            self.max.x - self.min.x,
            self.max.y - self.min.y,
            self.max.z - self.min.z,
        )

    def max_dimension(self) -> float:
        """Largest of the three per-axis extents."""
        size = self.size()
        return max(size.x, size.y, size.z)

    def normalization_scale(self) -> float:
        """Uniform scale that maps the largest extent onto a span of 2.

        Returns:
            2 / max_dimension()

        Raises:
            DegenerateBoundsError: If the bounds are empty or collapse to a
                single point, so no finite scale exists
        """
        if self.is_empty():
            raise DegenerateBoundsError("Bounds are empty: no extrusion moves found")

        max_dim = self.max_dimension()
        if not math.isfinite(max_dim) or max_dim <= 0:
            raise DegenerateBoundsError(f"max dimension must be positive, got {max_dim}")

        return 2.0 / max_dim
