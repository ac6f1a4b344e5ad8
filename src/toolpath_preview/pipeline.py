"""End-to-end toolpath loading pipeline.

This module provides the ToolpathLoader class that integrates all components:
- G-code interpretation into line segments
- Trimming of priming, homing and trailing travel moves
- Bounds of the extruded model for centering and scaling

Example:
    >>> from toolpath_preview.pipeline import ToolpathLoader
    >>>
    >>> loader = ToolpathLoader()
    >>> model = loader.process("G90\\nG1 X20 Y30 Z0.2\\nG1 X40 Y30 E1\\n")
    >>> model.center()
    Point3D(x=30.0, y=30.0, z=0.2)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from toolpath_preview.bounds import compute_bounds
from toolpath_preview.exceptions import EmptyToolpathError
from toolpath_preview.interpreter import parse_gcode
from toolpath_preview.loader import read_gcode_file
from toolpath_preview.models import Bounds, LineSegment, Point3D
from toolpath_preview.trimmer import TrimConfig, trim_priming_moves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolpathModel:
    """Trimmed toolpath and its extrusion bounds, ready for display.

    Attributes:
        segments: Trimmed segments in program order
        bounds: Bounds of the extruding segments
        parsed_segment_count: Number of segments before trimming
    """

    segments: Tuple[LineSegment, ...]
    bounds: Bounds
    parsed_segment_count: int

    def center(self) -> Point3D:
        """Center of the extruded model."""
        return self.bounds.center()

    def scale(self) -> float:
        """Uniform scale fitting the model into a cube of side 2.

        Raises:
            DegenerateBoundsError: If the toolpath has no extrusion
        """
        return self.bounds.normalization_scale()

    def model_size(self) -> Point3D:
        """Model dimensions along X, Y and Z in millimeters."""
        return self.bounds.size()

    def extrusion_count(self) -> int:
        """Number of extruding segments."""
        return sum(1 for seg in self.segments if seg.is_extrusion)

    def travel_count(self) -> int:
        """Number of non-extruding segments."""
        return len(self.segments) - self.extrusion_count()

    def layer_heights(self) -> List[float]:
        """Distinct layer Z values in ascending order."""
        return sorted({seg.layer_z for seg in self.segments})

    def visible_segments(
        self, max_layer_z: Optional[float] = None, show_travel: bool = True
    ) -> List[LineSegment]:
        """Select the segments a viewer should draw.

        Args:
            max_layer_z: Hide segments whose layer_z is above this height
                (default: no layer filter)
            show_travel: Whether non-extruding moves are drawn

        Returns:
            Visible segments in program order
        """
        visible = []
        for seg in self.segments:
            if max_layer_z is not None and seg.layer_z > max_layer_z:
                continue
            if not seg.is_extrusion and not show_travel:
                continue
            visible.append(seg)
        return visible

    def normalize_point(self, point: Point3D) -> Tuple[float, float, float]:
        """Map a machine point into centered, scaled viewer space.

        The viewer is Y-up, so machine Z becomes the second component and
        machine Y the third.

        Raises:
            DegenerateBoundsError: If the toolpath has no extrusion
        """
        center = self.center()
        scale = self.scale()
        return (
            (point.x - center.x) * scale,
            (point.z - center.z) * scale,
            (point.y - center.y) * scale,
        )


class ToolpathLoader:
    """End-to-end G-code preview pipeline.

    The pipeline operates in three stages:
    1. Interpretation: G-code text becomes line segments
    2. Trimming: priming/homing moves and trailing travel are removed
    3. Bounds: the extruding segments define the model's extent

    Args:
        trim_config: Thresholds for the print-start heuristic.
                     Default: TrimConfig() (window of 5, 3 extrusions)
        trim: Whether to trim priming moves at all. Default: True

    Example:
        >>> loader = ToolpathLoader()
        >>> model = loader.load("part.gcode")
        >>> scale = model.scale()
    """

    def __init__(self, trim_config: Optional[TrimConfig] = None, trim: bool = True):
        """Initialize the loader.

        Args:
            trim_config: Trimming thresholds (default: TrimConfig())
            trim: Whether to trim priming moves (default: True)

        Raises:
            ValueError: If trim_config is not a TrimConfig
        """
        if trim_config is None:
            trim_config = TrimConfig()
        elif not isinstance(trim_config, TrimConfig):
            raise ValueError(
                f"trim_config must be a TrimConfig, got {type(trim_config).__name__}"
            )

        self.trim_config = trim_config
        self.trim = trim

    def process(self, content: str) -> ToolpathModel:
        """Run G-code text through the complete pipeline.

        Args:
            content: Full G-code program text

        Returns:
            ToolpathModel with trimmed segments and extrusion bounds. The bounds
            are empty if no segment extrudes; scale() then raises.

        Raises:
            EmptyToolpathError: If no movement segments remain
        """
        segments = parse_gcode(content)
        logger.info("Parsed %d line segments", len(segments))

        if self.trim:
            trimmed = trim_priming_moves(segments, self.trim_config)
            logger.info("After filtering priming: %d segments", len(trimmed))
        else:
            trimmed = segments

        if not trimmed:
            raise EmptyToolpathError("No valid G-code movements found")

        bounds = compute_bounds(trimmed)
        if bounds.is_empty():
            logger.warning("Toolpath has no extrusion moves; bounds are empty")

        return ToolpathModel(
            segments=tuple(trimmed),
            bounds=bounds,
            parsed_segment_count=len(segments),
        )

    def load(self, path: Union[str, Path]) -> ToolpathModel:
        """Read a G-code file and run it through the pipeline.

        Raises:
            GCodeReadError: If the file cannot be read
            EmptyToolpathError: If no movement segments remain
        """
        logger.info("Loading G-code file: %s", path)
        return self.process(read_gcode_file(path))

    def __repr__(self) -> str:
        """Return string representation of the loader."""
        return f"ToolpathLoader(trim_config={self.trim_config!r}, trim={self.trim})"
