"""Trimming of priming, homing and positioning moves around the actual print.

Slicer start scripts usually home the axes, wipe a priming line along the edge
of the bed and travel to the first layer. None of that belongs in a preview, so
the trimmer looks for the first dense cluster of extrusion away from the bed
edges and cuts everything before it, then drops trailing travel after the last
extrusion.

This is a spatial/density heuristic. It can leave very small prints, prints
close to the edge thresholds, or prints with sparse extrusion untrimmed at the
start; in that case the start boundary falls back to the first segment.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from toolpath_preview.models.segment import LineSegment

logger = logging.getLogger(__name__)

# Heuristic defaults, in model units (millimeters)
DEFAULT_WINDOW_SIZE = 5
DEFAULT_MIN_EXTRUSIONS = 3
DEFAULT_EDGE_MIN_X = 10.0
DEFAULT_EDGE_MIN_Y = 20.0
DEFAULT_MAX_TRAVEL = 100.0


@dataclass(frozen=True)
class TrimConfig:
    """Tuning constants for the print-start heuristic.

    Attributes:
        window_size: Number of consecutive segments examined at once
        min_extrusions: Extruding segments a window needs to count as printing
        edge_min_x: Endpoints with x below this are considered at the bed edge
        edge_min_y: Endpoints with y below this are considered at the bed edge
        max_travel: Moves longer than this along X or Y are long traversals
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    min_extrusions: int = DEFAULT_MIN_EXTRUSIONS
    edge_min_x: float = DEFAULT_EDGE_MIN_X
    edge_min_y: float = DEFAULT_EDGE_MIN_Y
    max_travel: float = DEFAULT_MAX_TRAVEL

    def __post_init__(self) -> None:
        """Validate window parameters."""
        if self.window_size <= 0:
            raise ValueError(f"window_size must be positive, got {self.window_size}")
        if not 0 <= self.min_extrusions <= self.window_size:
            raise ValueError(
                f"min_extrusions must be between 0 and window_size "
                f"({self.window_size}), got {self.min_extrusions}"
            )
        if self.max_travel <= 0:
            raise ValueError(f"max_travel must be positive, got {self.max_travel}")


DEFAULT_TRIM_CONFIG = TrimConfig()


def is_print_segment(segment: LineSegment, config: TrimConfig = DEFAULT_TRIM_CONFIG) -> bool:
    """Check whether a segment looks like part of the printed object.

    A segment is rejected if either endpoint is near the low X or low Y edge of
    the bed, or if it travels further than max_travel along X or Y.

    Args:
        segment: Segment to classify
        config: Heuristic thresholds

    Returns:
        True if the segment is away from the edges and not a long traversal
    """
    at_edge = (
        segment.start.x < config.edge_min_x
        or segment.end.x < config.edge_min_x
        or segment.start.y < config.edge_min_y
        or segment.end.y < config.edge_min_y
    )
    long_move = (
        segment.x_extent() > config.max_travel or segment.y_extent() > config.max_travel
    )
    return not at_edge and not long_move


def find_print_start(
    segments: Sequence[LineSegment], config: TrimConfig = DEFAULT_TRIM_CONFIG
) -> int:
    """Find the index where the actual print begins.

    Slides a window of config.window_size segments from the start and returns
    the first index whose window holds at least config.min_extrusions
    extruding segments, all of which pass is_print_segment().

    Args:
        segments: Full segment sequence
        config: Heuristic thresholds

    Returns:
        Start index of the first qualifying window, or 0 if none qualifies
    """
    for i in range(len(segments) - config.window_size + 1):
        window = segments[i : i + config.window_size]
        extrusion_count = sum(1 for seg in window if seg.is_extrusion)
        if extrusion_count < config.min_extrusions:
            continue
        if all(is_print_segment(seg, config) for seg in window):
            return i

    return 0


def find_print_end(segments: Sequence[LineSegment]) -> int:
    """Find the index one past the last extruding segment.

    Returns:
        End index (exclusive), or len(segments) if nothing extrudes
    """
    for i in range(len(segments) - 1, -1, -1):
        if segments[i].is_extrusion:
            return i + 1
    return len(segments)


def trim_priming_moves(
    segments: Sequence[LineSegment], config: TrimConfig | None = None
) -> List[LineSegment]:
    """Cut leading priming/homing moves and trailing travel from a toolpath.

    Args:
        segments: Full segment sequence in program order
        config: Heuristic thresholds (default: TrimConfig())

    Returns:
        New list holding segments[start:end]. The input is not modified.

    Example:
        >>> trimmed = trim_priming_moves(parse_gcode(text))
    """
    if not segments:
        return []

    if config is None:
        config = DEFAULT_TRIM_CONFIG

    start = max(0, min(find_print_start(segments, config), len(segments)))
    end = max(0, min(find_print_end(segments), len(segments)))

    logger.debug("Trimming toolpath to segments [%d, %d) of %d", start, end, len(segments))
    return list(segments[start:end])
