"""Static 3-D preview of a toolpath.

This module draws the visible segments of a ToolpathModel in centered,
normalized viewer space with matplotlib. Extrusion moves are blue and get
brighter with height; travel moves are red and translucent.
"""

from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from toolpath_preview.models import LineSegment
from toolpath_preview.pipeline import ToolpathModel

EXTRUSION_RGB = np.array([100, 200, 255]) / 255.0
TRAVEL_RGB = np.array([255, 100, 100]) / 255.0
TRAVEL_ALPHA = 180 / 255.0


def _segment_array(segments: List[LineSegment]) -> np.ndarray:
    """Stack segments into an (n, 2, 3) array of machine coordinates."""
    return np.array(
        [
            [[s.start.x, s.start.y, s.start.z], [s.end.x, s.end.y, s.end.z]]
            for s in segments
        ],
        dtype=float,
    )


def _normalize(model: ToolpathModel, points: np.ndarray) -> np.ndarray:
    """Center points on the model and scale them into [-1, 1]."""
    center = model.center()
    return (points - np.array([center.x, center.y, center.z])) * model.scale()


def _segment_colors(model: ToolpathModel, segments: List[LineSegment]) -> np.ndarray:
    """RGBA color per segment with height-based shading."""
    z_min = model.bounds.min.z
    z_range = model.bounds.max.z - z_min
    layer_z = np.array([s.layer_z for s in segments], dtype=float)
    if z_range > 0:
        height_ratio = np.clip((layer_z - z_min) / z_range, 0.0, 1.0)
    else:
        height_ratio = np.ones_like(layer_z)

    is_extrusion = np.array([s.is_extrusion for s in segments])
    brightness = np.where(is_extrusion, 0.5 + height_ratio * 0.5, 0.6 + height_ratio * 0.4)
    base = np.where(is_extrusion[:, None], EXTRUSION_RGB, TRAVEL_RGB)
    alpha = np.where(is_extrusion, 1.0, TRAVEL_ALPHA)

    return np.column_stack([base * brightness[:, None], alpha])


def plot_toolpath(
    model: ToolpathModel,
    max_layer_z: Optional[float] = None,
    show_travel: bool = True,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a toolpath as 3-D line segments.

    Args:
        model: Toolpath to draw
        max_layer_z: Hide segments above this layer height (default: show all)
        show_travel: Whether travel moves are drawn (default: True)
        title: Optional custom title (default: segment count and model size)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Raises:
        ValueError: If no segment is visible
        DegenerateBoundsError: If the toolpath has no extrusion to scale by

    Example:
        >>> model = ToolpathLoader().load("part.gcode")
        >>> plot_toolpath(model, show_travel=False)
    """
    segments = model.visible_segments(max_layer_z=max_layer_z, show_travel=show_travel)
    if not segments:
        raise ValueError("Cannot plot empty toolpath")

    lines = _normalize(model, _segment_array(segments))
    colors = _segment_colors(model, segments)

    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(projection="3d")
    ax.add_collection3d(Line3DCollection(lines, colors=colors, linewidths=0.8))

    if title is None:
        size = model.model_size()
        title = (
            f"Segments: {len(segments)} | "
            f"Size: {size.x:.1f}x{size.y:.1f}x{size.z:.1f}mm | "
            f"Travel: {'ON' if show_travel else 'OFF'}"
        )
    ax.set_title(title)

    ax.set_xlim(-1.0, 1.0)
    ax.set_ylim(-1.0, 1.0)
    ax.set_zlim(-1.0, 1.0)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    fig.patch.set_facecolor((20 / 255, 20 / 255, 30 / 255))

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
