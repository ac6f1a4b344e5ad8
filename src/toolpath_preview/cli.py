"""Command-line entry point: summarize and optionally plot a G-code toolpath."""

import argparse
import logging
import sys
from typing import List, Optional

from toolpath_preview.exceptions import ToolpathError
from toolpath_preview.pipeline import ToolpathLoader, ToolpathModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolpath-preview",
        description="Preview the extruded toolpath of a G-code file",
    )
    parser.add_argument("file", help="Path to G-code file")
    parser.add_argument(
        "--no-trim", action="store_true", help="Keep priming and homing moves"
    )
    parser.add_argument(
        "--max-layer", type=float, default=None, help="Hide segments above this Z height"
    )
    parser.add_argument(
        "--hide-travel", action="store_true", help="Hide non-extruding moves"
    )
    parser.add_argument("--plot", action="store_true", help="Show a 3-D plot")
    parser.add_argument("--save", metavar="PATH", help="Save the 3-D plot to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def format_summary(model: ToolpathModel) -> str:
    """Human-readable summary of a loaded toolpath."""
    lines = [
        f"Parsed {model.parsed_segment_count} line segments",
        f"After filtering priming: {len(model.segments)} segments "
        f"({model.extrusion_count()} extrusion, {model.travel_count()} travel)",
    ]
    if model.bounds.is_empty():
        lines.append("Bounds: empty (no extrusion moves)")
        return "\n".join(lines)

    lo, hi = model.bounds.min, model.bounds.max
    size = model.model_size()
    lines.append(
        f"Bounds: ({lo.x:.1f}, {lo.y:.1f}, {lo.z:.1f}) to ({hi.x:.1f}, {hi.y:.1f}, {hi.z:.1f})"
    )
    lines.append(f"Size: {size.x:.1f}x{size.y:.1f}x{size.z:.1f}mm")
    lines.append(f"Layers: {len(model.layer_heights())}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        model = ToolpathLoader(trim=not args.no_trim).load(args.file)
        print(format_summary(model))

        if args.plot or args.save:
            # matplotlib is only needed for plotting
            from toolpath_preview.visualize import plot_toolpath

            plot_toolpath(
                model,
                max_layer_z=args.max_layer,
                show_travel=not args.hide_travel,
                show=args.plot,
                save_path=args.save,
            )
    except (ToolpathError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
