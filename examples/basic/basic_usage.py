"""Basic usage example.

This example demonstrates:
- Interpreting a small G-code program into line segments
- Trimming the priming line printed by the start script
- Computing the extrusion bounds used to center and scale a preview
- Saving a 3-D preview plot

This is the simplest way to use the toolpath preview pipeline.
"""

from pathlib import Path

from toolpath_preview import ToolpathLoader, compute_bounds, parse_gcode, trim_priming_moves
from toolpath_preview.visualize import plot_toolpath


def build_program() -> str:
    """A start script with a priming line, three square layers and parking."""
    lines = [
        "G28 ; home",
        "G90",
        "G1 Z0.3",
        "G1 X0.1 Y20",
        "G1 X0.1 Y200 E15 ; priming line",
        "G1 X0.4 Y200",
        "G1 X0.4 Y20 E30",
    ]
    e = 30.0
    for layer in range(3):
        z = 0.2 * (layer + 1)
        lines.append(f"G0 X60 Y60 Z{z:.1f}")
        for x, y in [(90, 60), (90, 90), (60, 90), (60, 60)]:
            e += 1.5
            lines.append(f"G1 X{x} Y{y} E{e:.2f}")
    lines += ["G91", "G1 Z10", "G90", "G1 X0 Y220 ; park"]
    return "\n".join(lines) + "\n"


def main():
    """Run each stage separately, then the full pipeline."""

    print("=" * 80)
    print("BASIC TOOLPATH PREVIEW USAGE")
    print("=" * 80)

    program = build_program()

    # Stage 1: interpret G-code into segments
    segments = parse_gcode(program)
    print(f"\nParsed {len(segments)} line segments")

    print(f"  {'#':<4} {'Start':<22} {'End':<22} {'Extrusion'}")
    print("  " + "-" * 70)
    for i, seg in enumerate(segments):
        start = f"({seg.start.x:.1f}, {seg.start.y:.1f}, {seg.start.z:.1f})"
        end = f"({seg.end.x:.1f}, {seg.end.y:.1f}, {seg.end.z:.1f})"
        print(f"  {i:<4} {start:<22} {end:<22} {'yes' if seg.is_extrusion else 'no'}")

    # Stage 2: drop the priming line and the parking move
    trimmed = trim_priming_moves(segments)
    print(f"\nAfter filtering priming: {len(trimmed)} segments")

    # Stage 3: bounds of the extruded part only
    bounds = compute_bounds(trimmed)
    size = bounds.size()
    print(
        f"Bounds: ({bounds.min.x:.1f}, {bounds.min.y:.1f}, {bounds.min.z:.1f}) to "
        f"({bounds.max.x:.1f}, {bounds.max.y:.1f}, {bounds.max.z:.1f})"
    )
    print(f"Size: {size.x:.1f}x{size.y:.1f}x{size.z:.1f}mm")
    print(f"Normalization scale: {bounds.normalization_scale():.4f}")

    # The pipeline does all three stages at once
    model = ToolpathLoader().process(program)

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    output = Path(__file__).parent / "basic_usage.png"
    plot_toolpath(model, show=False, save_path=str(output))
    print(f"  Plot saved: {output}")


if __name__ == "__main__":
    main()
