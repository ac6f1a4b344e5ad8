"""Tests for the motion interpreter."""

import pytest

from toolpath_preview.interpreter import InterpreterState, parse_gcode
from toolpath_preview.models import LineSegment, Point3D
from toolpath_preview.tokenizer import tokenize_line


class TestParseGcodeBasics:
    """Basic interpretation of moves."""

    def test_empty_content(self):
        """Test empty text yields no segments."""
        assert parse_gcode("") == []

    def test_initial_state_is_origin(self):
        """Test the first move starts at the origin."""
        segments = parse_gcode("G1 X10 Y20 Z0.2\n")
        assert len(segments) == 1
        assert segments[0].start == Point3D(0.0, 0.0, 0.0)
        assert segments[0].end == Point3D(10.0, 20.0, 0.2)

    def test_g0_and_g1_are_equivalent(self):
        """Test rapid and linear moves produce identical segments."""
        assert parse_gcode("G0 X10 E1\n") == parse_gcode("G1 X10 E1\n")

    def test_move_to_current_position_emits_nothing(self):
        """Test that a move to the origin from the origin is not a segment."""
        segments = parse_gcode("G90\nG1 X0 Y0 Z0\nG1 X10 Y0 Z0 E1\n")
        assert len(segments) == 1
        assert segments[0].start == Point3D(0.0, 0.0, 0.0)
        assert segments[0].end == Point3D(10.0, 0.0, 0.0)
        assert segments[0].is_extrusion

    def test_travel_then_extrusion(self):
        """Test a move without E is travel and a move with increasing E extrudes."""
        segments = parse_gcode("G90\nG1 X5 Y5 Z0\nG1 X10 Y5 Z0 E1\n")
        assert len(segments) == 2
        assert not segments[0].is_extrusion
        assert segments[1].is_extrusion

    def test_layer_z_is_endpoint_z(self):
        """Test layer_z records the resolved Z of the move."""
        segments = parse_gcode("G1 X1 Z0.2\nG1 Z0.4\nG1 X2\n")
        assert [seg.layer_z for seg in segments] == pytest.approx([0.2, 0.4, 0.4])

    def test_segments_are_contiguous(self):
        """Test each segment starts where the previous one ended."""
        segments = parse_gcode("G1 X1\nG1 Y1\nG1 X0\nG1 Y0\n")
        for prev, cur in zip(segments, segments[1:]):
            assert cur.start == prev.end

    def test_no_zero_length_segments(self):
        """Test repeated and E-only moves never create zero-length segments."""
        text = "G1 X10\nG1 X10\nG1 E5\nG1 X10 Y0\nG91\nG1 X0 E1\nG1 X1\n"
        segments = parse_gcode(text)
        assert len(segments) == 2
        for seg in segments:
            assert seg.start != seg.end


class TestCarryForward:
    """Unspecified arguments keep their previous value."""

    def test_single_axis_keeps_others(self):
        """Test a move specifying only X keeps Y and Z."""
        segments = parse_gcode("G1 X10 Y20 Z0.3\nG1 X15\n")
        assert segments[1].end == Point3D(15.0, 20.0, 0.3)

    def test_single_axis_keeps_extruder(self):
        """Test a move without E does not reset the extruder position."""
        segments = parse_gcode("G1 X10 E5\nG1 X20\nG1 X30 E5.5\n")
        assert segments[0].is_extrusion
        assert not segments[1].is_extrusion
        assert segments[2].is_extrusion

    def test_extruder_only_move_updates_state(self):
        """Test an E-only move is not a segment but still advances E."""
        # E rises to 2 without motion, so E2 on the next move is not an increase
        segments = parse_gcode("G1 E2\nG1 X10 E2\n")
        assert len(segments) == 1
        assert not segments[0].is_extrusion


class TestExtrusionDetection:
    """is_extrusion is true iff E strictly increases."""

    @pytest.mark.parametrize(
        "e_value, expected",
        [(1.5, True), (1.0, False), (0.5, False)],
    )
    def test_strict_increase(self, e_value, expected):
        """Test equal or decreasing E values are not extrusion."""
        segments = parse_gcode(f"G1 X1 E1\nG1 X2 E{e_value}\n")
        assert segments[1].is_extrusion is expected

    def test_retraction_is_not_extrusion(self):
        """Test a move that retracts filament is travel."""
        segments = parse_gcode("G1 X1 E3\nG1 X2 E2.2\n")
        assert not segments[1].is_extrusion


class TestPositioningModes:
    """Absolute (G90) and relative (G91) positioning."""

    def test_relative_adds_to_prior_position(self):
        """Test G91 resolves X5 from x=10 to x=15 and detects extrusion."""
        segments = parse_gcode("G1 X10\nG91\nG1 X5 E1\n")
        assert segments[-1].start == Point3D(10.0, 0.0, 0.0)
        assert segments[-1].end == Point3D(15.0, 0.0, 0.0)
        assert segments[-1].is_extrusion

    def test_relative_leaves_unspecified_axes(self):
        """Test relative moves do not change axes that are not given."""
        segments = parse_gcode("G1 X10 Y20 Z0.2\nG91\nG1 X5\n")
        assert segments[-1].end == Point3D(15.0, 20.0, 0.2)

    def test_relative_extruder(self):
        """Test E is also relative in G91 mode."""
        segments = parse_gcode("G1 X1 E10\nG91\nG1 X1 E0.5\nG1 X1 E-0.5\n")
        assert segments[1].is_extrusion
        assert not segments[2].is_extrusion

    def test_relative_moves_accumulate(self):
        """Test consecutive relative moves build on each other."""
        segments = parse_gcode("G91\nG1 X1\nG1 X1\nG1 X1\n")
        assert [seg.end.x for seg in segments] == pytest.approx([1.0, 2.0, 3.0])

    def test_switch_back_to_absolute(self):
        """Test G90 restores absolute coordinates."""
        segments = parse_gcode("G91\nG1 X5\nG90\nG1 X5 Y1\n")
        assert segments[-1].end == Point3D(5.0, 1.0, 0.0)

    def test_mode_change_on_same_line(self):
        """Test a mode command before a move on the same line applies to it."""
        segments = parse_gcode("G1 X10\nG91 G1 X5\n")
        assert segments[-1].end.x == pytest.approx(15.0)


class TestIgnoredInput:
    """Comments, blank lines, other commands and malformed lines."""

    def test_comments_and_blank_lines_do_not_change_state(self):
        """Test comment-only and blank lines between moves are inert."""
        with_noise = parse_gcode("G1 X10 E1\n; comment\n\n   \nG1 X20 E2\n")
        without_noise = parse_gcode("G1 X10 E1\nG1 X20 E2\n")
        assert with_noise == without_noise
        assert len(with_noise) == 2

    def test_other_commands_are_ignored(self):
        """Test M, T and unhandled G commands have no effect."""
        text = "M104 S200\nG28\nT0\nG92 E0\nM83\nG1 X10 E1\n"
        segments = parse_gcode(text)
        assert segments == [
            LineSegment(
                start=Point3D(0.0, 0.0, 0.0),
                end=Point3D(10.0, 0.0, 0.0),
                is_extrusion=True,
                layer_z=0.0,
            )
        ]

    def test_malformed_line_does_not_abort_parse(self):
        """Test a malformed line contributes nothing and parsing continues."""
        segments = parse_gcode("G1 X10\nG1 X@@ Y5\nG1 X20\n")
        assert [seg.end for seg in segments] == [
            Point3D(10.0, 0.0, 0.0),
            Point3D(20.0, 0.0, 0.0),
        ]

    def test_windows_line_endings(self):
        """Test CRLF line endings are handled."""
        segments = parse_gcode("G1 X1\r\nG1 X2 E1\r\n")
        assert len(segments) == 2


class TestInterpreterState:
    """Tests for InterpreterState directly."""

    def test_initial_state(self):
        """Test the state starts at the origin in absolute mode."""
        state = InterpreterState()
        assert state.position == Point3D.origin()
        assert state.extruder == 0.0
        assert state.absolute

    def test_apply_mode_commands(self):
        """Test G91/G90 toggle the mode without producing segments."""
        state = InterpreterState()
        assert state.apply(tokenize_line("G91")[0]) is None
        assert not state.absolute
        assert state.apply(tokenize_line("G90")[0]) is None
        assert state.absolute

    def test_apply_move(self):
        """Test a move returns its segment and updates position."""
        state = InterpreterState()
        seg = state.apply(tokenize_line("G1 X3 Y4 E0.1")[0])
        assert seg is not None
        assert seg.end == Point3D(3.0, 4.0, 0.0)
        assert state.position == Point3D(3.0, 4.0, 0.0)
        assert state.extruder == pytest.approx(0.1)
