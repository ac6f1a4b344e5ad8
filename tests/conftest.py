"""Shared fixtures: a small but realistic sliced program."""

import pytest

START_GCODE = """\
; generated for tests
M104 S200
M140 S60
G28 ; home all axes
G90
G1 Z0.3
G1 X0.1 Y20 Z0.3
G1 X0.1 Y200.0 Z0.3 E15
G1 X0.4 Y200.0 Z0.3
G1 X0.4 Y20 Z0.3 E30
"""

PRIMING_E = 30.0

END_GCODE = """\
G91
G1 E-2
G1 Z10
G90
G1 X0 Y220
M104 S0
M84
"""


def square_layer(z, e_start):
    """Four extruding sides of a 20 mm square at (50, 50), plus a travel in."""
    lines = [f"G0 X50 Y50 Z{z}"]
    e = e_start
    for x, y in [(70, 50), (70, 70), (50, 70), (50, 50)]:
        e += 1.0
        lines.append(f"G1 X{x} Y{y} E{e:.1f}")
    return lines, e


@pytest.fixture
def body_gcode():
    """Two square layers at z=0.2 and z=0.4."""
    first, e = square_layer(0.2, PRIMING_E)
    second, _ = square_layer(0.4, e)
    return "\n".join(first + second) + "\n"


@pytest.fixture
def sample_gcode(body_gcode):
    """Start script with homing and a priming line, the body, then parking."""
    return START_GCODE + body_gcode + END_GCODE


@pytest.fixture
def sample_file(tmp_path, sample_gcode):
    """The sample program written to disk."""
    path = tmp_path / "sample.gcode"
    path.write_text(sample_gcode)
    return path
