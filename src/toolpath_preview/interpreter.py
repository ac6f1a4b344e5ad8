"""Motion interpreter: turns G-code text into 3-D line segments.

Only three kinds of general (G) commands change interpreter state:

- G0/G1: rapid and linear moves, treated identically
- G90: absolute positioning
- G91: relative positioning

Every other command is ignored. Unspecified X, Y, Z and E arguments keep
their previous values.

Example:
    >>> segments = parse_gcode("G90\\nG1 X0 Y0 Z0\\nG1 X10 Y0 Z0 E1\\n")
    >>> [seg.is_extrusion for seg in segments]
    [True]
"""

import logging
from typing import List

from toolpath_preview.models.geometry import Point3D
from toolpath_preview.models.segment import LineSegment
from toolpath_preview.tokenizer import COMMENT_MARKER, Command, Mnemonic, tokenize_line

logger = logging.getLogger(__name__)

RAPID_MOVE = 0
LINEAR_MOVE = 1
ABSOLUTE_POSITIONING = 90
RELATIVE_POSITIONING = 91

MOTION_COMMANDS = frozenset({RAPID_MOVE, LINEAR_MOVE})


class InterpreterState:
    """Mutable machine state tracked while reading one G-code program.

    Attributes:
        position: Current toolhead position
        extruder: Current extruder position (E)
        absolute: True for absolute positioning (G90), False for relative (G91)
    """

    def __init__(self) -> None:
        self.position = Point3D.origin()
        self.extruder = 0.0
        self.absolute = True

    def apply(self, command: Command) -> LineSegment | None:
        """Apply one general command to the state.

        Args:
            command: A G command

        Returns:
            The segment traced by a move that changed position, otherwise None
        """
        code = command.major_number

        if code == ABSOLUTE_POSITIONING:
            self.absolute = True
            return None
        if code == RELATIVE_POSITIONING:
            self.absolute = False
            return None
        if code not in MOTION_COMMANDS:
            return None

        return self._move(command)

    def _resolve(self, current: float, value: float | None) -> float:
        if value is None:
            return current
        if self.absolute:
            return value
        return current + value

    def _move(self, command: Command) -> LineSegment | None:
        prior = self.position
        new_position = Point3D(
            self._resolve(prior.x, command.argument("X")),
            self._resolve(prior.y, command.argument("Y")),
            self._resolve(prior.z, command.argument("Z")),
        )
        new_extruder = self._resolve(self.extruder, command.argument("E"))

        segment = None
        if new_position != prior:
            segment = LineSegment(
                start=prior,
                end=new_position,
                is_extrusion=new_extruder > self.extruder,
                layer_z=new_position.z,
            )

        # E-only moves still advance the extruder
        self.position = new_position
        self.extruder = new_extruder
        return segment


def parse_gcode(content: str) -> List[LineSegment]:
    """Interpret G-code text as an ordered list of line segments.

    Args:
        content: Full text of a G-code program

    Returns:
        Segments in program order. Zero-length moves are never included.

    Note:
        - Blank lines and lines starting with ';' are skipped
        - Malformed lines contribute nothing and do not stop parsing
        - In relative mode (G91) each given argument, E included, is added to
          its previous value
    """
    state = InterpreterState()
    segments: List[LineSegment] = []
    line_count = 0

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(COMMENT_MARKER):
            continue
        line_count += 1

        for command in tokenize_line(trimmed):
            if command.mnemonic is not Mnemonic.GENERAL:
                continue
            segment = state.apply(command)
            if segment is not None:
                segments.append(segment)

    logger.debug("Interpreted %d G-code lines into %d segments", line_count, len(segments))
    return segments
