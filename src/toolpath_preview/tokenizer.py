"""G-code line tokenizer.

Splits a single line of G-code into commands. A command starts at a word whose
letter names a command category (G, M, T, O) and collects the argument words
that follow it up to the next command word:

    >>> [str(cmd) for cmd in tokenize_line("G90 G1 X10 Y5.5 E0.2 ; perimeter")]
    ['G90', 'G1 X10 Y5.5 E0.2']

Lines that contain anything other than words, comments, a line number and a
checksum are treated as malformed and produce no commands.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

COMMENT_MARKER = ";"

_WORD_RE = re.compile(r"\s*([A-Za-z])\s*([+-]?(?:\d+\.?\d*|\.\d+))")
_PAREN_COMMENT_RE = re.compile(r"\([^()]*\)")
_CHECKSUM_RE = re.compile(r"\*\d+\s*$")

LINE_NUMBER_LETTER = "N"


class Mnemonic(Enum):
    """Command categories keyed by their word letter."""

    GENERAL = "G"
    MISCELLANEOUS = "M"
    TOOL_CHANGE = "T"
    PROGRAM_NUMBER = "O"


_MNEMONICS = {m.value: m for m in Mnemonic}


@dataclass(frozen=True)
class Argument:
    """A letter/value argument word such as X10.5."""

    letter: str
    value: float


@dataclass(frozen=True)
class Command:
    """A single command with its arguments.

    Attributes:
        mnemonic: Command category (G, M, T or O)
        number: Numeric code as written, e.g. 1.0 for G1 or 92.1 for G92.1
        arguments: Argument words in the order they appeared on the line
    """

    mnemonic: Mnemonic
    number: float
    arguments: Tuple[Argument, ...] = ()

    @property
    def major_number(self) -> int:
        """Integer part of the command number (G01 and G1.0 are both 1)."""
        return int(self.number)

    def argument(self, letter: str) -> Optional[float]:
        """Value of the last argument with the given letter, or None."""
        value = None
        for arg in self.arguments:
            if arg.letter == letter.upper():
                value = arg.value
        return value

    def __str__(self) -> str:
        parts = [f"{self.mnemonic.value}{self.number:g}"]
        parts.extend(f"{arg.letter}{arg.value:g}" for arg in self.arguments)
        return " ".join(parts)


def _strip_comments(line: str) -> Optional[str]:
    """Remove end-of-line and parenthesized comments.

    Returns None if a parenthesized comment is left unbalanced.
    """
    code = line.split(COMMENT_MARKER, 1)[0]
    code = _PAREN_COMMENT_RE.sub(" ", code)
    if "(" in code or ")" in code:
        return None
    return _CHECKSUM_RE.sub("", code)


def tokenize_line(line: str) -> List[Command]:
    """Split one line of G-code into commands.

    Args:
        line: A single line of G-code text

    Returns:
        Commands in the order they appear. Empty for blank lines, comment-only
        lines and malformed lines.
    """
    code = _strip_comments(line)
    if code is None:
        return []

    words: List[Tuple[str, float]] = []
    pos = 0
    while pos < len(code):
        match = _WORD_RE.match(code, pos)
        if match is None:
            if code[pos:].strip():
                return []
            break
        words.append((match.group(1).upper(), float(match.group(2))))
        pos = match.end()

    commands: List[Command] = []
    mnemonic: Optional[Mnemonic] = None
    number = 0.0
    arguments: List[Argument] = []

    for letter, value in words:
        if letter == LINE_NUMBER_LETTER:
            continue
        if letter in _MNEMONICS:
            if mnemonic is not None:
                commands.append(Command(mnemonic, number, tuple(arguments)))
            mnemonic, number, arguments = _MNEMONICS[letter], value, []
        elif mnemonic is not None:
            arguments.append(Argument(letter, value))

    if mnemonic is not None:
        commands.append(Command(mnemonic, number, tuple(arguments)))

    return commands
