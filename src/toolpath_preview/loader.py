"""Reading G-code programs from disk."""

import logging
from pathlib import Path
from typing import Union

from toolpath_preview.exceptions import GCodeReadError

logger = logging.getLogger(__name__)


def read_gcode_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read the full text of a G-code file.

    Undecodable bytes are replaced rather than rejected.

    Args:
        path: Path to the G-code file
        encoding: Text encoding (default: utf-8)

    Returns:
        File content as a string

    Raises:
        GCodeReadError: If the file cannot be opened or read
    """
    try:
        content = Path(path).read_text(encoding=encoding, errors="replace")
    except OSError as e:
        raise GCodeReadError(f"Failed to read file: {path}") from e

    logger.debug("Read %d characters from %s", len(content), path)
    return content
