"""File handling utilities."""

import sys
from pathlib import Path

STDIN_MARKER = "-"


def read_text(source: str | Path, encoding: str = "utf-8") -> str:
    """Read a text input from a file path, or from stdin when given ``-``.

    Args:
        source: File path, or ``-`` for standard input
        encoding: Text encoding of the file

    Returns:
        The full text content

    Raises:
        FileNotFoundError: If the path does not exist
    """
    if str(source) == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    with path.open("r", encoding=encoding) as f:
        return f.read()
