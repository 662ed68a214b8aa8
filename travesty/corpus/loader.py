"""Corpus loading from files or standard input."""

import sys
from pathlib import Path
from typing import Optional, TextIO

from ..utils.logging import get_logger

logger = get_logger(__name__)

STDIN_NAMES = (None, "", "-", "/dev/stdin")


def load_corpus(path: Optional[str] = None, stdin: Optional[TextIO] = None) -> str:
    """Read raw corpus text.

    Args:
        path: File to read. None, "" or "-" read from standard input.
        stdin: Stream used instead of sys.stdin (mainly for tests).

    Returns:
        The raw text. Undecodable bytes are replaced, never fatal.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if path in STDIN_NAMES:
        logger.info("Reading from: <stdin>")
        return (stdin or sys.stdin).read()

    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    logger.info(f"Reading from: {file_path}")
    return file_path.read_text(encoding="utf-8", errors="replace")
