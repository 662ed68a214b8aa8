"""Output formatting: line-width pacing and verse indentation."""

from typing import Optional

from ..corpus.buffer import SENTINEL, SPACE

VERSE_INDENT = "    "
LINE_BREAK = "\n"


class OutputFormatter:
    """State machine turning emitted symbols into printable text.

    Lines are broken at the first space once a multiple of line_width
    characters has been emitted. The sentinel symbol is never printed; in
    verse mode it forces a line break, and wrapped lines are indented.

    Args:
        line_width: Target line width.
        verse: Enable verse mode.
        chars_emitted: Starting character count (the seed counts).
    """

    def __init__(self, line_width: int, verse: bool = False, chars_emitted: int = 0):
        self.line_width = line_width
        self.verse = verse
        self.chars_emitted = chars_emitted
        self.near_boundary = False
        self.last_symbol: Optional[str] = None

    def emit(self, symbol: str) -> str:
        """Account for one emitted symbol and return the text to print."""
        output = ""
        if symbol != SENTINEL:
            output += symbol

        self.chars_emitted += 1
        self.last_symbol = symbol
        if self.chars_emitted % self.line_width == 0:
            self.near_boundary = True

        if self.verse and symbol == SENTINEL:
            output += LINE_BREAK

        if self.near_boundary and symbol == SPACE:
            output += LINE_BREAK
            if self.verse:
                output += VERSE_INDENT
            self.near_boundary = False

        return output

    def finished(self, out_chars: int) -> bool:
        """True once out_chars is reached and the last symbol was a space."""
        return self.chars_emitted >= out_chars and self.last_symbol == SPACE
