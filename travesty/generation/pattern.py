"""Rolling pattern window."""

from ..corpus.buffer import CorpusBuffer


def first_pattern(buffer: CorpusBuffer) -> str:
    """The seed context: the first pattern_length symbols of the buffer."""
    return buffer.text[:buffer.pattern_length]


def advance(pattern: str, symbol: str) -> str:
    """Drop the first symbol of the window and append the emitted one."""
    return pattern[1:] + symbol
