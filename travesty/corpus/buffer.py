"""Corpus buffer: normalized training text with a wraparound tail.

The alphabet is the contiguous range of codes from ASCII space through DEL.
DEL is reserved as a structural marker; it is kept in the buffer but the
output formatter never prints it.
"""

import re
from dataclasses import dataclass

from ..errors import InsufficientInput, InvalidParameter
from ..utils.logging import get_logger

logger = get_logger(__name__)

ALPHABET_START = 32  # ASCII space
ALPHABET_END = 127  # ASCII DEL, inclusive
ALPHABET_SIZE = ALPHABET_END - ALPHABET_START + 1

SPACE = " "
SENTINEL = chr(ALPHABET_END)

_WHITESPACE_RUN = re.compile(r"\s+")
_OUTSIDE_ALPHABET = re.compile(r"[^\x20-\x7f]")


def symbol_index(symbol: str) -> int:
    """Return the frequency-array slot of a symbol."""
    return ord(symbol) - ALPHABET_START


def index_symbol(index: int) -> str:
    """Return the symbol stored at a frequency-array slot."""
    return chr(index + ALPHABET_START)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and drop non-alphabet characters.

    Leading and trailing whitespace is removed.
    """
    collapsed = _WHITESPACE_RUN.sub(SPACE, text).strip(SPACE)
    cleaned = _OUTSIDE_ALPHABET.sub("", collapsed)
    # Dropping characters can leave two spaces side by side.
    return _WHITESPACE_RUN.sub(SPACE, cleaned).strip(SPACE)


@dataclass(frozen=True)
class CorpusBuffer:
    """Immutable training buffer.

    Attributes:
        text: Body followed by a separating space and the wraparound tail.
        pattern_length: Length of the wraparound tail.
        source_length: Length of the normalized text before truncation.
    """
    text: str
    pattern_length: int
    source_length: int

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, item):
        return self.text[item]

    @property
    def body_length(self) -> int:
        """Number of corpus symbols before the separator and tail."""
        return len(self.text) - self.pattern_length - 1

    @property
    def tail(self) -> str:
        """The wraparound tail."""
        return self.text[len(self.text) - self.pattern_length:]


def minimum_capacity(pattern_length: int) -> int:
    """Smallest buffer that holds a full pattern, the separator and the tail."""
    return 2 * pattern_length + 1


def build_buffer(text: str, capacity: int, pattern_length: int) -> CorpusBuffer:
    """Build the corpus buffer from raw text.

    The normalized text is truncated to ``capacity - (pattern_length + 1)``
    symbols, then a space and the first ``pattern_length`` symbols are
    appended so that matches near the end still have a following symbol.
    The tail always equals the buffer's own first ``pattern_length`` symbols.

    Args:
        text: Raw corpus text.
        capacity: Target buffer size including the wraparound.
        pattern_length: Order of the Markov context.

    Returns:
        The corpus buffer.

    Raises:
        InvalidParameter: If capacity cannot hold a body of pattern_length symbols.
        InsufficientInput: If the normalized text is shorter than pattern_length.
    """
    if capacity < minimum_capacity(pattern_length):
        raise InvalidParameter(
            f"buffer capacity {capacity} is too small for pattern length "
            f"{pattern_length}; at least {minimum_capacity(pattern_length)} is needed"
        )

    normalized = normalize_text(text)
    if len(normalized) < pattern_length:
        raise InsufficientInput(
            f"Corpus has {len(normalized)} usable characters after normalization, "
            f"pattern length {pattern_length} needs at least {pattern_length}"
        )

    body = normalized[:capacity - (pattern_length + 1)]
    buffer = CorpusBuffer(
        text=body + SPACE + normalized[:pattern_length],
        pattern_length=pattern_length,
        source_length=len(normalized),
    )
    logger.info(f"Characters read, plus wraparound = {len(buffer)}")
    return buffer
