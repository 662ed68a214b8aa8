"""Skip index: per-symbol backward linked lists over buffer positions.

``last_seen[symbol]`` holds the rightmost position of each symbol and
``prior_occurrence[position]`` the next-earlier position holding the same
symbol. Both use the buffer length as the "no position" sentinel, which can
never start a match because a pattern plus its follower cannot fit there.
"""

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from ..corpus.buffer import ALPHABET_SIZE, CorpusBuffer, symbol_index


@dataclass(frozen=True)
class SkipIndex:
    """Immutable index over a corpus buffer."""
    last_seen: np.ndarray
    prior_occurrence: np.ndarray
    sentinel: int

    @classmethod
    def build(cls, buffer: CorpusBuffer) -> "SkipIndex":
        """Build the index in a single left-to-right pass."""
        sentinel = len(buffer)
        last_seen = np.full(ALPHABET_SIZE, sentinel, dtype=np.int64)
        prior_occurrence = np.full(sentinel, sentinel, dtype=np.int64)

        for position, symbol in enumerate(buffer.text):
            slot = symbol_index(symbol)
            prior_occurrence[position] = last_seen[slot]
            last_seen[slot] = position

        last_seen.setflags(write=False)
        prior_occurrence.setflags(write=False)
        return cls(last_seen=last_seen, prior_occurrence=prior_occurrence, sentinel=sentinel)

    def positions(self, symbol: str) -> Iterator[int]:
        """Yield every position of symbol, rightmost first."""
        position = int(self.last_seen[symbol_index(symbol)])
        while position != self.sentinel:
            yield position
            position = int(self.prior_occurrence[position])
