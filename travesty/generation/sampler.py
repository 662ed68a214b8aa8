"""Frequency table and weighted sampling of the next symbol."""

import random
from typing import Optional

import numpy as np

from ..corpus.buffer import ALPHABET_SIZE, index_symbol, symbol_index
from ..errors import NoContinuation


class FrequencyTable:
    """Counts of the symbols that followed one pattern.

    Counts live in a fixed-size array indexed by ``code - ALPHABET_START``.
    """

    def __init__(self):
        self.counts = np.zeros(ALPHABET_SIZE, dtype=np.int64)

    def increment(self, symbol: str) -> None:
        self.counts[symbol_index(symbol)] += 1

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def clear(self) -> None:
        self.counts.fill(0)


class Sampler:
    """Draws symbols in proportion to frequency counts.

    Args:
        rng: Random source. Defaults to a new random.Random seeded with seed.
        seed: Seed used when rng is not given.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def sample(self, table: FrequencyTable) -> str:
        """Pick one symbol by inverse-CDF over the counts.

        A toss in [1, total] selects the first symbol, in ascending code
        order, whose cumulative count reaches it. The table is not modified.

        Raises:
            NoContinuation: If the table is empty.
        """
        total = table.total
        if total == 0:
            raise NoContinuation("No observed continuation for the current pattern")

        cumulative = np.cumsum(table.counts)
        toss = self.rng.randint(1, total)
        return index_symbol(int(np.searchsorted(cumulative, toss, side="left")))
