"""Helpers shared by the unit tests."""

import numpy as np

from travesty.corpus.buffer import index_symbol


def table_counts(table):
    """Non-zero counts of a FrequencyTable keyed by symbol, in code order."""
    return {index_symbol(int(i)): int(table.counts[i]) for i in np.flatnonzero(table.counts)}


def follows(buffer, pattern, symbol):
    """True if pattern immediately followed by symbol occurs in the buffer."""
    return (pattern + symbol) in buffer.text
