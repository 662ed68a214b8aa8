"""Context matching through the skip index."""

from ..corpus.buffer import CorpusBuffer
from .sampler import FrequencyTable
from .skip_index import SkipIndex


def match_pattern(
    pattern: str,
    index: SkipIndex,
    buffer: CorpusBuffer,
    table: FrequencyTable,
) -> int:
    """Tally the symbols that follow each occurrence of pattern.

    Only positions holding the pattern's first symbol are visited, walking
    the skip index from the rightmost occurrence leftwards. Positions too
    close to the end to hold the pattern plus a follower are passed over.

    Args:
        pattern: Current context, len(pattern) == buffer.pattern_length.
        index: Skip index built from buffer.
        buffer: Corpus buffer.
        table: Frequency table to increment.

    Returns:
        Number of matches found.
    """
    k = len(pattern)
    text = buffer.text
    limit = len(text)
    matches = 0

    for position in index.positions(pattern[0]):
        if position + k >= limit:
            continue
        if text.startswith(pattern, position):
            table.increment(text[position + k])
            matches += 1

    return matches
