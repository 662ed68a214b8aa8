"""Corpus loading and buffer construction."""

from .buffer import (
    ALPHABET_START,
    ALPHABET_END,
    ALPHABET_SIZE,
    SPACE,
    SENTINEL,
    CorpusBuffer,
    build_buffer,
    normalize_text,
    symbol_index,
    index_symbol,
)
from .loader import load_corpus

__all__ = [
    "ALPHABET_START",
    "ALPHABET_END",
    "ALPHABET_SIZE",
    "SPACE",
    "SENTINEL",
    "CorpusBuffer",
    "build_buffer",
    "normalize_text",
    "symbol_index",
    "index_symbol",
    "load_corpus",
]
