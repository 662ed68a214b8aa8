"""Tests for context matching."""

from collections import Counter

import pytest

from travesty.corpus.buffer import build_buffer
from travesty.generation.matcher import match_pattern
from travesty.generation.sampler import FrequencyTable
from travesty.generation.skip_index import SkipIndex
from tests.test_helpers import table_counts


def naive_followers(text, pattern):
    """Reference scan over every buffer position."""
    k = len(pattern)
    return Counter(
        text[i + k] for i in range(len(text) - k) if text[i:i + k] == pattern
    )


class TestMatchPattern:
    """Tests for match_pattern."""

    def test_counts_followers(self):
        buffer = build_buffer("abab", 100, 2)
        table = FrequencyTable()
        matches = match_pattern("ab", SkipIndex.build(buffer), buffer, table)
        # The occurrence at position 5 has no follower and is skipped
        assert matches == 2
        assert table_counts(table) == {" ": 1, "a": 1}

    def test_only_observed_followers(self):
        corpus = "the cat sat on the mat. saturday the cat sat down."
        buffer = build_buffer(corpus, 1000, 3)
        table = FrequencyTable()
        match_pattern("sat", SkipIndex.build(buffer), buffer, table)
        assert table_counts(table) == {" ": 2, "u": 1}
        assert "x" not in table_counts(table)

    def test_unknown_pattern_finds_nothing(self):
        buffer = build_buffer("the cat sat", 100, 3)
        table = FrequencyTable()
        assert match_pattern("zzz", SkipIndex.build(buffer), buffer, table) == 0
        assert table.total == 0

    @pytest.mark.parametrize("pattern_length", [1, 3, 6])
    def test_agrees_with_full_scan(self, corpus_text, pattern_length):
        buffer = build_buffer(corpus_text, 3000, pattern_length)
        index = SkipIndex.build(buffer)
        text = buffer.text
        for start in range(0, len(text) - pattern_length, 7):
            pattern = text[start:start + pattern_length]
            table = FrequencyTable()
            match_pattern(pattern, index, buffer, table)
            assert table_counts(table) == dict(sorted(naive_followers(text, pattern).items()))

    def test_accumulates_into_existing_counts(self):
        buffer = build_buffer("abab", 100, 2)
        index = SkipIndex.build(buffer)
        table = FrequencyTable()
        match_pattern("ab", index, buffer, table)
        match_pattern("ab", index, buffer, table)
        assert table.total == 4
