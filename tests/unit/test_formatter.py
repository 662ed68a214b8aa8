"""Tests for the output formatter state machine."""

from travesty.corpus.buffer import SENTINEL
from travesty.generation.formatter import OutputFormatter, VERSE_INDENT


def emit_all(formatter, text):
    return "".join(formatter.emit(symbol) for symbol in text)


class TestProseMode:
    """Tests for prose line pacing."""

    def test_breaks_on_space_at_boundary(self):
        formatter = OutputFormatter(line_width=5)
        assert emit_all(formatter, "abcd ef") == "abcd \nef"

    def test_waits_for_next_space(self):
        formatter = OutputFormatter(line_width=5)
        assert emit_all(formatter, "abcdefg h") == "abcdefg \nh"
        assert formatter.near_boundary is False

    def test_no_break_before_boundary(self):
        formatter = OutputFormatter(line_width=50)
        assert emit_all(formatter, "a b c d") == "a b c d"

    def test_sentinel_is_not_printed(self):
        formatter = OutputFormatter(line_width=50)
        assert formatter.emit(SENTINEL) == ""
        assert formatter.chars_emitted == 1

    def test_counter_starts_at_seed_length(self):
        formatter = OutputFormatter(line_width=5, chars_emitted=3)
        assert emit_all(formatter, "a b") == "a \nb"


class TestVerseMode:
    """Tests for verse indentation and sentinel line breaks."""

    def test_wrapped_line_is_indented(self):
        formatter = OutputFormatter(line_width=5, verse=True)
        assert emit_all(formatter, "abcd ef") == "abcd \n" + VERSE_INDENT + "ef"

    def test_sentinel_forces_line_break(self):
        formatter = OutputFormatter(line_width=50, verse=True)
        assert emit_all(formatter, "ab" + SENTINEL + "c") == "ab\nc"

    def test_indent_is_four_spaces(self):
        assert VERSE_INDENT == "    "


class TestFinished:
    """Tests for the termination rule."""

    def test_not_finished_before_first_symbol(self):
        formatter = OutputFormatter(line_width=50, chars_emitted=20)
        assert not formatter.finished(0)

    def test_requires_trailing_space(self):
        formatter = OutputFormatter(line_width=50)
        emit_all(formatter, "abcdefghijk")
        assert not formatter.finished(10)
        formatter.emit(" ")
        assert formatter.finished(10)

    def test_requires_out_chars(self):
        formatter = OutputFormatter(line_width=50)
        emit_all(formatter, "ab ")
        assert not formatter.finished(10)
