"""Tests for the StringBuilder output accumulator."""

from ramitas.stringbuilder import StringBuilder


class TestStringBuilder:
    def test_append_and_build(self) -> None:
        sb = StringBuilder()
        sb.append("(dir").blanks(1).append("buy)")
        assert sb.build() == "(dir buy)"

    def test_newline_with_indent(self) -> None:
        sb = StringBuilder().append("(a").newline(3).append("b)")
        assert sb.build() == "(a\n   b)"

    def test_length_counts_characters(self) -> None:
        sb = StringBuilder().append("abc").blanks(2)
        assert len(sb) == 5

    def test_empty_strings_skipped(self) -> None:
        sb = StringBuilder().append("").blanks(0)
        assert not sb
        assert sb.build() == ""

    def test_clear(self) -> None:
        sb = StringBuilder().append("x")
        sb.clear()
        assert len(sb) == 0
        assert sb.build() == ""
