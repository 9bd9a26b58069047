"""Tests for line splitting and line classification."""

import pytest

from seriko.ast import Body, Comment, DescriptVersion
from seriko.lang.parser.blocks.descript import descript_line, descript_name
from seriko.lang.parser.lines import (
    SourceLine,
    classify_line,
    match_line,
    scan_header_comments,
    split_lines,
)
from seriko.lang.parser.scanner import GrammarMismatch


def _line(text: str, number: int = 1) -> SourceLine:
    return SourceLine(number, 0, text, "\n")


def test_split_lines_accepts_every_newline_convention() -> None:
    lines = split_lines("a\r\nb\rc\nd")
    assert [line.text for line in lines] == ["a", "b", "c", "d"]
    assert [line.newline for line in lines] == ["\r\n", "\r", "\n", ""]
    assert [line.number for line in lines] == [1, 2, 3, 4]
    assert [line.offset for line in lines] == [0, 3, 5, 7]


def test_split_lines_final_newline_does_not_add_a_line() -> None:
    assert [line.text for line in split_lines("a\n")] == ["a"]
    assert [line.text for line in split_lines("\n\n")] == ["", ""]
    assert split_lines("") == []


def test_body_line_allows_surrounding_whitespace() -> None:
    assert classify_line(_line("version,1"), descript_line) == Body(DescriptVersion(1))
    assert classify_line(_line(" \tversion,1  "), descript_line) == Body(DescriptVersion(1))


def test_partial_match_demotes_whole_line_to_comment() -> None:
    assert classify_line(_line("version,1 x"), descript_line) == Comment("version,1 x")
    assert classify_line(_line("  version,x"), descript_line) == Comment("version,x")


def test_comment_text_starts_at_first_non_blank() -> None:
    assert classify_line(_line("    aaa    "), descript_line) == Comment("aaa    ")
    assert classify_line(_line("\t// eyes"), descript_line) == Comment("// eyes")


def test_blank_lines_become_empty_comments() -> None:
    assert classify_line(_line(""), descript_line) == Comment("")
    assert classify_line(_line("   "), descript_line) == Comment("")


def test_brace_lines_are_not_comments() -> None:
    assert classify_line(_line("{"), descript_line) is None
    assert classify_line(_line("  }"), descript_line) is None


def test_match_line_attaches_line_to_mismatch() -> None:
    line = _line("version,x", number=7)
    with pytest.raises(GrammarMismatch) as exc_info:
        match_line(line, descript_line)
    assert exc_info.value.line is line


def test_header_comments_stop_at_name_line() -> None:
    lines = split_lines("// a\n\nsurface0\ndescript\n{\n")
    comments, index = scan_header_comments(lines, 0, descript_name)
    assert comments == [Comment("// a"), Comment(""), Comment("surface0")]
    assert index == 3


def test_header_comments_stop_at_brace_line() -> None:
    lines = split_lines("// a\n{\ndescript\n")
    comments, index = scan_header_comments(lines, 0, descript_name)
    assert comments == [Comment("// a")]
    assert index == 1
