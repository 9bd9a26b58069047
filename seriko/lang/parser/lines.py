"""Line splitting, line classification and the generic brace block.

Every block kind shares one shape::

    <name line>
    {
    <body lines>
    }

and differs only in the grammar used for its name line and the grammar
used to recognise its body lines. :class:`BlockGrammar` bundles the two.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from seriko.ast.base import Body, Comment, LineEntry
from seriko.ast.document import Block, BlockEntry

from .scanner import SPACES, Grammar, GrammarMismatch, LineScanner

NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")

BRACE_CHARACTERS = ("{", "}")


@dataclass(frozen=True)
class SourceLine:
    """One physical line.

    ``newline`` is the terminator as written (``\\r\\n``, ``\\r`` or ``\\n``),
    or ``""`` for a final line that ends at end of input.
    """

    number: int
    offset: int
    text: str
    newline: str


def split_lines(source: str) -> List[SourceLine]:
    """Split ``source`` on any of the three newline conventions."""
    lines: List[SourceLine] = []
    start = 0
    for number, match in enumerate(NEWLINE_PATTERN.finditer(source), start=1):
        lines.append(SourceLine(number, start, source[start:match.start()], match.group()))
        start = match.end()
    if start < len(source):
        lines.append(SourceLine(len(lines) + 1, start, source[start:], ""))
    return lines


def match_line(line: SourceLine, grammar: Grammar) -> Any:
    """Match ``grammar`` against the whole meaningful content of ``line``.

    Leading and trailing spaces/tabs are allowed; anything else left over
    is a mismatch.
    """
    scanner = LineScanner(line.text)
    scanner.skip_spaces()
    try:
        value = grammar(scanner)
        scanner.end_of_line()
    except GrammarMismatch as exc:
        exc.line = line
        raise
    return value


def line_matches(line: SourceLine, grammar: Grammar) -> bool:
    try:
        match_line(line, grammar)
    except GrammarMismatch:
        return False
    return True


def is_free_line(text: str) -> bool:
    """Return True if ``text`` may stand as a comment outside any block."""
    return text[:1] not in BRACE_CHARACTERS


def is_free_inner_line(text: str) -> bool:
    """Return True if ``text`` may stand as a comment inside a block."""
    return text.lstrip(SPACES)[:1] not in BRACE_CHARACTERS


def classify_line(line: SourceLine, grammar: Grammar) -> Optional[LineEntry]:
    """Classify an interior line as ``Body`` or ``Comment``.

    Comment text starts at the first non-blank character, so a blank line
    becomes ``Comment("")``. Returns ``None`` for a line that is neither,
    i.e. one starting with a brace that is not the closing line of the
    block.
    """
    try:
        return Body(match_line(line, grammar))
    except GrammarMismatch:
        pass
    if is_free_inner_line(line.text):
        return Comment(line.text.lstrip(SPACES))
    return None


def scan_header_comments(
    lines: Sequence[SourceLine], index: int, name_grammar: Grammar
) -> Tuple[List[Comment], int]:
    """Collect comment lines until one matches ``name_grammar``.

    A line that looks like the awaited name is never swallowed as a
    comment. Scanning also stops at a line starting with a brace.
    """
    comments: List[Comment] = []
    while index < len(lines):
        line = lines[index]
        if line_matches(line, name_grammar) or not is_free_line(line.text):
            break
        comments.append(Comment(line.text))
        index += 1
    return comments, index


def end_of_input(*expected: str) -> GrammarMismatch:
    """Mismatch raised when input ends inside a block; ``line`` stays None."""
    return GrammarMismatch(expected, "", 0)


def open_brace(scanner: LineScanner) -> str:
    return scanner.expect("{")


def close_brace(scanner: LineScanner) -> str:
    return scanner.expect("}")


def parse_brace_block(
    lines: Sequence[SourceLine],
    index: int,
    name_grammar: Grammar,
    body_grammar: Grammar,
) -> Tuple[Any, Tuple[LineEntry, ...], int]:
    """Parse name line, ``{``, body lines and ``}`` starting at ``index``.

    Returns the name value, the classified body lines and the index of the
    first line after the block.
    """
    if index >= len(lines):
        raise end_of_input("block name")
    name = match_line(lines[index], name_grammar)
    index += 1

    if index >= len(lines):
        raise end_of_input("'{'")
    match_line(lines[index], open_brace)
    index += 1

    entries: List[LineEntry] = []
    while index < len(lines):
        line = lines[index]
        if line_matches(line, close_brace):
            return name, tuple(entries), index + 1
        entry = classify_line(line, body_grammar)
        if entry is None:
            scanner = LineScanner(line.text)
            scanner.skip_spaces()
            exc = scanner.mismatch("'}'")
            exc.line = line
            raise exc
        entries.append(entry)
        index += 1

    raise end_of_input("'}'")


@dataclass(frozen=True)
class BlockGrammar:
    """Name grammar, body grammar and node builder of one block kind."""

    name: str
    name_grammar: Grammar
    body_grammar: Grammar
    build: Callable[[Any, Tuple[LineEntry, ...]], Block]

    def parse(self, lines: Sequence[SourceLine], index: int) -> Tuple[BlockEntry, int]:
        """Parse header comments plus one block starting at ``index``."""
        comments, index = scan_header_comments(lines, index, self.name_grammar)
        name, entries, index = parse_brace_block(
            lines, index, self.name_grammar, self.body_grammar
        )
        return BlockEntry(tuple(comments), self.build(name, entries)), index


__all__ = [
    "NEWLINE_PATTERN",
    "SourceLine",
    "split_lines",
    "match_line",
    "line_matches",
    "is_free_line",
    "is_free_inner_line",
    "classify_line",
    "scan_header_comments",
    "parse_brace_block",
    "BlockGrammar",
]
