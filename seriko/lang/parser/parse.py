"""Document-level parser for ``surfaces.txt``.

Layout of a document::

    <comment lines>
    charset,<name>
    (<comment lines> <block>)*
    <comment lines>

Blocks may come in any order. At each position the block grammars are
tried in a fixed order and the first one that parses wins. Whatever
follows the last block must consist of comment lines only, up to the end
of input.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from seriko.ast.base import Charset, Comment
from seriko.ast.document import BlockEntry, Document
from seriko.errors import SerikoSyntaxError, create_syntax_error

from .blocks import BLOCK_GRAMMARS
from .charset import charset_line
from .lines import (
    SourceLine,
    is_free_line,
    match_line,
    scan_header_comments,
    split_lines,
)
from .scanner import GrammarMismatch

FOUND_PREVIEW = 40


def suggest(exc: GrammarMismatch, grammar: Optional[str]) -> Optional[str]:
    """Hint for the structural mistakes that most often break a file."""
    if grammar == "charset":
        return "Declare the encoding before any block, e.g. 'charset,UTF-8'"
    if "'{'" in exc.expected:
        return "Put '{' on its own line right after the block name"
    if exc.line is None:
        if "'}'" in exc.expected:
            return "Close the block with a line holding only '}'"
        return None
    if exc.found[:1] in ("{", "}"):
        return "Brace lines may only open or close a block; blocks cannot nest"
    return None


class SerikoParser:
    """Parser for one decoded ``surfaces.txt`` text.

    Instances are single-use: create one per source and call
    :meth:`parse`.
    """

    def __init__(self, source: str, *, path: str = ""):
        self.source = source
        self.path = path
        self.lines: List[SourceLine] = split_lines(source)
        self.index = 0

        # Deepest failure seen in the latest round of block attempts
        self._failure: Optional[GrammarMismatch] = None
        self._failure_grammar: Optional[str] = None

    def parse(self) -> Document:
        """Parse the whole source into a :class:`Document`."""
        header_comments, charset = self.parse_charset()

        blocks: List[BlockEntry] = []
        while True:
            entry = self.parse_block()
            if entry is None:
                break
            blocks.append(entry)

        footer_comments = self.parse_footer_comments()
        return Document(
            header_comments=tuple(header_comments),
            charset=charset,
            blocks=tuple(blocks),
            footer_comments=tuple(footer_comments),
        )

    # ====================================================================
    # Sections
    # ====================================================================

    def parse_charset(self) -> Tuple[List[Comment], Charset]:
        comments, self.index = scan_header_comments(self.lines, self.index, charset_line)
        if self.index >= len(self.lines):
            raise self.error(
                "Missing charset declaration",
                GrammarMismatch(["charset,<ASCII|Shift_JIS|UTF-8>"], "", 0),
                "charset",
            )
        try:
            charset = match_line(self.lines[self.index], charset_line)
        except GrammarMismatch as exc:
            raise self.error("Missing charset declaration", exc, "charset") from None
        self.index += 1
        return comments, charset

    def parse_block(self) -> Optional[BlockEntry]:
        """Try every block grammar at the current line.

        Returns ``None`` when none of them parses.
        """
        self._failure = None
        self._failure_grammar = None
        for grammar in BLOCK_GRAMMARS:
            try:
                entry, index = grammar.parse(self.lines, self.index)
            except GrammarMismatch as exc:
                self._record_failure(exc, grammar.name)
                continue
            self.index = index
            return entry
        return None

    def parse_footer_comments(self) -> List[Comment]:
        comments: List[Comment] = []
        for line in self.lines[self.index:]:
            if not is_free_line(line.text):
                failure = self._failure
                grammar = self._failure_grammar
                if failure is None:
                    failure = GrammarMismatch(["comment line"], line.text, 0)
                    failure.line = line
                    grammar = "document"
                raise self.error("No block grammar matches", failure, grammar)
            comments.append(Comment(line.text))
        return comments

    # ====================================================================
    # Error handling
    # ====================================================================

    def _depth(self, exc: GrammarMismatch) -> Tuple[int, int]:
        if exc.line is None:
            return (len(self.lines) + 1, 0)
        return (exc.line.number, exc.position)

    def _record_failure(self, exc: GrammarMismatch, grammar: str) -> None:
        if self._failure is None or self._depth(exc) > self._depth(self._failure):
            self._failure = exc
            self._failure_grammar = grammar

    def _end_location(self) -> Tuple[int, int]:
        if self.lines and not self.lines[-1].newline:
            last = self.lines[-1]
            return last.number, len(last.text) + 1
        return len(self.lines) + 1, 1

    def error(
        self, message: str, exc: GrammarMismatch, grammar: Optional[str]
    ) -> SerikoSyntaxError:
        """Build a syntax error located at the failure ``exc`` describes."""
        if exc.line is None:
            line, column = self._end_location()
            return create_syntax_error(
                f"{message}: unexpected end of input",
                path=self.path or None,
                line=line,
                column=column,
                expected=exc.expected,
                grammar=grammar,
                suggestion=suggest(exc, grammar),
                offset=len(self.source),
            )
        return create_syntax_error(
            message,
            path=self.path or None,
            line=exc.line.number,
            column=exc.position + 1,
            expected=exc.expected,
            found=exc.found[:FOUND_PREVIEW],
            grammar=grammar,
            suggestion=suggest(exc, grammar),
            offset=exc.line.offset + exc.position,
        )


def parse(source: str, *, path: str = "") -> Document:
    """Parse decoded ``surfaces.txt`` text into a :class:`Document`."""
    return SerikoParser(source, path=path).parse()


__all__ = ["SerikoParser", "parse"]
