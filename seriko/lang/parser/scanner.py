"""Character-level scanner shared by every SERIKO grammar.

A grammar is any callable taking a :class:`LineScanner` and returning a
value. Grammars signal failure by raising :class:`GrammarMismatch`; they
never see newline characters because the document is split into physical
lines before any grammar runs.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

V = TypeVar("V")

Grammar = Callable[["LineScanner"], V]

DIGITS = "0123456789"
SPACES = " \t"

U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
I64_MAX = 2**63 - 1


class GrammarMismatch(Exception):
    """Raised when a grammar does not match at the current position.

    ``position`` is the column (0-based) inside ``text``. ``line`` is filled
    in by the line-level helpers once the physical line is known; it stays
    ``None`` for failures at end of input.
    """

    def __init__(self, expected: Sequence[str], text: str, position: int) -> None:
        self.expected = list(expected)
        self.text = text
        self.position = position
        self.line = None
        super().__init__(f"expected {' or '.join(self.expected) or 'input'} at column {position + 1}")

    @property
    def found(self) -> str:
        return self.text[self.position:]


class LineScanner:
    """Cursor over the text of one physical line."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    # ====================================================================
    # Cursor management
    # ====================================================================

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def peek(self) -> str:
        """Return the current character, or '' at end of line."""
        return self.text[self.pos:self.pos + 1]

    def mismatch(self, *expected: str) -> GrammarMismatch:
        return GrammarMismatch(expected, self.text, self.pos)

    def skip_spaces(self) -> None:
        while self.peek() and self.peek() in SPACES:
            self.pos += 1

    def end_of_line(self) -> None:
        """Allow trailing spaces/tabs, then require the end of the line."""
        self.skip_spaces()
        if not self.at_end:
            raise self.mismatch("end of line")

    # ====================================================================
    # Literals
    # ====================================================================

    def consume(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str) -> str:
        if not self.consume(literal):
            raise self.mismatch(repr(literal))
        return literal

    def keyword(self, table: Iterable[Tuple[str, V]]) -> V:
        """Match the first literal of ``table`` present at the cursor.

        Tables are ordered: a literal that is a prefix of another must come
        after it.
        """
        literals = []
        for literal, value in table:
            if self.consume(literal):
                return value
            literals.append(repr(literal))
        raise self.mismatch(*literals)

    # ====================================================================
    # Numbers and flags
    # ====================================================================

    def digit(self, max_value: int = U32_MAX) -> int:
        """Unsigned decimal; values above ``max_value`` do not match."""
        start = self.pos
        while self.peek() and self.peek() in DIGITS:
            self.pos += 1
        if self.pos == start:
            raise self.mismatch("digit")
        significant = self.text[start:self.pos].lstrip("0") or "0"
        # int() rejects runs past the interpreter's digit limit
        if len(significant) > len(str(max_value)) or int(significant) > max_value:
            self.pos = start
            raise self.mismatch(f"number <= {max_value}")
        return int(significant)

    def digit_neg(self, max_value: int = I64_MAX) -> int:
        """Decimal with an optional leading '-'."""
        start = self.pos
        negative = self.consume("-")
        try:
            value = self.digit(max_value)
        except GrammarMismatch:
            self.pos = start
            raise
        return -value if negative else value

    def boolean(self) -> bool:
        return self.keyword((("true", True), ("false", False)))

    # ====================================================================
    # Free text
    # ====================================================================

    def take_except(self, stop: str) -> str:
        """One or more characters up to the first character of ``stop``."""
        start = self.pos
        while self.peek() and self.peek() not in stop:
            self.pos += 1
        if self.pos == start:
            raise self.mismatch(f"text without {stop!r}")
        return self.text[start:self.pos]

    def take_until(self, literal: str) -> str:
        """Zero or more characters up to (not including) ``literal``."""
        index = self.text.find(literal, self.pos)
        if index < 0:
            raise self.mismatch(repr(literal))
        value = self.text[self.pos:index]
        self.pos = index
        return value

    def take_rest(self) -> str:
        """The non-empty remainder of the line, trailing spaces included."""
        if self.at_end:
            raise self.mismatch("text")
        value = self.rest
        self.pos = len(self.text)
        return value

    # ====================================================================
    # Combinators
    # ====================================================================

    def first_of(self, *alternatives: Grammar) -> V:
        """Try ``alternatives`` in order; the first that matches wins.

        There is no backtracking into an alternative once it has returned.
        When every alternative fails, the failure that got furthest is
        raised.
        """
        start = self.pos
        deepest: Optional[GrammarMismatch] = None
        for alternative in alternatives:
            try:
                return alternative(self)
            except GrammarMismatch as exc:
                self.pos = start
                if deepest is None or exc.position > deepest.position:
                    deepest = exc
                elif exc.position == deepest.position:
                    deepest.expected.extend(
                        item for item in exc.expected if item not in deepest.expected
                    )
        if deepest is None:
            raise self.mismatch()
        raise deepest

    def optional(self, grammar: Grammar) -> Optional[V]:
        start = self.pos
        try:
            return grammar(self)
        except GrammarMismatch:
            self.pos = start
            return None

    def separated(self, item: Grammar, separator: str) -> List[V]:
        """One or more ``item`` joined by ``separator``.

        A separator that is not followed by another item is left unconsumed.
        """
        values = [item(self)]
        while True:
            start = self.pos
            if not self.consume(separator):
                break
            try:
                values.append(item(self))
            except GrammarMismatch:
                self.pos = start
                break
        return values

    def repeated(self, item: Grammar) -> List[V]:
        """One or more consecutive ``item``."""
        values = [item(self)]
        while True:
            value = self.optional(item)
            if value is None:
                break
            values.append(value)
        return values


__all__ = [
    "Grammar",
    "GrammarMismatch",
    "LineScanner",
    "DIGITS",
    "SPACES",
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "I64_MAX",
]
