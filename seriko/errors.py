"""Structured error types for the SERIKO parser.

Two disjoint failure kinds are surfaced to callers:

- :class:`SerikoDecodeError` when the byte buffer cannot be decoded with the
  declared charset
- :class:`SerikoSyntaxError` when no production matches the decoded text

Both carry line/column information and an error code for programmatic
handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        if self.path and self.line is not None and self.column is not None:
            return f"{self.path}:{self.line}:{self.column}"
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.path:
            return self.path
        return "unknown location"


@dataclass(eq=False)
class SerikoError(Exception):
    """Base class for every error raised by the parser."""

    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "SERIKO_ERROR"

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def location(self) -> ErrorLocation:
        return ErrorLocation(path=self.path, line=self.line, column=self.column)

    def __str__(self) -> str:
        parts = []

        if self.path:
            parts.append(f"File: {self.path}")

        if self.line is not None:
            if self.column is not None:
                parts.append(f"Line {self.line}:{self.column}")
            else:
                parts.append(f"Line {self.line}")

        parts.append(f"[{self.code}] {self.message}")

        return " | ".join(parts)


@dataclass(eq=False)
class SerikoDecodeError(SerikoError):
    """The buffer is not valid text in its declared charset."""

    charset: Optional[str] = None
    position: Optional[int] = None
    code: str = "DECODE_ERROR"

    def __str__(self) -> str:
        base = super().__str__()
        details = []

        if self.charset:
            details.append(f"Charset: {self.charset}")

        if self.position is not None:
            details.append(f"Byte offset: {self.position}")

        if details:
            return base + "\n  " + "\n  ".join(details)

        return base


@dataclass(eq=False)
class SerikoSyntaxError(SerikoError):
    """No grammar alternative matched the input."""

    expected: List[str] = field(default_factory=list)
    found: Optional[str] = None
    grammar: Optional[str] = None
    offset: Optional[int] = None
    suggestion: Optional[str] = None
    code: str = "SYNTAX_ERROR"

    def __str__(self) -> str:
        base = super().__str__()
        details = []

        if self.grammar:
            details.append(f"While parsing: {self.grammar}")

        if self.expected:
            if len(self.expected) == 1:
                details.append(f"Expected: {self.expected[0]}")
            else:
                details.append(f"Expected one of: {', '.join(self.expected)}")

        if self.found is not None:
            details.append(f"Found: {self.found!r}")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        if details:
            return base + "\n  " + "\n  ".join(details)

        return base


def create_syntax_error(
    message: str,
    *,
    path: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
    expected: Optional[List[str]] = None,
    found: Optional[str] = None,
    grammar: Optional[str] = None,
    offset: Optional[int] = None,
    suggestion: Optional[str] = None,
) -> SerikoSyntaxError:
    """Create a syntax error with context."""
    return SerikoSyntaxError(
        message=message,
        path=path,
        line=line,
        column=column,
        expected=expected or [],
        found=found,
        grammar=grammar,
        offset=offset,
        suggestion=suggestion,
    )


def create_decode_error(
    message: str,
    *,
    path: Optional[str] = None,
    charset: Optional[str] = None,
    position: Optional[int] = None,
) -> SerikoDecodeError:
    """Create a decode error with context."""
    return SerikoDecodeError(
        message=message,
        path=path,
        charset=charset,
        position=position,
    )


__all__ = [
    "ErrorLocation",
    "SerikoError",
    "SerikoDecodeError",
    "SerikoSyntaxError",
    "create_syntax_error",
    "create_decode_error",
]
