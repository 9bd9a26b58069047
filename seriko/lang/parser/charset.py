"""``charset,<name>`` declaration line."""

from __future__ import annotations

from seriko.ast.base import Charset

from .scanner import LineScanner

CHARSET_NAMES = tuple(
    (charset.value, charset)
    for charset in (Charset.ASCII, Charset.SHIFT_JIS, Charset.UTF8)
)


def charset_line(scanner: LineScanner) -> Charset:
    scanner.expect("charset,")
    return scanner.keyword(CHARSET_NAMES)


__all__ = ["CHARSET_NAMES", "charset_line"]
