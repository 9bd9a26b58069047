"""Charset sniffing and strict decoding of ``surfaces.txt`` buffers.

The declared charset lives inside the text it describes, so decoding runs
in two passes:

1. decode leniently as UTF-8, only to locate the ``charset,<name>`` line
2. decode the whole buffer strictly with the declared charset

No fallback charset is ever tried.
"""

from __future__ import annotations

import codecs
from typing import Optional

from seriko.ast.base import Charset
from seriko.errors import SerikoDecodeError, create_decode_error
from seriko.lang.parser.charset import charset_line
from seriko.lang.parser.lines import match_line, scan_header_comments, split_lines
from seriko.lang.parser.scanner import GrammarMismatch

UTF8_BOM = codecs.BOM_UTF8


def sniff_charset(data: bytes, *, path: Optional[str] = None) -> Charset:
    """Return the charset declared by ``data``.

    Raises :class:`SerikoDecodeError` when no declaration precedes the
    first block.
    """
    provisional = data.decode("utf-8", errors="replace")
    if provisional.startswith("\ufeff"):
        provisional = provisional[1:]

    lines = split_lines(provisional)
    _, index = scan_header_comments(lines, 0, charset_line)
    if index >= len(lines):
        raise create_decode_error("Charset declaration not found", path=path)
    try:
        return match_line(lines[index], charset_line)
    except GrammarMismatch:
        raise create_decode_error(
            f"Charset declaration not found before line {lines[index].number}",
            path=path,
        ) from None


def decode(data: bytes, charset: Charset, *, path: Optional[str] = None) -> str:
    """Strictly decode ``data`` as ``charset``.

    A leading UTF-8 byte-order mark is dropped for UTF-8 compatible
    charsets and rejected for Shift_JIS.
    """
    if data.startswith(UTF8_BOM):
        if charset.codec != "utf-8":
            raise create_decode_error(
                "UTF-8 byte-order mark in a buffer declared as " + charset.value,
                path=path,
                charset=charset.value,
                position=0,
            )
        data = data[len(UTF8_BOM):]
        offset = len(UTF8_BOM)
    else:
        offset = 0

    try:
        return data.decode(charset.codec)
    except UnicodeDecodeError as exc:
        raise SerikoDecodeError(
            message=f"Invalid {charset.value} byte sequence: {exc.reason}",
            path=path,
            charset=charset.value,
            position=exc.start + offset,
        ) from exc


def decode_bytes(data: bytes, *, path: Optional[str] = None) -> str:
    """Decode a raw ``surfaces.txt`` buffer using its own declaration."""
    return decode(data, sniff_charset(data, path=path), path=path)


__all__ = ["UTF8_BOM", "decode", "decode_bytes", "sniff_charset"]
