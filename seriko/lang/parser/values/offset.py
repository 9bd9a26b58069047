"""Balloon and point offsets: ``<key>,<value>``."""

from __future__ import annotations

from seriko.ast.surface import OffsetKey, SurfaceOffset

from ..scanner import LineScanner

OFFSET_KEYS = tuple((f"{key.value},", key) for key in OffsetKey)


def offset(scanner: LineScanner) -> SurfaceOffset:
    key = scanner.keyword(OFFSET_KEYS)
    return SurfaceOffset(key, scanner.digit_neg())


__all__ = ["OFFSET_KEYS", "offset"]
