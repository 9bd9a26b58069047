"""``<character>.cursor`` block.

Body lines are ``<gesture><id>,<collision target>,<filename>``; the target
may be empty and the filename runs to the end of the line.
"""

from __future__ import annotations

from typing import Tuple

from seriko.ast.base import CharacterId, LineEntry
from seriko.ast.blocks import Cursor, CursorGesture

from ..lines import BlockGrammar
from ..scanner import LineScanner
from ..values import character_id, gesture_kind


def cursor_name(scanner: LineScanner) -> CharacterId:
    character = character_id(scanner)
    scanner.expect(".cursor")
    return character


def cursor_line(scanner: LineScanner) -> CursorGesture:
    kind = gesture_kind(scanner)
    gesture_id = scanner.digit()
    scanner.expect(",")
    target = scanner.take_until(",")
    scanner.expect(",")
    filename = scanner.take_rest()
    return CursorGesture(kind, gesture_id, target, filename)


def _build(character: CharacterId, lines: Tuple[LineEntry, ...]) -> Cursor:
    return Cursor(character, lines)


CURSOR = BlockGrammar("cursor", cursor_name, cursor_line, _build)

__all__ = ["CURSOR", "cursor_name", "cursor_line"]
