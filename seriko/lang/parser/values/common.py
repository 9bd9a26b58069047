"""Grammars shared by the alias, cursor and tooltip blocks."""

from __future__ import annotations

from seriko.ast.base import CharacterId
from seriko.ast.blocks import GestureKind

from ..scanner import LineScanner


def character_id(scanner: LineScanner) -> CharacterId:
    """``sakura``, ``kero`` or ``char<n>``."""
    return scanner.first_of(_sakura, _kero, _char)


def _sakura(scanner: LineScanner) -> CharacterId:
    scanner.expect("sakura")
    return CharacterId.sakura()


def _kero(scanner: LineScanner) -> CharacterId:
    scanner.expect("kero")
    return CharacterId.kero()


def _char(scanner: LineScanner) -> CharacterId:
    scanner.expect("char")
    return CharacterId.char(scanner.digit())


GESTURE_KINDS = tuple((kind.value, kind) for kind in GestureKind)


def gesture_kind(scanner: LineScanner) -> GestureKind:
    return scanner.keyword(GESTURE_KINDS)


__all__ = ["character_id", "gesture_kind", "GESTURE_KINDS"]
