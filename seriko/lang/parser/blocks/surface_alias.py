"""``<character>.surface.alias`` block: ``<name>,[id,id,...]`` lines."""

from __future__ import annotations

from typing import Tuple

from seriko.ast.base import CharacterId, LineEntry
from seriko.ast.blocks import SurfaceAlias, SurfaceAliasEntry

from ..lines import BlockGrammar
from ..scanner import LineScanner
from ..values import character_id


def surface_alias_name(scanner: LineScanner) -> CharacterId:
    character = character_id(scanner)
    scanner.expect(".surface.alias")
    return character


def surface_alias_line(scanner: LineScanner) -> SurfaceAliasEntry:
    name = scanner.take_except("},")
    scanner.expect(",")
    scanner.expect("[")
    ids = scanner.separated(LineScanner.digit, ",")
    scanner.expect("]")
    return SurfaceAliasEntry(name, tuple(ids))


def _build(character: CharacterId, lines: Tuple[LineEntry, ...]) -> SurfaceAlias:
    return SurfaceAlias(character, lines)


SURFACE_ALIAS = BlockGrammar("surface.alias", surface_alias_name, surface_alias_line, _build)

__all__ = ["SURFACE_ALIAS", "surface_alias_name", "surface_alias_line"]
