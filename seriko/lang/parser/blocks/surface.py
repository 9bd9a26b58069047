"""``surface`` and ``surface.append`` blocks.

Two name dialects are accepted for ``surface``:

- ``surface1-3,!2,10`` (one keyword, unit/range/negated selectors)
- ``surface1,surface3,surface4`` (keyword repeated, units only)

The first dialect is tried first, so input valid under both is read the
first way. ``surface.append`` only takes the first dialect.
"""

from __future__ import annotations

from typing import Tuple

from seriko.ast.base import LineEntry
from seriko.ast.surface import (
    Surface,
    SurfaceAppend,
    SurfaceId,
    SurfaceIdNot,
    SurfaceIdRange,
    SurfaceIdUnit,
    SurfaceLine,
)

from ..lines import BlockGrammar
from ..scanner import LineScanner
from ..values import (
    animation_collision,
    animation_collision_ex,
    animation_interval,
    animation_option,
    animation_pattern,
    collision,
    collision_ex,
    element,
    offset,
)

# ====================================================================
# Surface id selectors
# ====================================================================


def surface_id_unit(scanner: LineScanner) -> SurfaceIdUnit:
    return SurfaceIdUnit(scanner.digit())


def surface_id_range(scanner: LineScanner) -> SurfaceIdRange:
    start = scanner.digit()
    scanner.expect("-")
    return SurfaceIdRange(start, scanner.digit())


def surface_id_not(scanner: LineScanner) -> SurfaceIdNot:
    scanner.expect("!")
    return SurfaceIdNot(scanner.first_of(surface_id_range, surface_id_unit))


def surface_id(scanner: LineScanner) -> SurfaceId:
    return scanner.first_of(surface_id_not, surface_id_range, surface_id_unit)


def surface_ids(scanner: LineScanner) -> Tuple[SurfaceId, ...]:
    return tuple(scanner.separated(surface_id, ","))


# ====================================================================
# Name lines
# ====================================================================


def _name_selectors(scanner: LineScanner) -> Tuple[SurfaceId, ...]:
    scanner.expect("surface")
    ids = surface_ids(scanner)
    scanner.end_of_line()
    return ids


def _name_repeated(scanner: LineScanner) -> Tuple[SurfaceId, ...]:
    def unit(inner: LineScanner) -> SurfaceIdUnit:
        inner.expect("surface")
        return surface_id_unit(inner)

    ids = tuple(scanner.separated(unit, ","))
    scanner.end_of_line()
    return ids


def surface_name(scanner: LineScanner) -> Tuple[SurfaceId, ...]:
    return scanner.first_of(_name_selectors, _name_repeated)


def surface_append_name(scanner: LineScanner) -> Tuple[SurfaceId, ...]:
    scanner.expect("surface.append")
    return surface_ids(scanner)


# ====================================================================
# Body
# ====================================================================

# First match wins. A candidate that matches a prefix of the line commits
# the line; if text is left over the line becomes a comment.
SURFACE_LINE_GRAMMARS = (
    element,
    animation_interval,
    animation_pattern,
    animation_option,
    animation_collision,
    animation_collision_ex,
    collision,
    collision_ex,
    offset,
)


def surface_line(scanner: LineScanner) -> SurfaceLine:
    return scanner.first_of(*SURFACE_LINE_GRAMMARS)


def _build_surface(ids: Tuple[SurfaceId, ...], lines: Tuple[LineEntry, ...]) -> Surface:
    return Surface(ids, lines)


def _build_append(ids: Tuple[SurfaceId, ...], lines: Tuple[LineEntry, ...]) -> SurfaceAppend:
    return SurfaceAppend(ids, lines)


SURFACE = BlockGrammar("surface", surface_name, surface_line, _build_surface)

SURFACE_APPEND = BlockGrammar(
    "surface.append", surface_append_name, surface_line, _build_append
)

__all__ = [
    "SURFACE",
    "SURFACE_APPEND",
    "SURFACE_LINE_GRAMMARS",
    "surface_id",
    "surface_ids",
    "surface_name",
    "surface_append_name",
    "surface_line",
]
