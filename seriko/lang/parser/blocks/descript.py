"""``descript`` block."""

from __future__ import annotations

from typing import Tuple

from seriko.ast.base import LineEntry
from seriko.ast.blocks import (
    Descript,
    DescriptAnimationSort,
    DescriptCollisionSort,
    DescriptLine,
    DescriptMaxWidth,
    DescriptVersion,
    SortOrder,
)

from ..lines import BlockGrammar
from ..scanner import U16_MAX, LineScanner

SORT_ORDERS = tuple((order.value, order) for order in SortOrder)


def descript_name(scanner: LineScanner) -> None:
    scanner.expect("descript")


def _version(scanner: LineScanner) -> DescriptVersion:
    scanner.expect("version,")
    return DescriptVersion(scanner.digit(U16_MAX))


def _max_width(scanner: LineScanner) -> DescriptMaxWidth:
    scanner.expect("maxwidth,")
    return DescriptMaxWidth(scanner.digit())


def _collision_sort(scanner: LineScanner) -> DescriptCollisionSort:
    scanner.expect("collision-sort,")
    return DescriptCollisionSort(scanner.keyword(SORT_ORDERS))


def _animation_sort(scanner: LineScanner) -> DescriptAnimationSort:
    scanner.expect("animation-sort,")
    return DescriptAnimationSort(scanner.keyword(SORT_ORDERS))


def descript_line(scanner: LineScanner) -> DescriptLine:
    return scanner.first_of(_version, _max_width, _collision_sort, _animation_sort)


def _build(_name: None, lines: Tuple[LineEntry, ...]) -> Descript:
    return Descript(lines)


DESCRIPT = BlockGrammar("descript", descript_name, descript_line, _build)

__all__ = ["DESCRIPT", "descript_name", "descript_line"]
