"""``<character>.tooltips`` block: ``<collision target>,<description>``."""

from __future__ import annotations

from typing import Tuple

from seriko.ast.base import CharacterId, LineEntry
from seriko.ast.blocks import Tooltip, TooltipEntry

from ..lines import BlockGrammar
from ..scanner import LineScanner
from ..values import character_id


def tooltip_name(scanner: LineScanner) -> CharacterId:
    character = character_id(scanner)
    scanner.expect(".tooltips")
    return character


def tooltip_line(scanner: LineScanner) -> TooltipEntry:
    target = scanner.take_except(",")
    scanner.expect(",")
    # the description is free text and keeps commas and trailing spaces
    return TooltipEntry(target, scanner.take_rest())


def _build(character: CharacterId, lines: Tuple[LineEntry, ...]) -> Tooltip:
    return Tooltip(character, lines)


TOOLTIP = BlockGrammar("tooltips", tooltip_name, tooltip_line, _build)

__all__ = ["TOOLTIP", "tooltip_name", "tooltip_line"]
