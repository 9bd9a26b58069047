"""AST nodes for descript, alias, cursor and tooltip blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .base import CharacterId, LineEntry


class SortOrder(Enum):
    ASCEND = "ascend"
    DESCEND = "descend"


@dataclass(frozen=True)
class DescriptVersion:
    value: int


@dataclass(frozen=True)
class DescriptMaxWidth:
    value: int


@dataclass(frozen=True)
class DescriptCollisionSort:
    order: SortOrder


@dataclass(frozen=True)
class DescriptAnimationSort:
    order: SortOrder


DescriptLine = Union[
    DescriptVersion, DescriptMaxWidth, DescriptCollisionSort, DescriptAnimationSort
]


@dataclass(frozen=True)
class Descript:
    lines: Tuple[LineEntry, ...] = ()


@dataclass(frozen=True)
class SurfaceAliasEntry:
    """``<name>,[id,id,...]``; ids keep their order and duplicates."""

    name: str
    surface_ids: Tuple[int, ...]


@dataclass(frozen=True)
class SurfaceAlias:
    character: CharacterId
    lines: Tuple[LineEntry, ...] = ()


class GestureKind(Enum):
    MOUSEUP = "mouseup"
    MOUSEDOWN = "mousedown"
    MOUSERIGHTDOWN = "mouserightdown"
    MOUSEWHEEL = "mousewheel"
    MOUSEHOVER = "mousehover"


@dataclass(frozen=True)
class CursorGesture:
    kind: GestureKind
    gesture_id: int
    target: str
    filename: str


@dataclass(frozen=True)
class Cursor:
    character: CharacterId
    lines: Tuple[LineEntry, ...] = ()


@dataclass(frozen=True)
class TooltipEntry:
    target: str
    description: str


@dataclass(frozen=True)
class Tooltip:
    character: CharacterId
    lines: Tuple[LineEntry, ...] = ()


__all__ = [
    "SortOrder",
    "DescriptVersion",
    "DescriptMaxWidth",
    "DescriptCollisionSort",
    "DescriptAnimationSort",
    "DescriptLine",
    "Descript",
    "SurfaceAliasEntry",
    "SurfaceAlias",
    "GestureKind",
    "CursorGesture",
    "Cursor",
    "TooltipEntry",
    "Tooltip",
]
