"""AST nodes for ``surface`` and ``surface.append`` blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .base import LineEntry


# ---------------------------------------------------------------------------
# Surface id selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SurfaceIdUnit:
    value: int

    def contains(self, surface_id: int) -> bool:
        return surface_id == self.value


@dataclass(frozen=True)
class SurfaceIdRange:
    """Inclusive range ``start-end``."""

    start: int
    end: int

    def contains(self, surface_id: int) -> bool:
        return self.start <= surface_id <= self.end


@dataclass(frozen=True)
class SurfaceIdNot:
    """Negated selector written ``!n`` or ``!a-b``."""

    target: Union[SurfaceIdUnit, SurfaceIdRange]

    def contains(self, surface_id: int) -> bool:
        return self.target.contains(surface_id)


SurfaceId = Union[SurfaceIdUnit, SurfaceIdRange, SurfaceIdNot]


def selects(ids: Iterable[SurfaceId], surface_id: int) -> bool:
    """Return True when ``surface_id`` is in the effective set of ``ids``.

    The effective set is the union of the plain selectors minus the union of
    the negated ones; the order of the selectors does not matter.
    """
    included = False
    for selector in ids:
        if isinstance(selector, SurfaceIdNot):
            if selector.contains(surface_id):
                return False
        elif selector.contains(surface_id):
            included = True
    return included


# ---------------------------------------------------------------------------
# Draw methods
# ---------------------------------------------------------------------------


class DrawMethod(Enum):
    BASE = "base"
    OVERLAY = "overlay"
    OVERLAYFAST = "overlayfast"
    OVERLAYMULTIPLY = "overlaymultiply"
    REPLACE = "replace"
    INTERPOLATE = "interpolate"
    ASIS = "asis"
    MOVE = "move"
    BIND = "bind"
    ADD = "add"
    REDUCE = "reduce"


class AnimationMethodKind(Enum):
    INSERT = "insert"
    START = "start"
    STOP = "stop"
    ALTERNATIVESTART = "alternativestart"
    ALTERNATIVESTOP = "alternativestop"
    PARALLELSTART = "parallelstart"
    PARALLELSTOP = "parallelstop"

    @property
    def takes_list(self) -> bool:
        return self not in (
            AnimationMethodKind.INSERT,
            AnimationMethodKind.START,
            AnimationMethodKind.STOP,
        )


@dataclass(frozen=True)
class DrawMethodOnAnimation:
    """Pattern entry that controls other animations instead of drawing.

    ``insert``, ``start`` and ``stop`` carry exactly one animation id; the
    alternative/parallel kinds carry the id list as written.
    """

    kind: AnimationMethodKind
    animation_ids: Tuple[int, ...]


# ---------------------------------------------------------------------------
# Animation declarations
# ---------------------------------------------------------------------------


class IntervalKind(Enum):
    SOMETIMES = "sometimes"
    RARELY = "rarely"
    RANDOM = "random"
    PERIODIC = "periodic"
    ALWAYS = "always"
    RUNONCE = "runonce"
    NEVER = "never"
    YEN_E = "yen-e"
    TALK = "talk"
    BIND = "bind"

    @property
    def takes_count(self) -> bool:
        return self in (IntervalKind.RANDOM, IntervalKind.PERIODIC, IntervalKind.TALK)


@dataclass(frozen=True)
class AnimationInterval:
    kind: IntervalKind
    count: Optional[int] = None


@dataclass(frozen=True)
class SurfaceAnimationInterval:
    animation_id: int
    intervals: Tuple[AnimationInterval, ...]


@dataclass(frozen=True)
class AnimationPatternFrame:
    """A drawing frame; ``weight`` is always in the modern unit."""

    method: DrawMethod
    surface_id: int
    weight: int
    x: int
    y: int


AnimationPatternMethod = Union[AnimationPatternFrame, DrawMethodOnAnimation]


@dataclass(frozen=True)
class SurfaceAnimationPattern:
    animation_id: int
    pattern_id: int
    method: AnimationPatternMethod


class AnimationOptionKind(Enum):
    EXCLUSIVE = "exclusive"
    BACKGROUND = "background"
    SHARED_INDEX = "shared-index"


@dataclass(frozen=True)
class AnimationOption:
    """One ``+``-joined option token.

    Only ``exclusive`` tokens carry the trailing ``(id,...)`` list.
    """

    kind: AnimationOptionKind
    animation_ids: Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class SurfaceAnimationOption:
    animation_id: int
    options: Tuple[AnimationOption, ...]


# ---------------------------------------------------------------------------
# Collisions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SurfaceCollision:
    collision_id: int
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    target: str


@dataclass(frozen=True)
class CollisionRect:
    start_x: int
    start_y: int
    end_x: int
    end_y: int


@dataclass(frozen=True)
class CollisionEllipse:
    start_x: int
    start_y: int
    end_x: int
    end_y: int


@dataclass(frozen=True)
class CollisionCircle:
    center_x: int
    center_y: int
    radius: int


@dataclass(frozen=True)
class CollisionPolygon:
    """Flat coordinate list ``x1, y1, x2, y2, ...`` as written."""

    coordinates: Tuple[int, ...]


@dataclass(frozen=True)
class CollisionRegion:
    filename: str
    red: int
    green: int
    blue: int
    flag: Optional[bool] = None


CollisionShape = Union[
    CollisionRect, CollisionEllipse, CollisionCircle, CollisionPolygon, CollisionRegion
]


@dataclass(frozen=True)
class SurfaceCollisionEx:
    collision_id: int
    target: str
    shape: CollisionShape


@dataclass(frozen=True)
class SurfaceAnimationCollision:
    animation_id: int
    collision: SurfaceCollision


@dataclass(frozen=True)
class SurfaceAnimationCollisionEx:
    animation_id: int
    collision: SurfaceCollisionEx


# ---------------------------------------------------------------------------
# Elements and offsets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SurfaceElement:
    element_id: int
    method: DrawMethod
    filename: str
    x: int
    y: int


class OffsetKey(Enum):
    SAKURA_BALLOON_OFFSETX = "sakura.balloon.offsetx"
    SAKURA_BALLOON_OFFSETY = "sakura.balloon.offsety"
    KERO_BALLOON_OFFSETX = "kero.balloon.offsetx"
    KERO_BALLOON_OFFSETY = "kero.balloon.offsety"
    BALLOON_OFFSETX = "balloon.offsetx"
    BALLOON_OFFSETY = "balloon.offsety"
    POINT_CENTERX = "point.centerx"
    POINT_CENTERY = "point.centery"
    POINT_KINOKO_CENTERX = "point.kinoko.centerx"
    POINT_KINOKO_CENTERY = "point.kinoko.centery"
    POINT_BASEPOS_X = "point.basepos.x"
    POINT_BASEPOS_Y = "point.basepos.y"


@dataclass(frozen=True)
class SurfaceOffset:
    key: OffsetKey
    value: int


SurfaceLine = Union[
    SurfaceElement,
    SurfaceAnimationInterval,
    SurfaceAnimationPattern,
    SurfaceAnimationOption,
    SurfaceAnimationCollision,
    SurfaceAnimationCollisionEx,
    SurfaceCollision,
    SurfaceCollisionEx,
    SurfaceOffset,
]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Surface:
    ids: Tuple[SurfaceId, ...]
    lines: Tuple[LineEntry, ...] = ()

    def selects(self, surface_id: int) -> bool:
        return selects(self.ids, surface_id)


@dataclass(frozen=True)
class SurfaceAppend:
    """Overlay applied to previously declared surfaces with matching ids."""

    ids: Tuple[SurfaceId, ...]
    lines: Tuple[LineEntry, ...] = ()

    def selects(self, surface_id: int) -> bool:
        return selects(self.ids, surface_id)


__all__ = [
    "SurfaceIdUnit",
    "SurfaceIdRange",
    "SurfaceIdNot",
    "SurfaceId",
    "selects",
    "DrawMethod",
    "AnimationMethodKind",
    "DrawMethodOnAnimation",
    "IntervalKind",
    "AnimationInterval",
    "SurfaceAnimationInterval",
    "AnimationPatternFrame",
    "AnimationPatternMethod",
    "SurfaceAnimationPattern",
    "AnimationOptionKind",
    "AnimationOption",
    "SurfaceAnimationOption",
    "SurfaceCollision",
    "CollisionRect",
    "CollisionEllipse",
    "CollisionCircle",
    "CollisionPolygon",
    "CollisionRegion",
    "CollisionShape",
    "SurfaceCollisionEx",
    "SurfaceAnimationCollision",
    "SurfaceAnimationCollisionEx",
    "SurfaceElement",
    "OffsetKey",
    "SurfaceOffset",
    "SurfaceLine",
    "Surface",
    "SurfaceAppend",
]
