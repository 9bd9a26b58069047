"""Immutable syntax tree produced by the SERIKO parser."""

from .base import Body, CharacterId, CharacterKind, Charset, Comment, LineEntry
from .blocks import (
    Cursor,
    CursorGesture,
    Descript,
    DescriptAnimationSort,
    DescriptCollisionSort,
    DescriptLine,
    DescriptMaxWidth,
    DescriptVersion,
    GestureKind,
    SortOrder,
    SurfaceAlias,
    SurfaceAliasEntry,
    Tooltip,
    TooltipEntry,
)
from .document import Block, BlockEntry, Document
from .serialize import to_data
from .surface import (
    AnimationInterval,
    AnimationMethodKind,
    AnimationOption,
    AnimationOptionKind,
    AnimationPatternFrame,
    AnimationPatternMethod,
    CollisionCircle,
    CollisionEllipse,
    CollisionPolygon,
    CollisionRect,
    CollisionRegion,
    CollisionShape,
    DrawMethod,
    DrawMethodOnAnimation,
    IntervalKind,
    OffsetKey,
    Surface,
    SurfaceAnimationCollision,
    SurfaceAnimationCollisionEx,
    SurfaceAnimationInterval,
    SurfaceAnimationOption,
    SurfaceAnimationPattern,
    SurfaceAppend,
    SurfaceCollision,
    SurfaceCollisionEx,
    SurfaceElement,
    SurfaceId,
    SurfaceIdNot,
    SurfaceIdRange,
    SurfaceIdUnit,
    SurfaceLine,
    SurfaceOffset,
    selects,
)

__all__ = [
    # Lines and shared values
    "Body",
    "Comment",
    "LineEntry",
    "Charset",
    "CharacterId",
    "CharacterKind",
    # Document
    "Block",
    "BlockEntry",
    "Document",
    "to_data",
    # Descript / alias / cursor / tooltip
    "Descript",
    "DescriptLine",
    "DescriptVersion",
    "DescriptMaxWidth",
    "DescriptCollisionSort",
    "DescriptAnimationSort",
    "SortOrder",
    "SurfaceAlias",
    "SurfaceAliasEntry",
    "Cursor",
    "CursorGesture",
    "GestureKind",
    "Tooltip",
    "TooltipEntry",
    # Surfaces
    "Surface",
    "SurfaceAppend",
    "SurfaceId",
    "SurfaceIdUnit",
    "SurfaceIdRange",
    "SurfaceIdNot",
    "selects",
    "SurfaceLine",
    "SurfaceElement",
    "DrawMethod",
    "DrawMethodOnAnimation",
    "AnimationMethodKind",
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
    "SurfaceCollisionEx",
    "SurfaceAnimationCollision",
    "SurfaceAnimationCollisionEx",
    "CollisionShape",
    "CollisionRect",
    "CollisionEllipse",
    "CollisionCircle",
    "CollisionPolygon",
    "CollisionRegion",
    "OffsetKey",
    "SurfaceOffset",
]
