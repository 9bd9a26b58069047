"""Animation declarations inside a surface body.

Interval, pattern and option lines exist in two dialects:

- legacy: ``<id>interval,...``, ``<id>pattern<n>,...``, ``<id>option,...``
- current: ``animation<id>.interval,...`` and so on

Both produce the same nodes. Legacy pattern weights are written in tenths
of the current unit and are multiplied by ten here.
"""

from __future__ import annotations

from typing import Tuple

from seriko.ast.surface import (
    AnimationInterval,
    AnimationOption,
    AnimationOptionKind,
    AnimationPatternFrame,
    AnimationPatternMethod,
    IntervalKind,
    SurfaceAnimationCollision,
    SurfaceAnimationCollisionEx,
    SurfaceAnimationInterval,
    SurfaceAnimationOption,
    SurfaceAnimationPattern,
)

from ..scanner import U32_MAX, LineScanner
from .collision import collision, collision_ex
from .draw_method import draw_method, draw_method_on_animation

LEGACY_WEIGHT_SCALE = 10

INTERVAL_KINDS = tuple((kind.value, kind) for kind in IntervalKind)

OPTION_KINDS = tuple((kind.value, kind) for kind in AnimationOptionKind)


def _animation_prefix(scanner: LineScanner, suffix: str) -> int:
    """``animation<id><suffix>``; returns the id."""
    scanner.expect("animation")
    animation_id = scanner.digit()
    scanner.expect(suffix)
    return animation_id


# ---------------------------------------------------------------------------
# interval
# ---------------------------------------------------------------------------


def interval_spec(scanner: LineScanner) -> AnimationInterval:
    kind = scanner.keyword(INTERVAL_KINDS)
    if kind.takes_count:
        scanner.expect(",")
        return AnimationInterval(kind, scanner.digit())
    return AnimationInterval(kind)


def _interval_specs(scanner: LineScanner) -> Tuple[AnimationInterval, ...]:
    return tuple(scanner.separated(interval_spec, "+"))


def _interval_legacy(scanner: LineScanner) -> SurfaceAnimationInterval:
    animation_id = scanner.digit()
    scanner.expect("interval,")
    return SurfaceAnimationInterval(animation_id, _interval_specs(scanner))


def _interval_current(scanner: LineScanner) -> SurfaceAnimationInterval:
    animation_id = _animation_prefix(scanner, ".interval,")
    return SurfaceAnimationInterval(animation_id, _interval_specs(scanner))


def animation_interval(scanner: LineScanner) -> SurfaceAnimationInterval:
    return scanner.first_of(_interval_legacy, _interval_current)


# ---------------------------------------------------------------------------
# pattern
# ---------------------------------------------------------------------------


def _legacy_frame(scanner: LineScanner) -> AnimationPatternFrame:
    scanner.expect(",")
    surface_id = scanner.digit_neg()
    scanner.expect(",")
    weight = scanner.digit(U32_MAX // LEGACY_WEIGHT_SCALE) * LEGACY_WEIGHT_SCALE
    scanner.expect(",")
    method = draw_method(scanner)
    scanner.expect(",")
    x = scanner.digit_neg()
    scanner.expect(",")
    y = scanner.digit_neg()
    return AnimationPatternFrame(method, surface_id, weight, x, y)


def _legacy_control(scanner: LineScanner) -> AnimationPatternMethod:
    # surface pointer and weight are written but carry no meaning here
    scanner.expect(",")
    scanner.digit_neg()
    scanner.expect(",")
    scanner.digit()
    scanner.expect(",")
    return draw_method_on_animation(scanner)


def _current_frame(scanner: LineScanner) -> AnimationPatternFrame:
    scanner.expect(",")
    method = draw_method(scanner)
    scanner.expect(",")
    surface_id = scanner.digit_neg()
    scanner.expect(",")
    weight = scanner.digit()
    scanner.expect(",")
    x = scanner.digit_neg()
    scanner.expect(",")
    y = scanner.digit_neg()
    return AnimationPatternFrame(method, surface_id, weight, x, y)


def _current_control(scanner: LineScanner) -> AnimationPatternMethod:
    scanner.expect(",")
    return draw_method_on_animation(scanner)


def _pattern_legacy(scanner: LineScanner) -> SurfaceAnimationPattern:
    animation_id = scanner.digit()
    scanner.expect("pattern")
    pattern_id = scanner.digit()
    method = scanner.first_of(_legacy_frame, _legacy_control)
    return SurfaceAnimationPattern(animation_id, pattern_id, method)


def _pattern_current(scanner: LineScanner) -> SurfaceAnimationPattern:
    animation_id = _animation_prefix(scanner, ".pattern")
    pattern_id = scanner.digit()
    method = scanner.first_of(_current_frame, _current_control)
    return SurfaceAnimationPattern(animation_id, pattern_id, method)


def animation_pattern(scanner: LineScanner) -> SurfaceAnimationPattern:
    return scanner.first_of(_pattern_legacy, _pattern_current)


# ---------------------------------------------------------------------------
# option
# ---------------------------------------------------------------------------


def _option_ids(scanner: LineScanner) -> Tuple[int, ...]:
    scanner.expect(",(")
    ids = scanner.separated(LineScanner.digit, ",")
    scanner.expect(")")
    return tuple(ids)


def _option_specs(scanner: LineScanner) -> Tuple[AnimationOption, ...]:
    """``kind(+kind)*`` followed by an optional ``,(id,...)``.

    The id list belongs to every ``exclusive`` token on the line.
    """
    kinds = scanner.separated(lambda s: s.keyword(OPTION_KINDS), "+")
    ids = scanner.optional(_option_ids)
    return tuple(
        AnimationOption(kind, ids if kind is AnimationOptionKind.EXCLUSIVE else None)
        for kind in kinds
    )


def _option_legacy(scanner: LineScanner) -> SurfaceAnimationOption:
    animation_id = scanner.digit()
    scanner.expect("option,")
    return SurfaceAnimationOption(animation_id, _option_specs(scanner))


def _option_current(scanner: LineScanner) -> SurfaceAnimationOption:
    animation_id = _animation_prefix(scanner, ".option,")
    return SurfaceAnimationOption(animation_id, _option_specs(scanner))


def animation_option(scanner: LineScanner) -> SurfaceAnimationOption:
    return scanner.first_of(_option_legacy, _option_current)


# ---------------------------------------------------------------------------
# animation-scoped collisions
# ---------------------------------------------------------------------------


def animation_collision(scanner: LineScanner) -> SurfaceAnimationCollision:
    animation_id = _animation_prefix(scanner, ".")
    return SurfaceAnimationCollision(animation_id, collision(scanner))


def animation_collision_ex(scanner: LineScanner) -> SurfaceAnimationCollisionEx:
    animation_id = _animation_prefix(scanner, ".")
    return SurfaceAnimationCollisionEx(animation_id, collision_ex(scanner))


__all__ = [
    "LEGACY_WEIGHT_SCALE",
    "INTERVAL_KINDS",
    "OPTION_KINDS",
    "interval_spec",
    "animation_interval",
    "animation_pattern",
    "animation_option",
    "animation_collision",
    "animation_collision_ex",
]
