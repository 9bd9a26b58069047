"""Draw methods used by elements and animation patterns.

Candidate order matters: ``overlayfast`` and ``overlaymultiply`` must be
tried before ``overlay``, which is a prefix of both.
"""

from __future__ import annotations

from typing import Tuple

from seriko.ast.surface import AnimationMethodKind, DrawMethod, DrawMethodOnAnimation

from ..scanner import LineScanner

DRAW_METHODS = (
    ("base", DrawMethod.BASE),
    ("overlayfast", DrawMethod.OVERLAYFAST),
    ("overlaymultiply", DrawMethod.OVERLAYMULTIPLY),
    ("overlay", DrawMethod.OVERLAY),
    ("replace", DrawMethod.REPLACE),
    ("interpolate", DrawMethod.INTERPOLATE),
    ("asis", DrawMethod.ASIS),
    ("move", DrawMethod.MOVE),
    ("bind", DrawMethod.BIND),
    ("add", DrawMethod.ADD),
    ("reduce", DrawMethod.REDUCE),
)

ANIMATION_METHODS = tuple(
    (f"{kind.value},", kind) for kind in AnimationMethodKind
)


def draw_method(scanner: LineScanner) -> DrawMethod:
    return scanner.keyword(DRAW_METHODS)


def draw_method_on_animation(scanner: LineScanner) -> DrawMethodOnAnimation:
    """``insert,N``, ``start,N``, ``stop,N`` or ``<kind>,[ids]``."""
    kind = scanner.keyword(ANIMATION_METHODS)
    if kind.takes_list:
        ids = animation_id_list(scanner)
    else:
        ids = (scanner.digit(),)
    return DrawMethodOnAnimation(kind, ids)


def animation_id_list(scanner: LineScanner) -> Tuple[int, ...]:
    """``[a,b]``, ``[a.b]``, ``(a,b)`` or ``(a.b)``, or a single ``[a]``.

    The separator is uniform inside one list.
    """
    return scanner.first_of(_delimited("[", "]"), _delimited("(", ")"))


def _delimited(opening: str, closing: str):
    def grammar(scanner: LineScanner) -> Tuple[int, ...]:
        scanner.expect(opening)
        ids = scanner.first_of(_joined(","), _joined("."), _single)
        scanner.expect(closing)
        return ids

    return grammar


def _joined(separator: str):
    def grammar(scanner: LineScanner) -> Tuple[int, ...]:
        ids = scanner.separated(LineScanner.digit, separator)
        if len(ids) < 2:
            raise scanner.mismatch(repr(separator))
        return tuple(ids)

    return grammar


def _single(scanner: LineScanner) -> Tuple[int, ...]:
    return (scanner.digit(),)


__all__ = [
    "DRAW_METHODS",
    "ANIMATION_METHODS",
    "draw_method",
    "draw_method_on_animation",
    "animation_id_list",
]
