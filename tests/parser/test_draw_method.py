"""Tests for draw methods and animation control methods."""

import pytest

from seriko.ast import AnimationMethodKind, DrawMethod, DrawMethodOnAnimation
from seriko.lang.parser.scanner import GrammarMismatch, LineScanner
from seriko.lang.parser.values.draw_method import (
    animation_id_list,
    draw_method,
    draw_method_on_animation,
)


@pytest.mark.parametrize("method", list(DrawMethod))
def test_every_draw_method_tag(method: DrawMethod) -> None:
    scanner = LineScanner(method.value)
    assert draw_method(scanner) is method
    assert scanner.at_end


def test_overlay_prefix_does_not_shadow_longer_tags() -> None:
    assert draw_method(LineScanner("overlayfast")) is DrawMethod.OVERLAYFAST
    assert draw_method(LineScanner("overlaymultiply")) is DrawMethod.OVERLAYMULTIPLY
    assert draw_method(LineScanner("overlay,")) is DrawMethod.OVERLAY


def test_unknown_draw_method() -> None:
    with pytest.raises(GrammarMismatch):
        draw_method(LineScanner("Overlay"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("insert,5", DrawMethodOnAnimation(AnimationMethodKind.INSERT, (5,))),
        ("start,1", DrawMethodOnAnimation(AnimationMethodKind.START, (1,))),
        ("stop,2", DrawMethodOnAnimation(AnimationMethodKind.STOP, (2,))),
        (
            "alternativestart,[10,20,30]",
            DrawMethodOnAnimation(AnimationMethodKind.ALTERNATIVESTART, (10, 20, 30)),
        ),
        (
            "alternativestop,(10.20.30)",
            DrawMethodOnAnimation(AnimationMethodKind.ALTERNATIVESTOP, (10, 20, 30)),
        ),
        (
            "parallelstart,(1,2)",
            DrawMethodOnAnimation(AnimationMethodKind.PARALLELSTART, (1, 2)),
        ),
        (
            "parallelstop,[7]",
            DrawMethodOnAnimation(AnimationMethodKind.PARALLELSTOP, (7,)),
        ),
    ],
)
def test_draw_method_on_animation(text: str, expected: DrawMethodOnAnimation) -> None:
    scanner = LineScanner(text)
    assert draw_method_on_animation(scanner) == expected
    assert scanner.at_end


def test_id_list_stops_after_closing_bracket() -> None:
    scanner = LineScanner("[10]a")
    assert animation_id_list(scanner) == (10,)
    assert scanner.rest == "a"


@pytest.mark.parametrize("text", ["{10}", "[1,2.3]", "[1,2)", "[]"])
def test_malformed_id_lists(text: str) -> None:
    with pytest.raises(GrammarMismatch):
        animation_id_list(LineScanner(text))


def test_list_methods_require_a_list() -> None:
    with pytest.raises(GrammarMismatch):
        draw_method_on_animation(LineScanner("alternativestart,"))


def test_single_id_methods_take_no_list() -> None:
    with pytest.raises(GrammarMismatch):
        draw_method_on_animation(LineScanner("start,[1]"))
