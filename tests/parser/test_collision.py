"""Tests for collision and collisionex lines."""

import pytest

from seriko.ast import (
    CollisionCircle,
    CollisionEllipse,
    CollisionPolygon,
    CollisionRect,
    CollisionRegion,
    Comment,
    SurfaceCollision,
    SurfaceCollisionEx,
)
from seriko.lang.parser.blocks.surface import surface_line
from seriko.lang.parser.lines import SourceLine, classify_line
from seriko.lang.parser.scanner import GrammarMismatch, LineScanner
from seriko.lang.parser.values.collision import collision, collision_ex


def parse_value(grammar, text: str):
    scanner = LineScanner(text)
    value = grammar(scanner)
    assert scanner.at_end, scanner.rest
    return value


def test_collision() -> None:
    assert parse_value(collision, "collision0,10,20,-30,40,Head") == SurfaceCollision(
        0, 10, 20, -30, 40, "Head"
    )


def test_collision_target_stops_at_space() -> None:
    line = SourceLine(1, 0, "collision0,1,2,3,4,Bust Top", "\n")
    assert classify_line(line, surface_line) == Comment("collision0,1,2,3,4,Bust Top")


@pytest.mark.parametrize(
    "text, shape",
    [
        ("rect,100,100,200,300", CollisionRect(100, 100, 200, 300)),
        ("ellipse,-5,0,50,60", CollisionEllipse(-5, 0, 50, 60)),
        ("circle,100,200,20", CollisionCircle(100, 200, 20)),
        (
            "polygon,100,100,200,300,50,200",
            CollisionPolygon((100, 100, 200, 300, 50, 200)),
        ),
        ("polygon,1,2,3", CollisionPolygon((1, 2, 3))),
        ("region,atari.png,0,255,0,true", CollisionRegion("atari.png", 0, 255, 0, True)),
        ("region,atari.png,0,255,0,false", CollisionRegion("atari.png", 0, 255, 0, False)),
        ("region,atari.png,10,20,30", CollisionRegion("atari.png", 10, 20, 30)),
    ],
)
def test_collision_ex_shapes(text: str, shape) -> None:
    result = parse_value(collision_ex, f"collisionex0,Head,{text}")
    assert result == SurfaceCollisionEx(0, "Head", shape)


@pytest.mark.parametrize(
    "text",
    [
        "collisionex2,Hand,polygon,",
        "collisionex3,Skirt,region,atari.png,0,256,0",
        "collisionex0,Head,square,1,2,3,4",
        "collisionex0,,rect,1,2,3,4",
        "collisionex0,Head,rect,1,2,3",
    ],
)
def test_collision_ex_malformed(text: str) -> None:
    with pytest.raises(GrammarMismatch):
        collision_ex(LineScanner(text))
