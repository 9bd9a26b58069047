"""Hit-test regions: ``collision`` and ``collisionex``."""

from __future__ import annotations

from seriko.ast.surface import (
    CollisionCircle,
    CollisionEllipse,
    CollisionPolygon,
    CollisionRect,
    CollisionRegion,
    CollisionShape,
    SurfaceCollision,
    SurfaceCollisionEx,
)

from ..scanner import U8_MAX, LineScanner


def _coordinate(scanner: LineScanner) -> int:
    scanner.expect(",")
    return scanner.digit_neg()


def collision(scanner: LineScanner) -> SurfaceCollision:
    """``collision<id>,<sx>,<sy>,<ex>,<ey>,<target>``.

    The target name may not contain commas or spaces.
    """
    scanner.expect("collision")
    collision_id = scanner.digit()
    start_x = _coordinate(scanner)
    start_y = _coordinate(scanner)
    end_x = _coordinate(scanner)
    end_y = _coordinate(scanner)
    scanner.expect(",")
    target = scanner.take_except(", ")
    return SurfaceCollision(collision_id, start_x, start_y, end_x, end_y, target)


def collision_ex(scanner: LineScanner) -> SurfaceCollisionEx:
    """``collisionex<id>,<target>,<shape>``."""
    scanner.expect("collisionex")
    collision_id = scanner.digit()
    scanner.expect(",")
    target = scanner.take_except(",")
    scanner.expect(",")
    shape = collision_shape(scanner)
    return SurfaceCollisionEx(collision_id, target, shape)


def collision_shape(scanner: LineScanner) -> CollisionShape:
    return scanner.first_of(_rect, _ellipse, _circle, _polygon, _region)


def _rect(scanner: LineScanner) -> CollisionRect:
    scanner.expect("rect")
    return CollisionRect(*(_coordinate(scanner) for _ in range(4)))


def _ellipse(scanner: LineScanner) -> CollisionEllipse:
    scanner.expect("ellipse")
    return CollisionEllipse(*(_coordinate(scanner) for _ in range(4)))


def _circle(scanner: LineScanner) -> CollisionCircle:
    scanner.expect("circle")
    return CollisionCircle(*(_coordinate(scanner) for _ in range(3)))


def _polygon(scanner: LineScanner) -> CollisionPolygon:
    # no parity check: an odd number of values is kept as written
    scanner.expect("polygon")
    return CollisionPolygon(tuple(scanner.repeated(_coordinate)))


def _channel(scanner: LineScanner) -> int:
    scanner.expect(",")
    return scanner.digit(U8_MAX)


def _flag(scanner: LineScanner) -> bool:
    scanner.expect(",")
    return scanner.boolean()


def _region(scanner: LineScanner) -> CollisionRegion:
    scanner.expect("region")
    scanner.expect(",")
    filename = scanner.take_except(",")
    red = _channel(scanner)
    green = _channel(scanner)
    blue = _channel(scanner)
    flag = scanner.optional(_flag)
    return CollisionRegion(filename, red, green, blue, flag)


__all__ = ["collision", "collision_ex", "collision_shape"]
