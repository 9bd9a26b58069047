"""``element<id>,<method>,<filename>,<x>,<y>``."""

from __future__ import annotations

from seriko.ast.surface import SurfaceElement

from ..scanner import LineScanner
from .draw_method import draw_method


def element(scanner: LineScanner) -> SurfaceElement:
    scanner.expect("element")
    element_id = scanner.digit()
    scanner.expect(",")
    method = draw_method(scanner)
    scanner.expect(",")
    filename = scanner.take_except(",")
    scanner.expect(",")
    x = scanner.digit_neg()
    scanner.expect(",")
    y = scanner.digit_neg()
    return SurfaceElement(element_id, method, filename, x, y)


__all__ = ["element"]
