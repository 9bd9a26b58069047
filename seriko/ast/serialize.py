"""Convert AST nodes to plain JSON-compatible data."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def to_data(node: Any) -> Any:
    """Recursively convert ``node`` to dicts, lists and scalars.

    Every dataclass node becomes a dict tagged with its class name under
    ``"type"``; enums export the tag used in the source text.
    """
    if is_dataclass(node) and not isinstance(node, type):
        data = {"type": type(node).__name__}
        for item in fields(node):
            data[item.name] = to_data(getattr(node, item.name))
        return data
    if isinstance(node, Enum):
        return node.value
    if isinstance(node, (list, tuple)):
        return [to_data(value) for value in node]
    return node


__all__ = ["to_data"]
