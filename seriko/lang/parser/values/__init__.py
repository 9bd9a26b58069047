"""Value grammars used inside block bodies."""

from .animation import (
    animation_collision,
    animation_collision_ex,
    animation_interval,
    animation_option,
    animation_pattern,
)
from .collision import collision, collision_ex
from .common import character_id, gesture_kind
from .draw_method import animation_id_list, draw_method, draw_method_on_animation
from .element import element
from .offset import offset

__all__ = [
    "animation_collision",
    "animation_collision_ex",
    "animation_interval",
    "animation_option",
    "animation_pattern",
    "animation_id_list",
    "character_id",
    "collision",
    "collision_ex",
    "draw_method",
    "draw_method_on_animation",
    "element",
    "gesture_kind",
    "offset",
]
