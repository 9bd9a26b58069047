"""Block grammars in the order the document parser tries them."""

from .cursor import CURSOR
from .descript import DESCRIPT
from .surface import SURFACE, SURFACE_APPEND
from .surface_alias import SURFACE_ALIAS
from .tooltip import TOOLTIP

BLOCK_GRAMMARS = (
    DESCRIPT,
    SURFACE,
    SURFACE_APPEND,
    SURFACE_ALIAS,
    CURSOR,
    TOOLTIP,
)

__all__ = [
    "BLOCK_GRAMMARS",
    "CURSOR",
    "DESCRIPT",
    "SURFACE",
    "SURFACE_APPEND",
    "SURFACE_ALIAS",
    "TOOLTIP",
]
