"""Top-level document node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Type, TypeVar, Union

from .base import Charset, Comment
from .blocks import Cursor, Descript, SurfaceAlias, Tooltip
from .surface import Surface, SurfaceAppend

Block = Union[Descript, Surface, SurfaceAppend, SurfaceAlias, Cursor, Tooltip]

B = TypeVar("B")


@dataclass(frozen=True)
class BlockEntry:
    """A block together with the comment lines written directly above it."""

    header_comments: Tuple[Comment, ...]
    block: Block


@dataclass(frozen=True)
class Document:
    """Parsed ``surfaces.txt``.

    Block order is the order of appearance; ``surface.append`` blocks are
    meant to be applied against the surfaces declared before them.
    """

    header_comments: Tuple[Comment, ...]
    charset: Charset
    blocks: Tuple[BlockEntry, ...] = ()
    footer_comments: Tuple[Comment, ...] = ()

    def iter_blocks(self, kind: Type[B]) -> Iterator[B]:
        """Yield the blocks of one kind in document order."""
        for entry in self.blocks:
            if isinstance(entry.block, kind):
                yield entry.block


__all__ = ["Block", "BlockEntry", "Document"]
