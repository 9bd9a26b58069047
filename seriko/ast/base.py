"""Core AST node definitions shared by every SERIKO block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Comment:
    """A line kept verbatim because no body grammar claimed it.

    Blank lines inside a block become ``Comment("")``.
    """

    text: str


@dataclass(frozen=True)
class Body(Generic[T]):
    """A line recognised by the body grammar of its block."""

    value: T


LineEntry = Union[Comment, Body]


class Charset(Enum):
    """Text encodings a ``charset,<name>`` line may declare."""

    ASCII = "ASCII"
    SHIFT_JIS = "Shift_JIS"
    UTF8 = "UTF-8"
    DEFAULT = "Default"

    @property
    def codec(self) -> str:
        """Python codec used to decode a buffer declared with this charset."""
        if self is Charset.SHIFT_JIS:
            return "cp932"
        return "utf-8"


class CharacterKind(Enum):
    SAKURA = "sakura"
    KERO = "kero"
    CHAR = "char"


@dataclass(frozen=True)
class CharacterId:
    """Target character of an alias/cursor/tooltip block.

    ``number`` is only set for ``char<n>`` targets.
    """

    kind: CharacterKind
    number: Optional[int] = None

    def __str__(self) -> str:
        if self.kind is CharacterKind.CHAR:
            return f"char{self.number}"
        return self.kind.value

    @classmethod
    def sakura(cls) -> "CharacterId":
        return cls(CharacterKind.SAKURA)

    @classmethod
    def kero(cls) -> "CharacterId":
        return cls(CharacterKind.KERO)

    @classmethod
    def char(cls, number: int) -> "CharacterId":
        return cls(CharacterKind.CHAR, number)


__all__ = [
    "Comment",
    "Body",
    "LineEntry",
    "Charset",
    "CharacterKind",
    "CharacterId",
]
