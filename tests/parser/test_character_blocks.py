"""Tests for surface.alias, cursor and tooltips blocks."""

import pytest

from seriko import parse
from seriko.ast import (
    Body,
    CharacterId,
    Comment,
    Cursor,
    CursorGesture,
    GestureKind,
    SurfaceAlias,
    SurfaceAliasEntry,
    Tooltip,
    TooltipEntry,
)
from seriko.lang.parser.blocks.cursor import cursor_name
from seriko.lang.parser.lines import SourceLine, match_line
from seriko.lang.parser.scanner import GrammarMismatch


def _block(name: str, body: str):
    document = parse(f"charset,UTF-8\r\n{name}\r\n{{\r\n{body}}}\r\n")
    return document.blocks[0].block


@pytest.mark.parametrize(
    "text, expected",
    [
        ("sakura.cursor", CharacterId.sakura()),
        ("kero.cursor", CharacterId.kero()),
        ("char2.cursor", CharacterId.char(2)),
    ],
)
def test_character_ids(text: str, expected: CharacterId) -> None:
    assert match_line(SourceLine(1, 0, text, "\n"), cursor_name) == expected


def test_unknown_character() -> None:
    with pytest.raises(GrammarMismatch):
        match_line(SourceLine(1, 0, "char.cursor", "\n"), cursor_name)


def test_surface_alias() -> None:
    block = _block("sakura.surface.alias", "照れ,[1,101,201]\r\n照れ,1,101,201\r\nsame,[3,3]\r\n")
    assert block == SurfaceAlias(
        CharacterId.sakura(),
        (
            Body(SurfaceAliasEntry("照れ", (1, 101, 201))),
            Comment("照れ,1,101,201"),
            Body(SurfaceAliasEntry("same", (3, 3))),
        ),
    )


def test_cursor() -> None:
    block = _block(
        "char3.cursor",
        "mouseup0,Head,system:hand\r\n"
        "mouserightdown2,Bust,cursor.ani\r\n"
        "mousehover1,,hover.cur \r\n"
        "Mousehover0,Head,system:hand\r\n",
    )
    assert block == Cursor(
        CharacterId.char(3),
        (
            Body(CursorGesture(GestureKind.MOUSEUP, 0, "Head", "system:hand")),
            Body(CursorGesture(GestureKind.MOUSERIGHTDOWN, 2, "Bust", "cursor.ani")),
            Body(CursorGesture(GestureKind.MOUSEHOVER, 1, "", "hover.cur ")),
            Comment("Mousehover0,Head,system:hand"),
        ),
    )


def test_tooltip_description_is_rest_of_line() -> None:
    block = _block("kero.tooltips", "Head,頭をなでる, そっと\r\nBust,text  \r\nno description\r\n")
    assert block == Tooltip(
        CharacterId.kero(),
        (
            Body(TooltipEntry("Head", "頭をなでる, そっと")),
            Body(TooltipEntry("Bust", "text  ")),
            Comment("no description"),
        ),
    )
