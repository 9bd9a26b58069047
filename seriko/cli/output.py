"""Rich renderers for parsed documents."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from seriko.ast import (
    AnimationPatternFrame,
    Block,
    Body,
    Comment,
    Cursor,
    CursorGesture,
    Descript,
    Document,
    DrawMethodOnAnimation,
    LineEntry,
    Surface,
    SurfaceAlias,
    SurfaceAliasEntry,
    SurfaceAnimationPattern,
    SurfaceAppend,
    SurfaceElement,
    SurfaceId,
    SurfaceIdNot,
    SurfaceIdRange,
    Tooltip,
    TooltipEntry,
    to_data,
)


def format_surface_ids(ids: Iterable[SurfaceId]) -> str:
    """Write selectors back in ``1-3,!25-30`` form."""
    parts = []
    for selector in ids:
        prefix = ""
        if isinstance(selector, SurfaceIdNot):
            prefix = "!"
            selector = selector.target
        if isinstance(selector, SurfaceIdRange):
            parts.append(f"{prefix}{selector.start}-{selector.end}")
        else:
            parts.append(f"{prefix}{selector.value}")
    return ",".join(parts)


def block_title(block: Block) -> str:
    if isinstance(block, Descript):
        return "descript"
    if isinstance(block, Surface):
        return f"surface{format_surface_ids(block.ids)}"
    if isinstance(block, SurfaceAppend):
        return f"surface.append{format_surface_ids(block.ids)}"
    if isinstance(block, SurfaceAlias):
        return f"{block.character}.surface.alias"
    if isinstance(block, Cursor):
        return f"{block.character}.cursor"
    if isinstance(block, Tooltip):
        return f"{block.character}.tooltips"
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def describe_value(value: object) -> str:
    """One-line description of a body value."""
    if isinstance(value, SurfaceElement):
        return (
            f"element {value.element_id}: {value.method.value} "
            f"{value.filename} at ({value.x}, {value.y})"
        )
    if isinstance(value, SurfaceAnimationPattern):
        method = value.method
        if isinstance(method, AnimationPatternFrame):
            detail = (
                f"{method.method.value} surface {method.surface_id} "
                f"wait {method.weight} at ({method.x}, {method.y})"
            )
        else:
            detail = _describe_control(method)
        return f"animation {value.animation_id} pattern {value.pattern_id}: {detail}"
    if isinstance(value, SurfaceAliasEntry):
        return f"{value.name} -> {list(value.surface_ids)}"
    if isinstance(value, CursorGesture):
        return f"{value.kind.value}{value.gesture_id}: {value.target or '*'} -> {value.filename}"
    if isinstance(value, TooltipEntry):
        return f"{value.target}: {value.description}"

    data = to_data(value)
    kind = data.pop("type")
    fields = ", ".join(f"{key}={item}" for key, item in data.items())
    return f"{kind}({fields})"


def _describe_control(method: DrawMethodOnAnimation) -> str:
    ids = ",".join(str(item) for item in method.animation_ids)
    return f"{method.kind.value} [{ids}]"


def _line_label(entry: LineEntry) -> str:
    if isinstance(entry, Body):
        return escape(describe_value(entry.value))
    return f"[dim]# {escape(entry.text)}[/dim]"


def _visible(lines: Iterable[LineEntry], show_comments: bool) -> List[LineEntry]:
    return [entry for entry in lines if show_comments or not isinstance(entry, Comment)]


def count_lines(lines: Iterable[LineEntry]) -> Tuple[int, int]:
    """Return ``(body, comment)`` counts."""
    body = comments = 0
    for entry in lines:
        if isinstance(entry, Body):
            body += 1
        else:
            comments += 1
    return body, comments


def render_tree(document: Document, title: str, *, show_comments: bool = False) -> Tree:
    tree = Tree(f"[bold blue]{escape(title)}[/bold blue] [green]({document.charset.value})[/green]")
    if show_comments:
        for comment in document.header_comments:
            tree.add(_line_label(comment))
    for entry in document.blocks:
        if show_comments:
            for comment in entry.header_comments:
                tree.add(_line_label(comment))
        node = tree.add(f"[cyan]{escape(block_title(entry.block))}[/cyan]")
        for line in _visible(entry.block.lines, show_comments):
            node.add(_line_label(line))
    if show_comments:
        for comment in document.footer_comments:
            tree.add(_line_label(comment))
    return tree


def render_summary(document: Document, title: str) -> Table:
    table = Table(title=f"{title} ({len(document.blocks)} blocks, {document.charset.value})")
    table.add_column("#", justify="right")
    table.add_column("Block", style="bold blue")
    table.add_column("Body lines", justify="right", style="green")
    table.add_column("Comments", justify="right", style="dim")
    for index, entry in enumerate(document.blocks, start=1):
        body, comments = count_lines(entry.block.lines)
        table.add_row(
            str(index),
            escape(block_title(entry.block)),
            str(body),
            str(comments + len(entry.header_comments)),
        )
    return table


def print_document(
    console: Console,
    document: Document,
    title: str,
    *,
    output_format: str = "tree",
    show_comments: bool = False,
) -> None:
    if output_format == "json":
        console.print_json(data=to_data(document))
    elif output_format == "summary":
        console.print(render_summary(document, title))
    else:
        console.print(render_tree(document, title, show_comments=show_comments))


__all__ = [
    "block_title",
    "count_lines",
    "describe_value",
    "format_surface_ids",
    "print_document",
    "render_summary",
    "render_tree",
]
