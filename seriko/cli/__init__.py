"""
Command-line interface for the SERIKO parser.

Commands:
    - seriko check FILE...: parse files and report success or the first error
    - seriko inspect FILE: render a parsed document as a tree, table or JSON
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from seriko import __version__
from seriko.config import SerikoSettings, load_settings
from seriko.errors import SerikoError
from seriko.loader import load_surfaces

from .output import print_document

console = Console()
error_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Send ``seriko`` log records to stderr at ``level``."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger("seriko")
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    package_logger.propagate = False


def _settings(ctx: click.Context, **overrides) -> SerikoSettings:
    config_path = ctx.obj.get("config_path") if ctx.obj else None
    try:
        settings = load_settings(
            config_path,
            log_level=ctx.obj.get("log_level") if ctx.obj else None,
            **overrides,
        )
    except (OSError, ValueError) as exc:
        raise click.UsageError(f"Invalid configuration: {exc}") from exc
    configure_logging(settings.log_level)
    return settings


@click.group(name="seriko")
@click.version_option(__version__, prog_name="seriko")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML file with a [tool.seriko] table",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level (default: SERIKO_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """Parse and inspect SERIKO surfaces.txt files."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def check(ctx: click.Context, files) -> None:
    """Parse FILES and report whether each one is valid."""
    _settings(ctx)
    failures = 0
    for path in files:
        try:
            document = load_surfaces(path)
        except SerikoError as exc:
            failures += 1
            error_console.print(f"[red]✗ {escape(str(path))}[/red]", soft_wrap=True)
            error_console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
            continue
        console.print(
            f"[green]✓[/green] {escape(str(path))}: OK "
            f"({document.charset.value}, {len(document.blocks)} blocks)",
            highlight=False,
            soft_wrap=True,
        )
    if failures:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "json", "summary"], case_sensitive=False),
    help="Output format (default: tree)",
)
@click.option("--show-comments/--hide-comments", default=None, help="Include comment lines")
@click.pass_context
def inspect(
    ctx: click.Context,
    file: Path,
    output_format: Optional[str],
    show_comments: Optional[bool],
) -> None:
    """Render the parsed structure of FILE."""
    settings = _settings(ctx, output_format=output_format, show_comments=show_comments)
    try:
        document = load_surfaces(file)
    except SerikoError as exc:
        error_console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)

    print_document(
        console,
        document,
        str(file),
        output_format=settings.output_format,
        show_comments=settings.show_comments,
    )


def main(argv: Optional[list] = None) -> None:
    """Console-script entry point."""
    cli.main(args=argv, prog_name="seriko")


__all__ = ["cli", "check", "inspect", "configure_logging", "main"]
